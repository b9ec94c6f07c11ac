"""Exceptions raised inside mdserver."""


class MdServerError(Exception):
    """Base class for mdserver errors."""


class AccessDenied(MdServerError):
    """A request path resolves outside the static root."""

    def __init__(self, request_path: str) -> None:
        self.request_path = request_path
        super().__init__(f"access denied: {request_path!r}")


class ConfigError(MdServerError, ValueError):
    """Invalid configuration value."""
