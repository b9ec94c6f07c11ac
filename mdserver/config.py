"""Process configuration, read once from the environment at startup."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from mdserver.errors import ConfigError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_STATIC_ROOT = "public"
DEFAULT_TEMPLATE_NAME = "template.html"
DEFAULT_MAX_FILE_SIZE = 1024 * 1024  # 1 MiB
DEFAULT_LOG_LEVEL = "INFO"


def _int_setting(environ: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Immutable server settings shared by every request."""

    static_root: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    template_name: str = DEFAULT_TEMPLATE_NAME
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        # normalized absolute root; containment checks compare against it
        root = Path(os.path.normpath(os.path.abspath(self.static_root)))
        object.__setattr__(self, "static_root", root)

    @property
    def template_path(self) -> Path:
        return self.static_root / self.template_name

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``MDSERVER_*`` environment variables."""
        if environ is None:
            environ = os.environ

        port = _int_setting(environ, "MDSERVER_PORT", DEFAULT_PORT, minimum=0)
        if port > 65535:
            raise ConfigError(f"MDSERVER_PORT must be <= 65535, got {port}")

        return cls(
            static_root=Path(environ.get("MDSERVER_STATIC_ROOT") or DEFAULT_STATIC_ROOT),
            host=environ.get("MDSERVER_HOST") or DEFAULT_HOST,
            port=port,
            template_name=environ.get("MDSERVER_TEMPLATE") or DEFAULT_TEMPLATE_NAME,
            max_file_size=_int_setting(
                environ, "MDSERVER_MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE, minimum=0
            ),
            log_level=(environ.get("MDSERVER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
