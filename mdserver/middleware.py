"""Request hook that renders ``.md`` paths and passes everything else on."""

import logging
from pathlib import Path

from flask import Response, render_template, request

from mdserver.compose import compose_page
from mdserver.config import Settings
from mdserver.errors import AccessDenied
from mdserver.paths import is_markdown_path, resolve_request_path
from mdserver.render import render_markdown
from mdserver.template import PageTemplate

logger = logging.getLogger(__name__)

ROOT_PATH = "/"
ROOT_INDEX = "/index.md"
ROOT_INDEX_HTML = "index.html"
HANDLED_METHODS = frozenset({"GET", "HEAD"})

HTML_MIMETYPE = "text/html"
TEXT_MIMETYPE = "text/plain"


class FileTooLarge(Exception):
    """File grew past the size limit between stat and read."""


def _error(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype=TEXT_MIMETYPE)


class MarkdownMiddleware:
    """Render Markdown documents under the static root.

    Registered as a Flask ``before_request`` hook: returning ``None`` hands
    the request to the static route, returning a response ends it. Holds
    only immutable state, so one instance serves all requests concurrently.
    """

    def __init__(self, settings: Settings, template: PageTemplate) -> None:
        self.settings = settings
        self.template = template

    def __call__(self) -> Response | None:
        return self.handle(request.path, request.method)

    def handle(self, request_path: str, method: str = "GET") -> Response | None:
        if method not in HANDLED_METHODS:
            return None

        if request_path == ROOT_PATH:
            if (self.settings.static_root / ROOT_INDEX_HTML).is_file():
                return None
            request_path = ROOT_INDEX

        if not is_markdown_path(request_path):
            return None

        try:
            file_path = resolve_request_path(self.settings.static_root, request_path)
        except AccessDenied:
            logger.warning("Access denied: %r", request_path)
            return _error("Access denied", 403)

        try:
            size = file_path.stat().st_size
        except FileNotFoundError:
            if request_path == ROOT_INDEX:
                return self._welcome()
            logger.info("File not found: %s", file_path)
            return _error("File not found", 404)
        except OSError:
            logger.exception("Error reading file: %s", file_path)
            return _error("Internal server error", 500)

        if size > self.settings.max_file_size:
            logger.warning(
                "File too large: %s (%d bytes, limit %d)",
                file_path,
                size,
                self.settings.max_file_size,
            )
            return _error("File too large", 413)

        try:
            text = self._read_document(file_path)
        except FileTooLarge:
            logger.warning("File too large: %s (grew after stat)", file_path)
            return _error("File too large", 413)
        except OSError:
            logger.exception("Error reading file: %s", file_path)
            return _error("Internal server error", 500)

        document = render_markdown(text, file_path.name)
        return Response(compose_page(document, self.template), mimetype=HTML_MIMETYPE)

    def _read_document(self, file_path: Path) -> str:
        """Read at most ``max_file_size`` bytes of ``file_path`` as UTF-8."""
        limit = self.settings.max_file_size
        with file_path.open("rb") as f:
            data = f.read(limit + 1)
        if len(data) > limit:
            raise FileTooLarge(str(file_path))
        return data.decode("utf-8", errors="replace")

    def _welcome(self) -> Response:
        logger.info("No %s, serving welcome page", ROOT_INDEX)
        return Response(render_template("welcome.html"), mimetype=HTML_MIMETYPE)
