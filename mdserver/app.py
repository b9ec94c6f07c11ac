"""Flask application: Markdown rendering in front of a static file server."""

from flask import Flask

from mdserver.config import Settings
from mdserver.middleware import ROOT_INDEX_HTML, MarkdownMiddleware
from mdserver.template import PageTemplate


def create_app(settings: Settings | None = None) -> Flask:
    """Build the application for ``settings`` (read from the environment if omitted).

    The page template is loaded here, once, before any request is served.
    """
    if settings is None:
        settings = Settings.from_env()

    template = PageTemplate.load(settings.template_path)

    # static route at "/<path:filename>" is the pass-through for non-Markdown files
    app = Flask(
        __name__,
        static_folder=str(settings.static_root),
        static_url_path="",
    )
    app.config["MDSERVER"] = settings

    middleware = MarkdownMiddleware(settings, template)
    app.before_request(middleware)
    app.extensions["mdserver"] = middleware

    # ── Routes ────────────────────────────────────────────────────

    @app.route("/")
    def index():
        # reached only when index.html exists; otherwise the middleware answers
        return app.send_static_file(ROOT_INDEX_HTML)

    return app
