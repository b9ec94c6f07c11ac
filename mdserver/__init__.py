"""mdserver — serve a directory over HTTP, rendering Markdown on the fly."""

from mdserver.app import create_app

__version__ = "1.0.0"

__all__ = ["create_app", "__version__"]
