"""Process entry point: ``python -m mdserver`` or the ``mdserver`` script."""

import logging

from mdserver.app import create_app
from mdserver.config import Settings

logger = logging.getLogger("mdserver")


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    app = create_app(settings)
    logger.info("Serving %s", settings.static_root)
    logger.info("Server running at http://%s:%d/", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
