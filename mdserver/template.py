"""Optional page template, loaded once at startup."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

logger = logging.getLogger(__name__)

TITLE_PLACEHOLDER = "{{title}}"
CONTENT_PLACEHOLDER = "{{content}}"


@dataclass(frozen=True)
class PageTemplate:
    """Template text and whether it was found.

    Built once before the server accepts connections and never mutated, so
    every request sees either the not-loaded default or the full template.
    """

    loaded: bool = False
    content: str = ""

    NOT_LOADED: ClassVar["PageTemplate"]

    @classmethod
    def load(cls, path: Path) -> "PageTemplate":
        """Read the template at ``path``; a missing file disables templating."""
        try:
            # newline="" keeps the template's line endings byte for byte
            with open(path, encoding="utf-8", newline="") as f:
                content = f.read()
        except FileNotFoundError:
            logger.info("No template found at %s", path)
            return cls.NOT_LOADED
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read template at %s: %s", path, exc)
            return cls.NOT_LOADED
        logger.info("Template loaded from %s", path)
        return cls(loaded=True, content=content)


PageTemplate.NOT_LOADED = PageTemplate()
