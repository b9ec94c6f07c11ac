"""Wrap rendered Markdown in the page template."""

import re

from mdserver.render import RenderedDocument
from mdserver.template import CONTENT_PLACEHOLDER, TITLE_PLACEHOLDER, PageTemplate

_PLACEHOLDERS = re.compile(
    "|".join(re.escape(token) for token in (TITLE_PLACEHOLDER, CONTENT_PLACEHOLDER))
)


def _substitute_first(text: str, values: dict[str, str]) -> str:
    """Replace the first occurrence of each token in ``text``.

    Done in one pass over ``text`` so substituted values are never scanned
    for placeholders themselves.
    """
    seen = set()

    def replace(match: re.Match) -> str:
        token = match.group(0)
        if token in seen:
            return token
        seen.add(token)
        return values[token]

    return _PLACEHOLDERS.sub(replace, text)


def compose_page(document: RenderedDocument, template: PageTemplate) -> str:
    """Final response body for a rendered document."""
    if not template.loaded:
        return document.html
    return _substitute_first(
        template.content,
        {
            TITLE_PLACEHOLDER: document.title,
            CONTENT_PLACEHOLDER: document.html,
        },
    )
