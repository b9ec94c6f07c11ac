"""Markdown rendering with front-matter metadata."""

import enum
import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath

import markdown
from markdown.extensions.codehilite import CodeHiliteExtension
from markdown.extensions.fenced_code import FencedCodeExtension
from markdown.extensions.tables import TableExtension
from markdown.extensions.toc import TocExtension

FRONT_MATTER_MARKER = "---"

# key must be a single word directly followed by the colon
_METADATA_LINE = re.compile(r"^(\w+):(.*)$")


def _extensions() -> list:
    # fresh instances per render; extensions keep per-document state
    return [
        FencedCodeExtension(),
        CodeHiliteExtension(css_class="highlight", guess_lang=False),
        TableExtension(),
        TocExtension(),
    ]


# ── Front-matter ──────────────────────────────────────────────────


class FrontMatterKind(enum.Enum):
    ABSENT = "absent"
    WELL_FORMED = "well-formed"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class FrontMatter:
    kind: FrontMatterKind
    body: str
    metadata: dict[str, str] = field(default_factory=dict)


def _is_marker(line: str) -> bool:
    return line.rstrip() == FRONT_MATTER_MARKER


def parse_front_matter(text: str) -> FrontMatter:
    """Split a leading ``---`` delimited metadata block off ``text``.

    Lines inside the block are ``key: value`` pairs. Values are stripped;
    a value made only of whitespace is kept as a single space, an empty
    value is dropped. The first occurrence of a key wins. Lines that are
    not ``key: value`` are ignored and mark the block malformed. An opening
    marker with no closing marker leaves the whole text as the body.
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    lines = text.splitlines(keepends=True)
    if not lines or not _is_marker(lines[0]):
        return FrontMatter(FrontMatterKind.ABSENT, text)

    try:
        end = next(i for i in range(1, len(lines)) if _is_marker(lines[i]))
    except StopIteration:
        return FrontMatter(FrontMatterKind.MALFORMED, text)

    metadata: dict[str, str] = {}
    kind = FrontMatterKind.WELL_FORMED
    for line in lines[1:end]:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        match = _METADATA_LINE.match(line)
        if match is None:
            kind = FrontMatterKind.MALFORMED
            continue
        key, raw = match.groups()
        if raw == "":
            continue
        value = raw.strip() or " "
        metadata.setdefault(key, value)

    return FrontMatter(kind, "".join(lines[end + 1 :]), metadata)


# ── Rendering ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class RenderedDocument:
    html: str
    title: str


def default_title(source_name: str) -> str:
    """Title used when the document declares none: the file's base name."""
    return PurePosixPath(source_name.replace("\\", "/")).name or source_name


def render_markdown(text: str, source_name: str) -> RenderedDocument:
    """Convert Markdown ``text`` into an HTML fragment and a title."""
    front_matter = parse_front_matter(text)
    md = markdown.Markdown(extensions=_extensions())
    html = md.convert(front_matter.body)
    title = front_matter.metadata.get("title") or default_title(source_name)
    return RenderedDocument(html=html, title=title)
