"""Map request paths onto files under the static root."""

import os
import posixpath
from pathlib import Path

from mdserver.errors import AccessDenied

MARKDOWN_SUFFIX = ".md"


def is_markdown_path(request_path: str) -> bool:
    """True when the request path names a Markdown document."""
    return request_path.lower().endswith(MARKDOWN_SUFFIX)


def resolve_request_path(static_root: Path, request_path: str) -> Path:
    """Resolve ``request_path`` to an absolute path strictly inside ``static_root``.

    The check is lexical: ``.`` and ``..`` segments are collapsed before and
    after joining, and containment is decided component by component so a
    sibling such as ``/public-evil`` never passes for ``/public``. Nothing
    is read from disk.

    Raises:
        AccessDenied: the normalized path is not a descendant of the root.
    """
    if "\x00" in request_path:
        raise AccessDenied(request_path)

    root = Path(os.path.normpath(os.path.abspath(static_root)))
    relative = posixpath.normpath(request_path.lstrip("/"))
    candidate = Path(os.path.normpath(os.path.join(root, relative)))

    if candidate == root or not candidate.is_relative_to(root):
        raise AccessDenied(request_path)
    return candidate
