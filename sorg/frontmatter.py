"""Splitting of YAML frontmatter from Markdown documents."""

from __future__ import annotations

import re
from typing import Tuple

from .errors import FrontmatterError

DELIMITER_PATTERN = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)


def split_frontmatter(text: str) -> Tuple[str, str]:
    """Return ``(frontmatter, body)`` for a document.

    Only the first two ``---`` lines act as delimiters; later ones belong to
    the body. Any non-blank text ahead of the first delimiter is an error.
    """
    parts = DELIMITER_PATTERN.split(text, maxsplit=2)

    if len(parts) > 1 and parts[0].strip():
        raise FrontmatterError()
    if len(parts) == 2:
        return "", parts[1].strip()
    if len(parts) == 3:
        return parts[1].strip(), parts[2].strip()
    return "", parts[0].strip()
