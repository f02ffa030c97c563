"""Utility helpers for path handling."""

from __future__ import annotations

from pathlib import Path
from typing import List

MARKDOWN_SUFFIX = ".md"


def output_name(filename: str) -> str:
    """Strip the Markdown extension to get the published page name."""
    if filename.endswith(MARKDOWN_SUFFIX):
        return filename[: -len(MARKDOWN_SUFFIX)]
    return filename


def list_sources(directory: Path) -> List[Path]:
    """Return the files of a content directory in a stable order."""
    return sorted(path for path in directory.iterdir() if path.is_file())
