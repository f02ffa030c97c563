"""Markdown rendering with the extension set used for site content."""

from __future__ import annotations

import logging

import markdown as md

logger = logging.getLogger("sorg")

EXTENSIONS = [
    "toc",
    "fenced_code",
    "tables",
    "smarty",
    "pymdownx.betterem",
    "pymdownx.magiclink",
    "pymdownx.tilde",
    "pymdownx.smartsymbols",
]

EXTENSION_CONFIGS = {
    # Only the heading ids are wanted; the generated TOC itself is discarded.
    "toc": {"permalink": False},
    "smarty": {"smart_dashes": True, "smart_quotes": True, "smart_ellipses": True},
    "pymdownx.betterem": {"smart_enable": "all"},
    "pymdownx.tilde": {"subscript": False, "smart_delete": True},
    "pymdownx.smartsymbols": {
        "fractions": True,
        "trademark": False,
        "copyright": False,
        "registered": False,
        "care_of": False,
        "plusminus": False,
        "arrows": False,
        "notequal": False,
        "ordinal_numbers": False,
    },
}


def create_converter() -> md.Markdown:
    return md.Markdown(
        extensions=EXTENSIONS,
        extension_configs=EXTENSION_CONFIGS,
        output_format="xhtml",
    )


def render_markdown(source: str) -> str:
    """Convert a Markdown body into XHTML-compatible markup."""
    html = create_converter().convert(source)
    logger.debug("Rendered %d chars of Markdown into %d chars of HTML", len(source), len(html))
    return html
