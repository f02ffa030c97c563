"""Concatenation of the site's stylesheets into a single bundle."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import sass

from .errors import StylesheetError

logger = logging.getLogger("sorg")

# Later entries override earlier ones, so this order is significant.
STYLESHEETS = [
    "_reset.sass",
    "main.sass",
    "about.sass",
    "fragments.sass",
    "index.sass",
    "photos.sass",
    "quotes.sass",
    "reading.sass",
    "runs.sass",
    "signature.sass",
    "solarized-light.css",
    "tenets.sass",
    "twitter.sass",
]

BUNDLE_NAME = "app.css"


def compile_sass(source: str, path: Path) -> str:
    """Compile indented-syntax Sass into CSS."""
    try:
        return sass.compile(string=source, indented=True, output_style="expanded")
    except sass.CompileError as exc:
        raise StylesheetError(f"Error compiling {path}: {exc}") from exc


def compile_stylesheets(
    source_dir: Path,
    target_path: Path,
    stylesheets: Sequence[str] = STYLESHEETS,
) -> Path:
    """Write every stylesheet, in order, into ``target_path``."""
    with target_path.open("w", encoding="utf-8") as out:
        for name in stylesheets:
            in_path = source_dir / name
            logger.debug("Compiling: %s", in_path)
            source = in_path.read_text(encoding="utf-8")

            out.write(f"/* {name} */\n\n")
            if name.endswith(".sass"):
                out.write(compile_sass(source, in_path))
            else:
                out.write(source)
            out.write("\n\n")
    return target_path
