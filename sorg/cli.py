"""Command-line entry point for the site build."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .builder import run_build
from .config import SitePaths, load_config, resolve_root
from .errors import BuildError

logger = logging.getLogger("sorg.cli")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Build the static site into ./public. Configuration is read from "
            "BLACK_SWAN_DATABASE_URL, GOOGLE_ANALYTICS_ID, RELEASE, SORG_ROOT "
            "and VERBOSE."
        ),
    )
    return parser.parse_args(list(sys.argv[1:] if argv is None else argv))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parse_args(argv)
    try:
        config = load_config()
    except ValueError as exc:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s", force=True)
        logger.error("Invalid configuration: %s", exc)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    paths = SitePaths.from_root(resolve_root(), config.release)
    logger.debug("Building %s (release %s)", paths.root, config.release)
    try:
        run_build(config, paths)
    except BuildError as exc:
        logger.error("Build failed: %s", exc, exc_info=config.verbose)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
