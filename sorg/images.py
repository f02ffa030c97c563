"""Mirroring of source images into the output tree via symlinks."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import List

logger = logging.getLogger("sorg")


def _remove_existing(dest: Path) -> None:
    if dest.is_symlink() or dest.is_file():
        dest.unlink()
    elif dest.is_dir():
        shutil.rmtree(dest)


def link_image_assets(images_dir: Path, target_dir: Path) -> List[Path]:
    """Replace each entry of ``target_dir`` with a link into ``images_dir``."""
    linked: List[Path] = []
    for asset in sorted(images_dir.iterdir()):
        logger.debug("Linking image asset: %s", asset.name)

        # Link targets must be absolute.
        source = asset.resolve()
        dest = Path(os.path.abspath(target_dir / asset.name))

        _remove_existing(dest)
        os.symlink(source, dest)
        linked.append(dest)
    return linked
