"""Configuration objects and directory layout for the site build."""

from __future__ import annotations

import datetime as dt
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger("sorg")

_TRUTHY = {"1", "t", "true", "yes", "on"}
_FALSY = {"0", "f", "false", "no", "off", ""}


@dataclass(frozen=True)
class BuildConfig:
    """Process-wide settings read once from the environment."""

    database_url: Optional[str] = None
    google_analytics_id: str = ""
    verbose: bool = False
    release: str = ""


@dataclass(frozen=True)
class SitePaths:
    """Source and target directories consumed by the build stages."""

    root: Path
    articles_dir: Path
    fragments_dir: Path
    images_dir: Path
    stylesheets_dir: Path
    layouts_dir: Path
    views_dir: Path
    target_dir: Path
    target_articles_dir: Path
    target_fragments_dir: Path
    target_assets_dir: Path
    target_versioned_assets_dir: Path

    @classmethod
    def from_root(cls, root: Path, release: str) -> "SitePaths":
        root = Path(root)
        content = root / "content"
        target = root / "public"
        assets = target / "assets"
        return cls(
            root=root,
            articles_dir=content / "articles",
            fragments_dir=content / "fragments",
            images_dir=content / "images",
            stylesheets_dir=content / "stylesheets",
            layouts_dir=root / "layouts",
            views_dir=root / "views",
            target_dir=target,
            target_articles_dir=target / "a",
            target_fragments_dir=target / "fragments",
            target_assets_dir=assets,
            target_versioned_assets_dir=assets / release,
        )


def parse_bool(value: str, name: str = "value") -> bool:
    """Interpret common spellings of a boolean environment variable."""
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def default_release(now: Optional[dt.datetime] = None) -> str:
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.strftime("%Y%m%d%H%M%S")


def load_config(environ: Optional[Mapping[str, str]] = None) -> BuildConfig:
    """Build a :class:`BuildConfig` from environment variables."""
    env = os.environ if environ is None else environ
    return BuildConfig(
        database_url=env.get("BLACK_SWAN_DATABASE_URL") or None,
        google_analytics_id=env.get("GOOGLE_ANALYTICS_ID", ""),
        verbose=parse_bool(env.get("VERBOSE", "false"), "VERBOSE"),
        release=env.get("RELEASE") or default_release(),
    )


def resolve_root(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    override = env.get("SORG_ROOT")
    if override:
        return Path(override).expanduser().resolve()
    return Path.cwd()


def create_target_dirs(paths: SitePaths) -> None:
    """Create every output directory the later stages write into."""
    for directory in (
        paths.target_dir,
        paths.target_articles_dir,
        paths.target_fragments_dir,
        paths.target_assets_dir,
        paths.target_versioned_assets_dir,
    ):
        logger.debug("Creating target directory: %s", directory)
        directory.mkdir(parents=True, exist_ok=True)
