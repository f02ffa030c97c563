"""High-level orchestration of the build stages."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Tuple

from jinja2 import Environment

from .config import BuildConfig, SitePaths, create_target_dirs
from .content import load_article, load_fragment
from .errors import StageError
from .images import link_image_assets
from .runs import fetch_runs
from .stylesheets import BUNDLE_NAME, STYLESHEETS, compile_stylesheets
from .utils import list_sources, output_name
from .views import (
    ARTICLE_VIEW,
    FRAGMENT_VIEW,
    MAIN_LAYOUT,
    RUNS_VIEW,
    ArticlePage,
    FragmentPage,
    RunsPage,
    create_environment,
    get_locals,
    render_view,
)

logger = logging.getLogger("sorg")


@dataclass
class BuildContext:
    """Inputs shared by every stage of one build."""

    config: BuildConfig
    paths: SitePaths
    env: Environment
    stylesheets: Sequence[str] = field(default_factory=lambda: list(STYLESHEETS))


def compile_articles(ctx: BuildContext) -> int:
    count = 0
    for in_path in list_sources(ctx.paths.articles_dir):
        logger.debug("Compiling: %s", in_path)
        article = load_article(in_path)
        locals_ = get_locals(ctx.config, article.title, ArticlePage(article=article))
        render_view(
            ctx.env,
            MAIN_LAYOUT,
            ARTICLE_VIEW,
            ctx.paths.target_articles_dir / output_name(in_path.name),
            locals_,
        )
        count += 1
    return count


def compile_fragments(ctx: BuildContext) -> int:
    count = 0
    for in_path in list_sources(ctx.paths.fragments_dir):
        logger.debug("Compiling: %s", in_path)
        fragment = load_fragment(in_path)
        locals_ = get_locals(ctx.config, fragment.title, FragmentPage(fragment=fragment))
        render_view(
            ctx.env,
            MAIN_LAYOUT,
            FRAGMENT_VIEW,
            ctx.paths.target_fragments_dir / output_name(in_path.name),
            locals_,
        )
        count += 1
    return count


def compile_runs(ctx: BuildContext) -> int:
    data = fetch_runs(ctx.config.database_url)
    page = RunsPage(
        runs=data.runs,
        last_year_x_days=data.last_year_days,
        last_year_y_distances=data.last_year_distances,
        by_year_x_years=data.by_year_years,
        by_year_y_distances=data.by_year_distances,
    )
    render_view(
        ctx.env,
        MAIN_LAYOUT,
        RUNS_VIEW,
        ctx.paths.target_dir / "runs",
        get_locals(ctx.config, "Runs", page),
    )
    return len(data.runs)


def compile_stylesheet_bundle(ctx: BuildContext) -> int:
    compile_stylesheets(
        ctx.paths.stylesheets_dir,
        ctx.paths.target_versioned_assets_dir / BUNDLE_NAME,
        ctx.stylesheets,
    )
    return len(ctx.stylesheets)


def link_images(ctx: BuildContext) -> int:
    return len(link_image_assets(ctx.paths.images_dir, ctx.paths.target_assets_dir))


def _create_dirs(ctx: BuildContext) -> int:
    create_target_dirs(ctx.paths)
    return 0


STAGES: List[Tuple[str, Callable[[BuildContext], int]]] = [
    ("target directories", _create_dirs),
    ("articles", compile_articles),
    ("fragments", compile_fragments),
    ("runs", compile_runs),
    ("stylesheets", compile_stylesheet_bundle),
    ("image assets", link_images),
]


def run_build(
    config: BuildConfig,
    paths: SitePaths,
    stylesheets: Sequence[str] = STYLESHEETS,
) -> None:
    """Run every stage in order, stopping at the first failure."""
    ctx = BuildContext(
        config=config,
        paths=paths,
        env=create_environment(paths),
        stylesheets=list(stylesheets),
    )
    overall_start = time.perf_counter()
    for name, stage in STAGES:
        logger.info("Building %s", name)
        start = time.perf_counter()
        try:
            count = stage(ctx)
        except Exception as exc:  # pylint: disable=broad-except
            raise StageError(name, exc) from exc
        logger.debug("Finished %s (%d item(s)) in %.2fs", name, count, time.perf_counter() - start)
    logger.info("Build finished in %.2fs", time.perf_counter() - overall_start)
