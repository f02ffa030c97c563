"""Template loading, locals assembly and page rendering."""

from __future__ import annotations

import dataclasses
import datetime as dt
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .config import BuildConfig, SitePaths
from .helpers import FILTERS
from .models import Article, Fragment, Run

logger = logging.getLogger("sorg")

MAIN_LAYOUT = "layouts/main.html"
ARTICLE_VIEW = "views/articles/show.html"
FRAGMENT_VIEW = "views/fragments/show.html"
RUNS_VIEW = "views/runs/index.html"


@dataclass(frozen=True)
class Locals:
    """Values every template can rely on."""

    title: str
    google_analytics_id: str = ""
    release: str = ""
    body_class: str = ""
    viewport_width: str = "device-width"


@dataclass(frozen=True)
class ArticlePage:
    article: Article


@dataclass(frozen=True)
class FragmentPage:
    fragment: Fragment


@dataclass(frozen=True)
class RunsPage:
    runs: List[Run]
    last_year_x_days: List[dt.date]
    last_year_y_distances: List[float]
    by_year_x_years: List[str]
    by_year_y_distances: List[float]


Page = Union[ArticlePage, FragmentPage, RunsPage, Mapping[str, Any]]


def _page_values(page: Optional[Page]) -> Dict[str, Any]:
    if page is None:
        return {}
    if dataclasses.is_dataclass(page):
        # Shallow copy; nested records stay objects.
        return {f.name: getattr(page, f.name) for f in dataclasses.fields(page)}
    return dict(page)


def get_locals(config: BuildConfig, title: str, page: Optional[Page] = None) -> Dict[str, Any]:
    """Merge the baseline locals with page-specific values.

    Page values win when a key appears in both.
    """
    baseline = Locals(
        title=title,
        google_analytics_id=config.google_analytics_id,
        release=config.release,
    )
    values = _page_values(baseline)
    values.update(_page_values(page))
    return values


def create_environment(paths: SitePaths) -> Environment:
    """Build a Jinja2 environment that resolves layouts and views by path."""
    env = Environment(
        loader=FileSystemLoader(str(paths.root)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters.update(FILTERS)
    return env


def render_view(
    env: Environment,
    layout: str,
    view: str,
    target: Path,
    locals_: Mapping[str, Any],
) -> Path:
    """Render ``view`` inside ``layout`` and write the result to ``target``."""
    logger.debug("Rendering: %s", target)
    template = env.get_template(view)
    with target.open("w", encoding="utf-8") as out:
        template.stream({"layout": layout, **locals_}).dump(out)
    return target
