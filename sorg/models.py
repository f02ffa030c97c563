"""Data models produced and consumed by the build stages."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Article:
    """An article decoded from frontmatter with its rendered body."""

    title: str
    published_at: dt.datetime
    hook: str = ""
    image: str = ""
    attributions: str = ""
    hn_link: str = ""
    content: str = ""
    # Always empty until table of contents rendering exists.
    toc: str = ""


@dataclass(frozen=True)
class Fragment:
    """A short stream-of-consciousness article."""

    title: str
    published_at: dt.datetime
    image: str = ""
    content: str = ""


@dataclass(frozen=True)
class Run:
    """A single running activity read from the events table."""

    distance: float
    elevation_gain: float
    location_city: Optional[str]
    moving_time: dt.timedelta
    occurred_at: dt.datetime


@dataclass
class RunsData:
    """Everything the runs page charts and tables are rendered from."""

    runs: List[Run] = field(default_factory=list)
    last_year_days: List[dt.date] = field(default_factory=list)
    last_year_distances: List[float] = field(default_factory=list)
    by_year_years: List[str] = field(default_factory=list)
    by_year_distances: List[float] = field(default_factory=list)
