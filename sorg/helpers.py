"""Filters available to every template."""

from __future__ import annotations

import datetime as dt
import json
from typing import Any, Callable, Dict

from markupsafe import Markup


def format_time(value: dt.datetime) -> str:
    """Format a timestamp like ``January 2, 2006``."""
    return f"{value:%B} {value.day}, {value.year}"


def distance_km(meters: float) -> str:
    return f"{meters / 1000.0:.1f}"


def format_duration(value: dt.timedelta) -> str:
    total = int(value.total_seconds())
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}h {minutes:02d}m {seconds:02d}s"
    return f"{minutes}m {seconds:02d}s"


def pace(moving_time: dt.timedelta, meters: float) -> str:
    """Minutes per kilometer, e.g. ``5:12``."""
    if meters <= 0:
        return ""
    seconds_per_km = int(round(moving_time.total_seconds() / (meters / 1000.0)))
    minutes, seconds = divmod(seconds_per_km, 60)
    return f"{minutes}:{seconds:02d}"


def _json_default(value: Any) -> Any:
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> Markup:
    """Serialize chart data for embedding in a script tag."""
    encoded = json.dumps(value, default=_json_default)
    encoded = encoded.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")
    return Markup(encoded)


FILTERS: Dict[str, Callable[..., Any]] = {
    "format_time": format_time,
    "distance_km": distance_km,
    "format_duration": format_duration,
    "pace": pace,
    "to_json": to_json,
}
