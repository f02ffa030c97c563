"""Extraction of running activity metrics from the events database."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import psycopg

from .models import Run, RunsData

logger = logging.getLogger("sorg")

RECENT_RUNS_LIMIT = 30
DAILY_WINDOW_DAYS = 180

RECENT_RUNS_SQL = """
    SELECT
        (metadata ->> 'distance')::float,
        (metadata ->> 'total_elevation_gain')::float,
        metadata ->> 'location_city',
        (metadata ->> 'moving_time')::bigint,
        (metadata ->> 'occurred_at_local')::timestamptz
    FROM events
    WHERE type = 'strava'
        AND metadata ->> 'type' = 'Run'
    ORDER BY occurred_at DESC
    LIMIT %(limit)s
"""

CURRENT_DATE_SQL = "SELECT CURRENT_DATE"

# Only days with activity come back; the gaps are filled by daily_series().
DAILY_DISTANCE_SQL = """
    WITH runs AS (
        SELECT (metadata ->> 'occurred_at_local')::timestamptz AS occurred_at_local,
            ((metadata ->> 'distance')::float / 1000.0) AS distance
        FROM events
        WHERE type = 'strava'
            AND metadata ->> 'type' = 'Run'
    )

    SELECT date_trunc('day', occurred_at_local)::date AS day,
        SUM(distance)
    FROM runs
    WHERE occurred_at_local::date >= %(start)s
        AND occurred_at_local::date <= %(end)s
    GROUP BY day
    ORDER BY day ASC
"""

BY_YEAR_SQL = """
    WITH runs AS (
        SELECT (metadata ->> 'occurred_at_local')::timestamptz AS occurred_at_local,
            ((metadata ->> 'distance')::float / 1000.0) AS distance
        FROM events
        WHERE type = 'strava'
            AND metadata ->> 'type' = 'Run'
    )

    SELECT date_part('year', occurred_at_local)::int::text AS year,
        SUM(distance)
    FROM runs
    GROUP BY year
    ORDER BY year DESC
"""


def row_to_run(row: Sequence[Any]) -> Run:
    distance, elevation_gain, location_city, moving_seconds, occurred_at = row
    return Run(
        distance=float(distance or 0.0),
        elevation_gain=float(elevation_gain or 0.0),
        location_city=location_city,
        moving_time=dt.timedelta(seconds=int(moving_seconds or 0)),
        occurred_at=occurred_at,
    )


def daily_series(
    rows: Iterable[Tuple[Any, Any]],
    end: dt.date,
    window_days: int = DAILY_WINDOW_DAYS,
) -> Tuple[List[dt.date], List[float]]:
    """Expand per-day totals into a gapless series ending at ``end``.

    The series covers ``window_days + 1`` calendar days, both endpoints
    included, with days lacking activity reported as zero.
    """
    totals: dict = {}
    for day, distance in rows:
        if isinstance(day, dt.datetime):
            day = day.date()
        totals[day] = totals.get(day, 0.0) + float(distance or 0.0)

    start = end - dt.timedelta(days=window_days)
    days = [start + dt.timedelta(days=offset) for offset in range(window_days + 1)]
    distances = [max(totals.get(day, 0.0), 0.0) for day in days]
    return days, distances


def fetch_runs(
    database_url: Optional[str],
    today: Optional[dt.date] = None,
    window_days: int = DAILY_WINDOW_DAYS,
) -> RunsData:
    """Load recent runs plus daily and yearly distance totals.

    Without a database URL the page still renders, so empty data is returned.
    """
    if not database_url:
        logger.debug("No database configured; rendering runs without data")
        return RunsData()

    with psycopg.connect(database_url) as conn:
        with conn.cursor() as cursor:
            # The window follows the database session's calendar, not the host's.
            if today is None:
                cursor.execute(CURRENT_DATE_SQL)
                today = cursor.fetchone()[0]
            end = today
            start = end - dt.timedelta(days=window_days)

            cursor.execute(RECENT_RUNS_SQL, {"limit": RECENT_RUNS_LIMIT})
            runs = [row_to_run(row) for row in cursor.fetchall()]
            logger.debug("Loaded %d recent run(s)", len(runs))

            cursor.execute(DAILY_DISTANCE_SQL, {"start": start, "end": end})
            days, distances = daily_series(cursor.fetchall(), end, window_days)

            cursor.execute(BY_YEAR_SQL)
            by_year = cursor.fetchall()

    return RunsData(
        runs=runs,
        last_year_days=days,
        last_year_distances=distances,
        by_year_years=[str(year) for year, _ in by_year],
        by_year_distances=[float(distance or 0.0) for _, distance in by_year],
    )
