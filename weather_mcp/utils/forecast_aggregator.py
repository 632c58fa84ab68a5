"""Grouping of forecast samples into calendar-day buckets for display."""

from collections.abc import Iterable
from datetime import date

from weather_mcp.schemas.weather import DailyBucket, ForecastSample

MAX_DAYS = 5
MAX_SAMPLES_PER_DAY = 3


def bucket_by_day(
    samples: Iterable[ForecastSample],
    max_days: int = MAX_DAYS,
    max_samples_per_day: int = MAX_SAMPLES_PER_DAY,
) -> list[DailyBucket]:
    """Group chronological samples by calendar day.

    Days keep the order in which they are first seen, and samples keep their
    input order within a day. Input is not re-sorted. Only the first
    ``max_days`` days and the first ``max_samples_per_day`` samples of each
    are kept; anything past those limits is dropped silently.
    """
    groups: list[tuple[date, list[ForecastSample]]] = []
    positions: dict[date, int] = {}

    for sample in samples:
        day = sample.timestamp.date()
        index = positions.get(day)
        if index is None:
            positions[day] = len(groups)
            groups.append((day, [sample]))
        else:
            groups[index][1].append(sample)

    return [
        DailyBucket(day=day, samples=tuple(day_samples[:max_samples_per_day]))
        for day, day_samples in groups[:max_days]
    ]
