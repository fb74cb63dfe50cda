"""Ranking and aggregate statistics over XBRL frames."""

import math
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from edgar_client.cik import format_cik
from edgar_client.errors import EmptyStatisticsError
from edgar_client.models import FrameEntry


class FrameStatistics(BaseModel):
    """Aggregate statistics over the values of a frame."""

    model_config = ConfigDict(frozen=True)

    count: int
    sum: float
    mean: float
    min: float
    max: float
    median: float
    std_dev: float


def top_companies(entries: Sequence[FrameEntry], n: int, ascending: bool = False) -> list[FrameEntry]:
    """
    Rank frame entries by value.

    Ties keep their input order. Asking for more entries than the frame
    holds returns the whole frame, sorted.

    Args:
        entries: Frame entries, in any order
        n: Number of entries to return
        ascending: Smallest values first instead of largest

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")

    # sorted() is stable in both directions, so ties keep input order
    ranked = sorted(entries, key=lambda e: e.val, reverse=not ascending)
    return ranked[:n]


def statistics(entries: Sequence[FrameEntry]) -> FrameStatistics:
    """
    Compute count, sum, mean, min, max, median and sample standard deviation.

    Raises:
        EmptyStatisticsError: If the frame has no entries
    """
    values = sorted(float(e.val) for e in entries)
    count = len(values)
    if count == 0:
        raise EmptyStatisticsError()

    total = math.fsum(values)
    mean = total / count

    middle = count // 2
    if count % 2 == 0:
        median = (values[middle - 1] + values[middle]) / 2
    else:
        median = values[middle]

    if count > 1:
        variance = math.fsum((v - mean) ** 2 for v in values) / (count - 1)
    else:
        variance = 0.0

    return FrameStatistics(
        count=count,
        sum=total,
        mean=mean,
        min=values[0],
        max=values[-1],
        median=median,
        std_dev=math.sqrt(variance),
    )


def values_for_company(entries: Sequence[FrameEntry], cik: str | int) -> list[FrameEntry]:
    """Return the entries reported by one company."""
    normalized = format_cik(cik)
    return [e for e in entries if e.cik == normalized]
