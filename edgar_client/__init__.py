"""Client for the SEC EDGAR submissions and XBRL APIs."""

from .aggregator import filter_filings, merge_all_filings, merge_all_filings_async
from .client import AsyncEdgarClient, EdgarClient
from .config import EdgarSettings
from .errors import (
    AggregationError,
    DeserializationError,
    EdgarError,
    EmptyStatisticsError,
    InvalidCikError,
    TransportError,
)
from .frame_stats import FrameStatistics, statistics, top_companies

__all__ = [
    "AggregationError",
    "AsyncEdgarClient",
    "DeserializationError",
    "EdgarClient",
    "EdgarError",
    "EdgarSettings",
    "EmptyStatisticsError",
    "FrameStatistics",
    "InvalidCikError",
    "TransportError",
    "filter_filings",
    "merge_all_filings",
    "merge_all_filings_async",
    "statistics",
    "top_companies",
]
