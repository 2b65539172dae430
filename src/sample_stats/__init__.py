"""Reproducible summary statistics over immutable numeric samples."""

from .errors import InvalidInputError, SampleStatisticsError
from .logging import configure_logging
from .math import SampleSchema, SampleStatistics, StatSummary, StatSummarySchema, compute_statistics

__version__ = "0.1.0"

__all__ = [
    "InvalidInputError",
    "SampleSchema",
    "SampleStatistics",
    "SampleStatisticsError",
    "StatSummary",
    "StatSummarySchema",
    "compute_statistics",
    "configure_logging",
]
