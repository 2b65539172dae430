"""Descriptive statistics for numeric samples."""

from .stats import (  # noqa: F401
    DEFAULT_TRIM_FRACTION,
    MAX_TRIM_FRACTION,
    SampleSchema,
    SampleStatistics,
    StatSummary,
    StatSummarySchema,
    compute_statistics,
)
from .utils import normalize_sample  # noqa: F401

__all__ = [
    "DEFAULT_TRIM_FRACTION",
    "MAX_TRIM_FRACTION",
    "SampleSchema",
    "SampleStatistics",
    "StatSummary",
    "StatSummarySchema",
    "compute_statistics",
    "normalize_sample",
]
