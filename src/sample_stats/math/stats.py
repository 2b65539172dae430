"""Descriptive statistics over an immutable numeric sample."""

import logging
import math
import operator

import marshmallow as ma
import numpy as np
import structlog
from attrs import cmp_using, define, field
from marshmallow.validate import Length

from ..errors import InvalidInputError
from .utils import FloatArray, NumericInput, normalize_sample

MAX_TRIM_FRACTION = 0.49
DEFAULT_TRIM_FRACTION = 0.1

_stdlib_logger = logging.getLogger(__name__)
_stdlib_logger.addHandler(logging.NullHandler())
logger = structlog.wrap_logger(_stdlib_logger)


@define(slots=True, frozen=True)
class SampleStatistics:
    """Sorted, read-only numeric sample exposing summary statistics.

    The constructor copies ``values`` into an owned float array sorted ascending;
    every statistic is a pure read of that array. Sets are accepted and keep their
    set semantics, so duplicates are already gone before the copy is made.
    """

    values: FloatArray = field(
        converter=normalize_sample,
        eq=cmp_using(eq=np.array_equal),
        hash=False,
    )

    def __hash__(self) -> int:
        # Adding 0.0 folds -0.0 into 0.0 so equal samples hash equal.
        return hash((self.values + 0.0).tobytes())

    def __len__(self) -> int:
        return int(self.values.size)

    def __str__(self) -> str:
        return "[" + ",".join(repr(float(value)) for value in self.values) + "]"

    def __repr__(self) -> str:
        return f"SampleStatistics({self})"

    def minimum(self) -> float:
        """Return the smallest value."""
        return float(self.values[0])

    def maximum(self) -> float:
        """Return the largest value."""
        return float(self.values[-1])

    def mean(self) -> float:
        """Return the arithmetic mean."""
        return float(np.sum(self.values) / self.values.size)

    def trimmed_mean_by_count(self, count: int) -> float:
        """Return the mean after dropping ``count`` values from each end.

        Raises:
            InvalidInputError: If ``count`` is negative, not an integer, or would
                leave no data behind (``2 * count >= len(sample)``).
        """
        try:
            k = operator.index(count)
        except TypeError as exc:
            raise InvalidInputError(
                "Trim count must be an integer.", details={"count": count}
            ) from exc
        n = int(self.values.size)
        if k < 0 or 2 * k >= n:
            logger.debug("sample.trim_rejected", count=k, size=n)
            raise InvalidInputError(
                "Trim count must satisfy 0 <= 2 * count < sample size.",
                details={"count": k, "size": n},
            )
        kept = self.values[k : n - k]
        return float(np.sum(kept) / (n - 2 * k))

    def trimmed_mean_by_fraction(self, fraction: float) -> float:
        """Return the mean after trimming ``floor(n * fraction)`` values per end.

        ``fraction`` is clamped into ``[0, MAX_TRIM_FRACTION]`` so the trim can never
        consume the whole sample.
        """
        if math.isnan(fraction):
            raise InvalidInputError("Trim fraction must be a number.", details={"fraction": fraction})
        clamped = min(max(fraction, 0.0), MAX_TRIM_FRACTION)
        if clamped != fraction:
            logger.debug("sample.trim_fraction_clamped", requested=fraction, applied=clamped)
        return self.trimmed_mean_by_count(math.floor(self.values.size * clamped))

    def median(self) -> float:
        """Return the middle order statistic.

        Odd sizes return the element at ``n // 2``; even sizes average the elements
        at ``n // 2 - 1`` and ``n // 2``.
        """
        n = int(self.values.size)
        if n == 1:
            return float(self.values[0])
        middle = n // 2
        if n % 2:
            return float(self.values[middle])
        return float((self.values[middle] + self.values[middle - 1]) / 2)

    def percentile(self, fraction: float) -> float:
        """Return the order statistic for ``fraction`` in ``[0, 1]``.

        Rule: ``index = ceil(fraction * n)``; when ``index >= n - 1`` the maximum is
        returned, otherwise the average of ``values[index]`` and ``values[index + 1]``.
        Fractions at or beyond the bounds return the minimum or maximum. This is not
        the linear-interpolation quantile found in NumPy.
        """
        if math.isnan(fraction):
            raise InvalidInputError(
                "Percentile fraction must be a number.", details={"fraction": fraction}
            )
        if fraction >= 1.0:
            return self.maximum()
        if fraction <= 0.0:
            return self.minimum()
        n = int(self.values.size)
        index = math.ceil(fraction * n)
        if index >= n - 1:
            return self.maximum()
        return float((self.values[index] + self.values[index + 1]) / 2)

    def variance(self) -> float:
        """Return the Bessel-corrected sample variance (0.0 for a single value)."""
        n = int(self.values.size)
        if n == 1:
            return 0.0
        centered = self.values - self.mean()
        return float(np.dot(centered, centered) / (n - 1))

    def standard_deviation(self) -> float:
        """Return the sample standard deviation."""
        if self.values.size == 1:
            return 0.0
        return math.sqrt(self.variance())

    def coefficient_of_variation(self) -> float:
        """Return standard deviation over mean; non-finite when the mean is zero."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self.standard_deviation()) / np.float64(self.mean()))

    def range(self) -> float:
        """Return the spread between the largest and smallest values."""
        return float(np.ptp(self.values))

    def summary(self, trim: float = DEFAULT_TRIM_FRACTION) -> "StatSummary":
        """Bundle every statistic into a :class:`StatSummary`."""
        result = StatSummary(
            count=len(self),
            minimum=self.minimum(),
            maximum=self.maximum(),
            mean=self.mean(),
            median=self.median(),
            trimmed_mean=self.trimmed_mean_by_fraction(trim),
            variance=self.variance(),
            standard_deviation=self.standard_deviation(),
            coefficient_of_variation=self.coefficient_of_variation(),
            range=self.range(),
        )
        logger.debug("summary.computed", count=result.count, trim=trim)
        return result


@define(slots=True, frozen=True, kw_only=True)
class StatSummary:
    """Bundle of descriptive statistics for one sample."""

    count: int
    minimum: float
    maximum: float
    mean: float
    median: float
    trimmed_mean: float
    variance: float
    standard_deviation: float
    coefficient_of_variation: float
    range: float

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation of the summary."""
        return StatSummarySchema().dump(self)


def compute_statistics(values: NumericInput, *, trim: float = DEFAULT_TRIM_FRACTION) -> StatSummary:
    """Build a sample from ``values`` and summarize it."""
    return SampleStatistics(values).summary(trim=trim)


class SampleSchema(ma.Schema):
    """Marshmallow schema for :class:`SampleStatistics`."""

    values = ma.fields.List(
        ma.fields.Float(allow_nan=False),
        required=True,
        validate=Length(min=1),
    )

    @ma.post_load
    def make_sample(self, data: dict[str, list[float]], **kwargs: object) -> SampleStatistics:
        """Instantiate :class:`SampleStatistics` from validated payloads."""
        return SampleStatistics(data["values"])


class StatSummarySchema(ma.Schema):
    """Marshmallow schema for :class:`StatSummary`."""

    count = ma.fields.Int(required=True)
    minimum = ma.fields.Float(required=True)
    maximum = ma.fields.Float(required=True)
    mean = ma.fields.Float(required=True, allow_nan=True)
    median = ma.fields.Float(required=True, allow_nan=True)
    trimmed_mean = ma.fields.Float(required=True, allow_nan=True)
    variance = ma.fields.Float(required=True, allow_nan=True)
    standard_deviation = ma.fields.Float(required=True, allow_nan=True)
    coefficient_of_variation = ma.fields.Float(required=True, allow_nan=True)
    range = ma.fields.Float(required=True, allow_nan=True)

    @ma.post_load
    def make_summary(self, data: dict[str, float], **kwargs: object) -> StatSummary:
        """Instantiate :class:`StatSummary` from validated payloads."""
        return StatSummary(**data)
