"""Unit tests for the sample normalization helpers."""

import numpy as np
import pytest

from sample_stats.errors import InvalidInputError
from sample_stats.math.utils import normalize_sample, to_numpy


def test_to_numpy():
    """Test that to_numpy converts various inputs to a float array."""
    assert to_numpy([1, 2, 3]).dtype == np.float64
    assert isinstance(to_numpy((1, 2, 3)), np.ndarray)
    assert isinstance(to_numpy(np.array([1, 2, 3])), np.ndarray)


def test_normalize_sample_sorts_a_private_copy():
    """Test that normalize_sample returns a sorted, read-only copy."""
    source = np.array([3.0, 1.0, 2.0])
    normalized = normalize_sample(source)

    assert np.array_equal(normalized, np.array([1.0, 2.0, 3.0]))
    assert not normalized.flags.writeable
    assert not np.shares_memory(normalized, source)
    assert np.array_equal(source, np.array([3.0, 1.0, 2.0]))


@pytest.mark.parametrize(
    "source",
    [
        [2, 1, 3],
        (2.0, 1.0, 3.0),
        {3.0, 2.0, 1.0},
        frozenset({1, 2, 3}),
        np.array([3, 2, 1], dtype=np.int32),
        iter([1.0, 3.0, 2.0]),
    ],
)
def test_normalize_sample_accepts_container_shapes(source):
    """Test that every accepted container shape normalizes identically."""
    assert normalize_sample(source).tolist() == [1.0, 2.0, 3.0]


def test_normalize_sample_reports_details():
    """Test that validation failures carry structured details."""
    with pytest.raises(InvalidInputError) as excinfo:
        normalize_sample([1.0, float("nan"), float("inf")])
    assert excinfo.value.details == {"non_finite": 2}

    with pytest.raises(InvalidInputError) as excinfo:
        normalize_sample(np.ones((2, 2)))
    assert excinfo.value.details == {"ndim": 2}

    with pytest.raises(InvalidInputError) as excinfo:
        normalize_sample("abc")
    assert excinfo.value.details == {"type": "str"}


def test_normalize_sample_chains_conversion_errors():
    """Test that NumPy conversion errors are chained onto InvalidInputError."""
    with pytest.raises(InvalidInputError, match="real numbers") as excinfo:
        normalize_sample([1.0, object()])
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_normalize_sample_rejects_missing_values():
    """Test that None sources and None elements are rejected."""
    with pytest.raises(InvalidInputError, match="must not be None"):
        normalize_sample(None)
    with pytest.raises(InvalidInputError, match="must not contain None"):
        normalize_sample([None, 1.0])
    with pytest.raises(InvalidInputError, match="at least one value"):
        normalize_sample([])


def test_normalize_sample_rejects_complex_arrays():
    """Test that complex arrays are rejected instead of losing their imaginary part."""
    with pytest.raises(InvalidInputError, match="not complex"):
        normalize_sample(np.array([1 + 5j, 2 + 0j]))
    with pytest.raises(InvalidInputError, match="not complex"):
        normalize_sample(np.array([1 + 0j, 2 + 0j]))
