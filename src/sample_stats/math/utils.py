"""Input normalization helpers for numeric samples."""

from collections.abc import Iterable, Sequence, Set
from typing import TypeAlias, cast

import numpy as np
import numpy.typing as npt

from ..errors import InvalidInputError

FloatArray: TypeAlias = npt.NDArray[np.float64]
NumericInput: TypeAlias = npt.ArrayLike | Iterable[float] | Iterable[float | None]


def to_numpy(values: NumericInput) -> FloatArray:
    """Coerce the input sequence into a NumPy float array."""
    return cast(FloatArray, np.asarray(values, dtype=float))


def _materialize(values: NumericInput) -> Sequence[object] | np.ndarray:
    """Turn the accepted container shapes into something NumPy can index."""
    if isinstance(values, np.ndarray):
        return values
    if isinstance(values, Set):
        # Sets are already duplicate-free; iteration order is irrelevant once sorted.
        return list(values)
    if isinstance(values, Sequence):
        return values
    return list(cast(Iterable[object], values))


def normalize_sample(values: NumericInput | None) -> FloatArray:
    """Return a sorted, read-only float copy of ``values``.

    Accepts arrays, lists, tuples, sets and other iterables of real numbers. The
    result never aliases caller storage.

    Raises:
        InvalidInputError: When the source is missing, empty, not one-dimensional,
            holds ``None`` or non-numeric elements, or holds non-finite numbers.
    """
    if values is None:
        raise InvalidInputError("Sample source must not be None.")
    if isinstance(values, (str, bytes)):
        raise InvalidInputError(
            "Sample source must be a collection of numbers, not text.",
            details={"type": type(values).__name__},
        )
    try:
        items = _materialize(values)
    except TypeError as exc:
        raise InvalidInputError(
            "Sample source is not iterable.", details={"type": type(values).__name__}
        ) from exc

    if not isinstance(items, np.ndarray) and any(item is None for item in items):
        raise InvalidInputError("Sample values must not contain None.")
    if isinstance(items, np.ndarray) and np.iscomplexobj(items):
        raise InvalidInputError("Sample values must be real numbers, not complex.")

    try:
        arr = to_numpy(items).copy()
    except (TypeError, ValueError) as exc:
        raise InvalidInputError("Sample values must be real numbers.") from exc

    if arr.ndim != 1:
        raise InvalidInputError("Sample values must be a 1D sequence.", details={"ndim": arr.ndim})
    if arr.size == 0:
        raise InvalidInputError("Sample must contain at least one value.")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(
            "Sample values must be finite.",
            details={"non_finite": int(np.count_nonzero(~np.isfinite(arr)))},
        )

    arr.sort(kind="stable")
    arr.flags.writeable = False
    return cast(FloatArray, arr)


__all__ = ["FloatArray", "NumericInput", "normalize_sample", "to_numpy"]
