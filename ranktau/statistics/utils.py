from collections.abc import MutableSequence
from ranktau.errors import InvalidInputError, LengthMismatchError
from numpy import ndarray
import numpy as np


def check_lengths(**sequences) -> int:
    """Check that all the given sequences have the same length.

    Args:
        **sequences: The sequences to check, keyed by the name used in the
        error message.

    Raises:
        LengthMismatchError: If any two lengths differ.

    Returns:
        int: The common length.
    """
    lengths = {name: len(seq) for name, seq in sequences.items()}
    if len(set(lengths.values())) > 1:
        raise LengthMismatchError(**lengths)
    return next(iter(lengths.values()), 0)


def as_float_array(values, name: str) -> ndarray:
    """Copy an array-like into a fresh 1-dimensional float64 array.

    Args:
        values: The array-like to copy.
        name (str): Name of the argument, for error messages.

    Raises:
        TypeError: If the values are not numeric or not 1-dimensional.

    Returns:
        ndarray: The float64 copy, shape (n_samples,).
    """
    try:
        array = np.array(values, dtype=np.float64)
    except (TypeError, ValueError, OverflowError) as e:
        raise TypeError(f"{name} must be a sequence of numbers") from e
    if array.ndim != 1:
        raise TypeError(f"{name} must be 1-dimensional, got shape {array.shape}")
    return array


def check_weights(weights: ndarray, name: str = "weights") -> None:
    if not np.all(np.isfinite(weights)):
        raise InvalidInputError(f"{name} must all be finite")
    if np.any(weights < 0):
        raise InvalidInputError(f"{name} must all be non-negative")


def check_not_nan(values: ndarray, name: str) -> None:
    if np.any(np.isnan(values)):
        raise InvalidInputError(f"{name} must not contain NaN")


def check_mutable(seq, name: str, dtype_kinds: str) -> None:
    """Check that a sequence can be sorted in place.

    Args:
        seq: A list or 1-dimensional ndarray.
        name (str): Name of the argument, for error messages.
        dtype_kinds (str): Allowed numpy dtype kinds when seq is an ndarray,
        e.g. "iuf".

    Raises:
        TypeError: If seq is neither a mutable sequence nor a 1-dimensional
        ndarray of an allowed dtype.
        InvalidInputError: If seq is a read-only ndarray.
    """
    if isinstance(seq, np.ndarray):
        if seq.ndim != 1:
            raise TypeError(f"{name} must be 1-dimensional, got shape {seq.shape}")
        if seq.dtype.kind not in dtype_kinds:
            raise TypeError(f"Unsupported array dtype for {name}: {seq.dtype}")
        if not seq.flags.writeable:
            raise InvalidInputError(f"{name} is read-only and cannot be sorted in place")
    elif not isinstance(seq, MutableSequence):
        raise TypeError(
            f"{name} must be a list or ndarray to be sorted in place, got {type(seq).__name__}"
        )


def scale_weights(weights: ndarray) -> ndarray:
    """Divide validated weights by their maximum, so that squares and products
    of large weights stay finite. Ratios of weighted pair masses do not change.
    """
    if len(weights) == 0:
        return weights
    largest = weights.max()
    if largest > 0:
        return weights / largest
    return weights
