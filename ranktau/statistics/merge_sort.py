from typing import List, Tuple
from ranktau.types import Sample, Weights
from ranktau.statistics.utils import (
    as_float_array,
    check_lengths,
    check_mutable,
    check_not_nan,
    check_weights,
)
import logging

LOGGER = logging.getLogger(__name__)

# (value, weight), always moved together
Entry = Tuple[float, float]


def weighted_merge_sort_mut(data: Sample, weights: Weights) -> float:
    """Sort data ascending in place, applying the same permutation to weights,
    and return the weighted inversion count.

    The sort is a bottom up merge sort, so it is stable: equal values keep
    their original relative order and are never counted as inverted. Every
    pair (i, j) with i before j and data[i] > data[j] contributes
    weights[i] * weights[j] to the returned count.

    Both arguments are validated before anything is written, and are only
    written once the full permutation is known.

    Args:
        data (Sample): A list, or 1-dimensional integer or float ndarray,
        shape (n_samples,). Mutated.
        weights (Weights): A list, or 1-dimensional float ndarray, of
        non-negative weights, shape (n_samples,). Mutated.

    Raises:
        LengthMismatchError: If data and weights differ in length.
        InvalidInputError: If data contains NaN, a weight is negative or not
        finite, or an array is read-only.
        TypeError: If an argument is not a list or 1-dimensional ndarray of a
        supported dtype.

    Returns:
        float: The weighted inversion count.
    """
    check_mutable(data, "data", "iuf")
    check_mutable(weights, "weights", "f")
    n = check_lengths(data=data, weights=weights)
    check_not_nan(as_float_array(data, "data"), "data")
    check_weights(as_float_array(weights, "weights"))

    entries: List[Entry] = list(zip(_to_list(data), _to_list(weights)))
    buffer: List[Entry] = entries.copy()

    inversions = 0.0
    width = 1
    passes = 0
    while width < n:
        for start in range(0, n, 2 * width):
            mid = min(start + width, n)
            stop = min(start + 2 * width, n)
            inversions += _merge(entries, buffer, start, mid, stop)
        entries, buffer = buffer, entries
        width *= 2
        passes += 1
    LOGGER.debug(f"Sorted {n} values in {passes} passes, inversions: {inversions}")

    data[:] = [value for value, _ in entries]
    weights[:] = [weight for _, weight in entries]
    return inversions


def _merge(src: List[Entry], dst: List[Entry], start: int, mid: int, stop: int) -> float:
    """Merge the sorted runs src[start:mid] and src[mid:stop] into
    dst[start:stop].

    Returns:
        float: The weighted inversions resolved by this merge.
    """
    # pending[k] is the total weight of src[start + k:mid]
    pending = [0.0] * (mid - start + 1)
    for k in range(mid - start - 1, -1, -1):
        pending[k] = pending[k + 1] + src[start + k][1]

    inversions = 0.0
    i, j, k = start, mid, start
    while i < mid and j < stop:
        # strict comparison, ties take the left run first
        if src[j][0] < src[i][0]:
            inversions += src[j][1] * pending[i - start]
            dst[k] = src[j]
            j += 1
        else:
            dst[k] = src[i]
            i += 1
        k += 1
    dst[k : k + mid - i] = src[i:mid]
    dst[j:stop] = src[j:stop]
    return inversions


def _to_list(seq) -> list:
    if hasattr(seq, "tolist"):
        return seq.tolist()
    return list(seq)
