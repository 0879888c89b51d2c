from typing import List
from ranktau.correlation import Correlation
from ranktau.errors import DegenerateInputError, InvalidInputError
from ranktau.types import DegeneratePolicy, Sample, TieGroup, Weights
from ranktau.statistics import reducers
from ranktau.statistics.merge_sort import weighted_merge_sort_mut
from ranktau.statistics.utils import (
    as_float_array,
    check_lengths,
    check_not_nan,
    check_weights,
    scale_weights,
)
from numpy import ndarray
import numpy as np
import logging

LOGGER = logging.getLogger(__name__)

# relative to the total pair mass, below this a variable counts as constant
_DEGENERATE_RTOL = 1e-12


def weighted_kendall_tau_b(a: Sample, b: Sample, weights: Weights) -> float:
    """Compute the weighted Kendall's Tau-b rank correlation coefficient.

    Each pair of observations (i, j) counts with weight weights[i] *
    weights[j] instead of 1, so

        τ_b = (C - D) / √((n₀ - n₁)(n₀ - n₂))

    where C and D are the weighted concordant and discordant pair masses, n₀
    the total weighted pair mass and n₁, n₂ the weighted masses of pairs tied
    in a and b respectively. D is counted by a weighted merge sort. The
    arguments are not modified.

    Args:
        a (Sample): The first sample, shape (n_samples,).
        b (Sample): The second sample, shape (n_samples,).
        weights (Weights): Non-negative weight of each observation, shape
        (n_samples,).

    Raises:
        LengthMismatchError: If the three sequences differ in length.
        InvalidInputError: If there are fewer than two observations, a sample
        contains NaN, or a weight is negative or not finite.
        DegenerateInputError: If either sample is constant once ties are
        accounted for.

    Returns:
        float: The coefficient, between -1.0 and 1.0.
    """
    return _kendall_tau_b(a, b, weights, DegeneratePolicy.Raise)


class WeightedKendallTauB(Correlation):
    def __init__(self, on_degenerate: DegeneratePolicy | str = DegeneratePolicy.Raise):
        """Create a weighted Kendall's Tau-b correlation.

        Args:
            on_degenerate (DegeneratePolicy | str, optional): What to do when a
            sample is constant. DegeneratePolicy.Raise ("raise") raises
            DegenerateInputError, DegeneratePolicy.Nan ("nan") returns NaN.
            Defaults to DegeneratePolicy.Raise.

        Raises:
            ValueError: If on_degenerate is not a known policy.
        """
        try:
            self.on_degenerate = DegeneratePolicy(on_degenerate)
        except ValueError:
            raise ValueError(
                f"on_degenerate ({on_degenerate}) must be one of "
                f"{[policy.value for policy in DegeneratePolicy]}"
            ) from None

    def compute(self, a: Sample, b: Sample, weights: Weights) -> float:
        return _kendall_tau_b(a, b, weights, self.on_degenerate)


def tie_groups(values: ndarray, weights: ndarray, *keys: ndarray) -> List[TieGroup]:
    """Split sorted values into maximal runs of equal values.

    Args:
        values (ndarray): Sorted values, shape (n_samples,).
        weights (ndarray): The weights aligned with values, shape (n_samples,).
        *keys (ndarray): Further aligned arrays; a run must be equal in these
        too, which gives the groups tied jointly in several variables.

    Returns:
        List[TieGroup]: The groups in order, singletons included.
    """
    n = len(values)
    if n == 0:
        return []
    # direct comparison, so equal infinities stay in one run
    changed = values[1:] != values[:-1]
    for key in keys:
        changed |= key[1:] != key[:-1]
    starts = np.concatenate(([0], np.flatnonzero(changed) + 1))
    stops = np.append(starts[1:], n)
    totals = np.add.reduceat(weights, starts)
    squares = np.add.reduceat(weights**2, starts)
    return [
        TieGroup(int(start), int(stop), float(total), float(square))
        for start, stop, total, square in zip(starts, stops, totals, squares)
    ]


def tie_correction(values: ndarray, weights: ndarray, *keys: ndarray) -> float:
    """Weighted mass of the unordered pairs tied in sorted values (and keys)."""
    groups = tie_groups(values, weights, *keys)
    return reducers.sum([group.pair_mass for group in groups if group.stop - group.start > 1])


def _kendall_tau_b(a: Sample, b: Sample, weights: Weights, on_degenerate: DegeneratePolicy) -> float:
    x = as_float_array(a, "a")
    y = as_float_array(b, "b")
    w = as_float_array(weights, "weights")
    n = check_lengths(a=x, b=y, weights=w)
    if n < 2:
        raise InvalidInputError(f"Kendall's Tau-b needs at least 2 observations, got {n}")
    check_not_nan(x, "a")
    check_not_nan(y, "b")
    check_weights(w)
    w = scale_weights(w)

    # by a, then b, so pairs tied in a never show up as inversions of b
    order = np.lexsort((y, x))
    x, y, w = x[order], y[order], w[order]

    total_pairs = (reducers.sum(w) ** 2 - reducers.sum(w**2)) / 2
    a_ties = tie_correction(x, w)
    joint_ties = tie_correction(x, w, y)
    # y and w are private copies, sorting leaves them grouped by b
    discordant = weighted_merge_sort_mut(y, w)
    b_ties = tie_correction(y, w)
    LOGGER.debug(
        f"n0={total_pairs}, n1={a_ties}, n2={b_ties}, joint ties={joint_ties}, D={discordant}"
    )

    a_denominator = total_pairs - a_ties
    b_denominator = total_pairs - b_ties
    threshold = total_pairs * _DEGENERATE_RTOL
    if a_denominator <= threshold or b_denominator <= threshold:
        constant = "a" if a_denominator <= threshold else "b"
        if on_degenerate == DegeneratePolicy.Nan:
            LOGGER.warning(f"Sample {constant} is constant, Kendall's Tau-b is NaN")
            return float("nan")
        raise DegenerateInputError(
            f"Sample {constant} is constant, Kendall's Tau-b is undefined"
        )

    # C - D, using C + D + n1 + n2 - joint ties = n0
    numerator = total_pairs - a_ties - b_ties + joint_ties - 2 * discordant
    tau = numerator / np.sqrt(a_denominator * b_denominator)
    return float(np.clip(tau, -1.0, 1.0))
