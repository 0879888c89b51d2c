from ranktau import Pair
from ranktau.errors import DegenerateInputError
from ranktau.statistics.utils import check_lengths
from typing import List
import numpy as np


def all_pairs(weights) -> List[Pair]:
    """Build every unordered pair of observations, weighted by the product of
    the two observation weights.

    Args:
        weights: The weight of each observation, shape (n_samples,).

    Returns:
        List[Pair]: The pairs (i, j) with i < j, shape (n_samples * (n_samples
        - 1) / 2,).
    """
    n = len(weights)
    return [
        Pair(i, j, sample_weight=float(weights[i]) * float(weights[j]))
        for i in range(n)
        for j in range(i + 1, n)
    ]


def kendall_tau_b(pairs: List[Pair], a, b) -> float:
    """Compute Kendall's Tau-b over an explicit list of pairs, by classifying
    each one. Quadratic in the number of observations when all pairs are
    given, use weighted_kendall_tau_b for anything but small inputs.

    Args:
        pairs (List[Pair]): The pairs to compare, shape (n_pairs,).
        a: The first sample, shape (n_samples,).
        b: The second sample, shape (n_samples,).

    Raises:
        DegenerateInputError: If every pair is tied in a or every pair is
        tied in b.

    Returns:
        float: The Tau-b coefficient.
    """
    total = 0.0
    concordant = 0.0
    discordant = 0.0
    a_ties = 0.0
    b_ties = 0.0
    for pair in pairs:
        i, j = pair.i, pair.j
        sign_a = _compare(a[i], a[j])
        sign_b = _compare(b[i], b[j])
        if sign_a == 0:
            a_ties += pair.sample_weight
        if sign_b == 0:
            b_ties += pair.sample_weight
        if sign_a * sign_b > 0:
            concordant += pair.sample_weight
        elif sign_a * sign_b < 0:
            discordant += pair.sample_weight
        total += pair.sample_weight

    denominator = (total - a_ties) * (total - b_ties)
    if denominator <= 0:
        raise DegenerateInputError("Every pair is tied in one of the samples")
    return (concordant - discordant) / np.sqrt(denominator)


def pairwise_weighted_kendall_tau_b(a, b, weights) -> float:
    check_lengths(a=a, b=b, weights=weights)
    return kendall_tau_b(all_pairs(weights), a, b)


def _compare(x, y) -> int:
    # not the sign of x - y, which is NaN for equal infinities
    return (x > y) - (x < y)
