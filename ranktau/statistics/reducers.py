from ranktau.statistics.utils import as_float_array, check_weights, scale_weights
from ranktau.errors import InvalidInputError
import numpy as np


def sum(data) -> float:
    """Compute the sum of a sequence of numbers. The empty sequence sums to
    0.0.

    Args:
        data: The sequence of numbers, shape (n_samples,).

    Returns:
        float: The sum.
    """
    return float(np.sum(as_float_array(data, "data")))


def effective_sample_size(weights) -> float:
    """Compute the effective sample size (ESS) of a weighted sample set, i.e.
    (Σ wᵢ)² / Σ (wᵢ²). Uniform weights give the number of samples.

    Args:
        weights: Non-negative weights, one per sample, shape (n_samples,).

    Raises:
        InvalidInputError: If a weight is negative or not finite, or if no
        weight is positive.

    Returns:
        float: The effective number of independent samples.
    """
    w = as_float_array(weights, "weights")
    check_weights(w)
    w = scale_weights(w)
    squared = np.sum(w**2)
    if squared == 0:
        raise InvalidInputError(
            "Effective sample size needs at least one positive weight"
        )
    return float(np.sum(w) ** 2 / squared)
