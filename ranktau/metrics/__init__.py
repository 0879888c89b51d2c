from ranktau.metrics.kendall_tau import (
    all_pairs,
    kendall_tau_b,
    pairwise_weighted_kendall_tau_b,
)
