from ranktau.statistics import reducers
from ranktau.statistics.reducers import sum, effective_sample_size
from ranktau.statistics.merge_sort import weighted_merge_sort_mut
from ranktau.statistics.kendall_tau import (
    WeightedKendallTauB,
    tie_correction,
    tie_groups,
    weighted_kendall_tau_b,
)
