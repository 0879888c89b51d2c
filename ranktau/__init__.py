from ranktau.types import DegeneratePolicy, Pair, Sample, TieGroup, Weights
from ranktau.errors import (
    DegenerateInputError,
    InvalidInputError,
    LengthMismatchError,
    RankTauError,
)
from ranktau.correlation import Correlation
from ranktau import statistics
from ranktau.statistics import (
    WeightedKendallTauB,
    effective_sample_size,
    weighted_kendall_tau_b,
    weighted_merge_sort_mut,
)

__version__ = "0.1.0"
