from enum import Enum
from numpy import ndarray
from typing import List, TypeAlias

Sample: TypeAlias = ndarray | List[float] | List[int]
Weights: TypeAlias = ndarray | List[float]


class Pair:
    def __init__(self, i: int, j: int, sample_weight: float = 1.0):
        self.i = i
        self.j = j
        self.sample_weight = sample_weight


class TieGroup:
    """A maximal run of equal values in a sorted sample."""

    def __init__(self, start: int, stop: int, total_weight: float, squared_weight: float):
        self.start = start
        self.stop = stop
        self.total_weight = total_weight
        self.squared_weight = squared_weight

    @property
    def pair_mass(self) -> float:
        # weighted number of unordered pairs inside the group
        return (self.total_weight**2 - self.squared_weight) / 2


class DegeneratePolicy(Enum):
    Raise = "raise"
    Nan = "nan"
