from abc import ABC, abstractmethod
from ranktau.types import Sample, Weights


class Correlation(ABC):
    @abstractmethod
    def compute(self, a: Sample, b: Sample, weights: Weights) -> float:
        """Compute the correlation coefficient between two samples.

        Args:
            a (Sample): The first sample, shape (n_samples,).
            b (Sample): The second sample, shape (n_samples,).
            weights (Weights): The weight of each observation, shape
            (n_samples,).

        Returns:
            float: The correlation coefficient.
        """
        pass

    def __call__(self, a: Sample, b: Sample, weights: Weights) -> float:
        return self.compute(a, b, weights)
