"""
Distance metrics used by nearest-neighbor search.
"""

from abc import ABC, abstractmethod

import numpy as np

from ..exceptions import DimensionMismatchException


class DistanceMetric(ABC):
    """Abstract interface for vector distance metrics."""

    name: str = ""

    @abstractmethod
    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        """
        Compute the distance between two vectors of equal length.

        Args:
            a: First vector
            b: Second vector

        Returns:
            Distance between the vectors
        """
        pass

    def squared_distance(self, a: np.ndarray, b: np.ndarray) -> float:
        """
        Rank-preserving surrogate of distance, cheaper to compare.

        Defaults to the distance itself for metrics without a cheaper form.
        """
        return self.distance(a, b)

    def from_squared(self, value: float) -> float:
        """Convert a squared_distance value back into a true distance."""
        return value


class EuclideanDistance(DistanceMetric):
    """Euclidean (L2) distance."""

    name = "euclidean"

    def squared_distance(self, a: np.ndarray, b: np.ndarray) -> float:
        if a.shape != b.shape:
            raise DimensionMismatchException(a.shape[0], b.shape[0])
        diff = a - b
        return float(np.dot(diff, diff))

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        return self.from_squared(self.squared_distance(a, b))

    def from_squared(self, value: float) -> float:
        return float(np.sqrt(value))


def euclidean(a, b) -> float:
    """
    Euclidean distance between two vectors.

    >>> round(euclidean([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]), 4)
    5.1962
    """
    return EuclideanDistance().distance(
        np.asarray(a, dtype=np.float64),
        np.asarray(b, dtype=np.float64)
    )
