"""
Nearest-neighbor search strategies over an ordered sequence of vectors.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

import numpy as np

from .distance import DistanceMetric, EuclideanDistance


class SearchStrategy(ABC):
    """Abstract interface for nearest-neighbor search strategies."""

    name: str = ""

    def __init__(self, metric: Optional[DistanceMetric] = None):
        self.metric = metric or EuclideanDistance()

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        """Distance between two vectors under this strategy's metric."""
        return self.metric.distance(a, b)

    @abstractmethod
    def search(
        self,
        vectors: Sequence[np.ndarray],
        query: np.ndarray
    ) -> Optional[Tuple[int, float]]:
        """
        Find the vector closest to the query.

        Args:
            vectors: Stored vectors, all of the query's length
            query: Query vector

        Returns:
            (index, distance) of the best match, None if there are no vectors
        """
        pass


class LinearScanSearch(SearchStrategy):
    """Exact search comparing the query against every stored vector."""

    name = "linear"

    def search(
        self,
        vectors: Sequence[np.ndarray],
        query: np.ndarray
    ) -> Optional[Tuple[int, float]]:
        best_index = None
        best_score = 0.0

        for index, vector in enumerate(vectors):
            score = self.metric.squared_distance(query, vector)
            # Strict comparison keeps the earliest index on ties
            if best_index is None or score < best_score:
                best_index = index
                best_score = score

        if best_index is None:
            return None

        return best_index, self.metric.from_squared(best_score)
