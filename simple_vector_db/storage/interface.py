"""
Abstract base class for vector store backends.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from ..models.vector import NearestResult, StoreState


class VectorStoreInterface(ABC):
    """Abstract interface for positional vector stores."""

    @abstractmethod
    def add(self, vector: Sequence[float]) -> int:
        """
        Append a vector to the store.

        Args:
            vector: Sequence of floats matching the store dimension

        Returns:
            Index assigned to the vector
        """
        pass

    @abstractmethod
    def remove(self, index: int) -> np.ndarray:
        """
        Remove the vector at an index, shifting later vectors down by one.

        Args:
            index: Zero-based position

        Returns:
            The removed vector
        """
        pass

    @abstractmethod
    def get(self, index: int) -> np.ndarray:
        """
        Retrieve the vector at an index.

        Args:
            index: Zero-based position

        Returns:
            Read-only view of the stored vector
        """
        pass

    @abstractmethod
    def nearest(self, query: Sequence[float]) -> Optional[NearestResult]:
        """
        Find the stored vector closest to the query.

        Args:
            query: Sequence of floats matching the store dimension

        Returns:
            NearestResult, or None when the store is empty
        """
        pass

    @property
    @abstractmethod
    def dimension(self) -> Optional[int]:
        """Dimension shared by all stored vectors, None while undefined."""
        pass

    @property
    @abstractmethod
    def state(self) -> StoreState:
        """Current logical state of the store."""
        pass

    @abstractmethod
    def get_vector_count(self) -> int:
        """
        Get the total number of vectors in the store.

        Returns:
            Number of vectors stored
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """
        Check that the store's invariants hold.

        Returns:
            True if the store is healthy
        """
        pass

    def is_empty(self) -> bool:
        """Check whether the store holds no vectors."""
        return self.state is StoreState.EMPTY

    def __len__(self) -> int:
        return self.get_vector_count()
