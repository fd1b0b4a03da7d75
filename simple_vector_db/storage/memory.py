"""
In-memory vector store with exact nearest-neighbor search.
"""

import logging
from typing import Iterator, List, Optional, Dict, Any, Sequence

import numpy as np

from .interface import VectorStoreInterface
from ..models.config import VectorStoreConfig
from ..models.observability import StoreOperation, create_log_context
from ..models.vector import NearestResult, StoreState
from ..services.search import SearchStrategy, LinearScanSearch
from ..exceptions import (
    ConfigurationException,
    DimensionMismatchException,
    EmptyVectorException,
    IndexOutOfBoundsException,
    StorageException,
)

logger = logging.getLogger(__name__)


class InMemoryVectorStore(VectorStoreInterface):
    """
    Ordered, positionally indexed collection of equal-length float vectors.

    Vectors are copied into read-only float64 arrays on insertion. Indices are
    positions in the sequence: removing a vector shifts every later vector
    down by one. The store does no locking; callers sharing it between
    threads must serialize access themselves.

    NaN and infinite components are not validated and flow through the
    distance arithmetic unchanged.
    """

    def __init__(
        self,
        dimension: Optional[int] = None,
        initial_capacity: Optional[int] = None,
        search_strategy: Optional[SearchStrategy] = None,
        observability_manager=None
    ):
        """
        Initialize an empty vector store.

        Args:
            dimension: Fixed vector dimension (inferred from the first add if None)
            initial_capacity: Expected number of vectors, a hint only
            search_strategy: Nearest-neighbor strategy (linear scan if None)
            observability_manager: Optional observability manager for logging and metrics
        """
        self._configured_dimension = dimension
        self.initial_capacity = initial_capacity
        self.search_strategy = search_strategy or LinearScanSearch()
        self.observability_manager = observability_manager

        self._validate_parameters()

        self._vectors: List[np.ndarray] = []
        self._dimension: Optional[int] = dimension
        self._state = StoreState.EMPTY

        if self.observability_manager:
            self.observability_manager.set_log_context(
                create_log_context(component="InMemoryVectorStore")
            )
        self._log(
            "INFO",
            f"Initialized InMemoryVectorStore (dimension={dimension}, "
            f"initial_capacity={initial_capacity})",
            "init"
        )

    @classmethod
    def from_config(cls, config: VectorStoreConfig, observability_manager=None) -> "InMemoryVectorStore":
        """Create a store from a validated configuration."""
        from ..factory import SearchStrategyFactory

        return cls(
            dimension=config.dimension,
            initial_capacity=config.initial_capacity,
            search_strategy=SearchStrategyFactory.create(config.search_strategy, config.metric),
            observability_manager=observability_manager
        )

    def _validate_parameters(self) -> None:
        """Validate initialization parameters."""
        if self._configured_dimension is not None:
            if isinstance(self._configured_dimension, bool) or not isinstance(self._configured_dimension, int):
                raise ConfigurationException("dimension must be an integer")
            if self._configured_dimension <= 0:
                raise ConfigurationException("dimension must be greater than 0")

        if self.initial_capacity is not None:
            if isinstance(self.initial_capacity, bool) or not isinstance(self.initial_capacity, int):
                raise ConfigurationException("initial_capacity must be an integer")
            if self.initial_capacity < 0:
                raise ConfigurationException("initial_capacity cannot be negative")

        if not isinstance(self.search_strategy, SearchStrategy):
            raise ConfigurationException("search_strategy must be a SearchStrategy instance")

    def _log(self, level: str, message: str, operation: str, **fields) -> None:
        """Emit through the observability manager, or the module logger without one."""
        if self.observability_manager:
            self.observability_manager.log_event(
                level, message, StoreOperation(operation),
                vector_count=len(self._vectors), dimension=self._dimension, **fields
            )
        else:
            logger.log(logging.getLevelName(level), message)

    def _count(self, name: str) -> None:
        if self.observability_manager:
            self.observability_manager.increment_counter(name)

    def _reject(self, error: StorageException, operation: str) -> StorageException:
        """Log a failed validation and hand the exception back for raising."""
        self._log(
            "WARNING", f"{operation} rejected: {error}", operation,
            rejection=type(error).__name__
        )
        self._count("errors")
        return error

    def _to_array(self, vector: Sequence[float], operation: str) -> np.ndarray:
        """Copy a vector into a one-dimensional float64 array."""
        try:
            array = np.array(vector, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise self._reject(StorageException(f"Invalid vector: {str(e)}"), operation)

        if array.ndim != 1:
            raise self._reject(
                DimensionMismatchException(
                    self._dimension,
                    int(array.size),
                    message=f"Vector must be one-dimensional, got shape {array.shape}"
                ),
                operation
            )

        return array

    def _check_index(self, index: int, operation: str) -> None:
        if (
            isinstance(index, bool)
            or not isinstance(index, (int, np.integer))
            or not 0 <= index < len(self._vectors)
        ):
            raise self._reject(IndexOutOfBoundsException(index, len(self._vectors)), operation)

    @property
    def dimension(self) -> Optional[int]:
        return self._dimension

    @property
    def state(self) -> StoreState:
        return self._state

    def add(self, vector: Sequence[float]) -> int:
        """
        Append a vector to the store.

        The first vector added to an empty store fixes the dimension unless
        one was configured.

        Args:
            vector: Sequence of floats

        Returns:
            Index assigned to the vector

        Raises:
            EmptyVectorException: If a zero-length vector would establish the dimension
            DimensionMismatchException: If the length differs from the store dimension
        """
        array = self._to_array(vector, "add")
        length = array.shape[0]

        if self._dimension is None:
            if length == 0:
                raise self._reject(EmptyVectorException(), "add")
        elif length != self._dimension:
            raise self._reject(DimensionMismatchException(self._dimension, length), "add")

        array.setflags(write=False)

        if self.observability_manager:
            with self.observability_manager.time_operation("add"):
                self._vectors.append(array)
        else:
            self._vectors.append(array)

        if self._state is StoreState.EMPTY:
            self._dimension = length
            self._state = StoreState.POPULATED
            self._log("DEBUG", f"Store populated with dimension {length}", "add")

        index = len(self._vectors) - 1
        self._count("vectors_added")
        if self.observability_manager:
            self.observability_manager.record_metric("store_vector_count", len(self._vectors))

        return index

    def remove(self, index: int) -> np.ndarray:
        """
        Remove the vector at an index.

        Vectors after the index shift down by one. Removing the last vector
        returns the store to the empty state and, unless the dimension was
        configured, lets the next add establish a new dimension.

        Raises:
            IndexOutOfBoundsException: If index is not a valid position
        """
        self._check_index(index, "remove")

        removed = self._vectors.pop(index)

        if not self._vectors:
            self._state = StoreState.EMPTY
            self._dimension = self._configured_dimension
            self._log("DEBUG", "Store emptied", "remove", index=index)

        self._count("vectors_removed")
        if self.observability_manager:
            self.observability_manager.record_metric("store_vector_count", len(self._vectors))

        return removed

    def get(self, index: int) -> np.ndarray:
        """
        Retrieve the vector at an index as a read-only array.

        Raises:
            IndexOutOfBoundsException: If index is not a valid position
        """
        self._check_index(index, "get")
        return self._vectors[index]

    def nearest(self, query: Sequence[float]) -> Optional[NearestResult]:
        """
        Find the stored vector closest to the query.

        An empty store has no neighbor and returns None. Ties go to the
        lowest index.

        Args:
            query: Sequence of floats matching the store dimension

        Returns:
            NearestResult with index, stored vector and distance, or None

        Raises:
            DimensionMismatchException: If the query length differs from the store dimension
        """
        if self._state is StoreState.EMPTY:
            return None

        query_array = self._to_array(query, "nearest")
        if query_array.shape[0] != self._dimension:
            raise self._reject(
                DimensionMismatchException(self._dimension, query_array.shape[0]),
                "nearest"
            )

        self._count("nearest_queries")
        if self.observability_manager:
            with self.observability_manager.time_operation("nearest"):
                match = self.search_strategy.search(self._vectors, query_array)
        else:
            match = self.search_strategy.search(self._vectors, query_array)

        index, distance = match
        return NearestResult(index=index, vector=self._vectors[index], distance=distance)

    def get_vector_count(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(list(self._vectors))

    def health_check(self) -> bool:
        """
        Check that the store's state and stored vectors are consistent.

        Returns:
            True if the store is healthy
        """
        if self._state is StoreState.EMPTY:
            return not self._vectors and self._dimension == self._configured_dimension

        if not self._vectors or self._dimension is None:
            return False

        return all(
            vector.ndim == 1 and vector.shape[0] == self._dimension
            for vector in self._vectors
        )

    def get_storage_info(self) -> Dict[str, Any]:
        """
        Get information about the store.

        Returns:
            Dictionary containing store information
        """
        return {
            "dimension": self._dimension,
            "configured_dimension": self._configured_dimension,
            "state": self._state.value,
            "vector_count": len(self._vectors),
            "initial_capacity": self.initial_capacity,
            "search_strategy": self.search_strategy.name,
            "metric": self.search_strategy.metric.name,
        }

    def __str__(self) -> str:
        return (
            f"InMemoryVectorStore(dimension={self._dimension}, "
            f"count={len(self._vectors)})"
        )

    def __repr__(self) -> str:
        return (
            f"InMemoryVectorStore(dimension={self._dimension}, "
            f"state='{self._state.value}', "
            f"search_strategy='{self.search_strategy.name}', "
            f"vector_count={len(self._vectors)})"
        )
