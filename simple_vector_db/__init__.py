"""
Simple Vector DB - an in-memory vector store with exact nearest-neighbor search.

This package provides an ordered, positionally indexed collection of
fixed-dimension float vectors supporting add, remove, get and Euclidean
nearest-neighbor queries, with pluggable search strategies and structured
logging.
"""

from .storage import VectorStoreInterface, InMemoryVectorStore
from .models import (
    VectorStoreConfig, ObservabilityConfig, NearestResult, StoreState
)
from .services import (
    DistanceMetric, EuclideanDistance, euclidean,
    SearchStrategy, LinearScanSearch, ObservabilityManager
)
from .factory import VectorStoreFactory, SearchStrategyFactory
from .exceptions import (
    VectorDBException,
    ConfigurationException,
    StorageException,
    DimensionMismatchException,
    EmptyVectorException,
    IndexOutOfBoundsException
)

__version__ = "0.1.0"

__all__ = [
    "VectorStoreInterface",
    "InMemoryVectorStore",
    "VectorStoreConfig",
    "ObservabilityConfig",
    "NearestResult",
    "StoreState",
    "DistanceMetric",
    "EuclideanDistance",
    "euclidean",
    "SearchStrategy",
    "LinearScanSearch",
    "ObservabilityManager",
    "VectorStoreFactory",
    "SearchStrategyFactory",
    "VectorDBException",
    "ConfigurationException",
    "StorageException",
    "DimensionMismatchException",
    "EmptyVectorException",
    "IndexOutOfBoundsException",
]
