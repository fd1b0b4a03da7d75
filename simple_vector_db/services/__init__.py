"""
Service layer components for distance computation, search and observability.
"""

from .distance import DistanceMetric, EuclideanDistance, euclidean
from .search import SearchStrategy, LinearScanSearch
from .observability import ObservabilityManager

__all__ = [
    "DistanceMetric",
    "EuclideanDistance",
    "euclidean",
    "SearchStrategy",
    "LinearScanSearch",
    "ObservabilityManager",
]
