"""
Data models and configuration classes for the vector store.
"""

from .config import VectorStoreConfig, ObservabilityConfig
from .vector import NearestResult, StoreState
from .observability import (
    StoreOperation, LogContext, StoreEvent, OperationTiming, SystemMetrics
)

__all__ = [
    "VectorStoreConfig",
    "ObservabilityConfig",
    "NearestResult",
    "StoreState",
    "StoreOperation",
    "LogContext",
    "StoreEvent",
    "OperationTiming",
    "SystemMetrics",
]
