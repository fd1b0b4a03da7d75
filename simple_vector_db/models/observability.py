"""
Records describing what a vector store did: operations, rejections and
operation counts.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional, Any


class StoreOperation(Enum):
    """Operations a store reports on."""
    INIT = "init"
    ADD = "add"
    REMOVE = "remove"
    GET = "get"
    NEAREST = "nearest"


@dataclass
class LogContext:
    """Identifies the store instance emitting events on the current thread."""

    correlation_id: str
    component: str = "vector_store"


@dataclass
class StoreEvent:
    """One store operation outcome, attached to a log record."""

    operation: StoreOperation
    message: str
    correlation_id: str
    component: str
    vector_count: Optional[int] = None
    index: Optional[int] = None
    dimension: Optional[int] = None
    # Exception class name when the operation was rejected
    rejection: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def rejected(self) -> bool:
        return self.rejection is not None

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form with unset fields left out."""
        data = {
            "timestamp": self.timestamp.isoformat(),
            "operation": self.operation.value,
            "message": self.message,
            "correlation_id": self.correlation_id,
            "component": self.component,
        }
        for key in ("vector_count", "index", "dimension", "rejection"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass
class OperationTiming:
    """Running call count and total wall time for one operation."""

    calls: int = 0
    total_ms: float = 0.0

    def add(self, duration_ms: float) -> None:
        self.calls += 1
        self.total_ms += duration_ms

    @property
    def average_ms(self) -> float:
        return self.total_ms / self.calls if self.calls else 0.0


@dataclass
class SystemMetrics:
    """Process memory plus the store's operation totals."""

    timestamp: datetime
    memory_usage_mb: float
    vector_count: Optional[int] = None
    vectors_added: int = 0
    vectors_removed: int = 0
    nearest_queries: int = 0
    error_count: int = 0
    avg_query_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "memory_usage_mb": self.memory_usage_mb,
            "vector_count": self.vector_count,
            "vectors_added": self.vectors_added,
            "vectors_removed": self.vectors_removed,
            "nearest_queries": self.nearest_queries,
            "error_count": self.error_count,
            "avg_query_time_ms": self.avg_query_time_ms,
        }


def create_log_context(component: str = "vector_store", correlation_id: Optional[str] = None) -> LogContext:
    """Create a context with a fresh correlation ID unless one is given."""
    return LogContext(correlation_id=correlation_id or str(uuid.uuid4()), component=component)
