"""
Logging and operation metrics for vector stores.

Store events go through the standard ``logging`` module: each record carries
a ``StoreEvent`` under ``record.store_event``, rendered by ``StoreEventFormatter``
as a JSON object or a ``key=value`` line.
"""

import json
import logging
import os
import threading
import time
from collections import Counter
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

import psutil

from ..models.config import ObservabilityConfig
from ..models.observability import (
    LogContext, StoreEvent, StoreOperation, OperationTiming, SystemMetrics,
    create_log_context
)

LOGGER_NAME = "simple_vector_db.store"


class StoreEventFormatter(logging.Formatter):
    """Render store events as JSON or text; other records fall back to the message."""

    def __init__(self, log_format: str = "json"):
        super().__init__()
        self.log_format = log_format

    def format(self, record: logging.LogRecord) -> str:
        event: Optional[StoreEvent] = getattr(record, "store_event", None)

        if self.log_format == "json":
            payload = event.to_dict() if event else {"message": record.getMessage()}
            payload["level"] = record.levelname
            return json.dumps(payload)

        if event is None:
            return f"{record.levelname} {record.getMessage()}"

        fields = " ".join(
            f"{key}={value}" for key, value in event.to_dict().items()
            if key not in ("timestamp", "message")
        )
        return f"{record.levelname} {event.message} | {fields}"


class StoreMetrics:
    """Counters, gauges and per-operation timings, guarded by one lock."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: Counter = Counter()
        self._gauges: Dict[str, Union[int, float]] = {}
        self._timings: Dict[str, OperationTiming] = {}

    def increment(self, name: str, value: int = 1) -> None:
        with self._lock:
            self._counters[name] += value

    def set_gauge(self, name: str, value: Union[int, float]) -> None:
        with self._lock:
            self._gauges[name] = value

    def add_timing(self, name: str, duration_ms: float) -> None:
        with self._lock:
            self._timings.setdefault(name, OperationTiming()).add(duration_ms)

    def counter(self, name: str) -> int:
        with self._lock:
            return self._counters[name]

    def gauge(self, name: str) -> Optional[Union[int, float]]:
        with self._lock:
            return self._gauges.get(name)

    def timing(self, name: str) -> OperationTiming:
        with self._lock:
            timing = self._timings.get(name, OperationTiming())
            return OperationTiming(timing.calls, timing.total_ms)


class ObservabilityManager:
    """
    Logging and metrics sink handed to a vector store.

    The manager installs its own handlers on the ``simple_vector_db.store``
    logger and removes them again on ``shutdown``. Records still propagate
    to the root logger.
    """

    def __init__(self, config: Optional[ObservabilityConfig] = None):
        self.config = config or ObservabilityConfig()
        self.config.validate()

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.getLevelName(self.config.log_level.upper()))

        formatter = StoreEventFormatter(self.config.log_format)
        self._handlers: List[logging.Handler] = [logging.StreamHandler()]
        if self.config.log_file:
            self._handlers.append(logging.FileHandler(self.config.log_file))
        for handler in self._handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        self.metrics = StoreMetrics()
        self._local = threading.local()

    def set_log_context(self, context: LogContext) -> None:
        """Attach events logged from this thread to a store instance."""
        self._local.context = context

    def _context(self) -> LogContext:
        context = getattr(self._local, "context", None)
        if context is None:
            context = create_log_context()
            self._local.context = context
        return context

    def log_event(
        self,
        level: str,
        message: str,
        operation: StoreOperation = StoreOperation.INIT,
        **fields
    ) -> StoreEvent:
        """
        Log a store event.

        Args:
            level: Standard logging level name ("DEBUG", "INFO", "WARNING", ...)
            message: Human-readable description
            operation: Store operation the event belongs to
            **fields: vector_count, index, dimension or rejection

        Returns:
            The emitted event
        """
        context = self._context()
        event = StoreEvent(
            operation=operation,
            message=message,
            correlation_id=context.correlation_id,
            component=context.component,
            **fields
        )
        self.logger.log(
            logging.getLevelName(level.upper()), message, extra={"store_event": event}
        )
        return event

    def increment_counter(self, name: str, value: int = 1) -> None:
        if self.config.metrics_enabled:
            self.metrics.increment(name, value)

    def record_metric(self, name: str, value: Union[int, float]) -> None:
        """Record the current value of a gauge such as ``store_vector_count``."""
        if self.config.metrics_enabled:
            self.metrics.set_gauge(name, value)

    @contextmanager
    def time_operation(self, operation_name: str):
        """Accumulate the wall time of the enclosed block under ``operation_name``."""
        if not self.config.metrics_enabled:
            yield
            return

        start = time.perf_counter()
        try:
            yield
        finally:
            self.metrics.add_timing(operation_name, (time.perf_counter() - start) * 1000)

    def get_system_metrics(self) -> SystemMetrics:
        """Snapshot process memory and store operation totals."""
        rss = psutil.Process(os.getpid()).memory_info().rss
        return SystemMetrics(
            timestamp=datetime.now(timezone.utc),
            memory_usage_mb=rss / (1024 * 1024),
            vector_count=self.metrics.gauge("store_vector_count"),
            vectors_added=self.metrics.counter("vectors_added"),
            vectors_removed=self.metrics.counter("vectors_removed"),
            nearest_queries=self.metrics.counter("nearest_queries"),
            error_count=self.metrics.counter("errors"),
            avg_query_time_ms=self.metrics.timing(StoreOperation.NEAREST.value).average_ms,
        )

    def shutdown(self) -> None:
        """Detach and close this manager's handlers."""
        for handler in self._handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self._handlers = []
        if hasattr(self._local, "context"):
            del self._local.context

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
