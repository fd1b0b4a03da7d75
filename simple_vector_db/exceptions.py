"""
Exception hierarchy for the vector store.
"""

from typing import Optional


class VectorDBException(Exception):
    """Base exception for vector store operations."""

    def __init__(self, message: str, correlation_id: Optional[str] = None):
        super().__init__(message)
        self.correlation_id = correlation_id


class ConfigurationException(VectorDBException):
    """Raised when configuration is invalid."""
    pass


class StorageException(VectorDBException):
    """Raised when storage operations fail."""
    pass


class DimensionMismatchException(StorageException):
    """Raised when a vector's length differs from the store dimension."""

    def __init__(
        self,
        expected: Optional[int],
        actual: int,
        message: Optional[str] = None,
        correlation_id: Optional[str] = None
    ):
        if message is None:
            message = f"Vector dimension mismatch. Expected {expected}, got {actual}"
        super().__init__(message, correlation_id)
        self.expected = expected
        self.actual = actual


class EmptyVectorException(StorageException):
    """Raised when a zero-length vector would establish the store dimension."""

    def __init__(self, message: str = "Cannot add an empty vector", correlation_id: Optional[str] = None):
        super().__init__(message, correlation_id)


class IndexOutOfBoundsException(StorageException):
    """Raised when get or remove references a missing position."""

    def __init__(self, index, length: int, correlation_id: Optional[str] = None):
        super().__init__(
            f"Index {index!r} out of bounds for store of length {length}",
            correlation_id
        )
        self.index = index
        self.length = length
