"""
Storage layer components for vector stores.
"""

from .interface import VectorStoreInterface
from .memory import InMemoryVectorStore

__all__ = [
    "VectorStoreInterface",
    "InMemoryVectorStore",
]
