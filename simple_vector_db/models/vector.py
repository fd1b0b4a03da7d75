"""
Vector store state and query result models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any

import numpy as np


class StoreState(Enum):
    """Logical states of a vector store."""
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass
class NearestResult:
    """Result of a nearest-neighbor query."""

    index: int
    vector: np.ndarray
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary with plain Python values."""
        return {
            "index": self.index,
            "vector": self.vector.tolist(),
            "distance": self.distance,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NearestResult):
            return NotImplemented
        return (
            self.index == other.index
            and self.distance == other.distance
            and np.array_equal(self.vector, other.vector)
        )
