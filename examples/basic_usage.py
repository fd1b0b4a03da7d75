#!/usr/bin/env python3
"""
Basic usage example for Simple Vector DB.

This example demonstrates:
- Configuring a store
- Adding and retrieving vectors
- Nearest-neighbor queries
- Removing vectors and index shifting
"""

from simple_vector_db import (
    VectorStoreFactory,
    VectorStoreConfig,
    ObservabilityConfig,
    ObservabilityManager,
    DimensionMismatchException,
)


def main():
    """Demonstrate basic vector store usage."""

    config = VectorStoreConfig(
        initial_capacity=8,
        observability=ObservabilityConfig(log_level="INFO", log_format="text")
    )

    with ObservabilityManager(config.observability) as observability:
        store = VectorStoreFactory.create_vector_store(config, observability_manager=observability)

        print("Adding vectors...")
        for vector in ([1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]):
            index = store.add(vector)
            print(f"  {vector} -> index {index}")

        result = store.nearest([0.9, 0.1, 0.0])
        print(f"Nearest to [0.9, 0.1, 0.0]: index {result.index}, distance {result.distance:.4f}")

        try:
            store.add([1.0, 2.0])
        except DimensionMismatchException as e:
            print(f"Rejected: {e}")

        removed = store.remove(0)
        print(f"Removed {removed.tolist()}; index 0 now holds {store.get(0).tolist()}")

        print(f"Store info: {store.get_storage_info()}")
        print(f"Metrics: {observability.get_system_metrics().to_dict()}")


if __name__ == "__main__":
    main()
