"""
End-to-end integration tests for the vector store.
"""

import math

import numpy as np
import pytest

from simple_vector_db import (
    VectorStoreFactory,
    VectorStoreConfig,
    ObservabilityConfig,
    ObservabilityManager,
    InMemoryVectorStore,
    StoreState,
    DimensionMismatchException,
    IndexOutOfBoundsException,
)


class TestEndToEndWorkflows:
    """End-to-end tests for complete store workflows."""

    def setup_method(self):
        """Set up test fixtures."""
        self.config = VectorStoreConfig(
            initial_capacity=16,
            observability=ObservabilityConfig(log_level="DEBUG", log_format="text")
        )
        self.observability = ObservabilityManager(self.config.observability)
        self.store = VectorStoreFactory.create_vector_store(
            self.config, observability_manager=self.observability
        )

    def teardown_method(self):
        """Clean up test fixtures."""
        self.observability.shutdown()

    def test_axis_aligned_lookup(self):
        """Test the basic add then query workflow."""
        assert self.store.add([1, 0, 0]) == 0
        assert self.store.add([0, 1, 0]) == 1
        assert self.store.add([0, 0, 1]) == 2

        result = self.store.nearest([0.9, 0.1, 0])

        assert result.index == 0
        assert result.distance == pytest.approx(math.sqrt(0.01 + 0.01))
        assert result.to_dict() == {
            "index": 0,
            "vector": [1.0, 0.0, 0.0],
            "distance": result.distance,
        }

    def test_dimension_fixed_by_first_insert(self):
        """Test that the first vector fixes the dimension."""
        self.store.add([1, 2])

        with pytest.raises(DimensionMismatchException):
            self.store.add([1, 2, 3])

        assert len(self.store) == 1

    def test_remove_from_front(self):
        """Test positional shifting after removing index 0."""
        originals = [[1.0, 1.0], [2.0, 2.0], [3.0, 3.0]]
        for vector in originals:
            self.store.add(vector)

        removed = self.store.remove(0)

        np.testing.assert_array_equal(removed, originals[0])
        np.testing.assert_array_equal(self.store.get(0), originals[1])
        np.testing.assert_array_equal(self.store.get(1), originals[2])
        with pytest.raises(IndexOutOfBoundsException):
            self.store.get(2)

    def test_full_lifecycle(self):
        """Test empty, populated, empty and repopulated with a new dimension."""
        assert self.store.state is StoreState.EMPTY
        assert self.store.nearest([1.0]) is None

        self.store.add([1.0, 2.0, 3.0])
        self.store.add([4.0, 5.0, 6.0])
        assert self.store.state is StoreState.POPULATED

        self.store.remove(1)
        self.store.remove(0)
        assert self.store.state is StoreState.EMPTY
        assert self.store.dimension is None

        self.store.add([7.0])
        assert self.store.dimension == 1
        assert self.store.nearest([6.0]).distance == pytest.approx(1.0)
        assert self.store.health_check()

    def test_digit_recognition(self):
        """Test nearest-neighbor classification of flattened 8x8 images."""
        store = InMemoryVectorStore()
        zero = store.add([1.0] * 64)
        one = store.add([2.0] * 64)

        assert store.nearest([1.05] * 64).index == zero
        assert store.nearest([2.05] * 64).index == one

    def test_every_added_vector_is_its_own_neighbor(self):
        """Test exact-match lookups over a random collection."""
        rng = np.random.default_rng(42)
        vectors = rng.normal(size=(50, 8))
        for vector in vectors:
            self.store.add(vector)

        for i, vector in enumerate(vectors):
            result = self.store.nearest(vector)
            assert result.index == i
            assert result.distance == 0.0

    def test_metrics_reflect_workflow(self):
        """Test the metrics snapshot after a workflow."""
        for i in range(5):
            self.store.add([float(i), 0.0])
        self.store.nearest([2.2, 0.0])
        self.store.remove(4)

        metrics = self.observability.get_system_metrics()

        assert metrics.vectors_added == 5
        assert metrics.vectors_removed == 1
        assert metrics.nearest_queries == 1
        assert metrics.memory_usage_mb > 0
