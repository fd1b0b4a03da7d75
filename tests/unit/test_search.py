"""
Unit tests for distance metrics and search strategies.
"""

import math

import numpy as np
import pytest

from simple_vector_db.services.distance import DistanceMetric, EuclideanDistance, euclidean
from simple_vector_db.services.search import SearchStrategy, LinearScanSearch
from simple_vector_db.exceptions import DimensionMismatchException


def _arrays(*vectors):
    return [np.array(v, dtype=np.float64) for v in vectors]


class TestEuclideanDistance:
    """Test cases for EuclideanDistance."""

    def setup_method(self):
        """Set up test fixtures."""
        self.metric = EuclideanDistance()

    def test_zero_distance_same_vectors(self):
        """Test identical vectors."""
        a, b = _arrays([1.0, 2.0, 3.0, 4.0, 5.0], [1.0, 2.0, 3.0, 4.0, 5.0])

        assert self.metric.distance(a, b) == 0.0

    def test_known_distance(self):
        """Test a hand-computed distance."""
        a, b = _arrays([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])

        assert self.metric.distance(a, b) == pytest.approx(math.sqrt(27.0))
        assert self.metric.squared_distance(a, b) == pytest.approx(27.0)

    def test_scaled_vectors(self):
        """Test distance between a vector and its double."""
        a, b = _arrays([1.0, 2.0, 3.0], [2.0, 4.0, 6.0])

        assert self.metric.distance(a, b) == pytest.approx(math.sqrt(14.0))

    def test_symmetry(self):
        """Test that distance is symmetric."""
        a, b = _arrays([0.3, -1.2], [2.5, 0.7])

        assert self.metric.distance(a, b) == self.metric.distance(b, a)

    def test_returns_python_float(self):
        """Test that results are plain floats."""
        a, b = _arrays([1.0], [2.0])

        assert type(self.metric.distance(a, b)) is float

    def test_length_mismatch(self):
        """Test vectors of different lengths."""
        a, b = _arrays([1.0, 2.0], [1.0, 2.0, 3.0])

        with pytest.raises(DimensionMismatchException):
            self.metric.distance(a, b)

    def test_module_level_helper(self):
        """Test the euclidean convenience function on plain lists."""
        assert euclidean([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)

    def test_metric_name(self):
        """Test metric naming."""
        assert self.metric.name == "euclidean"
        assert isinstance(self.metric, DistanceMetric)


class TestLinearScanSearch:
    """Test cases for LinearScanSearch."""

    def setup_method(self):
        """Set up test fixtures."""
        self.strategy = LinearScanSearch()

    def test_default_metric(self):
        """Test that the default metric is Euclidean."""
        assert isinstance(self.strategy.metric, EuclideanDistance)
        assert isinstance(self.strategy, SearchStrategy)
        assert self.strategy.name == "linear"

    def test_no_vectors(self):
        """Test searching an empty sequence."""
        assert self.strategy.search([], np.array([1.0])) is None

    def test_single_vector(self):
        """Test searching a single vector."""
        index, distance = self.strategy.search(_arrays([1.0, 1.0]), np.array([4.0, 5.0]))

        assert index == 0
        assert distance == pytest.approx(5.0)

    def test_finds_minimum(self):
        """Test selecting the closest vector."""
        vectors = _arrays([10.0, 10.0], [1.0, 1.0], [-3.0, 2.0])

        index, distance = self.strategy.search(vectors, np.array([0.0, 0.0]))

        assert index == 1
        assert distance == pytest.approx(math.sqrt(2.0))

    def test_ties_keep_first_occurrence(self):
        """Test that equal distances resolve to the earliest index."""
        vectors = _arrays([0.0, 2.0], [2.0, 0.0], [0.0, -2.0])

        index, _ = self.strategy.search(vectors, np.array([0.0, 0.0]))

        assert index == 0

    def test_digit_recognition(self):
        """Test classifying noisy 64-component images against references."""
        references = _arrays([1.0] * 64, [2.0] * 64)

        assert self.strategy.search(references, np.full(64, 1.05))[0] == 0
        assert self.strategy.search(references, np.full(64, 2.05))[0] == 1
