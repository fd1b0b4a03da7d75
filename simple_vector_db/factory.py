"""
Factory classes for creating vector store components based on configuration.
"""

from typing import Dict, List, Optional, Type

from .models.config import VectorStoreConfig
from .storage.interface import VectorStoreInterface
from .storage.memory import InMemoryVectorStore
from .services.distance import DistanceMetric, EuclideanDistance
from .services.search import SearchStrategy, LinearScanSearch
from .exceptions import ConfigurationException


class SearchStrategyFactory:
    """Factory for search strategies and distance metrics."""

    _strategy_registry: Dict[str, Type[SearchStrategy]] = {
        "linear": LinearScanSearch,
    }

    _metric_registry: Dict[str, Type[DistanceMetric]] = {
        "euclidean": EuclideanDistance,
    }

    @classmethod
    def create(cls, strategy: str = "linear", metric: str = "euclidean") -> SearchStrategy:
        """
        Create a search strategy bound to a distance metric.

        Args:
            strategy: Registered strategy name
            metric: Registered metric name

        Returns:
            Search strategy instance

        Raises:
            ConfigurationException: If either name is not registered
        """
        strategy_class = cls._strategy_registry.get(strategy.lower())
        if strategy_class is None:
            raise ConfigurationException(
                f"Unsupported search strategy '{strategy}'. "
                f"Available strategies: {list(cls._strategy_registry.keys())}"
            )

        metric_class = cls._metric_registry.get(metric.lower())
        if metric_class is None:
            raise ConfigurationException(
                f"Unsupported metric '{metric}'. "
                f"Available metrics: {list(cls._metric_registry.keys())}"
            )

        return strategy_class(metric_class())

    @classmethod
    def register_strategy(cls, name: str, strategy_class: Type[SearchStrategy]) -> None:
        """Register a new search strategy."""
        if not issubclass(strategy_class, SearchStrategy):
            raise ConfigurationException("Strategy class must implement SearchStrategy")

        cls._strategy_registry[name.lower()] = strategy_class

    @classmethod
    def register_metric(cls, name: str, metric_class: Type[DistanceMetric]) -> None:
        """Register a new distance metric."""
        if not issubclass(metric_class, DistanceMetric):
            raise ConfigurationException("Metric class must implement DistanceMetric")

        cls._metric_registry[name.lower()] = metric_class

    @classmethod
    def get_available_strategies(cls) -> List[str]:
        return list(cls._strategy_registry.keys())

    @classmethod
    def get_available_metrics(cls) -> List[str]:
        return list(cls._metric_registry.keys())


class VectorStoreFactory:
    """Factory for creating vector store instances based on configuration."""

    # Registry of available vector store implementations
    _store_registry: Dict[str, Type[VectorStoreInterface]] = {
        "memory": InMemoryVectorStore,
    }

    @classmethod
    def create_vector_store(
        cls,
        config: Optional[VectorStoreConfig] = None,
        store_type: str = "memory",
        observability_manager=None
    ) -> VectorStoreInterface:
        """
        Create a vector store instance based on configuration.

        Args:
            config: Vector store configuration (defaults if None)
            store_type: Registered store type name
            observability_manager: Optional observability manager passed to the store

        Returns:
            Vector store instance

        Raises:
            ConfigurationException: If store type is not supported
        """
        if config is None:
            config = VectorStoreConfig()

        store_type = store_type.lower()
        if store_type not in cls._store_registry:
            raise ConfigurationException(
                f"Unsupported store type '{store_type}'. "
                f"Available types: {list(cls._store_registry.keys())}"
            )

        store_class = cls._store_registry[store_type]
        search_strategy = SearchStrategyFactory.create(config.search_strategy, config.metric)

        return store_class(
            dimension=config.dimension,
            initial_capacity=config.initial_capacity,
            search_strategy=search_strategy,
            observability_manager=observability_manager
        )

    @classmethod
    def register_store_type(
        cls,
        store_type: str,
        store_class: Type[VectorStoreInterface]
    ) -> None:
        """
        Register a new vector store type.

        Args:
            store_type: Name of the store type
            store_class: Vector store class to register
        """
        if not issubclass(store_class, VectorStoreInterface):
            raise ConfigurationException(
                "Store class must implement VectorStoreInterface"
            )

        cls._store_registry[store_type.lower()] = store_class

    @classmethod
    def get_available_store_types(cls) -> List[str]:
        return list(cls._store_registry.keys())

    @classmethod
    def is_store_type_supported(cls, store_type: str) -> bool:
        return store_type.lower() in cls._store_registry
