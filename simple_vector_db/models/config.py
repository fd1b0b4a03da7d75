"""
Configuration classes for the vector store.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from ..exceptions import ConfigurationException


VALID_SEARCH_STRATEGIES = ["linear"]
VALID_METRICS = ["euclidean"]


@dataclass
class ObservabilityConfig:
    """Observability configuration for logging and metrics."""

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: Optional[str] = None

    # Metrics
    metrics_enabled: bool = True

    def validate(self) -> None:
        """Validate observability configuration parameters."""
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level.upper() not in valid_log_levels:
            raise ConfigurationException(
                f"Invalid log_level '{self.log_level}'. Must be one of: {valid_log_levels}"
            )

        valid_log_formats = ["json", "text"]
        if self.log_format not in valid_log_formats:
            raise ConfigurationException(
                f"Invalid log_format '{self.log_format}'. Must be one of: {valid_log_formats}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert observability config to dictionary."""
        return {
            "log_level": self.log_level,
            "log_format": self.log_format,
            "log_file": self.log_file,
            "metrics_enabled": self.metrics_enabled,
        }


@dataclass
class VectorStoreConfig:
    """Main configuration class for the vector store."""

    # Fixed dimension; inferred from the first add when None
    dimension: Optional[int] = None

    # Expected number of vectors, a sizing hint only
    initial_capacity: Optional[int] = None

    # Nearest-neighbor search
    search_strategy: str = "linear"
    metric: str = "euclidean"

    # Observability config
    observability: Optional[ObservabilityConfig] = None

    def __post_init__(self):
        """Initialize default configurations and validate."""
        if self.observability is None:
            self.observability = ObservabilityConfig()

        self.validate()

    def validate(self) -> None:
        """Validate the complete configuration."""
        if self.dimension is not None:
            if isinstance(self.dimension, bool) or not isinstance(self.dimension, int):
                raise ConfigurationException("dimension must be an integer")
            if self.dimension <= 0:
                raise ConfigurationException("dimension must be greater than 0")

        if self.initial_capacity is not None:
            if isinstance(self.initial_capacity, bool) or not isinstance(self.initial_capacity, int):
                raise ConfigurationException("initial_capacity must be an integer")
            if self.initial_capacity < 0:
                raise ConfigurationException("initial_capacity cannot be negative")

        if self.search_strategy not in VALID_SEARCH_STRATEGIES:
            raise ConfigurationException(
                f"Invalid search_strategy '{self.search_strategy}'. "
                f"Must be one of: {VALID_SEARCH_STRATEGIES}"
            )

        if self.metric not in VALID_METRICS:
            raise ConfigurationException(
                f"Invalid metric '{self.metric}'. Must be one of: {VALID_METRICS}"
            )

        if self.observability:
            self.observability.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        config_dict = {
            "dimension": self.dimension,
            "initial_capacity": self.initial_capacity,
            "search_strategy": self.search_strategy,
            "metric": self.metric,
        }

        if self.observability:
            config_dict["observability"] = self.observability.to_dict()

        return config_dict

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "VectorStoreConfig":
        """Create configuration from dictionary."""
        config_dict = dict(config_dict)

        observability_config = None
        if "observability" in config_dict:
            observability_dict = config_dict.pop("observability")
            if observability_dict is not None:
                observability_config = ObservabilityConfig(**observability_dict)

        return cls(observability=observability_config, **config_dict)
