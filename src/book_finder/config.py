"""
Configuration for book-finder.
"""

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .catalog import Catalog, load_default_catalog
from .pipeline import RecommendationPipeline
from .sampler import DEFAULT_MAX_RESULTS

PLUGIN_NAME = "datasette-book-finder"

DEFAULT_ERROR_MESSAGE = "An error occurred while fetching recommendations."


@dataclass
class ServiceConfig:
    """Request handling around the pipeline (latency and error injection)."""

    simulated_delay_seconds: float = 0.5
    failure_rate: float = 0.0  # 0.0 never fails, 1.0 always fails
    error_message: str = DEFAULT_ERROR_MESSAGE


@dataclass
class FinderConfig:
    """Complete book-finder configuration."""

    max_results: int = DEFAULT_MAX_RESULTS
    catalog_path: Path | None = None  # None uses the bundled catalog
    seed: int | None = None

    service: ServiceConfig = field(default_factory=ServiceConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FinderConfig":
        """Create config from a dictionary (e.g., from YAML)."""
        config = cls()

        if "max_results" in data:
            config.max_results = int(data["max_results"])
        if data.get("catalog_path"):
            config.catalog_path = Path(data["catalog_path"])
        if data.get("seed") is not None:
            config.seed = int(data["seed"])

        if "service" in data:
            service = data["service"] or {}
            config.service = ServiceConfig(
                simulated_delay_seconds=float(service.get("simulated_delay_seconds", 0.5)),
                failure_rate=float(service.get("failure_rate", 0.0)),
                error_message=service.get("error_message", DEFAULT_ERROR_MESSAGE),
            )

        return config

    @classmethod
    def from_yaml(cls, path: Path) -> "FinderConfig":
        """Load config from a YAML file (datasette.yaml format)."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        plugin_config = (data.get("plugins") or {}).get(PLUGIN_NAME) or {}
        return cls.from_dict(plugin_config)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "max_results": self.max_results,
            "catalog_path": str(self.catalog_path) if self.catalog_path else None,
            "seed": self.seed,
            "service": {
                "simulated_delay_seconds": self.service.simulated_delay_seconds,
                "failure_rate": self.service.failure_rate,
                "error_message": self.service.error_message,
            },
        }

    def make_rng(self) -> random.Random:
        """Random source for sampling; seeded when a seed is configured."""
        return random.Random(self.seed)

    def get_catalog(self) -> Catalog:
        """Load the configured catalog, or the bundled one."""
        if self.catalog_path is not None:
            return Catalog.load(self.catalog_path)
        return load_default_catalog()

    def build_pipeline(
        self,
        catalog: Catalog | None = None,
        rng: random.Random | None = None,
    ) -> RecommendationPipeline:
        """Create a pipeline from this configuration."""
        return RecommendationPipeline(
            catalog=catalog if catalog is not None else self.get_catalog(),
            max_results=self.max_results,
            rng=rng or self.make_rng(),
        )
