"""Config — load population-generation parameters from YAML files.

Everything the command-line generator needs (seed, population size,
output options) lives in YAML and is parsed into a typed dataclass here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


@dataclass
class GenerationConfig:
    """Top-level generation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        population: Number of individuals to generate.
        show_affinity: Whether to report each individual's best match.
    """

    seed: int = 42
    population: int = 8
    show_affinity: bool = True

    def __post_init__(self) -> None:
        """Reject populations that cannot be generated."""
        if self.population < 1:
            msg = f"population must be at least 1, got {self.population}"
            raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GenerationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GenerationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the population size is not positive.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        logger.debug("Loaded config from %s: %s", path, data)
        return cls(
            seed=data.get("seed", cls.seed),
            population=data.get("population", cls.population),
            show_affinity=data.get("show_affinity", cls.show_affinity),
        )
