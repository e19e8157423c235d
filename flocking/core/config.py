"""
Configuration classes and defaults for the flocking simulation.
"""

import math
from dataclasses import dataclass, field, fields
from typing import List, Literal, Optional


class ConfigurationError(ValueError):
    """Raised when a flock is built from an invalid configuration."""


# Rule weights
SEPARATION_WEIGHT = 2.0
ALIGNMENT_WEIGHT = 1.0
COHESION_WEIGHT = 0.8
SEEK_WEIGHT = 1.0

# Rule radii
SEPARATION_RADIUS = 30.0
ALIGNMENT_RADIUS = 50.0
COHESION_RADIUS = 70.0

# One color per flocking group; agents only cohere with their own color
DEFAULT_PALETTE = ["#ff704f", "#89c3ff", "#ffcd05"]

# Numeric fields that must hold finite values
FINITE_FIELDS = (
    "worldWidth", "worldHeight",
    "initialVelocityMin", "initialVelocityMax",
    "maxSpeed", "maxForce", "agentRadius",
    "separationRadius", "alignmentRadius", "cohesionRadius", "gridCellSize",
    "separationWeight", "alignmentWeight", "cohesionWeight", "seekWeight",
)


@dataclass
class FlockConfig:
    """Configuration for the flocking simulation."""

    # World settings
    worldWidth: float = 700.0
    worldHeight: float = 700.0

    # Population
    agentCount: int = 50
    palette: List[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    initialVelocityMin: float = -1.0
    initialVelocityMax: float = 9.0
    seed: Optional[int] = None

    # Movement parameters
    maxSpeed: float = 10.5
    maxForce: float = 10.0
    agentRadius: float = 10.0

    # Neighbor detection
    separationRadius: float = SEPARATION_RADIUS
    alignmentRadius: float = ALIGNMENT_RADIUS
    cohesionRadius: float = COHESION_RADIUS
    neighborStrategy: Literal["linear", "grid"] = "linear"
    gridCellSize: float = 70.0

    # Rule weights
    separationWeight: float = SEPARATION_WEIGHT
    alignmentWeight: float = ALIGNMENT_WEIGHT
    cohesionWeight: float = COHESION_WEIGHT
    seekWeight: float = SEEK_WEIGHT

    # Visualization
    fpsTarget: int = 60
    backgroundColor: List[int] = field(default_factory=lambda: [255, 255, 255])
    targetColor: List[int] = field(default_factory=lambda: [60, 60, 60])

    # Metrics and output
    trackingInterval: int = 10
    metricsCsvFile: str = "flock_metrics.csv"
    reportJsonFile: str = "flock_report.json"
    plotFile: str = "flock_metrics.png"

    def validate(self) -> None:
        """
        Check the configuration, raising on the first invalid value.

        Raises:
            ConfigurationError: If any value would make the simulation
                meaningless (negative population, empty world, ...)
        """
        if isinstance(self.agentCount, bool) or not isinstance(self.agentCount, int):
            raise ConfigurationError(f"agentCount must be an integer, got {self.agentCount!r}")
        if self.agentCount < 0:
            raise ConfigurationError(f"agentCount must be >= 0, got {self.agentCount}")
        for name in FINITE_FIELDS:
            if not math.isfinite(getattr(self, name)):
                raise ConfigurationError(f"{name} must be finite, got {getattr(self, name)}")
        if self.worldWidth <= 0 or self.worldHeight <= 0:
            raise ConfigurationError(
                f"world dimensions must be positive, got {self.worldWidth}x{self.worldHeight}"
            )
        for name in ("separationRadius", "alignmentRadius", "cohesionRadius",
                     "maxSpeed", "maxForce", "agentRadius"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {getattr(self, name)}")
        if not self.palette:
            raise ConfigurationError("palette must contain at least one color")
        if self.initialVelocityMin > self.initialVelocityMax:
            raise ConfigurationError(
                f"initialVelocityMin ({self.initialVelocityMin}) exceeds "
                f"initialVelocityMax ({self.initialVelocityMax})"
            )
        if self.neighborStrategy not in ("linear", "grid"):
            raise ConfigurationError(f"unknown neighborStrategy {self.neighborStrategy!r}")
        if self.gridCellSize <= 0:
            raise ConfigurationError(f"gridCellSize must be positive, got {self.gridCellSize}")
        if self.fpsTarget <= 0:
            raise ConfigurationError(f"fpsTarget must be positive, got {self.fpsTarget}")
        if self.trackingInterval <= 0:
            raise ConfigurationError(
                f"trackingInterval must be positive, got {self.trackingInterval}"
            )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            f.name: list(getattr(self, f.name)) if isinstance(getattr(self, f.name), list)
            else getattr(self, f.name)
            for f in fields(self)
        }

    def copy(self) -> "FlockConfig":
        """Independent copy, including the list fields."""
        return FlockConfig.from_dict(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict) -> "FlockConfig":
        """Create config from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


# Default configuration for the interactive window
DEFAULT_CONFIG = FlockConfig()

# Configuration for reproducible headless runs
HEADLESS_CONFIG = FlockConfig(seed=42)
