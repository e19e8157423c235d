"""
The Flock: a fixed population of boids advanced one tick at a time.
"""

import random
from typing import List, NamedTuple, Optional

from .agents.boid import Boid
from .config import FlockConfig, DEFAULT_CONFIG
from .neighbors import NeighborFinder, make_neighbor_finder
from .vector import Vector2


class AgentSnapshot(NamedTuple):
    """What a renderer needs to draw one agent."""

    x: float
    y: float
    radius: float
    color: str


class Flock:
    """
    Owns the boids and advances them together.

    Each call to ``step()`` computes every boid's steering force from the
    positions and velocities left by the previous tick, and only then
    integrates, resets acceleration and wraps every boid. The host drives
    the clock; the flock never schedules itself.
    """

    def __init__(self, config: Optional[FlockConfig] = None,
                 rng: Optional[random.Random] = None,
                 finder: Optional[NeighborFinder] = None):
        """
        Initialize the flock.

        Args:
            config: Flock configuration (uses a copy of the defaults if None)
            rng: Source of uniform random values for initial placement.
                Defaults to ``random.Random(config.seed)``.
            finder: Neighbor lookup strategy (built from the config if None)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config if config is not None else DEFAULT_CONFIG.copy()
        self.config.validate()
        self.config_dict = self.config.to_dict()

        self.width = self.config.worldWidth
        self.height = self.config.worldHeight
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.finder = finder if finder is not None else make_neighbor_finder(self.config)

        self.boids: List[Boid] = []
        self.targets: List[Vector2] = []
        self.tick = 0

        self._spawn_boids()

    def _spawn_boids(self) -> None:
        """Spawn the initial population, cycling through the palette."""
        palette = self.config.palette
        vmin = self.config.initialVelocityMin
        vmax = self.config.initialVelocityMax

        for i in range(self.config.agentCount):
            position = Vector2(self.rng.uniform(0, self.width), self.rng.uniform(0, self.height))
            velocity = Vector2(self.rng.uniform(vmin, vmax), self.rng.uniform(vmin, vmax))
            color = palette[i % len(palette)]
            self.boids.append(Boid(position, velocity, color, self.config_dict))

    def __len__(self) -> int:
        return len(self.boids)

    def add_target(self, point: Vector2) -> None:
        """Add a point every boid seeks from the next tick on."""
        self.targets.append(point.copy())

    def clear_targets(self) -> None:
        self.targets.clear()

    def step(self) -> None:
        """Advance every boid by one tick."""
        self.finder.rebuild(self.boids)
        forces = [boid.flock(self.finder, self.targets) for boid in self.boids]

        for boid, force in zip(self.boids, forces):
            boid.apply_force(force)
            boid.update()
            boid.wrap(self.width, self.height)

        self.tick += 1

    def run(self, ticks: int) -> None:
        """
        Advance the flock several ticks.

        Args:
            ticks: Number of ticks to advance
        """
        for _ in range(ticks):
            self.step()

    def snapshot(self) -> List[AgentSnapshot]:
        """
        Read-only view of every boid for rendering, in spawn order.

        Returns:
            One AgentSnapshot per boid
        """
        return [AgentSnapshot(b.position.x, b.position.y, b.radius, b.color) for b in self.boids]
