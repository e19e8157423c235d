"""
Neighbor lookup strategies for the flocking rules.

A finder is rebuilt once per tick from the agents' current positions and
then queried for every agent. It only has to return a superset of the
agents within the requested radius; each rule applies its own exact
distance and group checks to the candidates.
"""

import math
from collections import defaultdict
from typing import Any, List, Sequence, Tuple

from .vector import Vector2


class NeighborFinder:
    """Base class for neighbor lookup strategies."""

    def rebuild(self, agents: Sequence[Any]) -> None:
        """
        Index the agents for the coming tick.

        Args:
            agents: Agents with a ``position`` attribute (Vector2)
        """
        raise NotImplementedError

    def candidates(self, position: Vector2, radius: float) -> List[Any]:
        """
        Return agents that may lie within ``radius`` of ``position``.

        Args:
            position: Center of the query
            radius: Search radius

        Returns:
            List of agents, possibly including the querying agent itself
        """
        raise NotImplementedError


class LinearScan(NeighborFinder):
    """Every agent is a candidate for every query: O(n) per query."""

    def __init__(self):
        self.agents: List[Any] = []

    def rebuild(self, agents: Sequence[Any]) -> None:
        self.agents = list(agents)

    def candidates(self, position: Vector2, radius: float) -> List[Any]:
        return self.agents


class SpatialGrid(NeighborFinder):
    """
    Spatial hash grid for neighbor lookup.

    Divides the world into square cells and only checks the cells that
    can hold agents within the query radius.
    """

    def __init__(self, width: float, height: float, cell_size: float):
        """
        Initialize the spatial grid.

        Args:
            width: Width of the simulation area
            height: Height of the simulation area
            cell_size: Size of each grid cell
        """
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.grid = defaultdict(list)
        self.cols = int(width / cell_size) + 1
        self.rows = int(height / cell_size) + 1

    def clear(self) -> None:
        """Clear all agents from the grid."""
        self.grid.clear()

    def _hash(self, x: float, y: float) -> Tuple[int, int]:
        """
        Convert world coordinates to grid cell coordinates.

        Positions just outside the world (inside the wrap margin) are
        clamped into the border cells.

        Args:
            x: X position in world coordinates
            y: Y position in world coordinates

        Returns:
            Tuple of (column, row) cell indices
        """
        col = int(math.floor(x / self.cell_size))
        row = int(math.floor(y / self.cell_size))
        return (max(0, min(col, self.cols - 1)), max(0, min(row, self.rows - 1)))

    def insert(self, agent: Any) -> None:
        """Insert an agent into the grid based on its position."""
        cell = self._hash(agent.position.x, agent.position.y)
        self.grid[cell].append(agent)

    def rebuild(self, agents: Sequence[Any]) -> None:
        self.clear()
        for agent in agents:
            self.insert(agent)

    def candidates(self, position: Vector2, radius: float) -> List[Any]:
        found = []
        for cell in self._cells_within(self._hash(position.x, position.y), radius):
            for agent in self.grid.get(cell, []):
                if Vector2.distance(position, agent.position) < radius:
                    found.append(agent)
        return found

    def _cells_within(self, cell: Tuple[int, int], radius: float) -> List[Tuple[int, int]]:
        """
        Get a cell and every cell close enough to hold agents within radius.

        Args:
            cell: The center cell as (column, row)
            radius: Search radius

        Returns:
            List of cell coordinates to check
        """
        span = max(1, int(math.ceil(radius / self.cell_size)))
        col, row = cell
        cells = []
        for dc in range(-span, span + 1):
            for dr in range(-span, span + 1):
                nc, nr = col + dc, row + dr
                if 0 <= nc < self.cols and 0 <= nr < self.rows:
                    cells.append((nc, nr))
        return cells


def make_neighbor_finder(config) -> NeighborFinder:
    """
    Build the neighbor finder named by ``config.neighborStrategy``.

    Args:
        config: FlockConfig

    Returns:
        A fresh NeighborFinder
    """
    if config.neighborStrategy == "grid":
        return SpatialGrid(config.worldWidth, config.worldHeight, config.gridCellSize)
    return LinearScan()
