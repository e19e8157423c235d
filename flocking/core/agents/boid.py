"""
Boid agent class implementing grouped flocking behavior.
"""

from typing import Iterable, Sequence

from .base import Agent
from ..vector import Vector2


class Boid(Agent):
    """
    A boid that exhibits flocking behavior.

    Implements Reynolds' boid rules:
    - Separation: Avoid crowding neighbors
    - Alignment: Steer toward average heading of neighbors
    - Cohesion: Steer toward average position of same-color neighbors

    Cohesion only counts neighbors sharing this boid's color, so each color
    forms its own flock while separation and alignment act across colors.
    """

    def __init__(self, position: Vector2, velocity: Vector2, color: str, config: dict):
        """
        Initialize a boid.

        Args:
            position: Initial position
            velocity: Initial velocity
            color: Group tag, also used as the drawing color
            config: Configuration dictionary
        """
        super().__init__(position, velocity, config["maxSpeed"], config["maxForce"],
                         config["agentRadius"])
        self.color = color
        self.config = config

    def flock(self, finder, targets: Iterable[Vector2] = ()) -> Vector2:
        """
        Compute the combined, weighted steering force for this tick.

        Does not modify the boid; the caller applies the returned force once
        every boid's force for the tick is known.

        Args:
            finder: NeighborFinder rebuilt for the current tick
            targets: Points every boid seeks

        Returns:
            Weighted sum of separation, alignment, cohesion and seek forces
        """
        cfg = self.config

        sep = self.separation(finder.candidates(self.position, cfg["separationRadius"]))
        ali = self.alignment(finder.candidates(self.position, cfg["alignmentRadius"]))
        coh = self.cohesion(finder.candidates(self.position, cfg["cohesionRadius"]))

        force = Vector2(0, 0)
        force.add(sep.multiply(cfg["separationWeight"]))
        force.add(ali.multiply(cfg["alignmentWeight"]))
        force.add(coh.multiply(cfg["cohesionWeight"]))
        for target in targets:
            force.add(self.seek(target).multiply(cfg["seekWeight"]))
        return force

    def separation(self, neighbors: Sequence["Boid"]) -> Vector2:
        """
        Calculate separation steering to avoid crowding neighbors.

        Args:
            neighbors: Candidate neighbors

        Returns:
            Separation steering force
        """
        steer = Vector2(0, 0)
        count = 0

        for other in neighbors:
            d = Vector2.distance(self.position, other.position)
            if 0 < d < self.config["separationRadius"]:
                diff = Vector2.difference(self.position, other.position)
                diff.normalize().divide(d)  # Weight by distance
                steer.add(diff)
                count += 1

        if count > 0:
            steer.divide(count)

        if steer.magnitude() > 0:
            steer.normalize().multiply(self.max_speed)
            steer.subtract(self.velocity).limit(self.max_force)
        return steer

    def alignment(self, neighbors: Sequence["Boid"]) -> Vector2:
        """
        Calculate alignment steering toward average neighbor heading.

        Args:
            neighbors: Candidate neighbors

        Returns:
            Alignment steering force
        """
        total = Vector2(0, 0)
        count = 0

        for other in neighbors:
            d = Vector2.distance(self.position, other.position)
            if 0 < d < self.config["alignmentRadius"]:
                total.add(other.velocity)
                count += 1

        if count == 0:
            return Vector2(0, 0)

        total.divide(count).normalize().multiply(self.max_speed)
        return self.steering(total)

    def cohesion(self, neighbors: Sequence["Boid"]) -> Vector2:
        """
        Calculate cohesion steering toward the average same-color position.

        Args:
            neighbors: Candidate neighbors

        Returns:
            Cohesion steering force
        """
        center = Vector2(0, 0)
        count = 0

        for other in neighbors:
            if other.color != self.color:
                continue
            d = Vector2.distance(self.position, other.position)
            if 0 < d < self.config["cohesionRadius"]:
                center.add(other.position)
                count += 1

        if count == 0:
            return Vector2(0, 0)

        return self.seek(center.divide(count))
