"""
Base Agent class for all simulation entities.
"""

from ..vector import Vector2


class Agent:
    """
    Base class for all agents in the simulation.

    Provides common functionality for position, velocity, acceleration,
    steering and toroidal wrap-around.
    """

    def __init__(self, position: Vector2, velocity: Vector2, max_speed: float,
                 max_force: float, radius: float):
        """
        Initialize an agent.

        Args:
            position: Initial position
            velocity: Initial velocity
            max_speed: Maximum speed of the agent
            max_force: Maximum steering force
            radius: Drawing radius, also the wrap margin at world edges
        """
        self.position = position
        self.velocity = velocity
        self.acceleration = Vector2(0, 0)
        self.max_speed = max_speed
        self.max_force = max_force
        self.radius = radius

    def apply_force(self, force: Vector2) -> None:
        """
        Apply a force to the agent's acceleration.

        Args:
            force: Force vector to apply
        """
        self.acceleration.add(force)

    def update(self) -> None:
        """Integrate acceleration into velocity and position, then reset it."""
        self.velocity.add(self.acceleration)
        self.velocity.limit(self.max_speed)
        self.position.add(self.velocity)
        self.acceleration.set(0, 0)

    def steering(self, desired: Vector2) -> Vector2:
        """
        Calculate steering force toward a desired velocity.

        Args:
            desired: The desired velocity vector

        Returns:
            Steering force vector, clamped to ``max_force``
        """
        return Vector2.difference(desired, self.velocity).limit(self.max_force)

    def seek(self, target: Vector2) -> Vector2:
        """
        Steer toward a target point at full speed.

        Args:
            target: Point to steer toward

        Returns:
            Steering force vector
        """
        desired = Vector2.difference(target, self.position)
        desired.normalize().multiply(self.max_speed)
        return self.steering(desired)

    def wrap(self, width: float, height: float) -> None:
        """
        Re-enter from the opposite edge once fully outside the world.

        Args:
            width: World width
            height: World height
        """
        r = self.radius
        if self.position.x < -r:
            self.position.x = width + r
        elif self.position.x > width + r:
            self.position.x = -r
        if self.position.y < -r:
            self.position.y = height + r
        elif self.position.y > height + r:
            self.position.y = -r
