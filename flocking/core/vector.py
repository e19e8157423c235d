"""
Mutable 2D vector used by the flocking core.

Instance methods named as verbs (add, subtract, normalize, ...) mutate the
receiver and return it so calls can be chained. Static methods named as
nouns (sum, difference, normalized, ...) always return a new vector and
never touch their inputs.
"""

import math
from typing import Optional, Tuple, Union

Number = Union[int, float]


class Vector2:
    """
    A 2D vector with x and y components.

    Division by a zero component is skipped for that component, and
    normalizing a zero-length vector leaves it unchanged, so every
    operation is total.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: Number = 0.0, y: Number = 0.0):
        self.x = float(x)
        self.y = float(y)

    # ------------------------------------------------------------------
    # In-place operations
    # ------------------------------------------------------------------

    def set(self, x: Number, y: Number) -> "Vector2":
        self.x = float(x)
        self.y = float(y)
        return self

    def negate(self) -> "Vector2":
        self.x = -self.x
        self.y = -self.y
        return self

    def add(self, other: Union["Vector2", Number]) -> "Vector2":
        """
        Add another vector component-wise, or a scalar to both components.

        Args:
            other: Vector or scalar to add

        Returns:
            This vector
        """
        if isinstance(other, Vector2):
            self.x += other.x
            self.y += other.y
        else:
            self.x += other
            self.y += other
        return self

    def subtract(self, other: Optional[Union["Vector2", Number]] = None) -> "Vector2":
        """
        Subtract another vector component-wise, or a scalar from both.

        A missing operand counts as zero, so ``v.subtract()`` is a no-op.

        Args:
            other: Vector or scalar to subtract

        Returns:
            This vector
        """
        if other is None:
            return self
        if isinstance(other, Vector2):
            self.x -= other.x
            self.y -= other.y
        else:
            self.x -= other
            self.y -= other
        return self

    def multiply(self, other: Union["Vector2", Number]) -> "Vector2":
        if isinstance(other, Vector2):
            self.x *= other.x
            self.y *= other.y
        else:
            self.x *= other
            self.y *= other
        return self

    def divide(self, other: Union["Vector2", Number]) -> "Vector2":
        """
        Divide component-wise, skipping any component whose divisor is zero.

        Args:
            other: Vector or scalar divisor

        Returns:
            This vector
        """
        if isinstance(other, Vector2):
            if other.x != 0:
                self.x /= other.x
            if other.y != 0:
                self.y /= other.y
        elif other != 0:
            self.x /= other
            self.y /= other
        return self

    def normalize(self) -> "Vector2":
        """Scale to unit length. A zero vector is left unchanged."""
        length = self.magnitude()
        if length != 0:
            self.multiply(1 / length)
        return self

    def limit(self, maximum: Number) -> "Vector2":
        """
        Clamp the length of this vector to ``maximum``.

        Vectors longer than ``maximum`` are rescaled to exactly that length;
        shorter ones are left untouched.

        Args:
            maximum: Largest allowed magnitude

        Returns:
            This vector
        """
        length_squared = self.magnitude_squared()
        if length_squared > maximum * maximum:
            self.divide(math.sqrt(length_squared)).multiply(maximum)
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def equals(self, other: "Vector2") -> bool:
        return self.x == other.x and self.y == other.y

    def dot_with(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross_with(self, other: "Vector2") -> float:
        return self.x * other.y - self.y * other.x

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def to_angle(self) -> float:
        """Heading in radians."""
        return -math.atan2(-self.y, self.x)

    def angle_to(self, other: "Vector2") -> float:
        """
        Unsigned angle between this vector and ``other`` in radians.

        Returns 0.0 when either vector has zero length.
        """
        lengths = self.magnitude() * other.magnitude()
        if lengths == 0:
            return 0.0
        cosine = max(-1.0, min(1.0, self.dot_with(other) / lengths))
        return math.acos(cosine)

    def min_component(self) -> float:
        return min(self.x, self.y)

    def max_component(self) -> float:
        return max(self.x, self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    # ------------------------------------------------------------------
    # Value-returning operations
    # ------------------------------------------------------------------

    @staticmethod
    def negated(v: "Vector2") -> "Vector2":
        return Vector2(-v.x, -v.y)

    @staticmethod
    def sum(a: "Vector2", b: Union["Vector2", Number]) -> "Vector2":
        return a.copy().add(b)

    @staticmethod
    def difference(a: "Vector2", b: Optional[Union["Vector2", Number]] = None) -> "Vector2":
        return a.copy().subtract(b)

    @staticmethod
    def product(a: "Vector2", b: Union["Vector2", Number]) -> "Vector2":
        return a.copy().multiply(b)

    @staticmethod
    def quotient(a: "Vector2", b: Union["Vector2", Number]) -> "Vector2":
        return a.copy().divide(b)

    @staticmethod
    def normalized(v: "Vector2") -> "Vector2":
        return v.copy().normalize()

    @staticmethod
    def limited(v: "Vector2", maximum: Number) -> "Vector2":
        return v.copy().limit(maximum)

    @staticmethod
    def equal(a: "Vector2", b: "Vector2") -> bool:
        return a.equals(b)

    @staticmethod
    def dot(a: "Vector2", b: "Vector2") -> float:
        return a.dot_with(b)

    @staticmethod
    def cross(a: "Vector2", b: "Vector2") -> float:
        return a.cross_with(b)

    @staticmethod
    def length_squared(v: "Vector2") -> float:
        return v.magnitude_squared()

    @staticmethod
    def length(v: "Vector2") -> float:
        return v.magnitude()

    @staticmethod
    def heading(v: "Vector2") -> float:
        """Heading of ``v`` in radians, same as ``v.to_angle()``."""
        return v.to_angle()

    @staticmethod
    def distance(a: "Vector2", b: "Vector2") -> float:
        """
        Distance between two points.

        Args:
            a: First point
            b: Second point

        Returns:
            Magnitude of ``b - a``; neither input is modified
        """
        return b.copy().subtract(a).magnitude()

    # ------------------------------------------------------------------
    # Operators (always return new vectors)
    # ------------------------------------------------------------------

    def __add__(self, other):
        return Vector2.sum(self, other)

    def __sub__(self, other):
        return Vector2.difference(self, other)

    def __mul__(self, other):
        return Vector2.product(self, other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return Vector2.quotient(self, other)

    def __neg__(self):
        return Vector2.negated(self)

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"
