"""
2D vector primitive
"""

from __future__ import annotations
import math


class Vec2:
    """Mutable 2D point / displacement.

    In-place operators return ``self`` so calls can be chained::

        step = Vec2.subtract(target, pos).normalize().scale(speed * dt)
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Vec2({self.x:.3f}, {self.y:.3f})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def add(self, v: Vec2) -> Vec2:
        self.x += v.x
        self.y += v.y
        return self

    def sub(self, v: Vec2) -> Vec2:
        self.x -= v.x
        self.y -= v.y
        return self

    def scale(self, s: float) -> Vec2:
        self.x *= s
        self.y *= s
        return self

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Scale to unit length. A zero vector stays (0, 0)."""
        l = self.length() or 1.0
        self.x /= l
        self.y /= l
        return self

    def dot(self, v: Vec2) -> float:
        return self.x * v.x + self.y * v.y

    def rotated(self, angle: float) -> Vec2:
        """Return a new vector rotated by *angle* radians"""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)

    @staticmethod
    def subtract(a: Vec2, b: Vec2) -> Vec2:
        """Return ``a - b`` as a new vector"""
        return Vec2(a.x - b.x, a.y - b.y)
