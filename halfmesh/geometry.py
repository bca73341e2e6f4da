"""Points and vectors in three-dimensional space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass
class Vector3D:
    """A direction with components ``x``, ``y`` and ``z``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vector3D:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vector3D(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector3D:
        if not isinstance(divisor, Real):
            return NotImplemented
        return Vector3D(self.x / divisor, self.y / divisor, self.z / divisor)

    def dot(self, other: Vector3D) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """Return the cross product ``self x other``."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> None:
        """Scale to unit length in place; a zero vector raises ZeroDivisionError."""
        norm = self.length()
        self.x /= norm
        self.y /= norm
        self.z /= norm

    def clear(self) -> None:
        """Set every component to zero."""
        self.x = self.y = self.z = 0.0

    def rotate(self, axis: Vector3D, theta: float) -> None:
        """Rotate in place by ``theta`` radians about ``axis`` through the origin."""
        cos_theta = math.cos(theta)
        sin_theta = math.sin(theta)
        dot = self.dot(axis)
        cross = self.cross(axis)
        self.x = self.x * cos_theta + axis.x * dot * (1.0 - cos_theta) - cross.x * sin_theta
        self.y = self.y * cos_theta + axis.y * dot * (1.0 - cos_theta) - cross.y * sin_theta
        self.z = self.z * cos_theta + axis.z * dot * (1.0 - cos_theta) - cross.z * sin_theta

    def set_normal(self, p1: Point3D, p2: Point3D, p3: Point3D) -> None:
        """Become the unit normal of the triangle ``p1``, ``p2``, ``p3``."""
        normal = (p2 - p1).cross(p3 - p2)
        normal.normalize()
        self.x, self.y, self.z = normal


@dataclass
class Point3D:
    """A position with coordinates ``x``, ``y`` and ``z``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3D | Point3D) -> Point3D:
        if not isinstance(other, (Vector3D, Point3D)):
            return NotImplemented
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: Vector3D | Point3D) -> Point3D:
        if not isinstance(other, (Vector3D, Point3D)):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: Point3D) -> Vector3D:
        if not isinstance(other, Point3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Point3D:
        if not isinstance(factor, Real):
            return NotImplemented
        return Point3D(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __imul__(self, factor: float) -> Point3D:
        if not isinstance(factor, Real):
            return NotImplemented
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    def __truediv__(self, divisor: float) -> Point3D:
        if not isinstance(divisor, Real):
            return NotImplemented
        return Point3D(self.x / divisor, self.y / divisor, self.z / divisor)

    def __itruediv__(self, divisor: float) -> Point3D:
        """Divide in place; dividing by zero leaves the point unchanged."""
        if not isinstance(divisor, Real):
            return NotImplemented
        if divisor != 0.0:
            self.x /= divisor
            self.y /= divisor
            self.z /= divisor
        return self

    def dist(self, other: Point3D) -> float:
        """Return the distance to another point."""
        return (other - self).length()

    def dist_to_segment(self, p1: Point3D, p2: Point3D) -> float:
        """Return the distance to the segment from ``p1`` to ``p2``."""
        direction = p2 - p1
        squared = direction.dot(direction)
        if squared == 0.0:
            return self.dist(p1)
        t = abs(direction.dot(p1 - self)) / squared
        t = max(0.0, min(1.0, t))
        projection = p1 + direction * t
        return min(self.dist(p1), self.dist(p2), self.dist(projection))

    def rotate(self, axis: Vector3D, theta: float) -> None:
        """Rotate in place by ``theta`` radians about ``axis`` through the origin."""
        moved = Vector3D(self.x, self.y, self.z)
        moved.rotate(axis, theta)
        self.x, self.y, self.z = moved


def circumcenter(p1: Point3D, p2: Point3D, p3: Point3D, p4: Point3D) -> Point3D:
    """Return the centre of the sphere through four points.

    Coplanar points raise ZeroDivisionError.
    """
    ba = p2 - p1
    ca = p3 - p1
    da = p4 - p1
    ba_len = ba.dot(ba)
    ca_len = ca.dot(ca)
    da_len = da.dot(da)
    cross_cd = ca.cross(da)
    cross_db = da.cross(ba)
    cross_bc = ba.cross(ca)
    denominator = 0.5 / ba.dot(cross_cd)
    offset = (cross_cd * ba_len + cross_db * ca_len + cross_bc * da_len) * denominator
    return p1 + offset