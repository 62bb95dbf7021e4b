"""Two-, three- and four-component vectors and small scalar helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, with halves rounded away from zero."""
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += math.copysign(1.0, value)
    return float(whole)


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def vec3(self) -> Vec3:
        """Return this vector as a Vec3 with a zero Z component."""
        return Vec3(self.x, self.y, 0.0)

    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def norm(self) -> Vec2:
        """Return the unit vector in this direction, or zero for a zero vector."""
        length = self.length()
        if length == 0:
            return Vec2()
        return Vec2(self.x / length, self.y / length)

    def dist(self, other: Vec2) -> float:
        return self.sub(other).length()

    def dist_sq(self, other: Vec2) -> float:
        return self.sub(other).length_sq()

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_sq(self) -> float:
        """Return the squared length, avoiding the square root."""
        return self.x * self.x + self.y * self.y

    def scaled(self, s: float) -> Vec2:
        return Vec2(s * self.x, s * self.y)

    def scaled_xy(self, s: Vec2) -> Vec2:
        """Scale each component by the matching component of ``s``."""
        return Vec2(self.x * s.x, self.y * s.y)

    def mult(self, s: Vec2) -> Vec2:
        """Multiply component-wise."""
        return Vec2(self.x * s.x, self.y * s.y)

    def rotated(self, radians: float) -> Vec2:
        """Rotate counter-clockwise by the given angle."""
        sin = math.sin(radians)
        cos = math.cos(radians)
        return Vec2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def angle(self) -> float:
        """Return the angle of the vector from the positive X axis."""
        return math.atan2(self.y, self.x)

    def snap(self) -> Vec2:
        """Round both components to the nearest integer (halves away from zero)."""
        return Vec2(_round_half_away(self.x), _round_half_away(self.y))

    def __add__(self, other: Vec2) -> Vec2:
        return self.add(other)

    def __sub__(self, other: Vec2) -> Vec2:
        return self.sub(other)

    def __mul__(self, s: float) -> Vec2:
        return self.scaled(s)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class Vec3:
    """A 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def angle(self, other: Vec3) -> float:
        """Return the angle between the two vectors, in radians."""
        cosine = self.dot(other) / (self.length() * other.length())
        return math.acos(max(-1.0, min(1.0, cosine)))

    def theta(self) -> float:
        """Return the angle of the XY projection from the positive X axis."""
        return math.atan2(self.y, self.x)

    def rotate2d(self, theta: float) -> Vec3:
        """Rotate on the XY plane by theta, keeping Z."""
        cos = math.cos(theta)
        sin = math.sin(theta)
        return Vec3(self.x * cos - self.y * sin, self.x * sin + self.y * cos, self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def vec2(self) -> Vec2:
        """Drop the Z component."""
        return Vec2(self.x, self.y)

    def unit(self) -> Vec3:
        """Return the unit vector. Raises ZeroDivisionError for a zero vector."""
        length = self.length()
        return Vec3(self.x / length, self.y / length, self.z / length)

    def scaled(self, x: float, y: float, z: float) -> Vec3:
        """Scale each component by its own factor."""
        return Vec3(self.x * x, self.y * y, self.z * z)

    def mult(self, s: Vec3) -> Vec3:
        """Multiply component-wise."""
        return Vec3(self.x * s.x, self.y * s.y, self.z * s.z)

    def __add__(self, other: Vec3) -> Vec3:
        return self.add(other)

    def __sub__(self, other: Vec3) -> Vec3:
        return self.sub(other)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Vec4:
    """A 4D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(frozen=True)
class IVec2:
    """A 2D vector of integers."""

    x: int = 0
    y: int = 0

    def add(self, other: IVec2) -> IVec2:
        return IVec2(self.x + other.x, self.y + other.y)

    def sub(self, other: IVec2) -> IVec2:
        return IVec2(self.x - other.x, self.y - other.y)

    def __add__(self, other: IVec2) -> IVec2:
        return self.add(other)

    def __sub__(self, other: IVec2) -> IVec2:
        return self.sub(other)


def v2(x: float, y: float) -> Vec2:
    """Shorthand for Vec2(x, y)."""
    return Vec2(x, y)


def angle(a: Vec2, b: Vec2) -> float:
    """Return the signed angle from b to a, wrapped into (-pi, pi]."""
    result = a.angle() - b.angle()
    if result > math.pi:
        result -= 2 * math.pi
    elif result <= -math.pi:
        result += 2 * math.pi
    return result


def clamp(low: T, high: T, value: T) -> T:
    """Limit the value to the range [low, high]."""
    return min(high, max(low, value))  # type: ignore[type-var]