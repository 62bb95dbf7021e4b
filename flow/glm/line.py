"""Line segments in the plane."""

from __future__ import annotations

from dataclasses import dataclass

from flow.glm.vec import Vec2


@dataclass(frozen=True)
class Line2:
    """A 2D line segment from ``a`` to ``b``."""

    a: Vec2
    b: Vec2

    def intersects(self, other: Line2) -> bool:
        """Return True if the two segments intersect.

        Zero-length and parallel segments never intersect.
        """
        x1, y1 = self.a.x, self.a.y
        x2, y2 = self.b.x, self.b.y
        x3, y3 = other.a.x, other.a.y
        x4, y4 = other.b.x, other.b.y

        if (x1 == x2 and y1 == y2) or (x3 == x4 and y3 == y4):
            return False

        den = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
        if den == 0:
            return False

        ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / den
        ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / den
        return 0 <= ua <= 1 and 0 <= ub <= 1