"""Axis-aligned rectangles and boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from flow.glm.matrix import Mat4
from flow.glm.vec import Vec2, Vec3


def _min_max(a: float, b: float) -> tuple[float, float]:
    """Return the two numbers ordered as (smaller, larger)."""
    if a > b:
        return b, a
    return a, b


def _lerp(a: float, b: float, t: float) -> float:
    return (b - a) * t + a


@dataclass(frozen=True)
class Box:
    """An axis-aligned 3D box given by its minimum and maximum corners."""

    min: Vec3 = field(default_factory=Vec3)
    max: Vec3 = field(default_factory=Vec3)

    def rect(self) -> Rect:
        """Project the box onto the XY plane."""
        return Rect(Vec2(self.min.x, self.min.y), Vec2(self.max.x, self.max.y))

    def union(self, other: Box) -> Box:
        """Return the smallest box holding both boxes."""
        x1, _ = _min_max(self.min.x, other.min.x)
        _, x2 = _min_max(self.max.x, other.max.x)
        y1, _ = _min_max(self.min.y, other.min.y)
        _, y2 = _min_max(self.max.y, other.max.y)
        z1, _ = _min_max(self.min.z, other.min.z)
        _, z2 = _min_max(self.max.z, other.max.z)
        return Box(Vec3(x1, y1, z1), Vec3(x2, y2, z2))

    def apply(self, mat: Mat4) -> Box:
        """Transform both corners by the matrix."""
        return Box(mat.apply(self.min), mat.apply(self.max))


@dataclass
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners.

    The cut_* methods shrink the rectangle in place and return the part cut
    off; every other method returns a new rectangle.
    """

    min: Vec2 = field(default_factory=Vec2)
    max: Vec2 = field(default_factory=Vec2)

    def copy(self) -> Rect:
        return Rect(self.min, self.max)

    def tl(self) -> Vec2:
        """Return the top-left point."""
        return Vec2(self.min.x, self.max.y)

    def br(self) -> Vec2:
        """Return the bottom-right point."""
        return Vec2(self.max.x, self.min.y)

    def box(self) -> Box:
        """Return a box holding this rect, with Z set to 0."""
        return Box(Vec3(self.min.x, self.min.y, 0.0), Vec3(self.max.x, self.max.y, 0.0))

    def w(self) -> float:
        return self.max.x - self.min.x

    def h(self) -> float:
        return self.max.y - self.min.y

    def center(self) -> Vec2:
        return Vec2(self.min.x + self.w() / 2, self.min.y + self.h() / 2)

    def size(self) -> Vec2:
        return Vec2(self.w(), self.h())

    def with_center(self, v: Vec2) -> Rect:
        """Return a rect of the same size centered on v."""
        half_w = self.w() / 2
        half_h = self.h() / 2
        return r(v.x - half_w, v.y - half_h, v.x + half_w, v.y + half_h)

    def union(self, other: Rect) -> Rect:
        """Return the smallest rect containing both rects."""
        a = self.norm()
        b = other.norm()
        return r(
            min(a.min.x, b.min.x),
            min(a.min.y, b.min.y),
            max(a.max.x, b.max.x),
            max(a.max.y, b.max.y),
        )

    def moved(self, v: Vec2) -> Rect:
        return Rect(self.min.add(v), self.max.add(v))

    def fit_scale(self, other: Rect) -> float:
        """Return the uniform scale needed to fit this rect inside other."""
        return min(other.w() / self.w(), other.h() / self.h())

    def fit_int(self, other: Rect) -> Rect:
        """Fit into other with the same center, using a whole-number scale."""
        scale = math.floor(self.fit_scale(other))
        return self.scaled(scale).with_center(other.center())

    def fit(self, other: Rect) -> Rect:
        """Fit into other with the same center."""
        return self.scaled(self.fit_scale(other)).with_center(other.center())

    def scaled_to_fit(self, other: Rect) -> Rect:
        """Scale uniformly around the origin to fit inside other."""
        return self.scaled(self.fit_scale(other))

    def sub_square(self) -> Rect:
        """Return the largest centered square that fits inside the rect."""
        half = min(self.w(), self.h()) / 2
        return r(-half, -half, half, half).moved(self.center())

    def center_scaled(self, scale: float) -> Rect:
        """Scale around the center."""
        return self.center_scaled_xy(scale, scale)

    def center_scaled_xy(self, scale_x: float, scale_y: float) -> Rect:
        """Scale around the center with separate factors per axis."""
        c = self.center()
        half_w = self.w() * scale_x / 2.0
        half_h = self.h() * scale_y / 2.0
        return r(c.x - half_w, c.y - half_h, c.x + half_w, c.y + half_h)

    def scaled(self, scale: float) -> Rect:
        """Scale both corners around the origin."""
        return Rect(self.min.scaled(scale), self.max.scaled(scale))

    def scaled_xy(self, scale: Vec2) -> Rect:
        """Scale both corners around the origin, per axis."""
        return Rect(self.min.scaled_xy(scale), self.max.scaled_xy(scale))

    def norm(self) -> Rect:
        """Return the rect with min and max corners correctly ordered."""
        x1, x2 = _min_max(self.min.x, self.max.x)
        y1, y2 = _min_max(self.min.y, self.max.y)
        return r(x1, y1, x2, y2)

    def contains(self, pos: Vec2) -> bool:
        """Return True if the point lies strictly inside the rect."""
        return self.min.x < pos.x < self.max.x and self.min.y < pos.y < self.max.y

    def overlaps_point(self, pos: Vec3) -> bool:
        """Return True if the point lies inside or on the edge of the rect."""
        return self.min.x <= pos.x <= self.max.x and self.min.y <= pos.y <= self.max.y

    def intersects(self, other: Rect) -> bool:
        return (
            self.min.x <= other.max.x
            and self.max.x >= other.min.x
            and self.min.y <= other.max.y
            and self.max.y >= other.min.y
        )

    def layout_horizontal(self, n: int, padding: float) -> Rect:
        """Return the rect, anchored at the origin, spanning n copies laid out in a row."""
        return r(0.0, 0.0, n * self.w() + (n - 1) * padding, self.h())

    def cut_left(self, amount: float) -> Rect:
        cut = Rect(self.min, replace(self.max, x=self.min.x + amount))
        self.min = replace(self.min, x=self.min.x + amount)
        return cut

    def cut_right(self, amount: float) -> Rect:
        cut = Rect(replace(self.min, x=self.max.x - amount), self.max)
        self.max = replace(self.max, x=self.max.x - amount)
        return cut

    def cut_bottom(self, amount: float) -> Rect:
        cut = Rect(self.min, replace(self.max, y=self.min.y + amount))
        self.min = replace(self.min, y=self.min.y + amount)
        return cut

    def cut_top(self, amount: float) -> Rect:
        cut = Rect(replace(self.min, y=self.max.y - amount), self.max)
        self.max = replace(self.max, y=self.max.y - amount)
        return cut

    def left_half(self) -> Rect:
        return self.copy().cut_left(0.5 * self.w())

    def right_half(self) -> Rect:
        return self.copy().cut_right(0.5 * self.w())

    def top_half(self) -> Rect:
        return self.copy().cut_top(0.5 * self.h())

    def bottom_half(self) -> Rect:
        return self.copy().cut_bottom(0.5 * self.h())

    def slice_square(self, amount: float) -> Rect:
        """Return a centered square with the given side length."""
        return self.slice_horizontal(amount).slice_vertical(amount)

    def slice_horizontal(self, amount: float) -> Rect:
        """Return a centered horizontal strip of the given height."""
        work = self.copy()
        work.cut_top((work.h() - amount) / 2)
        return work.cut_top(amount)

    def slice_vertical(self, amount: float) -> Rect:
        """Return a centered vertical strip of the given width."""
        work = self.copy()
        work.cut_right((work.w() - amount) / 2)
        return work.cut_right(amount)

    def snap(self) -> Rect:
        """Round both corners to whole numbers."""
        return Rect(self.min.snap(), self.max.snap())

    def pad_all(self, padding: float) -> Rect:
        return self.pad(r(padding, padding, padding, padding))

    def pad_x(self, padding: float) -> Rect:
        return self.pad(r(padding, 0.0, padding, 0.0))

    def pad_y(self, padding: float) -> Rect:
        return self.pad(r(0.0, padding, 0.0, padding))

    def pad_left(self, padding: float) -> Rect:
        return self.pad(r(padding, 0.0, 0.0, 0.0))

    def pad_right(self, padding: float) -> Rect:
        return self.pad(r(0.0, 0.0, padding, 0.0))

    def pad_top(self, padding: float) -> Rect:
        return self.pad(r(0.0, 0.0, 0.0, padding))

    def pad_bottom(self, padding: float) -> Rect:
        return self.pad(r(0.0, padding, 0.0, 0.0))

    def pad(self, pad: Rect) -> Rect:
        """Grow each edge outward by the matching amount (inward if negative)."""
        return r(
            self.min.x - pad.min.x,
            self.min.y - pad.min.y,
            self.max.x + pad.max.x,
            self.max.y + pad.max.y,
        )

    def unpad(self, pad: Rect) -> Rect:
        """Shrink each edge inward by the matching amount."""
        return self.pad(pad.scaled(-1))

    def point(self, x: float, y: float) -> Vec2:
        """Return the point at the given fractions of width and height."""
        return Vec2(_lerp(self.min.x, self.max.x, x), _lerp(self.min.y, self.max.y, y))

    def anchor(self, other: Rect, anchor: Vec2) -> Rect:
        """Place other inside this rect so both share the same anchor point."""
        return self.full_anchor(other, anchor, anchor)

    def full_anchor(self, other: Rect, anchor: Vec2, pivot: Vec2) -> Rect:
        """Place other so its pivot point lands on this rect's anchor point."""
        anchor_point = Vec2(self.min.x + anchor.x * self.w(), self.min.y + anchor.y * self.h())
        pivot_point = Vec2(other.min.x + pivot.x * other.w(), other.min.y + pivot.y * other.h())
        a = anchor_point.sub(pivot_point)
        return r(a.x, a.y, a.x + other.w(), a.y + other.h()).norm()

    def move_min(self, pos: Vec2) -> Rect:
        """Move the rect by the offset from pos to its min corner."""
        return self.moved(self.min.sub(pos))

    def rect_draw(self, other: Rect) -> Mat4:
        """Return the matrix that maps this rect onto other."""
        src = self.center()
        dst = other.center()
        return (
            Mat4.identity()
            .translate(-src.x, -src.y, 0.0)
            .scale(other.w() / self.w(), other.h() / self.h(), 1.0)
            .translate(dst.x, dst.y, 0.0)
        )


def r(min_x: float, min_y: float, max_x: float, max_y: float) -> Rect:
    """Shorthand for a Rect from its corner coordinates."""
    return Rect(Vec2(min_x, min_y), Vec2(max_x, max_y))


def cr(radius: float) -> Rect:
    """Return a rect centered on the origin with the given half-size."""
    return Rect(Vec2(-radius, -radius), Vec2(radius, radius))