"""Premultiplied RGBA colors with components in [0, 1]."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_UINT8 = 255
_MAX_UINT16 = 65535


@dataclass(frozen=True)
class RGBA:
    """A premultiplied RGBA color scaled to [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def mult(self, other: RGBA) -> RGBA:
        """Multiply component-wise."""
        return RGBA(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)

    def add(self, other: RGBA) -> RGBA:
        """Add component-wise."""
        return RGBA(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def desaturate(self, amount: float) -> RGBA:
        """Move the color channels toward their mean by the given amount."""
        mean = (self.r + self.g + self.b) / 3
        return RGBA(
            self.r + (mean - self.r) * amount,
            self.g + (mean - self.g) * amount,
            self.b + (mean - self.b) * amount,
            self.a,
        )


WHITE = RGBA(1.0, 1.0, 1.0, 1.0)
BLACK = RGBA(0.0, 0.0, 0.0, 1.0)


def _check_uint8(**channels: int) -> None:
    for name, value in channels.items():
        if not 0 <= value <= _MAX_UINT8:
            raise ValueError(f"channel {name} must be in 0..255, got {value}")


def from_uint8(r: int, g: int, b: int, a: int) -> RGBA:
    """Build a color from already premultiplied 8-bit channels."""
    _check_uint8(r=r, g=g, b=b, a=a)
    return RGBA(r / _MAX_UINT8, g / _MAX_UINT8, b / _MAX_UINT8, a / _MAX_UINT8)


def from_nrgba(r: int, g: int, b: int, a: int) -> RGBA:
    """Build a color from 8-bit channels that are not premultiplied."""
    _check_uint8(r=r, g=g, b=b, a=a)
    alpha16 = a * 0x101

    def premultiply(channel: int) -> float:
        return (channel * 0x101 * a // 0xFF) / _MAX_UINT16

    return RGBA(premultiply(r), premultiply(g), premultiply(b), alpha16 / _MAX_UINT16)


def from_rgba(r: int, g: int, b: int, a: int) -> RGBA:
    """Build a color from premultiplied 8-bit channels."""
    return from_uint8(r, g, b, a)


def hex_color(value: int, alpha: int) -> RGBA:
    """Build a color from a 0xRRGGBB value and a straight 8-bit alpha."""
    return from_nrgba((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)


def alpha(a: float) -> RGBA:
    """Return a color with every component set to ``a``."""
    return RGBA(a, a, a, a)


def greyscale(g: float) -> RGBA:
    """Return an opaque grey of the given intensity."""
    return RGBA(g, g, g, 1.0)


def from_straight_rgba(r: float, g: float, b: float, a: float) -> RGBA:
    """Premultiply straight (non-premultiplied) float channels."""
    return RGBA(r * a, g * a, b * a, a)