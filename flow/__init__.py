"""Containers, math and background asset loading for games and interactive applications."""

__version__ = "0.1.0"