"""Vectors, rectangles, lines, colours, matrices and quaternions."""

__all__ = ["color", "line", "matrix", "rect", "vec"]