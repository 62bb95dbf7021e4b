"""Column-major 3x3 and 4x4 matrices and rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from flow.glm.vec import Vec2, Vec3

_EPSILON = 1e-10


def _values(values: Iterable[float] | None, size: int) -> list[float]:
    if values is None:
        return [0.0] * size
    result = [float(value) for value in values]
    if len(result) != size:
        raise ValueError(f"expected {size} values, got {len(result)}")
    return result


class _Matrix:
    _size = 0

    def __init__(self, values: Iterable[float] | None = None) -> None:
        self._m = _values(values, self._size)

    def __getitem__(self, index: int) -> float:
        return self._m[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._m[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._m))

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._m == other._m  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._m!r})"


class Mat3(_Matrix):
    """A 3x3 matrix stored in column-major order; methods modify in place."""

    _size = 9

    @staticmethod
    def identity() -> Mat3:
        return Mat3([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0])

    def copy(self) -> Mat3:
        return Mat3(self._m)

    def translate(self, x: float, y: float) -> Mat3:
        """Add a 2D translation and return self."""
        self._m[6] += x
        self._m[7] += y
        return self

    def apply(self, v: Vec2) -> Vec2:
        """Transform a point (with w = 1)."""
        m = self._m
        return Vec2(m[0] * v.x + m[3] * v.y + m[6], m[1] * v.x + m[4] * v.y + m[7])


class Mat4(_Matrix):
    """A 4x4 matrix stored in column-major order; methods modify in place."""

    _size = 16

    @staticmethod
    def identity() -> Mat4:
        return Mat4(
            [
                1.0, 0.0, 0.0, 0.0,
                0.0, 1.0, 0.0, 0.0,
                0.0, 0.0, 1.0, 0.0,
                0.0, 0.0, 0.0, 1.0,
            ]
        )

    def copy(self) -> Mat4:
        return Mat4(self._m)

    def scale(self, x: float, y: float, z: float) -> Mat4:
        """Scale rows 0, 1 and 2 (scaling around the origin) and return self."""
        m = self._m
        for column in range(4):
            m[column * 4] *= x
            m[column * 4 + 1] *= y
            m[column * 4 + 2] *= z
        return self

    def translate(self, x: float, y: float, z: float) -> Mat4:
        """Add a translation and return self."""
        self._m[12] += x
        self._m[13] += y
        self._m[14] += z
        return self

    def get_translation(self) -> Vec3:
        return Vec3(self._m[12], self._m[13], self._m[14])

    def rotate_z(self, angle: float) -> Mat4:
        """Rotate around the Z axis and return self."""
        return self.rotate(angle, Vec3(0.0, 0.0, 1.0))

    def rotate_quat(self, quat: Quat) -> Mat4:
        """Replace self with the quaternion's rotation times self."""
        rotation = quat.mat4()
        rotation.mul(self)
        self._m = rotation._m
        return self

    def rotate(self, angle: float, axis: Vec3) -> Mat4:
        """Rotate by the angle around the axis and return self."""
        return self.rotate_quat(quat_rotate(angle, axis))

    def mul(self, other: Mat4) -> Mat4:
        """Replace self with self times other and return self."""
        a = self._m
        b = other._m
        self._m = [
            sum(a[k * 4 + row] * b[column * 4 + k] for k in range(4))
            for column in range(4)
            for row in range(4)
        ]
        return self

    def apply(self, v: Vec3) -> Vec3:
        """Transform a point (with w = 1)."""
        m = self._m
        return Vec3(
            m[0] * v.x + m[4] * v.y + m[8] * v.z + m[12],
            m[1] * v.x + m[5] * v.y + m[9] * v.z + m[13],
            m[2] * v.x + m[6] * v.y + m[10] * v.z + m[14],
        )

    def inv(self) -> Mat4:
        """Return the inverse as a new matrix, or a zero matrix if singular."""
        m = self._m
        rows = [
            [m[column * 4 + row] for column in range(4)]
            + [1.0 if row == column else 0.0 for column in range(4)]
            for row in range(4)
        ]
        det = 1.0
        for column in range(4):
            pivot = max(range(column, 4), key=lambda row: abs(rows[row][column]))
            if rows[pivot][column] == 0:
                return Mat4()
            if pivot != column:
                rows[pivot], rows[column] = rows[column], rows[pivot]
                det = -det
            pivot_value = rows[column][column]
            det *= pivot_value
            rows[column] = [value / pivot_value for value in rows[column]]
            for row in range(4):
                factor = rows[row][column]
                if row != column and factor:
                    rows[row] = [
                        value - factor * pivot_row
                        for value, pivot_row in zip(rows[row], rows[column])
                    ]
        if abs(det) < _EPSILON * _EPSILON:
            return Mat4()
        return Mat4(rows[row][4 + column] for column in range(4) for row in range(4))

    def transpose(self) -> Mat4:
        """Return the transpose as a new matrix."""
        m = self._m
        return Mat4(m[row * 4 + column] for column in range(4) for row in range(4))


@dataclass
class Quat:
    """A rotation quaternion; rotation methods modify in place."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def identity() -> Quat:
        return Quat()

    def _normalized(self) -> Quat:
        length = math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)
        if length == 0:
            return Quat()
        return Quat(self.w / length, self.x / length, self.y / length, self.z / length)

    def equals(self, other: Quat) -> bool:
        """Return True if both quaternions describe the same orientation."""
        a = self._normalized()
        b = other._normalized()
        dot = a.w * b.w + a.x * b.x + a.y * b.y + a.z * b.z
        return abs(dot) > 1 - _EPSILON

    def rotate_quat(self, other: Quat) -> Quat:
        """Replace self with self times other and return self."""
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        self.w = w1 * w2 - (x1 * x2 + y1 * y2 + z1 * z2)
        self.x = (y1 * z2 - z1 * y2) + x2 * w1 + x1 * w2
        self.y = (z1 * x2 - x1 * z2) + y2 * w1 + y1 * w2
        self.z = (x1 * y2 - y1 * x2) + z2 * w1 + z1 * w2
        return self

    def rotate_x(self, angle: float) -> Quat:
        return self.rotate(angle, Vec3(1.0, 0.0, 0.0))

    def rotate_y(self, angle: float) -> Quat:
        return self.rotate(angle, Vec3(0.0, 1.0, 0.0))

    def rotate_z(self, angle: float) -> Quat:
        return self.rotate(angle, Vec3(0.0, 0.0, 1.0))

    def rotate(self, angle: float, axis: Vec3) -> Quat:
        return self.rotate_quat(quat_rotate(angle, axis))

    def mat4(self) -> Mat4:
        """Return the rotation as a column-major 4x4 matrix."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return Mat4(
            [
                1 - 2 * y * y - 2 * z * z, 2 * x * y + 2 * w * z, 2 * x * z - 2 * w * y, 0.0,
                2 * x * y - 2 * w * z, 1 - 2 * x * x - 2 * z * z, 2 * y * z + 2 * w * x, 0.0,
                2 * x * z + 2 * w * y, 2 * y * z - 2 * w * x, 1 - 2 * x * x - 2 * y * y, 0.0,
                0.0, 0.0, 0.0, 1.0,
            ]
        )


def quat_rotate(angle: float, axis: Vec3) -> Quat:
    """Return the quaternion for a rotation by the angle around the axis."""
    cos = math.cos(angle / 2)
    sin = math.sin(angle / 2)
    return Quat(cos, axis.x * sin, axis.y * sin, axis.z * sin)


def quat_z(angle: float) -> Quat:
    """Return the quaternion for a rotation around the Z axis."""
    return quat_rotate(angle, Vec3(0.0, 0.0, 1.0))