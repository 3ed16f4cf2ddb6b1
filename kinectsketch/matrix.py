"""Affine 2-D transforms in row-vector form.

A point (x, y) is treated as the row vector [x, y, 1] and multiplied on the
left of the matrix, so ``a @ b`` applies ``a`` first and then ``b``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Matrix3x2:
    """An affine transform stored as a 3x2 matrix (the last column is implied)."""

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def identity(cls) -> Matrix3x2:
        """The transform that leaves every point where it is."""
        return cls()

    @classmethod
    def translation(cls, dx: float, dy: float) -> Matrix3x2:
        """Move every point by (dx, dy)."""
        return cls(dx=float(dx), dy=float(dy))

    @classmethod
    def scale(cls, sx: float, sy: float) -> Matrix3x2:
        """Scale about the origin."""
        return cls(m11=float(sx), m22=float(sy))

    @classmethod
    def rotation(cls, degrees: float) -> Matrix3x2:
        """Rotate about the origin; positive angles turn clockwise on a y-down screen."""
        radians = math.radians(degrees)
        c = math.cos(radians)
        s = math.sin(radians)
        return cls(m11=c, m12=s, m21=-s, m22=c)

    def __matmul__(self, other: Matrix3x2) -> Matrix3x2:
        if not isinstance(other, Matrix3x2):
            return NotImplemented
        return Matrix3x2(
            m11=self.m11 * other.m11 + self.m12 * other.m21,
            m12=self.m11 * other.m12 + self.m12 * other.m22,
            m21=self.m21 * other.m11 + self.m22 * other.m21,
            m22=self.m21 * other.m12 + self.m22 * other.m22,
            dx=self.dx * other.m11 + self.dy * other.m21 + other.dx,
            dy=self.dx * other.m12 + self.dy * other.m22 + other.dy,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Transform the point (x, y)."""
        return (
            x * self.m11 + y * self.m21 + self.dx,
            x * self.m12 + y * self.m22 + self.dy,
        )