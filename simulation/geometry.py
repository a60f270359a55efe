"""
Geometry Primitives

2D points, rotation matrices and rigid-body poses. Every composite pose in
the simulator (body -> wheel, body -> mirror, world -> wall) is chained
through world_pose().
"""

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """Position in world units (metres)."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Point(-self.x, -self.y)

    def length(self):
        return math.hypot(self.x, self.y)

    def distance(self, other):
        return (self - other).length()


class RotationMatrix:
    """
    2x2 orthonormal matrix representing a heading.

    Column 0 is the local +x axis (forward) expressed in the parent frame,
    column 1 the local +y axis (left). Positive angles turn counter-clockwise.
    """

    __slots__ = ('_m',)

    def __init__(self, matrix=None):
        if matrix is None:
            matrix = np.identity(2)
        m = np.array(matrix, dtype=float)
        if m.shape != (2, 2):
            raise ValueError(f"Rotation matrix must be 2x2, got shape {m.shape}")
        m.setflags(write=False)
        self._m = m

    @classmethod
    def from_angle(cls, theta):
        c, s = math.cos(theta), math.sin(theta)
        return cls([[c, -s], [s, c]])

    @classmethod
    def identity(cls):
        return cls()

    @property
    def matrix(self):
        return self._m

    @property
    def angle(self):
        """Heading in radians, in (-pi, pi]."""
        return math.atan2(self._m[1, 0], self._m[0, 0])

    def determinant(self):
        return float(np.linalg.det(self._m))

    def is_orthonormal(self, tol=1e-9):
        m = self._m
        return (abs(self.determinant() - 1.0) <= tol
                and abs(np.linalg.norm(m[:, 0]) - 1.0) <= tol
                and abs(np.linalg.norm(m[:, 1]) - 1.0) <= tol)

    def inverse(self):
        # orthonormal, so the transpose is the inverse
        return RotationMatrix(self._m.T)

    def __matmul__(self, other):
        return compose(self, other)

    def __eq__(self, other):
        if not isinstance(other, RotationMatrix):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self):
        return hash(self._m.tobytes())

    def __repr__(self):
        return f"RotationMatrix(angle={self.angle:.6f})"


@dataclass(frozen=True)
class Pose:
    """Position and heading of a rigid body in its parent's frame."""
    origin: Point = Point()
    rotation: RotationMatrix = RotationMatrix()

    @classmethod
    def from_xy_theta(cls, x, y, theta=0.0):
        return cls(Point(x, y), RotationMatrix.from_angle(theta))

    @property
    def heading(self):
        return self.rotation.angle

    def inverse(self):
        """Pose p such that world_pose(self, p) is the identity."""
        inv_rotation = self.rotation.inverse()
        return Pose(-rotate(self.origin, inv_rotation), inv_rotation)


def compose(a, b):
    """Matrix product a * b: orientation of b's frame stacked on a's."""
    return RotationMatrix(a.matrix @ b.matrix)


def rotate(p, m):
    """Rotate point p about the origin by m."""
    x, y = m.matrix @ np.array([p.x, p.y])
    return Point(float(x), float(y))


def translate(p, offset):
    return p + offset


def world_pose(parent_pose, local_offset):
    """
    Chain a child's local offset onto its parent's pose.

    Args:
        parent_pose: Pose of the parent in world space
        local_offset: Pose of the child in the parent's frame

    Returns:
        Pose: Child pose in world space
    """
    origin = translate(parent_pose.origin, rotate(local_offset.origin, parent_pose.rotation))
    rotation = compose(parent_pose.rotation, local_offset.rotation)
    return Pose(origin, rotation)
