"""
Panels

A panel is a rigid rectangle with a visual fill. It is the unit the scene
is built from: vehicle parts, walls, curbs and road markings are all panels.
"""

import hashlib
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .geometry import Point, Pose, RotationMatrix, world_pose


@dataclass(frozen=True)
class SolidColor:
    """Flat RGB fill."""
    rgb: Tuple[int, int, int]


@dataclass(frozen=True)
class ImageAsset:
    """
    Raw RGB image, resolved into a drawable by the render adapter.

    `key` identifies the image content so that a cache can share one parsed
    image between every panel that uses it. Rows are stored top (local +y)
    to bottom, pixels left (local -x) to right.
    """
    key: str
    size: Tuple[int, int]
    pixels: bytes = field(repr=False)

    @classmethod
    def from_pixels(cls, size, pixels, name=None):
        """Build an asset keyed by `name`, or by a digest of its content."""
        if name is None:
            name = 'sha1:' + hashlib.sha1(bytes(pixels)).hexdigest()
        return cls(name, tuple(size), bytes(pixels))


Visual = Union[SolidColor, ImageAsset]


@dataclass(frozen=True)
class Panel:
    """
    Rigid rectangle attached to a parent frame.

    `width` runs along the local x axis, `height` along local y. `offset` is
    the panel's pose in its parent's frame; None marks a root panel whose
    pose is owned by someone else (the vehicle body).
    """
    width: float
    height: float
    visual: Visual
    offset: Optional[Pose] = None
    name: str = ''

    def __post_init__(self):
        if not (self.width > 0 and self.height > 0):
            raise ValueError(
                f"Panel dimensions must be positive, got {self.width} x {self.height}")

    def corner_offsets(self):
        """Local poses of the (lt, rt, lb, rb) corners relative to the centre."""
        hw, hh = self.width / 2.0, self.height / 2.0
        identity = RotationMatrix.identity()
        return (
            Pose(Point(-hw, hh), identity),
            Pose(Point(hw, hh), identity),
            Pose(Point(-hw, -hh), identity),
            Pose(Point(hw, -hh), identity),
        )

    def corners_world(self, pose):
        """Corners (lt, rt, lb, rb) in world space for a panel placed at `pose`."""
        return tuple(world_pose(pose, corner).origin for corner in self.corner_offsets())

    def outline_world(self, pose):
        """Corners in drawing order (lt, rt, rb, lb) for polygon fills."""
        lt, rt, lb, rb = self.corners_world(pose)
        return (lt, rt, rb, lb)
