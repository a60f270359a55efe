"""
Vehicle Simulation

Kinematic single-track (bicycle) car built from panels. Only the body pose
and the front wheel angle are state; every other part's pose is derived
from them on demand.
"""

import math

from .geometry import Point, Pose, RotationMatrix, rotate, translate, world_pose
from .panel import ImageAsset, Panel, SolidColor
from utils.helpers import clamp
import config


class InvalidMotion(ValueError):
    """Raised when advance() is asked to move a non-finite distance."""


BODY = 'body'
WHEEL_FRONT_LEFT = 'wheel_front_left'
WHEEL_FRONT_RIGHT = 'wheel_front_right'
WHEEL_REAR_LEFT = 'wheel_rear_left'
WHEEL_REAR_RIGHT = 'wheel_rear_right'
MIRROR_LEFT = 'mirror_left'
MIRROR_RIGHT = 'mirror_right'
EMBLEM = 'emblem'

STEERABLE_PARTS = frozenset((WHEEL_FRONT_LEFT, WHEEL_FRONT_RIGHT))

# Draw order: wheels sit under the body, mirrors and emblem on top.
DRAW_ORDER = (
    WHEEL_FRONT_LEFT, WHEEL_FRONT_RIGHT, WHEEL_REAR_LEFT, WHEEL_REAR_RIGHT,
    BODY, MIRROR_LEFT, MIRROR_RIGHT, EMBLEM,
)


def _make_emblem_asset(cells=8):
    """Checkered badge drawn on the bonnet."""
    light, dark = config.EMBLEM_COLORS
    pixels = bytearray()
    for row in range(cells):
        for col in range(cells):
            pixels.extend(light if (row + col) % 2 == 0 else dark)
    return ImageAsset.from_pixels((cells, cells), pixels, name='emblem')


EMBLEM_ASSET = _make_emblem_asset()


def build_parts(wheelbase):
    """Panels of a car, keyed by part name, with offsets relative to the body centre."""
    half_base = wheelbase / 2.0
    half_track = config.TRACK / 2.0
    mirror_y = config.BODY_WIDTH / 2.0 + config.MIRROR_WIDTH / 2.0

    def wheel(name, x, y):
        return Panel(config.WHEEL_LENGTH, config.WHEEL_WIDTH, SolidColor(config.WHEEL_COLOR),
                     Pose.from_xy_theta(x, y), name)

    def mirror(name, y):
        return Panel(config.MIRROR_LENGTH, config.MIRROR_WIDTH, SolidColor(config.MIRROR_COLOR),
                     Pose.from_xy_theta(config.MIRROR_X, y), name)

    parts = [
        Panel(config.BODY_LENGTH, config.BODY_WIDTH, SolidColor(config.BODY_COLOR), None, BODY),
        wheel(WHEEL_FRONT_LEFT, half_base, half_track),
        wheel(WHEEL_FRONT_RIGHT, half_base, -half_track),
        wheel(WHEEL_REAR_LEFT, -half_base, half_track),
        wheel(WHEEL_REAR_RIGHT, -half_base, -half_track),
        mirror(MIRROR_LEFT, mirror_y),
        mirror(MIRROR_RIGHT, -mirror_y),
        Panel(config.EMBLEM_SIZE, config.EMBLEM_SIZE, EMBLEM_ASSET,
              Pose.from_xy_theta(config.EMBLEM_X, 0.0), EMBLEM),
    ]
    return {panel.name: panel for panel in parts}


class Vehicle:
    """
    Car driven by discrete steering steps and signed travel distances.

    The body pose is the root; wheels, mirrors and emblem are placed by
    chaining their fixed offsets (plus the steering rotation for the front
    wheels) onto it whenever they are asked for.
    """

    def __init__(self, pose=None, wheelbase=config.WHEELBASE,
                 steer_step=config.STEER_STEP, max_steer_angle=config.MAX_STEER_ANGLE):
        if wheelbase <= 0:
            raise ValueError(f"Wheelbase must be positive, got {wheelbase}")
        if steer_step <= 0:
            raise ValueError(f"Steering step must be positive, got {steer_step}")
        if max_steer_angle <= 0:
            raise ValueError(f"Steering limit must be positive, got {max_steer_angle}")
        self.body_pose = pose or Pose()
        self.wheelbase = wheelbase
        self.steer_step = steer_step
        self.max_steer_angle = max_steer_angle
        self.front_wheel_angle = 0.0

        self.parts = build_parts(wheelbase)
        # Reference point of the bicycle model
        self._rear_axle = Pose.from_xy_theta(-wheelbase / 2.0, 0.0)

    @property
    def body(self):
        return self.parts[BODY]

    @property
    def position(self):
        return self.body_pose.origin

    @property
    def heading(self):
        return self.body_pose.heading

    # ------------------------------------------------------------------
    # Steering
    # ------------------------------------------------------------------

    def _set_steer(self, angle):
        angle = clamp(angle, -self.max_steer_angle, self.max_steer_angle)
        # Snap rounding residue from repeated left/right steps back to straight
        if abs(angle) < 1e-12:
            angle = 0.0
        self.front_wheel_angle = angle

    def steer_left(self):
        """Turn the front wheels one step counter-clockwise."""
        self._set_steer(self.front_wheel_angle + self.steer_step)

    def steer_right(self):
        """Turn the front wheels one step clockwise."""
        self._set_steer(self.front_wheel_angle - self.steer_step)

    def turning_radius(self):
        """Signed radius of the rear-axle arc; positive turns left, None when straight."""
        if self.front_wheel_angle == 0:
            return None
        return self.wheelbase / math.tan(self.front_wheel_angle)

    # ------------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------------

    def advance(self, distance):
        """
        Move the car `distance` metres along its heading (negative reverses).

        Straight wheels translate the body. Steered wheels move the rear axle
        along the exact circular arc of radius wheelbase / tan(angle), turning
        the heading by distance / radius.

        Raises:
            InvalidMotion: distance is NaN or infinite
        """
        if not math.isfinite(distance):
            raise InvalidMotion(f"Cannot advance by non-finite distance {distance!r}")
        if distance == 0:
            return

        pose = self.body_pose
        radius = self.turning_radius()
        if radius is None:
            step = rotate(Point(distance, 0.0), pose.rotation)
            self.body_pose = Pose(translate(pose.origin, step), pose.rotation)
            return

        d_theta = distance / radius
        chord = Point(radius * math.sin(d_theta), radius * (1.0 - math.cos(d_theta)))
        rear = world_pose(pose, self._rear_axle)
        moved_rear = world_pose(rear, Pose(chord, RotationMatrix.from_angle(d_theta)))
        self.body_pose = world_pose(moved_rear, self._rear_axle.inverse())

    # ------------------------------------------------------------------
    # Derived part poses
    # ------------------------------------------------------------------

    def part_pose(self, name):
        """World pose of a named part, derived from the current body pose."""
        panel = self.parts[name]
        if panel.offset is None:
            return self.body_pose
        pose = world_pose(self.body_pose, panel.offset)
        if name in STEERABLE_PARTS:
            pose = world_pose(pose, Pose(Point(), RotationMatrix.from_angle(self.front_wheel_angle)))
        return pose

    def panels(self):
        """(Panel, world pose) pairs in draw order."""
        return [(self.parts[name], self.part_pose(name)) for name in DRAW_ORDER]

    def get_status(self):
        """Pose and steering readout for display."""
        return {
            'x': self.position.x,
            'y': self.position.y,
            'heading_deg': math.degrees(self.heading),
            'steer_deg': math.degrees(self.front_wheel_angle),
        }
