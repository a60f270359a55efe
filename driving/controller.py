"""
Driver Input Controller

Turns keyboard intent and animation-frame timing into steering and
advance calls on a vehicle. Works with any display layer that can report
key presses and frame intervals.
"""

from utils.helpers import ns_to_seconds
import config

FORWARD = 'forward'
REVERSE = 'reverse'
STEER_LEFT = 'steer_left'
STEER_RIGHT = 'steer_right'

KEY_DOWN = 'down'
KEY_UP = 'up'

THROTTLE_ACTIONS = (FORWARD, REVERSE)


class DriverController:
    """
    Keyboard driver for a single vehicle.

    Steering keys apply one step per press. A throttle key is held: while it
    is down every frame advances the car by speed * frame interval, and all
    other key presses are ignored until it is released.
    """

    def __init__(self, vehicle, speed=config.SPEED):
        """
        Args:
            vehicle: Vehicle to drive
            speed: Travel speed in metres per second while throttle is held
        """
        self.vehicle = vehicle
        self.speed = speed

        # Throttle state
        self.held = None
        self._successive = False

        # Frame-rate bookkeeping for the current throttle run
        self._elapsed_ns = 0
        self._frames = 0
        self._last_frame_rate = None

    @property
    def moving(self):
        return self.held is not None

    def key_down(self, action):
        """
        Handle a key press.

        Returns:
            bool: True if the display should start delivering frames
        """
        if self.held is not None:
            return False

        if action in THROTTLE_ACTIONS:
            self.held = action
            return True
        if action == STEER_LEFT:
            self.vehicle.steer_left()
        elif action == STEER_RIGHT:
            self.vehicle.steer_right()
        return False

    def key_up(self, action):
        """Handle a key release. Releasing either throttle key stops the car."""
        if action in THROTTLE_ACTIONS:
            self.held = None

    def handle_input(self, inputs):
        """
        Apply (KEY_DOWN | KEY_UP, action) pairs one at a time, in the order
        the keys were pressed and released.
        """
        for kind, action in inputs:
            if kind == KEY_DOWN:
                self.key_down(action)
            elif kind == KEY_UP:
                self.key_up(action)
            else:
                raise ValueError(f"Unknown key event kind: {kind!r}")

    def tick(self, elapsed_ns):
        """
        Handle one animation frame.

        The first frame of a throttle run carries no distance since there is
        no previous frame to measure from.

        Args:
            elapsed_ns: Nanoseconds since the previous frame

        Returns:
            bool: True if another frame is wanted
        """
        if elapsed_ns < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed_ns}")

        interval = 0
        if self._successive:
            self._elapsed_ns += elapsed_ns
            self._frames += 1
            interval = elapsed_ns
        else:
            self._successive = True

        if self.held == FORWARD:
            self.vehicle.advance(ns_to_seconds(interval) * self.speed)
            return True
        if self.held == REVERSE:
            self.vehicle.advance(-ns_to_seconds(interval) * self.speed)
            return True

        # Throttle released: close the run
        if self._elapsed_ns > 0:
            self._last_frame_rate = self._frames / ns_to_seconds(self._elapsed_ns)
        self._successive = False
        self._elapsed_ns = 0
        self._frames = 0
        return False

    def take_frame_rate(self):
        """Frames per second of the last finished throttle run, once; None otherwise."""
        rate, self._last_frame_rate = self._last_frame_rate, None
        return rate
