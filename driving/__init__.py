"""
Driving - keyboard input layer for the simulator
"""

from .controller import (
    DriverController, FORWARD, REVERSE, STEER_LEFT, STEER_RIGHT, KEY_DOWN, KEY_UP
)

__all__ = [
    'DriverController', 'FORWARD', 'REVERSE', 'STEER_LEFT', 'STEER_RIGHT',
    'KEY_DOWN', 'KEY_UP'
]
