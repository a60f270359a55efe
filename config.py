"""
Car Simulator Configuration Parameters
"""

import math

# Display
SCALE = 20.0  # pixels per metre
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
WINDOW_TITLE = 'car-simu'
TARGET_FPS = 60

# Driving
SPEED = 1.0  # metres per second while throttle is held

# Vehicle dimensions (metres). Local frame: +x forward, +y left.
BODY_LENGTH = 4.4
BODY_WIDTH = 1.8
WHEELBASE = 2.6  # front axle to rear axle
TRACK = 1.5  # left wheel centre to right wheel centre
WHEEL_LENGTH = 0.7
WHEEL_WIDTH = 0.25
MIRROR_LENGTH = 0.15
MIRROR_WIDTH = 0.3
MIRROR_X = 0.7  # mirror position ahead of body centre
EMBLEM_SIZE = 0.4
EMBLEM_X = 1.9  # emblem position ahead of body centre

# Steering
STEER_STEP = math.radians(5.0)  # per key press
MAX_STEER_ANGLE = math.radians(35.0)

# Colours (RGB)
BODY_COLOR = (0, 200, 0)
WHEEL_COLOR = (20, 20, 20)
MIRROR_COLOR = (0, 140, 0)
EMBLEM_COLORS = ((255, 255, 255), (30, 60, 200))
ASPHALT_COLOR = (70, 70, 70)
GRASS_COLOR = (60, 130, 60)
CURB_COLOR = (170, 170, 170)
MARKING_COLOR = (240, 240, 240)
PARKED_CAR_COLOR = (180, 40, 40)
WALL_COLOR = (120, 90, 60)

# Map start poses (x, y, heading in radians)
PARALLEL_PARKING_START = (26.0, 14.0, 0.0)
RIGHT_ANGLE_TURN_START = (6.0, 8.0, 0.0)
