"""
Practice Courses

Pre-defined layouts for driving practice.
"""

from .geometry import Pose
from .world import Map, block
import config

# Both courses cover the default 40 m x 40 m window, origin bottom-left.
COURSE_SIZE = 40.0


class ParallelParking(Map):
    """
    Kerbside street with a gap between two parked cars.

    The car starts in the driving lane, level with the front parked car,
    and has to reverse into the bay behind it.
    """

    name = 'ParallelParking'
    start_pose = Pose.from_xy_theta(*config.PARALLEL_PARKING_START)

    # Bay along the kerb
    bay_center_x = 20.0
    bay_length = 7.0
    lane_y = 10.0  # kerbside lane centre

    def _build_panels(self):
        half = COURSE_SIZE / 2.0
        bay_start = self.bay_center_x - self.bay_length / 2.0
        bay_end = self.bay_center_x + self.bay_length / 2.0
        panels = [
            block('ground', half, half, COURSE_SIZE, COURSE_SIZE, config.GRASS_COLOR),
            block('road', half, 14.0, COURSE_SIZE, 12.0, config.ASPHALT_COLOR),
            block('kerb', half, 7.75, COURSE_SIZE, 0.5, config.CURB_COLOR),
            block('far_kerb', half, 20.25, COURSE_SIZE, 0.5, config.CURB_COLOR),
        ]

        # Dashed centre line
        for i, x in enumerate(range(1, int(COURSE_SIZE), 4)):
            panels.append(block(f'centre_line_{i}', x + 1.0, 15.0, 2.0, 0.15,
                                config.MARKING_COLOR))

        # Bay end markings
        panels.append(block('bay_rear_mark', bay_start, self.lane_y, 0.15, 2.2,
                            config.MARKING_COLOR))
        panels.append(block('bay_front_mark', bay_end, self.lane_y, 0.15, 2.2,
                            config.MARKING_COLOR))

        # Parked cars either side of the bay
        car_length = config.BODY_LENGTH
        panels.append(block('parked_rear', bay_start - 0.6 - car_length / 2.0, self.lane_y,
                            car_length, config.BODY_WIDTH, config.PARKED_CAR_COLOR))
        panels.append(block('parked_front', bay_end + 0.6 + car_length / 2.0, self.lane_y,
                            car_length, config.BODY_WIDTH, config.PARKED_CAR_COLOR))
        return panels


class RightAngleTurn(Map):
    """
    L-shaped lane: drive east, then turn left through a right-angle corner
    and leave heading north.
    """

    name = 'RightAngleTurn'
    start_pose = Pose.from_xy_theta(*config.RIGHT_ANGLE_TURN_START)

    lane_width = 5.0
    corner_x = 28.0  # centre line of the northbound leg

    def _build_panels(self):
        half = COURSE_SIZE / 2.0
        lane_y = self.start_pose.origin.y
        w = self.lane_width
        east_end = self.corner_x + w / 2.0
        wall = 0.5

        panels = [
            block('ground', half, half, COURSE_SIZE, COURSE_SIZE, config.GRASS_COLOR),
            # Eastbound leg, open at the west edge
            block('east_leg', east_end / 2.0, lane_y, east_end, w, config.ASPHALT_COLOR),
            # Northbound leg, open at the north edge
            block('north_leg', self.corner_x, (lane_y - w / 2.0 + COURSE_SIZE) / 2.0,
                  w, COURSE_SIZE - (lane_y - w / 2.0), config.ASPHALT_COLOR),
        ]

        # Outer walls: south side and the east side of the corner
        panels.append(block('wall_south', (east_end + wall) / 2.0, lane_y - w / 2.0 - wall / 2.0,
                            east_end + wall, wall, config.WALL_COLOR))
        outer_x = self.corner_x + w / 2.0 + wall / 2.0
        outer_bottom = lane_y - w / 2.0 - wall
        panels.append(block('wall_east', outer_x, (outer_bottom + COURSE_SIZE) / 2.0,
                            wall, COURSE_SIZE - outer_bottom, config.WALL_COLOR))

        # Inner walls meeting at the inside of the corner
        inner_x = self.corner_x - w / 2.0 - wall / 2.0
        inner_y = lane_y + w / 2.0 + wall / 2.0
        panels.append(block('wall_north', (inner_x + wall / 2.0) / 2.0, inner_y,
                            inner_x + wall / 2.0, wall, config.WALL_COLOR))
        panels.append(block('wall_west', inner_x, (inner_y - wall / 2.0 + COURSE_SIZE) / 2.0,
                            wall, COURSE_SIZE - (inner_y - wall / 2.0), config.WALL_COLOR))

        # Stop line at the exit
        panels.append(block('exit_line', self.corner_x, COURSE_SIZE - 1.0, w, 0.2,
                            config.MARKING_COLOR))
        return panels


MAPS = {
    'parallel': ParallelParking,
    'turn': RightAngleTurn,
}


def available_maps():
    return list(MAPS.keys())


def get_map(name):
    """
    Factory function to get a course by name.

    Args:
        name: Map name ('parallel', 'turn')

    Returns:
        Map instance
    """
    if name not in MAPS:
        raise ValueError(f"Unknown map: {name}. Available: {available_maps()}")

    return MAPS[name]()
