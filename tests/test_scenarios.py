import math

import pytest

import config
from simulation.geometry import Pose
from simulation.scenarios import (
    COURSE_SIZE, ParallelParking, RightAngleTurn, available_maps, get_map
)
from simulation.vehicle_sim import Vehicle
from simulation.world import Map, draw_list, scene_panels, vehicle_panels


def test_parallel_parking_spawn():
    course = ParallelParking()
    car = course.spawn_vehicle()
    x, y, heading = config.PARALLEL_PARKING_START
    assert isinstance(car, Vehicle)
    assert car.position.x == pytest.approx(x)
    assert car.position.y == pytest.approx(y)
    assert car.heading == pytest.approx(heading)
    assert car.front_wheel_angle == 0.0


def test_parallel_parking_first_turn():
    car = ParallelParking().spawn_vehicle()
    car.steer_left()
    car.advance(1.0)
    expected = math.tan(config.STEER_STEP) / config.WHEELBASE
    assert expected > 0
    assert car.heading == pytest.approx(expected)


def test_right_angle_turn_spawn():
    car = RightAngleTurn().spawn_vehicle()
    x, y, _ = config.RIGHT_ANGLE_TURN_START
    assert car.position.x == pytest.approx(x)
    assert car.position.y == pytest.approx(y)


def test_spawn_returns_independent_vehicles():
    course = ParallelParking()
    a = course.spawn_vehicle()
    b = course.spawn_vehicle()
    a.advance(3.0)
    a.steer_left()
    assert b.body_pose == course.start_pose
    assert b.front_wheel_angle == 0.0


def test_spawn_passes_vehicle_settings():
    car = RightAngleTurn().spawn_vehicle(wheelbase=3.2, steer_step=0.2)
    assert car.wheelbase == 3.2
    car.steer_left()
    assert car.front_wheel_angle == pytest.approx(0.2)


@pytest.mark.parametrize('course_cls', [ParallelParking, RightAngleTurn])
def test_static_panels_are_world_fixed_and_stable(course_cls):
    course = course_cls()
    panels = course.static_panels()
    assert isinstance(panels, tuple)
    assert panels is course.static_panels()
    assert panels[0].name == 'ground'
    for panel in panels:
        assert panel.offset is not None
        for corner in panel.corners_world(panel.offset):
            assert -1e-9 <= corner.x <= COURSE_SIZE + 1e-9
            assert -1e-9 <= corner.y <= COURSE_SIZE + 1e-9


def test_parallel_bay_fits_the_car():
    panels = {p.name: p for p in ParallelParking().static_panels()}
    rear = panels['parked_rear']
    front = panels['parked_front']
    gap = (front.offset.origin.x - front.width / 2) - (rear.offset.origin.x + rear.width / 2)
    assert gap > config.BODY_LENGTH


def test_turn_course_start_is_inside_lane():
    course = RightAngleTurn()
    panels = {p.name: p for p in course.static_panels()}
    lane = panels['east_leg']
    car = course.spawn_vehicle()
    lane_bottom = lane.offset.origin.y - lane.height / 2
    lane_top = lane.offset.origin.y + lane.height / 2
    for corner in car.body.corners_world(car.body_pose):
        assert lane_bottom < corner.y < lane_top


def test_get_map_factory():
    assert isinstance(get_map('parallel'), ParallelParking)
    assert isinstance(get_map('turn'), RightAngleTurn)
    assert available_maps() == ['parallel', 'turn']


def test_get_map_unknown_name():
    with pytest.raises(ValueError, match='Unknown map'):
        get_map('roundabout')


def test_base_map_requires_layout():
    with pytest.raises(NotImplementedError):
        Map()


def test_draw_list_puts_vehicle_on_top():
    course = ParallelParking()
    car = course.spawn_vehicle()
    items = draw_list(course, car)
    static = scene_panels(course)
    parts = vehicle_panels(car)
    assert len(items) == len(static) + len(parts)
    assert [p.name for p, _ in items[:len(static)]] == [p.name for p in course.static_panels()]
    assert [p.name for p, _ in items[len(static):]] == [p.name for p, _ in parts]


def test_draw_list_without_vehicle():
    course = RightAngleTurn()
    assert len(draw_list(course)) == len(course.static_panels())


def test_scene_panel_pose_is_offset():
    course = RightAngleTurn()
    for panel, pose in scene_panels(course):
        assert isinstance(pose, Pose)
        assert pose is panel.offset
