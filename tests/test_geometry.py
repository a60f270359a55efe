import math

import numpy as np
import pytest

from simulation.geometry import (
    Point, Pose, RotationMatrix, compose, rotate, translate, world_pose
)


def test_rotate_quarter_turn():
    p = rotate(Point(1.0, 0.0), RotationMatrix.from_angle(math.pi / 2))
    assert p.x == pytest.approx(0.0, abs=1e-12)
    assert p.y == pytest.approx(1.0)


def test_translate_adds_offset():
    assert translate(Point(1.0, 2.0), Point(0.5, -1.0)) == Point(1.5, 1.0)


def test_compose_adds_angles():
    r = compose(RotationMatrix.from_angle(0.3), RotationMatrix.from_angle(0.4))
    assert r.angle == pytest.approx(0.7)
    assert (RotationMatrix.from_angle(0.3) @ RotationMatrix.from_angle(0.4)).angle == pytest.approx(0.7)


def test_inverse_is_transpose():
    r = RotationMatrix.from_angle(1.1)
    product = compose(r, r.inverse())
    assert np.allclose(product.matrix, np.identity(2))
    assert np.array_equal(r.inverse().matrix, r.matrix.T)


def test_rotation_matrix_rejects_wrong_shape():
    with pytest.raises(ValueError):
        RotationMatrix([[1.0, 0.0, 0.0]])


def test_rotation_matrix_is_read_only():
    r = RotationMatrix.from_angle(0.2)
    with pytest.raises(ValueError):
        r.matrix[0, 0] = 5.0


def test_repeated_compose_stays_orthonormal():
    r = RotationMatrix.identity()
    step = RotationMatrix.from_angle(0.0137)
    for _ in range(10000):
        r = compose(r, step)
    assert r.is_orthonormal(1e-9)
    assert r.determinant() == pytest.approx(1.0, abs=1e-9)


def test_world_pose_chains_offset():
    parent = Pose.from_xy_theta(10.0, 5.0, math.pi / 2)
    child = Pose.from_xy_theta(2.0, 0.0, 0.25)
    result = world_pose(parent, child)
    assert result.origin.x == pytest.approx(10.0)
    assert result.origin.y == pytest.approx(7.0)
    assert result.heading == pytest.approx(math.pi / 2 + 0.25)


def test_pose_inverse_undoes_pose():
    pose = Pose.from_xy_theta(3.0, -4.0, 0.8)
    identity = world_pose(pose, pose.inverse())
    assert identity.origin.x == pytest.approx(0.0, abs=1e-12)
    assert identity.origin.y == pytest.approx(0.0, abs=1e-12)
    assert identity.heading == pytest.approx(0.0, abs=1e-12)


def test_point_is_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 3.0
