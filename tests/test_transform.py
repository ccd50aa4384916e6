import math
import pickle

import numpy as np
import pytest

from whitted import (
    InvalidViewConfiguration,
    Ray,
    SceneError,
    SingularTransform,
    Transform,
    Vector3,
)

from conftest import SQRT2_2, assert_vec


def test_translation_moves_points_not_vectors():
    t = Transform.translation(5, -3, 2)
    assert_vec(t.apply_point(Vector3(-3, 4, 5)), (2, 1, 7))
    assert_vec(t.inverse.apply_point(Vector3(-3, 4, 5)), (-8, 7, 3))
    assert_vec(t.apply_vector(Vector3(-3, 4, 5)), (-3, 4, 5))


def test_scaling_and_reflection():
    t = Transform.scaling(2, 3, 4)
    assert_vec(t.apply_point(Vector3(-4, 6, 8)), (-8, 18, 32))
    assert_vec(t.apply_vector(Vector3(-4, 6, 8)), (-8, 18, 32))
    assert_vec(t.inverse.apply_vector(Vector3(-4, 6, 8)), (-2, 2, 2))
    assert_vec(Transform.scaling(-1, 1, 1).apply_point(Vector3(2, 3, 4)), (-2, 3, 4))


def test_rotations():
    p = Vector3(0, 1, 0)
    assert_vec(Transform.rotation_x(math.pi / 4).apply_point(p), (0, SQRT2_2, SQRT2_2))
    assert_vec(Transform.rotation_x(math.pi / 2).apply_point(p), (0, 0, 1))
    assert_vec(Transform.rotation_x(math.pi / 4).inverse.apply_point(p), (0, SQRT2_2, -SQRT2_2))
    assert_vec(Transform.rotation_y(math.pi / 2).apply_point(Vector3(0, 0, 1)), (1, 0, 0))
    assert_vec(Transform.rotation_z(math.pi / 2).apply_point(p), (-1, 0, 0))


def test_shearing():
    p = Vector3(2, 3, 4)
    assert_vec(Transform.shearing(1, 0, 0, 0, 0, 0).apply_point(p), (5, 3, 4))
    assert_vec(Transform.shearing(0, 0, 0, 0, 0, 1).apply_point(p), (2, 3, 7))


def test_chained_transforms_apply_right_to_left():
    a = Transform.rotation_x(math.pi / 2)
    b = Transform.scaling(5, 5, 5)
    c = Transform.translation(10, 5, 7)
    t = c @ b @ a
    assert_vec(t.apply_point(Vector3(1, 0, 1)), (15, 0, 7))
    assert_vec(t.inverse.apply_point(Vector3(15, 0, 7)), (1, 0, 1))


def test_inverse_is_cached_and_consistent():
    t = Transform.shearing(1, 2, 0, 0, 0.5, 0) @ Transform.rotation_y(0.3)
    assert t.inverse is t.inverse
    assert np.allclose(t.matrix @ t.inverse.matrix, np.identity(4))
    assert t.inverse.inverse == t


def test_ray_transform():
    r = Ray(Vector3(1, 2, 3), Vector3(0, 1, 0))
    moved = r.transform(Transform.translation(3, 4, 5))
    assert_vec(moved.origin, (4, 6, 8))
    assert_vec(moved.direction, (0, 1, 0))
    scaled = r.transform(Transform.scaling(2, 3, 4))
    assert_vec(scaled.origin, (2, 6, 12))
    assert_vec(scaled.direction, (0, 3, 0))


def test_singular_matrix_is_rejected():
    with pytest.raises(SingularTransform):
        Transform(np.zeros((4, 4)))
    with pytest.raises(SingularTransform):
        Transform.scaling(1, 0, 1)


def test_scene_errors_are_value_errors():
    assert issubclass(SingularTransform, SceneError)
    assert issubclass(SceneError, ValueError)


def test_transform_survives_pickling():
    t = Transform.translation(1, 2, 3) @ Transform.rotation_z(0.7)
    copy = pickle.loads(pickle.dumps(t))
    assert copy == t
    assert_vec(copy.inverse.apply_point(t.apply_point(Vector3(1, 1, 1))), (1, 1, 1))


def test_default_view_transform_is_identity():
    t = Transform.view_transform(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0))
    assert t.is_identity()


def test_view_transform_looking_down_positive_z():
    t = Transform.view_transform(Vector3(0, 0, 0), Vector3(0, 0, 1), Vector3(0, 1, 0))
    assert t == Transform.scaling(-1, 1, -1)


def test_view_transform_moves_the_world():
    t = Transform.view_transform(Vector3(0, 0, 8), Vector3(0, 0, 0), Vector3(0, 1, 0))
    assert t == Transform.translation(0, 0, -8)


def test_arbitrary_view_transform():
    t = Transform.view_transform(Vector3(1, 3, 2), Vector3(4, -2, 8), Vector3(1, 1, 0))
    expected = np.array([[-0.50709, 0.50709, 0.67612, -2.36643],
                         [0.76772, 0.60609, 0.12122, -2.82843],
                         [-0.35857, 0.59761, -0.71714, 0.00000],
                         [0.00000, 0.00000, 0.00000, 1.00000]])
    assert np.allclose(t.matrix, expected, atol=1e-4)


@pytest.mark.parametrize("eye, to, up", [
    (Vector3(1, 1, 1), Vector3(1, 1, 1), Vector3(0, 1, 0)),
    (Vector3(0, 0, 0), Vector3(0, 0, 1), Vector3(0, 0, 0)),
    (Vector3(0, 0, 0), Vector3(0, 5, 0), Vector3(0, 1, 0)),
])
def test_degenerate_view_transform(eye, to, up):
    with pytest.raises(InvalidViewConfiguration):
        Transform.view_transform(eye, to, up)
