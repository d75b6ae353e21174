import math

import pytest

from tlescope.vecmath import (
    Matrix,
    Vector2,
    Vector3,
    clamp,
    lat_lon_to_xyz,
    lerp_float,
)


def _assert_close(actual, expected):
    for got, want in zip(actual, expected):
        assert got == pytest.approx(want, abs=1e-9)


def test_vector_arithmetic_round_trip():
    a = Vector3(1.5, -2.0, 3.25)
    b = Vector3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert a * 2.0 == 2.0 * a
    assert -a + a == Vector3()


def test_cross_of_axes():
    x, y, z = Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(z) == x
    assert y.cross(x) == -z


def test_cross_is_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_normalized_has_unit_length():
    assert Vector3(3.0, -7.0, 2.0).normalized().length() == pytest.approx(1.0)


def test_normalized_zero_vector_unchanged():
    assert Vector3().normalized() == Vector3()


def test_distance_is_symmetric():
    a, b = Vector3(1, 2, 3), Vector3(-2, 6, 3)
    assert a.distance_to(b) == b.distance_to(a) == (a - b).length()


def test_vector2_unpacks():
    x, y = Vector2(0.2, 0.5)
    assert (x, y) == (0.2, 0.5)


def test_identity_leaves_points():
    point = Vector3(1.0, -2.0, 5.0)
    assert Matrix.identity().apply(point) == point


def test_identity_is_neutral_for_product():
    rotation = Matrix.rotate(Vector3(0, 0, 1), 0.7)
    assert Matrix.identity() @ rotation == rotation
    assert rotation @ Matrix.identity() == rotation


def test_rotation_about_x():
    rotation = Matrix.rotate(Vector3(1, 0, 0), -math.pi / 2)
    _assert_close(rotation.apply(Vector3(0, 1, 0)), (0.0, 0.0, -1.0))


def test_rotation_and_inverse_cancel():
    axis = Vector3(1.0, 2.0, -0.5)
    product = Matrix.rotate(axis, 1.1) @ Matrix.rotate(axis, -1.1)
    for row, expected in zip(product.rows, Matrix.identity().rows):
        _assert_close(row, expected)


def test_rotation_preserves_length_and_axis():
    axis = Vector3(0.0, 3.0, 4.0)
    rotation = Matrix.rotate(axis, 2.3)
    point = Vector3(1.0, -1.0, 2.0)
    assert rotation.apply(point).length() == pytest.approx(point.length())
    _assert_close(rotation.apply(axis), axis)


def test_product_applies_right_first():
    a = Matrix.rotate(Vector3(0, 0, 1), 0.4)
    b = Matrix.rotate(Vector3(1, 0, 0), 1.2)
    point = Vector3(0.3, -0.8, 1.5)
    _assert_close((a @ b).apply(point), a.apply(b.apply(point)))


def test_matrix_shape_is_checked():
    with pytest.raises(ValueError):
        Matrix(((1.0, 0.0), (0.0, 1.0)))


def test_clamp():
    assert clamp(2.0, -1.5, 1.5) == 1.5
    assert clamp(-2.0, -1.5, 1.5) == -1.5
    assert clamp(0.25, -1.5, 1.5) == 0.25


def test_lerp_endpoints():
    assert lerp_float(2.0, 9.0, 0.0) == 2.0
    assert lerp_float(2.0, 9.0, 1.0) == 9.0
    assert lerp_float(2.0, 4.0, 0.5) == 3.0


@pytest.mark.parametrize("lat, lon", [(0, 0), (45, 30), (-60, 170), (90, -45)])
def test_lat_lon_lies_on_sphere(lat, lon):
    assert lat_lon_to_xyz(lat, lon, 5.0).length() == pytest.approx(5.0)


def test_lat_lon_reference_points():
    _assert_close(lat_lon_to_xyz(0, 0, 5.0), (5.0, 0.0, 0.0))
    _assert_close(lat_lon_to_xyz(90, 0, 5.0), (0.0, 5.0, 0.0))


def test_latitude_sign_gives_hemisphere():
    assert lat_lon_to_xyz(30, 10, 1.0).y > 0
    assert lat_lon_to_xyz(-30, 10, 1.0).y < 0