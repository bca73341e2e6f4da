import math

import pytest

from halfmesh.geometry import Point3D, Vector3D, circumcenter


def test_point_plus_difference_round_trip():
    p = Point3D(1.5, -2.0, 3.0)
    q = Point3D(-4.0, 0.5, 7.25)
    offset = q - p
    assert isinstance(offset, Vector3D)
    assert tuple(p + offset) == pytest.approx(tuple(q))


def test_point_plus_point_adds_coordinates():
    p = Point3D(1.0, 2.0, 3.0)
    q = Point3D(4.0, 5.0, 6.0)
    assert (p + q) == Point3D(5.0, 7.0, 9.0)


def test_point_in_place_add():
    p = Point3D(1.0, 1.0, 1.0)
    p += Vector3D(2.0, 3.0, 4.0)
    assert p == Point3D(3.0, 4.0, 5.0)


def test_point_mul_div_round_trip():
    p = Point3D(3.0, -6.0, 9.0)
    assert tuple((p * 2.5) / 2.5) == pytest.approx(tuple(p))


def test_point_in_place_division_by_zero_is_ignored():
    p = Point3D(3.0, -6.0, 9.0)
    p /= 0.0
    assert p == Point3D(3.0, -6.0, 9.0)


def test_point_in_place_division_matches_division():
    p = Point3D(3.0, -6.0, 9.0)
    expected = p / 3.0
    p /= 3.0
    assert p == expected


def test_point_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Point3D(1.0, 2.0, 3.0) / 0.0


def test_dist_is_symmetric_and_matches_length():
    p = Point3D(1.0, 2.0, 3.0)
    q = Point3D(-2.0, 6.0, 3.0)
    assert p.dist(q) == pytest.approx(q.dist(p))
    assert p.dist(q) == pytest.approx((q - p).length())


def test_dist_to_segment_nearest_endpoint_first():
    p1, p2 = Point3D(0, 0, 0), Point3D(3, 0, 0)
    a = Point3D(-2, 1, 0)
    assert a.dist_to_segment(p1, p2) == pytest.approx(a.dist(p1))


def test_dist_to_segment_interior_projection():
    p1, p2 = Point3D(0, 0, 0), Point3D(3, 0, 0)
    b = Point3D(1.5, 1, 0)
    assert b.dist_to_segment(p1, p2) == pytest.approx(1.0)


def test_dist_to_segment_past_second_endpoint():
    p1, p2 = Point3D(0, 0, 0), Point3D(3, 0, 0)
    c = Point3D(5, 2, 0)
    assert c.dist_to_segment(p1, p2) == pytest.approx(c.dist(p2))


def test_dist_to_degenerate_segment():
    p1 = Point3D(1, 1, 1)
    a = Point3D(4, 5, 1)
    assert a.dist_to_segment(p1, Point3D(1, 1, 1)) == pytest.approx(a.dist(p1))


def test_dist_to_segment_never_exceeds_endpoint_distances():
    p1, p2 = Point3D(-1, 2, 0.5), Point3D(2, -1, 3)
    for q in (Point3D(0, 0, 0), Point3D(5, 5, 5), Point3D(-3, 1, 2)):
        d = q.dist_to_segment(p1, p2)
        assert d <= q.dist(p1) + 1e-12
        assert d <= q.dist(p2) + 1e-12


def test_cross_is_orthogonal_and_anticommutative():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert tuple(c) == pytest.approx(tuple(-(b.cross(a))))


def test_vector_arithmetic_round_trip():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(-2.0, 0.5, 4.0)
    assert tuple((a + b) - b) == pytest.approx(tuple(a))
    assert tuple((a * 4.0) / 4.0) == pytest.approx(tuple(a))
    assert tuple(2.0 * a) == pytest.approx(tuple(a * 2.0))


def test_vector_in_place_add():
    a = Vector3D(1.0, 2.0, 3.0)
    a += Vector3D(1.0, 1.0, 1.0)
    assert a == Vector3D(2.0, 3.0, 4.0)


def test_dot_matches_length_squared():
    a = Vector3D(2.0, -3.0, 6.0)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_normalize_gives_unit_length_same_direction():
    a = Vector3D(3.0, -4.0, 12.0)
    original = Vector3D(*a)
    a.normalize()
    assert a.length() == pytest.approx(1.0)
    assert a.cross(original).length() == pytest.approx(0.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3D().normalize()


def test_clear_resets_components():
    a = Vector3D(3.0, -4.0, 12.0)
    a.clear()
    assert a == Vector3D()


def test_multiplying_by_non_number_raises():
    with pytest.raises(TypeError):
        Vector3D(1.0, 2.0, 3.0) * "a"


def test_rotate_quarter_turn_about_z():
    v = Vector3D(1.0, 0.0, 0.0)
    v.rotate(Vector3D(0.0, 0.0, 1.0), math.pi / 2)
    assert tuple(v) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_rotate_preserves_length_and_inverts():
    axis = Vector3D(1.0, 2.0, 2.0)
    axis.normalize()
    v = Vector3D(0.3, -1.2, 2.5)
    original = Vector3D(*v)
    v.rotate(axis, 0.7)
    assert v.length() == pytest.approx(original.length())
    assert v.dot(axis) == pytest.approx(original.dot(axis))
    v.rotate(axis, -0.7)
    assert tuple(v) == pytest.approx(tuple(original))


def test_point_rotate_matches_vector_rotate():
    axis = Vector3D(0.0, 1.0, 0.0)
    p = Point3D(1.0, 2.0, 3.0)
    v = Vector3D(1.0, 2.0, 3.0)
    p.rotate(axis, 1.1)
    v.rotate(axis, 1.1)
    assert tuple(p) == pytest.approx(tuple(v))


def test_set_normal_is_unit_and_orthogonal():
    p1, p2, p3 = Point3D(0, 0, 1), Point3D(2, 1, 0), Point3D(-1, 3, 2)
    n = Vector3D()
    n.set_normal(p1, p2, p3)
    assert n.length() == pytest.approx(1.0)
    assert n.dot(p2 - p1) == pytest.approx(0.0)
    assert n.dot(p3 - p2) == pytest.approx(0.0)


def test_circumcenter_is_equidistant():
    points = [Point3D(0, 0, 0), Point3D(2, 0, 0), Point3D(0, 3, 0), Point3D(1, 1, 4)]
    centre = circumcenter(*points)
    radius = centre.dist(points[0])
    for p in points[1:]:
        assert centre.dist(p) == pytest.approx(radius)


def test_circumcenter_of_coplanar_points_raises():
    with pytest.raises(ZeroDivisionError):
        circumcenter(Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0), Point3D(1, 1, 0))