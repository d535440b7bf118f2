import math

import pytest

from geometry import Box3, Ray
from transform import Matrix4
from vecmath import Vector3


@pytest.fixture
def unit_box():
    return Box3(Vector3(0, 0, 0), Vector3(1, 1, 1))


@pytest.fixture
def floor_triangle():
    return Vector3(-1, 0, -1), Vector3(1, 0, -1), Vector3(0, 0, 1)


def test_defaults_are_independent_zero_vectors():
    a, b = Ray(), Ray()
    assert a.origin.to_array() == [0, 0, 0]
    assert a.direction.to_array() == [0, 0, 0]
    assert a.origin is not b.origin


def test_constructor_and_set_alias_vectors():
    origin = Vector3(1, 2, 3)
    direction = Vector3(4, 5, 6)
    ray = Ray(origin, direction)
    assert ray.origin is origin
    assert ray.direction is direction

    other_origin, other_direction = Vector3(), Vector3(1, 0, 0)
    assert ray.set(other_origin, other_direction) is ray
    assert ray.origin is other_origin
    assert ray.direction is other_direction


def test_at():
    ray = Ray(Vector3(1, 2, 3), Vector3(2, 0, 0))
    target = Vector3()
    assert ray.at(3, target) is target
    assert target.to_array() == [7, 2, 3]
    assert ray.at(-2).to_array() == [-3, 2, 3]


def test_look_at_mutates_direction_in_place():
    direction = Vector3()
    ray = Ray(Vector3(1, 1, 1), direction)
    assert ray.look_at(Vector3(4, 5, 1)) is ray
    assert direction.to_array() == pytest.approx([0.6, 0.8, 0])


def test_recast():
    ray = Ray(Vector3(1, 2, 3), Vector3(0, 0, 1))
    assert ray.recast(5) is ray
    assert ray.origin.to_array() == [1, 2, 8]


def test_closest_point_to_point():
    ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
    assert ray.closest_point_to_point(Vector3(5, 3, 4)).to_array() == [5, 0, 0]
    # behind the origin
    assert ray.closest_point_to_point(Vector3(-1, 0, 0)).to_array() == [0, 0, 0]

    target = Vector3()
    assert ray.closest_point_to_point(Vector3(2, 1, 0), target) is target


def test_distance_to_point():
    ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
    assert ray.distance_sq_to_point(Vector3(0, 3, 4)) == 25
    assert ray.distance_to_point(Vector3(0, 3, 4)) == 5

    behind = Ray(Vector3(2, 0, 0), Vector3(1, 0, 0))
    assert behind.distance_sq_to_point(Vector3(0, 0, 0)) == 4


def test_distance_sq_to_parallel_segment():
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
    on_ray, on_segment = Vector3(), Vector3()

    dist_sq = ray.distance_sq_to_segment(Vector3(1, 0, 0), Vector3(1, 2, 0), on_ray, on_segment)

    assert dist_sq == pytest.approx(1)
    assert on_ray.to_array() == pytest.approx([0, 2, 0])
    assert on_segment.to_array() == pytest.approx([1, 2, 0])


def test_distance_sq_to_crossing_segment():
    ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
    on_ray, on_segment = Vector3(), Vector3()

    dist_sq = ray.distance_sq_to_segment(Vector3(2, -1, 1), Vector3(2, 1, 1), on_ray, on_segment)

    assert dist_sq == pytest.approx(1)
    assert on_ray.to_array() == pytest.approx([2, 0, 0])
    assert on_segment.to_array() == pytest.approx([2, 0, 1])


def test_distance_sq_to_segment_behind_origin():
    ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
    on_ray = Vector3(9, 9, 9)

    dist_sq = ray.distance_sq_to_segment(Vector3(-3, -1, 0), Vector3(-3, 1, 0), on_ray)

    assert dist_sq == pytest.approx(9)
    assert on_ray.to_array() == pytest.approx([0, 0, 0])


@pytest.mark.parametrize("v0, v1, expected_sq, expected_on_ray, expected_on_segment", [
    # ahead of the origin, segment beyond its start
    (Vector3(2, 2, 0), Vector3(2, 3, 0), 4, [2, 0, 0], [2, 2, 0]),
    # ahead of the origin, segment beyond its end
    (Vector3(2, -3, 0), Vector3(2, -2, 0), 4, [2, 0, 0], [2, -2, 0]),
    # behind the origin, segment beyond its start
    (Vector3(-2, 2, 0), Vector3(-2, 3, 0), 8, [0, 0, 0], [-2, 2, 0]),
    # behind the origin, segment beyond its end
    (Vector3(-2, -3, 0), Vector3(-2, -2, 0), 8, [0, 0, 0], [-2, -2, 0]),
], ids=["ahead-start", "ahead-end", "behind-start", "behind-end"])
def test_distance_sq_to_segment_clamped_regions(v0, v1, expected_sq,
                                                 expected_on_ray, expected_on_segment):
    ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
    on_ray, on_segment = Vector3(9, 9, 9), Vector3(9, 9, 9)

    dist_sq = ray.distance_sq_to_segment(v0, v1, on_ray, on_segment)

    assert dist_sq == pytest.approx(expected_sq)
    assert on_ray.to_array() == pytest.approx(expected_on_ray)
    assert on_segment.to_array() == pytest.approx(expected_on_segment)
    assert on_ray.distance_to_squared(on_segment) == pytest.approx(expected_sq)


def test_distance_sq_to_segment_skips_missing_out_points():
    ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
    on_segment = Vector3()

    dist_sq = ray.distance_sq_to_segment(Vector3(2, 2, 0), Vector3(2, 3, 0), None, on_segment)

    assert dist_sq == pytest.approx(4)
    assert on_segment.to_array() == pytest.approx([2, 2, 0])


def test_intersect_box_from_outside(unit_box):
    ray = Ray(Vector3(-5, 0.5, 0.5), Vector3(1, 0, 0))
    assert ray.intersect_box(unit_box).to_array() == pytest.approx([0, 0.5, 0.5])


def test_intersect_box_axis_aligned_hit(unit_box):
    ray = Ray(Vector3(-5, 0, 0), Vector3(1, 0, 0))
    hit = ray.intersect_box(unit_box)
    assert hit.to_array() == pytest.approx([0, 0, 0])
    assert all(isinstance(c, float) for c in hit.to_array())


def test_intersect_box_parallel_miss(unit_box):
    ray = Ray(Vector3(-5, 0, 0), Vector3(0, 1, 0))
    assert ray.intersect_box(unit_box) is None


def test_intersect_box_from_inside_returns_exit(unit_box):
    ray = Ray(Vector3(0.5, 0.5, 0.5), Vector3(-1, 0, 0))
    assert ray.intersect_box(unit_box).to_array() == pytest.approx([0, 0.5, 0.5])


def test_intersect_box_behind(unit_box):
    ray = Ray(Vector3(5, 0.5, 0.5), Vector3(1, 0, 0))
    assert ray.intersect_box(unit_box) is None


def test_intersect_box_diagonal(unit_box):
    ray = Ray(Vector3(-1, -1, -1), Vector3(1, 1, 1).unit())
    assert ray.intersect_box(unit_box).to_array() == pytest.approx([0, 0, 0], abs=1e-12)


def test_intersect_box_straddling_axis():
    box = Box3(Vector3(0, -1, -1), Vector3(1, 1, 1))
    ray = Ray(Vector3(-5, 0, 0), Vector3(1, 0, 0))
    assert ray.intersect_box(box).to_array() == pytest.approx([0, 0, 0])


def test_intersect_box_straddling_axis_miss():
    box = Box3(Vector3(0, -1, -1), Vector3(1, 1, 1))
    ray = Ray(Vector3(-5, 0, 0), Vector3(0, 1, 0))
    assert ray.intersect_box(box) is None


def test_intersect_box_negative_zero_direction():
    box = Box3(Vector3(0, -1, -1), Vector3(1, 1, 1))
    ray = Ray(Vector3(-5, 0, 0), Vector3(1, -0.0, -0.0))
    assert ray.intersect_box(box).to_array() == pytest.approx([0, 0, 0])


def test_intersect_triangle_front_face(floor_triangle):
    ray = Ray(Vector3(0, 2, 0), Vector3(0, -1, 0))
    assert ray.intersect_triangle(*floor_triangle).to_array() == pytest.approx([0, 0, 0])


def test_intersect_triangle_culling_keeps_front_face():
    a, b, c = Vector3(-1, -1, 1), Vector3(1, -1, 1), Vector3(0, 1, 1)
    ray = Ray(Vector3(0, 0, 3), Vector3(0, 0, -1))
    assert ray.intersect_triangle(a, b, c, True).to_array() == pytest.approx([0, 0, 1])


def test_intersect_triangle_back_face():
    a, b, c = Vector3(-1, -1, 1), Vector3(1, -1, 1), Vector3(0, 1, 1)
    ray = Ray(Vector3(0, 0, -3), Vector3(0, 0, 1))
    assert ray.intersect_triangle(a, b, c).to_array() == pytest.approx([0, 0, 1])
    assert ray.intersect_triangle(a, b, c, backface_culling=True) is None


def test_intersect_triangle_outside(floor_triangle):
    ray = Ray(Vector3(5, 2, 0), Vector3(0, -1, 0))
    assert ray.intersect_triangle(*floor_triangle) is None


def test_intersect_triangle_parallel(floor_triangle):
    ray = Ray(Vector3(-5, 0, 0), Vector3(1, 0, 0))
    assert ray.intersect_triangle(*floor_triangle) is None


def test_intersect_triangle_behind_origin(floor_triangle):
    ray = Ray(Vector3(0, 2, 0), Vector3(0, 1, 0))
    assert ray.intersect_triangle(*floor_triangle) is None


def test_apply_matrix4():
    m = Matrix4().translate(1, 2, 3).rotate(math.pi / 2, Vector3(0, 0, 1))
    ray = Ray(Vector3(1, 0, 0), Vector3(0, 1, 0))

    assert ray.apply_matrix4(m) is ray
    assert ray.origin.to_array() == pytest.approx([1, 3, 3])
    assert ray.direction.to_array() == pytest.approx([-1, 0, 0], abs=1e-12)


def test_apply_projection_with_origin_on_camera_plane():
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))

    ray.apply_matrix4(Matrix4().perspective(90, 1, 1, 100))

    assert not all(math.isfinite(c) for c in ray.origin.to_array())
    assert ray.direction.to_array() == pytest.approx([0, 0, 1])


def test_apply_matrix4_renormalizes_direction():
    ray = Ray(Vector3(1, 1, 1), Vector3(0, 1, 0))
    ray.apply_matrix4(Matrix4().scale(3, 3, 3))
    assert ray.origin.to_array() == [3, 3, 3]
    assert ray.direction.to_array() == pytest.approx([0, 1, 0])


def test_equal_copy_clone():
    ray = Ray(Vector3(1, 2, 3), Vector3(0, 0, 1))
    assert ray.equal(Ray(Vector3(1, 2, 3), Vector3(0, 0, 1)))
    assert not ray.equal(Ray(Vector3(1, 2, 3), Vector3(0, 1, 0)))

    target = Ray()
    assert target.copy(ray) is target
    assert target.equal(ray)
    assert target.origin is not ray.origin

    cloned = ray.clone()
    cloned.origin.set(9, 9, 9)
    assert ray.origin.to_array() == [1, 2, 3]
