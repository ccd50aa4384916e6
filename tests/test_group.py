import math

import pytest

from whitted import (
    Cylinder,
    Group,
    Plane,
    Ray,
    SceneError,
    Sphere,
    Transform,
    Vector3,
)
from whitted.geometry import sort_intersections

from conftest import assert_vec


def test_new_group_is_empty():
    g = Group()
    assert len(g) == 0
    assert g.transform.is_identity()
    assert g.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))) == []
    assert g.local_bounds().is_empty()


def test_adding_child_marks_membership():
    g = Group()
    s = Sphere()
    g.add_child(s)
    assert g.children == [s]
    assert s.in_group


def test_child_cannot_join_two_groups():
    s = Sphere()
    Group([s])
    with pytest.raises(SceneError):
        Group([s])


def test_group_cannot_contain_itself():
    g = Group()
    with pytest.raises(SceneError):
        g.add_child(g)


def test_intersect_nonempty_group():
    s1 = Sphere()
    s2 = Sphere(transform=Transform.translation(0, 0, -3))
    s3 = Sphere(transform=Transform.translation(5, 0, 0))
    g = Group([s1, s2, s3])
    xs = sort_intersections(g.intersect(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))))
    assert len(xs) == 4
    assert [i.object for i in xs] == [s2, s2, s1, s1]


def test_intersect_transformed_group():
    s = Sphere(transform=Transform.translation(5, 0, 0))
    g = Group([s], transform=Transform.scaling(2, 2, 2))
    xs = g.intersect(Ray(Vector3(10, 0, -10), Vector3(0, 0, 1)))
    assert len(xs) == 2


def test_ray_missing_the_box_skips_children():
    class Counting(Sphere):
        calls = 0

        def local_intersect(self, ray):
            Counting.calls += 1
            return super().local_intersect(ray)

    g = Group([Counting(), Counting(transform=Transform.translation(3, 0, 0))])
    assert g.intersect(Ray(Vector3(0, 10, -5), Vector3(0, 0, 1))) == []
    assert Counting.calls == 0
    g.intersect(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)))
    assert Counting.calls == 2


def _nested_sphere(build_bottom_up: bool) -> Sphere:
    g1 = Group(transform=Transform.rotation_y(math.pi / 2))
    g2 = Group(transform=Transform.scaling(1, 2, 3))
    s = Sphere(transform=Transform.translation(5, 0, 0))
    if build_bottom_up:
        g2.add_child(s)
        g1.add_child(g2)
    else:
        g1.add_child(g2)
        g2.add_child(s)
    return s


@pytest.mark.parametrize("build_bottom_up", [True, False])
def test_world_point_to_object_space(build_bottom_up):
    s = _nested_sphere(build_bottom_up)
    assert_vec(s.transform.inverse.apply_point(Vector3(-2, 0, -10)), (0, 0, -1))


@pytest.mark.parametrize("build_bottom_up", [True, False])
def test_normal_on_nested_child(build_bottom_up):
    s = _nested_sphere(build_bottom_up)
    assert_vec(s.normal_at(Vector3(1.7321, 1.1547, -5.5774)), (0.2857, 0.4286, -0.8571))


def test_moving_group_moves_children():
    s = Sphere()
    g = Group([s], transform=Transform.translation(1, 0, 0))
    g.transform = Transform.translation(0, 4, 0)
    assert_vec(s.transform.apply_point(Vector3(0, 0, 0)), (0, 4, 0))
    assert len(g.intersect(Ray(Vector3(0, 4, -5), Vector3(0, 0, 1)))) == 2


def _bounded_children():
    s = Sphere(transform=Transform.translation(2, 5, -3) @ Transform.scaling(2, 2, 2))
    c = Cylinder(minimum=-2, maximum=2,
                 transform=Transform.translation(-4, -1, 4) @ Transform.scaling(0.5, 1, 0.5))
    return s, c


def test_bounds_contain_all_children():
    box = Group(_bounded_children()).local_bounds()
    assert_vec(box.minimum, (-4.5, -3, -5))
    assert_vec(box.maximum, (4, 7, 4.5))


def test_bounds_do_not_depend_on_insertion_order():
    s, c = _bounded_children()
    forward = Group([s, c]).local_bounds()
    s, c = _bounded_children()
    backward = Group([c, s]).local_bounds()
    assert_vec(forward.minimum, backward.minimum)
    assert_vec(forward.maximum, backward.maximum)


def test_bounds_are_in_group_space():
    s = Sphere(transform=Transform.translation(2, 0, 0))
    g = Group([s], transform=Transform.scaling(3, 3, 3))
    box = g.local_bounds()
    assert_vec(box.minimum, (1, -1, -1))
    assert_vec(box.maximum, (3, 1, 1))
    parent = g.bounding_box()
    assert_vec(parent.minimum, (3, -3, -3))
    assert_vec(parent.maximum, (9, 3, 3))


def test_unbounded_child_is_still_hit():
    p = Plane(transform=Transform.translation(0, -1, 0))
    g = Group([p, Sphere()])
    xs = g.intersect(Ray(Vector3(50, 5, 50), Vector3(0, -1, 0)))
    assert [i.object for i in xs] == [p]


class TestSubdivision:
    def test_partition_children(self):
        s1 = Sphere(transform=Transform.translation(-2, 0, 0))
        s2 = Sphere(transform=Transform.translation(2, 0, 0))
        s3 = Sphere()
        g = Group([s1, s2, s3])
        left, right = g.partition_children()
        assert g.children == [s3]
        assert left == [s1]
        assert right == [s2]

    def test_make_subgroup(self):
        s1, s2 = Sphere(), Sphere()
        g = Group()
        g.make_subgroup([s1, s2])
        assert len(g.children) == 1
        assert isinstance(g.children[0], Group)
        assert g.children[0].children == [s1, s2]

    def test_primitive_divide_is_noop(self):
        s = Sphere()
        s.divide(1)
        assert s.transform.is_identity()

    def test_divide_group(self):
        s1 = Sphere(transform=Transform.translation(-2, -2, 0))
        s2 = Sphere(transform=Transform.translation(-2, 2, 0))
        s3 = Sphere(transform=Transform.scaling(4, 4, 4))
        g = Group([s1, s2, s3])
        g.divide(1)
        assert g.children[0] is s3
        subgroup = g.children[1]
        assert isinstance(subgroup, Group)
        assert len(subgroup.children) == 2
        assert subgroup.children[0].children == [s1]
        assert subgroup.children[1].children == [s2]

    def test_divide_leaves_small_groups_alone(self):
        s1 = Sphere(transform=Transform.translation(-2, 0, 0))
        s2 = Sphere(transform=Transform.translation(2, 1, 0))
        s3 = Sphere(transform=Transform.translation(2, -1, 0))
        subgroup = Group([s1, s2, s3])
        s4 = Sphere()
        g = Group([subgroup, s4])
        g.divide(2)
        assert g.children[0] is subgroup
        assert g.children[1] is s4
        assert len(subgroup.children) == 2
        assert subgroup.children[0].children == [s1]
        assert subgroup.children[1].children == [s2, s3]

    def test_divide_keeps_intersections(self):
        spheres = [Sphere(transform=Transform.translation(3 * i, 0, 0) @ Transform.scaling(0.5, 0.5, 0.5))
                   for i in range(8)]
        g = Group(spheres, transform=Transform.rotation_z(0.3))
        ray = Ray(Vector3(-5, 1, 0), Vector3(1, 0.05, 0).normalize())
        before = sorted((i.t, id(i.object)) for i in g.intersect(ray))
        g.divide(2)
        after = sorted((i.t, id(i.object)) for i in g.intersect(ray))
        assert before == after

    def test_divide_never_loops_on_overlapping_children(self):
        children = [Sphere() for _ in range(5)]
        g = Group(children)
        g.divide(2)
        assert g.children == children


class TestFixedTransforms:
    def test_child_transform_is_fixed_once_added(self):
        g = Group()
        s = Sphere()
        g.add_child(s)
        g.intersect(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)))
        with pytest.raises(SceneError):
            s.transform = Transform.translation(5, 0, 0)
        assert s.transform.is_identity()
        assert len(g.intersect(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)))) == 2

    def test_child_keeps_group_transform(self):
        s = Sphere()
        g = Group([s], transform=Transform.translation(0, 0, 10))
        with pytest.raises(SceneError):
            s.transform = Transform.scaling(2, 2, 2)
        xs = g.intersect(Ray(Vector3(0, 0, -20), Vector3(0, 0, 1)))
        assert [i.t for i in xs] == [29.0, 31.0]

    def test_nested_group_transform_is_fixed(self):
        inner = Group([Sphere()])
        outer = Group([inner])
        with pytest.raises(SceneError):
            inner.transform = Transform.translation(3, 0, 0)
        assert len(outer.intersect(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)))) == 2

    def test_subgroups_from_divide_are_fixed(self):
        s1 = Sphere(transform=Transform.translation(-2, 0, 0))
        s2 = Sphere(transform=Transform.translation(2, 0, 0))
        g = Group([s1, s2])
        g.divide(1)
        with pytest.raises(SceneError):
            g.children[0].transform = Transform.identity()

    def test_outer_group_can_still_move_after_divide(self):
        s1 = Sphere(transform=Transform.translation(-2, 0, 0))
        s2 = Sphere(transform=Transform.translation(2, 0, 0))
        g = Group([s1, s2])
        g.divide(1)
        g.transform = Transform.translation(0, 5, 0)
        xs = sort_intersections(g.intersect(Ray(Vector3(2, 5, -5), Vector3(0, 0, 1))))
        assert [i.object for i in xs] == [s2, s2]
        assert g.intersect(Ray(Vector3(2, 0, -5), Vector3(0, 0, 1))) == []
