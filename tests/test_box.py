import pytest

from flatcad.box import Box
from flatcad.primitives import Point
from flatcad.topology import signedArea


def test_box_intersect():
    assert Box(0, 0, 10, 10).intersect(Box(5, 5, 15, 15))
    assert not Box(0, 0, 10, 10).intersect(Box(11, 11, 20, 20))


def test_touching_boxes_intersect():
    assert Box(0, 0, 10, 10).intersect(Box(10, 0, 20, 10))


def test_empty_box():
    empty = Box()
    assert empty.isEmpty()
    assert not empty.intersect(Box(0, 0, 1, 1))
    merged = empty.merge(Box(1, 2, 3, 4))
    assert (merged.xmin, merged.ymin, merged.xmax, merged.ymax) == (1, 2, 3, 4)


def test_merge():
    m = Box(0, 0, 1, 1).merge(Box(5, -2, 6, 0))
    assert (m.xmin, m.ymin, m.xmax, m.ymax) == (0, -2, 6, 1)


def test_low_high_order():
    box = Box(0, 5, 10, 2)
    assert box.low == Point(0, 5)
    assert box.high == Point(10, 2)
    assert box.low < box.high


def test_less_than():
    assert Box(0, 0, 1, 1).lessThan(Box(1, 0, 2, 1))
    assert Box(0, 0, 1, 1).lessThan(Box(0, 0, 2, 1))
    assert not Box(0, 0, 1, 1).lessThan(Box(0, 0, 1, 1))
    assert Box(0, 0, 1, 1).equalTo(Box(0, 0, 1, 1))


def test_contains():
    box = Box(0, 0, 10, 10)
    assert box.contains(Point(5, 5))
    assert box.contains(Point(10, 10))
    assert not box.contains(Point(11, 5))
    assert box.contains(Box(2, 2, 3, 3))
    assert not box.contains(Box(2, 2, 30, 3))


def test_sides_run_counterclockwise():
    sides = Box(0, 0, 10, 5).toSegments()
    assert len(sides) == 4
    assert signedArea(sides) == pytest.approx(50)
    for s1, s2 in zip(sides, sides[1:] + sides[:1]):
        assert s1.end.equalTo(s2.start)


def test_center_and_size():
    box = Box(0, 0, 10, 4)
    assert box.center.equalTo(Point(5, 2))
    assert box.width == 10
    assert box.height == 4


def test_translate():
    box = Box(0, 0, 1, 1).translate(2, 3)
    assert (box.xmin, box.ymin, box.xmax, box.ymax) == (2, 3, 3, 4)


def test_svg():
    svg = Box(0, 0, 1, 2).svg()
    assert '<rect' in svg
    assert 'height="2"' in svg
