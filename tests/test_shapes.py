import math

import pytest

from flatcad.curves import Arc, Circle, Line, Segment
from flatcad.errors import UnsupportedShapeKind
from flatcad.geom import CCW, CW, ShapeKind, kindof
from flatcad.primitives import Matrix, Point, Vector


class TestPoint:

    def test_construction(self):
        assert Point(1, 2) == Point((1, 2))
        assert Point(Point(3, 4)) == Point(3, 4)
        with pytest.raises(ValueError):
            Point('a', 1)

    def test_order(self):
        assert Point(0, 5) < Point(1, 0)
        assert Point(1, 0) < Point(1, 2)
        assert Point(0, 0).lessThan(Point(0, 1))
        assert not Point(0, 0).lessThan(Point(0, 0.0000001))

    def test_tolerance_equality(self):
        assert Point(1, 1).equalTo(Point(1 + 1e-9, 1))
        assert not Point(1, 1).equalTo(Point(1.001, 1))

    def test_rotate(self):
        p = Point(1, 0).rotate(math.pi / 2)
        assert p.equalTo(Point(0, 1))
        q = Point(2, 1).rotate(math.pi, Point(1, 1))
        assert q.equalTo(Point(0, 1))

    def test_transform(self):
        m = Matrix().translate(1, 2)
        assert Point(1, 1).transform(m).equalTo(Point(2, 3))

    def test_left_to(self):
        line = Line(Point(0, 0), Point(1, 0))
        assert Point(0, 1).leftTo(line)
        assert not Point(0, -1).leftTo(line)


class TestVector:

    def test_basic(self):
        v = Vector(Point(1, 1), Point(4, 5))
        assert v.length == pytest.approx(5)
        assert v.dot(Vector(1, 0)) == pytest.approx(3)
        assert Vector(1, 0).cross(Vector(0, 1)) == pytest.approx(1)

    def test_slope_range(self):
        assert Vector(0, -1).slope == pytest.approx(3 * math.pi / 2)
        assert Vector(1, 0).slope == pytest.approx(0)

    def test_normalize_zero(self):
        with pytest.raises(ValueError):
            Vector(0, 0).normalize()


class TestSegment:

    def test_contains(self):
        s = Segment(0, 0, 10, 0)
        assert s.contains(Point(5, 0))
        assert s.contains(Point(10, 0))
        assert not s.contains(Point(11, 0))
        assert not s.contains(Point(5, 1))

    def test_split(self):
        s = Segment(0, 0, 10, 0)
        head, tail = s.split(Point(4, 0))
        assert head.end.equalTo(Point(4, 0))
        assert tail.start.equalTo(Point(4, 0))
        assert s.split(Point(0, 0))[0] is None
        assert s.split(Point(10, 0))[1] is None

    def test_sort_points(self):
        s = Segment(10, 0, 0, 0)
        pts = s.sortPoints([Point(2, 0), Point(8, 0), Point(5, 0)])
        assert [p.x for p in pts] == [8, 5, 2]

    def test_bad_arguments(self):
        with pytest.raises(ValueError):
            Segment(1, 2, 3)

    def test_to_json(self):
        j = Segment(0, 0, 1, 1).toJSON()
        assert j['name'] == 'segment'
        assert j['pe'] == {'name': 'point', 'x': 1.0, 'y': 1.0}


class TestArc:

    def test_sweep_and_length(self):
        arc = Arc(Point(0, 0), 2, 0, math.pi / 2, CCW)
        assert arc.sweep == pytest.approx(math.pi / 2)
        assert arc.length == pytest.approx(math.pi)
        cw = Arc(Point(0, 0), 2, 0, math.pi / 2, CW)
        assert cw.sweep == pytest.approx(3 * math.pi / 2)

    def test_full_circle(self):
        arc = Circle(Point(0, 0), 1).toArc()
        assert arc.sweep == pytest.approx(2 * math.pi)
        assert arc.start.equalTo(arc.end)

    def test_contains(self):
        arc = Arc(Point(0, 0), 1, 0, math.pi, CCW)
        assert arc.contains(Point(0, 1))
        assert not arc.contains(Point(0, -1))
        assert arc.contains(Point(-1, 0))

    def test_box(self):
        box = Arc(Point(0, 0), 1, 0, math.pi, CCW).box
        assert box.ymax == pytest.approx(1)
        assert box.ymin == pytest.approx(0, abs=1e-9)
        assert box.xmin == pytest.approx(-1)

    def test_break_to_functional(self):
        pieces = Circle(Point(0, 0), 1).toArc().breakToFunctional()
        assert len(pieces) == 4
        assert sum(p.length for p in pieces) == pytest.approx(2 * math.pi)
        small = Arc(Point(0, 0), 1, 0.1, 0.2, CCW).breakToFunctional()
        assert len(small) == 1

    def test_split(self):
        arc = Arc(Point(0, 0), 1, 0, math.pi, CCW)
        head, tail = arc.split(Point(0, 1))
        assert head.end.equalTo(Point(0, 1))
        assert tail.start.equalTo(Point(0, 1))
        assert head.length + tail.length == pytest.approx(arc.length)

    def test_integral_of_full_circle(self):
        arc = Circle(Point(5, 5), 2).toArc()
        assert arc.definiteIntegral() == pytest.approx(4 * math.pi)
        assert arc.reverse().definiteIntegral() == pytest.approx(-4 * math.pi)

    def test_middle(self):
        arc = Arc(Point(0, 0), 1, 0, math.pi, CCW)
        assert arc.middle().equalTo(Point(0, 1))


class TestCircle:

    def test_contains(self):
        c = Circle(Point(0, 0), 5)
        assert c.contains(Point(3, 4))
        assert c.contains(Segment(0, 0, 1, 1))
        assert not c.contains(Circle(Point(4, 0), 2))
        with pytest.raises(UnsupportedShapeKind):
            c.contains(Line())


class TestLine:

    def test_contains(self):
        line = Line(Point(0, 0), Point(1, 1))
        assert line.contains(Point(5, 5))
        assert not line.contains(Point(5, 4))

    def test_parallel(self):
        l1 = Line(Point(0, 0), Point(1, 0))
        l2 = Line(Point(0, 3), Point(5, 3))
        assert l1.parallelTo(l2)
        assert not l1.incidentTo(l2)


def test_kinds():
    assert kindof(Point()) is ShapeKind.POINT
    assert kindof(Segment(0, 0, 1, 1)) is ShapeKind.SEGMENT
    with pytest.raises(UnsupportedShapeKind):
        kindof(42)
