import math

import pytest

from flatcad import intersection
from flatcad.box import Box
from flatcad.curves import Arc, Circle, Line, Segment
from flatcad.errors import UnsupportedShapeKind
from flatcad.geom import ShapeKind
from flatcad.intersection import intersect
from flatcad.polygon import Polygon
from flatcad.primitives import Point


def assertPoints(points, expected):
    assert len(points) == len(expected)
    for p, (x, y) in zip(points, expected):
        assert p.x == pytest.approx(x, abs=1e-9)
        assert p.y == pytest.approx(y, abs=1e-9)


def test_matrix_is_complete():
    assert len(intersection._MATRIX) == len(ShapeKind) ** 2 == 49


def test_unsupported_kind():
    with pytest.raises(UnsupportedShapeKind):
        intersect(Point(0, 0), 42)
    with pytest.raises(TypeError):
        intersect('segment', Point(0, 0))


class TestPoints:

    def test_point_point(self):
        assertPoints(intersect(Point(1, 1), Point(1, 1)), [(1, 1)])
        assert intersect(Point(1, 1), Point(1, 2)) == []

    def test_point_on_curves(self):
        assert len(intersect(Point(5, 0), Segment(0, 0, 10, 0))) == 1
        assert intersect(Segment(0, 0, 10, 0), Point(5, 1)) == []
        assert len(intersect(Point(0, 1), Circle(Point(0, 0), 1))) == 1
        assert intersect(Point(0, 0), Circle(Point(0, 0), 1)) == []

    def test_point_in_region(self):
        assert len(intersect(Point(5, 5), Box(0, 0, 10, 10))) == 1
        square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        assert len(intersect(square, Point(5, 5))) == 1
        assert intersect(Point(15, 5), square) == []


class TestStraight:

    def test_crossing_segments(self):
        pts = intersect(Segment(0, 0, 10, 10), Segment(0, 10, 10, 0))
        assertPoints(pts, [(5, 5)])

    def test_disjoint_segments(self):
        assert intersect(Segment(0, 0, 1, 0), Segment(0, 1, 1, 1)) == []
        assert intersect(Segment(0, 0, 1, 1), Segment(3, 0, 2, 1)) == []

    def test_collinear_overlap(self):
        pts = intersect(Segment(0, 0, 10, 0), Segment(5, 0, 15, 0))
        assertPoints(pts, [(5, 0), (10, 0)])

    def test_touching_at_end(self):
        pts = intersect(Segment(0, 0, 10, 0), Segment(10, 0, 10, 10))
        assertPoints(pts, [(10, 0)])

    def test_lines(self):
        l1 = Line(Point(0, 0), Point(1, 1))
        l2 = Line(Point(0, 2), Point(2, 0))
        assertPoints(intersect(l1, l2), [(1, 1)])
        l3 = Line(Point(0, 1), Point(1, 2))
        assert intersect(l1, l3) == []

    def test_line_segment(self):
        line = Line(Point(0, 0), Point(1, 0))
        assertPoints(intersect(line, Segment(3, -1, 3, 1)), [(3, 0)])
        assertPoints(intersect(Segment(3, -1, 3, 1), line), [(3, 0)])
        assert intersect(line, Segment(0, 1, 5, 1)) == []


class TestRound:

    def test_line_circle_sorted_along_line(self):
        line = Line(Point(0, 0), Point(1, 0))
        pts = intersect(line, Circle(Point(0, 0), 2))
        assertPoints(pts, [(-2, 0), (2, 0)])
        assertPoints(intersect(Circle(Point(0, 0), 2), line), [(-2, 0), (2, 0)])

    def test_tangent_line(self):
        line = Line(Point(0, 2), Point(1, 2))
        assertPoints(intersect(line, Circle(Point(0, 0), 2)), [(0, 2)])

    def test_segment_circle(self):
        pts = intersect(Segment(0, 0, 10, 0), Circle(Point(0, 0), 5))
        assertPoints(pts, [(5, 0)])
        pts = intersect(Segment(-10, 0, 10, 0), Circle(Point(0, 0), 5))
        assertPoints(pts, [(-5, 0), (5, 0)])

    def test_two_circles(self):
        pts = intersect(Circle(Point(0, 0), 5), Circle(Point(8, 0), 5))
        assert len(pts) == 2
        assert sorted(p.y for p in pts) == pytest.approx([-3, 3])
        assert all(p.x == pytest.approx(4) for p in pts)

    def test_tangent_circles(self):
        pts = intersect(Circle(Point(0, 0), 1), Circle(Point(2, 0), 1))
        assertPoints(pts, [(1, 0)])
        pts = intersect(Circle(Point(0, 0), 2), Circle(Point(1, 0), 1))
        assertPoints(pts, [(2, 0)])

    def test_separate_and_coincident_circles(self):
        assert intersect(Circle(Point(0, 0), 1), Circle(Point(5, 0), 1)) == []
        assert intersect(Circle(Point(0, 0), 1), Circle(Point(0, 0), 1)) == []
        assert intersect(Circle(Point(0, 0), 1), Circle(Point(0, 0), 3)) == []

    def test_segment_arc(self):
        arc = Arc(Point(0, 0), 1, 0, math.pi, True)
        assertPoints(intersect(Segment(0, -2, 0, 2), arc), [(0, 1)])
        assert intersect(Segment(-2, -0.5, 2, -0.5), arc) == []

    def test_arcs_of_one_circle(self):
        a1 = Arc(Point(0, 0), 1, 0, 1.5 * math.pi, True)
        a2 = Arc(Point(0, 0), 1, math.pi, 2.5 * math.pi, True)
        assert len(intersect(a1, a2)) == 4

    def test_arc_on_its_circle(self):
        arc = Arc(Point(0, 0), 1, 0, math.pi / 2, True)
        pts = intersect(arc, Circle(Point(0, 0), 1))
        assertPoints(pts, [(1, 0), (0, 1)])

    def test_arc_circle(self):
        arc = Arc(Point(0, 0), 5, 0, math.pi, True)
        pts = intersect(arc, Circle(Point(8, 0), 5))
        assertPoints(pts, [(4, 3)])


class TestCompound:

    def test_boxes(self):
        pts = intersect(Box(0, 0, 10, 10), Box(5, 5, 15, 15))
        assert len(pts) == 2
        assert {(round(p.x), round(p.y)) for p in pts} == {(10, 5), (5, 10)}

    def test_segment_polygon(self):
        square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        pts = intersect(Segment(5, -5, 5, 15), square)
        assertPoints(pts, [(5, 0), (5, 10)])
        assert intersect(Segment(2, 2, 8, 8), square) == []

    def test_shared_vertex_reported_once(self):
        square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        pts = intersect(Segment(-5, -5, 5, 5), square)
        assertPoints(pts, [(0, 0)])

    def test_polygon_polygon(self):
        a = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        b = Polygon([(5, 5), (15, 5), (15, 15), (5, 15)])
        assert len(intersect(a, b)) == 2
        assert len(a.intersect(b)) == 2

    def test_circle_polygon(self):
        square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        pts = intersect(Circle(Point(0, 0), 5), square)
        assert {(round(p.x), round(p.y)) for p in pts} == {(5, 0), (0, 5)}

    def test_shape_method(self):
        assertPoints(Segment(0, 0, 10, 10).intersect(Segment(0, 10, 10, 0)), [(5, 5)])
