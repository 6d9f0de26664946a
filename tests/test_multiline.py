import logging
import math

import pytest

from flatcad.curves import Arc, Segment
from flatcad.multiline import Multiline
from flatcad.primitives import Point
from flatcad.topology import Edge


def points(multiline):
    return [(round(p.x, 9), round(p.y, 9)) for p in multiline.vertices]


@pytest.fixture
def elbow():
    return Multiline([Point(0, 0), Point(10, 0), Point(10, 10)])


def test_from_points(elbow):
    assert len(elbow) == 2
    assert points(elbow) == [(0, 0), (10, 0), (10, 10)]
    assert elbow.first.prev is None
    assert elbow.last.next is None
    assert elbow.first.next is elbow.last


def test_from_shapes():
    chain = Multiline([Segment(-2, 0, -1, 0), Arc(Point(0, 0), 1, math.pi, 0, False)])
    assert len(chain) == 2
    assert chain.box.ymax == pytest.approx(1)


def test_bad_shapes():
    with pytest.raises(ValueError):
        Multiline([Point(0, 0), Segment(0, 0, 1, 0)])
    with pytest.raises(ValueError):
        Multiline([42])


def test_empty():
    chain = Multiline()
    assert chain.isEmpty()
    assert chain.vertices == []
    assert chain.box.isEmpty()
    assert chain.svg() == ''


def test_box(elbow):
    box = elbow.box
    assert (box.xmin, box.ymin, box.xmax, box.ymax) == (0, 0, 10, 10)


def test_insert():
    chain = Multiline([Point(0, 0), Point(1, 0)])
    front = Edge(Segment(-1, 0, 0, 0))
    chain.insert(front, None)
    assert chain.first is front
    back = Edge(Segment(1, 0, 2, 0))
    chain.insert(back, chain.last)
    assert chain.last is back
    assert points(chain) == [(-1, 0), (0, 0), (1, 0), (2, 0)]


def test_split(elbow, caplog):
    caplog.set_level(logging.DEBUG, logger='flatcad.multiline')
    elbow.split([Point(5, 0), Point(20, 20), Point(10, 5)])
    assert len(elbow) == 4
    assert points(elbow) == [(0, 0), (5, 0), (10, 0), (10, 5), (10, 10)]
    assert any('not on the multiline' in r.getMessage() for r in caplog.records)
    for edge in elbow.edges[1:]:
        assert edge.prev.next is edge
        assert edge.prev.end.equalTo(edge.start)


def test_split_at_vertex(elbow):
    elbow.split([Point(10, 0), Point(0, 0)])
    assert len(elbow) == 2


def test_add_vertex_returns_edge_ending_there(elbow):
    first = elbow.first
    head = elbow.addVertex(Point(4, 0), first)
    assert head.end.equalTo(Point(4, 0))
    assert head.next is first
    assert elbow.first is head


def test_find_edge_by_point(elbow):
    assert elbow.findEdgeByPoint(Point(10, 3)) is elbow.last
    assert elbow.findEdgeByPoint(Point(3, 3)) is None


def test_transformations(elbow):
    moved = elbow.translate(1, 2)
    assert points(moved) == [(1, 2), (11, 2), (11, 12)]
    turned = elbow.rotate(math.pi, Point(0, 0))
    assert points(turned) == [(0, 0), (-10, 0), (-10, -10)]
    assert points(elbow) == [(0, 0), (10, 0), (10, 10)]


def test_export(elbow):
    assert [d['name'] for d in elbow.toJSON()] == ['segment', 'segment']
    svg = elbow.svg(stroke='blue')
    assert 'd="M0.0,0.0 L10.0,0.0 L10.0,10.0"' in svg
    assert 'stroke="blue"' in svg
    assert 'fill="none"' in svg
