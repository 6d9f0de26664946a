import pytest

from flatcad.errors import (GeometryError, InvalidPrecondition, TopologyError,
                            UnsupportedShapeKind)
from flatcad.polygon import Polygon
from flatcad.primitives import Point


def test_hierarchy():
    assert issubclass(InvalidPrecondition, GeometryError)
    assert issubclass(TopologyError, GeometryError)
    assert issubclass(GeometryError, ValueError)
    assert issubclass(UnsupportedShapeKind, TypeError)


def test_details():
    err = GeometryError('bad')
    assert str(err) == 'bad'
    assert err.details == {}
    err = InvalidPrecondition('off edge', {'point': 1})
    assert err.details == {'point': 1}


def test_precondition_details():
    polygon = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    with pytest.raises(InvalidPrecondition) as info:
        polygon.cutFace(Point(5, 5), Point(5, 10))
    assert set(info.value.details) == {'pt1', 'pt2'}
