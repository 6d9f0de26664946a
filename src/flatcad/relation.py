"""spatial relations between polygons and other shapes

``cover(polygon, shape)`` is true when no point of ``shape`` lies
outside ``polygon``.  Curves are split at the points where they meet
the polygon boundary, and every piece is classified by its middle
point; a piece running along the boundary counts as covered.

``disjoint(a, b)`` is true when the shapes have no point in common.
Boxes, circles and polygons count as the regions they enclose here.
"""

from flatcad import config
from flatcad.box import Box
from flatcad.curves import Circle
from flatcad.geom import BOUNDARY, INSIDE, ShapeKind, kindof
from flatcad.intersection import intersect
from flatcad.ray_shooting import rayShoot


def _region(shape):
    from flatcad.polygon import Polygon
    if isinstance(shape,(Box,Circle)):
        return Polygon(shape)
    return shape


def _within(inner,outer):
    tol = config.DP_TOL
    return (inner.xmin >= outer.xmin - tol and inner.xmax <= outer.xmax + tol and
            inner.ymin >= outer.ymin - tol and inner.ymax <= outer.ymax + tol)


def _splitAt(shape,points):
    """pieces of a segment or arc between the given points"""
    pieces = []
    rest = shape
    for pt in shape.sortPoints(points):
        if rest is None:
            break
        head, rest = rest.split(pt)
        if head is not None:
            pieces.append(head)
    if rest is not None:
        pieces.append(rest)
    return pieces


def _curveCovered(polygon,curve):
    pieces = _splitAt(curve,intersect(curve,polygon))
    return all(rayShoot(polygon,piece.middle()) in (INSIDE,BOUNDARY) for piece in pieces)


def cover(polygon,shape):
    """``True`` if no point of ``shape`` lies outside ``polygon``"""
    kind = kindof(shape)
    if polygon.isEmpty():
        return False
    if kind is ShapeKind.POINT:
        return rayShoot(polygon,shape) in (INSIDE,BOUNDARY)
    if kind is ShapeKind.LINE:
        return False
    if kind in (ShapeKind.SEGMENT,ShapeKind.ARC):
        if not _within(shape.box,polygon.box):
            return False
        return _curveCovered(polygon,shape)

    other = _region(shape)
    if not _within(other.box,polygon.box):
        return False
    if not all(_curveCovered(polygon,edge.shape) for edge in other.edges):
        return False
    # a boundary of ours strictly inside the other region means part of
    # it lies in one of our holes
    return not any(rayShoot(other,edge.middle()) == INSIDE for edge in polygon.edges)


def _samples(shape):
    if shape.kind is ShapeKind.POLYGON:
        return [face.first.start for face in shape.faces]
    if shape.kind is ShapeKind.POINT:
        return [shape]
    if shape.kind is ShapeKind.LINE:
        return [shape.pt]
    return [shape.start]


def disjoint(a,b):
    """``True`` if ``a`` and ``b`` have no point in common"""
    kindof(a)
    kindof(b)
    a = _region(a)
    b = _region(b)
    if a.box.notIntersect(b.box):
        return True
    if intersect(a,b):
        return False
    for outer, inner in ((a,b),(b,a)):
        if outer.kind is ShapeKind.POLYGON and \
                any(outer.contains(p) for p in _samples(inner)):
            return False
    return True


__all__ = ['cover', 'disjoint']
