"""shortest distance between shapes

``distance(a, b)`` returns ``(dist, segment)``, where ``segment`` is a
shortest connecting ``Segment`` running from a point of ``a`` to a
point of ``b``.  Where the shapes meet the segment has zero length.

Like ``intersect()`` it dispatches on the ``ShapeKind`` pair through a
matrix that covers every pair; mirrored entries swap the arguments and
reverse the witness segment.  Boxes and polygons are measured to their
boundary, so a point inside a polygon has a positive distance to it.

Searches over many boundary curves visit the curves nearest first and
stop as soon as the gap between bounding boxes can no longer beat the
best distance found so far.
"""

import math

from flatcad.curves import Segment
from flatcad.errors import UnsupportedShapeKind
from flatcad.geom import ShapeKind, iszero, kindof
from flatcad.intersection import intersect
from flatcad.primitives import Vector

P = ShapeKind.POINT
L = ShapeKind.LINE
S = ShapeKind.SEGMENT
A = ShapeKind.ARC
C = ShapeKind.CIRCLE
B = ShapeKind.BOX
G = ShapeKind.POLYGON


def boxGap(b1,b2):
    """lower bound on the distance between anything in ``b1`` and
    anything in ``b2``"""
    dx = max(0.0,b2.xmin - b1.xmax,b1.xmin - b2.xmax)
    dy = max(0.0,b2.ymin - b1.ymax,b1.ymin - b2.ymax)
    return math.hypot(dx,dy)


def _between(p,q):
    return Vector(p,q).length, Segment(p,q)


def _best(candidates):
    return min(candidates,key=lambda c: c[0])


def _reversed(result):
    d, seg = result
    return d, (seg.reverse() if seg is not None else None)


def _touching(a,b):
    ips = intersect(a,b)
    if ips:
        return 0.0, Segment(ips[0],ips[0])
    return None


def _onCenterLine(curve,towards):
    """points of ``curve`` (an arc or circle) on the line through its
    center and ``towards``"""
    v = Vector(curve.pc,towards)
    if iszero(v.length):
        return []
    u = v.normalize().multiply(curve.r)
    pts = [curve.pc.translate(u),curve.pc.translate(u.invert())]
    if curve.kind is A:
        pts = [p for p in pts if curve.contains(p)]
    return pts


## point against curves

def _pointPoint(p1,p2):
    return _between(p1,p2)

def _pointCurve(pt,shape):
    return _between(pt,shape.closestPoint(pt))

def _pointCompound(pt,compound):
    return _nearest(pt,_boundary(compound))


## lines

def _lineLine(l1,l2):
    if l1.parallelTo(l2):
        return _between(l1.pt,l2.closestPoint(l1.pt))
    return _touching(l1,l2)

def _lineSegment(line,seg):
    hit = _touching(line,seg)
    if hit:
        return hit
    return _best([_between(line.closestPoint(p),p) for p in seg.vertices])

def _lineArc(line,arc):
    hit = _touching(line,arc)
    if hit:
        return hit
    pts = list(arc.vertices) + _onCenterLine(arc,line.closestPoint(arc.pc))
    return _best([_between(line.closestPoint(p),p) for p in pts])

def _lineCircle(line,circle):
    hit = _touching(line,circle)
    if hit:
        return hit
    q = line.closestPoint(circle.pc)
    return _between(q,circle.closestPoint(q))


## segments, arcs and circles

def _segmentSegment(s1,s2):
    hit = _touching(s1,s2)
    if hit:
        return hit
    candidates = [_pointCurve(p,s2) for p in s1.vertices]
    candidates += [_reversed(_pointCurve(p,s1)) for p in s2.vertices]
    return _best(candidates)

def _segmentArc(seg,arc):
    hit = _touching(seg,arc)
    if hit:
        return hit
    candidates = [_pointCurve(p,arc) for p in seg.vertices]
    candidates += [_reversed(_pointCurve(p,seg)) for p in arc.vertices]
    q = seg.closestPoint(arc.pc)
    candidates += [_between(q,p) for p in _onCenterLine(arc,q)]
    return _best(candidates)

def _segmentCircle(seg,circle):
    hit = _touching(seg,circle)
    if hit:
        return hit
    pts = seg.vertices + [seg.closestPoint(circle.pc)]
    return _best([_pointCurve(p,circle) for p in pts])

def _roundRound(c1,c2):
    """arcs and circles: end points and the points on the line of
    centers are the only candidates"""
    hit = _touching(c1,c2)
    if hit:
        return hit
    pts1 = _onCenterLine(c1,c2.pc)
    pts2 = _onCenterLine(c2,c1.pc)
    if c1.kind is A:
        pts1 += c1.vertices
    if c2.kind is A:
        pts2 += c2.vertices
    if not pts1 and not pts2:
        # concentric circles
        p = c1.pc.translate(c1.r,0)
        return _between(p,c2.closestPoint(p))
    candidates = [_pointCurve(p,c2) for p in pts1]
    candidates += [_reversed(_pointCurve(p,c1)) for p in pts2]
    return _best(candidates)


## boxes and polygons

def _boundary(compound):
    if compound.kind is B:
        return [] if compound.isEmpty() else compound.toSegments()
    return [edge.shape for edge in compound.edges]

def _nearest(shape,pieces,minStop=math.inf):
    """distance from ``shape`` to the nearest of ``pieces``; returns
    ``(minStop, None)`` when nothing is closer than ``minStop``"""
    box = shape.box
    ranked = sorted(((boxGap(box,piece.box),piece) for piece in pieces),
                    key=lambda t: t[0])
    best = (minStop,None)
    for gap, piece in ranked:
        if gap >= best[0]:
            break
        d, seg = distance(shape,piece)
        if d < best[0]:
            best = (d,seg)
    return best

def shape2planarSet(shape,edges,minStop=math.inf):
    """distance from ``shape`` to the nearest edge in the ``PlanarSet``
    ``edges``, abandoning edges that can not come closer than
    ``minStop``"""
    return _nearest(shape,[edge.shape for edge in edges],minStop)

def _curveCompound(curve,compound):
    return _nearest(curve,_boundary(compound))

def _compoundCompound(c1,c2):
    best = (math.inf,None)
    target = _boundary(c2)
    for piece in _boundary(c1):
        if c2.kind is G:
            d, seg = shape2planarSet(piece,c2.edges,best[0])
        else:
            d, seg = _nearest(piece,target,best[0])
        if seg is not None:
            best = (d,seg)
    return best


_MATRIX = {}

def _register(kindA,kindB,handler):
    _MATRIX[(kindA,kindB)] = handler
    if kindA is not kindB:
        _MATRIX[(kindB,kindA)] = lambda a, b: _reversed(handler(b,a))

_register(P,P,_pointPoint)
for _kind in (L,S,A,C):
    _register(P,_kind,_pointCurve)
_register(P,B,_pointCompound)
_register(P,G,_pointCompound)
_register(L,L,_lineLine)
_register(L,S,_lineSegment)
_register(L,A,_lineArc)
_register(L,C,_lineCircle)
_register(S,S,_segmentSegment)
_register(S,A,_segmentArc)
_register(S,C,_segmentCircle)
_register(A,A,_roundRound)
_register(A,C,_roundRound)
_register(C,C,_roundRound)
for _kind in (L,S,A,C):
    _register(_kind,B,_curveCompound)
    _register(_kind,G,_curveCompound)
_register(B,B,_compoundCompound)
_register(B,G,_compoundCompound)
_register(G,G,_compoundCompound)

_missing = [(a,b) for a in ShapeKind for b in ShapeKind if (a,b) not in _MATRIX]
if _missing:
    raise RuntimeError('distance matrix has no entry for {}'.format(_missing))


def distance(a,b):
    """``(dist, segment)`` from shape ``a`` to shape ``b``"""
    ka = kindof(a)
    kb = kindof(b)
    handler = _MATRIX.get((ka,kb))
    if handler is None:
        raise UnsupportedShapeKind('no distance between {} and {}'.format(ka.value,kb.value),
                                   {'kinds': (ka,kb)})
    return handler(a,b)


__all__ = ['distance', 'shape2planarSet', 'boxGap']
