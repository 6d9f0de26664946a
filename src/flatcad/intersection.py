"""intersection points between shapes

``intersect(a, b)`` looks up a handler in a matrix keyed by the
``ShapeKind`` pair of its arguments.  Handlers are written for one
ordering of each pair; the mirrored entry calls the same handler with
the arguments swapped.  Every pair of kinds has an entry, which is
checked when this module is imported.

Points, lines, segments, arcs and circles are curves.  A box is
treated as its four sides and a polygon as its edges, except that a
point intersects a box or polygon whenever it is inside or on it.

The result has no tolerance duplicates and never has more points than
the geometry allows: two for a line or segment against a circle or
arc, two for two circles, four for two arcs of the same circle.
Results involving a line are sorted along the line; results for a
segment or arc first argument are sorted along it.
"""

import math

from flatcad import config
from flatcad.curves import Line
from flatcad.errors import UnsupportedShapeKind
from flatcad.geom import ShapeKind, close, gt, iszero, kindof, uniquePoints
from flatcad.primitives import Point, Vector

P = ShapeKind.POINT
L = ShapeKind.LINE
S = ShapeKind.SEGMENT
A = ShapeKind.ARC
C = ShapeKind.CIRCLE
B = ShapeKind.BOX
G = ShapeKind.POLYGON


def _boxesMeet(b1,b2):
    """box overlap test widened by the tolerance"""
    tol = config.DP_TOL
    if b1.isEmpty() or b2.isEmpty():
        return False
    return not (b1.xmax + tol < b2.xmin or b2.xmax + tol < b1.xmin or
                b1.ymax + tol < b2.ymin or b2.ymax + tol < b1.ymin)


## circle and line primitives

def _lineLine(l1,l2):
    if l1.parallelTo(l2):
        return []
    a1, b1, c1 = l1.standard
    a2, b2, c2 = l2.standard
    det = a1*b2 - b1*a2
    return [Point((c1*b2 - b1*c2)/det,(a1*c2 - c1*a2)/det)]


def _lineCircle(line,pc,r):
    proj = pc.projectionOn(line)
    d = Vector(pc,proj).length
    if gt(d,r):
        return []
    if close(d,r):
        return [proj]
    v = line.direction.multiply(math.sqrt(r*r - d*d))
    return [proj.translate(v.invert()),proj.translate(v)]


def _circleCircle(pc1,r1,pc2,r2):
    v = Vector(pc1,pc2)
    d = v.length
    if iszero(d):
        return []
    if gt(d,r1+r2) or gt(abs(r1-r2),d):
        return []
    u = v.normalize()
    if close(d,r1+r2):
        return [pc1.translate(u.multiply(r1))]
    if close(d,abs(r1-r2)):
        sign = 1.0 if r1 > r2 else -1.0
        return [pc1.translate(u.multiply(sign*r1))]
    a = (r1*r1 - r2*r2 + d*d)/(2*d)
    h = math.sqrt(max(r1*r1 - a*a,0.0))
    base = pc1.translate(u.multiply(a))
    w = u.rotate90CCW().multiply(h)
    return [base.translate(w),base.translate(w.invert())]


def _onCircle(pt,circle):
    return close(Vector(circle.pc,pt).length,circle.r)


## handlers, first argument of the lower kind

def _pointPoint(p1,p2):
    return [p1] if p1.equalTo(p2) else []

def _pointCurve(pt,shape):
    return [pt] if shape.contains(pt) else []

def _pointCircle(pt,circle):
    return [pt] if _onCircle(pt,circle) else []

def _pointRegion(pt,shape):
    return [pt] if shape.contains(pt) else []

def _lineSegment(line,seg):
    if seg.isZeroLength():
        return [seg.ps] if line.contains(seg.ps) else []
    ips = [p for p in (seg.ps,seg.pe) if line.contains(p)]
    if ips:
        return ips
    return [p for p in _lineLine(line,Line(seg.ps,seg.pe)) if seg.contains(p)]

def _lineArc(line,arc):
    return [p for p in _lineCircle(line,arc.pc,arc.r) if arc.contains(p)]

def _lineCircleShape(line,circle):
    return _lineCircle(line,circle.pc,circle.r)

def _segmentSegment(s1,s2):
    if not _boxesMeet(s1.box,s2.box):
        return []
    if s1.isZeroLength():
        return [s1.ps] if s2.contains(s1.ps) else []
    if s2.isZeroLength():
        return [s2.ps] if s1.contains(s2.ps) else []
    l1 = Line(s1.ps,s1.pe)
    l2 = Line(s2.ps,s2.pe)
    if l1.incidentTo(l2):
        pts = [p for p in (s2.ps,s2.pe) if s1.contains(p)]
        pts += [p for p in (s1.ps,s1.pe) if s2.contains(p)]
        return pts
    return [p for p in _lineLine(l1,l2) if s1.contains(p) and s2.contains(p)]

def _segmentArc(seg,arc):
    if not _boxesMeet(seg.box,arc.box):
        return []
    if seg.isZeroLength():
        return [seg.ps] if arc.contains(seg.ps) else []
    return [p for p in _lineCircle(Line(seg.ps,seg.pe),arc.pc,arc.r)
            if seg.contains(p) and arc.contains(p)]

def _segmentCircle(seg,circle):
    if not _boxesMeet(seg.box,circle.box):
        return []
    if seg.isZeroLength():
        return [seg.ps] if _onCircle(seg.ps,circle) else []
    return [p for p in _lineCircle(Line(seg.ps,seg.pe),circle.pc,circle.r)
            if seg.contains(p)]

def _sameCircle(c1,c2):
    return c1.pc.equalTo(c2.pc) and close(c1.r,c2.r)

def _arcArc(a1,a2):
    if not _boxesMeet(a1.box,a2.box):
        return []
    if _sameCircle(a1,a2):
        pts = [p for p in a1.vertices if a2.contains(p)]
        pts += [p for p in a2.vertices if a1.contains(p)]
        return pts
    return [p for p in _circleCircle(a1.pc,a1.r,a2.pc,a2.r)
            if a1.contains(p) and a2.contains(p)]

def _arcCircle(arc,circle):
    if not _boxesMeet(arc.box,circle.box):
        return []
    if _sameCircle(arc,circle):
        return list(arc.vertices)
    return [p for p in _circleCircle(arc.pc,arc.r,circle.pc,circle.r) if arc.contains(p)]

def _circleCircleShape(c1,c2):
    if _sameCircle(c1,c2):
        return []
    return _circleCircle(c1.pc,c1.r,c2.pc,c2.r)


## boxes and polygons, through their boundary curves

def _boundary(shape,near):
    """boundary curves of a box or polygon whose boxes meet ``near``"""
    if shape.kind is B:
        if shape.isEmpty():
            return []
        return [side for side in shape.toSegments() if _boxesMeet(side.box,near)]
    return [edge.shape for edge in shape.edges.search(near)]

def _curveCompound(curve,compound):
    pts = []
    for piece in _boundary(compound,curve.box):
        pts.extend(intersect(curve,piece))
    return pts

def _compoundCompound(c1,c2):
    pts = []
    for piece in _boundary(c1,c2.box):
        pts.extend(_curveCompound(piece,c2))
    return pts


_MATRIX = {}

def _register(kindA,kindB,handler):
    _MATRIX[(kindA,kindB)] = handler
    if kindA is not kindB:
        _MATRIX[(kindB,kindA)] = lambda a, b: handler(b,a)

_register(P,P,_pointPoint)
_register(P,L,_pointCurve)
_register(P,S,_pointCurve)
_register(P,A,_pointCurve)
_register(P,C,_pointCircle)
_register(P,B,_pointRegion)
_register(P,G,_pointRegion)
_register(L,L,_lineLine)
_register(L,S,_lineSegment)
_register(L,A,_lineArc)
_register(L,C,_lineCircleShape)
_register(S,S,_segmentSegment)
_register(S,A,_segmentArc)
_register(S,C,_segmentCircle)
_register(A,A,_arcArc)
_register(A,C,_arcCircle)
_register(C,C,_circleCircleShape)
for _kind in (L,S,A,C):
    _register(_kind,B,_curveCompound)
    _register(_kind,G,_curveCompound)
_register(B,B,_compoundCompound)
_register(B,G,_compoundCompound)
_register(G,G,_compoundCompound)

_missing = [(a,b) for a in ShapeKind for b in ShapeKind if (a,b) not in _MATRIX]
if _missing:
    raise RuntimeError('intersection matrix has no entry for {}'.format(_missing))


def intersect(a,b):
    """list of points where shapes ``a`` and ``b`` meet"""
    ka = kindof(a)
    kb = kindof(b)
    handler = _MATRIX.get((ka,kb))
    if handler is None:
        raise UnsupportedShapeKind('can not intersect {} with {}'.format(ka.value,kb.value),
                                   {'kinds': (ka,kb)})
    pts = uniquePoints(handler(a,b))
    if ka is L:
        return a.sortPoints(pts)
    if kb is L:
        return b.sortPoints(pts)
    if ka in (S,A):
        return a.sortPoints(pts)
    return pts


__all__ = ['intersect']
