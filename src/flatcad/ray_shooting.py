"""point classification by ray shooting

``rayShoot(polygon, point)`` casts a horizontal ray from ``point``
towards +x and counts how many times it crosses the polygon boundary.
Only edges whose boxes meet the ray's strip are considered; they are
pulled from the polygon's edge index.

Crossings use a half-open rule: a curve piece counts when exactly one
of its end points lies strictly above the ray line, so a ray passing
through a shared vertex counts once, and a ray running along a
horizontal edge not at all.  Arcs are first broken into pieces that
are monotone in y.
"""

import math

from flatcad import config
from flatcad.box import Box
from flatcad.curves import Arc
from flatcad.geom import BOUNDARY, INSIDE, OUTSIDE


def _above(pt,y):
    return pt.y - y > config.DP_TOL


def _crossingX(piece,y):
    """x coordinate where the monotone ``piece`` meets the line at ``y``"""
    if isinstance(piece,Arc):
        dy = y - piece.pc.y
        dx = math.sqrt(max(piece.r*piece.r - dy*dy,0.0))
        if piece.middle().x < piece.pc.x:
            dx = -dx
        return piece.pc.x + dx
    ps, pe = piece.start, piece.end
    return ps.x + (y - ps.y)*(pe.x - ps.x)/(pe.y - ps.y)


def rayShoot(polygon,point):
    """return ``INSIDE``, ``OUTSIDE`` or ``BOUNDARY`` for ``point``
    relative to ``polygon``"""
    tol = config.DP_TOL
    box = polygon.box
    if box.isEmpty():
        return OUTSIDE
    grown = Box(box.xmin-tol,box.ymin-tol,box.xmax+tol,box.ymax+tol)
    if not grown.contains(point):
        return OUTSIDE

    strip = Box(point.x-tol,point.y-tol,grown.xmax,point.y+tol)
    candidates = list(polygon.edges.search(strip))

    for edge in candidates:
        if edge.shape.contains(point):
            return BOUNDARY

    crossings = 0
    for edge in candidates:
        pieces = edge.shape.breakToFunctional() if edge.isArc() else [edge.shape]
        for piece in pieces:
            if _above(piece.start,point.y) == _above(piece.end,point.y):
                continue
            if _crossingX(piece,point.y) > point.x:
                crossings += 1

    return INSIDE if crossings % 2 == 1 else OUTSIDE
