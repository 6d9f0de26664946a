## foundational constants and predicates for flatCAD
## Copyright (c) 2024 flatCAD contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""foundational constants and predicates for **flatCAD**

====================
OVERVIEW
====================

Everything in flatCAD lives in the XY plane.  Scalars are ordinary
Python ``float`` values, and all geometric comparisons are made with
the tolerance held in ``flatcad.config`` (``DP_TOL``, 1E-6 by
default).  The predicates ``close()``, ``lt()``, ``le()``, ``gt()``,
``ge()`` and ``iszero()`` are the only places where that tolerance is
applied to raw numbers; everything else is built on top of them.

constants
=========

``INSIDE``, ``OUTSIDE`` and ``BOUNDARY`` are the three results of
point classification.  ``CCW`` and ``CW`` select arc direction, and
``ORIENTATION`` names the orientation of a closed face.  ``pi2`` is
2*pi.

shape kinds
===========

Every shape class carries a ``kind`` attribute drawn from the closed
``ShapeKind`` enumeration.  Intersection and distance calculations
are dispatched on pairs of kinds, so a shape of a kind that is not in
the enumeration can never reach the geometry code.

"""

from enum import Enum
from math import pi

from flatcad import config
from flatcad.errors import UnsupportedShapeKind

pi2 = 2.0*pi

INSIDE = 'inside'
OUTSIDE = 'outside'
BOUNDARY = 'boundary'

CCW = True
CW = False


class ORIENTATION:
    CCW = -1
    CW = 1
    NOT_ORIENTABLE = 0


class ShapeKind(Enum):
    POINT = 'point'
    LINE = 'line'
    SEGMENT = 'segment'
    ARC = 'arc'
    CIRCLE = 'circle'
    BOX = 'box'
    POLYGON = 'polygon'


def kindof(shape):
    """return the ``ShapeKind`` of ``shape``, or raise
    ``UnsupportedShapeKind``"""
    kind = getattr(shape, 'kind', None)
    if not isinstance(kind, ShapeKind):
        raise UnsupportedShapeKind(
            'unsupported shape: {!r}'.format(type(shape).__name__),
            {'type': type(shape).__name__})
    return kind

## scalar comparisons with tolerance

def iszero(x):
    return -config.DP_TOL < x < config.DP_TOL

def close(a,b):
    """are ``a`` and ``b`` equal within tolerance?"""
    return abs(a-b) < config.DP_TOL

def lt(a,b):
    return a-b < -config.DP_TOL

def le(a,b):
    return a-b < config.DP_TOL

def gt(a,b):
    return a-b > config.DP_TOL

def ge(a,b):
    return a-b > -config.DP_TOL


def uniquePoints(points):
    """return ``points`` with tolerance-duplicates removed, keeping the
    first occurrence"""
    result = []
    for p in points:
        if not any(p.equalTo(q) for q in result):
            result.append(p)
    return result
