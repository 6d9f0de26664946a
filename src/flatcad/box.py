## axis-aligned bounding boxes for flatCAD
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

"""axis-aligned boxes

A ``Box`` plays two roles.  It is a shape in its own right (it can be
intersected, measured and drawn), and it is the key under which every
other shape is stored in a ``PlanarSet``.  For the second role it
provides ``low`` and ``high`` corners, the ``lessThan()`` and
``equalTo()`` order used by the index, and ``merge()``.

Determining if two boxes overlap is simple for axis-aligned boxes:
they are disjoint exactly when one lies entirely to one side of the
other along x or along y.  Touching boxes overlap.

A box made with no arguments is empty; an empty box overlaps nothing
and merging it with another box yields the other box.

"""

from flatcad.geom import ShapeKind
from flatcad.primitives import Point


class Box:
    """axis-aligned rectangle ``xmin, ymin, xmax, ymax``"""

    kind = ShapeKind.BOX

    def __init__(self,xmin=None,ymin=None,xmax=None,ymax=None):
        self.xmin = xmin
        self.ymin = ymin
        self.xmax = xmax
        self.ymax = ymax

    def __repr__(self):
        return 'Box({},{},{},{})'.format(self.xmin,self.ymin,self.xmax,self.ymax)

    def clone(self):
        return Box(self.xmin,self.ymin,self.xmax,self.ymax)

    def isEmpty(self):
        return self.xmin is None

    @property
    def low(self):
        return Point(self.xmin,self.ymin)

    @property
    def high(self):
        return Point(self.xmax,self.ymax)

    @property
    def box(self):
        return self.clone()

    @property
    def center(self):
        return Point((self.xmin+self.xmax)/2,(self.ymin+self.ymax)/2)

    @property
    def width(self):
        return self.xmax - self.xmin

    @property
    def height(self):
        return self.ymax - self.ymin

    def notIntersect(self,other):
        if self.isEmpty() or other.isEmpty():
            return True
        return (self.xmax < other.xmin or
                self.xmin > other.xmax or
                self.ymax < other.ymin or
                self.ymin > other.ymax)

    def intersect(self,other):
        """``True`` if this box and ``other`` overlap or touch"""
        return not self.notIntersect(other)

    def merge(self,other):
        """return the smallest box containing both boxes"""
        if self.isEmpty():
            return other.clone()
        if other.isEmpty():
            return self.clone()
        return Box(min(self.xmin,other.xmin),
                   min(self.ymin,other.ymin),
                   max(self.xmax,other.xmax),
                   max(self.ymax,other.ymax))

    def lessThan(self,other):
        """index order: by ``low`` corner, then by ``high`` corner"""
        if self.low.lessThan(other.low):
            return True
        if self.low.equalTo(other.low) and self.high.lessThan(other.high):
            return True
        return False

    def equalTo(self,other):
        return self.low.equalTo(other.low) and self.high.equalTo(other.high)

    def set(self,xmin,ymin,xmax,ymax):
        self.xmin = xmin
        self.ymin = ymin
        self.xmax = xmax
        self.ymax = ymax

    def toPoints(self):
        """corners, counterclockwise from the low left corner"""
        return [Point(self.xmin,self.ymin),
                Point(self.xmax,self.ymin),
                Point(self.xmax,self.ymax),
                Point(self.xmin,self.ymax)]

    def toSegments(self):
        """sides, counterclockwise from the low left corner"""
        from flatcad.curves import Segment
        pts = self.toPoints()
        return [Segment(pts[i],pts[(i+1) % 4]) for i in range(4)]

    def contains(self,shape):
        """``True`` if no point of ``shape`` lies outside this box"""
        if isinstance(shape,Point):
            return (self.xmin <= shape.x <= self.xmax and
                    self.ymin <= shape.y <= self.ymax)
        other = shape.box
        return (other.xmin >= self.xmin and other.xmax <= self.xmax and
                other.ymin >= self.ymin and other.ymax <= self.ymax)

    def translate(self,*args):
        low = self.low.translate(*args)
        high = self.high.translate(*args)
        return Box(low.x,low.y,high.x,high.y)

    def distanceTo(self,shape):
        from flatcad.distance import distance
        return distance(self,shape)

    def toJSON(self):
        return {'name': 'box', 'xmin': self.xmin, 'ymin': self.ymin,
                'xmax': self.xmax, 'ymax': self.ymax}

    def svg(self,stroke='black',strokeWidth=1,fill='none',id=None,className=None):
        id_str = 'id="{}"'.format(id) if id else ''
        class_str = 'class="{}"'.format(className) if className else ''
        return '\n<rect x="{}" y="{}" width="{}" height="{}" stroke="{}" stroke-width="{}" fill="{}" {} {} />'.format(
            self.xmin,self.ymin,self.width,self.height,stroke,strokeWidth,fill,id_str,class_str)
