## points, vectors and affine matrices for flatCAD
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

"""points, vectors and affine matrices for **flatCAD**

Points are immutable.  Two orderings are provided: the rich
comparison operators (``<``, ``<=``, ...) compare ``(x, y)``
lexicographically and exactly, which is what the interval tree uses
to order box corners; ``lessThan()`` and ``equalTo()`` apply the
geometric tolerance and are what the geometry code uses.

"""

import math

from flatcad.geom import ShapeKind, close, gt, lt, iszero, pi2


class Point:
    """2D point"""

    kind = ShapeKind.POINT
    __slots__ = ('_x', '_y')

    def __init__(self,x=0.0,y=0.0):
        if isinstance(x,Point):
            x, y = x.x, x.y
        elif isinstance(x,(list,tuple)) and len(x) == 2:
            x, y = x
        if not isinstance(x,(int,float)) or not isinstance(y,(int,float)):
            raise ValueError('bad arguments to Point(): {!r}, {!r}'.format(x,y))
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __repr__(self):
        return 'Point({},{})'.format(self._x,self._y)

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self,other):
        if not isinstance(other,Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x,self._y))

    def __lt__(self,other):
        return (self._x,self._y) < (other._x,other._y)

    def __le__(self,other):
        return (self._x,self._y) <= (other._x,other._y)

    def __gt__(self,other):
        return (self._x,self._y) > (other._x,other._y)

    def __ge__(self,other):
        return (self._x,self._y) >= (other._x,other._y)

    @property
    def box(self):
        from flatcad.box import Box
        return Box(self._x,self._y,self._x,self._y)

    def clone(self):
        return Point(self._x,self._y)

    def equalTo(self,pt):
        """tolerance equality"""
        return close(self._x,pt.x) and close(self._y,pt.y)

    def lessThan(self,pt):
        """tolerance lexicographic order, x first then y"""
        if lt(self._x,pt.x):
            return True
        if close(self._x,pt.x) and lt(self._y,pt.y):
            return True
        return False

    def translate(self,*args):
        """translate by a ``Vector`` or by ``dx, dy``"""
        if len(args) == 1 and isinstance(args[0],Vector):
            return Point(self._x+args[0].x,self._y+args[0].y)
        if len(args) == 2:
            return Point(self._x+args[0],self._y+args[1])
        raise ValueError('bad arguments to Point.translate(): {!r}'.format(args))

    def rotate(self,angle,center=None):
        """rotate counterclockwise by ``angle`` radians around ``center``
        (default origin)"""
        cx, cy = (0.0,0.0) if center is None else (center.x,center.y)
        dx = self._x - cx
        dy = self._y - cy
        c = math.cos(angle)
        s = math.sin(angle)
        return Point(cx + dx*c - dy*s, cy + dx*s + dy*c)

    def transform(self,m):
        return Point(*m.transform((self._x,self._y)))

    def projectionOn(self,line):
        """orthogonal projection onto ``line``"""
        d = line.norm.dot(Vector(line.pt,self))
        return self.translate(line.norm.multiply(-d))

    def leftTo(self,line):
        """``True`` if the point lies strictly on the left of ``line``,
        the side its normal points to"""
        return gt(line.norm.dot(Vector(line.pt,self)),0)

    def distanceTo(self,shape):
        """return ``(distance, shortest_segment)`` from this point to
        ``shape``"""
        from flatcad.distance import distance
        return distance(self,shape)

    def on(self,shape):
        if isinstance(shape,Point):
            return self.equalTo(shape)
        return shape.contains(self)

    def toJSON(self):
        return {'name': 'point', 'x': self._x, 'y': self._y}

    def svg(self,r=3,stroke='black',strokeWidth=1,fill='red',id=None,className=None):
        id_str = 'id="{}"'.format(id) if id else ''
        class_str = 'class="{}"'.format(className) if className else ''
        return '\n<circle cx="{}" cy="{}" r="{}" stroke="{}" stroke-width="{}" fill="{}" {} {} />'.format(
            self._x,self._y,r,stroke,strokeWidth,fill,id_str,class_str)


class Vector:
    """2D vector, made from two numbers or from two points (tail to
    head)"""

    __slots__ = ('x','y')

    def __init__(self,a=0.0,b=0.0):
        if isinstance(a,Point) and isinstance(b,Point):
            self.x = b.x - a.x
            self.y = b.y - a.y
        elif isinstance(a,(int,float)) and isinstance(b,(int,float)):
            self.x = float(a)
            self.y = float(b)
        else:
            raise ValueError('bad arguments to Vector(): {!r}, {!r}'.format(a,b))

    def __repr__(self):
        return 'Vector({},{})'.format(self.x,self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self,v):
        return self.add(v)

    def __sub__(self,v):
        return self.subtract(v)

    def __mul__(self,s):
        return self.multiply(s)

    __rmul__ = __mul__

    def __neg__(self):
        return self.invert()

    def clone(self):
        return Vector(self.x,self.y)

    @property
    def length(self):
        return math.hypot(self.x,self.y)

    @property
    def slope(self):
        """angle to the x axis in [0, 2pi)"""
        return math.atan2(self.y,self.x) % pi2

    def equalTo(self,v):
        return close(self.x,v.x) and close(self.y,v.y)

    def normalize(self):
        l = self.length
        if iszero(l):
            raise ValueError('zero length vector can not be normalized')
        return Vector(self.x/l,self.y/l)

    def dot(self,v):
        return self.x*v.x + self.y*v.y

    def cross(self,v):
        return self.x*v.y - self.y*v.x

    def multiply(self,s):
        return Vector(self.x*s,self.y*s)

    def add(self,v):
        return Vector(self.x+v.x,self.y+v.y)

    def subtract(self,v):
        return Vector(self.x-v.x,self.y-v.y)

    def invert(self):
        return Vector(-self.x,-self.y)

    def rotate(self,angle):
        c = math.cos(angle)
        s = math.sin(angle)
        return Vector(self.x*c - self.y*s, self.x*s + self.y*c)

    def rotate90CCW(self):
        return Vector(-self.y,self.x)

    def rotate90CW(self):
        return Vector(self.y,-self.x)

    def angleTo(self,v):
        """counterclockwise angle from this vector to ``v`` in [0, 2pi)"""
        return (v.slope - self.slope) % pi2

    def projectionOn(self,v):
        n = v.normalize()
        return n.multiply(self.dot(n))


class Matrix:
    """affine transformation matrix ::

        [ a  c  tx ]
        [ b  d  ty ]
        [ 0  0  1  ]
    """

    def __init__(self,a=1.0,b=0.0,c=0.0,d=1.0,tx=0.0,ty=0.0):
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        self.tx = tx
        self.ty = ty

    def __repr__(self):
        return 'Matrix({},{},{},{},{},{})'.format(self.a,self.b,self.c,self.d,self.tx,self.ty)

    def clone(self):
        return Matrix(self.a,self.b,self.c,self.d,self.tx,self.ty)

    def transform(self,xy):
        x, y = xy
        return (x*self.a + y*self.c + self.tx,
                x*self.b + y*self.d + self.ty)

    def multiply(self,m):
        return Matrix(self.a*m.a + self.c*m.b,
                      self.b*m.a + self.d*m.b,
                      self.a*m.c + self.c*m.d,
                      self.b*m.c + self.d*m.d,
                      self.a*m.tx + self.c*m.ty + self.tx,
                      self.b*m.tx + self.d*m.ty + self.ty)

    def translate(self,tx,ty=None):
        if isinstance(tx,Vector):
            tx, ty = tx.x, tx.y
        return self.multiply(Matrix(1,0,0,1,tx,ty))

    def rotate(self,angle,center=None):
        c = math.cos(angle)
        s = math.sin(angle)
        if center is None:
            return self.multiply(Matrix(c,s,-s,c,0,0))
        return self.translate(center.x,center.y) \
                   .multiply(Matrix(c,s,-s,c,0,0)) \
                   .translate(-center.x,-center.y)

    def scale(self,sx,sy=None):
        if sy is None:
            sy = sx
        return self.multiply(Matrix(sx,0,0,sy,0,0))

    def isIdentity(self):
        return self.equalTo(Matrix())

    def equalTo(self,m):
        return all(close(u,v) for u, v in zip(
            (self.a,self.b,self.c,self.d,self.tx,self.ty),
            (m.a,m.b,m.c,m.d,m.tx,m.ty)))
