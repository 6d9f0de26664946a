## lines, segments, arcs and circles for flatCAD
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

"""curve shapes for **flatCAD**

lines
=====

A ``Line`` is infinite.  It is stored as a point on the line and a
unit normal; the normal points to the left of the line direction, so
``Point.leftTo(line)`` is the half-plane the normal points into.

segments
========

A ``Segment`` runs from ``start`` (``ps``) to ``end`` (``pe``).
Segments and arcs are the only shapes that can be edges of a face.

arcs
====

An ``Arc`` is defined by a center ``pc``, a radius ``r``, start and
end angles in radians, and a direction.  Counterclockwise arcs sweep
from ``startAngle`` to ``endAngle`` with increasing angle, clockwise
arcs with decreasing angle.  An arc whose start and end angles differ
by exactly 2*pi is a full circle.

circles
=======

A ``Circle`` is a center and a radius.  When a circle is used as the
boundary of a face it is converted into a full ``Arc``.

area integrals
==============

``Segment.definiteIntegral()`` and ``Arc.definiteIntegral()`` return
the curve's contribution to the line integral 1/2*(x dy - y dx).
Summed over a closed loop this is the signed area of the loop,
positive for counterclockwise loops.

"""

import math

from flatcad.box import Box
from flatcad.errors import UnsupportedShapeKind
from flatcad.geom import (ShapeKind, CCW, close, gt, iszero, le, pi2)
from flatcad.primitives import Point, Vector


class Line:
    """infinite line through a point, with a unit normal"""

    kind = ShapeKind.LINE

    def __init__(self,a=None,b=None):
        if a is None and b is None:
            self.pt = Point(0,0)
            self.norm = Vector(0,1)
        elif isinstance(a,Point) and isinstance(b,Point):
            if a.equalTo(b):
                raise ValueError('Line() needs two distinct points')
            self.pt = a
            self.norm = Vector(a,b).normalize().rotate90CCW()
        elif isinstance(a,Point) and isinstance(b,Vector):
            self.pt = a
            self.norm = b.normalize()
        elif isinstance(a,Vector) and isinstance(b,Point):
            self.pt = b
            self.norm = a.normalize()
        else:
            raise ValueError('bad arguments to Line(): {!r}, {!r}'.format(a,b))

    def __repr__(self):
        return 'Line({!r},{!r})'.format(self.pt,self.norm)

    def clone(self):
        return Line(self.pt,self.norm)

    @property
    def direction(self):
        return self.norm.rotate90CW()

    @property
    def slope(self):
        return self.direction.slope

    @property
    def box(self):
        return Box(-math.inf,-math.inf,math.inf,math.inf)

    @property
    def standard(self):
        """coefficients ``A, B, C`` of ``A*x + B*y = C``"""
        return self.norm.x, self.norm.y, self.norm.dot(Vector(self.pt.x,self.pt.y))

    def parallelTo(self,other):
        return iszero(self.norm.cross(other.norm))

    def incidentTo(self,other):
        return self.parallelTo(other) and self.contains(other.pt)

    def contains(self,pt):
        return iszero(self.norm.dot(Vector(self.pt,pt)))

    def coord(self,pt):
        """signed position of the projection of ``pt`` along the line"""
        return self.direction.dot(Vector(self.pt,pt))

    def closestPoint(self,pt):
        return pt.projectionOn(self)

    def sortPoints(self,points):
        return sorted(points,key=self.coord)

    def translate(self,*args):
        return Line(self.pt.translate(*args),self.norm)

    def rotate(self,angle,center=None):
        return Line(self.pt.rotate(angle,center),self.norm.rotate(angle))

    def transform(self,m):
        p1 = self.pt.transform(m)
        p2 = self.pt.translate(self.direction).transform(m)
        return Line(p1,p2)

    def intersect(self,shape):
        from flatcad.intersection import intersect
        return intersect(self,shape)

    def distanceTo(self,shape):
        from flatcad.distance import distance
        return distance(self,shape)

    def toJSON(self):
        return {'name': 'line', 'pt': self.pt.toJSON(),
                'norm': {'x': self.norm.x, 'y': self.norm.y}}

    def svg(self,box,**attrs):
        """draw the part of the line that falls inside ``box``"""
        from flatcad.intersection import intersect
        ips = self.sortPoints(intersect(self,box))
        if len(ips) < 2:
            return ''
        return Segment(ips[0],ips[-1]).svg(**attrs)


class Segment:
    """directed line segment from ``ps`` to ``pe``"""

    kind = ShapeKind.SEGMENT

    def __init__(self,*args):
        if len(args) == 0:
            self.ps = Point()
            self.pe = Point()
        elif len(args) == 2 and isinstance(args[0],Point) and isinstance(args[1],Point):
            self.ps, self.pe = args
        elif len(args) == 4:
            self.ps = Point(args[0],args[1])
            self.pe = Point(args[2],args[3])
        elif len(args) == 1 and isinstance(args[0],(list,tuple)) and len(args[0]) == 4:
            self.ps = Point(args[0][0],args[0][1])
            self.pe = Point(args[0][2],args[0][3])
        else:
            raise ValueError('bad arguments to Segment(): {!r}'.format(args))

    def __repr__(self):
        return 'Segment({!r},{!r})'.format(self.ps,self.pe)

    def clone(self):
        return Segment(self.ps,self.pe)

    @property
    def start(self):
        return self.ps

    @property
    def end(self):
        return self.pe

    @property
    def vertices(self):
        return [self.ps,self.pe]

    @property
    def length(self):
        return Vector(self.ps,self.pe).length

    @property
    def slope(self):
        return Vector(self.ps,self.pe).slope

    @property
    def box(self):
        return Box(min(self.ps.x,self.pe.x),min(self.ps.y,self.pe.y),
                   max(self.ps.x,self.pe.x),max(self.ps.y,self.pe.y))

    def isZeroLength(self):
        return self.ps.equalTo(self.pe)

    def equalTo(self,other):
        return self.ps.equalTo(other.ps) and self.pe.equalTo(other.pe)

    def reverse(self):
        return Segment(self.pe,self.ps)

    def middle(self):
        return Point((self.ps.x+self.pe.x)/2,(self.ps.y+self.pe.y)/2)

    def pointAtLength(self,length):
        if length <= 0:
            return self.ps
        if length >= self.length:
            return self.pe
        return self.ps.translate(Vector(self.ps,self.pe).multiply(length/self.length))

    def closestPoint(self,pt):
        v = Vector(self.ps,self.pe)
        l2 = v.dot(v)
        if iszero(l2):
            return self.ps
        t = Vector(self.ps,pt).dot(v)/l2
        t = max(0.0,min(1.0,t))
        return self.ps.translate(v.multiply(t))

    def contains(self,pt):
        return iszero(Vector(pt,self.closestPoint(pt)).length)

    def parameterOf(self,pt):
        """distance from ``start`` to the projection of ``pt``"""
        if self.isZeroLength():
            return 0.0
        return Vector(self.ps,pt).dot(Vector(self.ps,self.pe).normalize())

    def sortPoints(self,points):
        return sorted(points,key=self.parameterOf)

    def split(self,pt):
        """split at ``pt``, returning ``[head, tail]``.  When ``pt`` is
        the start the head is ``None``; when it is the end the tail is
        ``None``."""
        if self.ps.equalTo(pt):
            return [None,self.clone()]
        if self.pe.equalTo(pt):
            return [self.clone(),None]
        return [Segment(self.ps,pt),Segment(pt,self.pe)]

    def definiteIntegral(self):
        return 0.5*(self.ps.x*self.pe.y - self.pe.x*self.ps.y)

    def translate(self,*args):
        return Segment(self.ps.translate(*args),self.pe.translate(*args))

    def rotate(self,angle,center=None):
        return Segment(self.ps.rotate(angle,center),self.pe.rotate(angle,center))

    def transform(self,m):
        return Segment(self.ps.transform(m),self.pe.transform(m))

    def intersect(self,shape):
        from flatcad.intersection import intersect
        return intersect(self,shape)

    def distanceTo(self,shape):
        from flatcad.distance import distance
        return distance(self,shape)

    def toJSON(self):
        return {'name': 'segment', 'ps': self.ps.toJSON(), 'pe': self.pe.toJSON()}

    def svg(self,stroke='black',strokeWidth=1,id=None,className=None):
        id_str = 'id="{}"'.format(id) if id else ''
        class_str = 'class="{}"'.format(className) if className else ''
        return '\n<line x1="{}" y1="{}" x2="{}" y2="{}" stroke="{}" stroke-width="{}" {} {} />'.format(
            self.ps.x,self.ps.y,self.pe.x,self.pe.y,stroke,strokeWidth,id_str,class_str)


class Arc:
    """circular arc"""

    kind = ShapeKind.ARC

    def __init__(self,pc=None,r=1.0,startAngle=0.0,endAngle=pi2,counterClockwise=CCW):
        if pc is None:
            pc = Point(0,0)
        if not isinstance(pc,Point):
            raise ValueError('bad center passed to Arc(): {!r}'.format(pc))
        if not isinstance(r,(int,float)) or r < 0:
            raise ValueError('bad radius passed to Arc(): {!r}'.format(r))
        self.pc = pc
        self.r = float(r)
        self.startAngle = float(startAngle)
        self.endAngle = float(endAngle)
        self.counterClockwise = bool(counterClockwise)

    def __repr__(self):
        return 'Arc({!r},{},{},{},{})'.format(self.pc,self.r,self.startAngle,
                                              self.endAngle,self.counterClockwise)

    def clone(self):
        return Arc(self.pc,self.r,self.startAngle,self.endAngle,self.counterClockwise)

    def _pointAtAngle(self,angle):
        return Point(self.pc.x + self.r*math.cos(angle),
                     self.pc.y + self.r*math.sin(angle))

    @property
    def start(self):
        return self._pointAtAngle(self.startAngle)

    @property
    def end(self):
        return self._pointAtAngle(self.endAngle)

    @property
    def center(self):
        return self.pc

    @property
    def vertices(self):
        return [self.start,self.end]

    @property
    def sweep(self):
        """angular extent in [0, 2pi]"""
        if close(self.startAngle,self.endAngle):
            return 0.0
        if close(abs(self.startAngle-self.endAngle),pi2):
            return pi2
        if self.counterClockwise:
            sweep = self.endAngle - self.startAngle
        else:
            sweep = self.startAngle - self.endAngle
        return sweep % pi2

    @property
    def length(self):
        return abs(self.sweep*self.r)

    def _angleOf(self,pt):
        return Vector(self.pc,pt).slope

    def _containsAngle(self,angle):
        if self.sweep == pi2:
            return True
        test = Arc(self.pc,self.r,self.startAngle,angle,self.counterClockwise)
        return le(test.sweep,self.sweep)

    @property
    def box(self):
        pts = [self.start,self.end]
        for i in range(4):
            angle = i*math.pi/2
            if self._containsAngle(angle):
                pts.append(self._pointAtAngle(angle))
        return Box(min(p.x for p in pts),min(p.y for p in pts),
                   max(p.x for p in pts),max(p.y for p in pts))

    def equalTo(self,other):
        return (self.pc.equalTo(other.pc) and close(self.r,other.r) and
                self.start.equalTo(other.start) and self.end.equalTo(other.end) and
                self.counterClockwise == other.counterClockwise)

    def contains(self,pt):
        """``True`` if ``pt`` lies on the arc"""
        if not close(Vector(self.pc,pt).length,self.r):
            return False
        if pt.equalTo(self.start) or pt.equalTo(self.end):
            return True
        return self._containsAngle(self._angleOf(pt))

    def parameterOf(self,pt):
        """arc length from ``start`` to ``pt``, which is assumed to lie on
        the arc"""
        if pt.equalTo(self.start):
            return 0.0
        test = Arc(self.pc,self.r,self.startAngle,self._angleOf(pt),self.counterClockwise)
        return test.length

    def sortPoints(self,points):
        return sorted(points,key=self.parameterOf)

    def split(self,pt):
        """split at ``pt`` into ``[head, tail]``, ``None`` standing in for
        a zero length piece at either end"""
        if self.start.equalTo(pt):
            return [None,self.clone()]
        if self.end.equalTo(pt):
            return [self.clone(),None]
        angle = self._angleOf(pt)
        return [Arc(self.pc,self.r,self.startAngle,angle,self.counterClockwise),
                Arc(self.pc,self.r,angle,self.endAngle,self.counterClockwise)]

    def _signedSweep(self):
        return self.sweep if self.counterClockwise else -self.sweep

    def pointAtLength(self,length):
        if iszero(self.r):
            return self.pc
        length = max(0.0,min(length,self.length))
        sign = 1.0 if self.counterClockwise else -1.0
        return self._pointAtAngle(self.startAngle + sign*length/self.r)

    def middle(self):
        return self.pointAtLength(self.length/2)

    def closestPoint(self,pt):
        if iszero(Vector(self.pc,pt).length):
            return self.start
        q = self._pointAtAngle(self._angleOf(pt))
        if self.contains(q):
            return q
        if Vector(pt,self.start).length <= Vector(pt,self.end).length:
            return self.start
        return self.end

    def breakToFunctional(self):
        """break the arc at its extreme points (angles 0, pi/2, pi,
        3pi/2), so that every piece is monotone in both x and y"""
        sign = 1.0 if self.counterClockwise else -1.0
        sweep = self.sweep
        cuts = []
        for i in range(4):
            angle = i*math.pi/2
            offset = (sign*(angle - self.startAngle)) % pi2
            if gt(offset,0) and gt(sweep,offset):
                cuts.append(offset)
        cuts.sort()
        pieces = []
        previous = self.startAngle
        for offset in cuts:
            angle = self.startAngle + sign*offset
            pieces.append(Arc(self.pc,self.r,previous,angle,self.counterClockwise))
            previous = angle
        pieces.append(Arc(self.pc,self.r,previous,self.startAngle + sign*sweep,
                          self.counterClockwise))
        return pieces

    def definiteIntegral(self):
        a = self.startAngle
        b = a + self._signedSweep()
        r = self.r
        return 0.5*(r*self.pc.x*(math.sin(b) - math.sin(a))
                    - r*self.pc.y*(math.cos(b) - math.cos(a))
                    + r*r*(b - a))

    def reverse(self):
        return Arc(self.pc,self.r,self.endAngle,self.startAngle,not self.counterClockwise)

    def translate(self,*args):
        return Arc(self.pc.translate(*args),self.r,self.startAngle,self.endAngle,
                   self.counterClockwise)

    def rotate(self,angle,center=None):
        return Arc(self.pc.rotate(angle,center),self.r,self.startAngle+angle,
                   self.endAngle+angle,self.counterClockwise)

    def transform(self,m):
        """apply a similarity transform (rotation, uniform scale,
        translation, reflection)"""
        det = m.a*m.d - m.b*m.c
        pc = self.pc.transform(m)
        ps = self.start.transform(m)
        pe = self.end.transform(m)
        ccw = self.counterClockwise if det > 0 else not self.counterClockwise
        r = self.r*math.sqrt(abs(det))
        sa = Vector(pc,ps).slope
        if self.sweep == pi2:
            ea = sa + (pi2 if ccw else -pi2)
        else:
            ea = Vector(pc,pe).slope
        return Arc(pc,r,sa,ea,ccw)

    def intersect(self,shape):
        from flatcad.intersection import intersect
        return intersect(self,shape)

    def distanceTo(self,shape):
        from flatcad.distance import distance
        return distance(self,shape)

    def toJSON(self):
        return {'name': 'arc', 'pc': self.pc.toJSON(), 'r': self.r,
                'startAngle': self.startAngle, 'endAngle': self.endAngle,
                'counterClockwise': self.counterClockwise}

    def svgPath(self):
        """path commands continuing from ``start`` to ``end``; a full
        circle is drawn as two half arcs"""
        sweepFlag = '1' if self.counterClockwise else '0'
        if close(self.sweep,pi2):
            sign = 1.0 if self.counterClockwise else -1.0
            half1 = Arc(self.pc,self.r,self.startAngle,self.startAngle+sign*math.pi,
                        self.counterClockwise)
            half2 = Arc(self.pc,self.r,self.startAngle+sign*math.pi,
                        self.startAngle+sign*pi2,self.counterClockwise)
            return ' A{},{} 0 0,{} {},{} A{},{} 0 0,{} {},{}'.format(
                self.r,self.r,sweepFlag,half1.end.x,half1.end.y,
                self.r,self.r,sweepFlag,half2.end.x,half2.end.y)
        largeArcFlag = '0' if self.sweep <= math.pi else '1'
        return ' A{},{} 0 {},{} {},{}'.format(self.r,self.r,largeArcFlag,sweepFlag,
                                              self.end.x,self.end.y)

    def svg(self,stroke='black',strokeWidth=1,fill='none',id=None,className=None):
        if close(self.sweep,pi2):
            return Circle(self.pc,self.r).svg(stroke=stroke,strokeWidth=strokeWidth,
                                              fill=fill,id=id,className=className)
        id_str = 'id="{}"'.format(id) if id else ''
        class_str = 'class="{}"'.format(className) if className else ''
        return '\n<path d="M{},{}{}" stroke="{}" stroke-width="{}" fill="{}" {} {} />'.format(
            self.start.x,self.start.y,self.svgPath(),stroke,strokeWidth,fill,id_str,class_str)


class Circle:
    """circle with center ``pc`` and radius ``r``"""

    kind = ShapeKind.CIRCLE

    def __init__(self,pc=None,r=1.0):
        if pc is None:
            pc = Point(0,0)
        if not isinstance(pc,Point):
            raise ValueError('bad center passed to Circle(): {!r}'.format(pc))
        if not isinstance(r,(int,float)) or r < 0:
            raise ValueError('bad radius passed to Circle(): {!r}'.format(r))
        self.pc = pc
        self.r = float(r)

    def __repr__(self):
        return 'Circle({!r},{})'.format(self.pc,self.r)

    def clone(self):
        return Circle(self.pc,self.r)

    @property
    def center(self):
        return self.pc

    @property
    def box(self):
        return Box(self.pc.x-self.r,self.pc.y-self.r,self.pc.x+self.r,self.pc.y+self.r)

    def contains(self,shape):
        """``True`` if ``shape`` lies inside the disk or on the circle"""
        if isinstance(shape,Point):
            return le(Vector(self.pc,shape).length,self.r)
        if isinstance(shape,Segment):
            return self.contains(shape.start) and self.contains(shape.end)
        if isinstance(shape,Circle):
            return le(Vector(self.pc,shape.pc).length + shape.r,self.r)
        if isinstance(shape,Arc):
            # the point of the arc farthest from our center is an end
            # point, or lies on the ray from our center through its center
            candidates = [shape.start,shape.end]
            v = Vector(self.pc,shape.pc)
            if iszero(v.length):
                candidates.append(shape.middle())
            else:
                far = shape.pc.translate(v.normalize().multiply(shape.r))
                if shape.contains(far):
                    candidates.append(far)
            return all(self.contains(p) for p in candidates)
        raise UnsupportedShapeKind(
            'Circle.contains() does not support {}'.format(type(shape).__name__))

    def closestPoint(self,pt):
        if iszero(Vector(self.pc,pt).length):
            return self.pc.translate(self.r,0)
        return self.pc.translate(Vector(self.pc,pt).normalize().multiply(self.r))

    def toArc(self,counterClockwise=CCW):
        """full circle arc starting at the leftmost point"""
        end = math.pi + (pi2 if counterClockwise else -pi2)
        return Arc(self.pc,self.r,math.pi,end,counterClockwise)

    def translate(self,*args):
        return Circle(self.pc.translate(*args),self.r)

    def rotate(self,angle,center=None):
        return Circle(self.pc.rotate(angle,center),self.r)

    def transform(self,m):
        det = m.a*m.d - m.b*m.c
        return Circle(self.pc.transform(m),self.r*math.sqrt(abs(det)))

    def intersect(self,shape):
        from flatcad.intersection import intersect
        return intersect(self,shape)

    def distanceTo(self,shape):
        from flatcad.distance import distance
        return distance(self,shape)

    def toJSON(self):
        return {'name': 'circle', 'pc': self.pc.toJSON(), 'r': self.r}

    def svg(self,stroke='black',strokeWidth=1,fill='none',id=None,className=None):
        id_str = 'id="{}"'.format(id) if id else ''
        class_str = 'class="{}"'.format(className) if className else ''
        return '\n<circle cx="{}" cy="{}" r="{}" stroke="{}" stroke-width="{}" fill="{}" {} {} />'.format(
            self.pc.x,self.pc.y,self.r,stroke,strokeWidth,fill,id_str,class_str)
