## faces and edges of polygon boundaries for flatCAD
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

"""
Boundary Topology
=================

A ``Face`` is one closed boundary loop of a polygon: a circular,
doubly linked chain of ``Edge`` instances.  Each edge wraps a single
``Segment`` or ``Arc`` and points to its neighbours and, without
owning it, to the face it belongs to.

For every edge ``e`` of a live face ``e.next.prev is e``, and walking
``next`` from any edge comes back to it after ``len(face)`` steps.
The ``Face`` methods that relink edges (``append()``, ``insert()``,
``remove()``, ``reverse()``) keep that true; keeping the owning
polygon's edge index in step is the polygon's job.

Orientation
-----------

The signed area of a loop is computed in exactly one place,
``signedArea()``, as the sum of the per-shape integrals of
1/2*(x dy - y dx).  Counterclockwise loops have positive area.  Face
area, face orientation and island/hole classification all use it.
"""

from flatcad.box import Box
from flatcad.curves import Arc, Circle, Segment
from flatcad.geom import ORIENTATION, iszero, uniquePoints
from flatcad.primitives import Point


def signedArea(shapes):
    """signed area enclosed by a closed loop of segments and arcs,
    positive when the loop runs counterclockwise"""
    return sum(shape.definiteIntegral() for shape in shapes)


class Edge:
    """one segment or arc of a face boundary"""

    def __init__(self,shape):
        if not isinstance(shape,(Segment,Arc)):
            raise ValueError('bad shape passed to Edge(): {!r}'.format(shape))
        self.shape = shape
        self.next = None
        self.prev = None
        self.face = None
        self.bv = None     # inclusion of the edge in another polygon

    def __repr__(self):
        return 'Edge({!r})'.format(self.shape)

    @property
    def start(self):
        return self.shape.start

    @property
    def end(self):
        return self.shape.end

    @property
    def length(self):
        return self.shape.length

    @property
    def box(self):
        return self.shape.box

    def isSegment(self):
        return isinstance(self.shape,Segment)

    def isArc(self):
        return isinstance(self.shape,Arc)

    def middle(self):
        return self.shape.middle()

    def contains(self,pt):
        return self.shape.contains(pt)

    def setInclusion(self,polygon):
        """classify the edge against ``polygon`` by its middle point and
        remember the result in ``bv``"""
        from flatcad.ray_shooting import rayShoot
        self.bv = rayShoot(polygon,self.middle())
        return self.bv

    def toJSON(self):
        return self.shape.toJSON()

    def svg(self):
        """path commands from ``start`` to ``end``"""
        if self.isSegment():
            return ' L{},{}'.format(self.end.x,self.end.y)
        return self.shape.svgPath()


def _loopShapes(loop):
    """convert the description of a closed loop into a list of shapes"""
    if isinstance(loop,Box):
        return loop.toSegments()
    if isinstance(loop,Circle):
        return [loop.toArc()]
    if not isinstance(loop,(list,tuple)) or len(loop) == 0:
        raise ValueError('bad loop passed to Face(): {!r}'.format(loop))

    if all(isinstance(e,(list,tuple)) and len(e) == 2 for e in loop):
        loop = [Point(e[0],e[1]) for e in loop]

    if all(isinstance(e,Point) for e in loop):
        points = list(loop)
        if len(points) > 1 and points[0].equalTo(points[-1]):
            points.pop()
        if len(points) < 2:
            raise ValueError('a loop needs at least two distinct points')
        return [Segment(points[i],points[(i+1) % len(points)])
                for i in range(len(points))]

    if all(isinstance(e,(Segment,Arc)) for e in loop):
        shapes = list(loop)
        for i, shape in enumerate(shapes):
            following = shapes[(i+1) % len(shapes)]
            if not shape.end.equalTo(following.start):
                raise ValueError('shapes passed to Face() do not form a closed loop '
                                 'at {!r}'.format(shape.end))
        return shapes

    raise ValueError('bad loop passed to Face(): {!r}'.format(loop))


class Face:
    """closed loop of edges

    ``Face(polygon, loop)`` builds a new loop from points, numeric
    pairs, segments and arcs, a ``Box`` or a ``Circle``, and registers
    the new edges with ``polygon.edges`` when a polygon is given.

    ``Face(polygon, first, last)`` adopts the already linked chain of
    edges running from ``first`` to ``last`` and closes it; the edges
    are assumed to be indexed already.
    """

    def __init__(self,polygon=None,loop=None,last=None):
        self.first = None
        self.last = None
        self._box = None

        if loop is None:
            return

        if isinstance(loop,Edge) and isinstance(last,Edge):
            self.first = loop
            self.last = last
            last.next = loop
            loop.prev = last
            for edge in self:
                edge.face = self
            return

        if last is not None:
            raise ValueError('bad arguments to Face(): {!r}, {!r}'.format(loop,last))

        for shape in _loopShapes(loop):
            edge = Edge(shape)
            self.append(edge)
            if polygon is not None:
                polygon.edges.add(edge)

    def __repr__(self):
        return 'Face({!r})'.format(self.shapes)

    def __iter__(self):
        edge = self.first
        if edge is None:
            return
        while True:
            yield edge
            edge = edge.next
            if edge is self.first or edge is None:
                break

    def __len__(self):
        return sum(1 for _ in self)

    @property
    def size(self):
        return len(self)

    @property
    def edges(self):
        return list(self)

    @property
    def shapes(self):
        return [edge.shape for edge in self]

    @property
    def box(self):
        if self._box is None:
            box = Box()
            for edge in self:
                box = box.merge(edge.box)
            self._box = box
        return self._box

    def isEmpty(self):
        return self.first is None

    def append(self,edge):
        """add ``edge`` at the end of the loop"""
        if self.first is None:
            edge.prev = edge
            edge.next = edge
            self.first = edge
            self.last = edge
        else:
            edge.prev = self.last
            self.last.next = edge
            self.last = edge
            self.last.next = self.first
            self.first.prev = self.last
        edge.face = self
        self._box = None
        return self

    def insert(self,newEdge,edgeBefore):
        """link ``newEdge`` into the loop right after ``edgeBefore``"""
        if self.first is None:
            return self.append(newEdge)
        edgeAfter = edgeBefore.next
        edgeBefore.next = newEdge
        edgeAfter.prev = newEdge
        newEdge.prev = edgeBefore
        newEdge.next = edgeAfter
        if edgeBefore is self.last:
            self.last = newEdge
        newEdge.face = self
        self._box = None
        return self

    def remove(self,edge):
        """unlink ``edge``; its own ``next``/``prev`` are left as they
        were so a walk in progress can continue"""
        if self.first is self.last:
            if edge is self.first:
                self.first = None
                self.last = None
        else:
            edge.prev.next = edge.next
            edge.next.prev = edge.prev
            if edge is self.first:
                self.first = edge.next
            if edge is self.last:
                self.last = edge.prev
        self._box = None
        return self

    def reverse(self):
        """reverse the direction of the loop in place"""
        edges = []
        edge = self.last
        if edge is None:
            return self
        while True:
            edge.shape = edge.shape.reverse()
            edges.append(edge)
            edge = edge.prev
            if edge is self.last:
                break
        self.first = None
        self.last = None
        for edge in edges:
            self.append(edge)
        return self

    def signedArea(self):
        return signedArea(self.shapes)

    def area(self):
        return abs(self.signedArea())

    def orientation(self):
        area = self.signedArea()
        if iszero(area):
            return ORIENTATION.NOT_ORIENTABLE
        return ORIENTATION.CCW if area > 0 else ORIENTATION.CW

    @property
    def perimeter(self):
        return sum(edge.length for edge in self)

    def findEdgeByPoint(self,pt):
        for edge in self:
            if edge.shape.contains(pt):
                return edge
        return None

    def getSelfIntersections(self,edges,exitOnFirst=False):
        """points where edges of this face meet other than at the vertex
        shared with a neighbour; ``edges`` is a ``PlanarSet`` indexing
        this face's edges"""
        points = []
        for edge1 in self:
            for edge2 in edges.search(edge1.box):
                if edge1 is edge2 or edge2.face is not self:
                    continue
                if edge1.isSegment() and edge2.isSegment() and \
                        (edge1.next is edge2 or edge1.prev is edge2):
                    continue
                for pt in edge1.shape.intersect(edge2.shape):
                    if edge2 is edge1.prev and pt.equalTo(edge1.start) and pt.equalTo(edge2.end):
                        continue
                    if edge2 is edge1.next and pt.equalTo(edge1.end) and pt.equalTo(edge2.start):
                        continue
                    points.append(pt)
                    if exitOnFirst:
                        return points
        return uniquePoints(points)

    def isSimple(self,edges=None):
        if edges is None:
            from flatcad.planarset import PlanarSet
            edges = PlanarSet(self)
        return len(self.getSelfIntersections(edges,exitOnFirst=True)) == 0

    def toPolygon(self):
        from flatcad.polygon import Polygon
        return Polygon(self.shapes)

    def toJSON(self):
        return [edge.toJSON() for edge in self]

    def svg(self):
        if self.first is None:
            return ''
        path = '\nM{},{}'.format(self.first.start.x,self.first.start.y)
        for edge in self:
            path += edge.svg()
        return path + ' z'
