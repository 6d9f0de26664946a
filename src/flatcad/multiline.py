"""open chains of segments and arcs

A ``Multiline`` is an open, linked chain of ``Edge`` instances, the
sort of thing used to cut a polygon with ``Polygon.cut()``.  Each edge
links to its neighbours through ``next`` and ``prev`` like face edges
do, but the chain has two ends.

``split()`` inserts vertices at given points, which is how a chain is
usually prepared for cutting: split it where it meets the polygon
boundary so every piece is either a chord or lies wholly outside.
"""

import logging

from flatcad.box import Box
from flatcad.curves import Arc, Segment
from flatcad.primitives import Point
from flatcad.topology import Edge

logger = logging.getLogger(__name__)


class Multiline:
    """open chain of edges"""

    def __init__(self,shapes=None):
        self.first = None
        self.last = None
        if shapes is None:
            return
        shapes = list(shapes)
        if shapes and all(isinstance(s,Point) for s in shapes):
            shapes = [Segment(shapes[i],shapes[i+1]) for i in range(len(shapes)-1)]
        for shape in shapes:
            if not isinstance(shape,(Segment,Arc)):
                raise ValueError('bad shape passed to Multiline(): {!r}'.format(shape))
            self.append(Edge(shape))

    def __repr__(self):
        return 'Multiline({!r})'.format(self.toShapes())

    def __iter__(self):
        edge = self.first
        while edge is not None:
            yield edge
            edge = edge.next

    def __len__(self):
        return sum(1 for _ in self)

    @property
    def edges(self):
        return list(self)

    @property
    def box(self):
        result = Box()
        for edge in self:
            result = result.merge(edge.box)
        return result

    @property
    def vertices(self):
        if self.first is None:
            return []
        return [edge.start for edge in self] + [self.last.end]

    def isEmpty(self):
        return self.first is None

    def append(self,edge):
        if self.first is None:
            edge.prev = None
            self.first = edge
        else:
            edge.prev = self.last
            self.last.next = edge
        edge.next = None
        self.last = edge
        return self

    def insert(self,newEdge,edgeBefore):
        """link ``newEdge`` after ``edgeBefore``, or at the front when
        ``edgeBefore`` is ``None``"""
        if edgeBefore is None:
            newEdge.prev = None
            newEdge.next = self.first
            if self.first is not None:
                self.first.prev = newEdge
            self.first = newEdge
            if self.last is None:
                self.last = newEdge
            return self
        newEdge.prev = edgeBefore
        newEdge.next = edgeBefore.next
        if edgeBefore.next is not None:
            edgeBefore.next.prev = newEdge
        edgeBefore.next = newEdge
        if edgeBefore is self.last:
            self.last = newEdge
        return self

    def findEdgeByPoint(self,pt):
        for edge in self:
            if edge.shape.contains(pt):
                return edge
        return None

    def addVertex(self,pt,edge):
        """split ``edge`` at ``pt``; returns the edge that ends at ``pt``"""
        head, tail = edge.shape.split(pt)
        if head is None:
            return edge.prev
        if tail is None:
            return edge
        newEdge = Edge(head)
        self.insert(newEdge,edge.prev)
        edge.shape = tail
        return newEdge

    def split(self,points):
        """insert a vertex at every point of ``points`` that lies on the
        chain; points off the chain are ignored"""
        for pt in points:
            edge = self.findEdgeByPoint(pt)
            if edge is None:
                logger.debug('point %r is not on the multiline', pt)
                continue
            self.addVertex(pt,edge)
        return self

    def toShapes(self):
        return [edge.shape for edge in self]

    def translate(self,*args):
        return Multiline([s.translate(*args) for s in self.toShapes()])

    def rotate(self,angle=0.0,center=None):
        return Multiline([s.rotate(angle,center) for s in self.toShapes()])

    def transform(self,m):
        return Multiline([s.transform(m) for s in self.toShapes()])

    def toJSON(self):
        return [edge.toJSON() for edge in self]

    def svg(self,stroke='black',strokeWidth=1,id=None,className=None):
        if self.first is None:
            return ''
        id_str = 'id="{}"'.format(id) if id else ''
        class_str = 'class="{}"'.format(className) if className else ''
        path = 'M{},{}'.format(self.first.start.x,self.first.start.y)
        for edge in self:
            path += edge.svg()
        return '\n<path d="{}" stroke="{}" stroke-width="{}" fill="none" {} {} />'.format(
            path,stroke,strokeWidth,id_str,class_str)
