## multi-face polygons for flatCAD
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
Polygons
========

A ``Polygon`` is a collection of faces (closed boundary loops).  It
owns two ``PlanarSet`` indices, ``faces`` and ``edges``; the edge
index always holds exactly the edges of the live faces.  Faces of one
orientation are islands, faces of the opposite orientation are holes;
which orientation counts as "island" is decided by the largest face.

Construction
------------

``Polygon()`` is empty.  ``Polygon(loop)`` makes a one-face polygon
from a list of points, numeric pairs (a ``numpy`` array of shape
``(N, 2)`` works too), or segments and arcs.  ``Polygon([loop, ...])``
makes one face per loop, and ``Polygon(box)`` or ``Polygon(circle)``
makes a counterclockwise rectangle or circle.

Topology surgery
----------------

``addVertex()``, ``removeChain()`` and ``cutFace()`` rewire the edge
loops in place and keep both indices in step.  Their preconditions
are checked before anything is changed, and a violation raises
``InvalidPrecondition`` leaving the polygon as it was.

    >>> p = Polygon([(0,0),(10,0),(10,10),(0,10)])
    >>> p.area()
    100.0
    >>> left, right = p.cutFace(Point(5,0),Point(5,10))

"""

import logging
from dataclasses import dataclass, field
from typing import List

import numpy as np

from flatcad import config
from flatcad.box import Box
from flatcad.curves import Arc, Circle, Segment
from flatcad.errors import InvalidPrecondition, TopologyError
from flatcad.geom import (BOUNDARY, INSIDE, ORIENTATION, ShapeKind)
from flatcad.planarset import PlanarSet
from flatcad.primitives import Point
from flatcad.topology import Edge, Face

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.ok


def _isnumber(x):
    return isinstance(x,(int,float)) and not isinstance(x,bool)


def _isLoop(arg):
    """does ``arg`` describe a single loop, as opposed to a list of
    loops?"""
    return all(isinstance(e,(Point,Segment,Arc)) or
               (isinstance(e,(list,tuple)) and len(e) == 2 and
                _isnumber(e[0]) and _isnumber(e[1]))
               for e in arg)


def _asLoop(loop):
    if isinstance(loop,np.ndarray):
        a = np.asarray(loop,dtype=float)
        if a.ndim != 2 or a.shape[1] != 2:
            raise ValueError('a loop array must have shape (N, 2), got {}'.format(a.shape))
        return a.tolist()
    return loop


def _asLoops(arg):
    """split constructor input into a list of loops"""
    if isinstance(arg,np.ndarray):
        a = np.asarray(arg,dtype=float)
        if a.ndim == 3 and a.shape[2] == 2:
            return a.tolist()
        return [_asLoop(a)]
    if isinstance(arg,(Box,Circle)):
        return [arg]
    if isinstance(arg,(list,tuple)):
        if len(arg) == 0:
            return []
        if _isLoop(arg):
            return [arg]
        return [_asLoop(loop) for loop in arg]
    raise ValueError('bad argument passed to Polygon(): {!r}'.format(arg))


class Polygon:
    """set of faces with an edge index"""

    kind = ShapeKind.POLYGON

    def __init__(self,loops=None):
        self.faces = PlanarSet()
        self.edges = PlanarSet()
        if loops is None:
            return
        for loop in _asLoops(loops):
            self.addFace(loop)

    def __repr__(self):
        return 'Polygon(faces={},edges={})'.format(len(self.faces),len(self.edges))

    @property
    def box(self):
        result = Box()
        for face in self.faces:
            result = result.merge(face.box)
        return result

    @property
    def vertices(self):
        return [edge.start for face in self.faces for edge in face]

    def clone(self):
        """structural copy sharing no faces, edges or indices with this
        polygon"""
        polygon = Polygon()
        for face in self.faces:
            polygon.addFace([shape.clone() for shape in face.shapes])
        return polygon

    def isEmpty(self):
        return len(self.edges) == 0

    ## validity

    def validate(self):
        """check that the polygon is usable for boolean operations.

        A valid polygon has only simple faces, no two faces cross each
        other (touching is allowed), and every face has the orientation
        its nesting depth calls for: faces at even depth share the
        orientation of the outermost faces, faces at odd depth have the
        opposite one.

        Returns a ``CheckResult``; ``warnings`` describe each problem.
        """
        warnings = []
        faces = list(self.faces)

        for i, face in enumerate(faces):
            points = face.getSelfIntersections(self.edges,exitOnFirst=True)
            if points:
                warnings.append('face {} is self-intersecting at {!r}'.format(i,points[0]))

        for i, face1 in enumerate(faces):
            for j in range(i+1,len(faces)):
                face2 = faces[j]
                if not face1.box.intersect(face2.box):
                    continue
                crossing = self._crossing(face1,face2)
                if crossing is not None:
                    warnings.append('faces {} and {} cross at {!r}'.format(i,j,crossing))

        warnings.extend(self._nestingWarnings(faces))

        return CheckResult(not warnings,warnings)

    def isValid(self):
        return bool(self.validate())

    def _crossing(self,face1,face2):
        """first point where an edge of ``face1`` properly crosses an edge
        of ``face2``, or ``None``"""
        for edge1 in face1:
            for edge2 in self.edges.search(edge1.box):
                if edge2.face is not face2:
                    continue
                for pt in edge1.shape.intersect(edge2.shape):
                    if any(pt.equalTo(v) for v in (edge1.start,edge1.end,
                                                    edge2.start,edge2.end)):
                        continue
                    return pt
        return None

    def _nestingWarnings(self,faces):
        from flatcad.ray_shooting import rayShoot

        if len(faces) < 2:
            return []
        singles = [face.toPolygon() for face in faces]
        depths = []
        for i, face in enumerate(faces):
            depth = 0
            for j, other in enumerate(singles):
                if j == i or not other.box.intersect(face.box):
                    continue
                for edge in face:
                    rel = rayShoot(other,edge.middle())
                    if rel != BOUNDARY:
                        depth += 1 if rel == INSIDE else 0
                        break
            depths.append(depth)

        outermost = [face for face, depth in zip(faces,depths) if depth == 0] or faces
        reference = max(outermost,key=lambda f: f.area()).orientation()
        warnings = []
        for i, (face, depth) in enumerate(zip(faces,depths)):
            orientation = face.orientation()
            if orientation == ORIENTATION.NOT_ORIENTABLE:
                warnings.append('face {} has zero area'.format(i))
                continue
            expected = reference if depth % 2 == 0 else -reference
            if orientation != expected:
                kind = 'hole' if depth % 2 else 'island'
                warnings.append('face {} at nesting depth {} is oriented opposite to '
                                'an {}'.format(i,depth,kind))
        return warnings

    def area(self):
        """total area: islands count positive, holes negative"""
        return abs(sum(face.signedArea() for face in self.faces))

    ## topology surgery

    def addFace(self,*args):
        """add a face and return it.

        ``addFace(loop)`` builds the face from points, numeric pairs,
        shapes, a ``Box`` or a ``Circle``.  ``addFace(first, last)``
        makes a face of the already indexed chain of edges running from
        ``first`` to ``last``.
        """
        if len(args) == 1:
            face = Face(self,_asLoop(args[0]))
        elif len(args) == 2:
            face = Face(self,args[0],args[1])
        else:
            raise ValueError('bad arguments to addFace(): {!r}'.format(args))
        self.faces.add(face)
        logger.debug('added face with %d edges', len(face))
        return face

    def deleteFace(self,face):
        """remove ``face`` and its edges; ``False`` if it is not a face of
        this polygon"""
        if face not in self.faces:
            return False
        for edge in face:
            self.edges.delete(edge)
        deleted = self.faces.delete(face)
        logger.debug('deleted face %r', face.box)
        return deleted

    def removeChain(self,face,edgeFrom,edgeTo):
        """remove the run of edges from ``edgeFrom`` to ``edgeTo``
        (inclusive, following ``next``) from ``face``"""
        if edgeTo.next is edgeFrom:
            if edgeFrom.face is not face:
                raise InvalidPrecondition('edge {!r} does not belong to the face'.format(edgeFrom),
                                          {'edgeFrom': edgeFrom, 'edgeTo': edgeTo})
            self.deleteFace(face)
            return

        chain = []
        edge = edgeFrom
        while True:
            if edge.face is not face:
                raise InvalidPrecondition('edge {!r} does not belong to the face'.format(edge))
            chain.append(edge)
            if edge is edgeTo:
                break
            edge = edge.next
            if edge is edgeFrom:
                raise InvalidPrecondition('edgeTo can not be reached from edgeFrom',
                                          {'edgeFrom': edgeFrom, 'edgeTo': edgeTo})

        for edge in chain:
            face.remove(edge)
            self.edges.delete(edge)
            if face.isEmpty():
                self.deleteFace(face)
                break
        else:
            self.faces.update(face)
        logger.debug('removed chain of %d edges', len(chain))

    def addVertex(self,pt,edge):
        """split ``edge`` at ``pt`` and return the edge that now ends at
        ``pt``.

        The head piece becomes a new edge linked in before ``edge``;
        ``edge`` keeps its identity and links and is trimmed to the tail
        piece.  When ``pt`` is already a vertex of the edge nothing is
        split.
        """
        if edge.face not in self.faces:
            raise InvalidPrecondition('edge {!r} is not an edge of this polygon'.format(edge),
                                      {'edge': edge})
        if not edge.shape.contains(pt):
            raise InvalidPrecondition('point {!r} is not on edge {!r}'.format(pt,edge),
                                      {'point': pt, 'edge': edge})
        head, tail = edge.shape.split(pt)
        if head is None:
            return edge.prev
        if tail is None:
            return edge

        newEdge = Edge(head)
        edge.face.insert(newEdge,edge.prev)
        self.edges.add(newEdge)
        edge.shape = tail
        self.edges.update(edge)
        logger.debug('split edge at %r', pt)
        return newEdge

    def cutFace(self,pt1,pt2):
        """cut the face whose boundary holds ``pt1`` and ``pt2`` along the
        segment between them.

        The face is replaced by two new faces in this polygon, and the
        two new faces are also returned as standalone polygons.  The
        segment is assumed not to cross any other edge.
        """
        edge1 = self.findEdgeByPoint(pt1)
        edge2 = self.findEdgeByPoint(pt2)
        if edge1 is None or edge2 is None:
            raise InvalidPrecondition('cut point is not on the polygon boundary',
                                      {'pt1': pt1, 'pt2': pt2})
        if edge1.face is not edge2.face:
            raise InvalidPrecondition('cut points are on different faces',
                                      {'pt1': pt1, 'pt2': pt2})
        if pt1.equalTo(pt2):
            raise InvalidPrecondition('cut points coincide',{'pt1': pt1, 'pt2': pt2})

        face = edge1.face
        edgeBefore1 = self.addVertex(pt1,edge1)
        edge2 = self.findEdgeByPoint(pt2)
        edgeBefore2 = self.addVertex(pt2,edge2)

        newEdge1 = Edge(Segment(edgeBefore1.end,edgeBefore2.end))
        newEdge2 = Edge(Segment(edgeBefore2.end,edgeBefore1.end))

        edgeBefore1.next.prev = newEdge2
        newEdge2.next = edgeBefore1.next
        edgeBefore1.next = newEdge1
        newEdge1.prev = edgeBefore1

        edgeBefore2.next.prev = newEdge1
        newEdge1.next = edgeBefore2.next
        edgeBefore2.next = newEdge2
        newEdge2.prev = edgeBefore2

        self.edges.add(newEdge1)
        self.edges.add(newEdge2)

        self.faces.delete(face)
        face1 = self.addFace(newEdge1,edgeBefore1)
        face2 = self.addFace(newEdge2,edgeBefore2)
        logger.debug('cut face between %r and %r', pt1, pt2)

        return [face1.toPolygon(),face2.toPolygon()]

    def cut(self,multiline):
        """cut a copy of this polygon with the interior chords of
        ``multiline`` and return the pieces.

        A chord is used when its middle point is inside the polygon and
        both its ends lie on the same face of one piece; other
        chords are skipped.
        """
        pieces = [self.clone()]
        for edge in multiline:
            if edge.setInclusion(self) != INSIDE:
                continue
            start = edge.start
            end = edge.end
            result = []
            used = False
            for polygon in pieces:
                edge1 = polygon.findEdgeByPoint(start)
                edge2 = polygon.findEdgeByPoint(end)
                if edge1 is None or edge2 is None or edge1.face is not edge2.face:
                    result.append(polygon)
                else:
                    result.extend(polygon.cutFace(start,end))
                    used = True
            if not used:
                logger.warning('skipped chord %r: its ends are not on one face', edge.shape)
            pieces = result
        return pieces

    def findEdgeByPoint(self,pt):
        """an edge whose shape contains ``pt``, or ``None``"""
        for edge in self.edges.hit(pt):
            return edge
        return None

    def splitToIslands(self):
        """split into polygons of one island each, with the holes that
        lie in it"""
        polygons = self.toArray()
        if not polygons:
            return []
        polygons.sort(key=lambda p: p.area(),reverse=True)

        def orientationOf(polygon):
            return next(iter(polygon.faces)).orientation()

        orientation = orientationOf(polygons[0])
        islands = [p for p in polygons if orientationOf(p) == orientation]
        for polygon in polygons:
            if orientationOf(polygon) == orientation:
                continue
            face = next(iter(polygon.faces))
            for island in islands:
                if all(island.contains(shape) for shape in face.shapes):
                    island.addFace(face.shapes)
                    break
            else:
                raise TopologyError('hole {!r} does not lie in any island'.format(face.box),
                                    {'hole': face.box})
        return islands

    def reverse(self):
        for face in self.faces:
            face.reverse()
        return self

    ## queries

    def contains(self,shape):
        """``True`` if no point of ``shape`` lies outside the polygon"""
        if isinstance(shape,Point):
            from flatcad.ray_shooting import rayShoot
            return rayShoot(self,shape) in (INSIDE,BOUNDARY)
        from flatcad.relation import cover
        return cover(self,shape)

    def middle(self):
        """average of the vertices"""
        vertices = self.vertices
        if not vertices:
            raise ValueError('an empty polygon has no middle')
        return Point(sum(v.x for v in vertices)/len(vertices),
                     sum(v.y for v in vertices)/len(vertices))

    def distanceTo(self,shape):
        from flatcad.distance import distance
        return distance(self,shape)

    def intersect(self,shape):
        from flatcad.intersection import intersect
        return intersect(self,shape)

    ## transformations

    def _mapShapes(self,fn):
        polygon = Polygon()
        for face in self.faces:
            polygon.addFace([fn(shape) for shape in face.shapes])
        return polygon

    def translate(self,*args):
        return self._mapShapes(lambda s: s.translate(*args))

    def rotate(self,angle=0.0,center=None):
        return self._mapShapes(lambda s: s.rotate(angle,center))

    def transform(self,m):
        return self._mapShapes(lambda s: s.transform(m))

    ## conversion

    def toArray(self):
        """one single-face polygon per face"""
        return [face.toPolygon() for face in self.faces]

    def toJSON(self):
        return [face.toJSON() for face in self.faces]

    def svg(self,**attrs):
        a = config.svg_attributes(**attrs)
        id_str = 'id="{}"'.format(a['id']) if a.get('id') else ''
        class_str = 'class="{}"'.format(a['className']) if a.get('className') else ''
        path = ''.join(face.svg() for face in self.faces)
        return ('\n<path stroke="{}" stroke-width="{}" fill="{}" fill-rule="{}" '
                'fill-opacity="{}" {} {} d="{}" >\n</path>').format(
                    a['stroke'],a['strokeWidth'],a['fill'],a['fillRule'],
                    a['fillOpacity'],id_str,class_str,path)
