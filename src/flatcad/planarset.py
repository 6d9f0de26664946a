"""Box-indexed set of shapes.

A ``PlanarSet`` is a set of items, each exposing a ``box``, backed by an
``IntervalTree`` keyed on those boxes.  Membership is by item identity
(or the item's own equality, for items that define it), so two
distinct edges with identical boxes are both kept.

The box an item was indexed under is remembered, so an item whose
geometry changes can still be found and removed; call ``update()`` to
re-index it under its new box.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List

from flatcad import config
from flatcad.box import Box
from flatcad.intervaltree import IntervalTree


class PlanarSet:
    """set of shapes with O(log n) membership changes and O(log n + k)
    box queries"""

    def __init__(self, items=None):
        self._index = IntervalTree()
        self._keys: Dict[Any, Box] = {}
        if items is not None:
            for item in items:
                self.add(item)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, item) -> bool:
        return item in self._keys

    def __iter__(self) -> Iterator[Any]:
        """members in box order; a live view of the index"""
        return self._index.values()

    def __repr__(self) -> str:
        return f'PlanarSet(size={len(self)})'

    @property
    def size(self) -> int:
        return len(self._keys)

    @property
    def index(self) -> IntervalTree:
        return self._index

    @property
    def box(self) -> Box:
        """union of the boxes of all members"""
        result = Box()
        for key in self._keys.values():
            result = result.merge(key)
        return result

    def add(self, item) -> bool:
        """add ``item``; returns ``False`` if it was already a member"""
        if item in self._keys:
            return False
        key = item.box
        if key.isEmpty():
            raise ValueError(f'can not index an item with an empty box: {item!r}')
        self._index.insert(key, item)
        self._keys[item] = key
        return True

    def delete(self, item) -> bool:
        """remove ``item``; returns ``False`` if it was not a member"""
        key = self._keys.pop(item, None)
        if key is None:
            return False
        removed = self._index.remove(key, item)
        if not removed:
            raise RuntimeError(f'planar set index lost track of {item!r}')
        return True

    def update(self, item) -> bool:
        """re-index a member whose box has changed"""
        if not self.delete(item):
            return False
        return self.add(item)

    def clear(self) -> None:
        self._index.clear()
        self._keys.clear()

    def search(self, box: Box) -> Iterator[Any]:
        """lazily yield members whose boxes intersect ``box``"""
        return self._index.search(box)

    def hit(self, pt) -> List[Any]:
        """members that contain the point ``pt``"""
        tol = config.DP_TOL
        query = Box(pt.x - tol, pt.y - tol, pt.x + tol, pt.y + tol)
        return [item for item in self.search(query) if item.contains(pt)]
