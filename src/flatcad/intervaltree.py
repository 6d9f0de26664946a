"""Augmented red-black interval tree.

Each node stores an interval ``key`` (anything with ``low`` and
``high`` attributes whose values support ``<``), an opaque ``value``,
and ``max``: the greatest ``high`` found in the node's subtree.  Nodes
are ordered by ``(low, high)`` and then by insertion sequence, so the
tree happily holds several values under equal keys.

For flatCAD the keys are ``Box`` instances, whose ``low`` and ``high``
corners compare lexicographically by x and then y.  Lexicographic
overlap of ``[low, high]`` intervals is a necessary condition for two
boxes to overlap, which is what makes the ``max`` augmentation usable
for pruning a 2D search; candidates that pass are then confirmed with
the key's own ``intersect()``.

Searching costs O(log n + k) for k results, insertion and deletion
O(log n).
"""

from __future__ import annotations

from typing import Any, Iterator, List, Tuple

RED = True
BLACK = False


class Interval:
    """closed interval ``[low, high]`` over any ordered values"""

    __slots__ = ('low', 'high')

    def __init__(self, low, high):
        if high < low:
            raise ValueError(f'interval low {low!r} exceeds high {high!r}')
        self.low = low
        self.high = high

    def __repr__(self) -> str:
        return f'Interval({self.low!r}, {self.high!r})'

    def intersect(self, other) -> bool:
        return not (self.high < other.low or other.high < self.low)


class _Node:

    __slots__ = ('key', 'value', 'seq', 'low', 'high', 'max',
                 'color', 'left', 'right', 'parent')

    def __init__(self, key, value, seq, nil=None):
        self.key = key
        self.value = value
        self.seq = seq
        self.low = None if key is None else key.low
        self.high = None if key is None else key.high
        self.max = self.high
        self.color = RED
        self.left = nil
        self.right = nil
        self.parent = nil

    def __repr__(self) -> str:
        return f'_Node({self.key!r}, {self.value!r})'


class IntervalTree:
    """Self-balancing interval tree supporting duplicate keys."""

    def __init__(self):
        nil = _Node(None, None, -1)
        nil.color = BLACK
        nil.left = nil.right = nil.parent = nil
        self._nil = nil
        self._root = nil
        self._size = 0
        self._seq = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.values()

    def __repr__(self) -> str:
        return f'IntervalTree(size={self._size})'

    @property
    def size(self) -> int:
        return self._size

    def isEmpty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = self._nil
        self._size = 0

    # -- ordering and augmentation ---------------------------------------

    @staticmethod
    def _precedes(low, high, seq, node) -> bool:
        if low < node.low:
            return True
        if node.low < low:
            return False
        if high < node.high:
            return True
        if node.high < high:
            return False
        return seq < node.seq

    @staticmethod
    def _compare(low, high, node) -> int:
        """compare an interval against a node's key, ignoring sequence"""
        if low < node.low:
            return -1
        if node.low < low:
            return 1
        if high < node.high:
            return -1
        if node.high < high:
            return 1
        return 0

    def _updateMax(self, node) -> None:
        m = node.high
        if node.left is not self._nil and m < node.left.max:
            m = node.left.max
        if node.right is not self._nil and m < node.right.max:
            m = node.right.max
        node.max = m

    def _updateMaxUpward(self, node) -> None:
        while node is not self._nil:
            self._updateMax(node)
            node = node.parent

    def _rotateLeft(self, x) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y
        self._updateMax(x)
        self._updateMax(y)

    def _rotateRight(self, x) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y
        self._updateMax(x)
        self._updateMax(y)

    # -- insertion -----------------------------------------------------------

    def insert(self, key, value=None):
        """insert ``value`` under interval ``key``; ``value`` defaults to
        the key itself"""
        if value is None:
            value = key
        if key.high < key.low:
            raise ValueError(f'interval low {key.low!r} exceeds high {key.high!r}')

        node = _Node(key, value, self._seq, self._nil)
        self._seq += 1

        parent = self._nil
        current = self._root
        while current is not self._nil:
            parent = current
            if self._precedes(node.low, node.high, node.seq, current):
                current = current.left
            else:
                current = current.right
        node.parent = parent
        if parent is self._nil:
            self._root = node
        elif self._precedes(node.low, node.high, node.seq, parent):
            parent.left = node
        else:
            parent.right = node

        self._updateMaxUpward(parent)
        self._insertFixup(node)
        self._size += 1
        return node

    def _insertFixup(self, z) -> None:
        while z.parent.color == RED:
            if z.parent is z.parent.parent.left:
                y = z.parent.parent.right
                if y.color == RED:
                    z.parent.color = BLACK
                    y.color = BLACK
                    z.parent.parent.color = RED
                    z = z.parent.parent
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotateLeft(z)
                    z.parent.color = BLACK
                    z.parent.parent.color = RED
                    self._rotateRight(z.parent.parent)
            else:
                y = z.parent.parent.left
                if y.color == RED:
                    z.parent.color = BLACK
                    y.color = BLACK
                    z.parent.parent.color = RED
                    z = z.parent.parent
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotateRight(z)
                    z.parent.color = BLACK
                    z.parent.parent.color = RED
                    self._rotateLeft(z.parent.parent)
        self._root.color = BLACK

    # -- deletion ------------------------------------------------------------

    def _find(self, node, key, value):
        while node is not self._nil:
            c = self._compare(key.low, key.high, node)
            if c < 0:
                node = node.left
            elif c > 0:
                node = node.right
            else:
                if node.value is value:
                    return node
                # equal keys may sit on both sides after rotations
                found = self._find(node.left, key, value)
                if found is not self._nil:
                    return found
                node = node.right
        return self._nil

    def exist(self, key, value=None) -> bool:
        if value is None:
            value = key
        return self._find(self._root, key, value) is not self._nil

    def remove(self, key, value=None) -> bool:
        """remove ``value`` stored under ``key``; returns ``False`` if it
        is not in the tree"""
        if value is None:
            value = key
        node = self._find(self._root, key, value)
        if node is self._nil:
            return False
        self._deleteNode(node)
        self._size -= 1
        return True

    def _transplant(self, u, v) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _minimum(self, node):
        while node.left is not self._nil:
            node = node.left
        return node

    def _deleteNode(self, z) -> None:
        y = z
        yOriginalColor = y.color
        if z.left is self._nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is self._nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._minimum(z.right)
            yOriginalColor = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color

        self._updateMaxUpward(x.parent)
        if yOriginalColor == BLACK:
            self._deleteFixup(x)
        self._nil.parent = self._nil

    def _deleteFixup(self, x) -> None:
        while x is not self._root and x.color == BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color == RED:
                    w.color = BLACK
                    x.parent.color = RED
                    self._rotateLeft(x.parent)
                    w = x.parent.right
                if w.left.color == BLACK and w.right.color == BLACK:
                    w.color = RED
                    x = x.parent
                else:
                    if w.right.color == BLACK:
                        w.left.color = BLACK
                        w.color = RED
                        self._rotateRight(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = BLACK
                    w.right.color = BLACK
                    self._rotateLeft(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.color == RED:
                    w.color = BLACK
                    x.parent.color = RED
                    self._rotateRight(x.parent)
                    w = x.parent.left
                if w.right.color == BLACK and w.left.color == BLACK:
                    w.color = RED
                    x = x.parent
                else:
                    if w.left.color == BLACK:
                        w.right.color = BLACK
                        w.color = RED
                        self._rotateLeft(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = BLACK
                    w.left.color = BLACK
                    self._rotateRight(x.parent)
                    x = self._root
        x.color = BLACK

    # -- queries -------------------------------------------------------------

    def search(self, query) -> Iterator[Any]:
        """lazily yield the values whose keys intersect ``query``, in key
        order"""
        qlow = query.low
        qhigh = query.high
        nil = self._nil

        def _search(node):
            if node is nil or node.max < qlow:
                return
            yield from _search(node.left)
            if qhigh < node.low:
                return      # this node and its right subtree start too late
            if not node.high < qlow and self._confirm(node.key, query):
                yield node.value
            yield from _search(node.right)

        return _search(self._root)

    @staticmethod
    def _confirm(key, query) -> bool:
        intersect = getattr(key, 'intersect', None)
        if intersect is None:
            return True
        return intersect(query)

    def _inorder(self) -> Iterator[_Node]:
        stack: List[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def values(self) -> Iterator[Any]:
        return (node.value for node in self._inorder())

    def keys(self) -> Iterator[Any]:
        return (node.key for node in self._inorder())

    def items(self) -> Iterator[Tuple[Any, Any]]:
        return ((node.key, node.value) for node in self._inorder())

    def height(self) -> int:
        def _height(node):
            if node is self._nil:
                return 0
            return 1 + max(_height(node.left), _height(node.right))
        return _height(self._root)

    def validate(self) -> bool:
        """check the red-black rules, key order and the ``max``
        augmentation; raise ``ValueError`` naming the first violation"""
        nil = self._nil
        if self._root.color != BLACK:
            raise ValueError('root is not black')

        def _check(node):
            if node is nil:
                return 1
            if node.color == RED and (node.left.color == RED or node.right.color == RED):
                raise ValueError(f'red node {node!r} has a red child')
            for child in (node.left, node.right):
                if child is not nil and child.parent is not node:
                    raise ValueError(f'broken parent link below {node!r}')
            if node.left is not nil and \
                    not self._precedes(node.left.low, node.left.high, node.left.seq, node):
                raise ValueError(f'left child of {node!r} is out of order')
            if node.right is not nil and \
                    self._precedes(node.right.low, node.right.high, node.right.seq, node):
                raise ValueError(f'right child of {node!r} is out of order')
            left = _check(node.left)
            right = _check(node.right)
            if left != right:
                raise ValueError(f'black height differs below {node!r}')
            expected = node.high
            for child in (node.left, node.right):
                if child is not nil and expected < child.max:
                    expected = child.max
            if expected < node.max or node.max < expected:
                raise ValueError(f'stale max at {node!r}')
            return left + (1 if node.color == BLACK else 0)

        _check(self._root)
        count = sum(1 for _ in self._inorder())
        if count != self._size:
            raise ValueError(f'size {self._size} does not match {count} nodes')
        return True


__all__ = ['Interval', 'IntervalTree']
