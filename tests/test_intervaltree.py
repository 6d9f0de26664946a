import random

import pytest

from flatcad.box import Box
from flatcad.intervaltree import Interval, IntervalTree


class Item:
    """something with a box, compared by identity"""

    def __init__(self, box, name=None):
        self.box = box
        self.name = name

    def __repr__(self):
        return 'Item({!r})'.format(self.name)


def randomBox(rng):
    x = rng.uniform(0, 100)
    y = rng.uniform(0, 100)
    return Box(x, y, x + rng.uniform(0, 15), y + rng.uniform(0, 15))


def bruteForce(items, query):
    return {id(item) for item in items if item.box.intersect(query)}


class TestIntervalTree:

    def test_empty_tree(self):
        tree = IntervalTree()
        assert tree.isEmpty()
        assert len(tree) == 0
        assert list(tree.search(Box(0, 0, 1, 1))) == []
        assert tree.validate()

    def test_plain_intervals(self):
        tree = IntervalTree()
        for low, high in [(1, 3), (2, 8), (5, 6), (10, 12), (7, 9)]:
            tree.insert(Interval(low, high))
        found = sorted((i.low, i.high) for i in tree.search(Interval(6, 7)))
        assert found == [(2, 8), (5, 6), (7, 9)]
        assert list(tree.search(Interval(13, 20))) == []
        assert tree.validate()

    def test_bad_interval(self):
        with pytest.raises(ValueError):
            Interval(5, 1)

    def test_duplicate_keys(self):
        tree = IntervalTree()
        box = Box(0, 0, 1, 1)
        a = Item(box, 'a')
        b = Item(box, 'b')
        tree.insert(box, a)
        tree.insert(box, b)
        assert len(tree) == 2
        assert tree.remove(box, a)
        assert len(tree) == 1
        assert list(tree.search(Box(0.5, 0.5, 2, 2))) == [b]
        assert tree.exist(box, b)
        assert not tree.exist(box, a)

    def test_remove_absent(self):
        tree = IntervalTree()
        item = Item(Box(0, 0, 1, 1))
        tree.insert(item.box, item)
        assert not tree.remove(Box(5, 5, 6, 6), item)
        assert not tree.remove(item.box, Item(item.box))
        assert len(tree) == 1

    def test_inorder_is_sorted(self):
        rng = random.Random(3)
        tree = IntervalTree()
        for _ in range(100):
            box = randomBox(rng)
            tree.insert(box, Item(box))
        keys = list(tree.keys())
        for k1, k2 in zip(keys, keys[1:]):
            assert (k1.low, k1.high) <= (k2.low, k2.high)

    def test_height_is_logarithmic(self):
        tree = IntervalTree()
        # sorted insertion would degenerate an unbalanced tree
        for i in range(1024):
            box = Box(i, 0, i + 1, 1)
            tree.insert(box, Item(box))
        assert tree.height() <= 2 * 11
        assert tree.validate()

    def test_search_matches_brute_force(self):
        rng = random.Random(1234)
        tree = IntervalTree()
        live = []
        for step in range(600):
            if live and rng.random() < 0.35:
                item = live.pop(rng.randrange(len(live)))
                assert tree.remove(item.box, item)
            else:
                item = Item(randomBox(rng), step)
                tree.insert(item.box, item)
                live.append(item)

            if step % 25 == 0:
                assert tree.validate()
                assert len(tree) == len(live)
                for _ in range(10):
                    query = randomBox(rng)
                    found = {id(v) for v in tree.search(query)}
                    assert found == bruteForce(live, query)

        assert tree.validate()

    def test_search_is_lazy(self):
        tree = IntervalTree()
        for i in range(10):
            box = Box(i, 0, i + 1, 1)
            tree.insert(box, Item(box, i))
        results = tree.search(Box(0, 0, 100, 1))
        first = next(results)
        assert first.name == 0

    def test_clear(self):
        tree = IntervalTree()
        box = Box(0, 0, 1, 1)
        tree.insert(box, Item(box))
        tree.clear()
        assert len(tree) == 0
        assert list(tree.values()) == []
