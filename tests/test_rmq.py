import random

import pytest

from kcommon.errors import InvariantViolationError
from kcommon.rmq import RangeMinTree, RangeMinWindow, SlidingWindowMinimum


def test_query_matches_linear_scan():
    rng = random.Random(0)
    for _ in range(50):
        values = [rng.randint(-20, 20) for _ in range(rng.randint(1, 40))]
        tree = RangeMinTree(values)
        for _ in range(30):
            lo = rng.randrange(len(values))
            hi = rng.randint(lo + 1, len(values))
            assert tree.query(lo, hi) == min(values[lo:hi])


def test_update_combines_with_min():
    tree = RangeMinTree([5, 3, 8])
    tree.update(2, 1)
    assert tree.query(0, 3) == 1
    tree.update(2, 7)
    assert tree.query(2, 3) == 1


@pytest.mark.parametrize("lo, hi", [(2, 2), (3, 1), (-1, 2), (0, 5)])
def test_invalid_range(lo, hi):
    tree = RangeMinTree([4, 2, 6, 1])
    with pytest.raises(InvariantViolationError):
        tree.query(lo, hi)


def test_absent_leaves_are_ignored():
    tree = RangeMinTree.empty(8)
    for i, v in enumerate([3, 1, 2]):
        tree.update(i, v)
    assert tree.query(1, 8) == 1
    assert tree.query(2, 5) == 2
    with pytest.raises(InvariantViolationError):
        tree.query(4, 8)


def test_windows_agree():
    rng = random.Random(1)
    values = [rng.randint(0, 9) for _ in range(60)]
    by_tree = RangeMinWindow(RangeMinTree(values))
    by_deque = SlidingWindowMinimum(values)
    for _ in range(200):
        if by_tree.hi < len(values) and (
            by_tree.lo == by_tree.hi or rng.random() < 0.6
        ):
            by_tree.advance()
            by_deque.advance()
        elif by_tree.lo < by_tree.hi:
            by_tree.shrink()
            by_deque.shrink()
        else:
            break
        if by_tree.lo < by_tree.hi:
            expected = min(values[by_tree.lo : by_tree.hi])
            assert by_tree.minimum() == expected
            assert by_deque.minimum() == expected


def test_empty_sliding_window():
    window = SlidingWindowMinimum([1, 2])
    with pytest.raises(InvariantViolationError):
        window.minimum()
