"""
Range minimum structures over the LCP array.

RangeMinTree answers arbitrary half-open queries, SlidingWindowMinimum only
follows a window whose two ends never move backwards. Both can drive the
solver through the same advance / shrink / minimum interface.
"""
from collections import deque

from .errors import InvariantViolationError

# marks a leaf that was never updated, identity of _combine
ABSENT = None


def _combine(a, b):
    if a is ABSENT:
        return b
    if b is ABSENT:
        return a
    return a if a < b else b


class RangeMinTree:
    """
    Compact bottom-up segment tree.
    Leaves live in tree[n:2n], the parent of node i is i >> 1.
    """

    def __init__(self, values):
        values = list(values)
        self.n = len(values)
        self.tree = [ABSENT] * (2 * self.n)
        for i, v in enumerate(values):
            self.update(i, v)

    @classmethod
    def empty(cls, size):
        return cls([ABSENT] * size)

    def __len__(self):
        return self.n

    def update(self, index, value):
        """Combine value into leaf index, O(log(n))"""
        i = index + self.n
        self.tree[i] = _combine(self.tree[i], value)
        while i > 1:
            self.tree[i >> 1] = _combine(self.tree[i], self.tree[i ^ 1])
            i >>= 1

    def query(self, lo, hi):
        """Minimum over [lo, hi), O(log(n))"""
        if not 0 <= lo < hi <= self.n:
            raise InvariantViolationError(
                f"range [{lo}, {hi}) outside of [0, {self.n})"
            )
        res = ABSENT
        lo += self.n
        hi += self.n
        while lo < hi:
            if lo & 1:
                res = _combine(res, self.tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                res = _combine(res, self.tree[hi])
            lo >>= 1
            hi >>= 1
        if res is ABSENT:
            raise InvariantViolationError("query only covered absent leaves")
        return res


class RangeMinWindow:
    """Window [lo, hi) over a RangeMinTree"""

    def __init__(self, tree, start=0):
        self.tree = tree
        self.lo = self.hi = start

    def advance(self):
        self.hi += 1

    def shrink(self):
        self.lo += 1

    def minimum(self):
        return self.tree.query(self.lo, self.hi)


class SlidingWindowMinimum:
    """
    Window [lo, hi) over values, kept as a deque of indices
    whose values are increasing.
    """

    def __init__(self, values, start=0):
        if values is None:
            raise InvariantViolationError("values must not be None")
        self.values = values
        self.lo = self.hi = start
        self.deque = deque()

    def advance(self):
        while self.deque and self.values[self.deque[-1]] > self.values[self.hi]:
            self.deque.pop()
        self.deque.append(self.hi)
        self.hi += 1

    def shrink(self):
        self.lo += 1
        while self.deque and self.deque[0] < self.lo:
            self.deque.popleft()

    def minimum(self):
        if self.lo >= self.hi:
            raise InvariantViolationError(
                f"empty window [{self.lo}, {self.hi})"
            )
        return self.values[self.deque[0]]
