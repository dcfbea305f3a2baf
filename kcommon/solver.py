"""
Longest substrings shared by at least k strings.
The goal of the file is to compute solve_k_common_substring.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import List

from .errors import InvalidArgumentError
from .generalized import build_generalized_text
from .rmq import RangeMinTree, RangeMinWindow, SlidingWindowMinimum
from .stringalg import build_suffix_array

# slack leaves after the lcp values, never updated
LCP_PADDING = 10
DEFAULT_WINDOW = "tree"


def _tree_window(lcp, start):
    tree = RangeMinTree.empty(len(lcp) + LCP_PADDING)
    for i, v in enumerate(lcp):
        tree.update(i, v)
    return RangeMinWindow(tree, start)


WINDOWS = {
    "tree": _tree_window,
    "deque": SlidingWindowMinimum,
}


@dataclass
class KCommonSubstrings:
    length: int = 0
    substrings: List[str] = field(default_factory=list)


def solve_k_common_substring(
    strings, k, window=DEFAULT_WINDOW, trace=None
) -> KCommonSubstrings:
    """
    strings: at least 2 strings
    k: 2 <= k <= len(strings)
    window: how the minimum lcp of the window is tracked, "tree" or "deque"
    trace: called as trace(lo, hi, window_lcp, owners) after every step,
        window_lcp is None while fewer than k strings are in the window

    returns: the length of the longest substrings occurring in at least
        k strings, and these substrings in lexicographic order
    """
    if strings is None or len(strings) < 2:
        raise InvalidArgumentError("at least 2 strings are required")
    if k < 2:
        raise InvalidArgumentError(f"k must be at least 2, got {k}")
    if k > len(strings):
        raise InvalidArgumentError(
            f"k = {k} exceeds the number of strings ({len(strings)})"
        )
    if window not in WINDOWS:
        raise InvalidArgumentError(
            f"unknown window {window!r}, expected one of {sorted(WINDOWS)}"
        )

    gtext = build_generalized_text(strings)
    n = len(gtext)
    lo = hi = gtext.num_sentinels
    if lo >= n:
        # only sentinels, nothing to share
        return KCommonSubstrings()

    sa, lcp = build_suffix_array(gtext.text, 0, gtext.alphabet_size)
    owner = gtext.owner

    # the lcp window is [lo + 1, hi + 1) when the suffix window is [lo, hi]
    lcp_window = WINDOWS[window](lcp, lo + 1)
    colors = Counter([owner[sa[lo]]])

    best = 0
    found = set()
    while True:
        if len(colors) < k:
            if hi == n - 1:
                break
            hi += 1
            colors[owner[sa[hi]]] += 1
            lcp_window.advance()
        else:
            c = owner[sa[lo]]
            colors[c] -= 1
            if not colors[c]:
                del colors[c]
            lo += 1
            lcp_window.shrink()

        window_lcp = None
        if len(colors) >= k:
            window_lcp = lcp_window.minimum()
            if window_lcp > best:
                best = window_lcp
                found.clear()
            if window_lcp == best and best > 0:
                found.add(gtext.decode(sa[lo], window_lcp))
        if trace is not None:
            trace(lo, hi, window_lcp, len(colors))

    return KCommonSubstrings(best, sorted(found))


def longest_common_substring(a, b):
    """Length of the longest common substring of a and b"""
    return solve_k_common_substring([a, b], 2).length
