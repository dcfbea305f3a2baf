"""
Suffix array and LCP array construction over integer texts.
"""
from itertools import zip_longest, islice
from typing import List, NamedTuple

from .errors import InvalidArgumentError


class SuffixArray(NamedTuple):
    sa: List[int]
    lcp: List[int]


def to_int_keys(l):
    """
    l: iterable of keys
    returns: a list with integer keys
    """
    seen = set()
    ls = []
    for e in l:
        if not e in seen:
            ls.append(e)
            seen.add(e)
    ls.sort()
    index = {v: i for i, v in enumerate(ls)}
    return [index[v] for v in l]


def suffix_array(text, shift=0):
    """
    suffix array of text by prefix doubling
    O(n * log(n)^2)

    text: sequence of integers, all >= shift
    """
    n = len(text)
    if n == 0:
        return []
    rank = [c - shift for c in text]
    order = list(range(n))
    pos = 1
    while pos < n:
        # a missing second half is -1, below every real rank
        triples = sorted(
            (a, b, i)
            for i, (a, b) in enumerate(
                zip_longest(rank, islice(rank, pos, None), fillvalue=-1)
            )
        )
        new_rank = [0] * n
        r = 0
        for prev, cur in zip(triples, islice(triples, 1, None)):
            if prev[0] != cur[0] or prev[1] != cur[1]:
                r += 1
            new_rank[cur[2]] = r
        rank = new_rank
        order = [i for _, _, i in triples]
        if r == n - 1:
            break
        pos <<= 1
    return order


def inverse_array(l):
    n = len(l)
    ans = [0] * n
    for i in range(n):
        ans[l[i]] = i
    return ans


def kasai(text, sa):
    """
    constructs the lcp array
    O(n)

    lcp[i] is the longest common prefix of the suffixes sa[i-1] and sa[i],
    lcp[0] is 0
    """
    n = len(text)
    lcp = [0] * n
    inv = inverse_array(sa)
    k = 0
    for i in range(n):
        if inv[i] == 0:
            # nothing sorts below suffix i, so k is already 0
            continue
        j = sa[inv[i] - 1]
        while i + k < n and j + k < n and text[i + k] == text[j + k]:
            k += 1
        lcp[inv[i]] = k
        if k:
            k -= 1
    return lcp


def build_suffix_array(text, shift, alphabet_size) -> SuffixArray:
    """
    text: integers in [shift, shift + alphabet_size)
    returns: the suffix array and the lcp array of text
    """
    if text is None or len(text) == 0:
        raise InvalidArgumentError("text must not be empty")
    if alphabet_size <= 0:
        raise InvalidArgumentError(
            f"alphabet size must be positive, got {alphabet_size}"
        )
    for i, c in enumerate(text):
        if not shift <= c < shift + alphabet_size:
            raise InvalidArgumentError(
                f"text[{i}] = {c} outside of [{shift}, {shift + alphabet_size})"
            )
    sa = suffix_array(text, shift)
    return SuffixArray(sa, kasai(text, sa))
