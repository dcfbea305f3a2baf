import warnings
from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import InvalidArgumentError, InvariantViolationError


@dataclass(frozen=True)
class GeneralizedText:
    """
    All the strings concatenated into one integer text.

    Sentinels are in [0, num_sentinels), characters are shifted
    into [num_sentinels, alphabet_size).
    """

    text: Tuple[int, ...]
    owner: Tuple[int, ...]
    num_sentinels: int
    shift: int
    alphabet_size: int
    min_code: int
    max_code: int

    def __len__(self):
        return len(self.text)

    def is_sentinel(self, pos):
        return self.text[pos] < self.num_sentinels

    def decode(self, start, length):
        """Original characters of text[start:start + length]"""
        return "".join(chr(c - self.shift) for c in self.text[start : start + length])


def build_generalized_text(strings: Sequence[str]) -> GeneralizedText:
    """
    Concatenate strings, each one followed by its own sentinel,
    and record which string every position comes from.
    """
    if strings is None or len(strings) < 2:
        raise InvalidArgumentError("at least 2 strings are required")
    for i, s in enumerate(strings):
        if not isinstance(s, str):
            raise InvalidArgumentError(f"strings[{i}] is not a str: {s!r}")

    num_sentinels = len(strings)
    codes = [ord(c) for s in strings for c in s]
    if codes:
        min_code, max_code = min(codes), max(codes)
    else:
        warnings.warn("all strings are empty, the text only holds sentinels")
        min_code = max_code = 0
    shift = num_sentinels - min_code
    top = num_sentinels + max_code - min_code

    text = []
    owner = []
    for i, s in enumerate(strings):
        for c in s:
            v = ord(c) + shift
            if not num_sentinels <= v <= top:
                raise InvariantViolationError(
                    f"character {v} outside of [{num_sentinels}, {top}]"
                )
            text.append(v)
            owner.append(i)
        if not 0 <= i < num_sentinels:
            raise InvariantViolationError(
                f"sentinel {i} outside of [0, {num_sentinels})"
            )
        text.append(i)
        owner.append(i)

    return GeneralizedText(
        text=tuple(text),
        owner=tuple(owner),
        num_sentinels=num_sentinels,
        shift=shift,
        alphabet_size=top + 1,
        min_code=min_code,
        max_code=max_code,
    )
