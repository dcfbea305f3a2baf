import pytest

from kcommon.errors import InvalidArgumentError
from kcommon.generalized import build_generalized_text


def test_layout():
    gtext = build_generalized_text(["ab", "b"])
    # a -> 2, b -> 3, sentinels 0 and 1
    assert gtext.text == (2, 3, 0, 3, 1)
    assert gtext.owner == (0, 0, 0, 1, 1)
    assert gtext.num_sentinels == 2
    assert gtext.shift == 2 - ord("a")
    assert gtext.alphabet_size == 4


def test_sentinels_below_characters():
    strings = ["TAAAAT", "ATAAAAT", "TATA", "ATA", "AAT", "TTTT", "TT"]
    gtext = build_generalized_text(strings)
    assert len(gtext) == sum(map(len, strings)) + len(strings)
    sentinels = [c for c in gtext.text if c < gtext.num_sentinels]
    assert sentinels == list(range(len(strings)))
    for pos in range(len(gtext)):
        if not gtext.is_sentinel(pos):
            assert gtext.num_sentinels <= gtext.text[pos] < gtext.alphabet_size


def test_decode():
    gtext = build_generalized_text(["hello", "yellow"])
    assert gtext.decode(1, 4) == "ello"
    assert gtext.decode(6, 6) == "yellow"


def test_empty_strings():
    gtext = build_generalized_text(["", "xy", ""])
    assert gtext.text == (0, 3, 4, 1, 2)
    assert gtext.owner == (0, 1, 1, 1, 2)
    assert (gtext.min_code, gtext.max_code) == (ord("x"), ord("y"))


def test_only_empty_strings():
    with pytest.warns(UserWarning):
        gtext = build_generalized_text(["", ""])
    assert gtext.text == (0, 1)


@pytest.mark.parametrize("strings", [None, [], ["alone"], ["a", 3]])
def test_invalid_arguments(strings):
    with pytest.raises(InvalidArgumentError):
        build_generalized_text(strings)
