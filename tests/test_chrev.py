import pytest

from zbplugin.chrev import CHAR_MAP, flip


def test_flip_sentence():
    assert flip("I love you") == "noʎ ǝʌol I"


def test_flip_single_letter_uses_map():
    assert flip("a") == "ɐ"
    assert flip("T") == "⏊"


def test_flip_reverses_order():
    text = "abc"
    assert flip(text) == "".join(CHAR_MAP[c] for c in "cba")


def test_flip_preserves_length():
    text = "Hello World"
    assert len(flip(text)) == len(text)


def test_flip_empty():
    assert flip("") == ""


def test_other_whitespace_becomes_nul():
    assert flip("a\tb") == "q\x00ɐ"


@pytest.mark.parametrize("bad", ["abc1", "héllo", "a!"])
def test_flip_rejects_other_characters(bad):
    with pytest.raises(ValueError):
        flip(bad)