"""Upside-down rendering of English text."""

from __future__ import annotations

import re

CHAR_MAP: dict[str, str] = {
    " ": " ",
    "a": "ɐ", "b": "q", "c": "ɔ", "d": "p", "e": "ǝ", "f": "ɟ", "g": "ƃ",
    "h": "ɥ", "i": "ᴉ", "j": "ɾ", "k": "ʞ", "l": "l", "m": "ɯ", "n": "u",
    "o": "o", "p": "d", "q": "b", "r": "ɹ", "s": "s", "t": "ʇ", "u": "n",
    "v": "ʌ", "w": "ʍ", "x": "x", "y": "ʎ", "z": "z",
    "A": "∀", "B": "ᗺ", "C": "Ɔ", "D": "ᗡ", "E": "Ǝ", "F": "Ⅎ", "G": "⅁",
    "H": "H", "I": "I", "J": "ſ", "K": "ʞ", "L": "˥", "M": "W", "N": "N",
    "O": "O", "P": "Ԁ", "Q": "Ò", "R": "ᴚ", "S": "S", "T": "⏊", "U": "∩",
    "V": "Λ", "W": "M", "X": "X", "Y": "⅄", "Z": "Z",
}

_ACCEPTED = re.compile(r"[A-Za-z\t\n\f\r\v ]*")


def flip(text: str) -> str:
    """Reverse ``text`` and turn each letter upside down.

    Only ASCII letters and whitespace are accepted; whitespace other than a
    plain space has no upside-down form and becomes a NUL character.
    """
    if not _ACCEPTED.fullmatch(text):
        raise ValueError("only English letters and spaces can be flipped")
    return "".join(CHAR_MAP.get(ch, "\x00") for ch in reversed(text))