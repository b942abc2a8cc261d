"""NMEA 0183 frame checksum.

The checksum is the XOR of every character between the start delimiter
(``$`` or ``!``) and the ``*`` that introduces the two hex digit trailer.
"""

from __future__ import annotations

from pynmea0183._constants import CHECKSUM_DELIMITER, ENCAPSULATED_START, SENTENCE_START

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def strip_terminator(sentence: str) -> str:
    """Return *sentence* without its trailing CR/LF."""
    return sentence.rstrip("\r\n")


def _body(sentence: str) -> str:
    text = strip_terminator(sentence)
    if text[:1] in (SENTENCE_START, ENCAPSULATED_START):
        text = text[1:]
    star = text.rfind(CHECKSUM_DELIMITER)
    if star >= 0:
        text = text[:star]
    return text


def compute_checksum(sentence: str) -> int:
    """XOR all body characters of *sentence*.

    Works with or without the ``$``/``!`` prefix and the ``*hh`` trailer.
    """
    value = 0
    for char in _body(sentence):
        value ^= ord(char)
    return value & 0xFF


def format_checksum(value: int) -> str:
    return f"{value & 0xFF:02X}"


def extract_checksum(sentence: str) -> int | None:
    """Return the transmitted checksum, or ``None`` when the trailer is missing or malformed."""
    text = strip_terminator(sentence)
    star = text.rfind(CHECKSUM_DELIMITER)
    if star < 0:
        return None
    digits = text[star + 1 : star + 3]
    if len(digits) != 2 or not set(digits) <= _HEX_DIGITS:
        return None
    return int(digits, 16)


def validate_checksum(sentence: str) -> bool:
    """Return ``True`` when the ``*hh`` trailer matches the computed XOR.

    Hex digits are accepted in either case. A sentence without a
    well-formed trailer never validates.
    """
    expected = extract_checksum(sentence)
    if expected is None:
        return False
    return compute_checksum(sentence) == expected
