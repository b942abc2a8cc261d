"""Decoders for the communication module."""

from __future__ import annotations

from pynmea0183._constants import MAX_TEXT_LENGTH
from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.comm import TxtSentence


def decode_txt(fields: FieldReader) -> TxtSentence:
    """``$--TXT,xx,xx,xx,c--c*hh``"""
    return TxtSentence(
        talker=fields.talker,
        text_total=fields.integer(1),
        text_number=fields.integer(2),
        text_id=fields.integer(3),
        text=fields.text(4, MAX_TEXT_LENGTH),
    )
