"""Decoders for the system module."""

from __future__ import annotations

from pynmea0183._constants import MAX_ID_LENGTH, MAX_TEXT_LENGTH
from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.system import EveSentence, HbtSentence, HssSentence


def decode_hbt(fields: FieldReader) -> HbtSentence:
    """``$--HBT,x.x,A,x*hh``: repeat interval, status, sequential id."""
    return HbtSentence(
        talker=fields.talker,
        heartbeat_interval=fields.decimal(1),
        heartbeat_status=fields.char(2),
        heartbeat_sequence_id=fields.integer(3),
        heartbeat_valid=fields.flag(2),
    )


def decode_hss(fields: FieldReader) -> HssSentence:
    return HssSentence(
        talker=fields.talker,
        hull_stress_point=fields.text(1, MAX_ID_LENGTH),
        hull_stress_value=fields.decimal(2),
        hull_stress_valid=fields.flag(3),
    )


def decode_eve(fields: FieldReader) -> EveSentence:
    return EveSentence(
        talker=fields.talker,
        event_time=fields.time(1),
        event_tag=fields.text(2, MAX_ID_LENGTH),
        event_description=fields.text(3, MAX_TEXT_LENGTH),
    )
