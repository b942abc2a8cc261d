"""Decoders for the safety module."""

from __future__ import annotations

from pynmea0183._constants import MAX_TEXT_LENGTH
from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.safety import AckSentence, AlrSentence


def decode_alr(fields: FieldReader) -> AlrSentence:
    """``$--ALR,hhmmss.ss,xxx,A,A,c--c*hh``"""
    return AlrSentence(
        talker=fields.talker,
        alarm_time=fields.time(1),
        alarm_id=fields.integer(2),
        alarm_active=fields.flag(3),
        alarm_acknowledged=fields.flag(4),
        alarm_text=fields.text(5, MAX_TEXT_LENGTH),
    )


def decode_ack(fields: FieldReader) -> AckSentence:
    return AckSentence(talker=fields.talker, acknowledged_alarm_id=fields.integer(1))
