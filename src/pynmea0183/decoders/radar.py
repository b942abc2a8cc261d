"""Decoders for the radar module."""

from __future__ import annotations

from pynmea0183._constants import MAX_ID_LENGTH
from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.radar import TllSentence, TtmSentence

# Target status letters; ``Q`` (query) leaves validity unknown.
_TARGET_VALID = {"T": True, "L": False}


def decode_ttm(fields: FieldReader) -> TtmSentence:
    """``$--TTM,xx,x.x,x.x,a,x.x,x.x,a,x.x,x.x,a,c--c,a,a,hhmmss.ss,a*hh``"""
    status = fields.char(12)
    return TtmSentence(
        talker=fields.talker,
        target_number=fields.integer(1),
        target_distance=fields.decimal(2),
        target_bearing=fields.decimal(3),
        bearing_reference=fields.char(4),
        target_speed=fields.decimal(5),
        target_course=fields.decimal(6),
        course_reference=fields.char(7),
        cpa_distance=fields.decimal(8),
        cpa_time_minutes=fields.decimal(9),
        distance_units=fields.char(10),
        target_name=fields.text(11, MAX_ID_LENGTH),
        target_status=status,
        target_valid=_TARGET_VALID.get(status or ""),
        target_time=fields.time(14),
        acquisition_type=fields.char(15),
    )


def decode_tll(fields: FieldReader) -> TllSentence:
    """``$--TLL,xx,llll.ll,a,yyyyy.yy,a,c--c,hhmmss.ss,a,a*hh``"""
    status = fields.char(8)
    return TllSentence(
        talker=fields.talker,
        target_number=fields.integer(1),
        target_latitude=fields.coordinate(2, latitude=True),
        target_longitude=fields.coordinate(4, latitude=False),
        target_name=fields.text(6, MAX_ID_LENGTH),
        target_time=fields.time(7),
        target_status=status,
        target_valid=_TARGET_VALID.get(status or ""),
    )
