"""Decoders for the miscellaneous module."""

from __future__ import annotations

from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.misc import XteSentence, ZdaSentence


def decode_zda(fields: FieldReader) -> ZdaSentence:
    """``$--ZDA,hhmmss.ss,xx,xx,xxxx,xx,xx*hh``"""
    return ZdaSentence(
        talker=fields.talker,
        utc_time=fields.time(1),
        utc_date=fields.calendar_date(2, 3, 4),
        local_zone_hours=fields.integer(5),
        local_zone_minutes=fields.integer(6),
    )


def decode_xte(fields: FieldReader) -> XteSentence:
    """``$--XTE,A,A,x.x,a,N,m*hh``

    Both status flags must be ``A`` for the measurement to be valid.
    """
    status = (fields.flag(1), fields.flag(2))
    valid = None if status == (None, None) else all(flag is not False for flag in status)
    return XteSentence(
        talker=fields.talker,
        xte_valid=valid,
        cross_track_error=fields.decimal(3),
        steer_direction=fields.char(4),
        xte_units=fields.char(5),
        xte_mode=fields.char(6),
    )
