"""Decoders for the attitude module."""

from __future__ import annotations

from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.attitude import HrmSentence, VdrSentence


def decode_hrm(fields: FieldReader) -> HrmSentence:
    """``$--HRM,x.x,x.x,x.x,x.x,A,x.x,x.x,hhmmss.ss,xx,xx*hh``

    Heel angle is positive to starboard.
    """
    return HrmSentence(
        talker=fields.talker,
        heel_angle=fields.decimal(1),
        roll_period=fields.decimal(2),
        roll_amplitude_port=fields.decimal(3),
        roll_amplitude_starboard=fields.decimal(4),
        roll_valid=fields.flag(5),
        roll_peak_port=fields.decimal(6),
        roll_peak_starboard=fields.decimal(7),
        peak_reset_time=fields.time(8),
        peak_reset_day=fields.integer(9),
        peak_reset_month=fields.integer(10),
    )


def decode_vdr(fields: FieldReader) -> VdrSentence:
    return VdrSentence(
        talker=fields.talker,
        current_direction_true=fields.decimal(1),
        current_direction_magnetic=fields.decimal(3),
        current_speed_knots=fields.decimal(5),
    )
