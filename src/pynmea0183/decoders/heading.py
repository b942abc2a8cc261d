"""Decoders for the heading module."""

from __future__ import annotations

from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.heading import HdgSentence, HdtSentence, RotSentence, VtgSentence


def decode_hdg(fields: FieldReader) -> HdgSentence:
    return HdgSentence(
        talker=fields.talker,
        heading_magnetic=fields.decimal(1),
        magnetic_deviation=fields.signed(2),
        magnetic_variation=fields.signed(4),
    )


def decode_hdt(fields: FieldReader) -> HdtSentence:
    return HdtSentence(talker=fields.talker, heading_true=fields.decimal(1))


def decode_rot(fields: FieldReader) -> RotSentence:
    return RotSentence(
        talker=fields.talker,
        rate_of_turn=fields.decimal(1),
        rate_of_turn_valid=fields.flag(2),
    )


def decode_vtg(fields: FieldReader) -> VtgSentence:
    """``$--VTG,x.x,T,x.x,M,x.x,N,x.x,K,m*hh``"""
    return VtgSentence(
        talker=fields.talker,
        track_true=fields.decimal(1),
        track_magnetic=fields.decimal(3),
        ground_speed_knots=fields.decimal(5),
        ground_speed_kmh=fields.decimal(7),
        mode_indicator=fields.char(9),
    )
