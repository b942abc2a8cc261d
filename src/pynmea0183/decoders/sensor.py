"""Decoders for the sensor module."""

from __future__ import annotations

from pynmea0183._constants import KMH_TO_KNOTS, KNOTS_TO_KMH, KNOTS_TO_MPS, MPS_TO_KNOTS
from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.sensor import (
    DbtSentence,
    DptSentence,
    MtwSentence,
    MwdSentence,
    MwvSentence,
    VhwSentence,
)

# Speed unit letter -> factor converting that unit to knots.
_TO_KNOTS = {"N": 1.0, "M": MPS_TO_KNOTS, "K": KMH_TO_KNOTS}


def decode_dbt(fields: FieldReader) -> DbtSentence:
    return DbtSentence(
        talker=fields.talker,
        depth_feet=fields.decimal(1),
        depth_meters=fields.decimal(3),
        depth_fathoms=fields.decimal(5),
    )


def decode_dpt(fields: FieldReader) -> DptSentence:
    return DptSentence(
        talker=fields.talker,
        depth_meters=fields.decimal(1),
        depth_offset=fields.decimal(2),
        depth_max_range=fields.decimal(3),
    )


def decode_mtw(fields: FieldReader) -> MtwSentence:
    return MtwSentence(talker=fields.talker, water_temperature=fields.decimal(1))


def decode_mwv(fields: FieldReader) -> MwvSentence:
    """``$--MWV,x.x,a,x.x,a,A*hh``

    Speed is reported in knots (``N``), m/s (``M``) or km/h (``K``) and
    stored in all three units.
    """
    speed = fields.decimal(3)
    unit = fields.char(4)
    knots: float | None = None
    if speed is not None and unit is not None:
        factor = _TO_KNOTS.get(unit)
        if factor is None:
            fields.reject(4, unit, ValueError("wind speed unit must be N, M or K"))
        else:
            knots = speed * factor
    return MwvSentence(
        talker=fields.talker,
        wind_angle=fields.decimal(1),
        wind_reference=fields.char(2),
        wind_speed_knots=knots,
        wind_speed_mps=knots * KNOTS_TO_MPS if knots is not None else None,
        wind_speed_kmh=knots * KNOTS_TO_KMH if knots is not None else None,
        wind_valid=fields.flag(5),
    )


def decode_mwd(fields: FieldReader) -> MwdSentence:
    return MwdSentence(
        talker=fields.talker,
        wind_direction_true=fields.decimal(1),
        wind_direction_magnetic=fields.decimal(3),
        wind_speed_knots=fields.decimal(5),
        wind_speed_mps=fields.decimal(7),
    )


def decode_vhw(fields: FieldReader) -> VhwSentence:
    return VhwSentence(
        talker=fields.talker,
        water_heading_true=fields.decimal(1),
        water_heading_magnetic=fields.decimal(3),
        water_speed_knots=fields.decimal(5),
        water_speed_kmh=fields.decimal(7),
    )
