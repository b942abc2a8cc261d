"""Depth, water and wind sensor sentences."""

from __future__ import annotations

from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class DbtSentence(NmeaRecord):
    """Depth below transducer in feet, metres and fathoms."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SENSOR

    depth_feet: float | None = None
    depth_meters: float | None = None
    depth_fathoms: float | None = None


class DptSentence(NmeaRecord):
    """Depth in metres with transducer offset and maximum range."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SENSOR

    depth_meters: float | None = None
    depth_offset: float | None = None
    depth_max_range: float | None = None


class MtwSentence(NmeaRecord):
    SECTION: ClassVar[SentenceModule] = SentenceModule.SENSOR

    water_temperature: float | None = None


class MwvSentence(NmeaRecord):
    """Wind speed and angle, relative (``R``) or theoretical (``T``)."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SENSOR

    wind_angle: float | None = None
    wind_reference: str | None = None
    wind_speed_knots: float | None = None
    wind_speed_mps: float | None = None
    wind_speed_kmh: float | None = None
    wind_valid: bool | None = None


class MwdSentence(NmeaRecord):
    """Wind direction and speed over ground."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SENSOR

    wind_direction_true: float | None = None
    wind_direction_magnetic: float | None = None
    wind_speed_knots: float | None = None
    wind_speed_mps: float | None = None


class VhwSentence(NmeaRecord):
    """Water speed and heading."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SENSOR

    water_heading_true: float | None = None
    water_heading_magnetic: float | None = None
    water_speed_knots: float | None = None
    water_speed_kmh: float | None = None
