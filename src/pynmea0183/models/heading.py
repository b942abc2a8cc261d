"""Heading, rate of turn and track sentences."""

from __future__ import annotations

from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class HdgSentence(NmeaRecord):
    """Heading, deviation and variation from a magnetic sensor."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.HEADING

    heading_magnetic: float | None = None
    magnetic_deviation: float | None = None
    magnetic_variation: float | None = None


class HdtSentence(NmeaRecord):
    SECTION: ClassVar[SentenceModule] = SentenceModule.HEADING

    heading_true: float | None = None


class RotSentence(NmeaRecord):
    """Rate of turn in degrees per minute, negative to port."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.HEADING

    rate_of_turn: float | None = None
    rate_of_turn_valid: bool | None = None


class VtgSentence(NmeaRecord):
    """Track made good and ground speed."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.HEADING

    track_true: float | None = None
    track_magnetic: float | None = None
    ground_speed_knots: float | None = None
    ground_speed_kmh: float | None = None
    mode_indicator: str | None = None
