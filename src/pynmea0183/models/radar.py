"""Radar target tracking sentences."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class TtmSentence(NmeaRecord):
    """Tracked target message."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.RADAR

    target_number: int | None = None
    target_distance: float | None = None
    target_bearing: float | None = None
    bearing_reference: str | None = None
    target_speed: float | None = None
    target_course: float | None = None
    course_reference: str | None = None
    cpa_distance: float | None = None
    cpa_time_minutes: float | None = None
    distance_units: str | None = None
    target_name: str | None = None
    target_status: str | None = None
    target_valid: bool | None = None
    target_time: dt.time | None = None
    acquisition_type: str | None = None


class TllSentence(NmeaRecord):
    """Target latitude and longitude."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.RADAR

    target_number: int | None = None
    target_latitude: float | None = None
    target_longitude: float | None = None
    target_name: str | None = None
    target_time: dt.time | None = None
    target_status: str | None = None
    target_valid: bool | None = None
