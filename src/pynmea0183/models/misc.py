"""Time/date and cross-track error sentences."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class ZdaSentence(NmeaRecord):
    """UTC time and date with local zone offset."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.MISC

    utc_time: dt.time | None = None
    utc_date: dt.date | None = None
    local_zone_hours: int | None = None
    local_zone_minutes: int | None = None


class XteSentence(NmeaRecord):
    """Measured cross-track error."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.MISC

    xte_valid: bool | None = None
    cross_track_error: float | None = None
    steer_direction: str | None = None
    xte_units: str | None = None
    xte_mode: str | None = None
