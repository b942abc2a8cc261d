"""Attitude and motion sentences."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class HrmSentence(NmeaRecord):
    """Heel angle, roll period and roll amplitude measurement."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.ATTITUDE

    heel_angle: float | None = None
    roll_period: float | None = None
    roll_amplitude_port: float | None = None
    roll_amplitude_starboard: float | None = None
    roll_valid: bool | None = None
    roll_peak_port: float | None = None
    roll_peak_starboard: float | None = None
    peak_reset_time: dt.time | None = None
    peak_reset_day: int | None = None
    peak_reset_month: int | None = None


class VdrSentence(NmeaRecord):
    """Set and drift."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.ATTITUDE

    current_direction_true: float | None = None
    current_direction_magnetic: float | None = None
    current_speed_knots: float | None = None
