"""Alarm sentences."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class AlrSentence(NmeaRecord):
    """Set alarm state."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SAFETY

    alarm_time: dt.time | None = None
    alarm_id: int | None = None
    alarm_active: bool | None = None
    alarm_acknowledged: bool | None = None
    alarm_text: str | None = None


class AckSentence(NmeaRecord):
    """Acknowledge alarm."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SAFETY

    acknowledged_alarm_id: int | None = None
