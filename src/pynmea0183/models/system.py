"""System supervision sentences."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class HbtSentence(NmeaRecord):
    """Heartbeat supervision."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SYSTEM

    heartbeat_interval: float | None = None
    heartbeat_status: str | None = None
    heartbeat_sequence_id: int | None = None
    heartbeat_valid: bool | None = None


class HssSentence(NmeaRecord):
    """Hull stress surveillance."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SYSTEM

    hull_stress_point: str | None = None
    hull_stress_value: float | None = None
    hull_stress_valid: bool | None = None


class EveSentence(NmeaRecord):
    """General event message."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.SYSTEM

    event_time: dt.time | None = None
    event_tag: str | None = None
    event_description: str | None = None
