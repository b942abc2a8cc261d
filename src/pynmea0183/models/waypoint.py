"""Waypoint sentences."""

from __future__ import annotations

from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class WplSentence(NmeaRecord):
    """Waypoint location."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.WAYPOINT

    latitude: float | None = None
    longitude: float | None = None
    waypoint_id: str | None = None
