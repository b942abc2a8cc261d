"""Route navigation sentences."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class BodSentence(NmeaRecord):
    """Bearing from origin waypoint to destination waypoint."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.NAVIGATION

    bearing_true: float | None = None
    bearing_magnetic: float | None = None
    destination_waypoint_id: str | None = None
    origin_waypoint_id: str | None = None


class BwcSentence(NmeaRecord):
    """Bearing and distance to waypoint along the great circle."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.NAVIGATION

    fix_time: dt.time | None = None
    waypoint_latitude: float | None = None
    waypoint_longitude: float | None = None
    waypoint_bearing_true: float | None = None
    waypoint_bearing_magnetic: float | None = None
    waypoint_distance_nm: float | None = None
    destination_waypoint_id: str | None = None
    mode_indicator: str | None = None
