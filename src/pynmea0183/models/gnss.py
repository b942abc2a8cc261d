"""GNSS fix, satellite and accuracy sentences."""

from __future__ import annotations

import datetime as dt
from typing import Any, ClassVar

from pynmea0183._constants import MAX_SATELLITES_IN_VIEW
from pynmea0183.models._base import NmeaEnum, NmeaRecord
from pynmea0183.state.events import SentenceModule
from pynmea0183.state.sections import GnssState, SatelliteInView, SectionModel


class FixQuality(NmeaEnum):
    """GGA fix quality indicator."""

    UNKNOWN = -1
    INVALID = 0
    GPS = 1
    DGPS = 2
    PPS = 3
    RTK = 4
    FLOAT_RTK = 5
    ESTIMATED = 6
    MANUAL = 7
    SIMULATION = 8


class FixMode(NmeaEnum):
    """GSA fix type."""

    UNKNOWN = -1
    NO_FIX = 1
    FIX_2D = 2
    FIX_3D = 3


class GgaSentence(NmeaRecord):
    """Global positioning system fix data."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.GNSS

    utc_time: dt.time | None = None
    latitude: float | None = None
    longitude: float | None = None
    fix_quality: FixQuality | None = None
    satellites_used: int | None = None
    hdop: float | None = None
    altitude: float | None = None
    geoid_separation: float | None = None
    dgps_age: float | None = None
    dgps_station_id: int | None = None


class RmcSentence(NmeaRecord):
    """Recommended minimum specific GNSS data."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.GNSS

    utc_time: dt.time | None = None
    fix_valid: bool | None = None
    latitude: float | None = None
    longitude: float | None = None
    speed_knots: float | None = None
    speed_kmh: float | None = None
    speed_mps: float | None = None
    course_true: float | None = None
    utc_date: dt.date | None = None
    magnetic_variation: float | None = None
    mode_indicator: str | None = None


class GllSentence(NmeaRecord):
    """Geographic position, latitude/longitude."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.GNSS

    latitude: float | None = None
    longitude: float | None = None
    utc_time: dt.time | None = None
    fix_valid: bool | None = None
    mode_indicator: str | None = None


class GnsSentence(NmeaRecord):
    """GNSS fix data for combined constellations."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.GNSS

    utc_time: dt.time | None = None
    latitude: float | None = None
    longitude: float | None = None
    mode_indicator: str | None = None
    satellites_used: int | None = None
    hdop: float | None = None
    altitude: float | None = None
    geoid_separation: float | None = None
    dgps_age: float | None = None
    dgps_station_id: int | None = None
    navigational_status: str | None = None


class GsaSentence(NmeaRecord):
    """GNSS DOP and active satellites."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.GNSS

    selection_mode: str | None = None
    fix_mode: FixMode | None = None
    satellite_prns: tuple[int, ...] = ()
    pdop: float | None = None
    hdop: float | None = None
    vdop: float | None = None
    system_id: int | None = None

    def state_patch(self, current: SectionModel) -> dict[str, Any]:
        patch = super().state_patch(current)
        if self.satellite_prns:
            patch["satellites_used"] = len(self.satellite_prns)
        return patch


class GsvSentence(NmeaRecord):
    """GNSS satellites in view, one message of a numbered sequence."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.GNSS

    total_messages: int | None = None
    message_number: int | None = None
    satellites_in_view: int | None = None
    satellites: tuple[SatelliteInView, ...] = ()

    def state_patch(self, current: SectionModel) -> dict[str, Any]:
        """Accumulate satellites across the messages of one cycle.

        Message 1 starts a new list; later messages append to what the
        previous messages stored, up to the fixed capacity.
        """
        patch: dict[str, Any] = {}
        if self.satellites_in_view is not None:
            patch["satellites_in_view"] = self.satellites_in_view
        if self.message_number is None:
            return patch
        previous: tuple[SatelliteInView, ...] = ()
        if self.message_number > 1 and isinstance(current, GnssState):
            previous = current.satellites
        patch["satellites"] = (previous + self.satellites)[:MAX_SATELLITES_IN_VIEW]
        return patch


class GstSentence(NmeaRecord):
    """GNSS pseudorange error statistics."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.GNSS

    utc_time: dt.time | None = None
    rms_range_residual: float | None = None
    std_semi_major: float | None = None
    std_semi_minor: float | None = None
    orientation_semi_major: float | None = None
    std_latitude: float | None = None
    std_longitude: float | None = None
    std_altitude: float | None = None
