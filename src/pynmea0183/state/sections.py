"""Typed state sections.

One model per :class:`~pynmea0183.state.events.SentenceModule`. Every field
starts as ``None`` (never received) and is only ever replaced by a value
decoded from a sentence that owns it. Strings and arrays carry an explicit
maximum size so the binary snapshot layout can be derived from the models.
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from pynmea0183._constants import (
    MAX_ID_LENGTH,
    MAX_PAYLOAD_LENGTH,
    MAX_SATELLITES_IN_VIEW,
    MAX_SATELLITES_USED,
    MAX_TEXT_LENGTH,
)
from pynmea0183.state.events import SentenceModule


class SectionModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SatelliteInView(SectionModel):
    """One satellite reported by GSV."""

    prn: int
    elevation: int | None = None
    azimuth: int | None = None
    snr: int | None = None


class GnssState(SectionModel):
    utc_time: dt.time | None = None
    utc_date: dt.date | None = None
    latitude: float | None = None
    longitude: float | None = None
    fix_quality: int | None = None
    fix_valid: bool | None = None
    fix_mode: int | None = None
    selection_mode: str | None = Field(default=None, max_length=1)
    mode_indicator: str | None = Field(default=None, max_length=4)
    satellites_used: int | None = None
    satellite_prns: tuple[int, ...] = Field(default=(), max_length=MAX_SATELLITES_USED)
    pdop: float | None = None
    hdop: float | None = None
    vdop: float | None = None
    altitude: float | None = None
    geoid_separation: float | None = None
    dgps_age: float | None = None
    dgps_station_id: int | None = None
    speed_knots: float | None = None
    speed_kmh: float | None = None
    speed_mps: float | None = None
    course_true: float | None = None
    magnetic_variation: float | None = None
    satellites_in_view: int | None = None
    satellites: tuple[SatelliteInView, ...] = Field(default=(), max_length=MAX_SATELLITES_IN_VIEW)
    rms_range_residual: float | None = None
    std_semi_major: float | None = None
    std_semi_minor: float | None = None
    orientation_semi_major: float | None = None
    std_latitude: float | None = None
    std_longitude: float | None = None
    std_altitude: float | None = None


class HeadingState(SectionModel):
    heading_true: float | None = None
    heading_magnetic: float | None = None
    magnetic_deviation: float | None = None
    magnetic_variation: float | None = None
    rate_of_turn: float | None = None
    rate_of_turn_valid: bool | None = None
    track_true: float | None = None
    track_magnetic: float | None = None
    ground_speed_knots: float | None = None
    ground_speed_kmh: float | None = None
    mode_indicator: str | None = Field(default=None, max_length=1)


class SensorState(SectionModel):
    depth_feet: float | None = None
    depth_meters: float | None = None
    depth_fathoms: float | None = None
    depth_offset: float | None = None
    depth_max_range: float | None = None
    water_temperature: float | None = None
    wind_angle: float | None = None
    wind_reference: str | None = Field(default=None, max_length=1)
    wind_speed_knots: float | None = None
    wind_speed_mps: float | None = None
    wind_speed_kmh: float | None = None
    wind_valid: bool | None = None
    wind_direction_true: float | None = None
    wind_direction_magnetic: float | None = None
    water_heading_true: float | None = None
    water_heading_magnetic: float | None = None
    water_speed_knots: float | None = None
    water_speed_kmh: float | None = None


class NavigationState(SectionModel):
    bearing_true: float | None = None
    bearing_magnetic: float | None = None
    origin_waypoint_id: str | None = Field(default=None, max_length=MAX_ID_LENGTH)
    destination_waypoint_id: str | None = Field(default=None, max_length=MAX_ID_LENGTH)
    fix_time: dt.time | None = None
    waypoint_latitude: float | None = None
    waypoint_longitude: float | None = None
    waypoint_bearing_true: float | None = None
    waypoint_bearing_magnetic: float | None = None
    waypoint_distance_nm: float | None = None
    mode_indicator: str | None = Field(default=None, max_length=1)


class WaypointState(SectionModel):
    waypoint_id: str | None = Field(default=None, max_length=MAX_ID_LENGTH)
    latitude: float | None = None
    longitude: float | None = None


class AisState(SectionModel):
    fragment_count: int | None = None
    fragment_number: int | None = None
    sequential_id: int | None = None
    channel: str | None = Field(default=None, max_length=1)
    payload: str | None = Field(default=None, max_length=MAX_PAYLOAD_LENGTH)
    fill_bits: int | None = None
    message_type: int | None = None
    own_vessel: bool | None = None


class RadarState(SectionModel):
    """Most recently reported tracked target."""

    target_number: int | None = None
    target_name: str | None = Field(default=None, max_length=MAX_ID_LENGTH)
    target_distance: float | None = None
    target_bearing: float | None = None
    bearing_reference: str | None = Field(default=None, max_length=1)
    target_speed: float | None = None
    target_course: float | None = None
    course_reference: str | None = Field(default=None, max_length=1)
    cpa_distance: float | None = None
    cpa_time_minutes: float | None = None
    distance_units: str | None = Field(default=None, max_length=1)
    target_status: str | None = Field(default=None, max_length=1)
    target_valid: bool | None = None
    target_latitude: float | None = None
    target_longitude: float | None = None
    target_time: dt.time | None = None
    acquisition_type: str | None = Field(default=None, max_length=1)


class SafetyState(SectionModel):
    alarm_time: dt.time | None = None
    alarm_id: int | None = None
    alarm_active: bool | None = None
    alarm_acknowledged: bool | None = None
    alarm_text: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH)
    acknowledged_alarm_id: int | None = None


class CommState(SectionModel):
    text_total: int | None = None
    text_number: int | None = None
    text_id: int | None = None
    text: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH)


class SystemState(SectionModel):
    heartbeat_interval: float | None = None
    heartbeat_status: str | None = Field(default=None, max_length=1)
    heartbeat_sequence_id: int | None = None
    heartbeat_valid: bool | None = None
    hull_stress_point: str | None = Field(default=None, max_length=MAX_ID_LENGTH)
    hull_stress_value: float | None = None
    hull_stress_valid: bool | None = None
    event_time: dt.time | None = None
    event_tag: str | None = Field(default=None, max_length=MAX_ID_LENGTH)
    event_description: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH)


class AttitudeState(SectionModel):
    """Vessel motion: heel and roll (HRM), set and drift (VDR)."""

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
    current_direction_true: float | None = None
    current_direction_magnetic: float | None = None
    current_speed_knots: float | None = None


class MiscState(SectionModel):
    utc_time: dt.time | None = None
    utc_date: dt.date | None = None
    local_zone_hours: int | None = None
    local_zone_minutes: int | None = None
    xte_valid: bool | None = None
    cross_track_error: float | None = None
    steer_direction: str | None = Field(default=None, max_length=1)
    xte_mode: str | None = Field(default=None, max_length=1)
    xte_units: str | None = Field(default=None, max_length=1)


SECTION_MODELS: dict[SentenceModule, type[SectionModel]] = {
    SentenceModule.GNSS: GnssState,
    SentenceModule.AIS: AisState,
    SentenceModule.NAVIGATION: NavigationState,
    SentenceModule.WAYPOINT: WaypointState,
    SentenceModule.HEADING: HeadingState,
    SentenceModule.SENSOR: SensorState,
    SentenceModule.RADAR: RadarState,
    SentenceModule.SAFETY: SafetyState,
    SentenceModule.COMM: CommState,
    SentenceModule.SYSTEM: SystemState,
    SentenceModule.ATTITUDE: AttitudeState,
    SentenceModule.MISC: MiscState,
}


class SectionMeta(BaseModel):
    """Bookkeeping kept next to each section."""

    model_config = ConfigDict(extra="forbid")

    last_sentence: str | None = None
    last_talker: str | None = None
    updated_at: dt.datetime | None = None
    update_count: int = 0


class NmeaState(SectionModel):
    """Aggregate of all sections, in fixed order."""

    gnss: GnssState = Field(default_factory=GnssState)
    ais: AisState = Field(default_factory=AisState)
    navigation: NavigationState = Field(default_factory=NavigationState)
    waypoint: WaypointState = Field(default_factory=WaypointState)
    heading: HeadingState = Field(default_factory=HeadingState)
    sensor: SensorState = Field(default_factory=SensorState)
    radar: RadarState = Field(default_factory=RadarState)
    safety: SafetyState = Field(default_factory=SafetyState)
    comm: CommState = Field(default_factory=CommState)
    system: SystemState = Field(default_factory=SystemState)
    attitude: AttitudeState = Field(default_factory=AttitudeState)
    misc: MiscState = Field(default_factory=MiscState)
