"""Decoders for the GNSS module."""

from __future__ import annotations

from pynmea0183._constants import KNOTS_TO_KMH, KNOTS_TO_MPS, MAX_SATELLITES_USED, SATELLITES_PER_GSV
from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.gnss import (
    FixMode,
    FixQuality,
    GgaSentence,
    GllSentence,
    GnsSentence,
    GsaSentence,
    GstSentence,
    GsvSentence,
    RmcSentence,
)
from pynmea0183.state.sections import SatelliteInView

# GSA carries active satellite PRNs in fields 3..14.
_GSA_FIRST_PRN = 3


def decode_gga(fields: FieldReader) -> GgaSentence:
    """``$--GGA,hhmmss.ss,llll.ll,a,yyyyy.yy,a,x,xx,x.x,x.x,M,x.x,M,x.x,xxxx*hh``"""
    quality = fields.integer(6)
    return GgaSentence(
        talker=fields.talker,
        utc_time=fields.time(1),
        latitude=fields.coordinate(2, latitude=True),
        longitude=fields.coordinate(4, latitude=False),
        fix_quality=FixQuality(quality) if quality is not None else None,
        satellites_used=fields.integer(7),
        hdop=fields.decimal(8),
        altitude=fields.decimal(9),
        geoid_separation=fields.decimal(11),
        dgps_age=fields.decimal(13),
        dgps_station_id=fields.integer(14),
    )


def decode_rmc(fields: FieldReader) -> RmcSentence:
    """``$--RMC,hhmmss.ss,A,llll.ll,a,yyyyy.yy,a,x.x,x.x,ddmmyy,x.x,a,m*hh``"""
    speed = fields.decimal(7)
    return RmcSentence(
        talker=fields.talker,
        utc_time=fields.time(1),
        fix_valid=fields.flag(2),
        latitude=fields.coordinate(3, latitude=True),
        longitude=fields.coordinate(5, latitude=False),
        speed_knots=speed,
        speed_kmh=speed * KNOTS_TO_KMH if speed is not None else None,
        speed_mps=speed * KNOTS_TO_MPS if speed is not None else None,
        course_true=fields.decimal(8),
        utc_date=fields.date(9),
        magnetic_variation=fields.signed(10),
        mode_indicator=fields.char(12),
    )


def decode_gll(fields: FieldReader) -> GllSentence:
    return GllSentence(
        talker=fields.talker,
        latitude=fields.coordinate(1, latitude=True),
        longitude=fields.coordinate(3, latitude=False),
        utc_time=fields.time(5),
        fix_valid=fields.flag(6),
        mode_indicator=fields.char(7),
    )


def decode_gns(fields: FieldReader) -> GnsSentence:
    """``$--GNS,hhmmss.ss,llll.ll,a,yyyyy.yy,a,c--c,xx,x.x,x.x,x.x,x.x,x.x,a*hh``

    The mode field holds one indicator per constellation (GPS, GLONASS,
    Galileo, BeiDou).
    """
    return GnsSentence(
        talker=fields.talker,
        utc_time=fields.time(1),
        latitude=fields.coordinate(2, latitude=True),
        longitude=fields.coordinate(4, latitude=False),
        mode_indicator=fields.text(6, 4),
        satellites_used=fields.integer(7),
        hdop=fields.decimal(8),
        altitude=fields.decimal(9),
        geoid_separation=fields.decimal(10),
        dgps_age=fields.decimal(11),
        dgps_station_id=fields.integer(12),
        navigational_status=fields.char(13),
    )


def decode_gsa(fields: FieldReader) -> GsaSentence:
    prns: list[int] = []
    for index in range(_GSA_FIRST_PRN, _GSA_FIRST_PRN + MAX_SATELLITES_USED):
        prn = fields.integer(index)
        if prn is not None:
            prns.append(prn)
    mode = fields.integer(2)
    return GsaSentence(
        talker=fields.talker,
        selection_mode=fields.char(1),
        fix_mode=FixMode(mode) if mode is not None else None,
        satellite_prns=tuple(prns),
        pdop=fields.decimal(15),
        hdop=fields.decimal(16),
        vdop=fields.decimal(17),
        system_id=fields.integer(18),
    )


def decode_gsv(fields: FieldReader) -> GsvSentence:
    """``$--GSV,x,x,xx,xx,xx,xxx,xx,...*hh``, up to four satellites per message."""
    satellites: list[SatelliteInView] = []
    for slot in range(SATELLITES_PER_GSV):
        base = 4 + slot * 4
        prn = fields.integer(base)
        if prn is None:
            continue
        satellites.append(
            SatelliteInView(
                prn=prn,
                elevation=fields.integer(base + 1),
                azimuth=fields.integer(base + 2),
                snr=fields.integer(base + 3),
            )
        )
    return GsvSentence(
        talker=fields.talker,
        total_messages=fields.integer(1),
        message_number=fields.integer(2),
        satellites_in_view=fields.integer(3),
        satellites=tuple(satellites),
    )


def decode_gst(fields: FieldReader) -> GstSentence:
    return GstSentence(
        talker=fields.talker,
        utc_time=fields.time(1),
        rms_range_residual=fields.decimal(2),
        std_semi_major=fields.decimal(3),
        std_semi_minor=fields.decimal(4),
        orientation_semi_major=fields.decimal(5),
        std_latitude=fields.decimal(6),
        std_longitude=fields.decimal(7),
        std_altitude=fields.decimal(8),
    )
