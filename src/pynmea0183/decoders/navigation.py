"""Decoders for the navigation and waypoint modules."""

from __future__ import annotations

from pynmea0183._constants import MAX_ID_LENGTH
from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.navigation import BodSentence, BwcSentence
from pynmea0183.models.waypoint import WplSentence


def decode_bod(fields: FieldReader) -> BodSentence:
    return BodSentence(
        talker=fields.talker,
        bearing_true=fields.decimal(1),
        bearing_magnetic=fields.decimal(3),
        destination_waypoint_id=fields.text(5, MAX_ID_LENGTH),
        origin_waypoint_id=fields.text(6, MAX_ID_LENGTH),
    )


def decode_bwc(fields: FieldReader) -> BwcSentence:
    """``$--BWC,hhmmss.ss,llll.ll,a,yyyyy.yy,a,x.x,T,x.x,M,x.x,N,c--c,a*hh``"""
    return BwcSentence(
        talker=fields.talker,
        fix_time=fields.time(1),
        waypoint_latitude=fields.coordinate(2, latitude=True),
        waypoint_longitude=fields.coordinate(4, latitude=False),
        waypoint_bearing_true=fields.decimal(6),
        waypoint_bearing_magnetic=fields.decimal(8),
        waypoint_distance_nm=fields.decimal(10),
        destination_waypoint_id=fields.text(12, MAX_ID_LENGTH),
        mode_indicator=fields.char(13),
    )


def decode_wpl(fields: FieldReader) -> WplSentence:
    return WplSentence(
        talker=fields.talker,
        latitude=fields.coordinate(1, latitude=True),
        longitude=fields.coordinate(3, latitude=False),
        waypoint_id=fields.text(5, MAX_ID_LENGTH),
    )
