"""Typed records for decoded sentences."""

from pynmea0183.models._base import NmeaEnum, NmeaRecord
from pynmea0183.models.ais import VdmSentence, VdoSentence, payload_message_type
from pynmea0183.models.attitude import HrmSentence, VdrSentence
from pynmea0183.models.comm import TxtSentence
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
from pynmea0183.models.heading import HdgSentence, HdtSentence, RotSentence, VtgSentence
from pynmea0183.models.misc import XteSentence, ZdaSentence
from pynmea0183.models.navigation import BodSentence, BwcSentence
from pynmea0183.models.radar import TllSentence, TtmSentence
from pynmea0183.models.safety import AckSentence, AlrSentence
from pynmea0183.models.sensor import (
    DbtSentence,
    DptSentence,
    MtwSentence,
    MwdSentence,
    MwvSentence,
    VhwSentence,
)
from pynmea0183.models.system import EveSentence, HbtSentence, HssSentence
from pynmea0183.models.waypoint import WplSentence

__all__ = [
    "AckSentence",
    "AlrSentence",
    "BodSentence",
    "BwcSentence",
    "DbtSentence",
    "DptSentence",
    "EveSentence",
    "FixMode",
    "FixQuality",
    "GgaSentence",
    "GllSentence",
    "GnsSentence",
    "GsaSentence",
    "GstSentence",
    "GsvSentence",
    "HbtSentence",
    "HdgSentence",
    "HdtSentence",
    "HrmSentence",
    "HssSentence",
    "MtwSentence",
    "MwdSentence",
    "MwvSentence",
    "NmeaEnum",
    "NmeaRecord",
    "RmcSentence",
    "RotSentence",
    "TllSentence",
    "TtmSentence",
    "TxtSentence",
    "VdmSentence",
    "VdoSentence",
    "VdrSentence",
    "VhwSentence",
    "VtgSentence",
    "WplSentence",
    "XteSentence",
    "ZdaSentence",
    "payload_message_type",
]
