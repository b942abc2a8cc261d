"""Built-in sentence decoders.

Each decoder is a pure function from a :class:`FieldReader` to a typed
record; it never touches parser state. :data:`DEFAULT_SENTENCES` is the
catalog the default registry is built from.
"""

from __future__ import annotations

from pynmea0183.decoders._fields import FieldReader
from pynmea0183.decoders.ais import decode_vdm, decode_vdo
from pynmea0183.decoders.attitude import decode_hrm, decode_vdr
from pynmea0183.decoders.comm import decode_txt
from pynmea0183.decoders.gnss import (
    decode_gga,
    decode_gll,
    decode_gns,
    decode_gsa,
    decode_gst,
    decode_gsv,
    decode_rmc,
)
from pynmea0183.decoders.heading import decode_hdg, decode_hdt, decode_rot, decode_vtg
from pynmea0183.decoders.misc import decode_xte, decode_zda
from pynmea0183.decoders.navigation import decode_bod, decode_bwc, decode_wpl
from pynmea0183.decoders.radar import decode_tll, decode_ttm
from pynmea0183.decoders.safety import decode_ack, decode_alr
from pynmea0183.decoders.sensor import (
    decode_dbt,
    decode_dpt,
    decode_mtw,
    decode_mwd,
    decode_mwv,
    decode_vhw,
)
from pynmea0183.decoders.system import decode_eve, decode_hbt, decode_hss
from pynmea0183.registry import SentenceDefinition
from pynmea0183.state.events import SentenceModule

_GNSS = SentenceModule.GNSS
_HEADING = SentenceModule.HEADING
_SENSOR = SentenceModule.SENSOR

DEFAULT_SENTENCES: tuple[SentenceDefinition, ...] = (
    SentenceDefinition("GGA", decode_gga, _GNSS, 6, "Global positioning system fix data"),
    SentenceDefinition("RMC", decode_rmc, _GNSS, 7, "Recommended minimum specific GNSS data"),
    SentenceDefinition("GLL", decode_gll, _GNSS, 5, "Geographic position - latitude/longitude"),
    SentenceDefinition("GNS", decode_gns, _GNSS, 6, "GNSS fix data"),
    SentenceDefinition("GSA", decode_gsa, _GNSS, 3, "GNSS DOP and active satellites"),
    SentenceDefinition("GSV", decode_gsv, _GNSS, 4, "GNSS satellites in view"),
    SentenceDefinition("GST", decode_gst, _GNSS, 2, "GNSS pseudorange error statistics"),
    SentenceDefinition("HDG", decode_hdg, _HEADING, 2, "Heading, deviation and variation"),
    SentenceDefinition("HDT", decode_hdt, _HEADING, 2, "Heading - true"),
    SentenceDefinition("ROT", decode_rot, _HEADING, 2, "Rate of turn"),
    SentenceDefinition("VTG", decode_vtg, _HEADING, 2, "Track made good and ground speed"),
    SentenceDefinition("DBT", decode_dbt, _SENSOR, 4, "Depth below transducer"),
    SentenceDefinition("DPT", decode_dpt, _SENSOR, 2, "Depth"),
    SentenceDefinition("MTW", decode_mtw, _SENSOR, 2, "Water temperature"),
    SentenceDefinition("MWV", decode_mwv, _SENSOR, 5, "Wind speed and angle"),
    SentenceDefinition("MWD", decode_mwd, _SENSOR, 6, "Wind direction and speed"),
    SentenceDefinition("VHW", decode_vhw, _SENSOR, 6, "Water speed and heading"),
    SentenceDefinition("TTM", decode_ttm, SentenceModule.RADAR, 4, "Tracked target message"),
    SentenceDefinition("TLL", decode_tll, SentenceModule.RADAR, 6, "Target latitude and longitude"),
    SentenceDefinition("BOD", decode_bod, SentenceModule.NAVIGATION, 5, "Bearing - origin to destination"),
    SentenceDefinition("BWC", decode_bwc, SentenceModule.NAVIGATION, 7, "Bearing and distance to waypoint"),
    SentenceDefinition("WPL", decode_wpl, SentenceModule.WAYPOINT, 6, "Waypoint location"),
    SentenceDefinition("VDM", decode_vdm, SentenceModule.AIS, 7, "AIS VHF data-link message"),
    SentenceDefinition("VDO", decode_vdo, SentenceModule.AIS, 7, "AIS VHF data-link own-vessel report"),
    SentenceDefinition("ALR", decode_alr, SentenceModule.SAFETY, 6, "Set alarm state"),
    SentenceDefinition("ACK", decode_ack, SentenceModule.SAFETY, 2, "Acknowledge alarm"),
    SentenceDefinition("TXT", decode_txt, SentenceModule.COMM, 5, "Text transmission"),
    SentenceDefinition("HBT", decode_hbt, SentenceModule.SYSTEM, 3, "Heartbeat supervision"),
    SentenceDefinition("HSS", decode_hss, SentenceModule.SYSTEM, 4, "Hull stress surveillance"),
    SentenceDefinition("EVE", decode_eve, SentenceModule.SYSTEM, 4, "General event message"),
    SentenceDefinition("HRM", decode_hrm, SentenceModule.ATTITUDE, 6, "Heel angle, roll period and roll amplitude"),
    SentenceDefinition("VDR", decode_vdr, SentenceModule.ATTITUDE, 6, "Set and drift"),
    SentenceDefinition("ZDA", decode_zda, SentenceModule.MISC, 5, "Time and date"),
    SentenceDefinition("XTE", decode_xte, SentenceModule.MISC, 5, "Cross-track error, measured"),
)

__all__ = ["DEFAULT_SENTENCES", "FieldReader"]
