"""Talker identifiers and the talker/sentence-id split."""

from __future__ import annotations

from pynmea0183.exceptions import NmeaFrameError

PROPRIETARY_TALKER = "P"

TALKER_DESCRIPTIONS: dict[str, str] = {
    "AG": "Autopilot - General",
    "AI": "Mobile AIS station",
    "AP": "Autopilot - Magnetic",
    "CD": "Digital Selective Calling (DSC)",
    "CR": "Receiver / Beacon Receiver",
    "CS": "Satellite communications",
    "CT": "Radio-Telephone (MF/HF)",
    "CV": "Radio-Telephone (VHF)",
    "CX": "Scanning Receiver",
    "DF": "Direction Finder",
    "DM": "Speed Log, Water, Magnetic",
    "EC": "ECDIS",
    "EP": "EPIRB",
    "ER": "Engine Room Monitoring Systems",
    "GL": "GLONASS",
    "GN": "Global Navigation Satellite System (GNSS)",
    "GP": "Global Positioning System (GPS)",
    "HC": "Heading - Magnetic Compass",
    "HE": "Heading - North Seeking Gyro",
    "HN": "Heading - Non North Seeking Gyro",
    "II": "Integrated Instrumentation",
    "IN": "Integrated Navigation",
    "LC": "Loran C",
    PROPRIETARY_TALKER: "Proprietary Code",
    "RA": "RADAR and/or ARPA",
    "SD": "Sounder, Depth",
    "SN": "Electronic Positioning System",
    "SS": "Sounder, Scanning",
    "TI": "Turn Rate Indicator",
    "VD": "Velocity Sensor, Doppler",
    "VW": "Speed Log, Water, Mechanical",
    "WI": "Weather Instruments",
    "YX": "Transducer",
    "ZA": "Timekeeper - Atomic Clock",
    "ZC": "Timekeeper - Chronometer",
    "ZQ": "Timekeeper - Quartz",
    "ZV": "Timekeeper - Radio Update",
}


def is_known_talker(talker: str) -> bool:
    return talker in TALKER_DESCRIPTIONS


def describe_talker(talker: str) -> str:
    return TALKER_DESCRIPTIONS.get(talker, "Unknown")


def split_sentence_id(address: str) -> tuple[str, str]:
    """Split the address field (e.g. ``"GPGGA"``) into talker and sentence id.

    Proprietary addresses start with ``P`` followed by a three letter
    manufacturer code (``"PGRMZ"`` -> ``("P", "GRM")``). Standard addresses
    are a two character talker followed by a three character sentence id;
    a six character address keeps its first three sentence characters.

    Raises :class:`NmeaFrameError` for any other shape.
    """
    if len(address) >= 4 and address[0] == PROPRIETARY_TALKER:
        return PROPRIETARY_TALKER, address[1:4]
    if len(address) in (5, 6):
        return address[:2], address[2:5]
    raise NmeaFrameError(f"invalid address field: {address!r}")
