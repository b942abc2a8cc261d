"""AIS encapsulation sentences (``!AIVDM`` / ``!AIVDO``).

Only the envelope is decoded. The six-bit armored payload is kept as
received; its first character gives the ITU-R M.1371 message type.
"""

from __future__ import annotations

from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


def payload_message_type(payload: str) -> int | None:
    """Return the AIS message type encoded in the first payload character."""
    if not payload:
        return None
    value = ord(payload[0]) - 48
    if value > 40:
        value -= 8
    if not 0 <= value < 64:
        return None
    return value


class VdmSentence(NmeaRecord):
    """VHF data-link message received from another vessel."""

    SECTION: ClassVar[SentenceModule] = SentenceModule.AIS

    fragment_count: int | None = None
    fragment_number: int | None = None
    sequential_id: int | None = None
    channel: str | None = None
    payload: str | None = None
    fill_bits: int | None = None
    message_type: int | None = None
    own_vessel: bool = False


class VdoSentence(VdmSentence):
    """VHF data-link report of the own vessel."""

    own_vessel: bool = True
