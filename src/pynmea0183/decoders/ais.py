"""Decoders for the AIS module."""

from __future__ import annotations

from pynmea0183._constants import MAX_PAYLOAD_LENGTH
from pynmea0183.decoders._fields import FieldReader
from pynmea0183.models.ais import VdmSentence, VdoSentence, payload_message_type


def _envelope(fields: FieldReader) -> dict[str, object]:
    payload = fields.text(5, MAX_PAYLOAD_LENGTH)
    return {
        "talker": fields.talker,
        "fragment_count": fields.integer(1),
        "fragment_number": fields.integer(2),
        "sequential_id": fields.integer(3),
        "channel": fields.char(4),
        "payload": payload,
        "fill_bits": fields.integer(6),
        "message_type": payload_message_type(payload or ""),
    }


def decode_vdm(fields: FieldReader) -> VdmSentence:
    """``!AIVDM,x,x,x,a,s--s,x*hh``"""
    return VdmSentence.model_validate(_envelope(fields))


def decode_vdo(fields: FieldReader) -> VdoSentence:
    return VdoSentence.model_validate(_envelope(fields))
