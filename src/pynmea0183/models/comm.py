"""Text transmission sentences."""

from __future__ import annotations

from typing import ClassVar

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import SentenceModule


class TxtSentence(NmeaRecord):
    SECTION: ClassVar[SentenceModule] = SentenceModule.COMM

    text_total: int | None = None
    text_number: int | None = None
    text_id: int | None = None
    text: str | None = None
