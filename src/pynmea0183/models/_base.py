"""Base model and enum for decoded sentence records.

Every sentence record inherits from :class:`NmeaRecord` which provides:

* frozen, validated fields where ``None`` means "field empty in the
  sentence";
* a ``SECTION`` class variable naming the state section the record
  updates;
* :meth:`NmeaRecord.state_patch`, the hook that turns a record into the
  pruned patch the state store merges.

Coded fields use :class:`NmeaEnum`, which adds an ``UNKNOWN`` member at
``-1`` and a ``_missing_`` hook that returns ``UNKNOWN`` for any value
without a mapped member.
"""

from __future__ import annotations

import enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from pynmea0183.ingestion.normalize import prune_patch
from pynmea0183.state.events import SentenceModule
from pynmea0183.state.sections import SectionModel


class NmeaEnum(enum.IntEnum):
    """Base for coded sentence fields.

    Every subclass **must** define ``UNKNOWN = -1``.
    """

    @classmethod
    def _missing_(cls, value: object) -> NmeaEnum:
        if hasattr(cls, "UNKNOWN"):
            unknown: NmeaEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class NmeaRecord(BaseModel):
    """Base for decoded sentence records."""

    SECTION: ClassVar[SentenceModule]

    model_config = ConfigDict(frozen=True, extra="forbid")

    talker: str = ""
    """Talker identifier the sentence arrived with (``"GP"``, ``"P"``...)."""

    def state_patch(self, current: SectionModel) -> dict[str, Any]:
        """Return the fields this record contributes to *current*.

        The default is every non-empty record field that the section
        also declares. Records whose state depends on what is already
        stored (multi-message sequences) override this.
        """
        patch: dict[str, Any] = prune_patch(self.model_dump(exclude={"talker"}))
        section_fields = type(current).model_fields
        return {key: value for key, value in patch.items() if key in section_fields}
