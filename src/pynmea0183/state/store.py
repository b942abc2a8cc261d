"""Deterministic in-memory state store.

This is the only component allowed to merge decoded sentence updates.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pynmea0183.state.events import SentenceModule, StateUpdate
from pynmea0183.state.sections import SECTION_MODELS, NmeaState, SectionMeta, SectionModel


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StateStore:
    """In-memory store for the merged navigation state of one parser.

    This store is deterministic: given the same sequence of
    :class:`StateUpdate`s it produces the same snapshots. Sections are
    immutable models, so a patch is committed by swapping in a new
    section in a single assignment; readers never observe half of a
    sentence.
    """

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._state = NmeaState()
        self._meta: dict[SentenceModule, SectionMeta] = {}

    def apply(self, update: StateUpdate) -> SectionModel:
        """Merge *update* into its section and return the new section.

        Keys in the patch overwrite, keys absent from the patch keep their
        previous value. Patches are pruned at the ingestion boundary, so an
        empty patch leaves the section untouched but still counts as an
        accepted sentence.
        """
        section = update.section
        current = self.get_section(section)
        if update.data:
            unknown = set(update.data) - set(type(current).model_fields)
            if unknown:
                raise KeyError(f"fields not in {section.value} section: {sorted(unknown)}")
            current = current.model_copy(update=update.data)
            self._state = self._state.model_copy(update={section.value: current})

        meta = self._meta.setdefault(section, SectionMeta())
        meta.last_sentence = update.sentence_id
        meta.last_talker = update.talker or None
        meta.updated_at = update.observed_at
        meta.update_count += 1
        return current

    def get_section(self, section: SentenceModule) -> SectionModel:
        model: SectionModel = getattr(self._state, SentenceModule(section).value)
        return model

    def get_meta(self, section: SentenceModule) -> SectionMeta:
        meta = self._meta.get(SentenceModule(section))
        return meta.model_copy() if meta is not None else SectionMeta()

    def get_section_dict(self, section: SentenceModule) -> dict[str, Any]:
        """Return the section as a plain dict, unset fields omitted."""
        return self.get_section(section).model_dump(exclude_none=True, exclude_defaults=True)

    def snapshot(self) -> NmeaState:
        """Return the full state. The returned model is immutable."""
        return self._state

    def populated_sections(self) -> list[SentenceModule]:
        return [section for section in SECTION_MODELS if section in self._meta]

    def now(self) -> datetime:
        return self._clock()

    def reset(self) -> None:
        self._state = NmeaState()
        self._meta.clear()
