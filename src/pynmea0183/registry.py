"""Sentence identifier -> decoder dispatch.

The registry is an open-addressed hash table with linear probing, sized
from its vocabulary and read-only once built. Lookups for identifiers
outside the vocabulary (including the empty string) return ``None``.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING

from pynmea0183.exceptions import NmeaConfigError
from pynmea0183.state.events import SentenceModule

if TYPE_CHECKING:
    from pynmea0183.decoders._fields import FieldReader
    from pynmea0183.models._base import NmeaRecord

    Decoder = Callable[[FieldReader], NmeaRecord]

_logger = logging.getLogger(__name__)

MAX_LOAD_FACTOR = 0.5


@dataclasses.dataclass(frozen=True)
class SentenceDefinition:
    """One decode table entry.

    Parameters
    ----------
    sentence_id : str
        Three character sentence identifier without talker (``"GGA"``).
    decoder : callable
        Pure function turning a :class:`FieldReader` into a record.
    module : SentenceModule
        State section the decoded record updates.
    min_fields : int
        Minimum token count, address field included.
    description : str
        Human readable sentence name.
    """

    sentence_id: str
    decoder: Decoder
    module: SentenceModule
    min_fields: int
    description: str = ""

    def __post_init__(self) -> None:
        if len(self.sentence_id) != 3 or not self.sentence_id.isalnum():
            raise NmeaConfigError(f"sentence id must be three characters: {self.sentence_id!r}")
        if self.min_fields < 1:
            raise NmeaConfigError(f"{self.sentence_id}: min_fields must be positive")


def sentence_hash(sentence_id: str) -> int:
    """Order sensitive string hash (``h = h * 31 + c``, 32 bit)."""
    value = 0
    for char in sentence_id:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    return value


def _capacity_for(count: int) -> int:
    capacity = 8
    while count > capacity * MAX_LOAD_FACTOR:
        capacity *= 2
    return capacity


class DecoderRegistry:
    """Immutable sentence identifier index."""

    def __init__(self, definitions: Iterable[SentenceDefinition], *, capacity: int | None = None) -> None:
        entries = list(definitions)
        if capacity is None:
            capacity = _capacity_for(len(entries))
        elif capacity < 1 or len(entries) > capacity * MAX_LOAD_FACTOR:
            raise NmeaConfigError(
                f"capacity {capacity} too small for {len(entries)} sentences (load factor {MAX_LOAD_FACTOR})"
            )

        self._capacity = capacity
        self._slots: list[SentenceDefinition | None] = [None] * capacity
        for definition in entries:
            self._insert(definition)
        self._count = len(entries)
        _logger.debug("Built decoder registry: %d sentences, %d slots", self._count, capacity)

    def _insert(self, definition: SentenceDefinition) -> None:
        index = sentence_hash(definition.sentence_id) % self._capacity
        for _ in range(self._capacity):
            occupant = self._slots[index]
            if occupant is None:
                self._slots[index] = definition
                return
            if occupant.sentence_id == definition.sentence_id:
                raise NmeaConfigError(f"duplicate sentence id: {definition.sentence_id}")
            index = (index + 1) % self._capacity
        raise NmeaConfigError("decoder registry is full")

    def lookup(self, sentence_id: str) -> SentenceDefinition | None:
        """Return the definition for *sentence_id*, or ``None`` if it is not registered."""
        if not sentence_id:
            return None
        index = sentence_hash(sentence_id) % self._capacity
        for _ in range(self._capacity):
            occupant = self._slots[index]
            if occupant is None:
                return None
            if occupant.sentence_id == sentence_id:
                return occupant
            index = (index + 1) % self._capacity
        return None

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._count / self._capacity

    def sentence_ids(self) -> list[str]:
        return sorted(definition.sentence_id for definition in self)

    def __contains__(self, sentence_id: object) -> bool:
        return isinstance(sentence_id, str) and self.lookup(sentence_id) is not None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[SentenceDefinition]:
        return (slot for slot in self._slots if slot is not None)


_default_registry: DecoderRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> DecoderRegistry:
    """Return the registry of built-in decoders, building it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                # Imported lazily: the catalog imports SentenceDefinition from here.
                from pynmea0183.decoders import DEFAULT_SENTENCES

                _default_registry = DecoderRegistry(DEFAULT_SENTENCES)
    return _default_registry
