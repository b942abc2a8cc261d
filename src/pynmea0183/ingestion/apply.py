"""Ingestion application helpers.

This module centralizes the step between a decoded record and the store:

- ask the record for its pruned state patch against the current section
- wrap the patch in a :class:`pynmea0183.state.events.StateUpdate`

The parser applies the update only once decoding has fully succeeded.
"""

from __future__ import annotations

from datetime import datetime

from pynmea0183.models._base import NmeaRecord
from pynmea0183.state.events import StateUpdate
from pynmea0183.state.store import StateStore


def build_update_from_record(
    store: StateStore,
    *,
    sentence_id: str,
    record: NmeaRecord,
    observed_at: datetime | None = None,
) -> StateUpdate:
    """Build a state update for *record* without applying it.

    Parameters
    ----------
    store
        Store holding the section the patch is computed against. Only read.
    sentence_id
        Three letter sentence identifier the record was decoded from.
    observed_at
        Receive time. Defaults to the store clock.
    """

    section = record.SECTION
    patch = record.state_patch(store.get_section(section))
    return StateUpdate(
        sentence_id=sentence_id,
        talker=record.talker,
        section=section,
        observed_at=observed_at if observed_at is not None else store.now(),
        data=patch,
    )
