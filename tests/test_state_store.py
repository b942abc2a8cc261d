from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from pynmea0183.state.events import SentenceModule, StateUpdate
from pynmea0183.state.sections import GnssState, HeadingState
from pynmea0183.state.store import StateStore


def _dt() -> datetime:
    return datetime(2026, 1, 1, tzinfo=UTC)


def test_partial_update_does_not_overwrite_with_none() -> None:
    store = StateStore(clock=_dt)

    store.apply(StateUpdate(sentence_id="GGA", talker="GP", section=SentenceModule.GNSS, data={"latitude": 5.0}))
    store.apply(
        StateUpdate(
            sentence_id="GGA",
            talker="GP",
            section=SentenceModule.GNSS,
            # Patches are pruned at the ingestion boundary; missing keys mean "no update".
            data={"longitude": 7.0},
        )
    )

    section = store.get_section(SentenceModule.GNSS)
    assert isinstance(section, GnssState)
    assert section.latitude == 5.0
    assert section.longitude == 7.0


def test_sections_are_independent() -> None:
    store = StateStore()

    store.apply(StateUpdate(sentence_id="HDT", section=SentenceModule.HEADING, data={"heading_true": 90.0}))

    assert store.get_section(SentenceModule.GNSS) == GnssState()
    assert store.get_section(SentenceModule.HEADING) == HeadingState(heading_true=90.0)


def test_meta_tracks_last_sentence() -> None:
    store = StateStore()

    store.apply(
        StateUpdate(
            sentence_id="hdt",
            talker="HE",
            section=SentenceModule.HEADING,
            observed_at=_dt(),
            data={"heading_true": 1.0},
        )
    )
    store.apply(StateUpdate(sentence_id="ROT", talker="HE", section=SentenceModule.HEADING, observed_at=_dt()))

    meta = store.get_meta(SentenceModule.HEADING)
    assert meta.last_sentence == "ROT"
    assert meta.last_talker == "HE"
    assert meta.updated_at == _dt()
    assert meta.update_count == 2
    assert store.populated_sections() == [SentenceModule.HEADING]


def test_snapshot_is_immutable_view() -> None:
    store = StateStore()
    before = store.snapshot()

    store.apply(StateUpdate(sentence_id="HDT", section=SentenceModule.HEADING, data={"heading_true": 45.0}))

    assert before.heading.heading_true is None
    assert store.snapshot().heading.heading_true == 45.0


def test_unknown_fields_rejected() -> None:
    store = StateStore()

    with pytest.raises(KeyError):
        store.apply(StateUpdate(sentence_id="HDT", section=SentenceModule.HEADING, data={"latitude": 1.0}))

    assert store.get_section(SentenceModule.HEADING) == HeadingState()


def test_reset() -> None:
    store = StateStore()
    store.apply(StateUpdate(sentence_id="HDT", section=SentenceModule.HEADING, data={"heading_true": 45.0}))

    store.reset()

    assert store.get_section_dict(SentenceModule.HEADING) == {}
    assert store.get_meta(SentenceModule.HEADING).update_count == 0


def test_update_requires_three_letter_id() -> None:
    with pytest.raises(ValidationError):
        StateUpdate(sentence_id="GPGGA", section=SentenceModule.GNSS)


def test_naive_observed_at_becomes_utc() -> None:
    update = StateUpdate(sentence_id="GGA", section=SentenceModule.GNSS, observed_at=datetime(2026, 1, 1))

    assert update.observed_at.tzinfo is UTC
