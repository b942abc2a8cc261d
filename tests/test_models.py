"""Tests for the sentence records and their state patches."""

from __future__ import annotations

import datetime as dt

from pynmea0183.models.gnss import FixMode, FixQuality, GgaSentence, GsaSentence, GsvSentence
from pynmea0183.models.heading import HdtSentence
from pynmea0183.state.events import SentenceModule
from pynmea0183.state.sections import GnssState, SatelliteInView

# ------------------------------------------------------------------
# NmeaEnum
# ------------------------------------------------------------------


class TestNmeaEnum:
    def test_unknown_value_falls_back(self) -> None:
        assert FixQuality(99) == FixQuality.UNKNOWN

    def test_known_value(self) -> None:
        assert FixMode(3) == FixMode.FIX_3D

    def test_all_enums_have_unknown(self) -> None:
        for cls in (FixQuality, FixMode):
            assert cls.UNKNOWN == -1


# ------------------------------------------------------------------
# State patches
# ------------------------------------------------------------------


def _satellites(*prns: int) -> tuple[SatelliteInView, ...]:
    return tuple(SatelliteInView(prn=prn, elevation=10, azimuth=100, snr=30) for prn in prns)


def test_record_sections() -> None:
    assert GgaSentence.SECTION == SentenceModule.GNSS
    assert HdtSentence.SECTION == SentenceModule.HEADING


def test_default_patch_keeps_only_present_section_fields() -> None:
    record = GgaSentence(talker="GP", utc_time=dt.time(12, 0), latitude=1.5, fix_quality=FixQuality.GPS)

    assert record.state_patch(GnssState()) == {
        "utc_time": dt.time(12, 0),
        "latitude": 1.5,
        "fix_quality": 1,
    }


def test_gsa_patch_counts_satellites() -> None:
    record = GsaSentence(fix_mode=FixMode.FIX_2D, satellite_prns=(1, 2, 3), system_id=1)
    patch = record.state_patch(GnssState())

    assert patch["satellites_used"] == 3
    assert patch["satellite_prns"] == (1, 2, 3)
    assert "system_id" not in patch


class TestGsvPatch:
    def test_first_message_replaces(self) -> None:
        current = GnssState(satellites=_satellites(9, 10))
        record = GsvSentence(total_messages=2, message_number=1, satellites_in_view=6, satellites=_satellites(1, 2, 3, 4))

        patch = record.state_patch(current)

        assert [satellite.prn for satellite in patch["satellites"]] == [1, 2, 3, 4]
        assert patch["satellites_in_view"] == 6

    def test_later_message_appends(self) -> None:
        current = GnssState(satellites=_satellites(1, 2, 3, 4))
        record = GsvSentence(total_messages=2, message_number=2, satellites=_satellites(5, 6))

        patch = record.state_patch(current)

        assert [satellite.prn for satellite in patch["satellites"]] == [1, 2, 3, 4, 5, 6]

    def test_capacity_is_capped(self) -> None:
        current = GnssState(satellites=_satellites(*range(1, 33)))
        record = GsvSentence(total_messages=9, message_number=9, satellites=_satellites(40, 41))

        patch = record.state_patch(current)

        assert len(patch["satellites"]) == 32
        assert patch["satellites"][-1].prn == 32

    def test_missing_message_number_leaves_satellites(self) -> None:
        record = GsvSentence(satellites_in_view=3)

        assert record.state_patch(GnssState()) == {"satellites_in_view": 3}
