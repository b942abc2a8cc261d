from __future__ import annotations

import datetime as dt
import json

import pytest

from pynmea0183 import NmeaParser, ParserConfig
from pynmea0183._codec.checksum import compute_checksum, format_checksum
from pynmea0183.config import OutputMode
from pynmea0183.exceptions import (
    NmeaChecksumError,
    NmeaError,
    NmeaUnknownSentenceError,
    ResultCode,
)
from pynmea0183.output.layout import SNAPSHOT_SIZE, unpack_snapshot
from pynmea0183.state.events import SentenceModule
from pynmea0183.state.sections import NmeaState

GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"


def _frame(body: str, start: str = "$") -> str:
    return f"{start}{body}*{format_checksum(compute_checksum(body))}\r\n"


def _callback_recorder() -> tuple[list[NmeaError], ParserConfig]:
    seen: list[NmeaError] = []
    return seen, ParserConfig(error_callback=seen.append)


class TestIngest:
    def test_gga_updates_gnss_section(self) -> None:
        parser = NmeaParser()

        assert parser.ingest(GGA) == ResultCode.OK

        gnss = parser.get_section(SentenceModule.GNSS)
        assert gnss.utc_time == dt.time(12, 35, 19)
        assert gnss.latitude == pytest.approx(48.1173)
        assert gnss.longitude == pytest.approx(11.516667, abs=1e-6)
        assert gnss.fix_quality == 1
        assert gnss.satellites_used == 8
        assert gnss.altitude == pytest.approx(545.4)

    def test_parse_reports_result(self) -> None:
        result = NmeaParser().parse(GGA)

        assert result.sentence_id == "GGA"
        assert result.talker == "GP"
        assert result.section is SentenceModule.GNSS
        assert "latitude" in result.updated_fields
        assert "dgps_age" not in result.updated_fields
        assert not result.degraded

    def test_bytes_input(self) -> None:
        parser = NmeaParser()

        assert parser.ingest(GGA.encode() + b"\r\n") == ResultCode.OK
        assert parser.state.gnss.satellites_used == 8

    def test_length_limits_input(self) -> None:
        parser = NmeaParser()

        assert parser.ingest(GGA + "trailing garbage", len(GGA)) == ResultCode.OK

    def test_missing_input(self) -> None:
        parser = NmeaParser()

        assert parser.ingest(None) == ResultCode.NULL_PARAM  # type: ignore[arg-type]
        assert parser.ingest(GGA, -1) == ResultCode.NULL_PARAM

    def test_later_sentence_keeps_unreported_fields(self) -> None:
        parser = NmeaParser()
        parser.ingest(GGA)

        assert parser.ingest(_frame("GPGLL,4916.45,N,12311.12,W,225444,A,")) == ResultCode.OK

        gnss = parser.state.gnss
        assert gnss.latitude == pytest.approx(49.274167, abs=1e-6)
        assert gnss.longitude == pytest.approx(-123.185333, abs=1e-6)
        assert gnss.altitude == pytest.approx(545.4)
        assert gnss.fix_valid is True

    def test_encapsulated_ais(self) -> None:
        parser = NmeaParser()

        assert parser.ingest(_frame("AIVDM,1,1,,A,13aG?P0P00PD;88MD5MTDww@2<0L,0", start="!")) == ResultCode.OK

        ais = parser.state.ais
        assert ais.channel == "A"
        assert ais.message_type == 1
        assert ais.own_vessel is False

    def test_meta_tracks_updates(self) -> None:
        received = dt.datetime(2026, 10, 18, 9, 30, tzinfo=dt.UTC)
        parser = NmeaParser(clock=lambda: received)

        parser.ingest(GGA)
        parser.ingest(_frame("GNGGA,123520,4807.038,N,01131.000,E,1,09,0.9,545.4,M,46.9,M,,"))

        meta = parser.get_meta(SentenceModule.GNSS)
        assert meta.last_sentence == "GGA"
        assert meta.last_talker == "GN"
        assert meta.update_count == 2
        assert meta.updated_at == received
        assert parser.get_meta(SentenceModule.AIS).update_count == 0

    def test_gsv_cycle_accumulates_satellites(self) -> None:
        parser = NmeaParser()
        parser.ingest(_frame("GPGSV,2,1,06,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45"))
        parser.ingest(_frame("GPGSV,2,2,06,15,10,100,30,16,20,200,35"))

        gnss = parser.state.gnss
        assert gnss.satellites_in_view == 6
        assert [sat.prn for sat in gnss.satellites] == [1, 2, 12, 14, 15, 16]

        parser.ingest(_frame("GPGSV,1,1,01,07,05,010,20"))

        assert [sat.prn for sat in parser.state.gnss.satellites] == [7]

    def test_radar_target_updates_radar_section(self) -> None:
        parser = NmeaParser()

        assert parser.ingest(_frame("RATTM,01,3.5,45.2,T,12.3,270.0,T,0.5,5.0,N,TARGET1,T,,120530.00,A")) == ResultCode.OK

        radar = parser.state.radar
        assert radar.target_number == 1
        assert radar.target_distance == pytest.approx(3.5)
        assert radar.target_name == "TARGET1"
        assert radar.target_valid is True
        assert parser.get_meta(SentenceModule.RADAR).last_sentence == "TTM"

    def test_reset_clears_state(self) -> None:
        parser = NmeaParser()
        parser.ingest(GGA)

        parser.reset()

        assert parser.state == NmeaState()
        assert parser.get_meta(SentenceModule.GNSS).update_count == 0

    def test_parsers_are_independent(self) -> None:
        first = NmeaParser()
        second = NmeaParser(ParserConfig(output_mode=OutputMode.JSON))

        first.ingest(GGA)

        assert second.state == NmeaState()
        assert first.state.gnss.latitude is not None


class TestRejection:
    @pytest.mark.parametrize(
        ("sentence", "code"),
        [
            pytest.param(_frame("XXZZZ,1,2,3"), ResultCode.UNKNOWN_SENTENCE, id="unknown"),
            pytest.param(_frame("GPGGA,123519,4807.038,N,01131.000"), ResultCode.TOO_FEW_FIELDS, id="too-few"),
            pytest.param(GGA[:-2] + "48", ResultCode.CHECKSUM_FAILED, id="checksum"),
            pytest.param(GGA[:-3], ResultCode.INVALID_SENTENCE, id="no-trailer"),
            pytest.param("$" + "A" * 200, ResultCode.INVALID_SENTENCE, id="too-long"),
            pytest.param("GPGGA,123519*00", ResultCode.INVALID_SENTENCE, id="no-start"),
            pytest.param("", ResultCode.INVALID_SENTENCE, id="empty"),
            pytest.param(_frame("GPGGA,12x519,4807.038,N,01131.000,E,1"), ResultCode.PARSE_FAILED, id="bad-field"),
            pytest.param(_frame("GPGGA" + ",1" * 40), ResultCode.TOO_MANY_FIELDS, id="too-many"),
            pytest.param("$HEHDT,274.07\u00b0,T*00", ResultCode.INVALID_SENTENCE, id="non-ascii"),
            pytest.param(
                _frame("GPGGA,123519,4807.038,N,01131.000,E,1,99999999999999999999,0.9,545.4,M,46.9,M,,"),
                ResultCode.PARSE_FAILED,
                id="integer-overflow",
            ),
        ],
    )
    def test_rejected_sentence_leaves_state_unchanged(self, sentence: str, code: ResultCode) -> None:
        parser = NmeaParser()

        assert parser.ingest(sentence) == code
        assert parser.state == NmeaState()
        assert parser.get_meta(SentenceModule.GNSS).update_count == 0

    def test_parse_raises(self) -> None:
        with pytest.raises(NmeaUnknownSentenceError):
            NmeaParser().parse(_frame("XXZZZ,1,2,3"))

    def test_checksum_can_be_disabled(self) -> None:
        parser = NmeaParser(ParserConfig(validate_checksums=False))

        assert parser.ingest("$HEHDT,274.07,T") == ResultCode.OK
        assert parser.state.heading.heading_true == pytest.approx(274.07)

    def test_disabled_sentence(self) -> None:
        parser = NmeaParser(ParserConfig(disabled_sentences=frozenset({"gga"})))

        assert parser.ingest(GGA) == ResultCode.SENTENCE_DISABLED
        assert not parser.is_sentence_enabled("GGA")
        assert parser.is_sentence_enabled("RMC")

    def test_disabled_module(self) -> None:
        parser = NmeaParser(ParserConfig(enabled_modules=frozenset({SentenceModule.HEADING})))

        assert parser.ingest(GGA) == ResultCode.MODULE_DISABLED
        assert parser.ingest(_frame("HEHDT,274.07,T")) == ResultCode.OK
        assert not parser.is_module_enabled(SentenceModule.GNSS)
        assert not parser.is_sentence_enabled("GGA")

    def test_lenient_fields_degrade(self) -> None:
        parser = NmeaParser(ParserConfig(strict_fields=False))

        result = parser.parse(_frame("GPGGA,123519,48x7.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,"))

        assert result.degraded
        assert result.degraded_fields == (2,)
        assert parser.state.gnss.latitude is None
        assert parser.state.gnss.longitude == pytest.approx(11.516667, abs=1e-6)

    def test_lenient_oversized_integer_is_dropped(self) -> None:
        parser = NmeaParser(ParserConfig(strict_fields=False))

        result = parser.parse(_frame("GPGGA,123519,4807.038,N,01131.000,E,1,99999999999999999999,0.9,545.4,M,46.9,M,,"))

        assert result.degraded_fields == (7,)
        assert parser.state.gnss.satellites_used is None
        assert parser.read(bytearray(SNAPSHOT_SIZE)) == SNAPSHOT_SIZE

    def test_error_callback_receives_error(self) -> None:
        seen, config = _callback_recorder()
        parser = NmeaParser(config)

        parser.ingest(GGA[:-2] + "48")

        assert len(seen) == 1
        assert isinstance(seen[0], NmeaChecksumError)
        assert seen[0].expected == 0x48
        assert seen[0].computed == 0x47

    def test_failing_callback_does_not_change_result(self) -> None:
        def explode(exc: NmeaError) -> None:
            raise RuntimeError("callback failed")

        parser = NmeaParser(ParserConfig(error_callback=explode))

        assert parser.ingest(_frame("XXZZZ,1,2,3")) == ResultCode.UNKNOWN_SENTENCE


class TestRead:
    def test_raw_snapshot(self) -> None:
        parser = NmeaParser()
        parser.ingest(GGA)
        buffer = bytearray(SNAPSHOT_SIZE)

        assert parser.read(buffer) == SNAPSHOT_SIZE
        assert unpack_snapshot(buffer) == parser.state
        assert bytes(buffer) == parser.snapshot()

    def test_buffer_one_byte_short(self) -> None:
        parser = NmeaParser()
        parser.ingest(GGA)
        before = parser.state
        buffer = bytearray(SNAPSHOT_SIZE - 1)

        assert parser.read(buffer) == ResultCode.BUFFER_TOO_SMALL
        assert buffer == bytearray(SNAPSHOT_SIZE - 1)
        assert parser.state == before

    def test_json_output(self) -> None:
        parser = NmeaParser(ParserConfig(output_mode=OutputMode.JSON))
        parser.ingest(GGA)
        buffer = bytearray(8192)

        written = parser.read(buffer)

        assert written > 0
        assert buffer[written] == 0
        document = json.loads(bytes(buffer[:written]))
        assert document["gnss"]["latitude"] == pytest.approx(48.1173)
        assert document["gnss"]["utc_time"] == "12:35:19"
        assert document["heading"]["heading_true"] is None
        assert bytes(buffer[:written]).decode() == parser.to_json()

    def test_unknown_output_mode(self) -> None:
        seen: list[NmeaError] = []
        parser = NmeaParser(ParserConfig(output_mode="xml", error_callback=seen.append))

        assert parser.read(bytearray(SNAPSHOT_SIZE)) == ResultCode.INVALID_CONFIG
        assert len(seen) == 1

    def test_read_is_repeatable(self) -> None:
        parser = NmeaParser()
        parser.ingest(GGA)
        first, second = bytearray(SNAPSHOT_SIZE), bytearray(SNAPSHOT_SIZE)

        parser.read(first)
        parser.read(second)

        assert first == second


def test_context_manager() -> None:
    with NmeaParser() as parser:
        assert parser.ingest(GGA) == ResultCode.OK
