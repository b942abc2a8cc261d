"""Parser context: one sentence in, typed state out.

Each :class:`NmeaParser` owns its configuration and state store; instances
share nothing except the read-only default decoder registry. The pipeline
per sentence is:

length check -> checksum -> tokenize -> talker split -> registry lookup ->
enablement -> field count -> decode -> state patch -> commit.

A failure at any step raises before the store is touched, so a rejected
sentence never leaves a partial update behind.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from types import TracebackType

from pydantic import ValidationError

from pynmea0183._codec.checksum import compute_checksum, extract_checksum, strip_terminator
from pynmea0183._codec.talker import split_sentence_id
from pynmea0183._codec.tokenizer import tokenize
from pynmea0183._constants import ENCAPSULATED_START, SENTENCE_START
from pynmea0183.config import ParserConfig
from pynmea0183.decoders._fields import FieldReader
from pynmea0183.exceptions import (
    NmeaChecksumError,
    NmeaError,
    NmeaFieldError,
    NmeaFrameError,
    NmeaMissingFieldsError,
    NmeaModuleDisabledError,
    NmeaSentenceDisabledError,
    NmeaTokenizeError,
    NmeaUnknownSentenceError,
    ResultCode,
)
from pynmea0183.ingestion.apply import build_update_from_record
from pynmea0183.models._base import NmeaRecord
from pynmea0183.output.layout import pack_snapshot
from pynmea0183.output.render import Buffer, render_json, write_output
from pynmea0183.registry import DecoderRegistry, default_registry
from pynmea0183.state.events import SentenceModule, StateUpdate
from pynmea0183.state.sections import NmeaState, SectionMeta, SectionModel
from pynmea0183.state.store import StateStore

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclasses.dataclass(frozen=True)
class DecodeResult:
    """Outcome of one accepted sentence."""

    sentence_id: str
    talker: str
    section: SentenceModule
    record: NmeaRecord
    updated_fields: tuple[str, ...] = ()
    degraded_fields: tuple[int, ...] = ()

    @property
    def degraded(self) -> bool:
        """``True`` when lenient parsing dropped at least one malformed field."""
        return bool(self.degraded_fields)


class NmeaParser:
    """Decode NMEA 0183 sentences into an owned navigation state.

    Not thread safe: use one parser per thread or guard each call with an
    external lock.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        *,
        registry: DecoderRegistry | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config or ParserConfig()
        self._registry = registry if registry is not None else default_registry()
        self._store = StateStore(clock=clock)

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def registry(self) -> DecoderRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Clear all decoded state."""
        self._store.reset()

    def close(self) -> None:
        """Release parser resources. Nothing is held, so this does nothing."""

    def __enter__(self) -> NmeaParser:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def is_module_enabled(self, module: SentenceModule) -> bool:
        return self._config.is_module_enabled(module)

    def is_sentence_enabled(self, sentence_id: str) -> bool:
        definition = self._registry.lookup(sentence_id.upper())
        if definition is None or not self._config.is_sentence_enabled(definition.sentence_id):
            return False
        return self._config.is_module_enabled(definition.module)

    def _frame(self, sentence: str | bytes) -> str:
        if isinstance(sentence, (bytes, bytearray)):
            try:
                sentence = bytes(sentence).decode("ascii")
            except UnicodeDecodeError as exc:
                raise NmeaFrameError("sentence is not ASCII") from exc
        elif not sentence.isascii():
            raise NmeaFrameError("sentence is not ASCII")
        if not sentence:
            raise NmeaFrameError("empty sentence")
        if len(sentence) > self._config.max_sentence_length:
            raise NmeaFrameError(
                f"sentence length {len(sentence)} exceeds {self._config.max_sentence_length}"
            )
        text = strip_terminator(sentence)
        if text[:1] not in (SENTENCE_START, ENCAPSULATED_START):
            raise NmeaFrameError(f"sentence must start with {SENTENCE_START!r} or {ENCAPSULATED_START!r}")
        return text

    def _check_checksum(self, text: str) -> None:
        expected = extract_checksum(text)
        if expected is None:
            raise NmeaFrameError("missing or malformed checksum trailer")
        computed = compute_checksum(text)
        if computed != expected:
            raise NmeaChecksumError(
                f"checksum mismatch: expected {expected:02X}, computed {computed:02X}",
                expected=expected,
                computed=computed,
            )

    def _decode(self, sentence: str | bytes) -> tuple[DecodeResult, StateUpdate]:
        text = self._frame(sentence)
        if self._config.validate_checksums:
            self._check_checksum(text)

        tokens = tokenize(text, self._config.max_fields)
        if not tokens or not tokens[0]:
            raise NmeaTokenizeError("sentence has no fields")

        talker, sentence_id = split_sentence_id(tokens[0])
        definition = self._registry.lookup(sentence_id)
        if definition is None:
            raise NmeaUnknownSentenceError(f"unknown sentence type: {sentence_id}", sentence_id=sentence_id)
        if not self._config.is_sentence_enabled(sentence_id):
            raise NmeaSentenceDisabledError(f"sentence disabled: {sentence_id}", sentence_id=sentence_id)
        if not self._config.is_module_enabled(definition.module):
            raise NmeaModuleDisabledError(
                f"module disabled: {definition.module.value}", sentence_id=sentence_id
            )
        if len(tokens) < definition.min_fields:
            raise NmeaMissingFieldsError(
                f"{sentence_id} needs {definition.min_fields} fields, got {len(tokens)}",
                sentence_id=sentence_id,
                expected=definition.min_fields,
                actual=len(tokens),
            )

        reader = FieldReader(tokens, sentence_id=sentence_id, talker=talker, strict=self._config.strict_fields)
        try:
            record = definition.decoder(reader)
        except ValidationError as exc:
            raise NmeaFieldError(f"{sentence_id}: {exc.error_count()} invalid field(s)", sentence_id=sentence_id) from exc
        update = build_update_from_record(self._store, sentence_id=sentence_id, record=record)
        result = DecodeResult(
            sentence_id=sentence_id,
            talker=talker,
            section=definition.module,
            record=record,
            updated_fields=tuple(update.data),
            degraded_fields=tuple(reader.degraded),
        )
        return result, update

    def _report(self, exc: NmeaError) -> None:
        _logger.debug("Rejected sentence (%s): %s", exc.code.name, exc)
        callback = self._config.error_callback
        if callback is None:
            return
        try:
            callback(exc)
        except Exception:
            _logger.debug("Error callback failed", exc_info=True)

    def parse(self, sentence: str | bytes) -> DecodeResult:
        """Decode *sentence* and commit it to the state.

        Raises a :class:`~pynmea0183.exceptions.NmeaError` subclass when the
        sentence is rejected; the state is unchanged in that case.
        """
        try:
            result, update = self._decode(sentence)
        except NmeaError as exc:
            self._report(exc)
            raise
        self._store.apply(update)
        return result

    def ingest(self, sentence: str | bytes, length: int | None = None) -> int:
        """Decode *sentence* and return ``0`` or a negative :class:`ResultCode`.

        *length*, when given, limits the input to its first *length*
        characters.
        """
        if sentence is None:
            return ResultCode.NULL_PARAM
        if length is not None:
            if length < 0:
                return ResultCode.NULL_PARAM
            sentence = sentence[:length]
        try:
            self.parse(sentence)
        except NmeaError as exc:
            return exc.code
        return ResultCode.OK

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def read(self, buffer: Buffer) -> int:
        """Write the state into *buffer* in the configured output mode.

        Returns the number of bytes written, or a negative
        :class:`ResultCode`. Reading never modifies the state.
        """
        if buffer is None:
            return ResultCode.NULL_PARAM
        try:
            return write_output(self._store.snapshot(), self._config.output_mode, buffer)
        except NmeaError as exc:
            self._report(exc)
            return exc.code

    @property
    def state(self) -> NmeaState:
        return self._store.snapshot()

    def get_section(self, module: SentenceModule) -> SectionModel:
        return self._store.get_section(module)

    def get_meta(self, module: SentenceModule) -> SectionMeta:
        return self._store.get_meta(module)

    def snapshot(self) -> bytes:
        """Return the raw binary snapshot regardless of the output mode."""
        return pack_snapshot(self._store.snapshot())

    def to_json(self) -> str:
        """Return the JSON rendering regardless of the output mode."""
        return render_json(self._store.snapshot())
