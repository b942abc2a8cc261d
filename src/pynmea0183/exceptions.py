"""Custom exception hierarchy and result codes for pynmea0183.

Every exception carries the numeric :class:`ResultCode` the status-code
entry points (:meth:`NmeaParser.ingest`, :meth:`NmeaParser.read`) return,
plus a coarse :class:`ErrorKind` for callers that only care about the
category of failure.
"""

from __future__ import annotations

import enum


class ResultCode(enum.IntEnum):
    """Status codes returned by the non-raising parser entry points."""

    OK = 0
    NULL_PARAM = -1
    INVALID_CONTEXT = -2
    INVALID_CONFIG = -3
    BUFFER_TOO_SMALL = -4
    INVALID_SENTENCE = -5
    CHECKSUM_FAILED = -6
    UNKNOWN_SENTENCE = -7
    SENTENCE_DISABLED = -8
    MODULE_DISABLED = -9
    TOO_MANY_FIELDS = -10
    TOO_FEW_FIELDS = -11
    PARSE_FAILED = -12
    NO_DATA = -13
    ALREADY_INIT = -14
    NOT_INIT = -15
    TOKENIZE_FAILED = -16


class ErrorKind(enum.StrEnum):
    PARAMETER = "parameter"
    CHECKSUM = "checksum"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"
    BUFFER = "buffer"
    CONFIG = "config"
    STATE = "state"
    UNKNOWN = "unknown"


_RESULT_MESSAGES: dict[ResultCode, str] = {
    ResultCode.OK: "Success",
    ResultCode.NULL_PARAM: "Missing parameter",
    ResultCode.INVALID_CONTEXT: "Invalid parser context",
    ResultCode.INVALID_CONFIG: "Invalid configuration",
    ResultCode.BUFFER_TOO_SMALL: "Output buffer too small",
    ResultCode.INVALID_SENTENCE: "Invalid sentence format",
    ResultCode.CHECKSUM_FAILED: "Checksum validation failed",
    ResultCode.UNKNOWN_SENTENCE: "Unknown sentence type",
    ResultCode.SENTENCE_DISABLED: "Sentence type disabled",
    ResultCode.MODULE_DISABLED: "Module disabled",
    ResultCode.TOO_MANY_FIELDS: "Too many fields in sentence",
    ResultCode.TOO_FEW_FIELDS: "Too few fields in sentence",
    ResultCode.PARSE_FAILED: "Field parsing failed",
    ResultCode.NO_DATA: "No data available",
    ResultCode.ALREADY_INIT: "Already initialized",
    ResultCode.NOT_INIT: "Not initialized",
    ResultCode.TOKENIZE_FAILED: "Tokenization failed",
}


def describe_result(code: int) -> str:
    """Return a human readable message for a result code."""
    try:
        return _RESULT_MESSAGES[ResultCode(code)]
    except ValueError:
        return "Unknown error"


class NmeaError(Exception):
    """Base exception for all pynmea0183 errors."""

    code: ResultCode = ResultCode.INVALID_SENTENCE
    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, *, sentence_id: str = "") -> None:
        self.sentence_id = sentence_id
        super().__init__(message)


class NmeaConfigError(NmeaError):
    """Invalid parser or registry configuration."""

    code = ResultCode.INVALID_CONFIG
    kind = ErrorKind.CONFIG


class NmeaBufferTooSmallError(NmeaError):
    """Caller buffer cannot hold the serialized output."""

    code = ResultCode.BUFFER_TOO_SMALL
    kind = ErrorKind.BUFFER

    def __init__(self, message: str, *, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(message)


class NmeaFrameError(NmeaError):
    """Sentence framing is malformed (prefix, length, checksum trailer)."""

    code = ResultCode.INVALID_SENTENCE
    kind = ErrorKind.SYNTAX


class NmeaChecksumError(NmeaFrameError):
    """Checksum trailer does not match the sentence body."""

    code = ResultCode.CHECKSUM_FAILED
    kind = ErrorKind.CHECKSUM

    def __init__(self, message: str, *, expected: int | None = None, computed: int | None = None) -> None:
        self.expected = expected
        self.computed = computed
        super().__init__(message)


class NmeaTokenizeError(NmeaError):
    """Sentence body could not be split into fields."""

    code = ResultCode.TOKENIZE_FAILED
    kind = ErrorKind.SYNTAX


class NmeaTooManyFieldsError(NmeaTokenizeError):
    """Sentence carries more fields than the configured maximum."""

    code = ResultCode.TOO_MANY_FIELDS

    def __init__(self, message: str, *, max_fields: int) -> None:
        self.max_fields = max_fields
        super().__init__(message)


class NmeaUnknownSentenceError(NmeaError):
    """No decoder is registered for the sentence identifier."""

    code = ResultCode.UNKNOWN_SENTENCE
    kind = ErrorKind.SYNTAX


class NmeaSentenceDisabledError(NmeaError):
    """Sentence identifier is disabled in the parser configuration."""

    code = ResultCode.SENTENCE_DISABLED
    kind = ErrorKind.CONFIG


class NmeaModuleDisabledError(NmeaError):
    """Sentence belongs to a module that is not enabled."""

    code = ResultCode.MODULE_DISABLED
    kind = ErrorKind.CONFIG


class NmeaMissingFieldsError(NmeaError):
    """Sentence has fewer fields than its decoder requires."""

    code = ResultCode.TOO_FEW_FIELDS
    kind = ErrorKind.SYNTAX

    def __init__(self, message: str, *, sentence_id: str = "", expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message, sentence_id=sentence_id)


class NmeaFieldError(NmeaError):
    """A field value could not be converted to its declared type."""

    code = ResultCode.PARSE_FAILED
    kind = ErrorKind.SEMANTIC

    def __init__(self, message: str, *, sentence_id: str = "", index: int | None = None, token: str = "") -> None:
        self.index = index
        self.token = token
        super().__init__(message, sentence_id=sentence_id)
