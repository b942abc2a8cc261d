"""pynmea0183 - NMEA 0183 sentence decoding into typed navigation state."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pynmea0183")
except PackageNotFoundError:
    __version__ = "0+local"
from pynmea0183._codec.checksum import compute_checksum, validate_checksum
from pynmea0183._codec.tokenizer import tokenize
from pynmea0183.config import OutputMode, ParserConfig
from pynmea0183.exceptions import (
    ErrorKind,
    NmeaBufferTooSmallError,
    NmeaChecksumError,
    NmeaConfigError,
    NmeaError,
    NmeaFieldError,
    NmeaFrameError,
    NmeaMissingFieldsError,
    NmeaModuleDisabledError,
    NmeaSentenceDisabledError,
    NmeaTokenizeError,
    NmeaTooManyFieldsError,
    NmeaUnknownSentenceError,
    ResultCode,
    describe_result,
)
from pynmea0183.output import SNAPSHOT_SIZE, pack_snapshot, render_json, unpack_snapshot
from pynmea0183.parser import DecodeResult, NmeaParser
from pynmea0183.registry import DecoderRegistry, SentenceDefinition, default_registry
from pynmea0183.state.events import SentenceModule
from pynmea0183.state.sections import NmeaState

__all__ = [
    "SNAPSHOT_SIZE",
    "DecodeResult",
    "DecoderRegistry",
    "ErrorKind",
    "NmeaBufferTooSmallError",
    "NmeaChecksumError",
    "NmeaConfigError",
    "NmeaError",
    "NmeaFieldError",
    "NmeaFrameError",
    "NmeaMissingFieldsError",
    "NmeaModuleDisabledError",
    "NmeaParser",
    "NmeaSentenceDisabledError",
    "NmeaState",
    "NmeaTokenizeError",
    "NmeaTooManyFieldsError",
    "NmeaUnknownSentenceError",
    "OutputMode",
    "ParserConfig",
    "ResultCode",
    "SentenceDefinition",
    "SentenceModule",
    "__version__",
    "compute_checksum",
    "default_registry",
    "describe_result",
    "pack_snapshot",
    "render_json",
    "tokenize",
    "unpack_snapshot",
    "validate_checksum",
]
