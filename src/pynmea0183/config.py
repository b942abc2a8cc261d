"""Parser configuration for pynmea0183."""

from __future__ import annotations

import dataclasses
import enum
import os
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from pynmea0183._constants import MAX_FIELDS, MAX_SENTENCE_LENGTH
from pynmea0183.exceptions import NmeaConfigError
from pynmea0183.state.events import SentenceModule

if TYPE_CHECKING:
    from pynmea0183.exceptions import NmeaError


class OutputMode(enum.StrEnum):
    RAW = "raw"
    JSON = "json"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _env_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise NmeaConfigError(f"{name} must be an integer: {value!r}") from exc


def _coerce_modules(values: Iterable[SentenceModule | str]) -> frozenset[SentenceModule]:
    modules: set[SentenceModule] = set()
    for value in values:
        try:
            modules.add(SentenceModule(str(value).strip().lower()))
        except ValueError as exc:
            raise NmeaConfigError(f"unknown sentence module: {value!r}") from exc
    return frozenset(modules)


@dataclasses.dataclass(frozen=True)
class ParserConfig:
    """Parser configuration.

    Parameters
    ----------
    output_mode : OutputMode or str
        Representation produced by :meth:`NmeaParser.read`. Defaults to
        the raw binary snapshot. The value is checked when output is
        requested, so an unsupported mode surfaces as a read error.
    validate_checksums : bool
        Reject sentences whose ``*hh`` trailer is missing or does not
        match the XOR of the body.
    strict_fields : bool
        When ``True`` a field that fails numeric or time conversion fails
        the whole sentence. When ``False`` the field is dropped and the
        decode result is flagged as degraded.
    max_sentence_length : int
        Longest accepted sentence in characters, terminator included.
    max_fields : int
        Maximum number of comma separated fields, identifier included.
    enabled_modules : frozenset of SentenceModule or None
        Modules whose sentences are decoded. ``None`` enables all.
    disabled_sentences : frozenset of str
        Three letter sentence identifiers (e.g. ``"GSV"``) to ignore.
    error_callback : callable or None
        Invoked with every :class:`~pynmea0183.exceptions.NmeaError`
        before it is raised or converted into a result code.
    """

    output_mode: OutputMode | str = OutputMode.RAW
    validate_checksums: bool = True
    strict_fields: bool = True
    max_sentence_length: int = MAX_SENTENCE_LENGTH
    max_fields: int = MAX_FIELDS
    enabled_modules: frozenset[SentenceModule] | None = None
    disabled_sentences: frozenset[str] = frozenset()
    error_callback: Callable[[NmeaError], None] | None = None

    def __post_init__(self) -> None:
        if self.max_sentence_length < 6:
            raise NmeaConfigError(f"max_sentence_length too small: {self.max_sentence_length}")
        if self.max_fields < 1:
            raise NmeaConfigError(f"max_fields must be positive: {self.max_fields}")
        if self.enabled_modules is not None:
            object.__setattr__(self, "enabled_modules", _coerce_modules(self.enabled_modules))
        object.__setattr__(
            self,
            "disabled_sentences",
            frozenset(sentence.strip().upper() for sentence in self.disabled_sentences),
        )

    def is_module_enabled(self, module: SentenceModule) -> bool:
        return self.enabled_modules is None or module in self.enabled_modules

    def is_sentence_enabled(self, sentence_id: str) -> bool:
        return sentence_id.upper() not in self.disabled_sentences

    @classmethod
    def from_env(cls, **overrides: Any) -> ParserConfig:
        """Create configuration from environment variables.

        Reads the optional ``NMEA_*`` variables listed below. Explicit
        keyword arguments override environment values.

        ``NMEA_OUTPUT_MODE``, ``NMEA_VALIDATE_CHECKSUMS``,
        ``NMEA_STRICT_FIELDS``, ``NMEA_MAX_SENTENCE_LENGTH``,
        ``NMEA_MAX_FIELDS``, ``NMEA_ENABLED_MODULES`` (comma separated)
        and ``NMEA_DISABLED_SENTENCES`` (comma separated).

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ParserConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        mode_env = env.get("NMEA_OUTPUT_MODE")
        if mode_env is not None:
            config_kwargs["output_mode"] = mode_env.strip().lower()

        config_kwargs["validate_checksums"] = _env_bool(env.get("NMEA_VALIDATE_CHECKSUMS"), True)
        config_kwargs["strict_fields"] = _env_bool(env.get("NMEA_STRICT_FIELDS"), True)

        length_env = env.get("NMEA_MAX_SENTENCE_LENGTH")
        if length_env is not None:
            config_kwargs["max_sentence_length"] = _env_int("NMEA_MAX_SENTENCE_LENGTH", length_env)

        fields_env = env.get("NMEA_MAX_FIELDS")
        if fields_env is not None:
            config_kwargs["max_fields"] = _env_int("NMEA_MAX_FIELDS", fields_env)

        modules = _env_list(env.get("NMEA_ENABLED_MODULES"))
        if modules:
            config_kwargs["enabled_modules"] = frozenset(modules)

        disabled = _env_list(env.get("NMEA_DISABLED_SENTENCES"))
        if disabled:
            config_kwargs["disabled_sentences"] = frozenset(disabled)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
