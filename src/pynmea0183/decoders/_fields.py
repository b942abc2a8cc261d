"""Typed access to the tokens of one sentence."""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Callable
from typing import TypeVar

from pynmea0183.exceptions import NmeaFieldError
from pynmea0183.ingestion.normalize import (
    parse_coordinate,
    parse_date,
    parse_decimal,
    parse_integer,
    parse_time,
)

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class FieldReader:
    """Read converted values out of a token sequence.

    Index 0 is the address field, so data fields start at 1. A missing or
    empty token reads as ``None``; the caller's state keeps its previous
    value for that field.

    A non-empty token that fails conversion raises :class:`NmeaFieldError`
    when *strict* is set. Otherwise the value reads as ``None`` and its
    index is recorded in :attr:`degraded`.
    """

    def __init__(self, tokens: tuple[str, ...], *, sentence_id: str = "", talker: str = "", strict: bool = True) -> None:
        self.tokens = tokens
        self.sentence_id = sentence_id
        self.talker = talker
        self.strict = strict
        self.degraded: list[int] = []

    def __len__(self) -> int:
        return len(self.tokens)

    def raw(self, index: int) -> str:
        if 0 <= index < len(self.tokens):
            return self.tokens[index].strip()
        return ""

    def has(self, index: int) -> bool:
        return bool(self.raw(index))

    def reject(self, index: int, token: str, exc: Exception) -> None:
        if self.strict:
            raise NmeaFieldError(
                f"{self.sentence_id} field {index}: {exc}",
                sentence_id=self.sentence_id,
                index=index,
                token=token,
            ) from exc
        _logger.debug("Dropping %s field %d (%r): %s", self.sentence_id, index, token, exc)
        self.degraded.append(index)

    def _convert(self, index: int, parse: Callable[[str], T]) -> T | None:
        token = self.raw(index)
        if not token:
            return None
        try:
            return parse(token)
        except ValueError as exc:
            self.reject(index, token, exc)
            return None

    def decimal(self, index: int) -> float | None:
        return self._convert(index, parse_decimal)

    def integer(self, index: int) -> int | None:
        return self._convert(index, parse_integer)

    def time(self, index: int) -> dt.time | None:
        return self._convert(index, parse_time)

    def date(self, index: int) -> dt.date | None:
        return self._convert(index, parse_date)

    def text(self, index: int, max_length: int) -> str | None:
        token = self.raw(index)
        if not token:
            return None
        if len(token) > max_length:
            self.reject(index, token, ValueError(f"longer than {max_length} characters"))
            return token[:max_length]
        return token

    def char(self, index: int) -> str | None:
        """Single character flag, upper-cased (``A``/``V``, ``N``/``S``...)."""
        value = self.text(index, 1)
        return value.upper() if value is not None else None

    def flag(self, index: int, true: str = "A") -> bool | None:
        value = self.char(index)
        if value is None:
            return None
        return value == true

    def signed(self, index: int, *, positive: str = "E", negative: str = "W") -> float | None:
        """Read a magnitude at *index* signed by the direction letter at ``index + 1``.

        An empty direction leaves the magnitude positive.
        """
        value = self.decimal(index)
        if value is None:
            return None
        direction = self.raw(index + 1).upper()
        if direction in ("", positive):
            return value
        if direction == negative:
            return -value
        self.reject(index + 1, direction, ValueError(f"expected {positive} or {negative}"))
        return None

    def calendar_date(self, day: int, month: int, year: int) -> dt.date | None:
        """Combine separate day, month and four digit year fields."""
        parts = (self.integer(day), self.integer(month), self.integer(year))
        if any(part is None for part in parts):
            return None
        day_value, month_value, year_value = parts
        try:
            return dt.date(year_value, month_value, day_value)  # type: ignore[arg-type]
        except ValueError as exc:
            self.reject(day, self.raw(day), exc)
            return None

    def coordinate(self, index: int, *, latitude: bool) -> float | None:
        """Read a coordinate at *index* with its hemisphere at ``index + 1``."""
        token = self.raw(index)
        if not token:
            return None
        hemisphere = self.raw(index + 1)
        try:
            return parse_coordinate(token, hemisphere, latitude=latitude)
        except ValueError as exc:
            self.reject(index, token, exc)
            return None
