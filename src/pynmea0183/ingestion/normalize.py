"""Normalization helpers.

Centralizes field conversion and placeholder handling. The ``parse_*``
functions are strict and raise :class:`ValueError`; the decoders' field
reader decides whether that fails the sentence or drops the field.
"""

from __future__ import annotations

import datetime as dt
import enum
import math
import re
from typing import Any

from pynmea0183._constants import CENTURY_BASE, MAX_INTEGER, MIN_INTEGER

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_INTEGER_RE = re.compile(r"[+-]?\d+")
_TIME_RE = re.compile(r"(\d{2})(\d{2})(\d{2})(?:\.(\d*))?")
_DATE_RE = re.compile(r"(\d{2})(\d{2})(\d{2})")

LATITUDE_HEMISPHERES = {"N": 1.0, "S": -1.0}
LONGITUDE_HEMISPHERES = {"E": 1.0, "W": -1.0}


def parse_decimal(token: str) -> float:
    """Parse a plain decimal number. Exponents, ``nan`` and ``inf`` are rejected."""
    if not _DECIMAL_RE.fullmatch(token):
        raise ValueError(f"not a decimal number: {token!r}")
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"decimal number out of range: {token!r}")
    return value


def parse_integer(token: str) -> int:
    if not _INTEGER_RE.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    value = int(token)
    if not MIN_INTEGER <= value <= MAX_INTEGER:
        raise ValueError(f"integer out of range: {token!r}")
    return value


def parse_time(token: str) -> dt.time:
    """Parse ``hhmmss`` or ``hhmmss.sss`` into a UTC time of day."""
    match = _TIME_RE.fullmatch(token)
    if match is None:
        raise ValueError(f"not a time of day: {token!r}")
    hours, minutes, seconds = (int(part) for part in match.group(1, 2, 3))
    fraction = match.group(4) or ""
    microseconds = int((fraction + "000000")[:6])
    # dt.time validates the ranges (hour < 24, minute < 60, second < 60).
    return dt.time(hours, minutes, seconds, microseconds, tzinfo=None)


def parse_date(token: str) -> dt.date:
    """Parse ``ddmmyy`` into a date. Two digit years map onto 2000-2099."""
    match = _DATE_RE.fullmatch(token)
    if match is None:
        raise ValueError(f"not a date: {token!r}")
    day, month, year = (int(part) for part in match.group(1, 2, 3))
    return dt.date(CENTURY_BASE + year, month, day)


def parse_coordinate(value: str, hemisphere: str, *, latitude: bool) -> float:
    """Convert ``ddmm.mmmm`` / ``dddmm.mmmm`` plus hemisphere to signed decimal degrees."""
    raw = parse_decimal(value)
    if raw < 0:
        raise ValueError(f"negative coordinate: {value!r}")
    signs = LATITUDE_HEMISPHERES if latitude else LONGITUDE_HEMISPHERES
    sign = signs.get(hemisphere.upper())
    if sign is None:
        raise ValueError(f"invalid hemisphere: {hemisphere!r}")
    degrees = int(raw / 100)
    minutes = raw - degrees * 100
    if minutes >= 60.0:
        raise ValueError(f"minutes out of range: {value!r}")
    result = degrees + minutes / 60.0
    if result > (90.0 if latitude else 180.0):
        raise ValueError(f"coordinate out of range: {value!r}")
    return sign * result


def is_meaningful(value: Any) -> bool:
    """Return True if the value should be included in a state patch.

    ``None``, empty strings and empty containers mean "field absent from
    the sentence" and must never overwrite a previously decoded value.
    """

    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (str, dict, list, tuple)):
        return len(value) > 0
    return True


def prune_patch(data: Any) -> Any:
    """Recursively drop non-meaningful values from a patch structure.

    - Dicts: remove keys with non-meaningful values; recurse into nested dicts.
    - Lists/tuples: prune elements and drop non-meaningful items.
    - Enum members: replaced by their plain value.
    - Other scalars: returned as-is.

    State merging assumes incoming patches are already pruned.
    """

    if isinstance(data, dict):
        pruned: dict[str, Any] = {}
        for key, value in data.items():
            cleaned = prune_patch(value)
            if is_meaningful(cleaned):
                pruned[key] = cleaned
        return pruned

    if isinstance(data, (list, tuple)):
        items = [cleaned for cleaned in (prune_patch(item) for item in data) if is_meaningful(cleaned)]
        return type(data)(items)

    if isinstance(data, enum.Enum):
        return data.value

    return data
