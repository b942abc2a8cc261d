"""Fixed binary layout of the state snapshot.

The layout is derived from the section models in field declaration order
and packed little-endian without padding:

* header: ``b"NM"``, layout version, section count (``<2sBB``)
* every scalar field: a presence byte followed by its value

  - ``float`` as ``d`` (NaN when absent)
  - ``int`` as ``q``
  - ``bool`` as ``?``
  - ``str`` as a NUL padded ``{max_length}s``
  - time of day as ``I`` milliseconds since midnight
  - date as ``I`` ``YYYYMMDD``

* every array field: a ``B`` element count followed by ``max_length``
  fixed slots (unused slots are zero filled)

Any change to the section models changes the layout; bump
:data:`LAYOUT_VERSION` with it.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import itertools
import math
import struct
import types
import typing
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel

from pynmea0183.exceptions import NmeaFrameError
from pynmea0183.state.sections import NmeaState

LAYOUT_MAGIC = b"NM"
LAYOUT_VERSION = 2
_HEADER_FORMAT = "2sBB"


def _optional_inner(annotation: Any) -> Any:
    """Strip ``None`` from ``X | None`` annotations."""
    origin = typing.get_origin(annotation)
    if origin in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _max_length(metadata: list[Any]) -> int | None:
    for item in metadata:
        length = getattr(item, "max_length", None)
        if length is not None:
            return int(length)
    return None


def _time_to_ms(value: dt.time) -> int:
    return ((value.hour * 60 + value.minute) * 60 + value.second) * 1000 + value.microsecond // 1000


def _ms_to_time(value: int) -> dt.time:
    seconds, millis = divmod(value, 1000)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return dt.time(hour, minute, second, millis * 1000)


@dataclasses.dataclass(frozen=True)
class _Scalar:
    """Presence byte plus one value."""

    kind: type
    width: int = 0

    @property
    def fmt(self) -> str:
        if self.kind is bool:
            return "??"
        if self.kind is int:
            return "?q"
        if self.kind is float:
            return "?d"
        if self.kind is str:
            return f"?{self.width}s"
        return "?I"

    @property
    def arity(self) -> int:
        return 2

    def empty(self) -> tuple[Any, ...]:
        if self.kind is float:
            return (False, math.nan)
        if self.kind is str:
            return (False, b"")
        if self.kind is bool:
            return (False, False)
        return (False, 0)

    def pack(self, value: Any) -> tuple[Any, ...]:
        if value is None:
            return self.empty()
        if self.kind is str:
            return (True, str(value).encode("ascii", errors="replace")[: self.width])
        if self.kind is dt.time:
            return (True, _time_to_ms(value))
        if self.kind is dt.date:
            return (True, value.year * 10000 + value.month * 100 + value.day)
        return (True, self.kind(value))

    def unpack(self, values: Iterator[Any]) -> Any:
        present, raw = next(values), next(values)
        if not present:
            return None
        if self.kind is str:
            return raw.rstrip(b"\0").decode("ascii")
        if self.kind is dt.time:
            return _ms_to_time(raw)
        if self.kind is dt.date:
            return dt.date(raw // 10000, raw // 100 % 100, raw % 100)
        return raw


@dataclasses.dataclass(frozen=True)
class _Record:
    """All fields of a model, in declaration order."""

    model: type[BaseModel]
    fields: tuple[tuple[str, _Scalar | _Array], ...]

    @property
    def fmt(self) -> str:
        return "".join(codec.fmt for _, codec in self.fields)

    @property
    def arity(self) -> int:
        return sum(codec.arity for _, codec in self.fields)

    def empty(self) -> tuple[Any, ...]:
        return tuple(item for _, codec in self.fields for item in codec.empty())

    def pack(self, value: BaseModel | None) -> tuple[Any, ...]:
        if value is None:
            return self.empty()
        return tuple(item for name, codec in self.fields for item in codec.pack(getattr(value, name)))

    def unpack(self, values: Iterator[Any]) -> BaseModel:
        data = {name: codec.unpack(values) for name, codec in self.fields}
        return self.model.model_validate({key: value for key, value in data.items() if value is not None})


@dataclasses.dataclass(frozen=True)
class _Array:
    """Element count plus a fixed number of slots."""

    element: _Scalar | _Record
    capacity: int

    @property
    def fmt(self) -> str:
        return "B" + self.element.fmt * self.capacity

    @property
    def arity(self) -> int:
        return 1 + self.element.arity * self.capacity

    def empty(self) -> tuple[Any, ...]:
        return (0,) + self.element.empty() * self.capacity

    def pack(self, value: tuple[Any, ...]) -> tuple[Any, ...]:
        items = tuple(value)[: self.capacity]
        packed: list[Any] = [len(items)]
        for item in items:
            packed.extend(self.element.pack(item))
        for _ in range(self.capacity - len(items)):
            packed.extend(self.element.empty())
        return tuple(packed)

    def unpack(self, values: Iterator[Any]) -> tuple[Any, ...]:
        count = min(next(values), self.capacity)
        items = tuple(self.element.unpack(values) for _ in range(count))
        # Unused slots are zero filled; skip them without decoding.
        unused = self.element.arity * (self.capacity - count)
        next(itertools.islice(values, unused, unused), None)
        return items


def _codec_for(annotation: Any, metadata: list[Any]) -> _Scalar | _Array | _Record:
    inner = _optional_inner(annotation)
    if typing.get_origin(inner) is tuple:
        element_type = typing.get_args(inner)[0]
        capacity = _max_length(metadata)
        if capacity is None:
            raise TypeError(f"array field {inner} needs a max_length")
        return _Array(element=_codec_for(element_type, []), capacity=capacity)  # type: ignore[arg-type]
    if isinstance(inner, type) and issubclass(inner, BaseModel):
        return _record_for(inner)
    if inner is str:
        width = _max_length(metadata)
        if width is None:
            raise TypeError("string field needs a max_length")
        return _Scalar(str, width)
    if inner in (bool, int, float, dt.time, dt.date):
        return _Scalar(inner)
    raise TypeError(f"no binary encoding for {inner!r}")


def _record_for(model: type[BaseModel]) -> _Record:
    fields = tuple(
        (name, _codec_for(info.annotation, info.metadata))
        for name, info in model.model_fields.items()
    )
    return _Record(model, fields)  # type: ignore[arg-type]


_SECTIONS = tuple((name, _record_for(info.annotation)) for name, info in NmeaState.model_fields.items())  # type: ignore[arg-type]
_STRUCT = struct.Struct("<" + _HEADER_FORMAT + "".join(record.fmt for _, record in _SECTIONS))

SNAPSHOT_SIZE = _STRUCT.size
"""Exact size in bytes of every raw snapshot."""


def pack_snapshot(state: NmeaState) -> bytes:
    """Serialize *state* into exactly :data:`SNAPSHOT_SIZE` bytes."""
    values: list[Any] = [LAYOUT_MAGIC, LAYOUT_VERSION, len(_SECTIONS)]
    for name, record in _SECTIONS:
        values.extend(record.pack(getattr(state, name)))
    return _STRUCT.pack(*values)


def unpack_snapshot(data: bytes | bytearray | memoryview) -> NmeaState:
    """Rebuild the state from a raw snapshot produced by :func:`pack_snapshot`."""
    if len(data) < SNAPSHOT_SIZE:
        raise NmeaFrameError(f"snapshot needs {SNAPSHOT_SIZE} bytes, got {len(data)}")
    values = iter(_STRUCT.unpack_from(data))
    magic, version, count = next(values), next(values), next(values)
    if magic != LAYOUT_MAGIC or version != LAYOUT_VERSION or count != len(_SECTIONS):
        raise NmeaFrameError(f"not a version {LAYOUT_VERSION} snapshot")
    sections = {name: record.unpack(values) for name, record in _SECTIONS}
    return NmeaState.model_validate(sections)
