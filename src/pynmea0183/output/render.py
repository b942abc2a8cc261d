"""Render the state into caller supplied buffers."""

from __future__ import annotations

import json
import logging

from pynmea0183.config import OutputMode
from pynmea0183.exceptions import NmeaBufferTooSmallError, NmeaConfigError
from pynmea0183.output.layout import SNAPSHOT_SIZE, pack_snapshot
from pynmea0183.state.sections import NmeaState

_logger = logging.getLogger(__name__)

Buffer = bytearray | memoryview


def render_json(state: NmeaState) -> str:
    """Return the state as a compact JSON object.

    The schema is fixed: every section and every field is present, unset
    fields are ``null``. Times are ``HH:MM:SS[.ffffff]``, dates ISO 8601.
    """
    return json.dumps(state.model_dump(mode="json"), separators=(",", ":"))


def _copy_into(buffer: Buffer, payload: bytes) -> None:
    view = memoryview(buffer).cast("B")
    view[: len(payload)] = payload


def write_output(state: NmeaState, mode: OutputMode | str, buffer: Buffer) -> int:
    """Serialize *state* into *buffer* and return the number of bytes written.

    Raw mode writes exactly :data:`SNAPSHOT_SIZE` bytes. JSON mode writes
    the UTF-8 text followed by a NUL terminator; the terminator is not
    counted in the return value but must fit in the buffer.

    Raises :class:`NmeaBufferTooSmallError` when the payload does not fit
    (nothing is written) and :class:`NmeaConfigError` for an unknown mode.
    """
    try:
        resolved = OutputMode(mode)
    except ValueError as exc:
        raise NmeaConfigError(f"unknown output mode: {mode!r}") from exc

    if resolved is OutputMode.RAW:
        payload = pack_snapshot(state)
        required = SNAPSHOT_SIZE
        written = SNAPSHOT_SIZE
    else:
        payload = render_json(state).encode("utf-8") + b"\0"
        required = len(payload)
        written = len(payload) - 1

    available = memoryview(buffer).nbytes
    if available < required:
        _logger.debug("Output buffer too small: %d < %d (%s)", available, required, resolved.value)
        raise NmeaBufferTooSmallError(
            f"{resolved.value} output needs {required} bytes, buffer has {available}",
            required=required,
            available=available,
        )
    _copy_into(buffer, payload)
    return written
