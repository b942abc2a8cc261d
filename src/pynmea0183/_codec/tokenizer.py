"""Split a framed sentence into its comma separated fields."""

from __future__ import annotations

from pynmea0183._codec.checksum import strip_terminator
from pynmea0183._constants import (
    CHECKSUM_DELIMITER,
    ENCAPSULATED_START,
    FIELD_DELIMITER,
    MAX_FIELDS,
    SENTENCE_START,
)
from pynmea0183.exceptions import NmeaTooManyFieldsError


def tokenize(sentence: str, max_fields: int = MAX_FIELDS) -> tuple[str, ...]:
    """Return the fields of *sentence*, identifier first.

    The start delimiter, checksum trailer and line terminator are not part
    of any field. Empty fields are kept as ``""`` so field positions stay
    stable. An empty body yields an empty tuple.

    Raises :class:`NmeaTooManyFieldsError` when the sentence carries more
    than *max_fields* fields.
    """
    body = strip_terminator(sentence)
    if body[:1] in (SENTENCE_START, ENCAPSULATED_START):
        body = body[1:]
    star = body.rfind(CHECKSUM_DELIMITER)
    if star >= 0:
        body = body[:star]
    if not body:
        return ()

    tokens = tuple(body.split(FIELD_DELIMITER))
    if len(tokens) > max_fields:
        raise NmeaTooManyFieldsError(
            f"sentence has {len(tokens)} fields, maximum is {max_fields}",
            max_fields=max_fields,
        )
    return tokens
