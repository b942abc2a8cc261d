"""Normalized state updates.

Every decoded sentence is converted into a :class:`StateUpdate` before it
reaches the store. Only the state/store layer is allowed to merge them.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SentenceModule(StrEnum):
    """Functional group a sentence belongs to; one state section each."""

    GNSS = "gnss"
    AIS = "ais"
    NAVIGATION = "navigation"
    WAYPOINT = "waypoint"
    HEADING = "heading"
    SENSOR = "sensor"
    RADAR = "radar"
    SAFETY = "safety"
    COMM = "comm"
    SYSTEM = "system"
    ATTITUDE = "attitude"
    MISC = "misc"


class StateUpdate(BaseModel):
    """A normalized update to apply to the state store."""

    model_config = ConfigDict(frozen=True)

    sentence_id: str = Field(..., description="Three letter sentence identifier")
    talker: str = Field(default="", description="Talker identifier of the source sentence")
    section: SentenceModule
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    data: dict[str, Any] = Field(default_factory=dict, description="Pruned patch data")

    @field_validator("sentence_id")
    @classmethod
    def _normalize_sentence_id(cls, value: str) -> str:
        sentence_id = value.strip().upper()
        if len(sentence_id) != 3:
            raise ValueError("sentence_id must be three characters")
        return sentence_id

    @field_validator("observed_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
