"""Pydantic v2 models for launch records (service/storage layer)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_CUSTOMERS = ["Zero to Mastery", "NASA"]


class Launch(BaseModel):
    """A catalog entry, imported from the provider or scheduled locally."""

    flight_number: int
    mission: str
    rocket: str
    launch_date: datetime
    target: Optional[str] = None  # kepler name; scheduled launches only
    customers: list[str] = Field(default_factory=list)
    upcoming: bool = True
    success: Optional[bool] = True  # provider sends null for unflown launches


class LaunchRequest(BaseModel):
    """Caller-supplied fields for a new scheduled launch."""

    mission: str
    rocket: str
    launch_date: datetime
    target: str


class Planet(BaseModel):
    kepler_name: str


class SaveOutcome(str, Enum):
    """Which branch of the upsert was taken for a flight number."""

    INSERTED = "inserted"
    REPLACED = "replaced"


class AbortResult(str, Enum):
    NOT_FOUND = "not_found"
    ALREADY_ABORTED = "already_aborted"
    ABORTED = "aborted"

    @property
    def aborted(self) -> bool:
        """True only when this call modified the record."""
        return self is AbortResult.ABORTED
