"""Pydantic v2 models for SpaceX v4 launch documents (populated query result)."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RocketRef(BaseModel):
    name: str


class PayloadRef(BaseModel):
    customers: list[str] = Field(default_factory=list)


class SpaceXLaunchDoc(BaseModel):
    """One document from ``/v4/launches/query`` with rocket and payloads populated."""

    flight_number: int
    name: str
    date_local: datetime
    upcoming: bool
    success: Optional[bool] = None
    rocket: RocketRef
    payloads: list[PayloadRef] = Field(default_factory=list)


class SpaceXQueryResult(BaseModel):
    """Paginated-query envelope; with pagination off every launch is in ``docs``."""

    docs: list[SpaceXLaunchDoc] = Field(default_factory=list)
