"""SQLAlchemy ORM models for all persistent tables."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class LaunchRow(Base):
    __tablename__ = "launches"

    # Internal row id; never exposed outside the storage layer
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flight_number: Mapped[int] = mapped_column(Integer, unique=True, index=True)
    mission: Mapped[str] = mapped_column(String(256))
    rocket: Mapped[str] = mapped_column(String(256), default="")
    # Local wall time at the launch site, stored naive on every backend
    launch_date: Mapped[datetime] = mapped_column(DateTime())
    target: Mapped[str | None] = mapped_column(String(256), nullable=True, default=None)
    customers_json: Mapped[str] = mapped_column(Text, default="[]")
    upcoming: Mapped[bool] = mapped_column(Boolean, default=True)
    # No column default: None is a real value (outcome not known yet)
    success: Mapped[bool | None] = mapped_column(Boolean, nullable=True)


class PlanetRow(Base):
    __tablename__ = "planets"

    kepler_name: Mapped[str] = mapped_column(String(64), primary_key=True)
