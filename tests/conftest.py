"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from launchcatalog.db.models import Base, PlanetRow
from launchcatalog.models import Launch
from launchcatalog.service import LaunchCatalogService

HABITABLE_PLANETS = ["Kepler-442 b", "Kepler-62 f", "Kepler-1652 b"]


@pytest.fixture
def db_engine():
    """In-memory SQLite engine for tests."""
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    """Yield a SQLAlchemy session per test, rolled back after."""
    session = session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def planets(session_factory):
    """Seed the planet reference and return the kepler names."""
    with session_factory() as session:
        session.add_all([PlanetRow(kepler_name=name) for name in HABITABLE_PLANETS])
        session.commit()
    return list(HABITABLE_PLANETS)


@pytest.fixture
def service(session_factory):
    return LaunchCatalogService(session_factory)


@pytest.fixture
def make_launch():
    """Factory for launch records with sensible defaults."""

    def _make(flight_number: int, **overrides) -> Launch:
        fields = dict(
            flight_number=flight_number,
            mission=f"Mission {flight_number}",
            rocket="Falcon 9",
            launch_date=datetime(2020, 1, flight_number % 28 + 1, tzinfo=timezone.utc),
            customers=["NASA"],
            upcoming=False,
            success=True,
        )
        fields.update(overrides)
        return Launch(**fields)

    return _make


@pytest.fixture
def spacex_doc():
    """Factory for populated ``/v4/launches/query`` documents."""

    def _doc(
        flight_number: int,
        name: str,
        rocket: str = "Falcon 9",
        payload_customers: list[list[str]] | None = None,
        upcoming: bool = False,
        success: bool | None = True,
    ) -> dict:
        return {
            "flight_number": flight_number,
            "name": name,
            "date_local": "2006-03-25T10:30:00+12:00",
            "upcoming": upcoming,
            "success": success,
            "rocket": {"name": rocket, "id": "5e9d0d95eda69955f709d1eb"},
            "payloads": [
                {"customers": customers, "id": f"payload-{flight_number}-{i}"}
                for i, customers in enumerate(payload_customers or [])
            ],
            "id": f"launch-{flight_number}",
        }

    return _doc
