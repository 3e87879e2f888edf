"""Catalog database: URL resolution from settings, engine, and table/planet setup."""

from __future__ import annotations

import logging
import os

from sqlalchemy import create_engine, event, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from launchcatalog.config import CatalogSettings, load_settings
from launchcatalog.db.models import Base, PlanetRow

logger = logging.getLogger(__name__)

_engine: Engine | None = None
SessionLocal: sessionmaker[Session] = sessionmaker()

CATALOG_DB_FILE = "launches.db"


def resolve_database_url(settings: CatalogSettings) -> str:
    """Pick the catalog database URL.

    Resolution order:
    1. ``database_url`` from catalog.yaml or LAUNCHCATALOG_DATABASE_URL
    2. ENVIRONMENT=production → DATABASE_URL env var (required)
    3. sqlite file ``launches.db`` under DATA_DIR (default ``data``)
    """
    if settings.database_url:
        return settings.database_url

    if os.environ.get("ENVIRONMENT", "development") == "production":
        db_url = os.environ.get("DATABASE_URL")
        if not db_url:
            raise ValueError(
                "DATABASE_URL or LAUNCHCATALOG_DATABASE_URL must be set in production"
            )
        return db_url

    data_dir = os.environ.get("DATA_DIR", "data")
    os.makedirs(data_dir, exist_ok=True)
    return f"sqlite:///{data_dir}/{CATALOG_DB_FILE}"


def get_engine(settings: CatalogSettings | None = None) -> Engine:
    """Return the catalog engine, creating it on first use."""
    global _engine
    if _engine is not None:
        return _engine

    db_url = resolve_database_url(settings or load_settings())

    connect_args = {}
    if db_url.startswith("sqlite"):
        # sync and CLI reads may overlap; wait on the lock instead of failing
        connect_args["check_same_thread"] = False
        connect_args["timeout"] = 30

    _engine = create_engine(db_url, connect_args=connect_args)
    SessionLocal.configure(bind=_engine)

    if db_url.startswith("sqlite"):
        @event.listens_for(_engine, "connect")
        def _set_sqlite_pragma(dbapi_conn, _connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    logger.info("Catalog database: %s", db_url.split("@")[-1])
    return _engine


def reset_engine() -> None:
    """Reset the singleton engine (for testing)."""
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None
    SessionLocal.configure(bind=None)


def ensure_planets(session: Session, kepler_names: list[str]) -> int:
    """Add any missing planet reference rows. Returns how many were added."""
    existing = set(session.execute(select(PlanetRow.kepler_name)).scalars())
    missing = [name for name in dict.fromkeys(kepler_names) if name not in existing]
    session.add_all([PlanetRow(kepler_name=name) for name in missing])
    session.flush()
    return len(missing)


def init_db(engine: Engine, settings: CatalogSettings | None = None) -> None:
    """Create the launches/planets tables and seed the planet reference."""
    settings = settings or load_settings()
    Base.metadata.create_all(engine)

    with Session(engine) as session:
        added = ensure_planets(session, settings.planets)
        session.commit()
    logger.info("Catalog tables ready (%d planets added)", added)
