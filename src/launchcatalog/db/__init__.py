"""Database package: SQLAlchemy models, engine, and session scope."""

from launchcatalog.db.engine import SessionLocal, get_engine, init_db
from launchcatalog.db.models import Base
from launchcatalog.db.session import session_scope

__all__ = ["Base", "SessionLocal", "get_engine", "init_db", "session_scope"]
