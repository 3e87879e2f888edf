"""Planet reference lookups (read-only)."""

from __future__ import annotations

from sqlalchemy.orm import Session

from launchcatalog.db.models import PlanetRow
from launchcatalog.models import Planet


def find_planet(session: Session, kepler_name: str) -> Planet | None:
    """Return the planet with this kepler name, or None."""
    row = session.get(PlanetRow, kepler_name)
    if row is None:
        return None
    return Planet(kepler_name=row.kepler_name)
