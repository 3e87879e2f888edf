"""Launch storage: database-backed persistence keyed by flight number."""

from __future__ import annotations

import json
from datetime import datetime

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from launchcatalog.db.models import LaunchRow
from launchcatalog.models import AbortResult, Launch, SaveOutcome


# --- Conversion helpers ---


def _wall_time(value: datetime) -> datetime:
    """Drop the UTC offset and keep the local clock reading (10:30+12:00 -> 10:30)."""
    return value.replace(tzinfo=None)


def _launch_to_row(launch: Launch) -> LaunchRow:
    return LaunchRow(
        flight_number=launch.flight_number,
        mission=launch.mission,
        rocket=launch.rocket,
        launch_date=_wall_time(launch.launch_date),
        target=launch.target,
        customers_json=json.dumps(launch.customers),
        upcoming=launch.upcoming,
        success=launch.success,
    )


def _row_to_launch(row: LaunchRow) -> Launch:
    # row.id stays behind: it is a storage detail, not part of the record
    return Launch(
        flight_number=row.flight_number,
        mission=row.mission,
        rocket=row.rocket,
        launch_date=row.launch_date,
        target=row.target,
        customers=json.loads(row.customers_json),
        upcoming=row.upcoming,
        success=row.success,
    )


def _get_row(session: Session, flight_number: int) -> LaunchRow | None:
    stmt = select(LaunchRow).where(LaunchRow.flight_number == flight_number)
    return session.execute(stmt).scalar_one_or_none()


# --- Launch CRUD ---


def save_launch(session: Session, launch: Launch) -> SaveOutcome:
    """Insert the launch, or fully replace the stored record with the same flight number.

    Replacement overwrites every field, so anything the new record leaves at
    its default (no target, no customers) is cleared rather than kept.
    """
    existing = _get_row(session, launch.flight_number)
    if existing is None:
        session.add(_launch_to_row(launch))
        outcome = SaveOutcome.INSERTED
    else:
        existing.mission = launch.mission
        existing.rocket = launch.rocket
        existing.launch_date = _wall_time(launch.launch_date)
        existing.target = launch.target
        existing.customers_json = json.dumps(launch.customers)
        existing.upcoming = launch.upcoming
        existing.success = launch.success
        outcome = SaveOutcome.REPLACED
    session.flush()
    return outcome


def find_launch(
    session: Session,
    flight_number: int,
    rocket: str | None = None,
    mission: str | None = None,
) -> Launch | None:
    """Find a launch by flight number, optionally also matching rocket and mission."""
    stmt = select(LaunchRow).where(LaunchRow.flight_number == flight_number)
    if rocket is not None:
        stmt = stmt.where(LaunchRow.rocket == rocket)
    if mission is not None:
        stmt = stmt.where(LaunchRow.mission == mission)
    row = session.execute(stmt).scalar_one_or_none()
    return _row_to_launch(row) if row is not None else None


def exists_launch_with_id(session: Session, flight_number: int) -> bool:
    return _get_row(session, flight_number) is not None


def get_latest_flight_number(session: Session, default: int) -> int:
    """Highest stored flight number, or ``default`` when the catalog is empty."""
    latest = session.execute(select(func.max(LaunchRow.flight_number))).scalar()
    if latest is None:
        return default
    return latest


def list_launches(session: Session, skip: int = 0, limit: int = 0) -> list[Launch]:
    """List launches in ascending flight-number order.

    ``limit=0`` means no limit. Ranges past the end return an empty list.
    """
    if skip < 0 or limit < 0:
        raise ValueError(f"skip and limit must be non-negative (got {skip}, {limit})")

    stmt = select(LaunchRow).order_by(LaunchRow.flight_number.asc()).offset(skip)
    if limit:
        stmt = stmt.limit(limit)
    rows = session.execute(stmt).scalars().all()
    return [_row_to_launch(r) for r in rows]


def abort_launch(session: Session, flight_number: int) -> AbortResult:
    """Mark a launch as no longer upcoming and unsuccessful.

    Only the two flags are updated; every other field is left untouched.
    """
    row = _get_row(session, flight_number)
    if row is None:
        return AbortResult.NOT_FOUND
    if not row.upcoming and row.success is False:
        return AbortResult.ALREADY_ABORTED

    stmt = (
        update(LaunchRow)
        .where(LaunchRow.flight_number == flight_number)
        .values(upcoming=False, success=False)
    )
    result = session.execute(stmt)
    session.flush()
    if result.rowcount == 1:
        return AbortResult.ABORTED
    return AbortResult.NOT_FOUND
