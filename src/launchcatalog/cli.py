"""CLI entry point for operating the launch catalog."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from dotenv import load_dotenv

from launchcatalog.config import load_settings
from launchcatalog.db.engine import SessionLocal, get_engine, init_db
from launchcatalog.errors import CatalogError
from launchcatalog.models import AbortResult, Launch, LaunchRequest
from launchcatalog.pagination import get_pagination
from launchcatalog.service import LaunchCatalogService

logger = logging.getLogger(__name__)


def _build_service() -> LaunchCatalogService:
    settings = load_settings()
    init_db(get_engine(settings), settings)
    return LaunchCatalogService(SessionLocal, settings=settings)


def _format_launch(launch: Launch) -> str:
    if launch.upcoming:
        status = "upcoming"
    elif launch.success is None:
        status = "unknown"
    else:
        status = "success" if launch.success else "failed"
    target = f" -> {launch.target}" if launch.target else ""
    return (
        f"  #{launch.flight_number:<4} {launch.launch_date:%Y-%m-%d}  "
        f"{launch.rocket:<12} {launch.mission}{target} [{status}]"
    )


def run_sync(service: LaunchCatalogService) -> None:
    if service.ensure_catalog_loaded():
        print("Launch data imported.")
    else:
        print("Launch data already loaded.")


def run_list(service: LaunchCatalogService, page: int | None, limit: int | None) -> None:
    pagination = get_pagination(page, limit)
    launches = service.list_launches(skip=pagination.skip, limit=pagination.limit)
    if not launches:
        print("No launches.")
        return
    for launch in launches:
        print(_format_launch(launch))


def run_schedule(service: LaunchCatalogService, args: argparse.Namespace) -> None:
    try:
        launch_date = datetime.fromisoformat(args.date)
    except ValueError:
        print(f"Error: Invalid launch date: {args.date} (expected YYYY-MM-DD)")
        sys.exit(1)

    request = LaunchRequest(
        mission=args.mission,
        rocket=args.rocket,
        launch_date=launch_date,
        target=args.target,
    )
    launch = service.schedule_launch(request)
    print(f"Scheduled flight {launch.flight_number}.")


def run_abort(service: LaunchCatalogService, flight_number: int) -> None:
    result = service.abort_launch(flight_number)
    if result is AbortResult.NOT_FOUND:
        print(f"Error: Launch not found: {flight_number}")
        sys.exit(1)
    if result is AbortResult.ALREADY_ABORTED:
        print(f"Flight {flight_number} was already aborted.")
    else:
        print(f"Flight {flight_number} aborted.")


def main() -> None:
    """CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="launchcatalog",
        description="Launch catalog seeded from the SpaceX API",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("sync", help="Import provider launches if not yet loaded")

    list_parser = subparsers.add_parser("list", help="List launches by flight number")
    list_parser.add_argument("--page", type=int, help="Page number (default: 1)")
    list_parser.add_argument(
        "--limit", type=int, help="Launches per page (default: 0, no limit)"
    )

    schedule_parser = subparsers.add_parser("schedule", help="Schedule a new launch")
    schedule_parser.add_argument("--mission", required=True)
    schedule_parser.add_argument("--rocket", required=True)
    schedule_parser.add_argument(
        "--date", required=True, help="Launch date (ISO format, e.g. 2030-12-27)"
    )
    schedule_parser.add_argument(
        "--target", required=True, help="Kepler name of the destination planet"
    )

    abort_parser = subparsers.add_parser("abort", help="Abort a scheduled launch")
    abort_parser.add_argument("flight_number", type=int)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    service = _build_service()
    try:
        if args.command == "sync":
            run_sync(service)
        elif args.command == "list":
            run_list(service, args.page, args.limit)
        elif args.command == "schedule":
            run_schedule(service, args)
        elif args.command == "abort":
            run_abort(service, args.flight_number)
    except CatalogError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
