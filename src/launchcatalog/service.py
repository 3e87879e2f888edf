"""Launch catalog service: sync, scheduling, listing and abort.

All catalog access goes through ``LaunchCatalogService``. It holds the
session factory and the provider client explicitly; nothing here reaches for
a module-level engine.
"""

from __future__ import annotations

import logging
import threading

from sqlalchemy.orm import Session, sessionmaker

from launchcatalog.config import CatalogSettings
from launchcatalog.db.session import session_scope
from launchcatalog.errors import UnknownTargetError
from launchcatalog.fetch.spacex import SpaceXClient, normalize_launch_doc
from launchcatalog.models import AbortResult, Launch, LaunchRequest, SaveOutcome
from launchcatalog.storage import launches as launch_store
from launchcatalog.storage.planets import find_planet

logger = logging.getLogger(__name__)


class LaunchCatalogService:
    """Owns every read and write against the launch catalog."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        client: SpaceXClient | None = None,
        settings: CatalogSettings | None = None,
    ):
        self.settings = settings or CatalogSettings()
        self.session_factory = session_factory
        self.client = client or SpaceXClient(
            url=self.settings.spacex_url, timeout=self.settings.http_timeout
        )
        # Serializes flight-number issuance (read max → +1 → insert)
        self._issue_lock = threading.Lock()

    # --- Synchronization ---

    def ensure_catalog_loaded(self) -> bool:
        """Import provider launches unless the sentinel launch is already stored.

        Safe to call on every start. Returns True when an import ran.

        Raises:
            SyncError: if the provider download fails. Records saved before
                the failure stay; re-running re-applies them harmlessly.
        """
        sentinel = self.settings.sentinel
        with session_scope(self.session_factory) as session:
            found = launch_store.find_launch(
                session,
                sentinel.flight_number,
                rocket=sentinel.rocket,
                mission=sentinel.mission,
            )
        if found is not None:
            logger.info("Launch data already loaded")
            return False

        self.populate_launches()
        return True

    def populate_launches(self) -> int:
        """Download, normalize and upsert every provider launch. Returns the count saved."""
        docs = self.client.fetch_launch_docs()

        inserted = replaced = 0
        for doc in docs:
            launch = normalize_launch_doc(doc)
            # One transaction per record: a later failure keeps earlier ones
            with session_scope(self.session_factory) as session:
                outcome = launch_store.save_launch(session, launch)
            if outcome is SaveOutcome.INSERTED:
                inserted += 1
            else:
                replaced += 1

        logger.info(
            "Imported %d launches (%d new, %d replaced)", len(docs), inserted, replaced
        )
        return len(docs)

    # --- Writes ---

    def save_launch(self, launch: Launch) -> SaveOutcome:
        """Insert or fully replace the record keyed by ``launch.flight_number``."""
        with session_scope(self.session_factory) as session:
            return launch_store.save_launch(session, launch)

    def schedule_launch(self, request: LaunchRequest) -> Launch:
        """Validate the target, assign the next flight number and persist the launch.

        Raises:
            UnknownTargetError: if no planet has the requested kepler name.
        """
        with self._issue_lock, session_scope(self.session_factory) as session:
            if find_planet(session, request.target) is None:
                raise UnknownTargetError(request.target)

            latest = launch_store.get_latest_flight_number(
                session, self.settings.default_flight_number
            )
            launch = Launch(
                flight_number=latest + 1,
                mission=request.mission,
                rocket=request.rocket,
                launch_date=request.launch_date,
                target=request.target,
                customers=list(self.settings.default_customers),
                upcoming=True,
                success=True,
            )
            launch_store.save_launch(session, launch)

        logger.info(
            "Scheduled flight %d (%s) to %s",
            launch.flight_number, launch.mission, launch.target,
        )
        return launch

    def abort_launch(self, flight_number: int) -> AbortResult:
        with session_scope(self.session_factory) as session:
            result = launch_store.abort_launch(session, flight_number)
        logger.info("Abort flight %d: %s", flight_number, result.value)
        return result

    # --- Reads ---

    def list_launches(self, skip: int = 0, limit: int = 0) -> list[Launch]:
        """Launches ordered by flight number; ``limit=0`` returns everything from ``skip``."""
        with session_scope(self.session_factory) as session:
            return launch_store.list_launches(session, skip=skip, limit=limit)

    def get_launch(self, flight_number: int) -> Launch | None:
        with session_scope(self.session_factory) as session:
            return launch_store.find_launch(session, flight_number)

    def exists_launch_with_id(self, flight_number: int) -> bool:
        with session_scope(self.session_factory) as session:
            return launch_store.exists_launch_with_id(session, flight_number)
