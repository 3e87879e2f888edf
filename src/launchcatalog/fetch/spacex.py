"""SpaceX v4 API client and launch document normalization."""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from launchcatalog.config import SPACEX_API_URL
from launchcatalog.errors import SyncError
from launchcatalog.models import Launch, SpaceXLaunchDoc, SpaceXQueryResult

logger = logging.getLogger(__name__)

# Single unpaginated query with the rocket name and payload customers populated
LAUNCH_QUERY = {
    "query": {},
    "options": {
        "pagination": False,
        "populate": [
            {"path": "rocket", "select": {"name": 1}},
            {"path": "payloads", "select": {"customers": 1}},
        ],
    },
}


class SpaceXClient:
    """Client for the bulk launch query of the SpaceX API."""

    def __init__(self, url: str = SPACEX_API_URL, timeout: int = 30):
        self.url = url
        self.timeout = timeout
        self.session = requests.Session()

    def fetch_launch_docs(self) -> list[SpaceXLaunchDoc]:
        """Download every launch document in one request.

        Raises:
            SyncError: on transport failure, a non-200 status, an empty result,
                or documents that do not match the expected shape.
        """
        logger.info("Downloading launch data from %s", self.url)
        try:
            resp = self.session.post(self.url, json=LAUNCH_QUERY, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Launch data request failed: %s", exc)
            raise SyncError(f"Launch data download failed: {exc}") from exc

        if resp.status_code != 200:
            logger.warning("Problem downloading launch data: HTTP %d", resp.status_code)
            raise SyncError(f"Launch data download failed: HTTP {resp.status_code}")

        try:
            result = SpaceXQueryResult.model_validate(resp.json())
        except requests.JSONDecodeError as exc:
            raise SyncError("Launch data response is not JSON") from exc
        except ValidationError as exc:
            raise SyncError(f"Unexpected launch document shape: {exc}") from exc

        if not result.docs:
            raise SyncError("Launch data download returned no documents")
        return result.docs


def normalize_launch_doc(doc: SpaceXLaunchDoc) -> Launch:
    """Map a provider document onto the local record shape.

    Customers are concatenated across payloads in payload order, keeping duplicates.
    """
    customers = [c for payload in doc.payloads for c in payload.customers]
    return Launch(
        flight_number=doc.flight_number,
        mission=doc.name,
        rocket=doc.rocket.name,
        launch_date=doc.date_local,
        upcoming=doc.upcoming,
        success=doc.success,
        customers=customers,
    )
