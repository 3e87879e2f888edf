"""Pydantic v2 models for launchcatalog.

Re-exports from submodules so ``from launchcatalog.models import X`` keeps working.
"""

from launchcatalog.models.launches import (  # noqa: F401
    DEFAULT_CUSTOMERS,
    AbortResult,
    Launch,
    LaunchRequest,
    Planet,
    SaveOutcome,
)
from launchcatalog.models.provider import (  # noqa: F401
    PayloadRef,
    RocketRef,
    SpaceXLaunchDoc,
    SpaceXQueryResult,
)
