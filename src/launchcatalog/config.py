"""Catalog settings loading from YAML with environment overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from launchcatalog.models import DEFAULT_CUSTOMERS

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"

SPACEX_API_URL = "https://api.spacexdata.com/v4/launches/query"

# Kepler objects that pass the habitability filter (insolation, radius)
HABITABLE_PLANETS = [
    "Kepler-1652 b",
    "Kepler-1410 b",
    "Kepler-296 A f",
    "Kepler-442 b",
    "Kepler-296 A e",
    "Kepler-62 f",
    "Kepler-1649 b",
    "Kepler-1229 b",
]


class SentinelLaunch(BaseModel):
    """Known historical launch whose presence means the import already ran."""

    flight_number: int = 1
    rocket: str = "Falcon 1"
    mission: str = "FalconSat"


class CatalogSettings(BaseModel):
    spacex_url: str = SPACEX_API_URL
    http_timeout: int = 30
    sentinel: SentinelLaunch = SentinelLaunch()
    default_flight_number: int = 100
    default_customers: list[str] = Field(default_factory=lambda: list(DEFAULT_CUSTOMERS))
    planets: list[str] = Field(default_factory=lambda: list(HABITABLE_PLANETS))
    database_url: str | None = None  # falls back to DATABASE_URL / DATA_DIR


def load_settings(config_dir: Path | None = None) -> CatalogSettings:
    """Load catalog settings from catalog.yaml, then apply environment overrides.

    Args:
        config_dir: Override for config directory (testing).

    A missing catalog.yaml yields the built-in defaults.
    """
    config_dir = config_dir or CONFIG_DIR
    settings_file = config_dir / "catalog.yaml"

    data: dict = {}
    if settings_file.exists():
        with open(settings_file) as f:
            data = yaml.safe_load(f) or {}

    raw = data.get("catalog", {})
    url = os.environ.get("LAUNCHCATALOG_SPACEX_URL")
    if url:
        raw["spacex_url"] = url
    timeout = os.environ.get("LAUNCHCATALOG_HTTP_TIMEOUT")
    if timeout:
        raw["http_timeout"] = int(timeout)
    db_url = os.environ.get("LAUNCHCATALOG_DATABASE_URL")
    if db_url:
        raw["database_url"] = db_url

    return CatalogSettings.model_validate(raw)
