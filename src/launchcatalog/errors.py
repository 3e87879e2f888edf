"""Exceptions raised by the launch catalog."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for catalog failures."""


class SyncError(CatalogError):
    """Raised when the provider import cannot be completed."""


class UnknownTargetError(CatalogError):
    """Raised when a scheduled launch names a planet that is not in the reference."""

    def __init__(self, target: str) -> None:
        super().__init__(f"No matching planet found: {target}")
        self.target = target
