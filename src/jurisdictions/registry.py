"""Jurisdiction registry: the plug-in boundary for rule content.

The registry is an explicit object. A process default is reachable through
``get_registry()`` but nothing is registered at import time; callers
populate it with ``register_builtin_jurisdictions()`` or their own modules.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

import structlog

from jurisdictions.contract import JurisdictionModule

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an error message, never both."""
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> Result[T]:
        return cls(error=error)


@dataclass(frozen=True)
class JurisdictionEntry:
    id: str
    name: str
    region: str
    description: str
    module: JurisdictionModule


class JurisdictionRegistry:
    """Table from jurisdiction id to its registered module.

    Mutated only at startup or in test fixtures, never during mapping.
    """

    def __init__(self) -> None:
        self._entries: dict[str, JurisdictionEntry] = {}

    def register(
        self,
        id: str,
        name: str,
        region: str,
        description: str,
        module: JurisdictionModule,
    ) -> None:
        """Register (or replace) the module for ``id``."""
        if id in self._entries:
            logger.warning("jurisdiction_replaced", jurisdiction=id)
        self._entries[id] = JurisdictionEntry(
            id=id, name=name, region=region, description=description, module=module
        )
        logger.debug("jurisdiction_registered", jurisdiction=id, name=name)

    def get(self, id: str) -> Result[JurisdictionEntry]:
        entry = self._entries.get(id)
        if entry is None:
            return Result.failure(f'Jurisdiction "{id}" is not registered')
        return Result.success(entry)

    def get_module(self, id: str) -> Result[JurisdictionModule]:
        found = self.get(id)
        if not found.ok:
            return Result.failure(found.error or "")
        return Result.success(found.value.module)

    def has(self, id: str) -> bool:
        return id in self._entries

    def list(self) -> list[JurisdictionEntry]:
        return list(self._entries.values())

    def list_ids(self) -> list[str]:
        return list(self._entries.keys())

    def clear(self) -> None:
        """Drop every registration. Intended for test isolation."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, id: object) -> bool:
        return id in self._entries


_default_registry = JurisdictionRegistry()


def get_registry() -> JurisdictionRegistry:
    """Get the process-wide registry instance."""
    return _default_registry
