"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T, ID]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class IRepository(ABC, Generic[T, ID]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``) and ``ID`` its identity type.
    """

    @abstractmethod
    def get_by_id(self, id: ID) -> Optional[T]:
        """Retrieve an entity by its identity, ``None`` when absent."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: ID) -> None:
        """Remove an entity by ID (soft or hard delete)."""
