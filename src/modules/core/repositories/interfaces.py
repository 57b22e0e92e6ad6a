"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
entity-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM or the in-memory
store directly.

Contract shared by every backend:

- Reads of a missing row raise the entity's ``NotFoundError`` subclass;
  ``None`` is never returned.
- ``create`` / ``update`` raise the entity's ``AlreadyExistsError``
  subclass on a uniqueness violation.
- ``update`` / ``delete`` raise ``NotFoundError`` when no row is affected.
- Any other storage failure propagates unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``, ``Stock``).
    """

    @abstractmethod
    def create(self, entity: T) -> None:
        """Persist a new entity, writing its identity and timestamps back."""

    @abstractmethod
    def get_by_id(self, id: int) -> T:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def get_all(self) -> List[T]:
        """List every entity in ascending identity order."""

    @abstractmethod
    def update(self, entity: T) -> None:
        """Rewrite an existing entity identified by ``entity.id``."""

    @abstractmethod
    def delete(self, id: int) -> None:
        """Remove an entity by ID."""
