"""Base domain exceptions shared by every inventory module.

Repositories and services raise subclasses of these; the API layer
(Views) catches the base classes and translates them into HTTP
responses: ``AlreadyExistsError`` -> 409, ``NotFoundError`` -> 404,
``InvalidReferenceError`` -> 400, ``InUseError`` -> 409.  Any other
exception is an opaque storage failure and is left to propagate.
"""

from __future__ import annotations


class DomainError(Exception):
    """Root of the inventory domain error hierarchy."""


class NotFoundError(DomainError):
    """The targeted row does not exist."""


class AlreadyExistsError(DomainError):
    """A create/update would violate a uniqueness constraint."""


class InvalidReferenceError(DomainError):
    """A foreign-key reference does not resolve to an existing row."""


class InUseError(DomainError):
    """A delete would orphan rows that still reference the target."""
