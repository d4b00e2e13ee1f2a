"""Data-access error family raised by the database layer and repositories."""

from __future__ import annotations


class DbError(RuntimeError):
    """Generic data-access failure carrying the underlying driver message."""


class DbIntegrityError(DbError):
    """A constraint was violated (foreign key, NOT NULL, ...)."""


class RecordNotFoundError(DbError):
    """A statement that targets a single row by id affected nothing."""
