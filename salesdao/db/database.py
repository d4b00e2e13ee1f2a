"""Core database connection with per-statement transactions and error translation."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Any, Generator, Optional

from salesdao.db.errors import DbError, DbIntegrityError
from salesdao.db.schema import SCHEMA_DDL

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors() -> Generator[None, None, None]:
    """Re-raise any ``sqlite3.Error`` as the matching :class:`DbError`."""
    try:
        yield
    except sqlite3.IntegrityError as e:
        raise DbIntegrityError(str(e)) from e
    except sqlite3.Error as e:
        raise DbError(str(e)) from e


class Database:
    """
    SQLite database wrapper owning exactly one connection.

    Every mutation goes through ``cursor()``, which commits on success,
    rolls back on failure and closes the cursor on every exit path.
    Driver errors never leave this class untranslated.
    """

    def __init__(self, path: Optional[Path | str] = None):
        from salesdao.config import get_db_path
        if path is None:
            self.path: Path = get_db_path()
        elif isinstance(path, str):
            self.path = Path(path)
        else:
            self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    # -- connection lifecycle --------------------------------------------------

    def _ensure_dir(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._ensure_dir()
            with translate_errors():
                self._conn = sqlite3.connect(str(self.path), check_same_thread=False)
                self._conn.row_factory = sqlite3.Row
                self._conn.execute("PRAGMA foreign_keys = ON")
            logger.debug(f"Opened database at {self.path}")
        return self._conn

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    def init(self) -> None:
        """Create all tables (idempotent)."""
        conn = self.connection()
        with translate_errors():
            conn.executescript(SCHEMA_DDL)
            conn.commit()

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Commits on success, rolls back on exception."""
        conn = self.connection()
        with translate_errors():
            try:
                yield conn
                conn.commit()
            except Exception:
                conn.rollback()
                raise

    @contextmanager
    def cursor(self) -> Generator[sqlite3.Cursor, None, None]:
        """A cursor inside its own transaction, closed however the block exits."""
        with self.transaction() as conn:
            with closing(conn.cursor()) as cur:
                yield cur

    # -- low-level query helpers -----------------------------------------------

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        with translate_errors(), closing(self.connection().execute(sql, params)) as cur:
            row = cur.fetchone()
        return dict(row) if row else None

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        with translate_errors(), closing(self.connection().execute(sql, params)) as cur:
            rows = cur.fetchall()
        return [dict(r) for r in rows]


# -- module singleton ----------------------------------------------------------

_default_db: Optional[Database] = None


def get_db(path: Optional[Path] = None) -> Database:
    """Return (and lazily initialise) the module-level Database singleton."""
    global _default_db
    if _default_db is None:
        _default_db = Database(path)
        _default_db.init()
    return _default_db


def reset_db() -> None:
    """Close and discard the singleton (useful in tests)."""
    global _default_db
    if _default_db is not None:
        _default_db.close()
        _default_db = None
