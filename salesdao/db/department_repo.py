"""Repository for the ``department`` table — full CRUD, one statement per call."""

from __future__ import annotations

import logging
from typing import Optional

from salesdao.db.database import Database
from salesdao.db.errors import DbError, RecordNotFoundError
from salesdao.models.department import Department

logger = logging.getLogger(__name__)


class DepartmentRepository:
    """Data access object for departments."""

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def insert(self, department: Department) -> Department:
        """Insert a department and write the generated id back into it."""
        try:
            with self._db.cursor() as cur:
                cur.execute("INSERT INTO department (Name) VALUES (?)", (department.name,))
                if cur.rowcount <= 0:
                    raise DbError("Unexpected error! No rows affected")
                department.id = cur.lastrowid
        except DbError as e:
            logger.error(f"Failed to insert department {department.name!r}: {e}")
            raise
        logger.info(f"Inserted department #{department.id} ({department.name})")
        return department

    # -- Read ------------------------------------------------------------------

    def find_by_id(self, department_id: int) -> Optional[Department]:
        try:
            row = self._db.fetchone("SELECT * FROM department WHERE Id = ?", (department_id,))
        except DbError as e:
            logger.error(f"Failed to find department #{department_id}: {e}")
            raise
        return Department.from_row(row) if row else None

    def find_all(self) -> list[Department]:
        try:
            rows = self._db.fetchall("SELECT * FROM department ORDER BY Name")
        except DbError as e:
            logger.error(f"Failed to list departments: {e}")
            raise
        return [Department.from_row(r) for r in rows]

    # -- Update ----------------------------------------------------------------

    def update(self, department: Department) -> bool:
        """Rename the department with ``department.id``. False if no row matched."""
        if department.id is None:
            raise DbError("Cannot update a department that has no id")
        try:
            with self._db.cursor() as cur:
                cur.execute(
                    "UPDATE department SET Name = ? WHERE Id = ?",
                    (department.name, department.id),
                )
                updated = cur.rowcount > 0
        except DbError as e:
            logger.error(f"Failed to update department #{department.id}: {e}")
            raise
        if updated:
            logger.info(f"Updated department #{department.id}")
        else:
            logger.warning(f"Update matched no department with id {department.id}")
        return updated

    # -- Delete ----------------------------------------------------------------

    def delete_by_id(self, department_id: int) -> None:
        """Delete by id; raises RecordNotFoundError when the id does not exist."""
        try:
            with self._db.cursor() as cur:
                cur.execute("DELETE FROM department WHERE Id = ?", (department_id,))
                if cur.rowcount == 0:
                    raise RecordNotFoundError(f"Unexpected error! Id not found: {department_id}")
        except DbError as e:
            logger.error(f"Failed to delete department #{department_id}: {e}")
            raise
        logger.info(f"Deleted department #{department_id}")
