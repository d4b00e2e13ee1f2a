"""Repository for the ``seller`` table — CRUD plus lookups joined with ``department``."""

from __future__ import annotations

import logging
from typing import Any, Optional

from salesdao.db.database import Database
from salesdao.db.errors import DbError, RecordNotFoundError
from salesdao.models.department import Department
from salesdao.models.seller import Seller

logger = logging.getLogger(__name__)

_SELECT_JOINED = (
    "SELECT seller.*, department.Name AS DepName "
    "FROM seller INNER JOIN department ON seller.DepartmentId = department.Id"
)


def _department_from_row(row: dict[str, Any]) -> Department:
    return Department(id=row["DepartmentId"], name=row["DepName"])


class SellerRepository:
    """Data access object for sellers."""

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def insert(self, seller: Seller) -> Seller:
        """Insert a seller and write the generated id back into it."""
        department_id = self._require_department_id(seller)
        try:
            with self._db.cursor() as cur:
                cur.execute(
                    """INSERT INTO seller
                       (Name, Email, BirthDate, BaseSalary, DepartmentId)
                       VALUES (?, ?, ?, ?, ?)""",
                    (
                        seller.name, seller.email, seller.birth_date.isoformat(),
                        seller.base_salary, department_id,
                    ),
                )
                if cur.rowcount <= 0:
                    raise DbError("Unexpected error! No rows affected")
                seller.id = cur.lastrowid
        except DbError as e:
            logger.error(f"Failed to insert seller {seller.name!r}: {e}")
            raise
        logger.info(f"Inserted seller #{seller.id} ({seller.name}) in department #{department_id}")
        return seller

    # -- Read ------------------------------------------------------------------

    def find_by_id(self, seller_id: int) -> Optional[Seller]:
        try:
            row = self._db.fetchone(f"{_SELECT_JOINED} WHERE seller.Id = ?", (seller_id,))
        except DbError as e:
            logger.error(f"Failed to find seller #{seller_id}: {e}")
            raise
        if not row:
            return None
        return Seller.from_row(row, _department_from_row(row))

    def find_all(self) -> list[Seller]:
        try:
            rows = self._db.fetchall(f"{_SELECT_JOINED} ORDER BY seller.Name")
        except DbError as e:
            logger.error(f"Failed to list sellers: {e}")
            raise
        return self._hydrate(rows)

    def find_by_department(self, department: Department) -> list[Seller]:
        """Sellers of ``department`` (matched on its id), ordered by name."""
        if department is None or department.id is None:
            raise DbError("find_by_department needs a persisted department")
        try:
            rows = self._db.fetchall(
                f"{_SELECT_JOINED} WHERE seller.DepartmentId = ? ORDER BY seller.Name",
                (department.id,),
            )
        except DbError as e:
            logger.error(f"Failed to list sellers of department #{department.id}: {e}")
            raise
        return self._hydrate(rows)

    # -- Update ----------------------------------------------------------------

    def update(self, seller: Seller) -> bool:
        """Overwrite every column of the seller with ``seller.id``. False if no row matched."""
        if seller.id is None:
            raise DbError("Cannot update a seller that has no id")
        department_id = self._require_department_id(seller)
        try:
            with self._db.cursor() as cur:
                cur.execute(
                    """UPDATE seller
                       SET Name = ?, Email = ?, BirthDate = ?, BaseSalary = ?, DepartmentId = ?
                       WHERE Id = ?""",
                    (
                        seller.name, seller.email, seller.birth_date.isoformat(),
                        seller.base_salary, department_id, seller.id,
                    ),
                )
                updated = cur.rowcount > 0
        except DbError as e:
            logger.error(f"Failed to update seller #{seller.id}: {e}")
            raise
        if updated:
            logger.info(f"Updated seller #{seller.id}")
        else:
            logger.warning(f"Update matched no seller with id {seller.id}")
        return updated

    # -- Delete ----------------------------------------------------------------

    def delete_by_id(self, seller_id: int) -> None:
        """Delete by id; raises RecordNotFoundError when the id does not exist."""
        try:
            with self._db.cursor() as cur:
                cur.execute("DELETE FROM seller WHERE Id = ?", (seller_id,))
                if cur.rowcount == 0:
                    raise RecordNotFoundError(f"Unexpected error! Id not found: {seller_id}")
        except DbError as e:
            logger.error(f"Failed to delete seller #{seller_id}: {e}")
            raise
        logger.info(f"Deleted seller #{seller_id}")

    # -- Helpers ---------------------------------------------------------------

    @staticmethod
    def _require_department_id(seller: Seller) -> int:
        if seller.department is None or seller.department.id is None:
            raise DbError(f"Seller {seller.name!r} must reference a persisted department")
        return seller.department.id

    @staticmethod
    def _hydrate(rows: list[dict[str, Any]]) -> list[Seller]:
        """Map joined rows to sellers, building one Department per distinct id."""
        departments: dict[int, Department] = {}
        sellers: list[Seller] = []
        for row in rows:
            dep = departments.get(row["DepartmentId"])
            if dep is None:
                dep = _department_from_row(row)
                departments[row["DepartmentId"]] = dep
            sellers.append(Seller.from_row(row, dep))
        return sellers
