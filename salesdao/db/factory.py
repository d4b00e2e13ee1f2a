"""DAO factory: repositories bound to a given database or the default one."""

from __future__ import annotations

from typing import Optional

from salesdao.db.database import Database, get_db
from salesdao.db.department_repo import DepartmentRepository
from salesdao.db.seller_repo import SellerRepository


def create_department_repo(db: Optional[Database] = None) -> DepartmentRepository:
    return DepartmentRepository(db if db is not None else get_db())


def create_seller_repo(db: Optional[Database] = None) -> SellerRepository:
    return SellerRepository(db if db is not None else get_db())
