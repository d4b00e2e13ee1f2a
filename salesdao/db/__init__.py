"""Database layer: SQLite, one connection per Database, repository pattern."""

from salesdao.db.database import Database, get_db, reset_db
from salesdao.db.department_repo import DepartmentRepository
from salesdao.db.errors import DbError, DbIntegrityError, RecordNotFoundError
from salesdao.db.factory import create_department_repo, create_seller_repo
from salesdao.db.schema import SCHEMA_DDL
from salesdao.db.seller_repo import SellerRepository

__all__ = [
    "Database", "get_db", "reset_db", "SCHEMA_DDL",
    "DbError", "DbIntegrityError", "RecordNotFoundError",
    "DepartmentRepository", "SellerRepository",
    "create_department_repo", "create_seller_repo",
]
