"""Database schema DDL — the department and seller tables."""

SCHEMA_DDL = """
PRAGMA foreign_keys = ON;

-- ==========================================================================
-- Department Table
-- ==========================================================================
CREATE TABLE IF NOT EXISTS department (
    Id      INTEGER PRIMARY KEY AUTOINCREMENT,
    Name    TEXT
);

-- ==========================================================================
-- Seller Table (every seller belongs to exactly one department)
-- ==========================================================================
CREATE TABLE IF NOT EXISTS seller (
    Id              INTEGER PRIMARY KEY AUTOINCREMENT,
    Name            TEXT NOT NULL,
    Email           TEXT NOT NULL,
    BirthDate       TEXT NOT NULL,
    BaseSalary      REAL NOT NULL,
    DepartmentId    INTEGER NOT NULL REFERENCES department(Id)
);

CREATE INDEX IF NOT EXISTS idx_seller_department ON seller(DepartmentId);
CREATE INDEX IF NOT EXISTS idx_seller_name ON seller(Name);
CREATE INDEX IF NOT EXISTS idx_department_name ON department(Name);
"""

TABLES = ("department", "seller")
