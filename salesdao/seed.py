"""Seed departments and sellers from a YAML file.

Expected layout::

    departments:
      - name: Computers
    sellers:
      - name: Bob Brown
        email: bob@gmail.com
        birth_date: 1998-04-21
        base_salary: 1000.0
        department: Computers

A seller's ``department`` is looked up by name among the departments already
stored, including those created earlier in the same file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from salesdao.db.database import Database
from salesdao.db.department_repo import DepartmentRepository
from salesdao.db.errors import DbError
from salesdao.db.seller_repo import SellerRepository
from salesdao.models.department import Department
from salesdao.models.seller import Seller, parse_birth_date

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    departments: list[Department] = field(default_factory=list)
    sellers: list[Seller] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def load_seed(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Seed file {path} must contain a mapping at the top level")
    return data


def _parse_department(entry: Any) -> str:
    if not isinstance(entry, dict):
        raise TypeError(f"department entry must be a mapping, got {type(entry).__name__}")
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError("department entry needs a non-empty 'name'")
    return name


def _parse_seller(entry: Any) -> dict[str, Any]:
    if not isinstance(entry, dict):
        raise TypeError(f"seller entry must be a mapping, got {type(entry).__name__}")
    for key in ("name", "email", "birth_date", "base_salary", "department"):
        if entry.get(key) is None:
            raise KeyError(key)
    return {
        "name": str(entry["name"]),
        "email": str(entry["email"]),
        "birth_date": parse_birth_date(entry["birth_date"]),
        "base_salary": float(entry["base_salary"]),
        "department": entry["department"],
    }


def _skip(result: SeedResult, kind: str, msg: str) -> None:
    logger.warning(f"Skipping {kind} {msg}")
    result.skipped.append(msg)


def seed_database(db: Database, data: dict) -> SeedResult:
    """Validate every entry first, then insert; malformed entries are skipped and recorded."""
    dep_repo = DepartmentRepository(db)
    seller_repo = SellerRepository(db)
    result = SeedResult()

    dep_names: list[str] = []
    for d in data.get("departments", []) or []:
        try:
            dep_names.append(_parse_department(d))
        except (KeyError, ValueError, TypeError) as e:
            _skip(result, "department", f"{d!r}: {e}")

    seller_entries: list[dict[str, Any]] = []
    for s in data.get("sellers", []) or []:
        try:
            seller_entries.append(_parse_seller(s))
        except (KeyError, ValueError, TypeError) as e:
            label = s.get("name", "?") if isinstance(s, dict) else repr(s)
            reason = f"missing {e}" if isinstance(e, KeyError) else str(e)
            _skip(result, "seller", f"{label}: {reason}")

    by_name = {d.name: d for d in dep_repo.find_all()}
    for name in dep_names:
        if name in by_name:
            logger.info(f"Department {name!r} already present, reusing #{by_name[name].id}")
            continue
        dep = dep_repo.insert(Department(name=name))
        by_name[name] = dep
        result.departments.append(dep)

    for s in seller_entries:
        dep = by_name.get(s["department"])
        if dep is None:
            _skip(result, "seller", f"{s['name']}: unknown department {s['department']!r}")
            continue
        try:
            seller = seller_repo.insert(Seller(
                name=s["name"],
                email=s["email"],
                birth_date=s["birth_date"],
                base_salary=s["base_salary"],
                department=dep,
            ))
        except DbError as e:
            _skip(result, "seller", f"{s['name']}: {e}")
            continue
        result.sellers.append(seller)

    return result


def seed_from_yaml(db: Database, path: Path) -> SeedResult:
    return seed_database(db, load_seed(path))
