#!/usr/bin/env python3
"""
Seller repository walkthrough
=============================
Runs every SellerRepository operation against a demo database:
findById, findByDepartment, findAll, insert, update, delete.

Run: python demos/seller_demo.py [--db-path data/demo.db] [--delete-id N]
"""
from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from salesdao.config import configure_logging, get_repo_root
from salesdao.db import Database, RecordNotFoundError, create_seller_repo
from salesdao.models import Department, Seller
from salesdao.seed import seed_from_yaml


def _section(title: str) -> None:
    print(f"\n=== {title} ===")


def main():
    parser = argparse.ArgumentParser(description="Seller repository demo")
    parser.add_argument("--db-path", type=str, default="data/demo.db")
    parser.add_argument("--delete-id", type=int, help="Seller id for the delete step")
    args = parser.parse_args()

    configure_logging()

    db = Database(path=Path(args.db_path))
    db.init()
    seller_repo = create_seller_repo(db)
    if not seller_repo.find_all():
        seed_from_yaml(db, get_repo_root() / "data" / "seed_example.yaml")

    _section("TEST 1: Seller find_by_id")
    seller = seller_repo.find_by_id(3)
    print(seller)

    _section("TEST 2: Seller find_by_department")
    department = Department(id=2)
    for s in seller_repo.find_by_department(department):
        print(s)

    _section("TEST 3: Seller find_all")
    for s in seller_repo.find_all():
        print(s)

    _section("TEST 4: Seller insert")
    new_seller = Seller(
        name="Greg",
        email="greg@gmail.com",
        birth_date=date.today(),
        base_salary=4000.0,
        department=department,
    )
    seller_repo.insert(new_seller)
    print(f"Inserted new seller! New id: {new_seller.id}")

    _section("TEST 5: Seller update")
    seller = seller_repo.find_by_id(1)
    if seller is not None:
        seller.name = "Martha Wayne"
        seller_repo.update(seller)
        print("Updated seller information!")

    _section("TEST 6: Seller delete")
    delete_id = args.delete_id if args.delete_id is not None else new_seller.id
    try:
        seller_repo.delete_by_id(delete_id)
        print(f"Deleted seller #{delete_id}")
    except RecordNotFoundError as e:
        print(f"Delete failed: {e}")

    db.close()


if __name__ == "__main__":
    main()
