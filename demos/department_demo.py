#!/usr/bin/env python3
"""
Department repository walkthrough: insert, find_by_id, find_all, update, delete.

Run: python demos/department_demo.py [--db-path data/demo.db]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from salesdao.config import configure_logging
from salesdao.db import Database, RecordNotFoundError, create_department_repo
from salesdao.models import Department


def main():
    parser = argparse.ArgumentParser(description="Department repository demo")
    parser.add_argument("--db-path", type=str, default="data/demo.db")
    args = parser.parse_args()

    configure_logging()

    db = Database(path=Path(args.db_path))
    db.init()
    department_repo = create_department_repo(db)

    print("\n=== TEST 1: Department insert ===")
    dep = department_repo.insert(Department(name="Music"))
    print(f"Inserted new department! New id: {dep.id}")

    print("\n=== TEST 2: Department find_by_id ===")
    print(department_repo.find_by_id(dep.id))

    print("\n=== TEST 3: Department find_all ===")
    for d in department_repo.find_all():
        print(d)

    print("\n=== TEST 4: Department update ===")
    dep.name = "Food"
    department_repo.update(dep)
    print(department_repo.find_by_id(dep.id))

    print("\n=== TEST 5: Department delete ===")
    department_repo.delete_by_id(dep.id)
    print(f"Deleted department #{dep.id}")
    try:
        department_repo.delete_by_id(dep.id)
    except RecordNotFoundError as e:
        print(f"Deleting it again fails as expected: {e}")

    db.close()


if __name__ == "__main__":
    main()
