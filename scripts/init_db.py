#!/usr/bin/env python3
"""Initialize the database and optionally seed it with data from a YAML file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from salesdao.config import configure_logging
from salesdao.db.database import Database
from salesdao.seed import seed_from_yaml


def main():
    parser = argparse.ArgumentParser(description="Initialize the database")
    parser.add_argument("--seed", type=str, help="YAML file with departments and sellers")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    configure_logging()

    db_path = Path(args.db_path) if args.db_path else None
    db = Database(path=db_path)
    db.init()
    print(f"Database initialized at: {db.path}")

    if args.seed:
        result = seed_from_yaml(db, Path(args.seed))
        print(f"  Departments created: {len(result.departments)}")
        print(f"  Sellers created:     {len(result.sellers)}")
        for reason in result.skipped:
            print(f"  Skipped {reason}")

    db.close()
    print("Done.")


if __name__ == "__main__":
    main()
