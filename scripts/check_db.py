"""Quick check of database state."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from salesdao.db import create_department_repo, create_seller_repo, get_db
from salesdao.db.schema import TABLES

db = get_db()
print(f"Database: {db.path}")

for table in TABLES:
    row = db.fetchone(f"SELECT COUNT(*) AS n FROM {table}")
    print(f"  {table:<12} {row['n']} rows")

print("\n=== Departments ===")
for d in create_department_repo(db).find_all():
    print(f"  {d.id:>4} | {d.name}")

print("\n=== Sellers ===")
for s in create_seller_repo(db).find_all():
    print(f"  {s.id:>4} | {s.name[:24]:<24} | {s.email[:28]:<28} | {s.department.name}")
