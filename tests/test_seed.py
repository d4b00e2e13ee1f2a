"""Tests for YAML seeding used by scripts/init_db.py."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from salesdao.config import get_repo_root
from salesdao.db.database import Database
from salesdao.db.department_repo import DepartmentRepository
from salesdao.db.seller_repo import SellerRepository
from salesdao.seed import load_seed, seed_database, seed_from_yaml

SEED_YAML = """
departments:
  - name: Computers
  - name: Books
sellers:
  - name: Bob Brown
    email: bob@gmail.com
    birth_date: 1998-04-21
    base_salary: 1000
    department: Computers
  - name: Martha Red
    email: martha@gmail.com
    birth_date: "1993-11-30"
    base_salary: 3000.0
    department: Books
  - name: Lost Soul
    email: lost@gmail.com
    birth_date: 1990-01-01
    base_salary: 10.0
    department: Nowhere
"""


class TestSeed(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        root = Path(self.tmpdir.name)
        self.db = Database(path=root / "seed.db")
        self.db.init()
        self.seed_path = root / "seed.yaml"
        self.seed_path.write_text(SEED_YAML, encoding="utf-8")

    def tearDown(self):
        self.db.close()
        self.tmpdir.cleanup()

    def test_seed_creates_rows(self):
        result = seed_from_yaml(self.db, self.seed_path)
        self.assertEqual(len(result.departments), 2)
        self.assertEqual(len(result.sellers), 2)
        self.assertEqual(len(result.skipped), 1)
        self.assertIn("Nowhere", result.skipped[0])

        sellers = SellerRepository(self.db).find_all()
        self.assertEqual([s.name for s in sellers], ["Bob Brown", "Martha Red"])
        self.assertEqual(sellers[0].department.name, "Computers")

    def test_reseed_reuses_departments(self):
        seed_from_yaml(self.db, self.seed_path)
        result = seed_from_yaml(self.db, self.seed_path)
        self.assertEqual(result.departments, [])
        self.assertEqual(len(DepartmentRepository(self.db).find_all()), 2)
        self.assertEqual(len(SellerRepository(self.db).find_all()), 4)

    def test_malformed_sellers_are_skipped_not_raised(self):
        data = {
            "departments": [{"name": "Computers"}, {"title": "no name"}, "Books"],
            "sellers": [
                {"name": "Bob Brown", "email": "bob@gmail.com", "birth_date": "1998-04-21",
                 "base_salary": 1000.0, "department": "Computers"},
                {"name": "No Email", "birth_date": "1990-01-01",
                 "base_salary": 10.0, "department": "Computers"},
                {"name": "Bad Date", "email": "d@gmail.com", "birth_date": "someday",
                 "base_salary": 10.0, "department": "Computers"},
                {"name": "No Salary", "email": "s@gmail.com", "birth_date": "1990-01-01",
                 "base_salary": None, "department": "Computers"},
                "not a mapping",
            ],
        }
        with self.assertLogs("salesdao.seed", level="WARNING"):
            result = seed_database(self.db, data)

        self.assertEqual([d.name for d in result.departments], ["Computers"])
        self.assertEqual([s.name for s in result.sellers], ["Bob Brown"])
        self.assertEqual(len(result.skipped), 6)
        self.assertTrue(any("No Email" in r and "email" in r for r in result.skipped))
        self.assertTrue(any("Bad Date" in r for r in result.skipped))
        self.assertTrue(any("No Salary" in r for r in result.skipped))
        self.assertEqual(len(SellerRepository(self.db).find_all()), 1)

    def test_seller_with_only_a_name_is_skipped(self):
        data = {
            "departments": [{"name": "Computers"}],
            "sellers": [{"name": "Only Name"}],
        }
        result = seed_database(self.db, data)
        self.assertEqual(result.sellers, [])
        self.assertEqual(len(result.skipped), 1)
        self.assertEqual(len(DepartmentRepository(self.db).find_all()), 1)

    def test_empty_mapping(self):
        result = seed_database(self.db, {})
        self.assertEqual((result.departments, result.sellers, result.skipped), ([], [], []))

    def test_non_mapping_rejected(self):
        self.seed_path.write_text("- just\n- a list\n", encoding="utf-8")
        with self.assertRaises(ValueError):
            load_seed(self.seed_path)

    def test_bundled_example_loads(self):
        result = seed_from_yaml(self.db, get_repo_root() / "data" / "seed_example.yaml")
        self.assertEqual(len(result.departments), 4)
        self.assertEqual(len(result.sellers), 6)
        self.assertEqual(result.skipped, [])


if __name__ == "__main__":
    unittest.main()
