"""Seller domain model. A seller always belongs to one Department."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from salesdao.models.department import Department


def parse_birth_date(raw: Any) -> date:
    """Accept ``date`` objects or ISO-8601 text (``YYYY-MM-DD``, optionally with a time part)."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(str(raw)[:10])


@dataclass(eq=False)
class Seller:
    """A seller; ``department`` is shared by reference between sellers loaded together."""

    name: str
    email: str
    birth_date: date
    base_salary: float
    department: Department
    id: Optional[int] = field(default=None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seller):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        # The id is assigned on insert, so only persisted objects are hashable.
        if self.id is None:
            raise TypeError(f"unhashable: unsaved {type(self).__name__} has no id")
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Seller [id={self.id}, name={self.name}, email={self.email}, "
            f"birthDate={self.birth_date}, baseSalary={self.base_salary:.2f}, "
            f"department={self.department}]"
        )

    @property
    def department_id(self) -> Optional[int]:
        return self.department.id if self.department is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "birth_date": self.birth_date.isoformat(),
            "base_salary": self.base_salary,
            "department": self.department.to_dict(),
        }

    @classmethod
    def from_row(cls, row: dict[str, Any], department: Department) -> "Seller":
        return cls(
            id=row["Id"],
            name=row["Name"],
            email=row["Email"],
            birth_date=parse_birth_date(row["BirthDate"]),
            base_salary=float(row["BaseSalary"]),
            department=department,
        )
