"""Department domain model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Department:
    """A department; ``id`` stays None until the row is inserted.

    Persisted departments compare and hash by id. Unsaved ones compare by
    identity and cannot be hashed.
    """

    id: Optional[int] = None
    name: Optional[str] = None

    # -- Identity: persisted objects compare by id --

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Department):
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
        return f"Department [id={self.id}, name={self.name}]"

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Department":
        return cls(id=row["Id"], name=row["Name"])
