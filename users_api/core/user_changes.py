"""User Changes: the optional-field assignment set behind a partial update.

Invariants:
    - Pure: no IO, no async, no DB
    - Empty strings count as absent; a change set is empty when both fields are
    - Column order in generated statements is fixed: name, then email
    - Values only ever appear in the params tuple, never in the SQL text

Design Decisions:
    - Frozen dataclass over a loose dict: the update shape is explicit and the
      statement is a deterministic function of it
"""

from dataclasses import dataclass
from typing import Any

UPDATABLE_COLUMNS = ("name", "email")


@dataclass(frozen=True)
class UserChanges:
    """Fields to replace on an existing user; None means keep the stored value."""
    name: str | None = None
    email: str | None = None

    @classmethod
    def from_input(cls, name: str | None, email: str | None) -> "UserChanges":
        return cls(name=name or None, email=email or None)

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.email is None

    def assignments(self) -> list[tuple[str, str]]:
        """(column, value) pairs for supplied fields, in column order."""
        values = {"name": self.name, "email": self.email}
        return [
            (column, values[column])
            for column in UPDATABLE_COLUMNS
            if values[column] is not None
        ]

    def as_dict(self) -> dict[str, str]:
        return dict(self.assignments())


def build_update_statement(
    changes: UserChanges, user_id: int,
) -> tuple[str, tuple[Any, ...]]:
    """Build `UPDATE users SET ... WHERE id = ?` with positional placeholders."""
    pairs = changes.assignments()
    if not pairs:
        raise ValueError("cannot build an UPDATE from an empty change set")
    set_clause = ", ".join(f"{column} = ?" for column, _ in pairs)
    params = tuple(value for _, value in pairs) + (user_id,)
    return f"UPDATE users SET {set_clause} WHERE id = ?", params
