"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Statement execution is accessed through the QueryExecutor Protocol
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests can pass a plain fake
    - Async in Protocol: execution does IO, while the logic that builds
      statements (core/user_changes.py) stays synchronous
"""

from dataclasses import dataclass
from typing import Any, Protocol, Sequence


@dataclass(frozen=True)
class MutationResult:
    """Metadata returned by a write statement."""
    affected_row_count: int
    generated_id: int | None = None


Row = dict[str, Any]


class QueryExecutor(Protocol):
    """Contract for running one parameterized statement: implemented by shell."""
    async def execute(
        self, statement: str, params: Sequence[Any] = (),
    ) -> list[Row] | MutationResult: ...
