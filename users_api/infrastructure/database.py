"""Database Manager: async connection pool and the single-statement executor.

Invariants:
    - execute() runs exactly one statement on exactly one pooled connection
    - The connection is returned to the pool on every exit path; the statement
      commits on success and rolls back on failure
    - Caller values are always bind parameters, never part of the SQL text
    - All SQLAlchemy exceptions, and driver errors raised outside SQLAlchemy
      (OverflowError, OSError), mapped to DatabaseError (core/errors.py)

Design Decisions:
    - Raw SQL with positional '?' placeholders, rewritten to named binds for
      text(): the same statements run on MySQL and on SQLite in tests
    - Manager created in the lifespan hook and stored on app.state; routes reach
      it through get_db, which tests override
    - pool_pre_ping + pool_recycle: stale MySQL connections are replaced
"""

import logging
from typing import Any, Sequence

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from users_api.config import Settings
from users_api.core.errors import DatabaseError
from users_api.core.repository_protocols import MutationResult, Row

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"


def bind_positional(
    statement: str, params: Sequence[Any],
) -> tuple[str, dict[str, Any]]:
    """Rewrite '?' placeholders to :p0, :p1, ... and pair them with params."""
    pieces = statement.split(PLACEHOLDER)
    if len(pieces) - 1 != len(params):
        raise ValueError(
            f"statement has {len(pieces) - 1} placeholders "
            f"but {len(params)} values were given",
        )
    sql = pieces[0]
    for index, piece in enumerate(pieces[1:]):
        sql += f":p{index}{piece}"
    return sql, {f"p{index}": value for index, value in enumerate(params)}


class DatabaseManager:
    """Owns the async engine (and its pool) and executes statements on it."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseManager":
        engine = create_async_engine(
            settings.sqlalchemy_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_timeout=settings.database_pool_timeout,
            pool_recycle=settings.database_pool_recycle,
            pool_pre_ping=True,
        )
        return cls(engine)

    async def execute(
        self, statement: str, params: Sequence[Any] = (),
    ) -> list[Row] | MutationResult:
        """Run one statement; rows for reads, MutationResult for writes."""
        sql, binds = bind_positional(statement, params)
        operation = statement.split(None, 1)[0].lower()
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(sql), binds)
                if result.returns_rows:
                    return [dict(row) for row in result.mappings().all()]
                generated_id = result.lastrowid if operation == "insert" else None
                return MutationResult(
                    affected_row_count=result.rowcount,
                    generated_id=generated_id,
                )
        except IntegrityError as e:
            self._log_failure("integrity error", operation, e)
            raise DatabaseError(operation, e) from e
        except PoolTimeoutError as e:
            self._log_failure("pool timeout", operation, e)
            raise DatabaseError(operation, e) from e
        except OperationalError as e:
            self._log_failure("operational error", operation, e)
            raise DatabaseError(operation, e) from e
        except DBAPIError as e:
            self._log_failure("driver error", operation, e)
            raise DatabaseError(operation, e) from e
        except SQLAlchemyError as e:
            self._log_failure("SQLAlchemy error", operation, e)
            raise DatabaseError(operation, e) from e
        except (OverflowError, OSError) as e:
            self._log_failure("driver error", operation, e)
            raise DatabaseError(operation, e) from e

    async def verify(self) -> None:
        """Open one connection and run SELECT 1; raise DatabaseError on failure."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            self._log_failure("connectivity check failed", "connect", e)
            raise DatabaseError("connect", e) from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self.verify()
        except DatabaseError:
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()

    @staticmethod
    def _log_failure(kind: str, operation: str, exc: Exception) -> None:
        logger.error(
            f"DB {kind} during {operation}: {exc}",
            extra={"operation": operation, "error_code": "DATABASE_ERROR"},
        )


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency: the manager created at startup."""
    manager = getattr(request.app.state, "db", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager
