"""User Service: validate, execute one statement, interpret the result.

Invariants:
    - Validation failures raise ValidationError before any statement runs
    - Each operation issues exactly one statement through the QueryExecutor
    - Zero rows / zero affected rows raise NotFoundError
    - DatabaseError from the executor propagates unchanged (mapped to 500 by
      the API error handlers)
    - Update echoes the submitted values as sent (None for omitted fields);
      it does not re-read the row
    - Ids outside the signed 64-bit range cannot exist, so they raise
      NotFoundError without a statement

Design Decisions:
    - Depends on the QueryExecutor Protocol, not on DatabaseManager: tests can
      hand in a fake executor to drive the failure paths
"""

import logging

from users_api.core.errors import NotFoundError, ValidationError
from users_api.core.repository_protocols import MutationResult, QueryExecutor, Row
from users_api.core.user_changes import UserChanges, build_update_statement

logger = logging.getLogger(__name__)

CREATE_REQUIRED_MESSAGE = "Name and email are required"
UPDATE_REQUIRED_MESSAGE = "At least one field (name or email) required to update"

INSERT_USER = "INSERT INTO users (name, email) VALUES (?, ?)"
SELECT_USERS = "SELECT id, name, email FROM users"
SELECT_USER_BY_ID = "SELECT id, name, email FROM users WHERE id = ?"
DELETE_USER = "DELETE FROM users WHERE id = ?"

# Signed 64-bit: the widest integer column either backend can store
MIN_USER_ID = -(2 ** 63)
MAX_USER_ID = 2 ** 63 - 1


class UserService:
    """CRUD operations on the users table."""

    def __init__(self, db: QueryExecutor):
        self.db = db

    async def create(self, name: str | None, email: str | None) -> Row:
        if not name or not email:
            raise ValidationError(CREATE_REQUIRED_MESSAGE)
        result = await self._write(INSERT_USER, (name, email))
        logger.info(
            f"User {result.generated_id} created",
            extra={"user_id": result.generated_id},
        )
        return {"id": result.generated_id, "name": name, "email": email}

    async def list_all(self) -> list[Row]:
        return await self._read(SELECT_USERS)

    async def get(self, user_id: int) -> Row:
        _check_storable_id(user_id)
        rows = await self._read(SELECT_USER_BY_ID, (user_id,))
        if not rows:
            raise NotFoundError("User", user_id)
        return rows[0]

    async def update(
        self, user_id: int, name: str | None, email: str | None,
    ) -> Row:
        changes = UserChanges.from_input(name, email)
        if changes.is_empty:
            raise ValidationError(UPDATE_REQUIRED_MESSAGE)
        _check_storable_id(user_id)
        statement, params = build_update_statement(changes, user_id)
        result = await self._write(statement, params)
        if result.affected_row_count == 0:
            raise NotFoundError("User", user_id)
        logger.info(f"User {user_id} updated", extra={"user_id": user_id})
        return {"id": user_id, "name": name, "email": email}

    async def delete(self, user_id: int) -> None:
        _check_storable_id(user_id)
        result = await self._write(DELETE_USER, (user_id,))
        if result.affected_row_count == 0:
            raise NotFoundError("User", user_id)
        logger.info(f"User {user_id} deleted", extra={"user_id": user_id})

    async def _read(self, statement: str, params: tuple = ()) -> list[Row]:
        result = await self.db.execute(statement, params)
        if isinstance(result, MutationResult):
            raise TypeError(f"expected rows from: {statement}")
        return result

    async def _write(self, statement: str, params: tuple) -> MutationResult:
        result = await self.db.execute(statement, params)
        if not isinstance(result, MutationResult):
            raise TypeError(f"expected mutation metadata from: {statement}")
        return result


def _check_storable_id(user_id: int) -> None:
    if not MIN_USER_ID <= user_id <= MAX_USER_ID:
        raise NotFoundError("User", user_id)
