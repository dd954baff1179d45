"""User Store: the two persistence operations for the `users` table.

Invariants:
    - Each operation is exactly one parameterized statement; input is always
      a bound parameter, never part of the SQL text
    - create commits its own insert (auto-commit per request)
    - SQLAlchemyError is translated to StorageError; the session is rolled back
"""

import logging

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.errors import StorageError, UserNotFoundError
from user_api.core.user_rules import parse_user_id
from user_api.models.user import User as UserModel
from user_api.schemas.user import User

logger = logging.getLogger(__name__)


async def create(
    db: AsyncSession, name: str, age: int, department: str,
) -> User:
    """Insert a user row and return it with the store-assigned id."""
    stmt = (
        insert(UserModel)
        .values(name=name, age=age, department=department)
        .returning(UserModel.id)
    )
    try:
        result = await db.execute(stmt)
        user_id = result.scalar_one()
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to insert user: {e}")
        raise StorageError(_describe(e), "insert")
    logger.info("User created", extra={"user_id": user_id})
    return User(id=user_id, name=name, age=age, department=department)


async def get_by_id(db: AsyncSession, raw_id: str) -> User:
    """Look up one user by its textual id."""
    user_id = parse_user_id(raw_id)
    stmt = select(
        UserModel.id, UserModel.name, UserModel.age, UserModel.department,
    ).where(UserModel.id == user_id)
    try:
        result = await db.execute(stmt)
        row = result.one_or_none()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to read user {user_id}: {e}")
        raise StorageError(_describe(e), "select")
    if row is None:
        raise UserNotFoundError(raw_id)
    return User.model_validate(row)


def _describe(exc: SQLAlchemyError) -> str:
    """Driver message without SQLAlchemy's statement/parameter dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)
