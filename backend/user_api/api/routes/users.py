"""User Routes: create a user and fetch one by id.

Invariants:
    - POST /api/v1/user/create only; GET /api/v1/user/get only (others -> 405)
    - The create body is decoded as JSON whatever its Content-Type header says
    - Create payload is decoded by UserCreate, then checked by check_new_user
      before the store is touched
    - Invalid ids and missing rows are both reported as 404 "user not found"
    - Storage failures propagate as StorageError (500) on both endpoints
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.errors import (
    InvalidUserIdError, MissingUserIdError, UserNotFoundError,
)
from user_api.core.user_rules import check_new_user
from user_api.infrastructure import user_store
from user_api.infrastructure.database import get_db
from user_api.schemas.user import User, UserCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/user", tags=["users"])


@router.post(
    "/create", response_model=User,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: Request, db: AsyncSession = Depends(get_db),
):
    """Create a user from a validated, trimmed payload."""
    body = await _read_user_create(request)
    check_new_user(body.name, body.age, body.department)
    return await user_store.create(
        db, body.name, body.age, body.department,
    )


@router.get("/get", response_model=User)
async def get_user(
    user_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
):
    """Fetch a user by the `id` query parameter."""
    raw_id = (user_id or "").strip()
    if not raw_id:
        raise MissingUserIdError()
    try:
        return await user_store.get_by_id(db, raw_id)
    except InvalidUserIdError:
        raise UserNotFoundError(raw_id)


async def _read_user_create(request: Request) -> UserCreate:
    """Decode the raw request body into UserCreate."""
    raw = await request.body()
    try:
        return UserCreate.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))
