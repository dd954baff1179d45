"""User Rules: field checks for new users and parsing of textual user ids.

Invariants:
    - check_new_user expects already-trimmed strings and checks name, age,
      department in that order; the first failure wins
    - parse_user_id accepts an optional sign followed by ASCII digits only,
      and only values in 1..MAX_USER_ID
"""

import re

from user_api.core.domain_types import UserId, MAX_USER_ID
from user_api.core.errors import UserValidationError, InvalidUserIdError


_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def check_new_user(name: str, age: int, department: str) -> None:
    """Raise UserValidationError for the first field that breaks a rule."""
    if not name:
        raise UserValidationError("name is required", "name")
    if age <= 0:
        raise UserValidationError("age must be > 0", "age")
    if not department:
        raise UserValidationError("department is required", "department")


def parse_user_id(raw_id: str) -> UserId:
    """Parse a base-10 id string into a positive UserId."""
    if not _USER_ID_PATTERN.fullmatch(raw_id):
        raise InvalidUserIdError(raw_id)
    try:
        value = int(raw_id)
    except ValueError:
        # digit strings beyond the interpreter's int conversion limit
        raise InvalidUserIdError(raw_id)
    if value <= 0 or value > MAX_USER_ID:
        raise InvalidUserIdError(raw_id)
    return UserId(value)
