"""Error Hierarchy: typed, categorized exceptions for every failure mode of the API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), and http_status (int)
    - `message` is the exact plain-text body returned to the client
    - Client errors are 4xx; storage failures are 500 on every endpoint

Design Decisions:
    - Single hierarchy with UserApiError base: one FastAPI handler renders all of them
    - InvalidUserIdError is a validation error at the store boundary; the get
      handler reports it to clients as "user not found"
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and log fields."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    DATABASE = "database"
    INTERNAL = "internal"


class UserApiError(Exception):
    """Base exception for all User API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status


# --- Client Errors (400-level) ---------------------------------------------

class UserValidationError(UserApiError):
    """Create payload failed a field rule."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )
        self.field = field


class MissingUserIdError(UserApiError):
    """The `id` query parameter is absent or blank."""
    def __init__(self):
        super().__init__(
            "missing query param: id", "MISSING_ID",
            ErrorCategory.VALIDATION, 400,
        )


class InvalidUserIdError(UserApiError):
    """The textual id is not a positive 64-bit integer."""
    def __init__(self, raw_id: str):
        super().__init__(
            "invalid id", "INVALID_ID", ErrorCategory.VALIDATION, 400,
        )
        self.raw_id = raw_id


class UserNotFoundError(UserApiError):
    """No row exists for the requested id."""
    def __init__(self, user_id: str):
        super().__init__(
            "user not found", "USER_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.user_id = user_id


class MethodNotAllowedError(UserApiError):
    """Endpoint exists but does not accept the request method."""
    def __init__(self, method: str):
        super().__init__(
            "method not allowed", "METHOD_NOT_ALLOWED",
            ErrorCategory.METHOD_NOT_ALLOWED, 405,
        )
        self.method = method


# --- Infrastructure Errors (500-level) --------------------------------------

class StorageError(UserApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"db error: {message}", "DATABASE_ERROR",
            ErrorCategory.DATABASE, 500,
        )
        self.operation = operation
