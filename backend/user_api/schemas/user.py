"""User Schemas: create payload and user response with strict field shapes.

Invariants:
    - UserCreate has no optional fields and forbids unknown keys
    - UserCreate is strict: age must be a JSON integer, name/department JSON strings
    - name and department are stripped; emptiness is a core rule (core/user_rules.py)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from user_api.core.domain_types import INT32_MIN, INT32_MAX


class UserCreate(BaseModel):
    """User creation payload."""
    model_config = ConfigDict(extra="forbid", strict=True)

    name: str
    age: int = Field(ge=INT32_MIN, le=INT32_MAX)
    department: str

    @field_validator("name", "department")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class User(BaseModel):
    """User response: the persisted record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    age: int
    department: str
