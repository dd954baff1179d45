"""Domain Types: rich types that replace bare primitives for user records.

Invariants:
    - UserId is a positive signed 64-bit integer once parsed
    - INT32 bounds mirror the `age` column type
"""

from typing import NewType


UserId = NewType("UserId", int)

MAX_USER_ID: int = 2**63 - 1

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
