"""User ORM: the `users` table.

Invariants:
    - id is a store-generated BIGINT primary key, never assigned by the app
    - name, age, department are non-nullable
    - rows are only ever inserted; no update or delete path exists
"""

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from user_api.db.base import Base


class User(Base):
    """Persisted user record."""
    __tablename__ = "users"

    # SQLite only autoincrements INTEGER PRIMARY KEY
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    department: Mapped[str] = mapped_column(Text, nullable=False)
