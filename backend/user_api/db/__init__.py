"""Database Metadata: SQLAlchemy declarative base for the ORM tables.

Invariants:
    - Single async engine per process (initialized via init_db)
    - Tables are described here for tests; production schema pre-exists
"""
