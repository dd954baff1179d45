"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - SQLAlchemy exceptions never cross this layer; they become StorageError
"""
