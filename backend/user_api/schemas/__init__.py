"""Pydantic Schemas: request/response shapes for API endpoints.

Invariants:
    - Schemas validate at the HTTP boundary; ORM models stay in models/
"""
