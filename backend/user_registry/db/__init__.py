"""Database Layer — SQLAlchemy declarative base shared by all ORM models.

Invariants:
    - All models inherit from db.base.Base
"""
