"""SQLAlchemy Declarative Base: shared base class for table metadata.

Invariants:
    - All models inherit from Base
    - Base.metadata is what Alembic and the test fixtures create tables from
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Users API table models."""
    pass
