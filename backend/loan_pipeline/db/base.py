"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - Every table (applications, audit trail, notification outbox) inherits from Base
    - Base.metadata is what Alembic and the test fixtures create tables from
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all loan pipeline ORM models."""
    pass
