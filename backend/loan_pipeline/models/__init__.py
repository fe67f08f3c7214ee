"""ORM Models — SQLAlchemy declarative models for persisted pipeline outputs.

Invariants:
    - All models inherit from Base (db/base.py)
    - Only ACCEPTED applications are stored; every run leaves one audit row and one outbox row

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from loan_pipeline.models.loan_application import LoanApplicationRecord  # noqa: F401
from loan_pipeline.models.audit_log import AuditLogEntry  # noqa: F401
from loan_pipeline.models.notification_outbox import NotificationOutboxEntry  # noqa: F401
