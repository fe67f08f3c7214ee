"""AuditLog ORM — append-only compliance trail, one row per pipeline run.

Invariants:
    - run_id correlates the row to the log lines of the same run
    - event names the stage that decided (FINAL_APPROVAL on acceptance)
    - Rows are never updated or deleted by the application
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from loan_pipeline.db.base import Base


class AuditLogEntry(Base):
    """Audit trail entry."""
    __tablename__ = "audit_logs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    run_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, index=True,
    )
    applicant_email: Mapped[str | None] = mapped_column(
        String(320), nullable=True, index=True,
    )
    event: Mapped[str] = mapped_column(String(40), nullable=False)
    outcome: Mapped[str] = mapped_column(String(30), nullable=False)
    details: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
