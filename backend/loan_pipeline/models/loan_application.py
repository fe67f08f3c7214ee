"""LoanApplication ORM — accepted applications handed over by the pipeline.

Invariants:
    - Rows are written only on the ACCEPTED path (repository.save)
    - loan_amount stored as Numeric: no float rounding on money
    - documents keeps the submitted order as a JSON list of {document_type, file_reference}

Design Decisions:
    - JSON column for documents: attachments have no lifecycle of their own
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Text, Numeric, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from loan_pipeline.db.base import Base


class LoanApplicationRecord(Base):
    """Accepted loan application."""
    __tablename__ = "loan_applications"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    applicant_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(40), nullable=False)
    loan_amount: Mapped[Decimal] = mapped_column(
        Numeric(14, 2), nullable=False,
    )
    loan_purpose: Mapped[str] = mapped_column(Text, nullable=False)
    documents: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
