"""Loan Types — value objects flowing through the decision pipeline.

Invariants:
    - Application and Document are frozen: immutable for the duration of a run
    - Decision.reason is None only on ACCEPTED
    - StageOutcome None means "no issue, proceed"; a Decision stops the pipeline
    - Collaborator results are plain data: success/failure is a flag, never an exception

Design Decisions:
    - Frozen dataclasses over Pydantic models: core stays free of validation side effects,
      Pydantic lives at the API boundary (schemas/) only
    - loan_amount as Decimal: money never goes through float
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from loan_pipeline.core.domain_types import (
    ApplicationStatus, AuditEvent, DocumentType, NotificationCategory, RunId,
)


@dataclass(frozen=True)
class Document:
    """Attachment owned by an Application."""
    document_type: DocumentType | str
    file_reference: str


@dataclass(frozen=True)
class Application:
    """Loan application under adjudication: constructed by the caller."""
    applicant_name: str | None
    email: str | None
    phone: str | None
    loan_amount: Decimal | None
    loan_purpose: str | None
    documents: tuple[Document, ...] | None = ()


@dataclass(frozen=True)
class Decision:
    """Terminal (status, reason) pair: exactly one per pipeline run."""
    status: ApplicationStatus
    reason: str | None = None

    @property
    def accepted(self) -> bool:
        return self.status == ApplicationStatus.ACCEPTED


StageOutcome = Decision | None


# ─── Collaborator Results ────────────────────────────────────────

@dataclass(frozen=True)
class DocumentValidationResult:
    valid: bool
    message: str
    missing_documents: list[str] | None = None


@dataclass(frozen=True)
class CreditScoreResult:
    successful: bool
    score: int | None
    message: str


@dataclass(frozen=True)
class EmploymentVerificationResult:
    successful: bool
    employed: bool
    message: str
    employer: str | None = None


# ─── Side-Effect Payloads ────────────────────────────────────────

@dataclass(frozen=True)
class NotificationRequest:
    """Outbound applicant message: built once per run."""
    recipient: str | None
    category: NotificationCategory
    subject: str
    body: str


@dataclass(frozen=True)
class AuditRecord:
    """Compliance trail entry: built once per run, right before returning."""
    run_id: RunId
    applicant_email: str | None
    event: AuditEvent
    outcome: ApplicationStatus
    details: str
    created_at: datetime = field(compare=False)
