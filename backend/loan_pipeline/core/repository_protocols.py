"""Boundary Protocols — contracts between the decision core and its collaborators.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Every collaborator is a single-method capability
    - Every collaborator is optional: absence disables its step, never raises
    - PipelineCollaborators is the only way collaborators reach the pipeline

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Synchronous methods: the pipeline runs on the caller's thread; collaborators
      that do IO own their blocking, retries and timeouts
"""

from dataclasses import dataclass
from typing import Protocol, Sequence

from loan_pipeline.core.loan_types import (
    Application,
    AuditRecord,
    CreditScoreResult,
    Document,
    DocumentValidationResult,
    EmploymentVerificationResult,
    NotificationRequest,
)


class ApplicationRepository(Protocol):
    """Persists accepted applications: implemented by shell."""
    def save(self, application: Application) -> None: ...


class DocumentValidator(Protocol):
    """Checks attached documents for completeness and authenticity."""
    def validate_documents(
        self, documents: Sequence[Document],
    ) -> DocumentValidationResult: ...


class CreditBureau(Protocol):
    """Looks up an applicant's credit score by phone number."""
    def get_credit_score(self, phone: str) -> CreditScoreResult: ...


class EmploymentVerifier(Protocol):
    """Confirms the applicant is actively employed."""
    def verify_employment(self, email: str) -> EmploymentVerificationResult: ...


class Notifier(Protocol):
    """Outbound applicant notifications."""
    def send_notification(self, request: NotificationRequest) -> None: ...


class AuditLog(Protocol):
    """Append-only compliance trail."""
    def log_event(self, record: AuditRecord) -> None: ...


# ─── Collaborator Aggregate ─────────────────────────────────────

@dataclass(frozen=True)
class PipelineCollaborators:
    """Every collaborator the pipeline may use, built once at wiring time.

    A None field switches its step off. New stages add a field here instead of
    widening the pipeline constructor.
    """
    repository: ApplicationRepository | None = None
    document_validator: DocumentValidator | None = None
    credit_bureau: CreditBureau | None = None
    employment_verifier: EmploymentVerifier | None = None
    notifier: Notifier | None = None
    audit_log: AuditLog | None = None
