"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RunId wraps UUID: one fresh value per pipeline run, never stored on the Application
    - ApplicationStatus is a closed set: exactly one status per pipeline run
    - AWAITING_DOCUMENTS only for missing documents, VERIFICATION_PENDING only for
      an unavailable employment service
    - NotificationCategory mirrors ApplicationStatus one-to-one
    - All valid states encoded as Enums: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and to DB string columns without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

RunId = NewType("RunId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ApplicationStatus(str, Enum):
    """Terminal outcome of one pipeline run."""
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    AWAITING_DOCUMENTS = "AWAITING_DOCUMENTS"
    VERIFICATION_PENDING = "VERIFICATION_PENDING"


class DocumentType(str, Enum):
    """Document tags the document validator knows about."""
    ID_PROOF = "ID_PROOF"
    INCOME_PROOF = "INCOME_PROOF"
    ADDRESS_PROOF = "ADDRESS_PROOF"


class AuditEvent(str, Enum):
    """Stage tag recorded on the audit trail: names the stage that decided."""
    BASIC_VALIDATION = "BASIC_VALIDATION"
    DOCUMENT_VALIDATION = "DOCUMENT_VALIDATION"
    CREDIT_SCORE_CHECK = "CREDIT_SCORE_CHECK"
    EMPLOYMENT_VERIFICATION = "EMPLOYMENT_VERIFICATION"
    FINAL_APPROVAL = "FINAL_APPROVAL"


class NotificationCategory(str, Enum):
    """Notification kinds sent to the applicant."""
    APPROVAL = "APPROVAL"
    REJECTION = "REJECTION"
    AWAITING_DOCUMENTS = "AWAITING_DOCUMENTS"
    VERIFICATION_PENDING = "VERIFICATION_PENDING"


# ─── Policy Constants ────────────────────────────────────────────

MIN_CREDIT_SCORE: int = 650
REQUIRED_DOCUMENTS: tuple[DocumentType, ...] = (
    DocumentType.ID_PROOF,
    DocumentType.INCOME_PROOF,
    DocumentType.ADDRESS_PROOF,
)
SUCCESS_DETAILS: str = "Processing successful"
