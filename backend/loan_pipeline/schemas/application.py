"""Application Schemas — Pydantic models at the HTTP boundary of the decision pipeline.

Invariants:
    - ApplicationCreate accepts missing/blank fields: required-field rules belong to the
      Field Validator stage, which answers with a REJECTED decision instead of a 400
    - Only shape and type are validated here: loan_amount must parse as a decimal that
      fits the stored Numeric(14, 2) column (at most 2 decimal places, 14 digits)
    - Text fields are stripped once here, so stored rows and audit rows agree
    - to_domain() produces an immutable core Application

Design Decisions:
    - field_validator for side-effect-free transforms (strip): keeps models pure
    - mode="before" strips ahead of the length constraints: whitespace-only values
      never slip past min_length
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from loan_pipeline.core.domain_types import ApplicationStatus
from loan_pipeline.core.loan_types import Application, Decision, Document


def _strip(v):
    return v.strip() if isinstance(v, str) else v


class DocumentIn(BaseModel):
    """Attachment reference submitted with an application."""
    document_type: str = Field(min_length=1, max_length=40)
    file_reference: str = Field("", max_length=1000)

    @field_validator("document_type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        v = _strip(v)
        return v.upper() if isinstance(v, str) else v


class ApplicationCreate(BaseModel):
    """Loan application submission."""
    applicant_name: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=320)
    phone: str | None = Field(None, max_length=40)
    loan_amount: Annotated[Decimal, Field(max_digits=14, decimal_places=2)] | None = None
    loan_purpose: str | None = Field(None, max_length=2000)
    documents: list[DocumentIn] = Field(default_factory=list, max_length=20)

    @field_validator(
        "applicant_name", "email", "phone", "loan_purpose", mode="before",
    )
    @classmethod
    def strip_text(cls, v):
        return _strip(v)

    def to_domain(self) -> Application:
        return Application(
            applicant_name=self.applicant_name,
            email=self.email,
            phone=self.phone,
            loan_amount=self.loan_amount,
            loan_purpose=self.loan_purpose,
            documents=tuple(
                Document(d.document_type, d.file_reference) for d in self.documents
            ),
        )


class DecisionResponse(BaseModel):
    """Outcome returned to the caller."""
    status: ApplicationStatus
    reason: str | None = None

    @classmethod
    def from_decision(cls, decision: Decision) -> "DecisionResponse":
        return cls(status=decision.status, reason=decision.reason)


class StoredApplicationResponse(BaseModel):
    """Accepted application as persisted."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    applicant_name: str
    email: str
    phone: str
    loan_amount: Decimal
    loan_purpose: str
    documents: list[dict]
    created_at: datetime


class AuditEntryResponse(BaseModel):
    """One row of an applicant's audit trail."""
    model_config = ConfigDict(from_attributes=True)

    run_id: UUID
    applicant_email: str | None
    event: str
    outcome: str
    details: str
    created_at: datetime
