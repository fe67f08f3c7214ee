"""Stage Enforcement — the ordered checks an application must pass before acceptance.

Invariants:
    - Every check returns a Decision on a terminal outcome, None to proceed
    - Every check tests "is my collaborator configured?" first and returns None when not
    - Stage order is fixed: fields -> documents -> credit -> employment
    - Documents: AWAITING_DOCUMENTS iff the validator reports a non-empty missing list;
      any other invalid result is REJECTED
    - Credit bureau failure is REJECTED; employment service failure is VERIFICATION_PENDING
    - min_score is a parameter (default MIN_CREDIT_SCORE), never a literal in the logic

Design Decisions:
    - Checks are plain functions; build_stages binds collaborators so every stage
      exposes the uniform (Application) -> Decision | None signature
    - Credit vs employment unavailability asymmetry kept as-is (see DESIGN.md)
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable

from loan_pipeline.core.domain_types import (
    ApplicationStatus, AuditEvent, MIN_CREDIT_SCORE,
)
from loan_pipeline.core.loan_types import Application, Decision, StageOutcome
from loan_pipeline.core.repository_protocols import (
    CreditBureau, DocumentValidator, EmploymentVerifier, PipelineCollaborators,
)
from loan_pipeline.core.validate_fields import check_fields


def check_documents(
    application: Application, validator: DocumentValidator | None,
) -> Decision | None:
    """Stage 2: documents complete and authentic. Skipped without validator or documents."""
    if validator is None or not application.documents:
        return None
    result = validator.validate_documents(list(application.documents))
    if result.valid:
        return None
    if result.missing_documents:
        return Decision(ApplicationStatus.AWAITING_DOCUMENTS, result.message)
    return Decision(ApplicationStatus.REJECTED, result.message)


def check_credit(
    application: Application,
    bureau: CreditBureau | None,
    min_score: int = MIN_CREDIT_SCORE,
) -> Decision | None:
    """Stage 3: credit score at or above min_score."""
    if bureau is None:
        return None
    result = bureau.get_credit_score(application.phone)
    if not result.successful:
        return Decision(ApplicationStatus.REJECTED, result.message)
    if result.score is None:
        return Decision(ApplicationStatus.REJECTED, "Credit score unavailable")
    if result.score < min_score:
        return Decision(
            ApplicationStatus.REJECTED,
            f"Credit score {result.score} is below minimum required score of {min_score}",
        )
    return None


def check_employment(
    application: Application, verifier: EmploymentVerifier | None,
) -> Decision | None:
    """Stage 4: applicant actively employed."""
    if verifier is None:
        return None
    result = verifier.verify_employment(application.email)
    if not result.successful:
        return Decision(ApplicationStatus.VERIFICATION_PENDING, result.message)
    if not result.employed:
        return Decision(
            ApplicationStatus.REJECTED,
            f"Employment verification failed: {result.message}",
        )
    return None


# ─── Stage List ─────────────────────────────────────────────────

StageCheck = Callable[[Application], StageOutcome]


@dataclass(frozen=True)
class Stage:
    """One pipeline step: the audit tag it reports under and its bound check."""
    event: AuditEvent
    check: StageCheck


def build_stages(
    collaborators: PipelineCollaborators, min_score: int = MIN_CREDIT_SCORE,
) -> list[Stage]:
    """Bind collaborators into the ordered stage list. Append new stages at the end."""
    return [
        Stage(AuditEvent.BASIC_VALIDATION, check_fields),
        Stage(
            AuditEvent.DOCUMENT_VALIDATION,
            partial(check_documents, validator=collaborators.document_validator),
        ),
        Stage(
            AuditEvent.CREDIT_SCORE_CHECK,
            partial(
                check_credit,
                bureau=collaborators.credit_bureau, min_score=min_score,
            ),
        ),
        Stage(
            AuditEvent.EMPLOYMENT_VERIFICATION,
            partial(check_employment, verifier=collaborators.employment_verifier),
        ),
    ]


def run_stages(
    stages: list[Stage], application: Application,
) -> tuple[AuditEvent, Decision] | None:
    """Run stages in order. Returns (event, decision) of the first stage that decides."""
    for stage in stages:
        decision = stage.check(application)
        if decision is not None:
            return stage.event, decision
    return None
