"""Loan Applications — submit for a decision, read accepted applications and audit trails.

Invariants:
    - One POST runs the pipeline exactly once and commits once afterwards
    - Business outcomes (rejected, awaiting documents, pending) are 200 responses, not errors
    - Pipeline collaborators are built per request around the request's DB session

Design Decisions:
    - build_pipeline is a FastAPI dependency: tests override it to inject fakes
    - Credit bureau and employment verifier are not wired here; without a provider
      their stages are skipped
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from loan_pipeline.config import Settings, get_settings
from loan_pipeline.core.errors import ResourceNotFoundError
from loan_pipeline.core.repository_protocols import PipelineCollaborators
from loan_pipeline.infrastructure.database import get_db
from loan_pipeline.infrastructure.document_checklist import RequiredDocumentsChecklist
from loan_pipeline.infrastructure.sql_adapters import (
    SqlApplicationRepository, SqlAuditLog, SqlNotificationOutbox,
)
from loan_pipeline.models.audit_log import AuditLogEntry
from loan_pipeline.models.loan_application import LoanApplicationRecord
from loan_pipeline.schemas.application import (
    ApplicationCreate,
    AuditEntryResponse,
    DecisionResponse,
    StoredApplicationResponse,
)
from loan_pipeline.services.decision_pipeline import DecisionPipeline

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/applications", tags=["applications"])


def build_pipeline(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> DecisionPipeline:
    """Wire SQL-backed collaborators for one request."""
    collaborators = PipelineCollaborators(
        repository=SqlApplicationRepository(db),
        document_validator=(
            RequiredDocumentsChecklist() if settings.document_check_enabled else None
        ),
        notifier=SqlNotificationOutbox(db) if settings.notifications_enabled else None,
        audit_log=SqlAuditLog(db) if settings.audit_enabled else None,
    )
    return DecisionPipeline(collaborators, min_credit_score=settings.min_credit_score)


@router.post("", response_model=DecisionResponse, status_code=status.HTTP_200_OK)
async def submit_application(
    body: ApplicationCreate,
    db: AsyncSession = Depends(get_db),
    pipeline: DecisionPipeline = Depends(build_pipeline),
):
    """Adjudicate a loan application."""
    decision = pipeline.process(body.to_domain())
    await db.commit()
    return DecisionResponse.from_decision(decision)


@router.get("/audit", response_model=list[AuditEntryResponse])
async def list_audit_entries(
    email: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """Audit trail for an applicant, newest first."""
    result = await db.execute(
        select(AuditLogEntry)
        .where(AuditLogEntry.applicant_email == email)
        .order_by(AuditLogEntry.created_at.desc())
        .limit(limit)
        .offset(offset)
    )
    return [AuditEntryResponse.model_validate(e) for e in result.scalars().all()]


@router.get("/{application_id}", response_model=StoredApplicationResponse)
async def get_application(
    application_id: UUID, db: AsyncSession = Depends(get_db),
):
    """Accepted application by id."""
    result = await db.execute(
        select(LoanApplicationRecord)
        .where(LoanApplicationRecord.id == application_id),
    )
    record = result.scalar_one_or_none()
    if record is None:
        raise ResourceNotFoundError("Application", str(application_id))
    return StoredApplicationResponse.model_validate(record)
