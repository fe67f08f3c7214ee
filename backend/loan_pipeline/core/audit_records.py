"""Audit Records — compliance trail entry for one pipeline run."""

from datetime import datetime, timezone

from loan_pipeline.core.domain_types import AuditEvent, RunId, SUCCESS_DETAILS
from loan_pipeline.core.loan_types import Application, AuditRecord, Decision


def build_audit_record(
    run_id: RunId,
    application: Application,
    event: AuditEvent,
    decision: Decision,
    now: datetime | None = None,
) -> AuditRecord:
    """Details carry the decision reason, or the success sentinel on acceptance."""
    return AuditRecord(
        run_id=run_id,
        applicant_email=application.email,
        event=event,
        outcome=decision.status,
        details=decision.reason if decision.reason is not None else SUCCESS_DETAILS,
        created_at=now or datetime.now(timezone.utc),
    )
