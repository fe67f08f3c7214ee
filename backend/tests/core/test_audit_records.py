"""Audit Records — build_audit_record field mapping."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from loan_pipeline.core.audit_records import build_audit_record
from loan_pipeline.core.domain_types import ApplicationStatus, AuditEvent, RunId
from loan_pipeline.core.loan_types import Application, Decision


def _make_application() -> Application:
    return Application("Jane Doe", "jane@example.com", "555-0100", Decimal("100"), "Bike")


def test_accepted_record_uses_success_sentinel():
    run_id = RunId(uuid4())
    record = build_audit_record(
        run_id, _make_application(), AuditEvent.FINAL_APPROVAL,
        Decision(ApplicationStatus.ACCEPTED),
    )
    assert record.run_id == run_id
    assert record.applicant_email == "jane@example.com"
    assert record.event == AuditEvent.FINAL_APPROVAL
    assert record.outcome == ApplicationStatus.ACCEPTED
    assert record.details == "Processing successful"


def test_failure_record_carries_reason():
    record = build_audit_record(
        RunId(uuid4()), _make_application(), AuditEvent.EMPLOYMENT_VERIFICATION,
        Decision(ApplicationStatus.VERIFICATION_PENDING, "HR system down"),
    )
    assert record.outcome == ApplicationStatus.VERIFICATION_PENDING
    assert record.details == "HR system down"


def test_timestamp_defaults_to_now_utc():
    before = datetime.now(timezone.utc)
    record = build_audit_record(
        RunId(uuid4()), _make_application(), AuditEvent.BASIC_VALIDATION,
        Decision(ApplicationStatus.REJECTED, "x"),
    )
    assert record.created_at >= before
    assert record.created_at.tzinfo is not None


def test_explicit_timestamp_used():
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    record = build_audit_record(
        RunId(uuid4()), _make_application(), AuditEvent.BASIC_VALIDATION,
        Decision(ApplicationStatus.REJECTED, "x"), now=now,
    )
    assert record.created_at == now
