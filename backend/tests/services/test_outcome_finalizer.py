"""Outcome Finalizer — notification and audit for every decision."""

from decimal import Decimal
from uuid import uuid4

from loan_pipeline.core.domain_types import (
    ApplicationStatus, AuditEvent, NotificationCategory, RunId,
)
from loan_pipeline.core.loan_types import Application, Decision
from loan_pipeline.services.outcome_finalizer import OutcomeFinalizer

from tests.fakes import RecordingAuditLog, RecordingNotifier


def _make_application() -> Application:
    return Application("Jane Doe", "jane@example.com", "555-0100", Decimal("9000"), "Laptop")


def test_returns_decision_unchanged():
    decision = Decision(ApplicationStatus.REJECTED, "no")
    finalizer = OutcomeFinalizer(RecordingNotifier(), RecordingAuditLog())
    result = finalizer.finalize(
        RunId(uuid4()), _make_application(), AuditEvent.BASIC_VALIDATION, decision,
    )
    assert result is decision


def test_notifies_then_audits():
    order = []
    notifier = RecordingNotifier(order)
    audit_log = RecordingAuditLog(order)
    run_id = RunId(uuid4())

    OutcomeFinalizer(notifier, audit_log).finalize(
        run_id, _make_application(), AuditEvent.DOCUMENT_VALIDATION,
        Decision(ApplicationStatus.AWAITING_DOCUMENTS, "Missing required documents"),
    )

    assert order == ["notify", "audit"]
    assert notifier.sent[0].category == NotificationCategory.AWAITING_DOCUMENTS
    assert notifier.sent[0].recipient == "jane@example.com"
    record = audit_log.records[0]
    assert record.run_id == run_id
    assert record.event == AuditEvent.DOCUMENT_VALIDATION
    assert record.details == "Missing required documents"


def test_without_collaborators_is_a_pass_through():
    decision = Decision(ApplicationStatus.ACCEPTED)
    result = OutcomeFinalizer().finalize(
        RunId(uuid4()), _make_application(), AuditEvent.FINAL_APPROVAL, decision,
    )
    assert result == decision
