"""Decision Pipeline — orchestration, short-circuit and exactly-once side effects.

Invariants:
    - Later stages never run once an earlier stage decides
    - notifier and audit log called exactly once per process() call
    - repository.save called once iff ACCEPTED, before notification and audit
    - Omitted collaborators never raise and never block acceptance
    - Two identical runs give identical decisions

Design Decisions:
    - Recording fakes (tests/fakes.py) over MagicMock: call lists read like the scenario
"""

from dataclasses import replace
from decimal import Decimal
from itertools import combinations
from unittest.mock import MagicMock

import pytest

from loan_pipeline.core.domain_types import (
    ApplicationStatus, AuditEvent, DocumentType, NotificationCategory,
)
from loan_pipeline.core.errors import MissingApplicationError
from loan_pipeline.core.loan_types import (
    Application,
    CreditScoreResult,
    Decision,
    Document,
    DocumentValidationResult,
    EmploymentVerificationResult,
)
from loan_pipeline.core.repository_protocols import PipelineCollaborators
from loan_pipeline.services.decision_pipeline import DecisionPipeline

from tests.fakes import (
    RecordingAuditLog,
    RecordingNotifier,
    RecordingRepository,
    StubCreditBureau,
    StubDocumentValidator,
    StubEmploymentVerifier,
)


def _make_application(**overrides) -> Application:
    app = Application(
        applicant_name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        loan_amount=Decimal("50000"),
        loan_purpose="Home renovation",
        documents=(
            Document(DocumentType.ID_PROOF, "s3://docs/id.pdf"),
            Document(DocumentType.INCOME_PROOF, "s3://docs/payslip.pdf"),
            Document(DocumentType.ADDRESS_PROOF, "s3://docs/bill.pdf"),
        ),
    )
    return replace(app, **overrides)


def _make_collaborators(**overrides) -> dict:
    collaborators = {
        "repository": RecordingRepository(),
        "document_validator": StubDocumentValidator(),
        "credit_bureau": StubCreditBureau(),
        "employment_verifier": StubEmploymentVerifier(),
        "notifier": RecordingNotifier(),
        "audit_log": RecordingAuditLog(),
    }
    collaborators.update(overrides)
    return collaborators


def _pipeline(collaborators: dict, **kwargs) -> DecisionPipeline:
    return DecisionPipeline(PipelineCollaborators(**collaborators), **kwargs)


# ─── Scenarios ───────────────────────────────────────────────────

def test_bare_pipeline_accepts_complete_application():
    """No optional collaborators, no documents -> ACCEPTED, saved once."""
    repository = RecordingRepository()
    pipeline = DecisionPipeline(PipelineCollaborators(repository=repository))
    app = _make_application(documents=())

    decision = pipeline.process(app)

    assert decision == Decision(ApplicationStatus.ACCEPTED, None)
    assert repository.saved == [app]


def test_missing_name_rejected_before_any_collaborator():
    c = _make_collaborators()
    decision = _pipeline(c).process(_make_application(applicant_name=None))

    assert decision.status == ApplicationStatus.REJECTED
    assert "Applicant name is required" in decision.reason
    assert c["document_validator"].calls == []
    assert c["credit_bureau"].calls == []
    assert c["employment_verifier"].calls == []
    assert c["repository"].saved == []
    assert c["audit_log"].records[0].event == AuditEvent.BASIC_VALIDATION


def test_missing_documents_await_resubmission():
    c = _make_collaborators(document_validator=StubDocumentValidator(
        DocumentValidationResult(
            valid=False,
            message="Missing required documents",
            missing_documents=["INCOME_PROOF", "ADDRESS_PROOF"],
        ),
    ))
    app = _make_application(
        documents=(Document(DocumentType.ID_PROOF, "s3://docs/id.pdf"),),
    )

    decision = _pipeline(c).process(app)

    assert decision == Decision(
        ApplicationStatus.AWAITING_DOCUMENTS, "Missing required documents",
    )
    assert c["repository"].saved == []
    assert c["credit_bureau"].calls == []
    assert c["employment_verifier"].calls == []
    assert c["notifier"].sent[0].category == NotificationCategory.AWAITING_DOCUMENTS


def test_low_credit_score_rejected_without_employment_check():
    c = _make_collaborators(credit_bureau=StubCreditBureau(
        CreditScoreResult(successful=True, score=580, message="ok"),
    ))

    decision = _pipeline(c).process(_make_application())

    assert decision == Decision(
        ApplicationStatus.REJECTED,
        "Credit score 580 is below minimum required score of 650",
    )
    assert c["employment_verifier"].calls == []
    assert c["audit_log"].records[0].event == AuditEvent.CREDIT_SCORE_CHECK


def test_employment_service_down_is_pending():
    c = _make_collaborators(employment_verifier=StubEmploymentVerifier(
        EmploymentVerificationResult(
            successful=False, employed=False, message="HR system down",
        ),
    ))

    decision = _pipeline(c).process(_make_application())

    assert decision == Decision(ApplicationStatus.VERIFICATION_PENDING, "HR system down")
    assert c["repository"].saved == []
    assert c["audit_log"].records[0].details == "HR system down"


def test_all_checks_pass_approves_and_records():
    c = _make_collaborators()

    decision = _pipeline(c).process(_make_application())

    assert decision.status == ApplicationStatus.ACCEPTED
    assert len(c["repository"].saved) == 1
    assert len(c["notifier"].sent) == 1
    notification = c["notifier"].sent[0]
    assert notification.category == NotificationCategory.APPROVAL
    assert "$50,000.00" in notification.body
    assert len(c["audit_log"].records) == 1
    record = c["audit_log"].records[0]
    assert record.outcome == ApplicationStatus.ACCEPTED
    assert record.outcome.value == "ACCEPTED"
    assert record.details == "Processing successful"
    assert record.event == AuditEvent.FINAL_APPROVAL


def test_credit_bureau_failure_rejects_not_pending():
    c = _make_collaborators(credit_bureau=StubCreditBureau(
        CreditScoreResult(successful=False, score=None, message="Bureau timeout"),
    ))
    decision = _pipeline(c).process(_make_application())
    assert decision == Decision(ApplicationStatus.REJECTED, "Bureau timeout")


# ─── Properties ──────────────────────────────────────────────────

@pytest.mark.parametrize("overrides", [
    {"applicant_name": ""},
    {"loan_amount": Decimal("0")},
])
def test_side_effects_exactly_once_on_rejection(overrides):
    c = _make_collaborators()
    _pipeline(c).process(_make_application(**overrides))
    assert len(c["notifier"].sent) == 1
    assert len(c["audit_log"].records) == 1
    assert c["repository"].saved == []


def test_persistence_happens_before_notification_and_audit():
    order = []
    repository = MagicMock()
    repository.save.side_effect = lambda app: order.append("save")
    c = _make_collaborators(
        repository=repository,
        notifier=RecordingNotifier(order),
        audit_log=RecordingAuditLog(order),
    )

    _pipeline(c).process(_make_application())

    assert order == ["save", "notify", "audit"]
    repository.save.assert_called_once()


def test_any_subset_of_optional_collaborators_can_be_omitted():
    optional = ("document_validator", "credit_bureau", "employment_verifier")
    for size in range(len(optional) + 1):
        for omitted in combinations(optional, size):
            c = _make_collaborators(**{name: None for name in omitted})
            decision = _pipeline(c).process(_make_application())
            assert decision.status == ApplicationStatus.ACCEPTED, omitted


def test_side_effect_collaborators_can_be_omitted():
    c = _make_collaborators(notifier=None, audit_log=None, repository=None)
    assert _pipeline(c).process(_make_application()).accepted


def test_repeated_runs_give_same_decision():
    c = _make_collaborators(credit_bureau=StubCreditBureau(
        CreditScoreResult(successful=True, score=600, message="ok"),
    ))
    pipeline = _pipeline(c)
    app = _make_application()

    first = pipeline.process(app)
    second = pipeline.process(app)

    assert first == second
    assert len(c["audit_log"].records) == 2


def test_each_run_gets_a_fresh_run_id():
    c = _make_collaborators()
    pipeline = _pipeline(c)
    pipeline.process(_make_application())
    pipeline.process(_make_application())
    run_ids = {r.run_id for r in c["audit_log"].records}
    assert len(run_ids) == 2


def test_min_credit_score_overridable():
    c = _make_collaborators(credit_bureau=StubCreditBureau(
        CreditScoreResult(successful=True, score=700, message="ok"),
    ))
    decision = _pipeline(c, min_credit_score=750).process(_make_application())
    assert decision.reason == "Credit score 700 is below minimum required score of 750"


def test_none_application_is_contract_violation():
    c = _make_collaborators()
    with pytest.raises(MissingApplicationError):
        _pipeline(c).process(None)
    assert c["notifier"].sent == []
    assert c["audit_log"].records == []


def test_default_pipeline_has_four_stages():
    assert len(DecisionPipeline().stages) == 4


def test_nan_amount_rejected_and_audited():
    c = _make_collaborators()
    decision = _pipeline(c).process(_make_application(loan_amount=Decimal("NaN")))
    assert decision == Decision(
        ApplicationStatus.REJECTED, "Loan amount must be greater than zero",
    )
    assert c["credit_bureau"].calls == []
    assert c["audit_log"].records[0].event == AuditEvent.BASIC_VALIDATION
