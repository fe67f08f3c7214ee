"""Outcome Finalizer — notifies the applicant and writes the audit record for every run.

Invariants:
    - Called exactly once per pipeline run, on every exit path
    - Notify runs before audit; each only when its collaborator is configured
    - Returns the input Decision unchanged

Design Decisions:
    - Collaborator exceptions propagate: notifier and audit sinks own their failure handling,
      swallowing here would silently drop a compliance record
"""

import logging

from loan_pipeline.core.audit_records import build_audit_record
from loan_pipeline.core.domain_types import AuditEvent, RunId
from loan_pipeline.core.format_notifications import build_notification
from loan_pipeline.core.loan_types import Application, Decision
from loan_pipeline.core.repository_protocols import AuditLog, Notifier

logger = logging.getLogger(__name__)


class OutcomeFinalizer:
    """Single point where every decision is communicated and recorded."""

    def __init__(
        self, notifier: Notifier | None = None, audit_log: AuditLog | None = None,
    ):
        self._notifier = notifier
        self._audit_log = audit_log

    def finalize(
        self,
        run_id: RunId,
        application: Application,
        event: AuditEvent,
        decision: Decision,
    ) -> Decision:
        self._notify(application, decision)
        self._audit(run_id, application, event, decision)
        return decision

    def _notify(self, application: Application, decision: Decision) -> None:
        if self._notifier is None:
            return
        request = build_notification(application, decision)
        self._notifier.send_notification(request)
        logger.debug(
            f"Notification {request.category.value} sent",
            extra={"status": decision.status.value},
        )

    def _audit(
        self,
        run_id: RunId,
        application: Application,
        event: AuditEvent,
        decision: Decision,
    ) -> None:
        if self._audit_log is None:
            return
        record = build_audit_record(run_id, application, event, decision)
        self._audit_log.log_event(record)
