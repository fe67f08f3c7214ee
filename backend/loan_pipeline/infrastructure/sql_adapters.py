"""SQL Adapters — repository, audit log and notifier backed by one AsyncSession.

Invariants:
    - Adapters only stage rows (AsyncSession.add is synchronous); they never flush or commit
    - The caller commits once after the pipeline returns, so the accepted application,
      its notification and its audit row land in the same transaction
    - Enum values stored as their string value
    - Applicant email stored stripped on both the application and the audit row

Design Decisions:
    - Staging instead of awaiting IO keeps the pipeline synchronous while the shell stays async
"""

from sqlalchemy.ext.asyncio import AsyncSession

from loan_pipeline.core.loan_types import Application, AuditRecord, NotificationRequest
from loan_pipeline.models.audit_log import AuditLogEntry
from loan_pipeline.models.loan_application import LoanApplicationRecord
from loan_pipeline.models.notification_outbox import NotificationOutboxEntry


def _stripped(value: str | None) -> str | None:
    return value.strip() if value is not None else None


def _document_type_value(document_type) -> str:
    return getattr(document_type, "value", document_type)


class SqlApplicationRepository:
    """ApplicationRepository staging accepted applications."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def save(self, application: Application) -> None:
        record = LoanApplicationRecord(
            applicant_name=application.applicant_name.strip(),
            email=application.email.strip(),
            phone=application.phone.strip(),
            loan_amount=application.loan_amount,
            loan_purpose=application.loan_purpose.strip(),
            documents=[
                {
                    "document_type": _document_type_value(d.document_type),
                    "file_reference": d.file_reference,
                }
                for d in application.documents or ()
            ],
        )
        self.db.add(record)


class SqlAuditLog:
    """AuditLog appending to the audit_logs table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def log_event(self, record: AuditRecord) -> None:
        self.db.add(AuditLogEntry(
            run_id=record.run_id,
            applicant_email=_stripped(record.applicant_email),
            event=record.event.value,
            outcome=record.outcome.value,
            details=record.details,
            created_at=record.created_at,
        ))


class SqlNotificationOutbox:
    """Notifier queueing messages in the notification_outbox table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def send_notification(self, request: NotificationRequest) -> None:
        self.db.add(NotificationOutboxEntry(
            recipient=request.recipient,
            category=request.category.value,
            subject=request.subject,
            body=request.body,
        ))
