"""Notification Messages — applicant-facing subject/body per decision status.

Invariants:
    - All functions are pure (no IO, no async, no DB)
    - Every ApplicationStatus maps to exactly one NotificationCategory
    - ACCEPTED body includes the loan amount; every other body embeds the decision reason

Design Decisions:
    - Explicit dict mapping over if/elif chains: every status visible in one place,
      a new status without a template fails loudly with KeyError
"""

from decimal import Decimal

from loan_pipeline.core.domain_types import ApplicationStatus, NotificationCategory
from loan_pipeline.core.loan_types import Application, Decision, NotificationRequest


_CATEGORIES: dict[ApplicationStatus, NotificationCategory] = {
    ApplicationStatus.ACCEPTED: NotificationCategory.APPROVAL,
    ApplicationStatus.REJECTED: NotificationCategory.REJECTION,
    ApplicationStatus.AWAITING_DOCUMENTS: NotificationCategory.AWAITING_DOCUMENTS,
    ApplicationStatus.VERIFICATION_PENDING: NotificationCategory.VERIFICATION_PENDING,
}

_SUBJECTS: dict[NotificationCategory, str] = {
    NotificationCategory.APPROVAL: "Your loan application has been approved",
    NotificationCategory.REJECTION: "Update on your loan application",
    NotificationCategory.AWAITING_DOCUMENTS: "Documents needed for your loan application",
    NotificationCategory.VERIFICATION_PENDING: "Your loan application is pending verification",
}


def format_amount(amount: Decimal | None) -> str:
    """Render a loan amount as currency, e.g. $25,000.00."""
    if amount is None:
        return "$0.00"
    return f"${amount:,.2f}"


def _greeting(application: Application) -> str:
    name = (application.applicant_name or "").strip()
    return f"Dear {name}," if name else "Dear Applicant,"


def _build_body(
    category: NotificationCategory, application: Application, reason: str | None,
) -> str:
    if category == NotificationCategory.APPROVAL:
        return (
            f"Congratulations! Your loan application for "
            f"{format_amount(application.loan_amount)} has been approved. "
            f"We will contact you shortly with the next steps."
        )
    if category == NotificationCategory.AWAITING_DOCUMENTS:
        return (
            f"We need additional documents to continue reviewing your "
            f"application: {reason}. Please upload them to resume processing."
        )
    if category == NotificationCategory.VERIFICATION_PENDING:
        return (
            f"We could not complete the verification of your application yet: "
            f"{reason}. We will retry and let you know the outcome."
        )
    return (
        f"We regret to inform you that your loan application was not "
        f"approved. Reason: {reason}"
    )


def build_notification(
    application: Application, decision: Decision,
) -> NotificationRequest:
    """Build the single notification sent for a pipeline run."""
    category = _CATEGORIES[decision.status]
    body = f"{_greeting(application)}\n\n{_build_body(category, application, decision.reason)}"
    return NotificationRequest(
        recipient=application.email,
        category=category,
        subject=_SUBJECTS[category],
        body=body,
    )
