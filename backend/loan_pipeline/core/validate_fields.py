"""Field Validation — required scalar fields on an Application.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Errors reported in field order: name, email, phone, loan amount, loan purpose
    - Strings invalid when None or blank after strip
    - Loan amount invalid when None, not finite (NaN, Infinity) or <= 0
    - check_fields returns a REJECTED Decision joining every error, or None

Design Decisions:
    - Collect all errors instead of first-error-wins: the applicant fixes everything in one pass
"""

from loan_pipeline.core.domain_types import ApplicationStatus
from loan_pipeline.core.loan_types import Application, Decision


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_fields(application: Application) -> list[str]:
    """Return one message per missing or malformed required field."""
    errors: list[str] = []
    if _is_blank(application.applicant_name):
        errors.append("Applicant name is required")
    if _is_blank(application.email):
        errors.append("Email is required")
    if _is_blank(application.phone):
        errors.append("Phone number is required")
    amount = application.loan_amount
    if amount is None or not amount.is_finite() or amount <= 0:
        errors.append("Loan amount must be greater than zero")
    if _is_blank(application.loan_purpose):
        errors.append("Loan purpose is required")
    return errors


def check_fields(application: Application) -> Decision | None:
    """Stage 1: reject when any required field is missing."""
    errors = validate_fields(application)
    if errors:
        return Decision(ApplicationStatus.REJECTED, ", ".join(errors))
    return None
