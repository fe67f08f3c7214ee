"""Document Checklist — local DocumentValidator checking the required document set.

Invariants:
    - Missing required types reported in REQUIRED_DOCUMENTS order
    - A required document without a file reference counts as present but unusable
      (invalid, no missing list -> the pipeline rejects)

Design Decisions:
    - Completeness only: authenticity needs a real verification provider, which plugs
      in through the same DocumentValidator protocol
"""

from typing import Sequence

from loan_pipeline.core.domain_types import REQUIRED_DOCUMENTS
from loan_pipeline.core.loan_types import Document, DocumentValidationResult


class RequiredDocumentsChecklist:
    """DocumentValidator that requires ID, income and address proofs."""

    def validate_documents(
        self, documents: Sequence[Document],
    ) -> DocumentValidationResult:
        by_type = {
            getattr(d.document_type, "value", d.document_type): d
            for d in documents
        }
        missing = [
            t.value for t in REQUIRED_DOCUMENTS if t.value not in by_type
        ]
        if missing:
            return DocumentValidationResult(
                valid=False,
                message=f"Missing required documents: {', '.join(missing)}",
                missing_documents=missing,
            )
        unreadable = [
            t.value for t in REQUIRED_DOCUMENTS
            if not (by_type[t.value].file_reference or "").strip()
        ]
        if unreadable:
            return DocumentValidationResult(
                valid=False,
                message=f"Documents without a file attached: {', '.join(unreadable)}",
            )
        return DocumentValidationResult(valid=True, message="All required documents present")
