"""Decision Pipeline — adjudicates one loan application end to end.

Invariants:
    - Stages run in fixed order; the first Decision short-circuits every later stage
    - repository.save is called iff the decision is ACCEPTED, and before finalize
    - OutcomeFinalizer.finalize is called exactly once per process() call
    - No state carried between calls: a fresh RunId per run, stages are stateless
    - Business outcomes are returned as Decisions, never raised

Design Decisions:
    - Imperative shell around the pure stage checks in core/enforce_stages.py
    - Collaborators arrive as one PipelineCollaborators aggregate: adding a stage
      never changes this constructor
"""

import logging
import uuid

from loan_pipeline.core.domain_types import (
    ApplicationStatus, AuditEvent, MIN_CREDIT_SCORE, RunId,
)
from loan_pipeline.core.enforce_stages import Stage, build_stages, run_stages
from loan_pipeline.core.errors import MissingApplicationError
from loan_pipeline.core.loan_types import Application, Decision
from loan_pipeline.core.repository_protocols import PipelineCollaborators
from loan_pipeline.services.outcome_finalizer import OutcomeFinalizer

logger = logging.getLogger(__name__)


class DecisionPipeline:
    """Runs field, document, credit and employment checks, then finalizes."""

    def __init__(
        self,
        collaborators: PipelineCollaborators | None = None,
        min_credit_score: int = MIN_CREDIT_SCORE,
    ):
        self._collaborators = collaborators or PipelineCollaborators()
        self._stages: list[Stage] = build_stages(
            self._collaborators, min_credit_score,
        )
        self._finalizer = OutcomeFinalizer(
            notifier=self._collaborators.notifier,
            audit_log=self._collaborators.audit_log,
        )

    @property
    def stages(self) -> list[Stage]:
        return list(self._stages)

    def process(self, application: Application | None) -> Decision:
        """Adjudicate the application. Always returns exactly one Decision."""
        if application is None:
            raise MissingApplicationError()

        run_id = RunId(uuid.uuid4())
        outcome = run_stages(self._stages, application)

        if outcome is not None:
            event, decision = outcome
            logger.info(
                f"Application stopped at {event.value}: {decision.status.value}",
                extra={
                    "run_id": str(run_id),
                    "stage": event.value,
                    "status": decision.status.value,
                },
            )
        else:
            event = AuditEvent.FINAL_APPROVAL
            decision = self._accept(run_id, application)

        return self._finalizer.finalize(run_id, application, event, decision)

    def _accept(self, run_id: RunId, application: Application) -> Decision:
        repository = self._collaborators.repository
        if repository is not None:
            repository.save(application)
        logger.info(
            "Application accepted",
            extra={
                "run_id": str(run_id),
                "stage": AuditEvent.FINAL_APPROVAL.value,
                "status": ApplicationStatus.ACCEPTED.value,
            },
        )
        return Decision(ApplicationStatus.ACCEPTED, None)
