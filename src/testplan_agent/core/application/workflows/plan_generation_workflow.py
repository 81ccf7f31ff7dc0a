"""Deterministic test plan pipeline: Fetch -> Generate -> Persist."""

from pathlib import Path

import structlog
from structlog.contextvars import bound_contextvars

from testplan_agent.core.application.skills.fetch_issue_skill import FetchIssueSkill
from testplan_agent.core.application.skills.generate_plan_skill import GeneratePlanSkill
from testplan_agent.core.application.skills.persist_plan_skill import (
    PersistPlanInput,
    PersistPlanSkill,
)
from testplan_agent.core.application.workflows.base_workflow import BaseWorkflow
from testplan_agent.core.domain import Err, Ok, PlanOutcome, RunOptions

logger = structlog.get_logger()


class PlanGenerationWorkflow(BaseWorkflow):
    """Runs the three stages in order and never raises to its caller.

    Each stage reports failure as a value: a failed fetch ends the run with
    ``None``, a failed generation keeps going with the error text, a failed
    write only leaves ``saved_path`` empty.
    """

    def __init__(
        self,
        fetch: FetchIssueSkill,
        generate: GeneratePlanSkill,
        persist: PersistPlanSkill,
    ) -> None:
        self._fetch = fetch
        self._generate = generate
        self._persist = persist

    async def execute(
        self, ticket_id: str, options: RunOptions | None = None
    ) -> PlanOutcome | None:
        options = options or RunOptions()
        if not ticket_id or not ticket_id.strip():
            logger.error("Ticket id is required", error_type="MissingTicketId")
            return None

        with bound_contextvars(ticket_id=ticket_id, event_type="workflow.test_plan"):
            logger.info("Test plan workflow started", persist=options.persist)
            return await self._run_pipeline(ticket_id, options)

    async def _run_pipeline(self, ticket_id: str, options: RunOptions) -> PlanOutcome | None:
        fetched = await self._fetch.execute(ticket_id)
        if isinstance(fetched, Err):
            logger.warning(
                "Aborting: issue could not be fetched",
                status_code=fetched.status_code,
                reason=fetched.reason,
            )
            return None

        issue = fetched.value
        plan = await self._generate.execute(issue)

        saved_path = None
        if options.persist and plan.text:
            written = await self._persist.execute(
                PersistPlanInput(
                    directory=Path(options.output_directory),
                    file_name=options.plan_file_name(ticket_id),
                    content=plan.text,
                )
            )
            if isinstance(written, Ok):
                saved_path = written.value

        logger.info(
            "Test plan workflow completed",
            plan_failed=plan.error is not None,
            saved_path=str(saved_path) if saved_path else None,
        )
        return PlanOutcome(issue=issue, plan=plan.text, plan_error=plan.error, saved_path=saved_path)
