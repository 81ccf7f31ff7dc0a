from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from testplan_agent.core.domain.issue_record import IssueRecord

PLAN_FILE_TEMPLATE = "testplan_{ticket_id}.md"


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Per-call options. ``output_directory`` defaults to the working directory at call time."""

    persist: bool = True
    output_directory: Path = field(default_factory=Path.cwd)

    @staticmethod
    def plan_file_name(ticket_id: str) -> str:
        return PLAN_FILE_TEMPLATE.format(ticket_id=ticket_id)


@dataclass(frozen=True, slots=True)
class PlanOutcome:
    """What a run produced.

    ``plan`` keeps the ``Error: <message>`` text when generation failed so
    existing consumers see the same value as before; ``plan_error`` is only
    set in that case and is the reliable way to tell a failure apart from a
    reply that happens to start with ``Error:``.
    """

    issue: IssueRecord | None
    plan: str | None
    plan_error: str | None = None
    saved_path: Path | None = None

    @property
    def plan_failed(self) -> bool:
        return self.plan_error is not None
