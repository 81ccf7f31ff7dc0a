from testplan_agent.core.domain.command_result import CommandResult
from testplan_agent.core.domain.issue_record import IssueRecord
from testplan_agent.core.domain.plan_outcome import PLAN_FILE_TEMPLATE, PlanOutcome, RunOptions
from testplan_agent.core.domain.result import Err, Ok, Result

__all__ = [
    "PLAN_FILE_TEMPLATE",
    "CommandResult",
    "Err",
    "IssueRecord",
    "Ok",
    "PlanOutcome",
    "Result",
    "RunOptions",
]
