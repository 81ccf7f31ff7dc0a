import structlog

from testplan_agent.core.application.ports.tracker_port import TrackerPort
from testplan_agent.core.application.skills.skill import BaseSkill
from testplan_agent.core.domain import IssueRecord, Result

logger = structlog.get_logger()


class FetchIssueSkill(BaseSkill[str, Result[IssueRecord]]):
    """Fetches the raw issue for a ticket id from the tracker."""

    def __init__(self, tracker: TrackerPort) -> None:
        self._tracker = tracker

    async def execute(self, input_data: str) -> Result[IssueRecord]:
        logger.info("Fetching issue", ticket_id=input_data)
        return await self._tracker.get_issue(input_data)
