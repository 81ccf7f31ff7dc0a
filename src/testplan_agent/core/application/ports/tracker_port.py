from abc import ABC, abstractmethod

from testplan_agent.core.domain import IssueRecord, Result


class TrackerPort(ABC):
    @abstractmethod
    async def get_issue(self, ticket_id: str) -> Result[IssueRecord]:
        pass
