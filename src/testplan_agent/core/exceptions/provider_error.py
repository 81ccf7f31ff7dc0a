from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from testplan_agent.core.exceptions.plan_agent_error import PlanAgentError


@dataclass
class ProviderError(PlanAgentError):
    provider: str
    message: str
    status_code: int | None = None
    details: Any = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"
