from __future__ import annotations

from testplan_agent.core.exceptions.plan_agent_error import PlanAgentError


class ConfigurationError(PlanAgentError):
    """Raised when configuration is invalid or incomplete."""
