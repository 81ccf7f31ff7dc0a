from testplan_agent.core.exceptions.configuration_error import ConfigurationError
from testplan_agent.core.exceptions.provider_error import ProviderError
from testplan_agent.core.exceptions.plan_agent_error import PlanAgentError

__all__ = [
    "ConfigurationError",
    "ProviderError",
    "PlanAgentError",
]
