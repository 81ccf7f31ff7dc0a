class PlanAgentError(Exception):
    """Base class for all errors raised inside testplan_agent."""
