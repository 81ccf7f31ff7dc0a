from testplan_agent.core.application.workflows.plan_generation_workflow import (
    PlanGenerationWorkflow,
)

__all__ = ["PlanGenerationWorkflow"]
