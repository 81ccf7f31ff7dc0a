from testplan_agent.core.application.ports.chat_port import ChatPort
from testplan_agent.core.application.ports.command_runner_port import CommandRunnerPort
from testplan_agent.core.application.ports.plan_store_port import PlanStorePort
from testplan_agent.core.application.ports.tracker_port import TrackerPort

__all__ = ["ChatPort", "CommandRunnerPort", "PlanStorePort", "TrackerPort"]
