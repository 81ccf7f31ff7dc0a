"""Functional DI container: builds a fully wired PlanGenerationWorkflow."""

from testplan_agent.core.application.ports.command_runner_port import CommandRunnerPort
from testplan_agent.core.application.ports.plan_store_port import PlanStorePort
from testplan_agent.core.application.skills.fetch_issue_skill import FetchIssueSkill
from testplan_agent.core.application.skills.generate_plan_skill import GeneratePlanSkill
from testplan_agent.core.application.skills.persist_plan_skill import PersistPlanSkill
from testplan_agent.core.application.workflows import PlanGenerationWorkflow
from testplan_agent.infrastructure.configuration.main_settings import Settings
from testplan_agent.infrastructure.observability.redaction_service import RedactionService
from testplan_agent.infrastructure.repositories.filesystem_plan_store import FilesystemPlanStore
from testplan_agent.infrastructure.tools.chat.cody.cody_cli_client import CodyCliClient
from testplan_agent.infrastructure.tools.common.subprocess_command_runner import (
    SubprocessCommandRunner,
)
from testplan_agent.infrastructure.tools.tracker.jira.jira_http_client import JiraHttpClient
from testplan_agent.infrastructure.tools.tracker.jira.jira_rest_adapter import JiraRestAdapter


def build_redactor(settings: Settings) -> RedactionService:
    secrets = [
        secret.get_secret_value()
        for secret in (settings.jira.api_token, settings.cody.access_token)
        if secret is not None
    ]
    return RedactionService(secrets=secrets)


def build_cody_client(
    settings: Settings, command_runner: CommandRunnerPort | None = None
) -> CodyCliClient:
    return CodyCliClient(
        settings=settings.cody,
        runner=command_runner or SubprocessCommandRunner(),
        redactor=build_redactor(settings),
    )


def build_workflow(
    settings: Settings,
    command_runner: CommandRunnerPort | None = None,
    plan_store: PlanStorePort | None = None,
) -> PlanGenerationWorkflow:
    tracker = JiraRestAdapter(JiraHttpClient(settings.jira))
    chat = build_cody_client(settings, command_runner)
    return PlanGenerationWorkflow(
        fetch=FetchIssueSkill(tracker),
        generate=GeneratePlanSkill(chat),
        persist=PersistPlanSkill(plan_store or FilesystemPlanStore()),
    )
