from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest
from pydantic import SecretStr

from testplan_agent.core.application.ports.command_runner_port import CommandRunnerPort
from testplan_agent.core.domain import CommandResult
from testplan_agent.infrastructure.configuration.main_settings import Settings
from testplan_agent.infrastructure.tools.chat.cody.config.cody_settings import CodySettings
from testplan_agent.infrastructure.tools.tracker.jira.config.jira_settings import JiraSettings

JIRA_BASE_URL = "https://jira.mock.com"
ACCESS_TOKEN = "sgp_mock_access_token"


@dataclass
class FakeCommandRunner(CommandRunnerPort):
    """Records invocations and replays a canned result (or raises ``error``)."""

    result: CommandResult = field(default_factory=lambda: CommandResult("", "", 0))
    error: Exception | None = None
    calls: list[tuple[list[str], str]] = field(default_factory=list)

    async def run(self, args: Sequence[str], stdin: str) -> CommandResult:
        self.calls.append((list(args), stdin))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def jira_settings() -> JiraSettings:
    return JiraSettings(
        JIRA_BASE_URL=JIRA_BASE_URL,
        JIRA_USER="bot@example.com",
        JIRA_API_TOKEN=SecretStr("mock-jira-token"),
    )


@pytest.fixture
def cody_settings() -> CodySettings:
    return CodySettings(
        SRC_ACCESS_TOKEN=SecretStr(ACCESS_TOKEN),
        SRC_ENDPOINT="https://sourcegraph.mock.com",
    )


@pytest.fixture
def settings(jira_settings, cody_settings) -> Settings:
    return Settings(jira=jira_settings, cody=cody_settings)


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    return FakeCommandRunner()
