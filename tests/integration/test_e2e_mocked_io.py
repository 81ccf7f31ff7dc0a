"""End to end: real workflow wiring, mocked Jira over respx and a fake Cody process."""

import json

import pytest
import respx

from testplan_agent.core.domain import CommandResult, RunOptions
from testplan_agent.main import run, run_sync

ISSUE = {"id": "123", "fields": {"summary": "Fix login bug"}}
PLAN = "# Test Plan\n..."


@pytest.mark.asyncio
async def test_scenario_proj_123(settings, fake_runner, tmp_path):
    fake_runner.result = CommandResult(stdout=PLAN, stderr="", exit_code=0)

    with respx.mock(assert_all_called=True) as respx_mock:
        respx_mock.get("https://jira.mock.com/rest/api/2/issue/PROJ-123").respond(200, json=ISSUE)

        outcome = await run(
            "PROJ-123",
            RunOptions(output_directory=tmp_path),
            settings=settings,
            command_runner=fake_runner,
        )

    assert outcome.issue == ISSUE
    assert outcome.plan == PLAN
    assert (tmp_path / "testplan_PROJ-123.md").read_text(encoding="utf-8") == PLAN

    args, stdin = fake_runner.calls[0]
    assert json.dumps(ISSUE, indent=2) in stdin
    assert args[:3] == ["cody", "chat", "--stdin"]
    assert args[args.index("--endpoint") + 1] == "https://sourcegraph.mock.com"


@pytest.mark.asyncio
@pytest.mark.parametrize("ticket_id", ["PROJ-404", "OTHER-9"])
async def test_missing_issue_never_invokes_cody(settings, fake_runner, tmp_path, ticket_id):
    with respx.mock:
        respx.get(f"https://jira.mock.com/rest/api/2/issue/{ticket_id}").respond(
            404, json={"errorMessages": ["Issue does not exist"]}
        )

        outcome = await run(
            ticket_id,
            RunOptions(output_directory=tmp_path),
            settings=settings,
            command_runner=fake_runner,
        )

    assert outcome is None
    assert fake_runner.calls == []
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_empty_cody_output_is_saved_as_placeholder(settings, fake_runner, tmp_path):
    with respx.mock:
        respx.get("https://jira.mock.com/rest/api/2/issue/PROJ-7").respond(200, json=ISSUE)

        outcome = await run(
            "PROJ-7",
            RunOptions(output_directory=tmp_path),
            settings=settings,
            command_runner=fake_runner,
        )

    assert outcome.plan == "No output generated"
    assert (tmp_path / "testplan_PROJ-7.md").read_text(encoding="utf-8") == "No output generated"


@pytest.mark.asyncio
async def test_cody_failure_is_reported_in_outcome(settings, fake_runner, tmp_path):
    fake_runner.error = FileNotFoundError(2, "No such file or directory", "cody")

    with respx.mock:
        respx.get("https://jira.mock.com/rest/api/2/issue/PROJ-8").respond(200, json=ISSUE)

        outcome = await run(
            "PROJ-8",
            RunOptions(persist=False, output_directory=tmp_path),
            settings=settings,
            command_runner=fake_runner,
        )

    assert outcome.plan.startswith("Error: Unable to start 'cody'")
    assert outcome.plan_failed
    assert list(tmp_path.iterdir()) == []


def test_run_sync_blocks_until_done(settings, fake_runner, tmp_path):
    fake_runner.result = CommandResult(stdout=PLAN, stderr="", exit_code=0)

    with respx.mock:
        respx.get("https://jira.mock.com/rest/api/2/issue/PROJ-9").respond(200, json=ISSUE)

        outcome = run_sync(
            "PROJ-9",
            RunOptions(persist=False, output_directory=tmp_path),
            settings=settings,
            command_runner=fake_runner,
        )

    assert outcome.plan == PLAN


@pytest.mark.asyncio
async def test_control_character_in_ticket_id_returns_none(settings, fake_runner, tmp_path):
    with respx.mock:
        outcome = await run(
            "PROJ-1\x01",
            RunOptions(output_directory=tmp_path),
            settings=settings,
            command_runner=fake_runner,
        )

    assert outcome is None
    assert fake_runner.calls == []
    assert list(tmp_path.iterdir()) == []
