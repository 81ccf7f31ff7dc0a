from pathlib import Path
from unittest.mock import patch

import pytest

from testplan_agent import main
from testplan_agent.core.domain import PlanOutcome, RunOptions

MODULE = "testplan_agent.main"


@pytest.fixture
def env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("JIRA_BASE_URL", "https://jira.mock.com")
    monkeypatch.setenv("JIRA_USER", "bot@example.com")
    monkeypatch.setenv("JIRA_API_TOKEN", "mock-jira-token")
    monkeypatch.setenv("SRC_ACCESS_TOKEN", "sgp_mock")
    with patch(f"{MODULE}.configure_logging"):
        yield tmp_path


def test_cli_prints_saved_path(env, capsys):
    saved = env / "testplan_PROJ-1.md"
    outcome = PlanOutcome(issue={"id": "1"}, plan="# Plan", saved_path=saved)

    with patch(f"{MODULE}.run_sync", return_value=outcome) as run_sync:
        code = main.cli(["PROJ-1"])

    assert code == main.EXIT_OK
    assert capsys.readouterr().out.strip() == str(saved)
    ticket_id, options = run_sync.call_args.args
    assert ticket_id == "PROJ-1"
    assert options == RunOptions(persist=True, output_directory=Path.cwd())


def test_cli_no_save_prints_plan(env, capsys):
    outcome = PlanOutcome(issue={"id": "1"}, plan="# Plan\n- a")

    with patch(f"{MODULE}.run_sync", return_value=outcome) as run_sync:
        code = main.cli(["PROJ-1", "--no-save", "--output-dir", str(env / "out")])

    assert code == main.EXIT_OK
    assert capsys.readouterr().out == "# Plan\n- a\n"
    options = run_sync.call_args.args[1]
    assert options.persist is False
    assert options.output_directory == env / "out"


def test_cli_model_override_reaches_settings(env):
    outcome = PlanOutcome(issue={}, plan="x")

    with patch(f"{MODULE}.run_sync", return_value=outcome) as run_sync:
        main.cli(["PROJ-1", "--model", "other-model"])

    assert run_sync.call_args.kwargs["settings"].cody.model == "other-model"


def test_cli_returns_no_issue_code_when_fetch_fails(env):
    with patch(f"{MODULE}.run_sync", return_value=None):
        assert main.cli(["PROJ-404"]) == main.EXIT_NO_ISSUE


def test_cli_rejects_missing_credentials(env, monkeypatch):
    monkeypatch.delenv("SRC_ACCESS_TOKEN")

    with patch(f"{MODULE}.run_sync") as run_sync:
        code = main.cli(["PROJ-1"])

    assert code == main.EXIT_CONFIG
    run_sync.assert_not_called()
