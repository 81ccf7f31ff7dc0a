"""Entry points: the ``run`` coroutine, its blocking twin and the ``testplan-agent`` CLI."""

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from testplan_agent.core.application.ports.command_runner_port import CommandRunnerPort
from testplan_agent.core.domain import PlanOutcome, RunOptions
from testplan_agent.core.exceptions import ConfigurationError
from testplan_agent.infrastructure.configuration.main_settings import Settings
from testplan_agent.infrastructure.configuration.resolution.container import build_workflow
from testplan_agent.infrastructure.observability.logger_factory_service import configure_logging

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_NO_ISSUE = 1
EXIT_CONFIG = 2


async def run(
    ticket_id: str,
    options: RunOptions | None = None,
    *,
    settings: Settings | None = None,
    command_runner: CommandRunnerPort | None = None,
) -> PlanOutcome | None:
    """Fetch ``ticket_id``, generate its test plan and optionally save it.

    Returns ``None`` when the issue could not be fetched. Never raises for
    tracker, assistant or filesystem failures.
    """
    workflow = build_workflow(settings or Settings(), command_runner=command_runner)
    return await workflow.execute(ticket_id, options)


def run_sync(
    ticket_id: str,
    options: RunOptions | None = None,
    *,
    settings: Settings | None = None,
    command_runner: CommandRunnerPort | None = None,
) -> PlanOutcome | None:
    return asyncio.run(
        run(ticket_id, options, settings=settings, command_runner=command_runner)
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="testplan-agent",
        description="Generate a Markdown test plan for a Jira ticket with Cody.",
    )
    parser.add_argument("ticket_id", help="Jira issue key, e.g. PROJ-123")
    parser.add_argument(
        "--no-save",
        dest="persist",
        action="store_false",
        help="print the plan instead of writing testplan_<ticket>.md",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="directory for the plan file (default: current directory)",
    )
    parser.add_argument("--model", default=None, help="override the Cody model identifier")
    return parser


def cli(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(settings.log_level)

    if args.model:
        settings.cody.model = args.model
    try:
        settings.validate_credentials()
    except ConfigurationError as exc:
        logger.error("Invalid configuration", error_type="ConfigurationError", error_details=str(exc))
        return EXIT_CONFIG

    options = RunOptions(persist=args.persist, output_directory=args.output_dir or Path.cwd())
    outcome = run_sync(args.ticket_id, options, settings=settings)
    if outcome is None:
        return EXIT_NO_ISSUE

    if outcome.saved_path is not None:
        print(outcome.saved_path)
    else:
        print(outcome.plan or "")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(cli())
