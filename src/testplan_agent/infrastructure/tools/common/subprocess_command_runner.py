import asyncio
from collections.abc import Sequence

from testplan_agent.core.application.ports.command_runner_port import CommandRunnerPort
from testplan_agent.core.domain import CommandResult


class SubprocessCommandRunner(CommandRunnerPort):
    """Runs commands with asyncio subprocesses; stdout and stderr are captured separately."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    async def run(self, args: Sequence[str], stdin: str) -> CommandResult:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate(stdin.encode(self._encoding))
        return CommandResult(
            stdout=stdout.decode(self._encoding, errors="replace"),
            stderr=stderr.decode(self._encoding, errors="replace"),
            exit_code=process.returncode if process.returncode is not None else -1,
        )
