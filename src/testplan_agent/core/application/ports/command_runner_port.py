from abc import ABC, abstractmethod
from collections.abc import Sequence

from testplan_agent.core.domain import CommandResult


class CommandRunnerPort(ABC):
    """Runs an external executable with text piped to its standard input."""

    @abstractmethod
    async def run(self, args: Sequence[str], stdin: str) -> CommandResult:
        """Run ``args[0]`` with ``args[1:]`` and return the captured streams.

        Raises ``OSError`` when the executable cannot be started.
        """
