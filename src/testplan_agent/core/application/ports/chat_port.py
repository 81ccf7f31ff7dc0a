from abc import ABC, abstractmethod
from collections.abc import Sequence

from testplan_agent.core.domain import Result


class ChatPort(ABC):
    """An AI assistant that answers a single free-text prompt."""

    @abstractmethod
    async def chat(self, prompt: str, extra_args: Sequence[str] = ()) -> Result[str]:
        pass
