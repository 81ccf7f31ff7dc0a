from abc import ABC, abstractmethod
from typing import Any


class BaseWorkflow(ABC):
    """Abstract base for all deterministic workflow pipelines."""

    @abstractmethod
    async def execute(self, ticket_id: str, options: Any) -> Any:
        """Run the full workflow pipeline for the given ticket."""
