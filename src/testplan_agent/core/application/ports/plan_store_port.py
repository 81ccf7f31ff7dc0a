from abc import ABC, abstractmethod
from pathlib import Path


class PlanStorePort(ABC):
    @abstractmethod
    async def save(self, directory: Path, file_name: str, content: str) -> Path:
        """Write ``content`` to ``directory / file_name``, replacing any existing file.

        Raises ``OSError`` when the file cannot be written directly inside ``directory``.
        """
