import asyncio
from pathlib import Path

from testplan_agent.core.application.ports.plan_store_port import PlanStorePort


class FilesystemPlanStore(PlanStorePort):
    """Stores plans as UTF-8 files directly inside the output directory."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    async def save(self, directory: Path, file_name: str, content: str) -> Path:
        return await asyncio.to_thread(self._write, Path(directory), file_name, content)

    def _write(self, directory: Path, file_name: str, content: str) -> Path:
        path = directory / file_name
        if path.parent != directory or path.name in ("", ".", ".."):
            raise OSError(f"Plan file name must not contain path separators: {file_name!r}")
        directory.mkdir(parents=True, exist_ok=True)
        # newline="" keeps line endings exactly as the plan has them.
        with path.open("w", encoding=self._encoding, newline="") as fh:
            fh.write(content)
        return path
