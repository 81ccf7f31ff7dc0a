from dataclasses import dataclass
from pathlib import Path

import structlog

from testplan_agent.core.application.ports.plan_store_port import PlanStorePort
from testplan_agent.core.application.skills.skill import BaseSkill
from testplan_agent.core.domain import Err, Ok, Result

logger = structlog.get_logger()


@dataclass(frozen=True)
class PersistPlanInput:
    directory: Path
    file_name: str
    content: str


class PersistPlanSkill(BaseSkill[PersistPlanInput, Result[Path]]):
    """Writes the plan to disk. I/O errors are reported, never raised."""

    def __init__(self, store: PlanStorePort) -> None:
        self._store = store

    async def execute(self, input_data: PersistPlanInput) -> Result[Path]:
        try:
            saved = await self._store.save(
                input_data.directory, input_data.file_name, input_data.content
            )
        except OSError as exc:
            logger.error(
                "Error saving test plan to file",
                path=str(Path(input_data.directory) / input_data.file_name),
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            return Err(str(exc))
        logger.info("Test plan successfully saved", path=str(saved))
        return Ok(saved)
