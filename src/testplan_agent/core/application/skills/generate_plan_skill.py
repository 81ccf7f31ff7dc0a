from dataclasses import dataclass

import structlog

from testplan_agent.core.application.ports.chat_port import ChatPort
from testplan_agent.core.application.skills.prompt_templates.plan_prompt_builder import (
    PlanPromptBuilder,
)
from testplan_agent.core.application.skills.skill import BaseSkill
from testplan_agent.core.domain import Err, IssueRecord, Ok

logger = structlog.get_logger()

ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class GeneratedPlan:
    text: str
    error: str | None = None


class GeneratePlanSkill(BaseSkill[IssueRecord, GeneratedPlan]):
    """Asks the chat assistant for a Markdown test plan.

    A failed generation still yields text, ``Error: <reason>``, alongside the
    reason itself so the caller can decide what to do with it.
    """

    def __init__(self, chat: ChatPort, prompt_builder: PlanPromptBuilder | None = None) -> None:
        self._chat = chat
        self._prompt_builder = prompt_builder or PlanPromptBuilder()

    async def execute(self, input_data: IssueRecord) -> GeneratedPlan:
        prompt = self._prompt_builder.build(input_data)
        logger.info("Generating test plan", prompt_chars=len(prompt))
        match await self._chat.chat(prompt):
            case Ok(value=text):
                return GeneratedPlan(text=text)
            case Err(reason=reason):
                logger.error(
                    "Test plan generation failed",
                    error_type="PlanGenerationError",
                    error_details=reason,
                )
                return GeneratedPlan(text=f"{ERROR_PREFIX}{reason}", error=reason)
