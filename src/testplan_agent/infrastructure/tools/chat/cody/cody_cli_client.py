"""Cody CLI client: sends a prompt to ``cody chat --stdin`` and reads the reply."""

from collections.abc import Sequence

import structlog

from testplan_agent.core.application.ports.chat_port import ChatPort
from testplan_agent.core.application.ports.command_runner_port import CommandRunnerPort
from testplan_agent.core.domain import CommandResult, Err, Ok, Result
from testplan_agent.core.exceptions import ProviderError
from testplan_agent.infrastructure.observability.redaction_service import RedactionService
from testplan_agent.infrastructure.tools.chat.cody.config.cody_settings import CodySettings

logger = structlog.get_logger()

NO_OUTPUT = "No output generated"


class CodyCliClient(ChatPort):
    _PROVIDER = "Cody"

    def __init__(
        self,
        settings: CodySettings,
        runner: CommandRunnerPort,
        redactor: RedactionService | None = None,
    ) -> None:
        self._settings = settings
        self._runner = runner
        self._redactor = redactor or RedactionService(secrets=[self._access_token()])

    def build_args(self, extra_args: Sequence[str] = ()) -> list[str]:
        return [
            self._settings.command,
            "chat",
            "--stdin",
            "--access-token",
            self._access_token(),
            "--endpoint",
            self._settings.endpoint,
            "--model",
            self._settings.model,
            *extra_args,
        ]

    async def chat(self, prompt: str, extra_args: Sequence[str] = ()) -> Result[str]:
        try:
            output = await self._invoke(prompt, self.build_args(extra_args))
        except ProviderError as exc:
            logger.error(
                "Error running Cody chat",
                error_type="ProviderError",
                error_details=exc.message,
                source_system=self._PROVIDER,
            )
            return Err(exc.message)
        except Exception as exc:  # noqa: BLE001
            message = self._redactor.redact_text(str(exc))
            logger.error(
                "Error running Cody chat",
                error_type=type(exc).__name__,
                error_details=message,
                source_system=self._PROVIDER,
            )
            return Err(message)
        return Ok(output or NO_OUTPUT)

    async def _invoke(self, prompt: str, args: list[str]) -> str:
        logger.info(
            "Invoking Cody",
            command=" ".join(self._redactor.redact_args(args)),
            source_system=self._PROVIDER,
        )
        try:
            result = await self._runner.run(args, prompt)
        except OSError as exc:
            raise ProviderError(
                provider=self._PROVIDER,
                message=f"Unable to start '{args[0]}': {self._redactor.redact_text(str(exc))}",
            ) from exc

        self._report_stderr(result)
        if not result.succeeded:
            raise ProviderError(
                provider=self._PROVIDER,
                message=f"The process '{args[0]}' failed with exit code {result.exit_code}",
                details=self._redactor.redact_text(result.stderr),
            )
        return result.stdout

    def _report_stderr(self, result: CommandResult) -> None:
        if result.stderr:
            logger.warning(
                "Cody error output",
                stderr=self._redactor.redact_text(result.stderr),
                source_system=self._PROVIDER,
            )

    def _access_token(self) -> str:
        token = self._settings.access_token
        return token.get_secret_value() if token else ""
