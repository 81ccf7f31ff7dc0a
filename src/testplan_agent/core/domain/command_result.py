from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured output of an external command."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0
