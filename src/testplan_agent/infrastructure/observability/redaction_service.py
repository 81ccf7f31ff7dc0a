import re
from collections.abc import Sequence

REDACTED = "[REDACTED]"

# (prefix)(secret) pairs; group 2 is replaced.
SECRET_PATTERNS = [
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Basic\s+)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Authorization:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(--access-token[\s=]+)(\S+)",
    r"((?:api_token|access_token)\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=]+['\"]?)",
]

SECRET_FLAGS = {"--access-token"}


class RedactionService:
    """Masks credentials before they reach the logs."""

    def __init__(self, secrets: Sequence[str] = ()) -> None:
        self._secrets = [s for s in secrets if s]

    def redact_text(self, text: str) -> str:
        if not text:
            return text
        redacted = text
        for secret in self._secrets:
            redacted = redacted.replace(secret, REDACTED)
        for pattern in SECRET_PATTERNS:
            redacted = re.sub(pattern, rf"\1{REDACTED}", redacted, flags=re.IGNORECASE)
        return redacted

    def redact_args(self, args: Sequence[str]) -> list[str]:
        """Redact an argv list; the value following a secret flag is masked."""
        redacted: list[str] = []
        mask_next = False
        for arg in args:
            if mask_next:
                redacted.append(REDACTED)
                mask_next = False
                continue
            mask_next = arg in SECRET_FLAGS
            redacted.append(self.redact_text(arg))
        return redacted
