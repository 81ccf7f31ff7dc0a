from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from testplan_agent.core.exceptions import ConfigurationError

DEFAULT_ENDPOINT = "https://sourcegraph.com"
DEFAULT_MODEL = "claude-3-5-sonnet-latest"


class CodySettings(BaseSettings):
    """Settings for the Sourcegraph Cody CLI."""

    access_token: SecretStr | None = Field(default=None, alias="SRC_ACCESS_TOKEN")
    endpoint: str = Field(default=DEFAULT_ENDPOINT, alias="SRC_ENDPOINT")
    command: str = Field(default="cody", alias="CODY_COMMAND")
    model: str = Field(default=DEFAULT_MODEL, alias="CODY_MODEL")

    def validate_credentials(self) -> None:
        if not self.access_token or not self.access_token.get_secret_value():
            raise ConfigurationError("Missing Cody configuration: SRC_ACCESS_TOKEN")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
