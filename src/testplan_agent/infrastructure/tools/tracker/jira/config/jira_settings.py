from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from testplan_agent.core.exceptions import ConfigurationError


class JiraSettings(BaseSettings):
    """Connection settings for the Jira REST API."""

    base_url: str = Field(default="", alias="JIRA_BASE_URL")
    user: str = Field(default="", alias="JIRA_USER")
    api_token: SecretStr | None = Field(default=None, alias="JIRA_API_TOKEN")
    timeout_seconds: float = Field(default=10.0, alias="JIRA_TIMEOUT_SECONDS")

    def validate_credentials(self) -> None:
        missing = [
            name
            for name, value in (
                ("JIRA_BASE_URL", self.base_url),
                ("JIRA_USER", self.user),
                ("JIRA_API_TOKEN", self.api_token.get_secret_value() if self.api_token else ""),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing Jira configuration: {', '.join(missing)}")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
