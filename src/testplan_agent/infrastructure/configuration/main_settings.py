from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from testplan_agent.infrastructure.tools.chat.cody.config.cody_settings import CodySettings
from testplan_agent.infrastructure.tools.tracker.jira.config.jira_settings import JiraSettings


class Settings(BaseSettings):
    """
    Master config combining the per-tool settings.
    Each tool keeps its own env aliases; this class only groups them.
    """

    jira: JiraSettings = Field(default_factory=JiraSettings)
    cody: CodySettings = Field(default_factory=CodySettings)
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def validate_credentials(self) -> None:
        self.jira.validate_credentials()
        self.cody.validate_credentials()

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
