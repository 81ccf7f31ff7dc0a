import base64

import httpx

from testplan_agent.infrastructure.tools.tracker.jira.config.jira_settings import JiraSettings


class JiraHttpClient:
    """Thin async wrapper over the Jira REST API using basic auth."""

    def __init__(self, settings: JiraSettings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self._transport = transport

    def _get_headers(self) -> dict[str, str]:
        token = self.settings.api_token.get_secret_value() if self.settings.api_token else ""
        creds = f"{self.settings.user}:{token}"
        encoded = base64.b64encode(creds.encode("utf-8")).decode("utf-8")
        return {
            "Accept": "application/json",
            "Authorization": f"Basic {encoded}",
        }

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(self, path: str) -> httpx.Response:
        url = self.url_for(path)
        async with httpx.AsyncClient(transport=self._transport) as client:
            return await client.get(
                url, headers=self._get_headers(), timeout=self.settings.timeout_seconds
            )
