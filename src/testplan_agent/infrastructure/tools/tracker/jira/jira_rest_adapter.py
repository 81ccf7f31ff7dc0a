import json
from typing import NoReturn

import httpx
import structlog

from testplan_agent.core.application.ports.tracker_port import TrackerPort
from testplan_agent.core.domain import Err, IssueRecord, Ok, Result
from testplan_agent.core.exceptions import ProviderError
from testplan_agent.infrastructure.tools.tracker.jira.jira_http_client import JiraHttpClient

logger = structlog.get_logger()

ISSUE_PATH = "rest/api/2/issue/{ticket_id}"


class JiraRestAdapter(TrackerPort):
    """TrackerPort over the Jira REST v2 issue endpoint."""

    _PROVIDER = "Jira"

    def __init__(self, client: JiraHttpClient) -> None:
        self._client = client

    async def get_issue(self, ticket_id: str) -> Result[IssueRecord]:
        try:
            issue = await self._fetch_issue(ticket_id)
        except ProviderError as exc:
            logger.error(
                "Error fetching Jira details",
                error_type="ProviderError",
                error_details=exc.message,
                status_code=exc.status_code,
                response_data=exc.details,
                source_system=self._PROVIDER,
            )
            return Err(exc.message, status_code=exc.status_code, details=exc.details)
        return Ok(issue)

    async def _fetch_issue(self, ticket_id: str) -> IssueRecord:
        path = ISSUE_PATH.format(ticket_id=ticket_id)
        logger.info(
            "Requesting Jira ticket", url=self._client.url_for(path), source_system=self._PROVIDER
        )
        try:
            response = await self._client.get(path)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._raise_transport_error(exc)

        if not response.is_success:
            raise ProviderError(
                provider=self._PROVIDER,
                message=f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                details=self._body_of(response),
            )
        return self._decode(response)

    def _decode(self, response: httpx.Response) -> IssueRecord:
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ProviderError(
                provider=self._PROVIDER,
                message=f"Malformed JSON response: {exc}",
                status_code=response.status_code,
                details=response.text,
            ) from exc
        if not isinstance(body, dict):
            raise ProviderError(
                provider=self._PROVIDER,
                message=f"Expected a JSON object, got {type(body).__name__}",
                status_code=response.status_code,
                details=body,
            )
        return body

    def _raise_transport_error(self, exc: httpx.HTTPError | httpx.InvalidURL) -> NoReturn:
        raise ProviderError(
            provider=self._PROVIDER,
            message=str(exc) or type(exc).__name__,
        ) from exc

    @staticmethod
    def _body_of(response: httpx.Response) -> object:
        try:
            return response.json()
        except ValueError:
            return response.text
