"""
Async GraphQL client for the Linear API.

Each method posts one GraphQL document and returns the ``data`` object of
the response. HTTP failures and GraphQL ``errors`` arrays surface as
BackendError; the caller decides what a ``success: false`` payload means.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from linear_issues.mcp.errors import BackendError
from linear_issues.mcp.graphql import queries

logger = logging.getLogger(__name__)

LINEAR_API_URL = "https://api.linear.app/graphql"


class LinearGraphQLClient:
    """Authenticated client wrapping Linear GraphQL calls."""

    def __init__(
        self,
        api_key: str,
        api_url: str = LINEAR_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client.

        Args:
            api_key: Linear personal API key or OAuth access token
            api_url: GraphQL endpoint URL
            transport: Optional httpx transport (used by tests)
        """
        self._api_key = api_key
        self.api_url = api_url
        self._transport = transport

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": self._api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL document against Linear.

        Raises:
            BackendError: On HTTP failure or GraphQL errors
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        async with httpx.AsyncClient(transport=self._transport) as http:
            try:
                response = await http.post(
                    self.api_url,
                    headers=self._headers,
                    json=payload,
                )
            except httpx.HTTPError as e:
                raise BackendError(f"Linear API request failed: {e}") from e

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Dict[str, Any]:
        if response.status_code == 401:
            raise BackendError("Invalid or expired Linear API key")
        if response.status_code == 429:
            raise BackendError("Linear rate limit exceeded")
        if response.status_code >= 400:
            raise BackendError(
                f"Linear API error (HTTP {response.status_code}): {response.text}"
            )

        body = response.json()
        if body.get("errors"):
            messages = [e.get("message", str(e)) for e in body["errors"]]
            raise BackendError(f"GraphQL error: {'; '.join(messages)}")

        return body.get("data") or {}

    async def create_issue(self, issue_input: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug("issueCreate for team %s", issue_input.get("teamId"))
        return await self.execute(
            queries.CREATE_ISSUE_MUTATION, {"input": issue_input}
        )

    async def create_issues(self, issues: List[Dict[str, Any]]) -> Dict[str, Any]:
        logger.debug("issueBatchCreate with %d issues", len(issues))
        return await self.execute(
            queries.CREATE_ISSUES_MUTATION, {"input": {"issues": issues}}
        )

    async def update_issues(
        self,
        ids: List[str],
        update: Dict[str, Any],
    ) -> Dict[str, Any]:
        logger.debug("issueBatchUpdate for %d issues", len(ids))
        return await self.execute(
            queries.UPDATE_ISSUES_MUTATION, {"ids": ids, "input": update}
        )

    async def update_issue(
        self,
        issue_id: str,
        update: Dict[str, Any],
    ) -> Dict[str, Any]:
        logger.debug("issueUpdate for %s fields=%s", issue_id, sorted(update))
        return await self.execute(
            queries.UPDATE_ISSUE_MUTATION, {"id": issue_id, "input": update}
        )

    async def search_issues(
        self,
        issue_filter: Dict[str, Any],
        first: int = 50,
        after: Optional[str] = None,
        order_by: str = "updatedAt",
    ) -> Dict[str, Any]:
        """Run a paginated issue search; ``after`` is forwarded as-is."""
        logger.debug("issues search filter=%s first=%s", issue_filter, first)
        variables: Dict[str, Any] = {
            "filter": issue_filter,
            "first": first,
            "orderBy": order_by,
        }
        if after is not None:
            variables["after"] = after
        return await self.execute(queries.SEARCH_ISSUES_QUERY, variables)

    async def delete_issue(self, issue_id: str) -> Dict[str, Any]:
        logger.debug("issueDelete for %s", issue_id)
        return await self.execute(queries.DELETE_ISSUE_MUTATION, {"id": issue_id})
