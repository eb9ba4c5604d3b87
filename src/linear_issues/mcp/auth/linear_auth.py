"""
Linear API credentials.

Holds the API key used to talk to Linear and hands out the authenticated
GraphQL client. Handlers never see the key itself.
"""

import logging
from typing import Optional

from linear_issues.mcp.errors import AuthError
from linear_issues.mcp.graphql import LINEAR_API_URL, LinearGraphQLClient

LINEAR_API_KEY_ENV = "LINEAR_API_KEY"


class LinearAuth:
    """
    Authentication state for the Linear API.

    Example:
        auth = LinearAuth(api_key="lin_api_...")
        if auth.is_authenticated():
            client = auth.get_client()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = LINEAR_API_URL,
        client: Optional[LinearGraphQLClient] = None,
    ):
        """
        Initialize credentials.

        Args:
            api_key: Linear API key (None leaves the server unauthenticated)
            api_url: GraphQL endpoint URL
            client: Prebuilt client, overrides api_key/api_url
        """
        self.api_url = api_url
        self._api_key = api_key
        self._client = client

        if self._client is None and self._api_key:
            self._client = LinearGraphQLClient(self._api_key, api_url=api_url)

    def is_authenticated(self) -> bool:
        return self._client is not None

    def get_client(self) -> LinearGraphQLClient:
        """
        Return the authenticated client.

        Raises:
            AuthError: If no API key was configured
        """
        if self._client is None:
            raise AuthError(
                "Linear client is not authenticated. "
                f"Set {LINEAR_API_KEY_ENV} or configure linear_api_key."
            )
        return self._client

    def log_status(self, logger_instance: logging.Logger) -> None:
        if self.is_authenticated():
            logger_instance.info("✓ Linear API key configured (%s)", self.api_url)
        else:
            logger_instance.warning(
                "Linear API key not configured; issue tools will fail with AuthError"
            )
