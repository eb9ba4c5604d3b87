"""
Linear API authentication.

Resolves the Linear API key from configuration or the environment and
provides the authenticated GraphQL client to the issue handlers.
"""

from .linear_auth import (
    LINEAR_API_KEY_ENV,
    LinearAuth,
)

__all__ = [
    "LINEAR_API_KEY_ENV",
    "LinearAuth",
]
