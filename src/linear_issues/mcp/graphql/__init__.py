"""
Linear GraphQL access layer.

Provides the authenticated client the issue handlers delegate to. Query
documents live in queries.py so they are easy to audit.
"""

__all__ = ["LinearGraphQLClient", "LINEAR_API_URL"]

from .client import LINEAR_API_URL, LinearGraphQLClient
