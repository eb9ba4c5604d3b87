"""Shared plumbing for Linear tool handlers."""

import json
import logging
from functools import wraps
from typing import Any, Dict, Iterable, Mapping, Optional

from linear_issues.mcp.auth import LinearAuth
from linear_issues.mcp.errors import IssueOperationError, ValidationError
from linear_issues.mcp.graphql import LinearGraphQLClient
from linear_issues.mcp.responses import ToolResponse

logger = logging.getLogger(__name__)


def operation(name: str):
    """
    Decorator marking a handler coroutine as a tool operation.

    Runs the coroutine inside the handler error boundary so every failure
    comes back as a ToolResponse annotated with the operation name.
    """
    def decorator(method):
        @wraps(method)
        async def wrapper(self, *args, **kwargs) -> ToolResponse:
            try:
                return await method(self, *args, **kwargs)
            except Exception as e:
                return self.handle_error(e, name)
        return wrapper
    return decorator


class BaseHandler:
    """Auth, validation and response helpers shared by handlers."""

    def __init__(
        self,
        auth: LinearAuth,
        graphql_client: Optional[LinearGraphQLClient] = None,
    ):
        self.auth = auth
        self.graphql_client = graphql_client

    def verify_auth(self) -> LinearGraphQLClient:
        """
        Return the client to use for this call.

        Raises:
            AuthError: If no authenticated client is available
        """
        client = self.auth.get_client()
        if self.graphql_client is not None:
            return self.graphql_client
        return client

    @staticmethod
    def validate_required_params(
        args: Mapping[str, Any],
        required: Iterable[str],
    ) -> None:
        """
        Check that each required parameter is present and not None.

        Falsy values like ``0`` or ``""`` count as present.

        Raises:
            ValidationError: Listing every missing parameter
        """
        missing = [name for name in required if args.get(name) is None]
        if missing:
            raise ValidationError.missing(missing)

    @staticmethod
    def require_list(args: Mapping[str, Any], name: str, label: str) -> list:
        value = args[name]
        if not isinstance(value, list):
            raise ValidationError(f"{label} parameter must be an array", fields=[name])
        return value

    @staticmethod
    def create_response(text: str) -> ToolResponse:
        return ToolResponse.success_result(message=text)

    @staticmethod
    def create_json_response(
        data: Any,
        message: Optional[str] = None,
    ) -> ToolResponse:
        """Wrap a JSON-serializable payload; message defaults to its dump."""
        if message is None:
            message = json.dumps(data, indent=2)
        return ToolResponse.success_result(message=message, data=data)

    @staticmethod
    def handle_error(error: Exception, operation_name: str) -> ToolResponse:
        """Convert an exception into a failure response for the operation."""
        if isinstance(error, IssueOperationError):
            logger.warning(
                "%s failed (%s): %s", operation_name, type(error).__name__, error
            )
            errors = [str(error)]
            if isinstance(error, ValidationError) and error.fields:
                errors.append(f"Fields: {', '.join(error.fields)}")
            return ToolResponse.error_result(
                message=f"Failed to {operation_name}: {error}",
                errors=errors,
                error_type=type(error).__name__,
            )

        logger.exception(f"Unexpected error in {operation_name}")
        return ToolResponse.error_result(
            message=f"Failed to {operation_name}: {error}",
            errors=[str(error), "See logs for full traceback"],
            error_type="InternalError",
        )


def summarize(node: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """Project a subset of fields out of an issue node."""
    return {name: node.get(name) for name in fields}
