"""
Issue operations for the Linear MCP tools.

Each operation confirms an authenticated client, validates its arguments,
delegates to the GraphQL client, checks the ``success`` flag, and reshapes
the payload into a ToolResponse. Failures never escape: the ``operation``
decorator turns them into failure responses.
"""

import json
from typing import Any, Callable, Dict, Mapping

from linear_issues.mcp.errors import BackendError, NotFoundError, ValidationError
from linear_issues.mcp.filters import IssueFilter, to_number
from linear_issues.mcp.handlers.base import BaseHandler, operation, summarize
from linear_issues.mcp.responses import ToolResponse

DEFAULT_PAGE_SIZE = 50
IDENTIFIER_PAGE_SIZE = 100
DEFAULT_ORDER_BY = "updatedAt"


def _passthrough(value: Any, field_name: str) -> Any:
    return value


# Fields editIssue may patch, and how each is coerced before sending.
EDITABLE_FIELDS: Dict[str, Callable[[Any, str], Any]] = {
    "title": _passthrough,
    "description": _passthrough,
    "stateId": _passthrough,
    "priority": to_number,
    "assigneeId": _passthrough,
    "labelIds": _passthrough,
    "projectId": _passthrough,
    "projectMilestoneId": _passthrough,
    "estimate": to_number,
    "dueDate": _passthrough,
    "parentId": _passthrough,
    "sortOrder": to_number,
}

CREATED_ISSUE_FIELDS = ("identifier", "title", "url", "project", "parent", "children")
UPDATED_ISSUE_FIELDS = ("id", "identifier", "title", "url", "updatedAt")


def build_update_input(args: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build the issueUpdate patch from editIssue arguments.

    Only allow-listed fields that are present (not None) are copied; empty
    strings and zeros are kept.
    """
    return {
        name: coerce(args[name], name)
        for name, coerce in EDITABLE_FIELDS.items()
        if args.get(name) is not None
    }


def _describe_relations(issue: Mapping[str, Any]) -> str:
    lines = [f"Created issue {issue.get('identifier')}: {issue.get('title')}"]
    parent = issue.get("parent")
    if parent:
        lines.append(f"Parent: {parent.get('identifier')} ({parent.get('title')})")
    children = (issue.get("children") or {}).get("nodes") or []
    if children:
        lines.append("Children:")
        lines.extend(f"- {c.get('identifier')}: {c.get('title')}" for c in children)
    return "\n".join(lines)


class IssueHandler(BaseHandler):
    """Create, update, search and delete Linear issues."""

    @operation("create issue")
    async def handle_create_issue(self, args: Mapping[str, Any]) -> ToolResponse:
        client = self.verify_auth()
        self.validate_required_params(args, ["title", "description", "teamId"])

        result = await client.create_issue(dict(args))

        payload = result.get("issueCreate") or {}
        issue = payload.get("issue")
        if not payload.get("success") or not issue:
            raise BackendError("Failed to create issue")

        return self.create_json_response(
            {
                "issueCreate": {
                    "success": True,
                    "issue": summarize(issue, CREATED_ISSUE_FIELDS),
                }
            },
            message=_describe_relations(issue),
        )

    @operation("create issues")
    async def handle_create_issues(self, args: Mapping[str, Any]) -> ToolResponse:
        client = self.verify_auth()
        self.validate_required_params(args, ["issues"])
        issues = self.require_list(args, "issues", "Issues")

        result = await client.create_issues(issues)

        payload = result.get("issueBatchCreate") or {}
        if not payload.get("success"):
            raise BackendError("Failed to create issues")

        created = payload.get("issues") or []
        lines = [
            f"- {issue.get('identifier')}: {issue.get('title')}\n  URL: {issue.get('url')}"
            for issue in created
        ]
        return self.create_json_response(
            {"count": len(created), "issues": created},
            message=f"Successfully created {len(created)} issues:\n" + "\n".join(lines),
        )

    @operation("update issues")
    async def handle_bulk_update_issues(self, args: Mapping[str, Any]) -> ToolResponse:
        client = self.verify_auth()
        self.validate_required_params(args, ["issueIds", "update"])
        issue_ids = self.require_list(args, "issueIds", "IssueIds")

        result = await client.update_issues(issue_ids, args["update"])

        if not (result.get("issueUpdate") or {}).get("success"):
            raise BackendError("Failed to update issues")

        # Linear acknowledges the batch with a single success flag, so this is
        # the number of ids submitted, not a per-issue confirmation.
        updated_count = len(issue_ids)
        return self.create_json_response(
            {"count": updated_count, "issueIds": issue_ids},
            message=f"Successfully updated {updated_count} issues",
        )

    @operation("search issues")
    async def handle_search_issues(self, args: Mapping[str, Any]) -> ToolResponse:
        client = self.verify_auth()

        issue_filter = IssueFilter.from_search_args(args)
        result = await client.search_issues(
            issue_filter.to_dict(),
            args.get("first") or DEFAULT_PAGE_SIZE,
            args.get("after"),
            args.get("orderBy") or DEFAULT_ORDER_BY,
        )
        return self.create_json_response(result)

    @operation("search issues by identifier")
    async def handle_search_issues_by_identifier(
        self, args: Mapping[str, Any]
    ) -> ToolResponse:
        client = self.verify_auth()
        self.validate_required_params(args, ["identifiers"])
        identifiers = self.require_list(args, "identifiers", "Identifiers")

        result = await client.search_issues(
            IssueFilter.for_identifiers(identifiers).to_dict(),
            IDENTIFIER_PAGE_SIZE,
            None,
            DEFAULT_ORDER_BY,
        )
        return self.create_json_response(result)

    @operation("get issue")
    async def handle_get_issue(self, args: Mapping[str, Any]) -> ToolResponse:
        """Fetch one issue by identifier, including its comments."""
        client = self.verify_auth()
        self.validate_required_params(args, ["identifier"])

        result = await client.search_issues(
            IssueFilter.for_identifiers([args["identifier"]]).to_dict(),
            1,
            None,
            DEFAULT_ORDER_BY,
        )

        nodes = (result.get("issues") or {}).get("nodes") or []
        if not nodes:
            raise NotFoundError(f"Issue {args['identifier']} not found")

        return self.create_json_response({"issue": nodes[0]})

    @operation("delete issue")
    async def handle_delete_issue(self, args: Mapping[str, Any]) -> ToolResponse:
        client = self.verify_auth()
        self.validate_required_params(args, ["id"])

        result = await client.delete_issue(args["id"])

        if not (result.get("issueDelete") or {}).get("success"):
            raise BackendError("Failed to delete issue")

        return self.create_response(f"Successfully deleted issue {args['id']}")

    @operation("edit issue")
    async def handle_edit_issue(self, args: Mapping[str, Any]) -> ToolResponse:
        client = self.verify_auth()
        self.validate_required_params(args, ["issueId"])
        issue_id = args["issueId"]

        update_input = build_update_input(args)
        if not update_input:
            raise ValidationError(
                f"No fields provided to update for issue {issue_id}",
                fields=["issueId"],
            )

        result = await client.update_issue(issue_id, update_input)

        payload = (result or {}).get("issueUpdate") or {}
        if not payload.get("success") or not payload.get("issue"):
            raise BackendError(
                f"Failed to update issue {issue_id}. "
                f"API response: {json.dumps(result)}"
            )

        return self.create_json_response(
            {
                "issueUpdate": {
                    "success": True,
                    "issue": summarize(payload["issue"], UPDATED_ISSUE_FIELDS),
                }
            },
            message=f"Updated issue {payload['issue'].get('identifier')}",
        )
