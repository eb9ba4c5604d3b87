"""MCP tools for Linear issue operations.

This module registers one MCP tool per issue operation:
- linear_create_issue: Create a single issue
- linear_create_issues: Create several issues in one batch
- linear_bulk_update_issues: Apply one patch to many issues
- linear_search_issues: Search with filters and cursor pagination
- linear_search_issues_by_identifier: Look up issues by key (e.g. ENG-12)
- linear_get_issue: Fetch one issue with its comments
- linear_delete_issue: Delete an issue
- linear_edit_issue: Patch fields on a single issue

Tool parameters keep Linear's camelCase names since they are passed
through to the GraphQL inputs.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from linear_issues.mcp.handlers import IssueHandler

logger = logging.getLogger(__name__)

Numeric = Union[int, float, str]

ISSUE_TOOL_NAMES = [
    "linear_create_issue",
    "linear_create_issues",
    "linear_bulk_update_issues",
    "linear_search_issues",
    "linear_search_issues_by_identifier",
    "linear_get_issue",
    "linear_delete_issue",
    "linear_edit_issue",
]


def _present(**kwargs: Any) -> Dict[str, Any]:
    """Drop arguments the caller did not supply."""
    return {k: v for k, v in kwargs.items() if v is not None}


def register_issue_tools(mcp_server, handler: IssueHandler):
    """Register issue tools with a FastMCP server.

    Args:
        mcp_server: FastMCP server instance to register tools with
        handler: IssueHandler that executes the operations
    """

    @mcp_server.tool(
        name="linear_create_issue",
        description="Create a Linear issue in a team, optionally under a parent issue",
    )
    async def linear_create_issue(
        title: str,
        description: str,
        teamId: str,
        assigneeId: Optional[str] = None,
        priority: Optional[Numeric] = None,
        projectId: Optional[str] = None,
        parentId: Optional[str] = None,
        stateId: Optional[str] = None,
        labelIds: Optional[List[str]] = None,
        estimate: Optional[Numeric] = None,
        dueDate: Optional[str] = None,
    ) -> Dict[str, Any]:
        result = await handler.handle_create_issue(_present(
            title=title,
            description=description,
            teamId=teamId,
            assigneeId=assigneeId,
            priority=priority,
            projectId=projectId,
            parentId=parentId,
            stateId=stateId,
            labelIds=labelIds,
            estimate=estimate,
            dueDate=dueDate,
        ))
        return result.to_dict()

    @mcp_server.tool(
        name="linear_create_issues",
        description="Create multiple Linear issues in one batch",
    )
    async def linear_create_issues(issues: List[Dict[str, Any]]) -> Dict[str, Any]:
        result = await handler.handle_create_issues({"issues": issues})
        return result.to_dict()

    @mcp_server.tool(
        name="linear_bulk_update_issues",
        description="Apply the same field update to several Linear issues",
    )
    async def linear_bulk_update_issues(
        issueIds: List[str],
        update: Dict[str, Any],
    ) -> Dict[str, Any]:
        result = await handler.handle_bulk_update_issues(
            {"issueIds": issueIds, "update": update}
        )
        return result.to_dict()

    @mcp_server.tool(
        name="linear_search_issues",
        description=(
            "Search Linear issues by text, identifier, project, team, assignee, "
            "state or priority with cursor pagination"
        ),
    )
    async def linear_search_issues(
        query: Optional[str] = None,
        filter: Optional[Dict[str, Any]] = None,
        teamIds: Optional[List[str]] = None,
        assigneeIds: Optional[List[str]] = None,
        states: Optional[List[str]] = None,
        priority: Optional[Numeric] = None,
        first: Optional[int] = None,
        after: Optional[str] = None,
        orderBy: Optional[str] = None,
    ) -> Dict[str, Any]:
        result = await handler.handle_search_issues(_present(
            query=query,
            filter=filter,
            teamIds=teamIds,
            assigneeIds=assigneeIds,
            states=states,
            priority=priority,
            first=first,
            after=after,
            orderBy=orderBy,
        ))
        return result.to_dict()

    @mcp_server.tool(
        name="linear_search_issues_by_identifier",
        description="Find Linear issues by their identifiers (e.g. ['ENG-12', 'ENG-13'])",
    )
    async def linear_search_issues_by_identifier(identifiers: List[str]) -> Dict[str, Any]:
        result = await handler.handle_search_issues_by_identifier(
            {"identifiers": identifiers}
        )
        return result.to_dict()

    @mcp_server.tool(
        name="linear_get_issue",
        description="Get a single Linear issue by identifier, including comments",
    )
    async def linear_get_issue(identifier: str) -> Dict[str, Any]:
        result = await handler.handle_get_issue({"identifier": identifier})
        return result.to_dict()

    @mcp_server.tool(
        name="linear_delete_issue",
        description="Delete a Linear issue",
    )
    async def linear_delete_issue(id: str) -> Dict[str, Any]:
        result = await handler.handle_delete_issue({"id": id})
        return result.to_dict()

    @mcp_server.tool(
        name="linear_edit_issue",
        description="Update fields on a single Linear issue",
    )
    async def linear_edit_issue(
        issueId: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        stateId: Optional[str] = None,
        priority: Optional[Numeric] = None,
        assigneeId: Optional[str] = None,
        labelIds: Optional[List[str]] = None,
        projectId: Optional[str] = None,
        projectMilestoneId: Optional[str] = None,
        estimate: Optional[Numeric] = None,
        dueDate: Optional[str] = None,
        parentId: Optional[str] = None,
        sortOrder: Optional[Numeric] = None,
    ) -> Dict[str, Any]:
        result = await handler.handle_edit_issue(_present(
            issueId=issueId,
            title=title,
            description=description,
            stateId=stateId,
            priority=priority,
            assigneeId=assigneeId,
            labelIds=labelIds,
            projectId=projectId,
            projectMilestoneId=projectMilestoneId,
            estimate=estimate,
            dueDate=dueDate,
            parentId=parentId,
            sortOrder=sortOrder,
        ))
        return result.to_dict()

    logger.info("Registered %d Linear issue tools with MCP server", len(ISSUE_TOOL_NAMES))
