"""Typed builder for Linear ``IssueFilter`` objects."""

import math
from dataclasses import dataclass
from numbers import Number
from typing import Any, Dict, List, Optional

from linear_issues.mcp.errors import ValidationError


def to_number(value: Any, field_name: str) -> Number:
    """
    Coerce a numeric argument that may arrive as a string.

    Some MCP transports stringify numbers, so ``"2"`` becomes ``2`` and
    ``"2.5"`` becomes ``2.5``. A blank string counts as ``0``. Ints and
    finite floats pass through unchanged.

    Raises:
        ValidationError: If the value is not a finite number
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value

    if isinstance(value, float):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            number = math.nan

    if not math.isfinite(number):
        raise ValidationError(
            f"{field_name} must be numeric, got {value!r}",
            fields=[field_name],
        )
    return number


@dataclass
class IssueFilter:
    """
    Filter clauses for an issue search.

    Unset clauses place no constraint on the search; set clauses combine
    conjunctively on the Linear side.
    """

    identifiers: Optional[List[str]] = None
    search: Optional[str] = None
    project_id: Optional[str] = None
    team_ids: Optional[List[str]] = None
    assignee_ids: Optional[List[str]] = None
    state_names: Optional[List[str]] = None
    priority: Optional[Number] = None

    @classmethod
    def for_identifiers(cls, identifiers: List[str]) -> "IssueFilter":
        return cls(identifiers=list(identifiers))

    @classmethod
    def from_search_args(cls, args: Dict[str, Any]) -> "IssueFilter":
        """
        Build a filter from ``linear_search_issues`` arguments.

        An explicit ``filter.identifier`` wins over the free-text ``query``;
        the remaining constraints are added independently. Presence means
        "not None", so priority 0 and empty lists still constrain.
        """
        requested = args.get("filter") or {}
        issue_filter = cls()

        identifier = requested.get("identifier")
        if identifier is not None:
            issue_filter.identifiers = [identifier]
        elif args.get("query") is not None:
            issue_filter.search = args["query"]

        project_id = ((requested.get("project") or {}).get("id") or {}).get("eq")
        if project_id is not None:
            issue_filter.project_id = project_id

        if args.get("teamIds") is not None:
            issue_filter.team_ids = args["teamIds"]
        if args.get("assigneeIds") is not None:
            issue_filter.assignee_ids = args["assigneeIds"]
        if args.get("states") is not None:
            issue_filter.state_names = args["states"]
        if args.get("priority") is not None:
            issue_filter.priority = to_number(args["priority"], "priority")

        return issue_filter

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the GraphQL ``IssueFilter`` input shape."""
        clauses: Dict[str, Any] = {}
        if self.identifiers is not None:
            clauses["identifier"] = {"in": self.identifiers}
        if self.search is not None:
            clauses["search"] = self.search
        if self.project_id is not None:
            clauses["project"] = {"id": {"eq": self.project_id}}
        if self.team_ids is not None:
            clauses["team"] = {"id": {"in": self.team_ids}}
        if self.assignee_ids is not None:
            clauses["assignee"] = {"id": {"in": self.assignee_ids}}
        if self.state_names is not None:
            clauses["state"] = {"name": {"in": self.state_names}}
        if self.priority is not None:
            clauses["priority"] = {"eq": self.priority}
        return clauses
