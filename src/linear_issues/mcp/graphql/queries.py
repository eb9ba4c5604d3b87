"""GraphQL documents sent to the Linear API."""

ISSUE_SUMMARY_FIELDS = """
    id
    identifier
    title
    url
"""

ISSUE_FIELDS = """
    id
    identifier
    title
    description
    url
    priority
    estimate
    dueDate
    sortOrder
    createdAt
    updatedAt
    state { id name }
    assignee { id name }
    labels { nodes { id name } }
    project { id name }
    team { id name key }
    parent { id identifier title }
    children { nodes { id identifier title url } }
"""

CREATE_ISSUE_MUTATION = f"""
mutation CreateIssue($input: IssueCreateInput!) {{
  issueCreate(input: $input) {{
    success
    issue {{ {ISSUE_FIELDS} }}
  }}
}}
"""

CREATE_ISSUES_MUTATION = f"""
mutation CreateIssues($input: IssueBatchCreateInput!) {{
  issueBatchCreate(input: $input) {{
    success
    issues {{ {ISSUE_SUMMARY_FIELDS} }}
  }}
}}
"""

# Aliased so bulk and single updates share the issueUpdate result key.
UPDATE_ISSUES_MUTATION = """
mutation UpdateIssues($ids: [UUID!]!, $input: IssueUpdateInput!) {
  issueUpdate: issueBatchUpdate(ids: $ids, input: $input) {
    success
  }
}
"""

UPDATE_ISSUE_MUTATION = f"""
mutation UpdateIssue($id: String!, $input: IssueUpdateInput!) {{
  issueUpdate(id: $id, input: $input) {{
    success
    issue {{ {ISSUE_SUMMARY_FIELDS} updatedAt }}
  }}
}}
"""

SEARCH_ISSUES_QUERY = f"""
query SearchIssues(
  $filter: IssueFilter,
  $first: Int,
  $after: String,
  $orderBy: PaginationOrderBy
) {{
  issues(filter: $filter, first: $first, after: $after, orderBy: $orderBy) {{
    nodes {{
      {ISSUE_FIELDS}
      comments {{ nodes {{ id body createdAt user {{ id name }} }} }}
    }}
    pageInfo {{ hasNextPage endCursor }}
  }}
}}
"""

DELETE_ISSUE_MUTATION = """
mutation DeleteIssue($id: String!) {
  issueDelete(id: $id) {
    success
  }
}
"""
