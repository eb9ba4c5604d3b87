"""Tests for the Linear GraphQL client."""

import json

import httpx
import pytest

from linear_issues.mcp.errors import BackendError
from linear_issues.mcp.graphql import LINEAR_API_URL, LinearGraphQLClient


def _client(handler):
    """Client whose HTTP traffic goes to ``handler``."""
    return LinearGraphQLClient(
        "lin_api_test",
        transport=httpx.MockTransport(handler),
    )


class RecordingHandler:
    """MockTransport handler that records requests and replies with JSON."""

    def __init__(self, body, status_code=200):
        self.body = body
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def payload(self):
        return json.loads(self.requests[-1].content)


class TestExecute:
    """Test request and response handling."""

    @pytest.mark.asyncio
    async def test_posts_query_with_auth_header(self):
        recorder = RecordingHandler({"data": {"issueDelete": {"success": True}}})

        result = await _client(recorder).delete_issue("id-1")

        assert result == {"issueDelete": {"success": True}}
        request = recorder.requests[0]
        assert str(request.url) == LINEAR_API_URL
        assert request.headers["Authorization"] == "lin_api_test"
        assert recorder.payload["variables"] == {"id": "id-1"}
        assert "issueDelete" in recorder.payload["query"]

    @pytest.mark.asyncio
    async def test_graphql_errors_raise(self):
        recorder = RecordingHandler({"errors": [{"message": "Entity not found"}]})

        with pytest.raises(BackendError, match="Entity not found"):
            await _client(recorder).delete_issue("missing")

    @pytest.mark.asyncio
    async def test_unauthorized_raises(self):
        recorder = RecordingHandler({}, status_code=401)

        with pytest.raises(BackendError, match="Invalid or expired"):
            await _client(recorder).delete_issue("id-1")

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        recorder = RecordingHandler({"message": "down"}, status_code=503)

        with pytest.raises(BackendError, match="HTTP 503"):
            await _client(recorder).delete_issue("id-1")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(BackendError, match="request failed"):
            await _client(refuse).delete_issue("id-1")


class TestOperations:
    """Test variables sent for each contract method."""

    @pytest.mark.asyncio
    async def test_create_issue(self):
        recorder = RecordingHandler({"data": {"issueCreate": {"success": True, "issue": {}}}})

        await _client(recorder).create_issue({"title": "T", "teamId": "team"})

        assert recorder.payload["variables"] == {"input": {"title": "T", "teamId": "team"}}

    @pytest.mark.asyncio
    async def test_create_issues_wraps_batch(self):
        recorder = RecordingHandler({"data": {"issueBatchCreate": {"success": True, "issues": []}}})

        await _client(recorder).create_issues([{"title": "A"}])

        assert recorder.payload["variables"] == {"input": {"issues": [{"title": "A"}]}}

    @pytest.mark.asyncio
    async def test_update_issues_result_key(self):
        recorder = RecordingHandler({"data": {"issueUpdate": {"success": True}}})

        result = await _client(recorder).update_issues(["a", "b"], {"stateId": "s"})

        assert result == {"issueUpdate": {"success": True}}
        assert recorder.payload["variables"] == {"ids": ["a", "b"], "input": {"stateId": "s"}}
        assert "issueBatchUpdate" in recorder.payload["query"]

    @pytest.mark.asyncio
    async def test_update_issue(self):
        recorder = RecordingHandler({"data": {"issueUpdate": {"success": True, "issue": {}}}})

        await _client(recorder).update_issue("id-1", {"priority": 2})

        assert recorder.payload["variables"] == {"id": "id-1", "input": {"priority": 2}}

    @pytest.mark.asyncio
    async def test_search_issues_omits_missing_cursor(self):
        recorder = RecordingHandler({"data": {"issues": {"nodes": [], "pageInfo": {}}}})

        await _client(recorder).search_issues({"search": "bug"}, 25, None, "createdAt")

        assert recorder.payload["variables"] == {
            "filter": {"search": "bug"},
            "first": 25,
            "orderBy": "createdAt",
        }

    @pytest.mark.asyncio
    async def test_search_issues_forwards_cursor(self):
        recorder = RecordingHandler({"data": {"issues": {"nodes": [], "pageInfo": {}}}})

        await _client(recorder).search_issues({}, 50, "cursor-2")

        assert recorder.payload["variables"]["after"] == "cursor-2"
        assert recorder.payload["variables"]["orderBy"] == "updatedAt"
