"""Unit tests for jira_cloud.core.transport.JiraClient using httpx.MockTransport (no network)."""

import asyncio
import base64
import json
import unittest

import httpx

from jira_cloud.core.errors import JiraApiError
from jira_cloud.core.transport import JiraClient, ResponseScheme


def _client(handler, **kwargs: object) -> JiraClient:
    return JiraClient(
        "https://test.atlassian.net/",
        "u@test.com",
        "token",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestNewRequest(unittest.TestCase):
    """new_request resolves the path against the site and sets JSON headers."""

    def test_path_resolved_against_site(self) -> None:
        client = _client(lambda r: httpx.Response(200))
        request = client.new_request("GET", "rest/api/3/field/search?maxResults=50&startAt=0")
        self.assertEqual(
            str(request.url),
            "https://test.atlassian.net/rest/api/3/field/search?maxResults=50&startAt=0",
        )
        self.assertEqual(request.headers["Accept"], "application/json")
        self.assertNotIn("Content-Type", request.headers)

    def test_payload_sets_json_body(self) -> None:
        client = _client(lambda r: httpx.Response(200), user_agent="helper/1.0")
        request = client.new_request("POST", "rest/api/3/group", {"name": "jira-devs"})
        self.assertEqual(request.headers["Content-Type"], "application/json")
        self.assertEqual(request.headers["User-Agent"], "helper/1.0")
        self.assertEqual(json.loads(request.content), {"name": "jira-devs"})

    def test_form_request_sets_no_check_token(self) -> None:
        client = _client(lambda r: httpx.Response(200))
        request = client.new_form_request(
            "POST", "rest/api/3/issue/KP-1/attachments", {"file": ("a.txt", b"hello")}
        )
        self.assertEqual(request.headers["X-Atlassian-Token"], "no-check")
        self.assertTrue(request.headers["Content-Type"].startswith("multipart/form-data"))

    def test_empty_site_rejected(self) -> None:
        with self.assertRaises(ValueError):
            JiraClient("  ")


class TestCall(unittest.TestCase):
    def test_success_returns_response_scheme_with_basic_auth(self) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization", "")
            return httpx.Response(200, json={"accountId": "abc"}, headers={"X-Request-Id": "r1"})

        async def run() -> ResponseScheme:
            client = _client(handler)
            try:
                return await client.call(client.new_request("GET", "rest/api/3/myself"))
            finally:
                await client.aclose()

        response = asyncio.run(run())
        expected = "Basic " + base64.b64encode(b"u@test.com:token").decode()
        self.assertEqual(seen["auth"], expected)
        self.assertEqual(response.code, 200)
        self.assertEqual(response.method, "GET")
        self.assertEqual(response.endpoint, "https://test.atlassian.net/rest/api/3/myself")
        self.assertEqual(json.loads(response.body), {"accountId": "abc"})
        self.assertEqual(response.headers["x-request-id"], "r1")

    def test_error_status_raises_with_response(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"errorMessages": ["Field does not exist"], "errors": {}})

        async def run() -> None:
            client = _client(handler)
            try:
                await client.call(client.new_request("DELETE", "rest/api/3/field/customfield_1"))
            finally:
                await client.aclose()

        with self.assertRaises(JiraApiError) as ctx:
            asyncio.run(run())
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn("Field does not exist", ctx.exception.message)
        self.assertEqual(ctx.exception.response.code, 400)
        self.assertIn(b"Field does not exist", ctx.exception.response.body)

    def test_error_detail_from_errors_map(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"errorMessages": [], "errors": {"name": "required"}})

        async def run() -> None:
            client = _client(handler)
            try:
                await client.call(client.new_request("POST", "rest/api/3/screens", {}))
            finally:
                await client.aclose()

        with self.assertRaises(JiraApiError) as ctx:
            asyncio.run(run())
        self.assertIn("name: required", ctx.exception.message)

    def test_non_json_error_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad gateway")

        async def run() -> None:
            client = _client(handler)
            try:
                await client.call(client.new_request("GET", "rest/api/3/myself"))
            finally:
                await client.aclose()

        with self.assertRaises(JiraApiError) as ctx:
            asyncio.run(run())
        self.assertEqual(ctx.exception.message, "Jira returned 502: Bad gateway")

    def test_transport_error_propagates(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async def run() -> None:
            client = _client(handler)
            try:
                await client.call(client.new_request("GET", "rest/api/3/myself"))
            finally:
                await client.aclose()

        with self.assertRaises(httpx.ConnectError):
            asyncio.run(run())
