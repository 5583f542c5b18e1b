"""Unit tests for jira_cloud.services.base: query encoding, validation, serialization, decoding."""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock

from pydantic import ValidationError

from jira_cloud.core.errors import (
    NoFieldIDError,
    NoVersionError,
    ResponseDecodeError,
)
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.field import FieldContextPayload, FieldScheme
from jira_cloud.services.base import QueryParams, Service, decode, require, serialize


def _response(body: bytes = b"", code: int = 200) -> ResponseScheme:
    return ResponseScheme(code=code, endpoint="https://x.atlassian.net/rest/api/3/field", method="GET", body=body)


class TestQueryParams(unittest.TestCase):
    """QueryParams encodes with keys sorted and repeated values kept in insertion order."""

    def test_keys_sorted(self) -> None:
        q = QueryParams().add("startAt", 50).add("maxResults", 50).add("isAnyIssueType", True)
        self.assertEqual(q.encode(), "isAnyIssueType=true&maxResults=50&startAt=50")

    def test_repeated_values_keep_order(self) -> None:
        q = QueryParams().add_many("contextId", [10002, 10001]).add("a", "x")
        self.assertEqual(q.encode(), "a=x&contextId=10002&contextId=10001")

    def test_booleans_render_lowercase(self) -> None:
        q = QueryParams().add("onlyOptions", False).add("notifyUsers", True)
        self.assertEqual(q.encode(), "notifyUsers=true&onlyOptions=false")

    def test_add_if_skips_empty_values(self) -> None:
        q = QueryParams().add_if("query", "").add_if("since", 0).add_if("onlyDefault", False)
        q.add_if("projectId", None)
        self.assertFalse(q)
        self.assertEqual(q.encode(), "")

    def test_joined_values_are_escaped(self) -> None:
        q = QueryParams().add_joined("projectKeys", ["DUMMY", "KP"])
        self.assertEqual(q.encode(), "projectKeys=DUMMY%2CKP")

    def test_joined_skipped_when_empty(self) -> None:
        self.assertEqual(QueryParams().add_joined("expand", []).encode(), "")
        self.assertEqual(QueryParams().add_joined("expand", None).encode(), "")

    def test_special_characters_escaped(self) -> None:
        q = QueryParams().add("query", "charles.smith@example.com").add("name", "a b")
        self.assertEqual(q.encode(), "name=a+b&query=charles.smith%40example.com")


class TestRequire(unittest.TestCase):
    def test_raises_named_error(self) -> None:
        for value in ("", 0, [], None):
            with self.assertRaises(NoFieldIDError) as ctx:
                require(value, NoFieldIDError)
            self.assertEqual(ctx.exception.message, "no field id set")

    def test_accepts_present_values(self) -> None:
        require("customfield_10001", NoFieldIDError)
        require(10001, NoFieldIDError)
        require(["1"], NoFieldIDError)


class TestSerialize(unittest.TestCase):
    """serialize dumps models by wire alias and drops None fields."""

    def test_model_by_alias_without_none(self) -> None:
        payload = FieldContextPayload(name="Bug fields", issue_type_ids=[10001])
        self.assertEqual(serialize(payload), {"name": "Bug fields", "issueTypeIds": [10001]})

    def test_nested_in_dict_and_list(self) -> None:
        payload = {"items": [FieldContextPayload(project_ids=[1])], "flag": True}
        self.assertEqual(serialize(payload), {"items": [{"projectIds": [1]}], "flag": True})

    def test_none_passes_through(self) -> None:
        self.assertIsNone(serialize(None))


class TestDecode(unittest.TestCase):
    def test_decodes_model(self) -> None:
        result = decode(_response(b'{"id": "summary", "name": "Summary", "custom": false}'), FieldScheme)
        self.assertEqual(result.id, "summary")
        self.assertFalse(result.custom)

    def test_decodes_list(self) -> None:
        result = decode(_response(b'[{"id": "a"}, {"id": "b"}]'), list[FieldScheme])
        self.assertEqual([f.id for f in result], ["a", "b"])

    def test_unknown_keys_are_kept(self) -> None:
        result = decode(_response(b'{"id": "a", "brandNew": 1}'), FieldScheme)
        self.assertEqual(result.model_extra, {"brandNew": 1})

    def test_empty_body_decodes_to_none(self) -> None:
        self.assertIsNone(decode(_response(b""), FieldScheme))

    def test_invalid_body_raises_with_response(self) -> None:
        response = _response(b"<html>not json</html>")
        with self.assertRaises(ResponseDecodeError) as ctx:
            decode(response, FieldScheme)
        self.assertIs(ctx.exception.response, response)
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)


class TestServiceConstruction(unittest.TestCase):
    def test_empty_version_raises(self) -> None:
        with self.assertRaises(NoVersionError) as ctx:
            Service(MagicMock(), "")
        self.assertEqual(ctx.exception.message, "no module version set")

    def test_accepts_missing_connector(self) -> None:
        for version in ("2", "3"):
            self.assertEqual(Service(None, version).version, version)

    def test_endpoint_without_query_has_no_question_mark(self) -> None:
        service = Service(None, "3")
        self.assertEqual(service._endpoint("field", "search", query=QueryParams()), "rest/api/3/field/search")
        self.assertEqual(
            service._endpoint("group", query=QueryParams().add("groupname", "jira-users")),
            "rest/api/3/group?groupname=jira-users",
        )


class TestServiceDispatch(unittest.TestCase):
    """_call and _send hand the serialized payload to the connector and never catch its errors."""

    def test_call_passes_serialized_payload_and_decodes(self) -> None:
        client = MagicMock()
        client.new_request.return_value = "request"
        client.call = AsyncMock(return_value=_response(b'{"id": "x"}'))
        service = Service(client, "2")
        result, response = asyncio.run(
            service._call("POST", "rest/api/2/field", FieldScheme, FieldContextPayload(name="n"))
        )
        client.new_request.assert_called_once_with("POST", "rest/api/2/field", {"name": "n"})
        client.call.assert_awaited_once_with("request")
        self.assertEqual(result.id, "x")
        self.assertEqual(response.code, 200)

    def test_request_builder_error_propagates_unchanged(self) -> None:
        error = RuntimeError("unable to create the http request")
        client = MagicMock()
        client.new_request.side_effect = error
        client.call = AsyncMock()
        with self.assertRaises(RuntimeError) as ctx:
            asyncio.run(Service(client, "3")._send("GET", "rest/api/3/field"))
        self.assertIs(ctx.exception, error)
        client.call.assert_not_awaited()

    def test_call_error_propagates_unchanged(self) -> None:
        error = ConnectionError("connection reset")
        client = MagicMock()
        client.call = AsyncMock(side_effect=error)
        with self.assertRaises(ConnectionError) as ctx:
            asyncio.run(Service(client, "3")._call("GET", "rest/api/3/field", FieldScheme))
        self.assertIs(ctx.exception, error)
