"""Unit tests for WorklogService (jira_cloud.services.worklog) on both API versions."""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock

from jira_cloud.core.errors import NoIssueKeyOrIDError, NoWorklogIDError, NoWorklogsError
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.worklog import WorklogOptions, WorklogPayload
from jira_cloud.services.worklog import WorklogService

REQUEST = object()

ADF_COMMENT = {
    "type": "doc",
    "version": 1,
    "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Fixed the build"}]}],
}


def _connector(body: bytes = b"", code: int = 200) -> MagicMock:
    client = MagicMock()
    client.new_request.return_value = REQUEST
    client.call = AsyncMock(
        return_value=ResponseScheme(code=code, endpoint="https://x.atlassian.net", method="GET", body=body)
    )
    return client


class TestWorklogRead(unittest.TestCase):
    def test_gets_posts_ids(self) -> None:
        client = _connector(b'[{"id": "100028", "timeSpentSeconds": 3600}]')
        worklogs, _ = asyncio.run(WorklogService(client, "3").gets([100028], ["properties"]))
        client.new_request.assert_called_once_with(
            "POST", "rest/api/3/worklog/list?expand=properties", {"ids": [100028]}
        )
        self.assertEqual(worklogs[0].time_spent_seconds, 3600)

    def test_gets_requires_ids(self) -> None:
        client = _connector()
        with self.assertRaises(NoWorklogsError):
            asyncio.run(WorklogService(client, "3").gets([]))
        client.new_request.assert_not_called()

    def test_issue_page(self) -> None:
        client = _connector(b'{"startAt": 0, "total": 1, "worklogs": [{"id": "1", "comment": "plain"}]}')
        page, _ = asyncio.run(WorklogService(client, "2").issue("KP-1", 0, 50, 1661540000000))
        client.new_request.assert_called_once_with(
            "GET", "rest/api/2/issue/KP-1/worklog?maxResults=50&startAt=0&startedAfter=1661540000000", None
        )
        self.assertEqual(page.worklogs[0].comment, "plain")

    def test_get_decodes_document_comment(self) -> None:
        body = b'{"id": "1", "comment": {"type": "doc", "version": 1, "content": []}}'
        client = _connector(body)
        worklog, _ = asyncio.run(WorklogService(client, "3").get("KP-1", "1"))
        client.new_request.assert_called_once_with("GET", "rest/api/3/issue/KP-1/worklog/1", None)
        self.assertEqual(worklog.comment["type"], "doc")

    def test_deleted_and_updated(self) -> None:
        client = _connector(b'{"since": 1, "lastPage": true, "values": [{"worklogId": 103}]}')
        service = WorklogService(client, "3")
        page, _ = asyncio.run(service.deleted(1))
        asyncio.run(service.updated(0, ["properties"]))
        endpoints = [c[0][1] for c in client.new_request.call_args_list]
        self.assertEqual(
            endpoints, ["rest/api/3/worklog/deleted?since=1", "rest/api/3/worklog/updated?expand=properties"]
        )
        self.assertTrue(page.last_page)
        self.assertEqual(page.values[0].worklog_id, 103)


class TestWorklogWrite(unittest.TestCase):
    def test_add_with_options(self) -> None:
        client = _connector(b'{"id": "100029"}')
        payload = WorklogPayload(comment=ADF_COMMENT, started="2022-08-26T16:00:00.000+0000", time_spent_seconds=60)
        options = WorklogOptions(notify=False, adjust_estimate="new", new_estimate="2d")
        worklog, _ = asyncio.run(WorklogService(client, "3").add("KP-1", payload, options))
        client.new_request.assert_called_once_with(
            "POST",
            "rest/api/3/issue/KP-1/worklog?adjustEstimate=new&newEstimate=2d&notifyUsers=false"
            "&overrideEditableFlag=false",
            {
                "comment": ADF_COMMENT,
                "started": "2022-08-26T16:00:00.000+0000",
                "timeSpentSeconds": 60,
            },
        )
        self.assertEqual(worklog.id, "100029")

    def test_update_v2_plain_comment(self) -> None:
        client = _connector()
        payload = WorklogPayload(comment="Fixed the build", time_spent="1h")
        asyncio.run(WorklogService(client, "2").update("KP-1", "100029", payload))
        client.new_request.assert_called_once_with(
            "PUT", "rest/api/2/issue/KP-1/worklog/100029", {"comment": "Fixed the build", "timeSpent": "1h"}
        )

    def test_delete_validation_order(self) -> None:
        client = _connector()
        service = WorklogService(client, "3")
        with self.assertRaises(NoIssueKeyOrIDError):
            asyncio.run(service.delete("", ""))
        with self.assertRaises(NoWorklogIDError):
            asyncio.run(service.delete("KP-1", ""))
        client.new_request.assert_not_called()
        asyncio.run(service.delete("KP-1", "100029", WorklogOptions(adjust_estimate="manual", reduce_by="1h")))
        client.new_request.assert_called_once_with(
            "DELETE",
            "rest/api/3/issue/KP-1/worklog/100029?adjustEstimate=manual&notifyUsers=true"
            "&overrideEditableFlag=false&reduceBy=1h",
            None,
        )
