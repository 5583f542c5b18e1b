"""Unit tests for DashboardService (jira_cloud.services.dashboard)."""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock

from jira_cloud.core.errors import NoDashboardIDError
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.common import SharePermissionScheme
from jira_cloud.schemas.dashboard import DashboardPayload, DashboardSearchOptions
from jira_cloud.services.dashboard import DashboardService

REQUEST = object()


def _connector(body: bytes = b"", code: int = 200) -> MagicMock:
    client = MagicMock()
    client.new_request.return_value = REQUEST
    client.call = AsyncMock(
        return_value=ResponseScheme(code=code, endpoint="https://x.atlassian.net", method="GET", body=body)
    )
    return client


class TestDashboardService(unittest.TestCase):
    def test_gets_with_filter(self) -> None:
        for version in ("2", "3"):
            client = _connector(b'{"startAt": 0, "total": 1, "dashboards": [{"id": "10000", "isFavourite": true}]}')
            page, _ = asyncio.run(DashboardService(client, version).gets(0, 20, "favourite"))
            client.new_request.assert_called_once_with(
                "GET", f"rest/api/{version}/dashboard?filter=favourite&maxResults=20&startAt=0", None
            )
            self.assertTrue(page.dashboards[0].is_favourite)

    def test_search_maps_each_option_to_its_parameter(self) -> None:
        client = _connector()
        options = DashboardSearchOptions(
            dashboard_name="Ops",
            owner_account_id="uuid-sample",
            group_permission_name="jira-devs",
            order_by="name",
            expand=["owner", "viewUrl"],
        )
        asyncio.run(DashboardService(client, "3").search(options, 0, 50))
        client.new_request.assert_called_once_with(
            "GET",
            "rest/api/3/dashboard/search?accountId=uuid-sample&dashboardName=Ops&expand=owner%2CviewUrl"
            "&groupname=jira-devs&maxResults=50&orderBy=name&startAt=0",
            None,
        )

    def test_create_sends_permission_lists(self) -> None:
        client = _connector(b'{"id": "10001", "name": "Ops"}')
        payload = DashboardPayload(name="Ops", share_permissions=[SharePermissionScheme(type="global")])
        dashboard, _ = asyncio.run(DashboardService(client, "3").create(payload))
        client.new_request.assert_called_once_with(
            "POST",
            "rest/api/3/dashboard",
            {"name": "Ops", "sharePermissions": [{"type": "global"}], "editPermissions": []},
        )
        self.assertEqual(dashboard.id, "10001")

    def test_copy_and_update(self) -> None:
        client = _connector()
        service = DashboardService(client, "2")
        asyncio.run(service.copy("10000", DashboardPayload(name="Copy")))
        asyncio.run(service.update("10000", DashboardPayload(name="Renamed")))
        endpoints = [c[0][:2] for c in client.new_request.call_args_list]
        self.assertEqual(
            endpoints, [("POST", "rest/api/2/dashboard/10000/copy"), ("PUT", "rest/api/2/dashboard/10000")]
        )

    def test_missing_dashboard_id(self) -> None:
        client = _connector()
        service = DashboardService(client, "3")
        with self.assertRaises(NoDashboardIDError):
            asyncio.run(service.get(""))
        with self.assertRaises(NoDashboardIDError):
            asyncio.run(service.delete(""))
        with self.assertRaises(NoDashboardIDError):
            asyncio.run(service.copy("", DashboardPayload()))
        client.new_request.assert_not_called()
