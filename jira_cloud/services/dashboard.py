"""Dashboards."""

from jira_cloud.core.errors import NoDashboardIDError
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.dashboard import (
    DashboardPageScheme,
    DashboardPayload,
    DashboardScheme,
    DashboardSearchOptions,
    DashboardSearchPageScheme,
)
from jira_cloud.services.base import QueryParams, Service, require


class DashboardService(Service):
    async def gets(
        self, start_at: int = 0, max_results: int = 20, filter_by: str = ""
    ) -> tuple[DashboardPageScheme, ResponseScheme]:
        """Dashboards owned by the user; filter_by is "favourite" or "my"."""
        query = QueryParams().page(start_at, max_results).add_if("filter", filter_by)
        return await self._call("GET", self._endpoint("dashboard", query=query), DashboardPageScheme)

    async def create(self, payload: DashboardPayload) -> tuple[DashboardScheme, ResponseScheme]:
        return await self._call("POST", self._endpoint("dashboard"), DashboardScheme, payload)

    async def search(
        self,
        options: DashboardSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[DashboardSearchPageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add_if("accountId", options.owner_account_id)
            query.add_if("dashboardName", options.dashboard_name)
            query.add_if("groupname", options.group_permission_name)
            query.add_if("orderBy", options.order_by)
            query.add_joined("expand", options.expand)
        endpoint = self._endpoint("dashboard", "search", query=query)
        return await self._call("GET", endpoint, DashboardSearchPageScheme)

    async def get(self, dashboard_id: str) -> tuple[DashboardScheme, ResponseScheme]:
        require(dashboard_id, NoDashboardIDError)
        return await self._call("GET", self._endpoint("dashboard", dashboard_id), DashboardScheme)

    async def delete(self, dashboard_id: str) -> ResponseScheme:
        require(dashboard_id, NoDashboardIDError)
        return await self._send("DELETE", self._endpoint("dashboard", dashboard_id))

    async def copy(
        self, dashboard_id: str, payload: DashboardPayload
    ) -> tuple[DashboardScheme, ResponseScheme]:
        require(dashboard_id, NoDashboardIDError)
        endpoint = self._endpoint("dashboard", dashboard_id, "copy")
        return await self._call("POST", endpoint, DashboardScheme, payload)

    async def update(
        self, dashboard_id: str, payload: DashboardPayload
    ) -> tuple[DashboardScheme, ResponseScheme]:
        require(dashboard_id, NoDashboardIDError)
        endpoint = self._endpoint("dashboard", dashboard_id)
        return await self._call("PUT", endpoint, DashboardScheme, payload)
