"""Saved filters and their share permissions."""

from __future__ import annotations

from jira_cloud.core.errors import NoAccountIDError, NoFilterIDError, NoPermissionGrantIDError
from jira_cloud.core.transport import Connector, ResponseScheme
from jira_cloud.schemas.common import SharePermissionScheme
from jira_cloud.schemas.filter import (
    FilterPayload,
    FilterScheme,
    FilterSearchOptions,
    FilterSearchPageScheme,
    PermissionFilterPayload,
    ShareFilterScopeScheme,
)
from jira_cloud.services.base import QueryParams, Service, require


class FilterShareService(Service):
    async def gets(self, filter_id: int) -> tuple[list[SharePermissionScheme], ResponseScheme]:
        require(filter_id, NoFilterIDError)
        endpoint = self._endpoint("filter", filter_id, "permission")
        return await self._call("GET", endpoint, list[SharePermissionScheme])

    async def add(
        self, filter_id: int, payload: PermissionFilterPayload
    ) -> tuple[list[SharePermissionScheme], ResponseScheme]:
        """Share a filter; Jira returns every share permission of the filter."""
        require(filter_id, NoFilterIDError)
        endpoint = self._endpoint("filter", filter_id, "permission")
        return await self._call("POST", endpoint, list[SharePermissionScheme], payload)

    async def get(
        self, filter_id: int, permission_id: int
    ) -> tuple[SharePermissionScheme, ResponseScheme]:
        require(filter_id, NoFilterIDError)
        require(permission_id, NoPermissionGrantIDError)
        endpoint = self._endpoint("filter", filter_id, "permission", permission_id)
        return await self._call("GET", endpoint, SharePermissionScheme)

    async def delete(self, filter_id: int, permission_id: int) -> ResponseScheme:
        require(filter_id, NoFilterIDError)
        require(permission_id, NoPermissionGrantIDError)
        endpoint = self._endpoint("filter", filter_id, "permission", permission_id)
        return await self._send("DELETE", endpoint)


class FilterService(Service):
    def __init__(
        self,
        client: Connector | None,
        version: str,
        share: FilterShareService | None = None,
    ) -> None:
        super().__init__(client, version)
        self.share = share

    async def create(self, payload: FilterPayload) -> tuple[FilterScheme, ResponseScheme]:
        return await self._call("POST", self._endpoint("filter"), FilterScheme, payload)

    async def favorite(self) -> tuple[list[FilterScheme], ResponseScheme]:
        return await self._call("GET", self._endpoint("filter", "favourite"), list[FilterScheme])

    async def my(
        self, favorites: bool = False, expand: list[str] | None = None
    ) -> tuple[list[FilterScheme], ResponseScheme]:
        query = QueryParams().add("includeFavourites", favorites).add_joined("expand", expand)
        return await self._call("GET", self._endpoint("filter", "my", query=query), list[FilterScheme])

    async def search(
        self,
        options: FilterSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[FilterSearchPageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add_joined("expand", options.expand)
            query.add_if("filterName", options.name)
            query.add_if("accountId", options.account_id)
            query.add_if("groupname", options.group)
            query.add_if("projectId", options.project_id)
            query.add_many("id", options.ids)
            query.add_if("orderBy", options.order_by)
        endpoint = self._endpoint("filter", "search", query=query)
        return await self._call("GET", endpoint, FilterSearchPageScheme)

    async def get(
        self, filter_id: int, expand: list[str] | None = None
    ) -> tuple[FilterScheme, ResponseScheme]:
        require(filter_id, NoFilterIDError)
        query = QueryParams().add_joined("expand", expand)
        return await self._call("GET", self._endpoint("filter", filter_id, query=query), FilterScheme)

    async def update(
        self, filter_id: int, payload: FilterPayload
    ) -> tuple[FilterScheme, ResponseScheme]:
        require(filter_id, NoFilterIDError)
        return await self._call("PUT", self._endpoint("filter", filter_id), FilterScheme, payload)

    async def delete(self, filter_id: int) -> ResponseScheme:
        require(filter_id, NoFilterIDError)
        return await self._send("DELETE", self._endpoint("filter", filter_id))

    async def change(self, filter_id: int, account_id: str) -> ResponseScheme:
        """Transfer ownership of a filter."""
        require(filter_id, NoFilterIDError)
        require(account_id, NoAccountIDError)
        endpoint = self._endpoint("filter", filter_id, "owner")
        return await self._send("PUT", endpoint, {"accountId": account_id})

    async def scope(self) -> tuple[ShareFilterScopeScheme, ResponseScheme]:
        """Default share scope for new filters (GLOBAL, AUTHENTICATED or PRIVATE)."""
        endpoint = self._endpoint("filter", "defaultShareScope")
        return await self._call("GET", endpoint, ShareFilterScopeScheme)

    async def set_scope(self, scope: str) -> ResponseScheme:
        endpoint = self._endpoint("filter", "defaultShareScope")
        return await self._send("PUT", endpoint, {"scope": scope})
