"""Users and user search."""

from __future__ import annotations

from jira_cloud.core.errors import NoAccountIDError, NoAccountSliceError, NoProjectKeySliceError
from jira_cloud.core.transport import Connector, ResponseScheme
from jira_cloud.schemas.group import GroupScheme
from jira_cloud.schemas.user import UserPageScheme, UserPayload, UserScheme
from jira_cloud.services.base import QueryParams, Service, require


class UserSearchService(Service):
    async def do(
        self,
        account_id: str = "",
        query: str = "",
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[list[UserScheme], ResponseScheme]:
        """Users matching a string on display name or email, or a single account id."""
        params = (
            QueryParams()
            .page(start_at, max_results)
            .add_if("accountId", account_id)
            .add_if("query", query)
        )
        endpoint = self._endpoint("user", "search", query=params)
        return await self._call("GET", endpoint, list[UserScheme])

    async def projects(
        self,
        account_id: str,
        project_keys: list[str],
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[list[UserScheme], ResponseScheme]:
        """Users assignable to issues in every one of the given projects."""
        require(project_keys, NoProjectKeySliceError)
        params = (
            QueryParams()
            .page(start_at, max_results)
            .add_joined("projectKeys", project_keys)
            .add_if("accountId", account_id)
        )
        endpoint = self._endpoint("user", "assignable", "multiProjectSearch", query=params)
        return await self._call("GET", endpoint, list[UserScheme])


class UserService(Service):
    def __init__(
        self,
        client: Connector | None,
        version: str,
        search: UserSearchService | None = None,
    ) -> None:
        super().__init__(client, version)
        self.search = search

    async def get(
        self, account_id: str, expand: list[str] | None = None
    ) -> tuple[UserScheme, ResponseScheme]:
        require(account_id, NoAccountIDError)
        query = QueryParams().add("accountId", account_id).add_joined("expand", expand)
        return await self._call("GET", self._endpoint("user", query=query), UserScheme)

    async def create(self, payload: UserPayload) -> tuple[UserScheme, ResponseScheme]:
        return await self._call("POST", self._endpoint("user"), UserScheme, payload)

    async def delete(self, account_id: str) -> ResponseScheme:
        require(account_id, NoAccountIDError)
        query = QueryParams().add("accountId", account_id)
        return await self._send("DELETE", self._endpoint("user", query=query))

    async def find(
        self, account_ids: list[str], start_at: int = 0, max_results: int = 50
    ) -> tuple[UserPageScheme, ResponseScheme]:
        require(account_ids, NoAccountSliceError)
        query = QueryParams().page(start_at, max_results).add_many("accountId", account_ids)
        return await self._call("GET", self._endpoint("user", "bulk", query=query), UserPageScheme)

    async def groups(self, account_id: str) -> tuple[list[GroupScheme], ResponseScheme]:
        require(account_id, NoAccountIDError)
        query = QueryParams().add("accountId", account_id)
        endpoint = self._endpoint("user", "groups", query=query)
        return await self._call("GET", endpoint, list[GroupScheme])

    async def gets(
        self, start_at: int = 0, max_results: int = 50
    ) -> tuple[list[UserScheme], ResponseScheme]:
        """All users, including inactive and app users."""
        query = QueryParams().page(start_at, max_results)
        return await self._call("GET", self._endpoint("users", "search", query=query), list[UserScheme])
