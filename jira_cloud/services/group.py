"""Groups and group membership."""

from jira_cloud.core.errors import NoAccountIDError, NoGroupNameError
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.group import GroupBulkOptions, GroupMemberPageScheme, GroupPageScheme, GroupScheme
from jira_cloud.services.base import QueryParams, Service, require


class GroupService(Service):
    async def create(self, group_name: str) -> tuple[GroupScheme, ResponseScheme]:
        require(group_name, NoGroupNameError)
        return await self._call("POST", self._endpoint("group"), GroupScheme, {"name": group_name})

    async def delete(self, group_name: str) -> ResponseScheme:
        require(group_name, NoGroupNameError)
        query = QueryParams().add("groupname", group_name)
        return await self._send("DELETE", self._endpoint("group", query=query))

    async def bulk(
        self,
        options: GroupBulkOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[GroupPageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add_many("groupId", options.group_ids)
            query.add_many("groupName", options.group_names)
        return await self._call("GET", self._endpoint("group", "bulk", query=query), GroupPageScheme)

    async def members(
        self,
        group_name: str,
        inactive: bool = False,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[GroupMemberPageScheme, ResponseScheme]:
        require(group_name, NoGroupNameError)
        query = (
            QueryParams()
            .page(start_at, max_results)
            .add("groupname", group_name)
            .add("includeInactiveUsers", inactive)
        )
        endpoint = self._endpoint("group", "member", query=query)
        return await self._call("GET", endpoint, GroupMemberPageScheme)

    async def add(self, group_name: str, account_id: str) -> tuple[GroupScheme, ResponseScheme]:
        require(group_name, NoGroupNameError)
        require(account_id, NoAccountIDError)
        query = QueryParams().add("groupname", group_name)
        endpoint = self._endpoint("group", "user", query=query)
        return await self._call("POST", endpoint, GroupScheme, {"accountId": account_id})

    async def remove(self, group_name: str, account_id: str) -> ResponseScheme:
        require(group_name, NoGroupNameError)
        require(account_id, NoAccountIDError)
        query = QueryParams().add("groupname", group_name).add("accountId", account_id)
        return await self._send("DELETE", self._endpoint("group", "user", query=query))
