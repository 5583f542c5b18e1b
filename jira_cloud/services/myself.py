"""The authenticated user and their preferences."""

from typing import Any

from jira_cloud.core.errors import NoKeyError
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.user import UserScheme
from jira_cloud.services.base import QueryParams, Service, require

DEFAULT_DETAILS_EXPAND = ("groups", "applicationRoles")


class MySelfService(Service):
    async def details(
        self, expand: list[str] | tuple[str, ...] = DEFAULT_DETAILS_EXPAND
    ) -> tuple[UserScheme, ResponseScheme]:
        query = QueryParams().add_joined("expand", expand)
        return await self._call("GET", self._endpoint("myself", query=query), UserScheme)

    async def get_preference(self, key: str = "") -> tuple[Any, ResponseScheme]:
        """Value of one preference; every preference when key is empty."""
        query = QueryParams().add_if("key", key)
        return await self._call("GET", self._endpoint("mypreferences", query=query), Any)

    async def set_preference(self, key: str, value: str) -> tuple[Any, ResponseScheme]:
        require(key, NoKeyError)
        query = QueryParams().add("key", key)
        endpoint = self._endpoint("mypreferences", query=query)
        return await self._call("PUT", endpoint, Any, {"value": value})

    async def delete_preference(self, key: str) -> ResponseScheme:
        require(key, NoKeyError)
        query = QueryParams().add("key", key)
        return await self._send("DELETE", self._endpoint("mypreferences", query=query))
