"""Screens, their tabs, the fields on each tab, and screen schemes."""

from __future__ import annotations

from jira_cloud.core.errors import (
    NoFieldIDError,
    NoScreenIDError,
    NoScreenNameError,
    NoScreenSchemeIDError,
    NoScreenTabIDError,
    NoScreenTabNameError,
)
from jira_cloud.core.transport import Connector, ResponseScheme
from jira_cloud.schemas.screen import (
    AvailableScreenFieldScheme,
    ScreenFieldPageScheme,
    ScreenPageScheme,
    ScreenScheme,
    ScreenSchemePageScheme,
    ScreenSchemePayload,
    ScreenSchemeScheme,
    ScreenSchemeSearchOptions,
    ScreenSearchOptions,
    ScreenTabFieldScheme,
    ScreenTabScheme,
)
from jira_cloud.services.base import QueryParams, Service, require


def _name_payload(name: str, description: str) -> dict[str, str]:
    payload = {"name": name}
    if description:
        payload["description"] = description
    return payload


class ScreenTabFieldService(Service):
    """Fields placed on a screen tab."""

    async def gets(
        self, screen_id: int, tab_id: int
    ) -> tuple[list[ScreenTabFieldScheme], ResponseScheme]:
        require(screen_id, NoScreenIDError)
        require(tab_id, NoScreenTabIDError)
        endpoint = self._endpoint("screens", screen_id, "tabs", tab_id, "fields")
        return await self._call("GET", endpoint, list[ScreenTabFieldScheme])

    async def add(
        self, screen_id: int, tab_id: int, field_id: str
    ) -> tuple[ScreenTabFieldScheme, ResponseScheme]:
        require(screen_id, NoScreenIDError)
        require(tab_id, NoScreenTabIDError)
        require(field_id, NoFieldIDError)
        endpoint = self._endpoint("screens", screen_id, "tabs", tab_id, "fields")
        return await self._call("POST", endpoint, ScreenTabFieldScheme, {"fieldId": field_id})

    async def remove(self, screen_id: int, tab_id: int, field_id: str) -> ResponseScheme:
        require(screen_id, NoScreenIDError)
        require(tab_id, NoScreenTabIDError)
        require(field_id, NoFieldIDError)
        endpoint = self._endpoint("screens", screen_id, "tabs", tab_id, "fields", field_id)
        return await self._send("DELETE", endpoint)

    async def move(
        self,
        screen_id: int,
        tab_id: int,
        field_id: str,
        after: str = "",
        position: str = "",
    ) -> ResponseScheme:
        """Move a field after another field, or to position Earlier/Later/First/Last."""
        require(screen_id, NoScreenIDError)
        require(tab_id, NoScreenTabIDError)
        require(field_id, NoFieldIDError)
        payload = {}
        if after:
            payload["after"] = after
        if position:
            payload["position"] = position
        endpoint = self._endpoint("screens", screen_id, "tabs", tab_id, "fields", field_id, "move")
        return await self._send("POST", endpoint, payload)


class ScreenTabService(Service):
    def __init__(
        self,
        client: Connector | None,
        version: str,
        field: ScreenTabFieldService | None = None,
    ) -> None:
        super().__init__(client, version)
        self.field = field

    async def gets(
        self, screen_id: int, project_key: str = ""
    ) -> tuple[list[ScreenTabScheme], ResponseScheme]:
        require(screen_id, NoScreenIDError)
        query = QueryParams().add_if("projectKey", project_key)
        endpoint = self._endpoint("screens", screen_id, "tabs", query=query)
        return await self._call("GET", endpoint, list[ScreenTabScheme])

    async def create(self, screen_id: int, name: str) -> tuple[ScreenTabScheme, ResponseScheme]:
        require(screen_id, NoScreenIDError)
        require(name, NoScreenTabNameError)
        endpoint = self._endpoint("screens", screen_id, "tabs")
        return await self._call("POST", endpoint, ScreenTabScheme, {"name": name})

    async def update(
        self, screen_id: int, tab_id: int, name: str
    ) -> tuple[ScreenTabScheme, ResponseScheme]:
        require(screen_id, NoScreenIDError)
        require(tab_id, NoScreenTabIDError)
        require(name, NoScreenTabNameError)
        endpoint = self._endpoint("screens", screen_id, "tabs", tab_id)
        return await self._call("PUT", endpoint, ScreenTabScheme, {"name": name})

    async def delete(self, screen_id: int, tab_id: int) -> ResponseScheme:
        require(screen_id, NoScreenIDError)
        require(tab_id, NoScreenTabIDError)
        return await self._send("DELETE", self._endpoint("screens", screen_id, "tabs", tab_id))

    async def move(self, screen_id: int, tab_id: int, position: int) -> ResponseScheme:
        """Move a tab to a zero-based position."""
        require(screen_id, NoScreenIDError)
        require(tab_id, NoScreenTabIDError)
        endpoint = self._endpoint("screens", screen_id, "tabs", tab_id, "move", position)
        return await self._send("POST", endpoint)


class ScreenSchemeService(Service):
    """Screen schemes: which screen is used for create, edit and view."""

    async def gets(
        self,
        options: ScreenSchemeSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[ScreenSchemePageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add_many("id", options.ids)
            query.add_if("queryString", options.query_string)
            query.add_if("orderBy", options.order_by)
            query.add_joined("expand", options.expand)
        endpoint = self._endpoint("screenscheme", query=query)
        return await self._call("GET", endpoint, ScreenSchemePageScheme)

    async def create(
        self, payload: ScreenSchemePayload
    ) -> tuple[ScreenSchemeScheme, ResponseScheme]:
        return await self._call("POST", self._endpoint("screenscheme"), ScreenSchemeScheme, payload)

    async def update(self, scheme_id: str, payload: ScreenSchemePayload) -> ResponseScheme:
        require(scheme_id, NoScreenSchemeIDError)
        return await self._send("PUT", self._endpoint("screenscheme", scheme_id), payload)

    async def delete(self, scheme_id: str) -> ResponseScheme:
        require(scheme_id, NoScreenSchemeIDError)
        return await self._send("DELETE", self._endpoint("screenscheme", scheme_id))


class ScreenService(Service):
    def __init__(
        self,
        client: Connector | None,
        version: str,
        scheme: ScreenSchemeService | None = None,
        tab: ScreenTabService | None = None,
    ) -> None:
        super().__init__(client, version)
        self.scheme = scheme
        self.tab = tab

    async def fields(
        self, field_id: str, start_at: int = 0, max_results: int = 50
    ) -> tuple[ScreenFieldPageScheme, ResponseScheme]:
        """Screens a field is used in, with the tab it sits on."""
        require(field_id, NoFieldIDError)
        query = QueryParams().page(start_at, max_results)
        endpoint = self._endpoint("field", field_id, "screens", query=query)
        return await self._call("GET", endpoint, ScreenFieldPageScheme)

    async def gets(
        self,
        options: ScreenSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[ScreenPageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add_many("id", options.ids)
            query.add_if("queryString", options.query_string)
            query.add_many("scope", options.scope)
            query.add_if("orderBy", options.order_by)
        return await self._call("GET", self._endpoint("screens", query=query), ScreenPageScheme)

    async def create(
        self, name: str, description: str = ""
    ) -> tuple[ScreenScheme, ResponseScheme]:
        require(name, NoScreenNameError)
        payload = _name_payload(name, description)
        return await self._call("POST", self._endpoint("screens"), ScreenScheme, payload)

    async def add_to_default(self, field_id: str) -> ResponseScheme:
        """Add a field to the default tab of the default screen."""
        require(field_id, NoFieldIDError)
        return await self._send("POST", self._endpoint("screens", "addToDefault", field_id))

    async def update(
        self, screen_id: int, name: str, description: str = ""
    ) -> tuple[ScreenScheme, ResponseScheme]:
        require(screen_id, NoScreenIDError)
        payload = _name_payload(name, description)
        return await self._call("PUT", self._endpoint("screens", screen_id), ScreenScheme, payload)

    async def delete(self, screen_id: int) -> ResponseScheme:
        require(screen_id, NoScreenIDError)
        return await self._send("DELETE", self._endpoint("screens", screen_id))

    async def available(
        self, screen_id: int
    ) -> tuple[list[AvailableScreenFieldScheme], ResponseScheme]:
        require(screen_id, NoScreenIDError)
        endpoint = self._endpoint("screens", screen_id, "availableFields")
        return await self._call("GET", endpoint, list[AvailableScreenFieldScheme])
