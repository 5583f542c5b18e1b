"""Notification schemes and the notifications inside them."""

from jira_cloud.core.errors import NoNotificationIDError, NoNotificationSchemeIDError
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.notification import (
    NotificationSchemeCreatedScheme,
    NotificationSchemePageScheme,
    NotificationSchemePayload,
    NotificationSchemeProjectPageScheme,
    NotificationSchemeScheme,
    NotificationSchemeSearchOptions,
)
from jira_cloud.services.base import QueryParams, Service, require


class NotificationSchemeService(Service):
    async def search(
        self,
        options: NotificationSchemeSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[NotificationSchemePageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add_many("id", options.notification_scheme_ids)
            query.add_many("projectId", options.project_ids)
            query.add_if("onlyDefault", options.only_default)
            query.add_joined("expand", options.expand)
        endpoint = self._endpoint("notificationscheme", query=query)
        return await self._call("GET", endpoint, NotificationSchemePageScheme)

    async def create(
        self, payload: NotificationSchemePayload
    ) -> tuple[NotificationSchemeCreatedScheme, ResponseScheme]:
        endpoint = self._endpoint("notificationscheme")
        return await self._call("POST", endpoint, NotificationSchemeCreatedScheme, payload)

    async def projects(
        self,
        scheme_ids: list[str] | None = None,
        project_ids: list[str] | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[NotificationSchemeProjectPageScheme, ResponseScheme]:
        """Project to notification scheme mappings."""
        query = (
            QueryParams()
            .page(start_at, max_results)
            .add_many("notificationSchemeId", scheme_ids)
            .add_many("projectId", project_ids)
        )
        endpoint = self._endpoint("notificationscheme", "project", query=query)
        return await self._call("GET", endpoint, NotificationSchemeProjectPageScheme)

    async def get(
        self, scheme_id: str, expand: list[str] | None = None
    ) -> tuple[NotificationSchemeScheme, ResponseScheme]:
        require(scheme_id, NoNotificationSchemeIDError)
        query = QueryParams().add_joined("expand", expand)
        endpoint = self._endpoint("notificationscheme", scheme_id, query=query)
        return await self._call("GET", endpoint, NotificationSchemeScheme)

    async def update(self, scheme_id: str, payload: NotificationSchemePayload) -> ResponseScheme:
        """Update name and description only."""
        require(scheme_id, NoNotificationSchemeIDError)
        return await self._send("PUT", self._endpoint("notificationscheme", scheme_id), payload)

    async def append(self, scheme_id: str, payload: NotificationSchemePayload) -> ResponseScheme:
        """Add event notifications to an existing scheme."""
        require(scheme_id, NoNotificationSchemeIDError)
        endpoint = self._endpoint("notificationscheme", scheme_id, "notification")
        return await self._send("PUT", endpoint, payload)

    async def delete(self, scheme_id: str) -> ResponseScheme:
        require(scheme_id, NoNotificationSchemeIDError)
        return await self._send("DELETE", self._endpoint("notificationscheme", scheme_id))

    async def remove(self, scheme_id: str, notification_id: str) -> ResponseScheme:
        require(scheme_id, NoNotificationSchemeIDError)
        require(notification_id, NoNotificationIDError)
        endpoint = self._endpoint("notificationscheme", scheme_id, "notification", notification_id)
        return await self._send("DELETE", endpoint)
