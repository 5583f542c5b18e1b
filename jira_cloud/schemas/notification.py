"""Pydantic schemas for notification schemes."""

from typing import Any

from pydantic import BaseModel, Field

from jira_cloud.schemas.common import JiraModel, PageScheme


class NotificationSchemeSearchOptions(BaseModel):
    """Filters for NotificationSchemeService.search."""

    notification_scheme_ids: list[str] = Field(default_factory=list)
    project_ids: list[str] = Field(default_factory=list)
    only_default: bool = False
    expand: list[str] = Field(default_factory=list)


class NotificationScheme(JiraModel):
    type: str | None = None
    parameter: str | None = None


class NotificationSchemeEventTypeScheme(JiraModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None


class NotificationSchemeEventDetailScheme(JiraModel):
    event: NotificationSchemeEventTypeScheme | None = None
    notifications: list[dict[str, Any]] | None = None


class NotificationSchemeScheme(JiraModel):
    expand: str | None = None
    id: int | None = None
    self_: str | None = Field(default=None, alias="self")
    name: str | None = None
    description: str | None = None
    notification_scheme_events: list[NotificationSchemeEventDetailScheme] | None = None
    scope: dict[str, Any] | None = None
    projects: list[int] | None = None


class NotificationSchemePageScheme(PageScheme):
    values: list[NotificationSchemeScheme] = Field(default_factory=list)


class NotificationSchemePayloadEventScheme(JiraModel):
    event: dict[str, str]
    notifications: list[NotificationScheme] = Field(default_factory=list)


class NotificationSchemePayload(JiraModel):
    """Body for create (name required server-side) and for append (events only)."""

    name: str | None = None
    description: str | None = None
    notification_scheme_events: list[NotificationSchemePayloadEventScheme] | None = None


class NotificationSchemeCreatedScheme(JiraModel):
    id: str | None = None


class NotificationSchemeProjectScheme(JiraModel):
    notification_scheme_id: str | None = None
    project_id: str | None = None


class NotificationSchemeProjectPageScheme(PageScheme):
    values: list[NotificationSchemeProjectScheme] = Field(default_factory=list)
