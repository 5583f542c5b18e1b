"""Pydantic schemas for users, user search, preferences and teams."""

from typing import Any

from pydantic import Field

from jira_cloud.schemas.common import AvatarUrlsScheme, JiraModel, PageScheme


class UserScheme(JiraModel):
    self_: str | None = Field(default=None, alias="self")
    key: str | None = None
    account_id: str | None = None
    account_type: str | None = None
    name: str | None = None
    email_address: str | None = None
    avatar_urls: AvatarUrlsScheme | None = None
    display_name: str | None = None
    active: bool | None = None
    time_zone: str | None = None
    locale: str | None = None
    groups: dict[str, Any] | None = None
    application_roles: dict[str, Any] | None = None
    expand: str | None = None


class UserPayload(JiraModel):
    """Body for creating a user."""

    email_address: str
    display_name: str | None = None
    products: list[str] | None = None


class UserPageScheme(PageScheme):
    values: list[UserScheme] = Field(default_factory=list)


class TeamScheme(JiraModel):
    id: int | None = None
    external_id: str | None = None
    title: str | None = None
    shareable: bool | None = None
    resource_ids: list[int] | None = None


class TeamPersonScheme(JiraModel):
    person_id: int | None = None
    jira_user: dict[str, Any] | None = None


class TeamPageScheme(JiraModel):
    more_results_available: bool | None = None
    teams: list[TeamScheme] = Field(default_factory=list)
    persons: list[TeamPersonScheme] = Field(default_factory=list)


class TeamResourcePayload(JiraModel):
    person_id: int


class TeamPayload(JiraModel):
    title: str | None = None
    shareable: bool | None = None
    resources: list[TeamResourcePayload] | None = None
