"""Base models and shapes shared by every Jira resource area."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JiraModel(BaseModel):
    """Wire model: camelCase on the wire, snake_case in Python, unknown keys kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class PageScheme(JiraModel):
    """Offset-paginated response envelope; subclasses declare typed values."""

    self_: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    is_last: bool | None = None


class AvatarUrlsScheme(JiraModel):
    size16: str | None = Field(default=None, alias="16x16")
    size24: str | None = Field(default=None, alias="24x24")
    size32: str | None = Field(default=None, alias="32x32")
    size48: str | None = Field(default=None, alias="48x48")


class UserDetailScheme(JiraModel):
    """Compact user reference embedded in other resources."""

    self_: str | None = Field(default=None, alias="self")
    account_id: str | None = None
    account_type: str | None = None
    email_address: str | None = None
    display_name: str | None = None
    active: bool | None = None
    time_zone: str | None = None
    avatar_urls: AvatarUrlsScheme | None = None


class TaskScheme(JiraModel):
    """Handle to an asynchronous server-side task."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None


class VisibilityScheme(JiraModel):
    type: str | None = None
    value: str | None = None
    identifier: str | None = None


class SharePermissionScheme(JiraModel):
    """Who a dashboard or filter is shared with."""

    id: int | None = None
    type: str | None = None
    project: dict[str, Any] | None = None
    role: dict[str, Any] | None = None
    group: dict[str, Any] | None = None
    user: UserDetailScheme | None = None
