"""Pydantic schemas for saved filters and their share permissions."""

from typing import Any

from pydantic import BaseModel, Field

from jira_cloud.schemas.common import JiraModel, PageScheme, SharePermissionScheme, UserDetailScheme


class FilterScheme(JiraModel):
    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    owner: UserDetailScheme | None = None
    jql: str | None = None
    view_url: str | None = None
    search_url: str | None = None
    favourite: bool | None = None
    favourited_count: int | None = None
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None
    subscriptions: dict[str, Any] | None = None


class FilterPayload(JiraModel):
    name: str | None = None
    description: str | None = None
    jql: str | None = None
    favourite: bool | None = None
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None


class FilterSearchPageScheme(PageScheme):
    values: list[FilterScheme] = Field(default_factory=list)


class FilterSearchOptions(BaseModel):
    """Filters for FilterService.search."""

    name: str = ""
    account_id: str = ""
    group: str = ""
    project_id: int = 0
    ids: list[int] = Field(default_factory=list)
    order_by: str = ""
    expand: list[str] = Field(default_factory=list)


class ShareFilterScopeScheme(JiraModel):
    scope: str | None = None


class PermissionFilterPayload(JiraModel):
    """Body for adding a share permission to a filter."""

    type: str
    project_id: str | None = None
    group_name: str | None = None
    project_role_id: str | None = None
    account_id: str | None = None
    rights: int | None = None
