"""Pydantic schemas for dashboards."""

from pydantic import BaseModel, Field

from jira_cloud.schemas.common import JiraModel, PageScheme, SharePermissionScheme, UserDetailScheme


class DashboardScheme(JiraModel):
    id: str | None = None
    is_favourite: bool | None = None
    name: str | None = None
    description: str | None = None
    owner: UserDetailScheme | None = None
    popularity: int | None = None
    rank: int | None = None
    self_: str | None = Field(default=None, alias="self")
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None
    view: str | None = None


class DashboardPageScheme(JiraModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    prev: str | None = None
    next: str | None = None
    dashboards: list[DashboardScheme] = Field(default_factory=list)


class DashboardSearchPageScheme(PageScheme):
    values: list[DashboardScheme] = Field(default_factory=list)


class DashboardSearchOptions(BaseModel):
    """Filters for DashboardService.search."""

    dashboard_name: str = ""
    owner_account_id: str = ""
    group_permission_name: str = ""
    order_by: str = ""
    expand: list[str] = Field(default_factory=list)


class DashboardPayload(JiraModel):
    name: str | None = None
    description: str | None = None
    share_permissions: list[SharePermissionScheme] = Field(default_factory=list)
    edit_permissions: list[SharePermissionScheme] = Field(default_factory=list)
