"""Pydantic schemas for groups and group membership."""

from pydantic import BaseModel, Field

from jira_cloud.schemas.common import JiraModel, PageScheme, UserDetailScheme


class GroupScheme(JiraModel):
    name: str | None = None
    group_id: str | None = None
    self_: str | None = Field(default=None, alias="self")


class GroupPageScheme(PageScheme):
    values: list[GroupScheme] = Field(default_factory=list)


class GroupBulkOptions(BaseModel):
    """Filters for GroupService.bulk; both lists are sent as repeated parameters."""

    group_ids: list[str] = Field(default_factory=list)
    group_names: list[str] = Field(default_factory=list)


class GroupMemberPageScheme(PageScheme):
    values: list[UserDetailScheme] = Field(default_factory=list)
