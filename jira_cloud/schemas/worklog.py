"""Pydantic schemas for issue worklogs (ADF comments on v3, plain text on v2)."""

from typing import Any

from pydantic import BaseModel, Field

from jira_cloud.schemas.common import JiraModel, UserDetailScheme, VisibilityScheme


class WorklogOptions(BaseModel):
    """Query options shared by add, update and delete."""

    notify: bool = True
    adjust_estimate: str = Field(default="", description="new, leave, manual or auto.")
    new_estimate: str = Field(default="", description="Used when adjust_estimate is new.")
    reduce_by: str = Field(default="", description="Used when adjust_estimate is manual.")
    override_editable_flag: bool = False
    expand: list[str] = Field(default_factory=list)


class WorklogPayload(JiraModel):
    """
    Body for adding or updating a worklog.

    comment is an Atlassian Document Format dict on API v3 and a plain string on v2.
    """

    comment: dict[str, Any] | str | None = None
    visibility: VisibilityScheme | None = None
    started: str | None = None
    time_spent: str | None = None
    time_spent_seconds: int | None = None


class WorklogScheme(JiraModel):
    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    issue_id: str | None = None
    author: UserDetailScheme | None = None
    update_author: UserDetailScheme | None = None
    comment: dict[str, Any] | str | None = None
    created: str | None = None
    updated: str | None = None
    visibility: VisibilityScheme | None = None
    started: str | None = None
    time_spent: str | None = None
    time_spent_seconds: int | None = None


class WorklogPageScheme(JiraModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    worklogs: list[WorklogScheme] = Field(default_factory=list)


class ChangedWorklogPropertyScheme(JiraModel):
    key: str | None = None
    value: Any = None


class ChangedWorklogScheme(JiraModel):
    worklog_id: int | None = None
    updated_time: int | None = None
    properties: list[ChangedWorklogPropertyScheme] | None = None


class ChangedWorklogPageScheme(JiraModel):
    since: int | None = None
    until: int | None = None
    self_: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    last_page: bool | None = None
    values: list[ChangedWorklogScheme] = Field(default_factory=list)
