"""Pydantic schemas for bulk issue operations."""

from typing import Any

from pydantic import Field

from jira_cloud.schemas.common import JiraModel


class IssueBulkEditPayload(JiraModel):
    """editedFieldsInput is passed through as a dict keyed by field input type."""

    edited_fields_input: dict[str, Any] = Field(default_factory=dict)
    selected_actions: list[str] = Field(default_factory=list)
    selected_issue_ids_or_keys: list[str] = Field(default_factory=list)
    send_bulk_notification: bool | None = None


class BulkTransitionSubmitInput(JiraModel):
    selected_issue_ids_or_keys: list[str]
    transition_id: str


class SubmittedBulkOperationScheme(JiraModel):
    task_id: str | None = None


class IssueBulkEditFieldScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    is_required: bool | None = None
    multi_select_field_options: list[str] | None = None
    search_url: str | None = None
    type: str | None = None
    unavailable_message: str | None = None


class BulkEditGetFieldsScheme(JiraModel):
    ending_before: str | None = None
    starting_after: str | None = None
    fields: list[IssueBulkEditFieldScheme] = Field(default_factory=list)


class IssueTransitionStatusScheme(JiraModel):
    status_id: int | None = None
    status_name: str | None = None


class SimplifiedIssueTransitionScheme(JiraModel):
    to: IssueTransitionStatusScheme | None = None
    transition_id: int | None = None
    transition_name: str | None = None


class IssueBulkTransitionForWorkflowScheme(JiraModel):
    is_transitions_filtered: bool | None = None
    issues: list[str] | None = None
    transitions: list[SimplifiedIssueTransitionScheme] | None = None


class BulkTransitionGetAvailableTransitionsScheme(JiraModel):
    available_transitions: list[IssueBulkTransitionForWorkflowScheme] = Field(default_factory=list)
    ending_before: str | None = None
    starting_after: str | None = None


class BulkOperationProgressScheme(JiraModel):
    task_id: str | None = None
    status: str | None = None
    progress_percent: int | None = None
    total_issue_count: int | None = None
    invalid_or_inaccessible_issue_count: int | None = None
    processed_accessible_issues: list[int] | None = None
    created: int | None = None
    started: int | None = None
    updated: int | None = None
    submitted_by: dict[str, Any] | None = None
