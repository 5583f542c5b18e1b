"""Pydantic schemas for workflows, workflow statuses and workflow schemes."""

from typing import Any

from pydantic import BaseModel, Field

from jira_cloud.schemas.common import JiraModel, PageScheme


class WorkflowSearchOptions(BaseModel):
    """Filters for WorkflowService.gets (GET workflow/search)."""

    workflow_name: list[str] = Field(default_factory=list)
    expand: list[str] = Field(default_factory=list)
    query_string: str = ""
    order_by: str = ""
    is_active: bool = False


class WorkflowPublishedIDScheme(JiraModel):
    name: str | None = None
    entity_id: str | None = None


class WorkflowTransitionRuleScheme(JiraModel):
    type: str | None = None
    configuration: Any = None


class WorkflowTransitionRulesScheme(JiraModel):
    conditions: list[WorkflowTransitionRuleScheme] | None = None
    validators: list[WorkflowTransitionRuleScheme] | None = None
    post_functions: list[WorkflowTransitionRuleScheme] | None = None


class WorkflowTransitionScreenScheme(JiraModel):
    id: str | None = None
    properties: Any = None


class WorkflowTransitionScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    from_: list[str] | None = Field(default=None, alias="from")
    to: str | None = None
    type: str | None = None
    screen: WorkflowTransitionScreenScheme | None = None
    rules: WorkflowTransitionRulesScheme | None = None


class WorkflowStatusPropertiesScheme(JiraModel):
    issue_editable: bool | None = None


class WorkflowStatusScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    properties: WorkflowStatusPropertiesScheme | None = None


class WorkflowScheme(JiraModel):
    id: WorkflowPublishedIDScheme | None = None
    transitions: list[WorkflowTransitionScheme] | None = None
    statuses: list[WorkflowStatusScheme] | None = None
    description: str | None = None
    is_default: bool | None = None


class WorkflowPageScheme(PageScheme):
    values: list[WorkflowScheme] = Field(default_factory=list)


class WorkflowCreatedResponseScheme(JiraModel):
    name: str | None = None
    entity_id: str | None = None


class WorkflowConditionScheme(JiraModel):
    conditions: list["WorkflowConditionScheme"] | None = None
    configuration: Any = None
    operator: str | None = None
    type: str | None = None


class WorkflowTransitionRulePayload(JiraModel):
    conditions: WorkflowConditionScheme | None = None
    post_functions: list[WorkflowTransitionRuleScheme] | None = None
    validators: list[WorkflowTransitionRuleScheme] | None = None


class WorkflowTransitionPayload(JiraModel):
    name: str | None = None
    description: str | None = None
    from_: list[str] | None = Field(default=None, alias="from")
    to: str | None = None
    type: str | None = None
    rules: WorkflowTransitionRulePayload | None = None
    screen: dict[str, str] | None = None
    properties: Any = None


class WorkflowPayload(JiraModel):
    """Body for creating a classic workflow (POST workflow)."""

    name: str | None = None
    description: str | None = None
    statuses: list[WorkflowTransitionScreenScheme] | None = None
    transitions: list[WorkflowTransitionPayload] | None = None


class WorkflowSearchCriteria(JiraModel):
    """Body for POST workflows (bulk read by id, name or project/issue type)."""

    project_and_issue_types: list[dict[str, str]] | None = None
    workflow_ids: list[str] | None = None
    workflow_names: list[str] | None = None


class WorkflowReadResponseScheme(JiraModel):
    statuses: list[dict[str, Any]] = Field(default_factory=list)
    workflows: list[dict[str, Any]] = Field(default_factory=list)


class WorkflowCapabilitiesScheme(JiraModel):
    connect_rules: list[dict[str, Any]] | None = None
    editor_scope: str | None = None
    forge_rules: list[dict[str, Any]] | None = None
    project_types: list[str] | None = None
    system_rules: list[dict[str, Any]] | None = None
    trigger_rules: list[dict[str, Any]] | None = None


class WorkflowCreateResponseScheme(JiraModel):
    statuses: list[dict[str, Any]] = Field(default_factory=list)
    workflows: list[dict[str, Any]] = Field(default_factory=list)


class WorkflowValidationErrorListScheme(JiraModel):
    errors: list[dict[str, Any]] = Field(default_factory=list)


class WorkflowUpdateResponseScheme(JiraModel):
    statuses: list[dict[str, Any]] = Field(default_factory=list)
    workflows: list[dict[str, Any]] = Field(default_factory=list)
    task_id: str | None = None


# Statuses


class StatusCategoryScheme(JiraModel):
    self_: str | None = Field(default=None, alias="self")
    id: int | None = None
    key: str | None = None
    color_name: str | None = None
    name: str | None = None


class StatusDetailScheme(JiraModel):
    self_: str | None = Field(default=None, alias="self")
    description: str | None = None
    icon_url: str | None = None
    name: str | None = None
    untranslated_name: str | None = None
    id: str | None = None
    status_category: StatusCategoryScheme | None = None
    scope: dict[str, Any] | None = None


class WorkflowStatusDetailScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    status_category: str | None = None
    scope: dict[str, Any] | None = None
    description: str | None = None
    usages: list[dict[str, Any]] | None = None


class WorkflowStatusDetailPageScheme(PageScheme):
    values: list[WorkflowStatusDetailScheme] = Field(default_factory=list)


class WorkflowStatusPayload(JiraModel):
    """Status entry used by create (name/statusCategory) and update (id as well)."""

    id: str | None = None
    name: str | None = None
    status_category: str | None = None
    description: str | None = None


class WorkflowStatusScopeScheme(JiraModel):
    type: str
    project: dict[str, str] | None = None


class WorkflowStatusCreatePayload(JiraModel):
    statuses: list[WorkflowStatusPayload] = Field(default_factory=list)
    scope: WorkflowStatusScopeScheme | None = None


class WorkflowStatusUpdatePayload(JiraModel):
    statuses: list[WorkflowStatusPayload] = Field(default_factory=list)


class WorkflowStatusSearchOptions(BaseModel):
    """Filters for WorkflowStatusService.search."""

    project_id: str = ""
    search_string: str = ""
    status_category: str = ""
    expand: list[str] = Field(default_factory=list)


# Workflow schemes


class WorkflowSchemePayload(JiraModel):
    name: str | None = None
    description: str | None = None
    default_workflow: str | None = None
    issue_type_mappings: dict[str, str] | None = None
    update_draft_if_needed: bool | None = None


class WorkflowSchemeDetailScheme(JiraModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    default_workflow: str | None = None
    issue_type_mappings: dict[str, str] | None = None
    original_default_workflow: str | None = None
    original_issue_type_mappings: dict[str, str] | None = None
    draft: bool | None = None
    last_modified_user: dict[str, Any] | None = None
    last_modified: str | None = None
    self_: str | None = Field(default=None, alias="self")
    update_draft_if_needed: bool | None = None


class WorkflowSchemePageScheme(PageScheme):
    values: list[WorkflowSchemeDetailScheme] = Field(default_factory=list)


class WorkflowSchemeAssociationScheme(JiraModel):
    project_ids: list[str] = Field(default_factory=list)
    workflow_scheme: WorkflowSchemeDetailScheme | None = None


class WorkflowSchemeAssociationPageScheme(JiraModel):
    values: list[WorkflowSchemeAssociationScheme] = Field(default_factory=list)


class IssueTypeWorkflowMappingScheme(JiraModel):
    issue_type: str | None = None
    workflow: str | None = None


class IssueTypeWorkflowPayload(JiraModel):
    """Body for mapping one issue type to a workflow in a scheme."""

    issue_type: str | None = None
    workflow: str | None = None
    update_draft_if_needed: bool | None = None


class IssueTypesWorkflowMappingScheme(JiraModel):
    workflow: str | None = None
    issue_types: list[str] = Field(default_factory=list)
    default_mapping: bool | None = None
    update_draft_if_needed: bool | None = None


WorkflowConditionScheme.model_rebuild()
