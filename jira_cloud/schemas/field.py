"""Pydantic schemas for fields, custom field contexts and context options."""

from pydantic import BaseModel, Field, model_validator

from jira_cloud.schemas.common import JiraModel, PageScheme


class FieldSchemaScheme(JiraModel):
    type: str | None = None
    items: str | None = None
    system: str | None = None
    custom: str | None = None
    custom_id: int | None = None


class FieldScheme(JiraModel):
    """One system or custom field."""

    id: str | None = None
    key: str | None = None
    name: str | None = None
    custom: bool | None = None
    orderable: bool | None = None
    navigable: bool | None = None
    searchable: bool | None = None
    clause_names: list[str] | None = None
    schema_: FieldSchemaScheme | None = Field(default=None, alias="schema")
    description: str | None = None
    is_locked: bool | None = None
    searcher_key: str | None = None
    screens_count: int | None = None
    contexts_count: int | None = None


class FieldSearchPageScheme(PageScheme):
    values: list[FieldScheme] = Field(default_factory=list)


class FieldSearchOptions(BaseModel):
    """Optional filters for FieldService.search."""

    types: list[str] = Field(default_factory=list, description="custom and/or system.")
    ids: list[str] = Field(default_factory=list, description="Field ids to return.")
    query: str = Field(default="", description="Case-insensitive match on name/description.")
    order_by: str = Field(default="", description="e.g. contextsCount, -lastUsed, name.")
    expand: list[str] = Field(default_factory=list)


class CustomFieldPayload(JiraModel):
    """Body for creating a custom field."""

    name: str
    description: str | None = None
    field_type: str = Field(..., alias="type")
    searcher_key: str | None = None


class FieldContextOptions(BaseModel):
    """Filters for FieldContextService.gets. Both flags are always sent."""

    is_any_issue_type: bool = False
    is_global_context: bool = False
    context_ids: list[int] = Field(default_factory=list)


class FieldContextScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    is_global_context: bool | None = None
    is_any_issue_type: bool | None = None
    project_ids: list[str] | None = None
    issue_type_ids: list[str] | None = None


class FieldContextPageScheme(PageScheme):
    values: list[FieldContextScheme] = Field(default_factory=list)


class FieldContextPayload(JiraModel):
    """Body for creating a field context."""

    name: str | None = None
    description: str | None = None
    issue_type_ids: list[int] | None = None
    project_ids: list[int] | None = None


class CustomFieldDefaultValueScheme(JiraModel):
    context_id: str | None = None
    option_id: str | None = None
    cascading_option_id: str | None = None
    option_ids: list[str] | None = None
    type: str | None = None


class CustomFieldDefaultValuePageScheme(PageScheme):
    values: list[CustomFieldDefaultValueScheme] = Field(default_factory=list)


class FieldContextDefaultPayload(JiraModel):
    default_values: list[CustomFieldDefaultValueScheme] = Field(default_factory=list)


class IssueTypeToContextMappingScheme(JiraModel):
    context_id: str | None = None
    is_any_issue_type: bool | None = None
    issue_type_id: str | None = None


class IssueTypeToContextMappingPageScheme(PageScheme):
    values: list[IssueTypeToContextMappingScheme] = Field(default_factory=list)


class ContextProjectMappingScheme(JiraModel):
    context_id: str | None = None
    project_id: str | None = None
    is_global_context: bool | None = None


class ContextProjectMappingPageScheme(PageScheme):
    values: list[ContextProjectMappingScheme] = Field(default_factory=list)


class FieldContextOptionListOptions(BaseModel):
    """Filters for FieldContextOptionService.gets."""

    only_options: bool = False
    option_id: int = 0


class CustomFieldContextOptionScheme(JiraModel):
    id: str | None = None
    value: str | None = None
    option_id: str | None = None
    disabled: bool | None = None


class CustomFieldContextOptionPageScheme(PageScheme):
    values: list[CustomFieldContextOptionScheme] = Field(default_factory=list)


class FieldContextOptionListScheme(JiraModel):
    """Body and response for creating or updating context options."""

    options: list[CustomFieldContextOptionScheme] = Field(default_factory=list)


class OrderFieldOptionPayload(JiraModel):
    """Body for moving options: either after an option or to a position (First/Last)."""

    custom_field_option_ids: list[str]
    after: str | None = None
    position: str | None = None

    @model_validator(mode="after")
    def check_target(self) -> "OrderFieldOptionPayload":
        if self.after is None and self.position is None:
            raise ValueError("either after or position must be set")
        return self


# Field configurations


class FieldConfigurationScheme(JiraModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    is_default: bool | None = None


class FieldConfigurationPageScheme(PageScheme):
    values: list[FieldConfigurationScheme] = Field(default_factory=list)


class FieldConfigurationItemScheme(JiraModel):
    """How one field behaves in a field configuration."""

    id: str
    description: str | None = None
    is_hidden: bool | None = None
    is_required: bool | None = None
    renderer: str | None = None


class FieldConfigurationItemPageScheme(PageScheme):
    values: list[FieldConfigurationItemScheme] = Field(default_factory=list)


class FieldConfigurationItemPayload(JiraModel):
    field_configuration_items: list[FieldConfigurationItemScheme] = Field(default_factory=list)


class FieldConfigurationSchemeScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None


class FieldConfigurationSchemePageScheme(PageScheme):
    values: list[FieldConfigurationSchemeScheme] = Field(default_factory=list)


class FieldConfigurationIssueTypeItemScheme(JiraModel):
    field_configuration_scheme_id: str | None = None
    issue_type_id: str | None = None
    field_configuration_id: str | None = None


class FieldConfigurationIssueTypeItemPageScheme(PageScheme):
    values: list[FieldConfigurationIssueTypeItemScheme] = Field(default_factory=list)


class FieldConfigurationSchemeProjectScheme(JiraModel):
    project_ids: list[str] = Field(default_factory=list)
    field_configuration_scheme: FieldConfigurationSchemeScheme | None = None


class FieldConfigurationSchemeProjectPageScheme(PageScheme):
    values: list[FieldConfigurationSchemeProjectScheme] = Field(default_factory=list)


class FieldConfigurationSchemeAssignPayload(JiraModel):
    """Assign a scheme to a project; a null scheme id restores the default."""

    field_configuration_scheme_id: str | None = None
    project_id: str


class FieldConfigurationToIssueTypeMappingScheme(JiraModel):
    issue_type_id: str
    field_configuration_id: str


class FieldConfigurationToIssueTypeMappingPayload(JiraModel):
    mappings: list[FieldConfigurationToIssueTypeMappingScheme] = Field(default_factory=list)
