"""Fields, custom field contexts, context options, the field trash and field configurations."""

from __future__ import annotations

from jira_cloud.core.errors import (
    NoContextOptionIDError,
    NoFieldConfigurationIDError,
    NoFieldConfigurationNameError,
    NoFieldConfigurationSchemeIDError,
    NoFieldConfigurationSchemeNameError,
    NoFieldContextIDError,
    NoFieldIDError,
    NoIssueTypesError,
    NoProjectIDsError,
)
from jira_cloud.core.transport import Connector, ResponseScheme
from jira_cloud.schemas.common import TaskScheme
from jira_cloud.schemas.field import (
    ContextProjectMappingPageScheme,
    CustomFieldContextOptionPageScheme,
    CustomFieldDefaultValuePageScheme,
    CustomFieldPayload,
    FieldConfigurationIssueTypeItemPageScheme,
    FieldConfigurationItemPageScheme,
    FieldConfigurationItemPayload,
    FieldConfigurationPageScheme,
    FieldConfigurationScheme,
    FieldConfigurationSchemeAssignPayload,
    FieldConfigurationSchemePageScheme,
    FieldConfigurationSchemeProjectPageScheme,
    FieldConfigurationSchemeScheme,
    FieldConfigurationToIssueTypeMappingPayload,
    FieldContextDefaultPayload,
    FieldContextOptionListOptions,
    FieldContextOptionListScheme,
    FieldContextOptions,
    FieldContextPageScheme,
    FieldContextPayload,
    FieldContextScheme,
    FieldScheme,
    FieldSearchOptions,
    FieldSearchPageScheme,
    IssueTypeToContextMappingPageScheme,
    OrderFieldOptionPayload,
)
from jira_cloud.services.base import QueryParams, Service, require


class FieldContextOptionService(Service):
    """Options of a select-list custom field within one context."""

    async def gets(
        self,
        field_id: str,
        context_id: int,
        options: FieldContextOptionListOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[CustomFieldContextOptionPageScheme, ResponseScheme]:
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add("onlyOptions", options.only_options)
            query.add_if("optionId", options.option_id)
        endpoint = self._endpoint("field", field_id, "context", context_id, "option", query=query)
        return await self._call("GET", endpoint, CustomFieldContextOptionPageScheme)

    async def create(
        self, field_id: str, context_id: int, payload: FieldContextOptionListScheme
    ) -> tuple[FieldContextOptionListScheme, ResponseScheme]:
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        endpoint = self._endpoint("field", field_id, "context", context_id, "option")
        return await self._call("POST", endpoint, FieldContextOptionListScheme, payload)

    async def update(
        self, field_id: str, context_id: int, payload: FieldContextOptionListScheme
    ) -> tuple[FieldContextOptionListScheme, ResponseScheme]:
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        endpoint = self._endpoint("field", field_id, "context", context_id, "option")
        return await self._call("PUT", endpoint, FieldContextOptionListScheme, payload)

    async def delete(self, field_id: str, context_id: int, option_id: int) -> ResponseScheme:
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        require(option_id, NoContextOptionIDError)
        endpoint = self._endpoint("field", field_id, "context", context_id, "option", option_id)
        return await self._send("DELETE", endpoint)

    async def order(
        self, field_id: str, context_id: int, payload: OrderFieldOptionPayload
    ) -> ResponseScheme:
        """Move options after another option or to the First/Last position."""
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        endpoint = self._endpoint("field", field_id, "context", context_id, "option", "move")
        return await self._send("PUT", endpoint, payload)


class FieldContextService(Service):
    """Contexts of a custom field: which projects and issue types it applies to."""

    def __init__(
        self,
        client: Connector | None,
        version: str,
        option: FieldContextOptionService | None = None,
    ) -> None:
        super().__init__(client, version)
        self.option = option

    async def gets(
        self,
        field_id: str,
        options: FieldContextOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[FieldContextPageScheme, ResponseScheme]:
        require(field_id, NoFieldIDError)
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add("isAnyIssueType", options.is_any_issue_type)
            query.add("isGlobalContext", options.is_global_context)
            query.add_many("contextId", options.context_ids)
        endpoint = self._endpoint("field", field_id, "context", query=query)
        return await self._call("GET", endpoint, FieldContextPageScheme)

    async def create(
        self, field_id: str, payload: FieldContextPayload
    ) -> tuple[FieldContextScheme, ResponseScheme]:
        require(field_id, NoFieldIDError)
        endpoint = self._endpoint("field", field_id, "context")
        return await self._call("POST", endpoint, FieldContextScheme, payload)

    async def get_default_values(
        self,
        field_id: str,
        context_ids: list[int] | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[CustomFieldDefaultValuePageScheme, ResponseScheme]:
        require(field_id, NoFieldIDError)
        query = QueryParams().page(start_at, max_results).add_many("contextId", context_ids)
        endpoint = self._endpoint("field", field_id, "context", "defaultValue", query=query)
        return await self._call("GET", endpoint, CustomFieldDefaultValuePageScheme)

    async def set_default_value(
        self, field_id: str, payload: FieldContextDefaultPayload
    ) -> ResponseScheme:
        require(field_id, NoFieldIDError)
        endpoint = self._endpoint("field", field_id, "context", "defaultValue")
        return await self._send("PUT", endpoint, payload)

    async def issue_types_context(
        self,
        field_id: str,
        context_ids: list[int] | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssueTypeToContextMappingPageScheme, ResponseScheme]:
        require(field_id, NoFieldIDError)
        query = QueryParams().page(start_at, max_results).add_many("contextId", context_ids)
        endpoint = self._endpoint("field", field_id, "context", "issuetypemapping", query=query)
        return await self._call("GET", endpoint, IssueTypeToContextMappingPageScheme)

    async def projects_context(
        self,
        field_id: str,
        context_ids: list[int] | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[ContextProjectMappingPageScheme, ResponseScheme]:
        require(field_id, NoFieldIDError)
        query = QueryParams().page(start_at, max_results).add_many("contextId", context_ids)
        endpoint = self._endpoint("field", field_id, "context", "projectmapping", query=query)
        return await self._call("GET", endpoint, ContextProjectMappingPageScheme)

    async def update(
        self, field_id: str, context_id: int, name: str, description: str = ""
    ) -> ResponseScheme:
        """Rename a context; description is sent only when non-empty so it is not wiped."""
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        payload = {"name": name}
        if description:
            payload["description"] = description
        endpoint = self._endpoint("field", field_id, "context", context_id)
        return await self._send("PUT", endpoint, payload)

    async def delete(self, field_id: str, context_id: int) -> ResponseScheme:
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        endpoint = self._endpoint("field", field_id, "context", context_id)
        return await self._send("DELETE", endpoint)

    async def add_issue_types(
        self, field_id: str, context_id: int, issue_type_ids: list[str]
    ) -> ResponseScheme:
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        require(issue_type_ids, NoIssueTypesError)
        endpoint = self._endpoint("field", field_id, "context", context_id, "issuetype")
        return await self._send("PUT", endpoint, {"issueTypeIds": issue_type_ids})

    async def remove_issue_types(
        self, field_id: str, context_id: int, issue_type_ids: list[str]
    ) -> ResponseScheme:
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        require(issue_type_ids, NoIssueTypesError)
        endpoint = self._endpoint("field", field_id, "context", context_id, "issuetype", "remove")
        return await self._send("POST", endpoint, {"issueTypeIds": issue_type_ids})

    async def link(self, field_id: str, context_id: int, project_ids: list[str]) -> ResponseScheme:
        """Assign the context to projects."""
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        require(project_ids, NoProjectIDsError)
        endpoint = self._endpoint("field", field_id, "context", context_id, "project")
        return await self._send("PUT", endpoint, {"projectIds": project_ids})

    async def unlink(
        self, field_id: str, context_id: int, project_ids: list[str]
    ) -> ResponseScheme:
        require(field_id, NoFieldIDError)
        require(context_id, NoFieldContextIDError)
        require(project_ids, NoProjectIDsError)
        endpoint = self._endpoint("field", field_id, "context", context_id, "project", "remove")
        return await self._send("POST", endpoint, {"projectIds": project_ids})


def _name_payload(name: str, description: str) -> dict[str, str]:
    payload = {"name": name}
    if description:
        payload["description"] = description
    return payload


class FieldTrashService(Service):
    """Custom fields in the trash: search, move to trash and restore."""

    async def search(
        self,
        options: FieldSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[FieldSearchPageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add_joined("id", options.ids)
            query.add_if("query", options.query)
            query.add_if("orderBy", options.order_by)
        endpoint = self._endpoint("field", "search", "trashed", query=query)
        return await self._call("GET", endpoint, FieldSearchPageScheme)

    async def move(self, field_id: str) -> ResponseScheme:
        require(field_id, NoFieldIDError)
        return await self._send("POST", self._endpoint("field", field_id, "trash"))

    async def restore(self, field_id: str) -> ResponseScheme:
        require(field_id, NoFieldIDError)
        return await self._send("POST", self._endpoint("field", field_id, "restore"))


class FieldConfigurationItemService(Service):
    """Per-field settings (hidden, required, renderer) inside a field configuration."""

    async def gets(
        self, configuration_id: int, start_at: int = 0, max_results: int = 50
    ) -> tuple[FieldConfigurationItemPageScheme, ResponseScheme]:
        require(configuration_id, NoFieldConfigurationIDError)
        query = QueryParams().page(start_at, max_results)
        endpoint = self._endpoint("fieldconfiguration", configuration_id, "fields", query=query)
        return await self._call("GET", endpoint, FieldConfigurationItemPageScheme)

    async def update(
        self, configuration_id: int, payload: FieldConfigurationItemPayload
    ) -> ResponseScheme:
        require(configuration_id, NoFieldConfigurationIDError)
        endpoint = self._endpoint("fieldconfiguration", configuration_id, "fields")
        return await self._send("PUT", endpoint, payload)


class FieldConfigurationSchemeService(Service):
    """Field configuration schemes: which configuration each issue type uses."""

    async def gets(
        self, scheme_ids: list[int] | None = None, start_at: int = 0, max_results: int = 50
    ) -> tuple[FieldConfigurationSchemePageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results).add_many("id", scheme_ids)
        endpoint = self._endpoint("fieldconfigurationscheme", query=query)
        return await self._call("GET", endpoint, FieldConfigurationSchemePageScheme)

    async def create(
        self, name: str, description: str = ""
    ) -> tuple[FieldConfigurationSchemeScheme, ResponseScheme]:
        require(name, NoFieldConfigurationSchemeNameError)
        endpoint = self._endpoint("fieldconfigurationscheme")
        payload = _name_payload(name, description)
        return await self._call("POST", endpoint, FieldConfigurationSchemeScheme, payload)

    async def mapping(
        self, scheme_ids: list[int] | None = None, start_at: int = 0, max_results: int = 50
    ) -> tuple[FieldConfigurationIssueTypeItemPageScheme, ResponseScheme]:
        """Issue type to field configuration mappings of the given schemes."""
        query = (
            QueryParams()
            .page(start_at, max_results)
            .add_many("fieldConfigurationSchemeId", scheme_ids)
        )
        endpoint = self._endpoint("fieldconfigurationscheme", "mapping", query=query)
        return await self._call("GET", endpoint, FieldConfigurationIssueTypeItemPageScheme)

    async def project(
        self, project_ids: list[int] | None = None, start_at: int = 0, max_results: int = 50
    ) -> tuple[FieldConfigurationSchemeProjectPageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results).add_many("projectId", project_ids)
        endpoint = self._endpoint("fieldconfigurationscheme", "project", query=query)
        return await self._call("GET", endpoint, FieldConfigurationSchemeProjectPageScheme)

    async def assign(self, payload: FieldConfigurationSchemeAssignPayload) -> ResponseScheme:
        endpoint = self._endpoint("fieldconfigurationscheme", "project")
        body = {
            "fieldConfigurationSchemeId": payload.field_configuration_scheme_id,
            "projectId": payload.project_id,
        }
        return await self._send("PUT", endpoint, body)

    async def update(self, scheme_id: int, name: str, description: str = "") -> ResponseScheme:
        require(scheme_id, NoFieldConfigurationSchemeIDError)
        require(name, NoFieldConfigurationSchemeNameError)
        endpoint = self._endpoint("fieldconfigurationscheme", scheme_id)
        return await self._send("PUT", endpoint, _name_payload(name, description))

    async def delete(self, scheme_id: int) -> ResponseScheme:
        require(scheme_id, NoFieldConfigurationSchemeIDError)
        return await self._send("DELETE", self._endpoint("fieldconfigurationscheme", scheme_id))

    async def link(
        self, scheme_id: int, payload: FieldConfigurationToIssueTypeMappingPayload
    ) -> ResponseScheme:
        require(scheme_id, NoFieldConfigurationSchemeIDError)
        endpoint = self._endpoint("fieldconfigurationscheme", scheme_id, "mapping")
        return await self._send("PUT", endpoint, payload)

    async def unlink(self, scheme_id: int, issue_type_ids: list[str]) -> ResponseScheme:
        require(scheme_id, NoFieldConfigurationSchemeIDError)
        require(issue_type_ids, NoIssueTypesError)
        endpoint = self._endpoint("fieldconfigurationscheme", scheme_id, "mapping", "delete")
        return await self._send("POST", endpoint, {"issueTypeIds": issue_type_ids})


class FieldConfigurationService(Service):
    """Field configurations, with their items and schemes as children."""

    def __init__(
        self,
        client: Connector | None,
        version: str,
        item: FieldConfigurationItemService | None = None,
        scheme: FieldConfigurationSchemeService | None = None,
    ) -> None:
        super().__init__(client, version)
        self.item = item
        self.scheme = scheme

    async def gets(
        self,
        ids: list[int] | None = None,
        is_default: bool = False,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[FieldConfigurationPageScheme, ResponseScheme]:
        query = (
            QueryParams()
            .page(start_at, max_results)
            .add("isDefault", is_default)
            .add_many("id", ids)
        )
        endpoint = self._endpoint("fieldconfiguration", query=query)
        return await self._call("GET", endpoint, FieldConfigurationPageScheme)

    async def create(
        self, name: str, description: str = ""
    ) -> tuple[FieldConfigurationScheme, ResponseScheme]:
        require(name, NoFieldConfigurationNameError)
        payload = _name_payload(name, description)
        endpoint = self._endpoint("fieldconfiguration")
        return await self._call("POST", endpoint, FieldConfigurationScheme, payload)

    async def update(
        self, configuration_id: int, name: str, description: str = ""
    ) -> ResponseScheme:
        require(configuration_id, NoFieldConfigurationIDError)
        require(name, NoFieldConfigurationNameError)
        endpoint = self._endpoint("fieldconfiguration", configuration_id)
        return await self._send("PUT", endpoint, _name_payload(name, description))

    async def delete(self, configuration_id: int) -> ResponseScheme:
        require(configuration_id, NoFieldConfigurationIDError)
        return await self._send("DELETE", self._endpoint("fieldconfiguration", configuration_id))


class FieldService(Service):
    """System and custom fields."""

    def __init__(
        self,
        client: Connector | None,
        version: str,
        context: FieldContextService | None = None,
        trash: FieldTrashService | None = None,
        configuration: FieldConfigurationService | None = None,
    ) -> None:
        super().__init__(client, version)
        self.context = context
        self.trash = trash
        self.configuration = configuration

    async def gets(self) -> tuple[list[FieldScheme], ResponseScheme]:
        return await self._call("GET", self._endpoint("field"), list[FieldScheme])

    async def create(self, payload: CustomFieldPayload) -> tuple[FieldScheme, ResponseScheme]:
        return await self._call("POST", self._endpoint("field"), FieldScheme, payload)

    async def search(
        self,
        options: FieldSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[FieldSearchPageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add_joined("expand", options.expand)
            query.add_joined("type", options.types)
            query.add_joined("id", options.ids)
            query.add_if("orderBy", options.order_by)
            query.add_if("query", options.query)
        endpoint = self._endpoint("field", "search", query=query)
        return await self._call("GET", endpoint, FieldSearchPageScheme)

    async def delete(self, field_id: str) -> tuple[TaskScheme, ResponseScheme]:
        """Delete a custom field; Jira processes it as an async task."""
        require(field_id, NoFieldIDError)
        return await self._call("DELETE", self._endpoint("field", field_id), TaskScheme)
