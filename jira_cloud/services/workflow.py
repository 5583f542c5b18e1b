"""Workflows, workflow statuses, workflow schemes and their issue type mappings."""

from __future__ import annotations

from typing import Any

from jira_cloud.core.errors import (
    NoIssueTypeIDError,
    NoProjectIDOrKeyError,
    NoProjectsError,
    NoWorkflowIDError,
    NoWorkflowSchemeIDError,
    NoWorkflowScopeError,
    NoWorkflowStatusesError,
    NoWorkflowStatusNameOrIDError,
)
from jira_cloud.core.transport import Connector, ResponseScheme
from jira_cloud.schemas.workflow import (
    IssueTypesWorkflowMappingScheme,
    IssueTypeWorkflowMappingScheme,
    IssueTypeWorkflowPayload,
    StatusDetailScheme,
    WorkflowCapabilitiesScheme,
    WorkflowCreatedResponseScheme,
    WorkflowCreateResponseScheme,
    WorkflowPageScheme,
    WorkflowPayload,
    WorkflowReadResponseScheme,
    WorkflowSchemeAssociationPageScheme,
    WorkflowSchemeDetailScheme,
    WorkflowSchemePageScheme,
    WorkflowSchemePayload,
    WorkflowSearchCriteria,
    WorkflowSearchOptions,
    WorkflowStatusCreatePayload,
    WorkflowStatusDetailPageScheme,
    WorkflowStatusDetailScheme,
    WorkflowStatusSearchOptions,
    WorkflowStatusUpdatePayload,
    WorkflowUpdateResponseScheme,
    WorkflowValidationErrorListScheme,
)
from jira_cloud.services.base import QueryParams, Service, require


class WorkflowStatusService(Service):
    async def get(self, id_or_name: str) -> tuple[StatusDetailScheme, ResponseScheme]:
        require(id_or_name, NoWorkflowStatusNameOrIDError)
        return await self._call("GET", self._endpoint("status", id_or_name), StatusDetailScheme)

    async def bulk(self) -> tuple[list[StatusDetailScheme], ResponseScheme]:
        """All statuses visible to the user (classic endpoint)."""
        return await self._call("GET", self._endpoint("status"), list[StatusDetailScheme])

    async def gets(
        self, ids: list[str] | None = None, expand: list[str] | None = None
    ) -> tuple[list[WorkflowStatusDetailScheme], ResponseScheme]:
        query = QueryParams().add_many("id", ids).add_joined("expand", expand)
        endpoint = self._endpoint("statuses", query=query)
        return await self._call("GET", endpoint, list[WorkflowStatusDetailScheme])

    async def update(self, payload: WorkflowStatusUpdatePayload) -> ResponseScheme:
        return await self._send("PUT", self._endpoint("statuses"), payload)

    async def create(
        self, payload: WorkflowStatusCreatePayload
    ) -> tuple[list[WorkflowStatusDetailScheme], ResponseScheme]:
        if payload is None or not payload.statuses:
            raise NoWorkflowStatusesError()
        if payload.scope is None:
            raise NoWorkflowScopeError()
        endpoint = self._endpoint("statuses")
        return await self._call("POST", endpoint, list[WorkflowStatusDetailScheme], payload)

    async def delete(self, ids: list[str]) -> ResponseScheme:
        require(ids, NoWorkflowStatusesError)
        query = QueryParams().add_many("id", ids)
        return await self._send("DELETE", self._endpoint("statuses", query=query))

    async def search(
        self,
        options: WorkflowStatusSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[WorkflowStatusDetailPageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add_joined("expand", options.expand)
            query.add_if("projectId", options.project_id)
            query.add_if("searchString", options.search_string)
            query.add_if("statusCategory", options.status_category)
        endpoint = self._endpoint("statuses", "search", query=query)
        return await self._call("GET", endpoint, WorkflowStatusDetailPageScheme)


class WorkflowSchemeIssueTypeService(Service):
    """Issue type to workflow mappings inside a workflow scheme."""

    async def get(
        self, scheme_id: int, issue_type_id: str, return_draft_if_exists: bool = False
    ) -> tuple[IssueTypeWorkflowMappingScheme, ResponseScheme]:
        require(scheme_id, NoWorkflowSchemeIDError)
        require(issue_type_id, NoIssueTypeIDError)
        query = QueryParams().add_if("returnDraftIfExists", return_draft_if_exists)
        endpoint = self._endpoint(
            "workflowscheme", scheme_id, "issuetype", issue_type_id, query=query
        )
        return await self._call("GET", endpoint, IssueTypeWorkflowMappingScheme)

    async def set(
        self, scheme_id: int, issue_type_id: str, payload: IssueTypeWorkflowPayload
    ) -> tuple[WorkflowSchemeDetailScheme, ResponseScheme]:
        require(scheme_id, NoWorkflowSchemeIDError)
        require(issue_type_id, NoIssueTypeIDError)
        endpoint = self._endpoint("workflowscheme", scheme_id, "issuetype", issue_type_id)
        return await self._call("PUT", endpoint, WorkflowSchemeDetailScheme, payload)

    async def delete(
        self, scheme_id: int, issue_type_id: str, update_draft_if_needed: bool = False
    ) -> tuple[WorkflowSchemeDetailScheme, ResponseScheme]:
        require(scheme_id, NoWorkflowSchemeIDError)
        require(issue_type_id, NoIssueTypeIDError)
        query = QueryParams().add_if("updateDraftIfNeeded", update_draft_if_needed)
        endpoint = self._endpoint(
            "workflowscheme", scheme_id, "issuetype", issue_type_id, query=query
        )
        return await self._call("DELETE", endpoint, WorkflowSchemeDetailScheme)

    async def mapping(
        self, scheme_id: int, workflow_name: str = "", return_draft_if_exists: bool = False
    ) -> tuple[list[IssueTypesWorkflowMappingScheme], ResponseScheme]:
        """Workflow to issue types mappings; narrowed to one workflow when a name is given."""
        require(scheme_id, NoWorkflowSchemeIDError)
        query = (
            QueryParams()
            .add_if("workflowName", workflow_name)
            .add_if("returnDraftIfExists", return_draft_if_exists)
        )
        endpoint = self._endpoint("workflowscheme", scheme_id, "workflow", query=query)
        return await self._call("GET", endpoint, list[IssueTypesWorkflowMappingScheme])


class WorkflowSchemeService(Service):
    def __init__(
        self,
        client: Connector | None,
        version: str,
        issue_type: WorkflowSchemeIssueTypeService | None = None,
    ) -> None:
        super().__init__(client, version)
        self.issue_type = issue_type

    async def gets(
        self, start_at: int = 0, max_results: int = 50
    ) -> tuple[WorkflowSchemePageScheme, ResponseScheme]:
        query = QueryParams().page(start_at, max_results)
        endpoint = self._endpoint("workflowscheme", query=query)
        return await self._call("GET", endpoint, WorkflowSchemePageScheme)

    async def create(
        self, payload: WorkflowSchemePayload
    ) -> tuple[WorkflowSchemeDetailScheme, ResponseScheme]:
        endpoint = self._endpoint("workflowscheme")
        return await self._call("POST", endpoint, WorkflowSchemeDetailScheme, payload)

    async def get(
        self, scheme_id: int, return_draft_if_exists: bool = False
    ) -> tuple[WorkflowSchemeDetailScheme, ResponseScheme]:
        require(scheme_id, NoWorkflowSchemeIDError)
        query = QueryParams().add_if("returnDraftIfExists", return_draft_if_exists)
        endpoint = self._endpoint("workflowscheme", scheme_id, query=query)
        return await self._call("GET", endpoint, WorkflowSchemeDetailScheme)

    async def update(
        self, scheme_id: int, payload: WorkflowSchemePayload
    ) -> tuple[WorkflowSchemeDetailScheme, ResponseScheme]:
        require(scheme_id, NoWorkflowSchemeIDError)
        endpoint = self._endpoint("workflowscheme", scheme_id)
        return await self._call("PUT", endpoint, WorkflowSchemeDetailScheme, payload)

    async def delete(self, scheme_id: int) -> ResponseScheme:
        require(scheme_id, NoWorkflowSchemeIDError)
        return await self._send("DELETE", self._endpoint("workflowscheme", scheme_id))

    async def associations(
        self, project_ids: list[int]
    ) -> tuple[WorkflowSchemeAssociationPageScheme, ResponseScheme]:
        """Workflow schemes used by the given projects."""
        require(project_ids, NoProjectsError)
        query = QueryParams().add_many("projectId", project_ids)
        endpoint = self._endpoint("workflowscheme", "project", query=query)
        return await self._call("GET", endpoint, WorkflowSchemeAssociationPageScheme)

    async def assign(self, scheme_id: str, project_id: str) -> ResponseScheme:
        require(scheme_id, NoWorkflowSchemeIDError)
        require(project_id, NoProjectIDOrKeyError)
        payload = {"workflowSchemeId": scheme_id, "projectId": project_id}
        return await self._send("PUT", self._endpoint("workflowscheme", "project"), payload)


class WorkflowService(Service):
    def __init__(
        self,
        client: Connector | None,
        version: str,
        status: WorkflowStatusService | None = None,
        scheme: WorkflowSchemeService | None = None,
    ) -> None:
        super().__init__(client, version)
        self.status = status
        self.scheme = scheme

    async def gets(
        self,
        options: WorkflowSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[WorkflowPageScheme, ResponseScheme]:
        """Paginated classic workflow search."""
        query = QueryParams().page(start_at, max_results)
        if options is not None:
            query.add("isActive", options.is_active)
            query.add_many("workflowName", options.workflow_name)
            query.add_if("queryString", options.query_string)
            query.add_if("orderBy", options.order_by)
            query.add_joined("expand", options.expand)
        endpoint = self._endpoint("workflow", "search", query=query)
        return await self._call("GET", endpoint, WorkflowPageScheme)

    async def create(
        self, payload: WorkflowPayload
    ) -> tuple[WorkflowCreatedResponseScheme, ResponseScheme]:
        endpoint = self._endpoint("workflow")
        return await self._call("POST", endpoint, WorkflowCreatedResponseScheme, payload)

    async def delete(self, workflow_id: str) -> ResponseScheme:
        """Delete an inactive workflow by entity id."""
        require(workflow_id, NoWorkflowIDError)
        return await self._send("DELETE", self._endpoint("workflow", workflow_id))

    async def search(
        self,
        criteria: WorkflowSearchCriteria,
        expand: list[str] | None = None,
        transition_links: bool = False,
    ) -> tuple[WorkflowReadResponseScheme, ResponseScheme]:
        """Bulk read workflows by id, name or project and issue type."""
        query = QueryParams().add_joined("expand", expand)
        query.add_if("useTransitionLinksFormat", transition_links)
        endpoint = self._endpoint("workflows", query=query)
        return await self._call("POST", endpoint, WorkflowReadResponseScheme, criteria)

    async def capabilities(
        self, workflow_id: str = "", project_id: str = "", issue_type_id: str = ""
    ) -> tuple[WorkflowCapabilitiesScheme, ResponseScheme]:
        query = (
            QueryParams()
            .add_if("workflowId", workflow_id)
            .add_if("projectId", project_id)
            .add_if("issueTypeId", issue_type_id)
        )
        endpoint = self._endpoint("workflows", "capabilities", query=query)
        return await self._call("GET", endpoint, WorkflowCapabilitiesScheme)

    async def creates(
        self, payload: dict[str, Any]
    ) -> tuple[WorkflowCreateResponseScheme, ResponseScheme]:
        """Create workflows and statuses in one call; payload holds scope, statuses and workflows."""
        endpoint = self._endpoint("workflows", "create")
        return await self._call("POST", endpoint, WorkflowCreateResponseScheme, payload)

    async def validate_create_workflows(
        self, payload: dict[str, Any]
    ) -> tuple[WorkflowValidationErrorListScheme, ResponseScheme]:
        endpoint = self._endpoint("workflows", "create", "validation")
        return await self._call("POST", endpoint, WorkflowValidationErrorListScheme, payload)

    async def updates(
        self, payload: dict[str, Any], expand: list[str] | None = None
    ) -> tuple[WorkflowUpdateResponseScheme, ResponseScheme]:
        query = QueryParams().add_joined("expand", expand)
        endpoint = self._endpoint("workflows", "update", query=query)
        return await self._call("POST", endpoint, WorkflowUpdateResponseScheme, payload)

    async def validate_update_workflows(
        self, payload: dict[str, Any]
    ) -> tuple[WorkflowValidationErrorListScheme, ResponseScheme]:
        endpoint = self._endpoint("workflows", "update", "validation")
        return await self._call("POST", endpoint, WorkflowValidationErrorListScheme, payload)
