"""Unit tests for jira_cloud.services.workflow: workflows, statuses, schemes and scheme issue types."""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock

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
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.workflow import (
    IssueTypeWorkflowPayload,
    WorkflowSchemePayload,
    WorkflowSearchCriteria,
    WorkflowSearchOptions,
    WorkflowStatusCreatePayload,
    WorkflowStatusPayload,
    WorkflowStatusScopeScheme,
    WorkflowStatusSearchOptions,
)
from jira_cloud.services.workflow import (
    WorkflowSchemeIssueTypeService,
    WorkflowSchemeService,
    WorkflowService,
    WorkflowStatusService,
)

REQUEST = object()


def _connector(body: bytes = b"", code: int = 200) -> MagicMock:
    client = MagicMock()
    client.new_request.return_value = REQUEST
    client.call = AsyncMock(
        return_value=ResponseScheme(code=code, endpoint="https://x.atlassian.net", method="GET", body=body)
    )
    return client


class TestWorkflowService(unittest.TestCase):
    def test_gets_sends_is_active_with_options(self) -> None:
        client = _connector()
        options = WorkflowSearchOptions(workflow_name=["Software workflow"], expand=["statuses", "transitions"])
        asyncio.run(WorkflowService(client, "3").gets(options, 0, 50))
        client.new_request.assert_called_once_with(
            "GET",
            "rest/api/3/workflow/search?expand=statuses%2Ctransitions&isActive=false&maxResults=50"
            "&startAt=0&workflowName=Software+workflow",
            None,
        )

    def test_search_posts_criteria(self) -> None:
        client = _connector(b'{"statuses": [], "workflows": [{"id": "abc"}]}')
        criteria = WorkflowSearchCriteria(workflow_names=["Software workflow"])
        read, _ = asyncio.run(WorkflowService(client, "3").search(criteria, ["workflows.usages"], True))
        client.new_request.assert_called_once_with(
            "POST",
            "rest/api/3/workflows?expand=workflows.usages&useTransitionLinksFormat=true",
            {"workflowNames": ["Software workflow"]},
        )
        self.assertEqual(read.workflows[0]["id"], "abc")

    def test_capabilities_and_bulk_writes(self) -> None:
        client = _connector()
        service = WorkflowService(client, "3")
        asyncio.run(service.capabilities(project_id="10000", issue_type_id="10001"))
        asyncio.run(service.creates({"scope": {"type": "GLOBAL"}}))
        asyncio.run(service.validate_create_workflows({"payload": {}}))
        asyncio.run(service.updates({"workflows": []}, ["workflows.usages"]))
        asyncio.run(service.validate_update_workflows({"payload": {}}))
        endpoints = [c[0][:2] for c in client.new_request.call_args_list]
        self.assertEqual(
            endpoints,
            [
                ("GET", "rest/api/3/workflows/capabilities?issueTypeId=10001&projectId=10000"),
                ("POST", "rest/api/3/workflows/create"),
                ("POST", "rest/api/3/workflows/create/validation"),
                ("POST", "rest/api/3/workflows/update?expand=workflows.usages"),
                ("POST", "rest/api/3/workflows/update/validation"),
            ],
        )

    def test_delete_requires_id(self) -> None:
        client = _connector()
        with self.assertRaises(NoWorkflowIDError):
            asyncio.run(WorkflowService(client, "2").delete(""))
        asyncio.run(WorkflowService(client, "2").delete("abc-123"))
        client.new_request.assert_called_once_with("DELETE", "rest/api/2/workflow/abc-123", None)


class TestWorkflowStatusService(unittest.TestCase):
    def test_get_and_bulk(self) -> None:
        client = _connector(b'{"id": "1", "name": "Open", "statusCategory": {"key": "new"}}')
        service = WorkflowStatusService(client, "3")
        status, _ = asyncio.run(service.get("Open"))
        self.assertEqual(status.status_category.key, "new")
        with self.assertRaises(NoWorkflowStatusNameOrIDError):
            asyncio.run(service.get(""))
        client.new_request.assert_called_once_with("GET", "rest/api/3/status/Open", None)

    def test_create_checks_statuses_then_scope(self) -> None:
        client = _connector()
        service = WorkflowStatusService(client, "3")
        with self.assertRaises(NoWorkflowStatusesError):
            asyncio.run(service.create(WorkflowStatusCreatePayload()))
        with self.assertRaises(NoWorkflowScopeError):
            asyncio.run(
                service.create(WorkflowStatusCreatePayload(statuses=[WorkflowStatusPayload(name="Done")]))
            )
        client.new_request.assert_not_called()

    def test_create_posts_payload(self) -> None:
        client = _connector(b'[{"id": "10011", "name": "Done"}]')
        payload = WorkflowStatusCreatePayload(
            statuses=[WorkflowStatusPayload(name="Done", status_category="DONE")],
            scope=WorkflowStatusScopeScheme(type="PROJECT", project={"id": "10000"}),
        )
        created, _ = asyncio.run(WorkflowStatusService(client, "3").create(payload))
        client.new_request.assert_called_once_with(
            "POST",
            "rest/api/3/statuses",
            {
                "statuses": [{"name": "Done", "statusCategory": "DONE"}],
                "scope": {"type": "PROJECT", "project": {"id": "10000"}},
            },
        )
        self.assertEqual(created[0].id, "10011")

    def test_delete_and_search(self) -> None:
        client = _connector()
        service = WorkflowStatusService(client, "3")
        with self.assertRaises(NoWorkflowStatusesError):
            asyncio.run(service.delete([]))
        asyncio.run(service.delete(["1", "2"]))
        asyncio.run(service.search(WorkflowStatusSearchOptions(project_id="10000", status_category="DONE")))
        endpoints = [c[0][1] for c in client.new_request.call_args_list]
        self.assertEqual(
            endpoints,
            [
                "rest/api/3/statuses?id=1&id=2",
                "rest/api/3/statuses/search?maxResults=50&projectId=10000&startAt=0&statusCategory=DONE",
            ],
        )


class TestWorkflowSchemeService(unittest.TestCase):
    def test_get_with_draft(self) -> None:
        client = _connector(b'{"id": 10032, "issueTypeMappings": {"10000": "jira"}}')
        scheme, _ = asyncio.run(WorkflowSchemeService(client, "3").get(10032, True))
        client.new_request.assert_called_once_with(
            "GET", "rest/api/3/workflowscheme/10032?returnDraftIfExists=true", None
        )
        self.assertEqual(scheme.issue_type_mappings, {"10000": "jira"})

    def test_create_keeps_mapping_keys(self) -> None:
        client = _connector()
        payload = WorkflowSchemePayload(name="Scheme", issue_type_mappings={"10000": "jira"})
        asyncio.run(WorkflowSchemeService(client, "2").create(payload))
        client.new_request.assert_called_once_with(
            "POST", "rest/api/2/workflowscheme", {"name": "Scheme", "issueTypeMappings": {"10000": "jira"}}
        )

    def test_associations_and_assign(self) -> None:
        client = _connector()
        service = WorkflowSchemeService(client, "3")
        with self.assertRaises(NoProjectsError):
            asyncio.run(service.associations([]))
        with self.assertRaises(NoProjectIDOrKeyError):
            asyncio.run(service.assign("10032", ""))
        with self.assertRaises(NoWorkflowSchemeIDError):
            asyncio.run(service.delete(0))
        asyncio.run(service.associations([10000, 10001]))
        asyncio.run(service.assign("10032", "10000"))
        calls = [c[0] for c in client.new_request.call_args_list]
        self.assertEqual(
            calls,
            [
                ("GET", "rest/api/3/workflowscheme/project?projectId=10000&projectId=10001", None),
                ("PUT", "rest/api/3/workflowscheme/project", {"workflowSchemeId": "10032", "projectId": "10000"}),
            ],
        )


class TestWorkflowSchemeIssueTypeService(unittest.TestCase):
    def test_get_with_draft(self) -> None:
        for version in ("2", "3"):
            client = _connector(b'{"issueType": "10000", "workflow": "jira"}')
            mapping, _ = asyncio.run(WorkflowSchemeIssueTypeService(client, version).get(10001, "10000", True))
            client.new_request.assert_called_once_with(
                "GET", f"rest/api/{version}/workflowscheme/10001/issuetype/10000?returnDraftIfExists=true", None
            )
            self.assertEqual(mapping.workflow, "jira")

    def test_set_and_delete(self) -> None:
        for version in ("2", "3"):
            client = _connector(b'{"id": 10001, "defaultWorkflow": "jira"}')
            service = WorkflowSchemeIssueTypeService(client, version)
            payload = IssueTypeWorkflowPayload(issue_type="10000", workflow="jira", update_draft_if_needed=True)
            scheme, _ = asyncio.run(service.set(10001, "10000", payload))
            asyncio.run(service.delete(10001, "10000", True))
            asyncio.run(service.delete(10001, "10000"))
            calls = [c[0] for c in client.new_request.call_args_list]
            self.assertEqual(
                calls,
                [
                    (
                        "PUT",
                        f"rest/api/{version}/workflowscheme/10001/issuetype/10000",
                        {"issueType": "10000", "workflow": "jira", "updateDraftIfNeeded": True},
                    ),
                    (
                        "DELETE",
                        f"rest/api/{version}/workflowscheme/10001/issuetype/10000?updateDraftIfNeeded=true",
                        None,
                    ),
                    ("DELETE", f"rest/api/{version}/workflowscheme/10001/issuetype/10000", None),
                ],
            )
            self.assertEqual(scheme.id, 10001)

    def test_mapping_filters(self) -> None:
        for version in ("2", "3"):
            client = _connector(b'[{"workflow": "jira", "issueTypes": ["10000"], "defaultMapping": false}]')
            service = WorkflowSchemeIssueTypeService(client, version)
            mappings, _ = asyncio.run(service.mapping(10001, "jira", True))
            asyncio.run(service.mapping(10001))
            endpoints = [c[0][1] for c in client.new_request.call_args_list]
            self.assertEqual(
                endpoints,
                [
                    f"rest/api/{version}/workflowscheme/10001/workflow?returnDraftIfExists=true&workflowName=jira",
                    f"rest/api/{version}/workflowscheme/10001/workflow",
                ],
            )
            self.assertEqual(mappings[0].issue_types, ["10000"])

    def test_missing_scheme_then_issue_type(self) -> None:
        client = _connector()
        service = WorkflowSchemeIssueTypeService(client, "3")
        payload = IssueTypeWorkflowPayload(workflow="jira")
        with self.assertRaises(NoWorkflowSchemeIDError):
            asyncio.run(service.get(0, "10000"))
        with self.assertRaises(NoIssueTypeIDError):
            asyncio.run(service.get(10001, ""))
        with self.assertRaises(NoWorkflowSchemeIDError):
            asyncio.run(service.set(0, "10000", payload))
        with self.assertRaises(NoIssueTypeIDError):
            asyncio.run(service.set(10001, "", payload))
        with self.assertRaises(NoWorkflowSchemeIDError):
            asyncio.run(service.delete(0, "10000"))
        with self.assertRaises(NoIssueTypeIDError):
            asyncio.run(service.delete(10001, ""))
        with self.assertRaises(NoWorkflowSchemeIDError):
            asyncio.run(service.mapping(0))
        client.new_request.assert_not_called()

    def test_scheme_exposes_issue_type_child(self) -> None:
        child = WorkflowSchemeIssueTypeService(None, "3")
        self.assertIs(WorkflowSchemeService(None, "3", issue_type=child).issue_type, child)
