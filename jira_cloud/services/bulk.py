"""Bulk issue operations: delete, edit and transition many issues as one queued task."""

from jira_cloud.core.errors import NoIssuesSliceError, NoTaskIDError
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.bulk import (
    BulkEditGetFieldsScheme,
    BulkOperationProgressScheme,
    BulkTransitionGetAvailableTransitionsScheme,
    BulkTransitionSubmitInput,
    IssueBulkEditPayload,
    SubmittedBulkOperationScheme,
)
from jira_cloud.services.base import QueryParams, Service, require


class BulkService(Service):
    async def delete(
        self, issue_ids_or_keys: list[str], send_notification: bool = True
    ) -> tuple[SubmittedBulkOperationScheme, ResponseScheme]:
        require(issue_ids_or_keys, NoIssuesSliceError)
        payload = {
            "selectedIssueIdsOrKeys": issue_ids_or_keys,
            "sendBulkNotification": send_notification,
        }
        endpoint = self._endpoint("bulk", "issues", "delete")
        return await self._call("POST", endpoint, SubmittedBulkOperationScheme, payload)

    async def edit(
        self, payload: IssueBulkEditPayload
    ) -> tuple[SubmittedBulkOperationScheme, ResponseScheme]:
        endpoint = self._endpoint("bulk", "issues", "fields")
        return await self._call("POST", endpoint, SubmittedBulkOperationScheme, payload)

    async def get_fields(
        self,
        issue_ids_or_keys: list[str],
        search_text: str = "",
        ending_before: str = "",
        starting_after: str = "",
    ) -> tuple[BulkEditGetFieldsScheme, ResponseScheme]:
        """Fields that can be bulk edited on the given issues (cursor paginated)."""
        require(issue_ids_or_keys, NoIssuesSliceError)
        query = (
            QueryParams()
            .add_joined("issueIdsOrKeys", issue_ids_or_keys)
            .add_if("searchText", search_text)
            .add_if("endingBefore", ending_before)
            .add_if("startingAfter", starting_after)
        )
        endpoint = self._endpoint("bulk", "edit", "fields", query=query)
        return await self._call("GET", endpoint, BulkEditGetFieldsScheme)

    async def get_transitions(
        self,
        issue_ids_or_keys: list[str],
        ending_before: str = "",
        starting_after: str = "",
    ) -> tuple[BulkTransitionGetAvailableTransitionsScheme, ResponseScheme]:
        require(issue_ids_or_keys, NoIssuesSliceError)
        query = (
            QueryParams()
            .add_joined("issueIdsOrKeys", issue_ids_or_keys)
            .add_if("endingBefore", ending_before)
            .add_if("startingAfter", starting_after)
        )
        endpoint = self._endpoint("bulk", "issues", "transition", query=query)
        return await self._call("GET", endpoint, BulkTransitionGetAvailableTransitionsScheme)

    async def transition(
        self, inputs: list[BulkTransitionSubmitInput], send_notification: bool = True
    ) -> tuple[SubmittedBulkOperationScheme, ResponseScheme]:
        payload = {
            "bulkTransitionInputs": inputs,
            "sendBulkNotification": send_notification,
        }
        endpoint = self._endpoint("bulk", "issues", "transition")
        return await self._call("POST", endpoint, SubmittedBulkOperationScheme, payload)

    async def get_status(
        self, task_id: str
    ) -> tuple[BulkOperationProgressScheme, ResponseScheme]:
        """Progress of a submitted bulk operation."""
        require(task_id, NoTaskIDError)
        endpoint = self._endpoint("bulk", "queue", task_id)
        return await self._call("GET", endpoint, BulkOperationProgressScheme)
