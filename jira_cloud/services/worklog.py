"""
Issue worklogs.

One service serves both API versions: on v3 worklog comments are Atlassian Document Format
documents, on v2 they are plain strings. Payload and result models accept either.
"""

from jira_cloud.core.errors import NoIssueKeyOrIDError, NoWorklogIDError, NoWorklogsError
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.worklog import (
    ChangedWorklogPageScheme,
    WorklogOptions,
    WorklogPageScheme,
    WorklogPayload,
    WorklogScheme,
)
from jira_cloud.services.base import QueryParams, Service, require


def _options_query(options: WorklogOptions | None) -> QueryParams:
    query = QueryParams()
    if options is None:
        return query
    query.add("notifyUsers", options.notify)
    query.add("overrideEditableFlag", options.override_editable_flag)
    query.add_if("adjustEstimate", options.adjust_estimate)
    query.add_if("newEstimate", options.new_estimate)
    query.add_if("reduceBy", options.reduce_by)
    query.add_joined("expand", options.expand)
    return query


class WorklogService(Service):
    async def gets(
        self, worklog_ids: list[int], expand: list[str] | None = None
    ) -> tuple[list[WorklogScheme], ResponseScheme]:
        """Worklogs by id across issues (up to 1000 per call)."""
        require(worklog_ids, NoWorklogsError)
        query = QueryParams().add_joined("expand", expand)
        endpoint = self._endpoint("worklog", "list", query=query)
        return await self._call("POST", endpoint, list[WorklogScheme], {"ids": worklog_ids})

    async def get(
        self, issue_key_or_id: str, worklog_id: str, expand: list[str] | None = None
    ) -> tuple[WorklogScheme, ResponseScheme]:
        require(issue_key_or_id, NoIssueKeyOrIDError)
        require(worklog_id, NoWorklogIDError)
        query = QueryParams().add_joined("expand", expand)
        endpoint = self._endpoint("issue", issue_key_or_id, "worklog", worklog_id, query=query)
        return await self._call("GET", endpoint, WorklogScheme)

    async def issue(
        self,
        issue_key_or_id: str,
        start_at: int = 0,
        max_results: int = 50,
        after: int = 0,
        expand: list[str] | None = None,
    ) -> tuple[WorklogPageScheme, ResponseScheme]:
        """Worklogs of one issue; after is a UNIX timestamp in milliseconds (startedAfter)."""
        require(issue_key_or_id, NoIssueKeyOrIDError)
        query = (
            QueryParams()
            .page(start_at, max_results)
            .add_if("startedAfter", after)
            .add_joined("expand", expand)
        )
        endpoint = self._endpoint("issue", issue_key_or_id, "worklog", query=query)
        return await self._call("GET", endpoint, WorklogPageScheme)

    async def delete(
        self,
        issue_key_or_id: str,
        worklog_id: str,
        options: WorklogOptions | None = None,
    ) -> ResponseScheme:
        require(issue_key_or_id, NoIssueKeyOrIDError)
        require(worklog_id, NoWorklogIDError)
        endpoint = self._endpoint(
            "issue", issue_key_or_id, "worklog", worklog_id, query=_options_query(options)
        )
        return await self._send("DELETE", endpoint)

    async def deleted(self, since: int = 0) -> tuple[ChangedWorklogPageScheme, ResponseScheme]:
        """Ids of worklogs deleted since a UNIX timestamp in milliseconds."""
        query = QueryParams().add_if("since", since)
        endpoint = self._endpoint("worklog", "deleted", query=query)
        return await self._call("GET", endpoint, ChangedWorklogPageScheme)

    async def updated(
        self, since: int = 0, expand: list[str] | None = None
    ) -> tuple[ChangedWorklogPageScheme, ResponseScheme]:
        query = QueryParams().add_if("since", since).add_joined("expand", expand)
        endpoint = self._endpoint("worklog", "updated", query=query)
        return await self._call("GET", endpoint, ChangedWorklogPageScheme)

    async def add(
        self,
        issue_key_or_id: str,
        payload: WorklogPayload,
        options: WorklogOptions | None = None,
    ) -> tuple[WorklogScheme, ResponseScheme]:
        require(issue_key_or_id, NoIssueKeyOrIDError)
        endpoint = self._endpoint("issue", issue_key_or_id, "worklog", query=_options_query(options))
        return await self._call("POST", endpoint, WorklogScheme, payload)

    async def update(
        self,
        issue_key_or_id: str,
        worklog_id: str,
        payload: WorklogPayload,
        options: WorklogOptions | None = None,
    ) -> tuple[WorklogScheme, ResponseScheme]:
        require(issue_key_or_id, NoIssueKeyOrIDError)
        require(worklog_id, NoWorklogIDError)
        endpoint = self._endpoint(
            "issue", issue_key_or_id, "worklog", worklog_id, query=_options_query(options)
        )
        return await self._call("PUT", endpoint, WorklogScheme, payload)
