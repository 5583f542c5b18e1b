"""Jira: one connector plus every resource service for a site."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jira_cloud.core.config import DEFAULT_USER_AGENT
from jira_cloud.core.errors import JiraError, NoVersionError
from jira_cloud.core.transport import JiraClient
from jira_cloud.services.attachment import AttachmentService
from jira_cloud.services.bulk import BulkService
from jira_cloud.services.dashboard import DashboardService
from jira_cloud.services.field import (
    FieldConfigurationItemService,
    FieldConfigurationSchemeService,
    FieldConfigurationService,
    FieldContextOptionService,
    FieldContextService,
    FieldService,
    FieldTrashService,
)
from jira_cloud.services.filter import FilterService, FilterShareService
from jira_cloud.services.group import GroupService
from jira_cloud.services.myself import MySelfService
from jira_cloud.services.notification_scheme import NotificationSchemeService
from jira_cloud.services.screen import (
    ScreenSchemeService,
    ScreenService,
    ScreenTabFieldService,
    ScreenTabService,
)
from jira_cloud.services.team import TeamService
from jira_cloud.services.user import UserSearchService, UserService
from jira_cloud.services.workflow import (
    WorkflowSchemeIssueTypeService,
    WorkflowSchemeService,
    WorkflowService,
    WorkflowStatusService,
)
from jira_cloud.services.worklog import WorklogService

if TYPE_CHECKING:
    import httpx

    from jira_cloud.core.config import Settings


class JiraNotConfiguredError(JiraError):
    """Raised by Jira.from_settings when site, email or token is missing."""


class Jira:
    """
    Entry point: Jira(site, email, token, version="3").

    Services are attributes (jira.field.context.option, jira.screen.tab.field, ...). Use as an
    async context manager, or call aclose(), to release the HTTP connection pool.
    """

    def __init__(
        self,
        site: str,
        email: str | None = None,
        token: str | None = None,
        version: str = "3",
        *,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not version:
            raise NoVersionError()
        self.client = JiraClient(
            site,
            email,
            token,
            timeout=timeout,
            user_agent=user_agent,
            transport=transport,
        )
        c = self.client
        self.attachment = AttachmentService(c, version)
        self.bulk = BulkService(c, version)
        self.dashboard = DashboardService(c, version)
        self.field = FieldService(
            c,
            version,
            context=FieldContextService(c, version, option=FieldContextOptionService(c, version)),
            trash=FieldTrashService(c, version),
            configuration=FieldConfigurationService(
                c,
                version,
                item=FieldConfigurationItemService(c, version),
                scheme=FieldConfigurationSchemeService(c, version),
            ),
        )
        self.filter = FilterService(c, version, share=FilterShareService(c, version))
        self.group = GroupService(c, version)
        self.myself = MySelfService(c, version)
        self.notification_scheme = NotificationSchemeService(c, version)
        self.screen = ScreenService(
            c,
            version,
            scheme=ScreenSchemeService(c, version),
            tab=ScreenTabService(c, version, field=ScreenTabFieldService(c, version)),
        )
        self.team = TeamService(c, version)
        self.user = UserService(c, version, search=UserSearchService(c, version))
        self.workflow = WorkflowService(
            c,
            version,
            status=WorkflowStatusService(c, version),
            scheme=WorkflowSchemeService(
                c, version, issue_type=WorkflowSchemeIssueTypeService(c, version)
            ),
        )
        self.worklog = WorklogService(c, version)

    @classmethod
    def from_settings(cls, settings: Settings) -> Jira:
        if not settings.is_configured():
            raise JiraNotConfiguredError(
                "Jira is not configured; set JIRA_SITE, JIRA_EMAIL, JIRA_API_TOKEN."
            )
        return cls(
            settings.JIRA_SITE,
            settings.JIRA_EMAIL,
            settings.JIRA_API_TOKEN.get_secret_value(),
            settings.JIRA_API_VERSION,
            timeout=settings.JIRA_REQUEST_TIMEOUT_SEC,
            user_agent=settings.JIRA_USER_AGENT,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> Jira:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
