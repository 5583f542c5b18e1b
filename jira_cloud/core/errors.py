"""Exceptions raised by the Jira client: missing parameters, API failures and decode failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jira_cloud.core.transport import ResponseScheme


class JiraError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingParameterError(JiraError):
    """Raised before any request is built when a required value is empty or zero."""

    default_message = "required parameter not set"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class JiraApiError(JiraError):
    """Raised when Jira answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: ResponseScheme | None = None,
    ) -> None:
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class ResponseDecodeError(JiraError):
    """Raised when a response body cannot be decoded into the declared result type."""

    def __init__(self, message: str, response: ResponseScheme | None = None) -> None:
        self.response = response
        super().__init__(message)


class NoVersionError(MissingParameterError):
    default_message = "no module version set"


class NoIssueKeyOrIDError(MissingParameterError):
    default_message = "no issue key/id set"


class NoIssuesSliceError(MissingParameterError):
    default_message = "no issues object set"


class NoTaskIDError(MissingParameterError):
    default_message = "no task id set"


class NoKeyError(MissingParameterError):
    default_message = "no key set"


class NoAttachmentIDError(MissingParameterError):
    default_message = "no attachment id set"


class NoAttachmentNameError(MissingParameterError):
    default_message = "no attachment filename set"


class NoReaderError(MissingParameterError):
    default_message = "no reader set"


class NoFieldIDError(MissingParameterError):
    default_message = "no field id set"


class NoFieldContextIDError(MissingParameterError):
    default_message = "no field context id set"


class NoContextOptionIDError(MissingParameterError):
    default_message = "no field context option id set"


class NoIssueTypesError(MissingParameterError):
    default_message = "no issue types id's set"


class NoIssueTypeIDError(MissingParameterError):
    default_message = "no issue type id set"


class NoFieldConfigurationIDError(MissingParameterError):
    default_message = "no field configuration id set"


class NoFieldConfigurationNameError(MissingParameterError):
    default_message = "no field configuration name set"


class NoFieldConfigurationSchemeIDError(MissingParameterError):
    default_message = "no field configuration scheme id set"


class NoFieldConfigurationSchemeNameError(MissingParameterError):
    default_message = "no field configuration scheme name set"


class NoProjectIDsError(MissingParameterError):
    default_message = "no project id's set"


class NoProjectsError(MissingParameterError):
    default_message = "no projects set"


class NoProjectIDOrKeyError(MissingParameterError):
    default_message = "no project id or key set"


class NoProjectKeySliceError(MissingParameterError):
    default_message = "no project key's set"


class NoGroupNameError(MissingParameterError):
    default_message = "no group name set"


class NoAccountIDError(MissingParameterError):
    default_message = "no account id set"


class NoAccountSliceError(MissingParameterError):
    default_message = "no account id's set"


class NoScreenIDError(MissingParameterError):
    default_message = "no screen id set"


class NoScreenNameError(MissingParameterError):
    default_message = "no screen name set"


class NoScreenTabIDError(MissingParameterError):
    default_message = "no screen tab id set"


class NoScreenTabNameError(MissingParameterError):
    default_message = "no screen tab name set"


class NoScreenSchemeIDError(MissingParameterError):
    default_message = "no screen scheme id set"


class NoWorkflowIDError(MissingParameterError):
    default_message = "no workflow id set"


class NoWorkflowSchemeIDError(MissingParameterError):
    default_message = "no workflow scheme id set"


class NoWorkflowStatusesError(MissingParameterError):
    default_message = "no workflow statuses set"


class NoWorkflowScopeError(MissingParameterError):
    default_message = "no workflow scope set"


class NoWorkflowStatusNameOrIDError(MissingParameterError):
    default_message = "no workflow status name or id set"


class NoWorklogIDError(MissingParameterError):
    default_message = "no worklog id set"


class NoWorklogsError(MissingParameterError):
    default_message = "no worklog's id set"


class NoNotificationSchemeIDError(MissingParameterError):
    default_message = "no notification scheme id set"


class NoNotificationIDError(MissingParameterError):
    default_message = "no notification id set"


class NoDashboardIDError(MissingParameterError):
    default_message = "no dashboard id set"


class NoFilterIDError(MissingParameterError):
    default_message = "no filter id set"


class NoPermissionGrantIDError(MissingParameterError):
    default_message = "no permission grant id set"
