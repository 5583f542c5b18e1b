"""Async typed client for the Jira Cloud REST API."""

from jira_cloud.client import Jira
from jira_cloud.core.errors import JiraApiError, JiraError, MissingParameterError, ResponseDecodeError
from jira_cloud.core.transport import JiraClient, ResponseScheme

__all__ = [
    "Jira",
    "JiraApiError",
    "JiraClient",
    "JiraError",
    "MissingParameterError",
    "ResponseDecodeError",
    "ResponseScheme",
]
