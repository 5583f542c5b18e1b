"""Issue attachments: settings, metadata, download, upload and deletion."""

from typing import BinaryIO

from jira_cloud.core.errors import (
    NoAttachmentIDError,
    NoAttachmentNameError,
    NoIssueKeyOrIDError,
    NoReaderError,
)
from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.attachment import (
    AttachmentHumanMetadataScheme,
    AttachmentMetadataScheme,
    AttachmentScheme,
    AttachmentSettingScheme,
)
from jira_cloud.services.base import QueryParams, Service, require


class AttachmentService(Service):
    async def settings(self) -> tuple[AttachmentSettingScheme, ResponseScheme]:
        """Attachment settings of the site: whether uploads are enabled and the size limit."""
        endpoint = self._endpoint("attachment", "meta")
        return await self._call("GET", endpoint, AttachmentSettingScheme)

    async def metadata(
        self, attachment_id: str
    ) -> tuple[AttachmentMetadataScheme, ResponseScheme]:
        require(attachment_id, NoAttachmentIDError)
        endpoint = self._endpoint("attachment", attachment_id)
        return await self._call("GET", endpoint, AttachmentMetadataScheme)

    async def human(
        self, attachment_id: str
    ) -> tuple[AttachmentHumanMetadataScheme, ResponseScheme]:
        """Contents of an archive attachment (e.g. zip) in human-readable form."""
        require(attachment_id, NoAttachmentIDError)
        endpoint = self._endpoint("attachment", attachment_id, "expand", "human")
        return await self._call("GET", endpoint, AttachmentHumanMetadataScheme)

    async def delete(self, attachment_id: str) -> ResponseScheme:
        require(attachment_id, NoAttachmentIDError)
        return await self._send("DELETE", self._endpoint("attachment", attachment_id))

    async def download(self, attachment_id: str, redirect: bool = True) -> ResponseScheme:
        """Download the file; the content is in the returned ResponseScheme.body."""
        require(attachment_id, NoAttachmentIDError)
        query = QueryParams()
        if not redirect:
            query.add("redirect", False)
        endpoint = self._endpoint("attachment", "content", attachment_id, query=query)
        return await self._send("GET", endpoint)

    async def add(
        self, issue_key_or_id: str, file_name: str, file: BinaryIO | bytes | None
    ) -> tuple[list[AttachmentScheme], ResponseScheme]:
        """Upload one file to an issue as multipart form field "file"."""
        require(issue_key_or_id, NoIssueKeyOrIDError)
        require(file_name, NoAttachmentNameError)
        if file is None:
            raise NoReaderError()
        endpoint = self._endpoint("issue", issue_key_or_id, "attachments")
        files = {"file": (file_name, file)}
        return await self._call_form("POST", endpoint, list[AttachmentScheme], files)
