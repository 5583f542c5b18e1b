"""Pydantic schemas for issue attachments."""

from typing import Any

from pydantic import Field

from jira_cloud.schemas.common import JiraModel, UserDetailScheme


class AttachmentSettingScheme(JiraModel):
    enabled: bool | None = None
    upload_limit: int | None = None


class AttachmentMetadataScheme(JiraModel):
    id: int | None = None
    self_: str | None = Field(default=None, alias="self")
    filename: str | None = None
    author: UserDetailScheme | None = None
    created: str | None = None
    size: int | None = None
    mime_type: str | None = None
    properties: dict[str, Any] | None = None
    content: str | None = None
    thumbnail: str | None = None


class AttachmentScheme(JiraModel):
    """Attachment as returned after an upload."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    filename: str | None = None
    author: UserDetailScheme | None = None
    created: str | None = None
    size: int | None = None
    mime_type: str | None = None
    content: str | None = None
    thumbnail: str | None = None


class AttachmentArchiveEntryScheme(JiraModel):
    path: str | None = None
    index: int | None = None
    size: str | None = None
    media_type: str | None = None
    label: str | None = None


class AttachmentHumanMetadataScheme(JiraModel):
    """Contents of an archive attachment in human-readable form."""

    id: int | None = None
    name: str | None = None
    entries: list[AttachmentArchiveEntryScheme] | None = None
    total_entry_count: int | None = None
    media_type: str | None = None
