"""Pydantic schemas for screens, screen tabs, tab fields and screen schemes."""

from pydantic import BaseModel, Field

from jira_cloud.schemas.common import JiraModel, PageScheme


class ScreenScopeScheme(JiraModel):
    type: str | None = None
    project: dict[str, str] | None = None


class ScreenScheme(JiraModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    scope: ScreenScopeScheme | None = None


class ScreenPageScheme(PageScheme):
    values: list[ScreenScheme] = Field(default_factory=list)


class ScreenSearchOptions(BaseModel):
    """Filters for ScreenService.gets."""

    ids: list[int] = Field(default_factory=list)
    query_string: str = ""
    scope: list[str] = Field(default_factory=list, description="GLOBAL and/or PROJECT.")
    order_by: str = ""


class ScreenTabScheme(JiraModel):
    id: int | None = None
    name: str | None = None


class ScreenWithTabScheme(ScreenScheme):
    tab: ScreenTabScheme | None = None


class ScreenFieldPageScheme(PageScheme):
    """Screens a field appears on."""

    values: list[ScreenWithTabScheme] = Field(default_factory=list)


class AvailableScreenFieldScheme(JiraModel):
    id: str | None = None
    name: str | None = None


class ScreenTabFieldScheme(JiraModel):
    id: str | None = None
    name: str | None = None


class ScreenTypesScheme(JiraModel):
    """Screen ids per operation for a screen scheme."""

    default: int | None = None
    create: int | None = None
    edit: int | None = None
    view: int | None = None


class ScreenSchemeScheme(JiraModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    screens: ScreenTypesScheme | None = None


class ScreenSchemePageScheme(PageScheme):
    values: list[ScreenSchemeScheme] = Field(default_factory=list)


class ScreenSchemePayload(JiraModel):
    name: str | None = None
    description: str | None = None
    screens: ScreenTypesScheme | None = None


class ScreenSchemeSearchOptions(BaseModel):
    """Filters for ScreenSchemeService.gets."""

    ids: list[int] = Field(default_factory=list)
    query_string: str = ""
    order_by: str = ""
    expand: list[str] = Field(default_factory=list)
