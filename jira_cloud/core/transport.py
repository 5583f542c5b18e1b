"""HTTP connector for Jira Cloud: builds authenticated requests and turns responses into ResponseScheme."""

from __future__ import annotations

import logging
import time
from typing import Any, Protocol

import httpx
from pydantic import BaseModel, Field

from jira_cloud.core.config import DEFAULT_USER_AGENT
from jira_cloud.core.errors import JiraApiError

logger = logging.getLogger(__name__)


class ResponseScheme(BaseModel):
    """Metadata of one Jira HTTP exchange, returned with every result."""

    code: int = Field(..., description="HTTP status code.")
    endpoint: str = Field(..., description="Absolute URL that was requested.")
    method: str = Field(..., description="HTTP method.")
    body: bytes = Field(default=b"", description="Raw response body.")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers.")


class Connector(Protocol):
    """Transport used by every service. JiraClient is the default implementation."""

    def new_request(self, method: str, path: str, payload: Any = None) -> httpx.Request: ...

    def new_form_request(
        self, method: str, path: str, files: dict[str, Any]
    ) -> httpx.Request: ...

    async def call(self, request: httpx.Request) -> ResponseScheme: ...


def _error_detail(resp: httpx.Response) -> str:
    """Best-effort human readable detail from a Jira error body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:500] if resp.text else "Unknown error"
    if not isinstance(body, dict):
        return str(body)[:500]
    err_messages = body.get("errorMessages") or []
    errors = body.get("errors") or {}
    if err_messages:
        return "; ".join(str(m) for m in err_messages)
    if errors:
        return "; ".join(f"{k}: {v}" for k, v in errors.items())[:500]
    return resp.text[:500] if resp.text else "Unknown error"


class JiraClient:
    """
    Connector backed by httpx.AsyncClient with basic auth (email + API token).

    Paths are relative to the site (e.g. rest/api/3/field). Non-2xx responses raise
    JiraApiError with the ResponseScheme attached; httpx transport errors propagate as-is.
    """

    def __init__(
        self,
        site: str,
        email: str | None = None,
        token: str | None = None,
        *,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not site or not site.strip():
            raise ValueError("site must be set and non-empty")
        self.site = site.strip().rstrip("/") + "/"
        self.user_agent = user_agent
        auth = httpx.BasicAuth(email, token) if email and token else None
        self._http = httpx.AsyncClient(
            auth=auth, timeout=timeout, follow_redirects=True, transport=transport
        )

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "User-Agent": self.user_agent}

    def new_request(self, method: str, path: str, payload: Any = None) -> httpx.Request:
        """Build a JSON request for path; Content-Type is set only when payload is given."""
        url = self.site + path.lstrip("/")
        if payload is None:
            return self._http.build_request(method, url, headers=self._headers())
        return self._http.build_request(method, url, headers=self._headers(), json=payload)

    def new_form_request(
        self, method: str, path: str, files: dict[str, Any]
    ) -> httpx.Request:
        """Build a multipart request; Jira requires the XSRF bypass header for uploads."""
        headers = self._headers()
        headers["X-Atlassian-Token"] = "no-check"
        url = self.site + path.lstrip("/")
        return self._http.build_request(method, url, headers=headers, files=files)

    async def call(self, request: httpx.Request) -> ResponseScheme:
        """Send request and return its metadata. Raises JiraApiError on a non-2xx status."""
        start = time.perf_counter()
        resp = await self._http.send(request)
        duration_ms = round((time.perf_counter() - start) * 1000)
        response = ResponseScheme(
            code=resp.status_code,
            endpoint=str(request.url),
            method=request.method,
            body=resp.content,
            headers=dict(resp.headers),
        )
        log_extra = {
            "jira_method": request.method,
            "jira_endpoint": request.url.path,
            "jira_status": resp.status_code,
            "jira_duration_ms": duration_ms,
        }
        if not resp.is_success:
            logger.warning("Jira request failed", extra=log_extra)
            raise JiraApiError(
                f"Jira returned {resp.status_code}: {_error_detail(resp)}",
                resp.status_code,
                response,
            )
        logger.debug("Jira request completed", extra=log_extra)
        return response

    async def aclose(self) -> None:
        await self._http.aclose()
