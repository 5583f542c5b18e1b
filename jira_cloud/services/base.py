"""Shared request-building for every Jira service: validate, build endpoint, call, decode."""

from __future__ import annotations

from functools import lru_cache
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, TypeAdapter, ValidationError

from jira_cloud.core.errors import MissingParameterError, NoVersionError, ResponseDecodeError
from jira_cloud.core.transport import Connector, ResponseScheme


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryParams:
    """
    Multi-value query parameters.

    Encoding sorts by key (stable, so repeated values keep insertion order) and escapes with
    quote_plus: add("projectKeys", "DUMMY,KP") encodes as projectKeys=DUMMY%2CKP.
    """

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []

    def add(self, key: str, value: Any) -> QueryParams:
        """Always add; booleans render as true/false."""
        self._pairs.append((key, _render(value)))
        return self

    def add_if(self, key: str, value: Any) -> QueryParams:
        """Add only when value is not empty, zero, False or None."""
        if value:
            self.add(key, value)
        return self

    def add_many(self, key: str, values: Any) -> QueryParams:
        """Repeat key once per value (key=a&key=b)."""
        for value in values or ():
            self.add(key, value)
        return self

    def add_joined(self, key: str, values: Any) -> QueryParams:
        """Comma-join values into one parameter; skipped when values is empty."""
        if values:
            self.add(key, ",".join(_render(v) for v in values))
        return self

    def page(self, start_at: int, max_results: int) -> QueryParams:
        return self.add("startAt", start_at).add("maxResults", max_results)

    def encode(self) -> str:
        return urlencode(sorted(self._pairs, key=lambda pair: pair[0]))

    def __bool__(self) -> bool:
        return bool(self._pairs)


def require(value: Any, error: type[MissingParameterError]) -> None:
    """Raise error() when value is empty, zero or None."""
    if not value:
        raise error()


def serialize(payload: Any) -> Any:
    """Turn payload models into JSON-ready data by wire alias, dropping None fields."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, (list, tuple)):
        return [serialize(item) for item in payload]
    if isinstance(payload, dict):
        return {key: serialize(value) for key, value in payload.items()}
    return payload


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def decode(response: ResponseScheme, result_type: Any) -> Any:
    """Decode the response body into result_type. Empty bodies decode to None."""
    if not response.body:
        return None
    try:
        return _adapter(result_type).validate_json(response.body)
    except ValidationError as e:
        raise ResponseDecodeError(
            f"Unable to decode {response.method} {response.endpoint} response: {e.error_count()} error(s)",
            response=response,
        ) from e


class Service:
    """
    Base for resource services. Holds the connector and API version ("2" or "3").

    Typed operations return (result, ResponseScheme); void operations return ResponseScheme.
    Errors from the connector are never caught here.
    """

    api_prefix = "rest/api/{version}"

    def __init__(self, client: Connector | None, version: str) -> None:
        if not version:
            raise NoVersionError()
        self._client = client
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    def _endpoint(self, *segments: Any, query: QueryParams | None = None) -> str:
        parts = [self.api_prefix.format(version=self._version)]
        parts.extend(str(s) for s in segments)
        path = "/".join(parts)
        if query:
            path = f"{path}?{query.encode()}"
        return path

    async def _call(
        self,
        method: str,
        endpoint: str,
        result_type: Any,
        payload: Any = None,
    ) -> tuple[Any, ResponseScheme]:
        request = self._client.new_request(method, endpoint, serialize(payload))
        response = await self._client.call(request)
        return decode(response, result_type), response

    async def _send(self, method: str, endpoint: str, payload: Any = None) -> ResponseScheme:
        request = self._client.new_request(method, endpoint, serialize(payload))
        return await self._client.call(request)

    async def _call_form(
        self,
        method: str,
        endpoint: str,
        result_type: Any,
        files: dict[str, Any],
    ) -> tuple[Any, ResponseScheme]:
        request = self._client.new_form_request(method, endpoint, files)
        response = await self._client.call(request)
        return decode(response, result_type), response
