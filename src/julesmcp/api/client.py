"""Async client for the Jules REST API.

Every operation is a single HTTP round trip. Failures are returned, not
raised: each call yields an ``ApiResult`` holding either the decoded value or
an ``ApiError``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from julesmcp.api.models import (
    Activity,
    CreateSessionRequest,
    Empty,
    ErrorBody,
    ListActivitiesResponse,
    ListSessionsResponse,
    ListSourcesResponse,
    SendMessageRequest,
    Session,
    Source,
)
from julesmcp.config import API_KEY_HEADER, DEFAULT_BASE_URL
from julesmcp.resources import activity_name, session_name, source_name

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

Method = Literal["GET", "POST", "DELETE"]


@dataclass(frozen=True)
class ApiError:
    """A failed call.

    kind is ``api`` for non-2xx responses, ``transport`` when no response was
    received, and ``decode`` when a 2xx body could not be parsed.
    """

    kind: Literal["api", "transport", "decode"]
    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    value: T | None = None
    error: ApiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ApiError) -> "ApiResult[T]":
        return cls(error=error)


def _error_message(response: httpx.Response) -> str:
    """Human-readable message from a Jules error response."""
    try:
        return ErrorBody.model_validate(response.json()).error.message or f"HTTP {response.status_code}"
    except (ValueError, ValidationError):
        pass
    text = response.text.strip()
    return text or f"HTTP {response.status_code}"


class JulesClient:
    """Jules API client authenticated with a static API key."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                API_KEY_HEADER: api_key,
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "JulesClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _request(
        self,
        method: Method,
        path: str,
        model: type[M],
        body: dict | None = None,
        params: dict[str, Any] | None = None,
    ) -> ApiResult[M]:
        # httpx sends None params as empty strings; drop them instead
        query = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            response = await self._http.request(
                method,
                path,
                json=body,
                params=query or None,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            message = str(e) or type(e).__name__
            logger.error("API Error [%s %s]: %s", method, path, message)
            return ApiResult.failure(ApiError(kind="transport", message=message))

        if response.is_error:
            message = _error_message(response)
            logger.error("API Error [%s %s]: %s %s", method, path, response.status_code, message)
            return ApiResult.failure(
                ApiError(kind="api", message=message, status_code=response.status_code)
            )

        logger.debug("%s %s -> %s", method, path, response.status_code)
        try:
            data = response.json() if response.content else {}
            return ApiResult.success(model.model_validate(data))
        except (ValueError, ValidationError) as e:
            logger.error("Undecodable response [%s %s]: %s", method, path, e)
            return ApiResult.failure(
                ApiError(
                    kind="decode",
                    message=f"Unexpected response from Jules API: {e}",
                    status_code=response.status_code,
                )
            )

    # ── Sessions ─────────────────────────────────────────────────

    async def create_session(self, request: CreateSessionRequest) -> ApiResult[Session]:
        return await self._request("POST", "/sessions", Session, body=request.to_wire())

    async def list_sessions(
        self, page_size: int = 20, page_token: str | None = None
    ) -> ApiResult[ListSessionsResponse]:
        return await self._request(
            "GET",
            "/sessions",
            ListSessionsResponse,
            params={"pageSize": page_size, "pageToken": page_token},
        )

    async def get_session(self, session_id: str) -> ApiResult[Session]:
        return await self._request("GET", f"/{session_name(session_id)}", Session)

    async def send_message(self, session_id: str, message: str) -> ApiResult[Empty]:
        body = SendMessageRequest(prompt=message).to_wire()
        return await self._request("POST", f"/{session_name(session_id)}:sendMessage", Empty, body=body)

    async def approve_plan(self, session_id: str) -> ApiResult[Empty]:
        return await self._request("POST", f"/{session_name(session_id)}:approvePlan", Empty, body={})

    async def delete_session(self, session_id: str) -> ApiResult[Empty]:
        return await self._request("DELETE", f"/{session_name(session_id)}", Empty)

    # ── Activities ───────────────────────────────────────────────

    async def list_activities(
        self, session_id: str, page_size: int = 50, page_token: str | None = None
    ) -> ApiResult[ListActivitiesResponse]:
        return await self._request(
            "GET",
            f"/{session_name(session_id)}/activities",
            ListActivitiesResponse,
            params={"pageSize": page_size, "pageToken": page_token},
        )

    async def get_activity(self, session_id: str, activity_id: str) -> ApiResult[Activity]:
        return await self._request("GET", f"/{activity_name(session_id, activity_id)}", Activity)

    # ── Sources ──────────────────────────────────────────────────

    async def list_sources(
        self,
        page_size: int = 20,
        page_token: str | None = None,
        filter: str | None = None,
    ) -> ApiResult[ListSourcesResponse]:
        return await self._request(
            "GET",
            "/sources",
            ListSourcesResponse,
            params={"pageSize": page_size, "pageToken": page_token, "filter": filter},
        )

    async def get_source(self, source_id: str) -> ApiResult[Source]:
        return await self._request("GET", f"/{source_name(source_id)}", Source)
