"""HTTP transport: request encoding, header assembly, status handling and body decoding."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from jina_client.config import ClientConfig
from jina_client.errors import DecodingError, EncodingError, RemoteError
from jina_client.models.common import JinaRequest

# Routed through stdlib logging: silent until the host application configures handlers.
logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

JSON_MEDIA_TYPE = "application/json"
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"

ModelT = TypeVar("ModelT", bound=BaseModel)


def encode_request(request: JinaRequest) -> bytes:
    try:
        return json.dumps(request.to_payload()).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"failed to marshal request: {exc}") from exc


def error_detail(response: httpx.Response) -> dict[str, Any] | None:
    """Return the error body as a mapping, or None when it is not a JSON object."""
    try:
        detail = response.json()
    except ValueError:
        return None
    return detail if isinstance(detail, dict) else None


def decode_body(call: str, model: type[ModelT], body: bytes | str, *, what: str = "response") -> ModelT:
    """Validate a JSON body against ``model``; any mismatch becomes a DecodingError."""
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise DecodingError(f"{call}: failed to decode {what}: {exc}") from exc


class Transport:
    """Sends requests for one client configuration over a shared connection pool."""

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._http_client = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Return the connection pool, creating it on first use.

        ``config.timeout`` applies only to the pool created here; an injected
        ``http_client`` keeps its own timeout settings.
        """
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._config.timeout)
        elif self._http_client.is_closed:
            raise RuntimeError("client has been closed")
        return self._http_client

    def build_headers(self, request: JinaRequest, accept: str | None) -> list[tuple[str, str]]:
        headers = [("Content-Type", JSON_MEDIA_TYPE)]
        if accept:
            headers.append(("Accept", accept))
        if self._config.api_key:
            headers.append(("Authorization", f"Bearer {self._config.api_key}"))
        headers.extend(request.to_headers())
        return headers

    async def post(
        self,
        call: str,
        url: str,
        request: JinaRequest,
        accept: str | None = JSON_MEDIA_TYPE,
    ) -> httpx.Response:
        """POST ``request`` and return the response, raising RemoteError on any non-200 status."""
        content = encode_request(request)
        headers = self.build_headers(request, accept)
        client = await self._get_http_client()

        logger.debug("jina_request_start", call=call, url=url)

        response = await client.post(url, content=content, headers=headers)
        if response.status_code != httpx.codes.OK:
            detail = error_detail(response)
            logger.warning(
                "jina_request_failed",
                call=call,
                status_code=response.status_code,
                has_detail=detail is not None,
            )
            raise RemoteError(response.status_code, detail)

        logger.debug(
            "jina_request_complete",
            call=call,
            status_code=response.status_code,
            body_length=len(response.content),
        )
        return response

    @asynccontextmanager
    async def stream(self, call: str, url: str, request: JinaRequest) -> AsyncIterator[AsyncIterator[str]]:
        """Open an event-stream POST and yield an iterator over its body lines.

        A non-200 status raises RemoteError carrying only the status code; the
        body is not read. The response is closed when the context exits.
        """
        content = encode_request(request)
        headers = self.build_headers(request, EVENT_STREAM_MEDIA_TYPE)
        client = await self._get_http_client()

        logger.debug("jina_stream_start", call=call, url=url)

        async with client.stream("POST", url, content=content, headers=headers) as response:
            if response.status_code != httpx.codes.OK:
                logger.warning("jina_request_failed", call=call, status_code=response.status_code)
                raise RemoteError(response.status_code)
            yield response.aiter_lines()

    async def aclose(self) -> None:
        if self._http_client and not self._http_client.is_closed:
            await self._http_client.aclose()
