"""Async client for the Jina AI API."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import TypeVar

import httpx
from pydantic import BaseModel

from jina_client.config import ClientConfig, Option
from jina_client.models import (
    DEEPSEARCH_MODEL_DEFAULT,
    VLM_MODEL_DEFAULT,
    ClassificationRequest,
    ClassificationResponse,
    DeepSearchRequest,
    DeepSearchResponse,
    EmbeddingsRequest,
    EmbeddingsResponse,
    JinaRequest,
    ReaderRequest,
    ReaderResponse,
    RerankRequest,
    RerankResponse,
    SearchRequest,
    SearchResponse,
    SegmenterRequest,
    SegmenterResponse,
    StructuredReaderResponse,
    StructuredSearchResponse,
    VLMRequest,
    VLMResponse,
)
from jina_client.streaming import ChunkCallback, dispatch, iter_chunks
from jina_client.transport import JSON_MEDIA_TYPE, Transport, decode_body

ResponseT = TypeVar("ResponseT", bound=BaseModel)

EMBEDDINGS_URL = "https://api.jina.ai/v1/embeddings"
RERANK_URL = "https://api.jina.ai/v1/rerank"
CLASSIFY_URL = "https://api.jina.ai/v1/classify"
SEGMENT_URL = "https://segment.jina.ai/"
SEARCH_URL = "https://s.jina.ai/"
SEARCH_EU_URL = "https://eu.s.jina.ai/"
READER_URL = "https://r.jina.ai/"
READER_EU_URL = "https://eu.r.jina.ai/"
VLM_URL = "https://api-beta-vlm.jina.ai/v1/chat/completions"
DEEPSEARCH_URL = "https://deepsearch.jina.ai/v1/chat/completions"


class JinaClient:
    """Async client for the Jina AI HTTP API.

    Configuration is built once from option functions and never changes::

        client = JinaClient(with_api_key(key), with_eu_compliance())

    Every call is a single POST with no retries. Calls may run concurrently
    from several tasks; they share one connection pool, released by
    ``aclose()`` or by using the client as an async context manager. A closed
    client cannot be reused: further calls raise RuntimeError. An injected
    ``http_client`` is closed along with it and keeps its own timeout;
    ``with_timeout`` only applies to the pool the client creates itself.
    """

    def __init__(
        self,
        *options: Option,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        cfg = config if config is not None else ClientConfig()
        for option in options:
            cfg = option(cfg)
        self._config = cfg
        self._transport = Transport(cfg, http_client)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> JinaClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _call(
        self,
        call: str,
        url: str,
        request: JinaRequest,
        model: type[ResponseT],
    ) -> ResponseT:
        response = await self._transport.post(call, url, request)
        return decode_body(call, model, response.content)

    async def embeddings(self, request: EmbeddingsRequest) -> EmbeddingsResponse:
        return await self._call("embeddings", EMBEDDINGS_URL, request, EmbeddingsResponse)

    async def rerank(self, request: RerankRequest) -> RerankResponse:
        """Rank documents by relevance to the query."""
        return await self._call("rerank", RERANK_URL, request, RerankResponse)

    async def classify(self, request: ClassificationRequest) -> ClassificationResponse:
        """Classify text or images into the given labels, or with a trained classifier."""
        request.check_required()
        return await self._call("classify", CLASSIFY_URL, request, ClassificationResponse)

    async def segment(self, request: SegmenterRequest) -> SegmenterResponse:
        """Tokenize text, or split it into chunks."""
        return await self._call("segment", SEGMENT_URL, request, SegmenterResponse)

    async def search(self, request: SearchRequest) -> SearchResponse:
        """Search the web.

        With ``json_response`` the body is requested and decoded as JSON into
        ``structured``; otherwise the raw body is returned in ``text``.
        """
        request.check_required()
        url = SEARCH_EU_URL if self._use_eu(request.eu_compliance) else SEARCH_URL
        accept = JSON_MEDIA_TYPE if request.json_response else None

        response = await self._transport.post("search", url, request, accept=accept)
        if request.json_response:
            return SearchResponse(structured=decode_body("search", StructuredSearchResponse, response.content))
        return SearchResponse(text=response.text)

    async def read(self, request: ReaderRequest) -> ReaderResponse:
        """Fetch a URL and extract its content. Same response duality as ``search``."""
        request.check_required()
        url = READER_EU_URL if self._use_eu(request.eu_compliance) else READER_URL
        accept = JSON_MEDIA_TYPE if request.json_response else None

        response = await self._transport.post("read", url, request, accept=accept)
        if request.json_response:
            return ReaderResponse(structured=decode_body("read", StructuredReaderResponse, response.content))
        return ReaderResponse(text=response.text)

    async def vlm(self, request: VLMRequest) -> VLMResponse:
        """Multimodal chat completion, returned in one response."""
        body = request.model_copy(update={"model": request.model or VLM_MODEL_DEFAULT, "stream": False})
        return await self._call("vlm", VLM_URL, body, VLMResponse)

    async def iter_vlm(self, request: VLMRequest) -> AsyncGenerator[VLMResponse, None]:
        """Stream a multimodal chat completion, yielding chunks as they arrive."""
        body = request.model_copy(update={"model": request.model or VLM_MODEL_DEFAULT, "stream": True})
        async with self._transport.stream("vlm", VLM_URL, body) as lines:
            async for chunk in iter_chunks(lines, VLMResponse, call="vlm"):
                yield chunk

    async def vlm_stream(self, request: VLMRequest, callback: ChunkCallback[VLMResponse]) -> None:
        """Stream a multimodal chat completion, calling ``callback`` once per chunk."""
        await dispatch(self.iter_vlm(request), callback)

    async def deepsearch(self, request: DeepSearchRequest) -> DeepSearchResponse:
        """Run a DeepSearch investigation and return the final answer."""
        body = request.model_copy(
            update={"model": request.model or DEEPSEARCH_MODEL_DEFAULT, "stream": False}
        )
        return await self._call("deepsearch", DEEPSEARCH_URL, body, DeepSearchResponse)

    async def iter_deepsearch(self, request: DeepSearchRequest) -> AsyncGenerator[DeepSearchResponse, None]:
        body = request.model_copy(
            update={"model": request.model or DEEPSEARCH_MODEL_DEFAULT, "stream": True}
        )
        async with self._transport.stream("deepsearch", DEEPSEARCH_URL, body) as lines:
            async for chunk in iter_chunks(lines, DeepSearchResponse, call="deepsearch"):
                yield chunk

    async def deepsearch_stream(
        self,
        request: DeepSearchRequest,
        callback: ChunkCallback[DeepSearchResponse],
    ) -> None:
        """Stream a DeepSearch investigation, calling ``callback`` once per chunk."""
        await dispatch(self.iter_deepsearch(request), callback)

    def _use_eu(self, per_call: bool) -> bool:
        # A client configured for EU compliance cannot be overridden per call.
        return self._config.eu_compliance or per_call
