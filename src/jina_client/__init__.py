"""Typed async client for the Jina AI API."""

from jina_client.client import JinaClient
from jina_client.config import (
    ClientConfig,
    Settings,
    get_settings,
    new_config,
    with_api_key,
    with_eu_compliance,
    with_timeout,
)
from jina_client.errors import (
    DecodingError,
    EncodingError,
    JinaError,
    RemoteError,
    RequestValidationError,
)
from jina_client.inputs import ClassificationInput, ContentPart, EmbeddingInput, RerankInput, Token
from jina_client.models import (
    ChatMessage,
    ClassificationRequest,
    ClassificationResponse,
    DeepSearchRequest,
    DeepSearchResponse,
    EmbeddingsRequest,
    EmbeddingsResponse,
    ReaderRequest,
    ReaderResponse,
    RerankRequest,
    RerankResponse,
    SearchRequest,
    SearchResponse,
    SegmenterRequest,
    SegmenterResponse,
    VLMRequest,
    VLMResponse,
)

__all__ = [
    "JinaClient",
    "ClientConfig",
    "Settings",
    "get_settings",
    "new_config",
    "with_api_key",
    "with_eu_compliance",
    "with_timeout",
    "JinaError",
    "RequestValidationError",
    "EncodingError",
    "DecodingError",
    "RemoteError",
    "ClassificationInput",
    "ContentPart",
    "EmbeddingInput",
    "RerankInput",
    "Token",
    "ChatMessage",
    "ClassificationRequest",
    "ClassificationResponse",
    "DeepSearchRequest",
    "DeepSearchResponse",
    "EmbeddingsRequest",
    "EmbeddingsResponse",
    "ReaderRequest",
    "ReaderResponse",
    "RerankRequest",
    "RerankResponse",
    "SearchRequest",
    "SearchResponse",
    "SegmenterRequest",
    "SegmenterResponse",
    "VLMRequest",
    "VLMResponse",
]
