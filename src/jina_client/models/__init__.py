"""Request and response models, one module per endpoint."""

from jina_client.models.chat import (
    DEEPSEARCH_MODEL_DEFAULT,
    VLM_MODEL_DEFAULT,
    ChatChoice,
    ChatCompletion,
    ChatDelta,
    ChatMessage,
    DeepSearchRequest,
    DeepSearchResponse,
    ResponseFormat,
    VLMRequest,
    VLMResponse,
)
from jina_client.models.classification import (
    ClassificationData,
    ClassificationLabel,
    ClassificationModel,
    ClassificationRequest,
    ClassificationResponse,
)
from jina_client.models.common import JinaRequest, TokenUsage, Usage
from jina_client.models.embeddings import (
    EmbeddingData,
    EmbeddingModel,
    EmbeddingsRequest,
    EmbeddingsResponse,
    EmbeddingTask,
)
from jina_client.models.reader import (
    BrowserEngine,
    ContentFormat,
    ReaderData,
    ReaderRequest,
    ReaderResponse,
    StructuredReaderResponse,
    Viewport,
)
from jina_client.models.rerank import RerankerModel, RerankRequest, RerankResponse, RerankResult
from jina_client.models.search import (
    SearchRequest,
    SearchResponse,
    SearchResultData,
    StructuredSearchResponse,
)
from jina_client.models.segmenter import SegmenterRequest, SegmenterResponse

__all__ = [
    "DEEPSEARCH_MODEL_DEFAULT",
    "VLM_MODEL_DEFAULT",
    "BrowserEngine",
    "ChatChoice",
    "ChatCompletion",
    "ChatDelta",
    "ChatMessage",
    "ClassificationData",
    "ClassificationLabel",
    "ClassificationModel",
    "ClassificationRequest",
    "ClassificationResponse",
    "ContentFormat",
    "DeepSearchRequest",
    "DeepSearchResponse",
    "EmbeddingData",
    "EmbeddingModel",
    "EmbeddingTask",
    "EmbeddingsRequest",
    "EmbeddingsResponse",
    "JinaRequest",
    "ReaderData",
    "ReaderRequest",
    "ReaderResponse",
    "RerankRequest",
    "RerankResponse",
    "RerankResult",
    "RerankerModel",
    "ResponseFormat",
    "SearchRequest",
    "SearchResponse",
    "SearchResultData",
    "SegmenterRequest",
    "SegmenterResponse",
    "StructuredReaderResponse",
    "StructuredSearchResponse",
    "TokenUsage",
    "Usage",
    "VLMRequest",
    "VLMResponse",
    "Viewport",
]
