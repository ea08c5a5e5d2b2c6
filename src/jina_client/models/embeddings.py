"""Embeddings endpoint models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_serializer

from jina_client.codec import encode_input
from jina_client.inputs import EmbeddingInput
from jina_client.models.common import JinaRequest, Usage


class EmbeddingModel(str, Enum):
    # 3.8B multimodal and multilingual; text, images and PDFs; 2048 dims
    V4 = "jina-embeddings-v4"
    # 570M multilingual text; 1024 dims
    V3 = "jina-embeddings-v3"
    # 885M multimodal, best for cross-modal text-image retrieval; 1024 dims
    CLIP_V2 = "jina-clip-v2"
    CODE_0_5B = "jina-code-embeddings-0.5b"
    CODE_1_5B = "jina-code-embeddings-1.5b"


class EmbeddingTask(str, Enum):
    RETRIEVAL_QUERY = "retrieval.query"
    RETRIEVAL_PASSAGE = "retrieval.passage"
    TEXT_MATCHING = "text-matching"
    CODE_QUERY = "code.query"
    CODE_PASSAGE = "code.passage"
    CLASSIFICATION = "classification"
    SEPARATION = "separation"
    NL2CODE_QUERY = "nl2code.query"
    NL2CODE_PASSAGE = "nl2code.passage"
    CODE2CODE_QUERY = "code2code.query"
    CODE2CODE_PASSAGE = "code2code.passage"
    CODE2NL_QUERY = "code2nl.query"
    CODE2NL_PASSAGE = "code2nl.passage"
    CODE2COMPLETION_QUERY = "code2completion.query"
    CODE2COMPLETION_PASSAGE = "code2completion.passage"
    QA_QUERY = "qa.query"
    QA_PASSAGE = "qa.passage"


class EmbeddingsRequest(JinaRequest):
    model: EmbeddingModel | str
    input: list[EmbeddingInput | str]
    # float (default), base64, binary or ubinary
    embedding_type: list[str] | None = None
    task: EmbeddingTask | str | None = None
    dimensions: int | None = Field(None, gt=0)
    late_chunking: bool | None = None
    truncate: bool | None = None
    return_multivector: bool | None = None  # v4 only
    normalized: bool | None = None  # v3 and clip only

    @field_serializer("input")
    def _encode_input(self, value: list[EmbeddingInput | str]) -> list[Any]:
        return [encode_input(item) for item in value]


class EmbeddingData(BaseModel):
    object: str = "embedding"
    index: int
    # multi-vector (return_multivector) and encoded (base64/binary) outputs included
    embedding: list[float] | list[list[float]] | str


class EmbeddingsResponse(BaseModel):
    model: str = ""
    data: list[EmbeddingData] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)
