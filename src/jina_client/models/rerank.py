"""Rerank endpoint models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from jina_client.codec import decode_document, encode_structured
from jina_client.inputs import RerankInput
from jina_client.models.common import JinaRequest, Usage


class RerankerModel(str, Enum):
    # 0.6B multilingual listwise reranker
    V3 = "jina-reranker-v3"
    # 2.4B multimodal reranker (text and images)
    M0 = "jina-reranker-m0"
    V2_BASE_MULTILINGUAL = "jina-reranker-v2-base-multilingual"
    COLBERT_V2 = "jina-colbert-v2"


class RerankRequest(JinaRequest):
    """Rerank request.

    ``query``/``documents`` carry plain strings (text, or image URLs for m0).
    ``query_input``/``documents_input`` carry structured objects and take
    precedence whenever they are non-empty.
    """

    model: RerankerModel | str
    query: str = ""
    documents: list[str] = Field(default_factory=list)
    query_input: RerankInput | None = None
    documents_input: list[RerankInput] = Field(default_factory=list)
    # defaults to the number of documents
    top_n: int | None = Field(None, gt=0)
    # server default is true
    return_documents: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(
            mode="json",
            include={"model", "top_n", "return_documents"},
            exclude_none=True,
        )

        if self.query_input is not None and not self.query_input.is_empty():
            payload["query"] = encode_structured(self.query_input)
        else:
            payload["query"] = self.query

        if self.documents_input:
            payload["documents"] = [encode_structured(doc) for doc in self.documents_input]
        else:
            payload["documents"] = list(self.documents)

        return payload


class RerankResult(BaseModel):
    index: int
    relevance_score: float
    # echoes the input document: a string or a {"text"/"image"} object
    document: Annotated[str | RerankInput | None, BeforeValidator(decode_document)] = None


class RerankResponse(BaseModel):
    model: str = ""
    usage: Usage = Field(default_factory=Usage)
    results: list[RerankResult] = Field(default_factory=list)
