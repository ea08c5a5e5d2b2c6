"""Classification endpoint models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_serializer

from jina_client.codec import encode_input
from jina_client.errors import RequestValidationError
from jina_client.inputs import ClassificationInput
from jina_client.models.common import JinaRequest, Usage


class ClassificationModel(str, Enum):
    # zero-shot image classification; 1024 dims
    CLIP_V2 = "jina-clip-v2"
    EMBEDDINGS_V4 = "jina-embeddings-v4"
    EMBEDDINGS_V3 = "jina-embeddings-v3"


class ClassificationRequest(JinaRequest):
    # one of model / classifier_id is required; without an ID a new classifier is created
    model: ClassificationModel | str | None = None
    classifier_id: str | None = None
    input: list[ClassificationInput | str]
    labels: list[str] = Field(default_factory=list)

    @field_serializer("input")
    def _encode_input(self, value: list[ClassificationInput | str]) -> list[Any]:
        return [encode_input(item) for item in value]

    def check_required(self) -> None:
        if not self.model and not self.classifier_id:
            raise RequestValidationError("model or classifier_id is required")


class ClassificationLabel(BaseModel):
    label: str
    score: float


class ClassificationData(BaseModel):
    object: str = "classification"
    index: int
    prediction: str
    score: float
    predictions: list[ClassificationLabel] = Field(default_factory=list)


class ClassificationResponse(BaseModel):
    data: list[ClassificationData] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)
