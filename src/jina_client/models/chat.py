"""Chat-completions models shared by the VLM and DeepSearch endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from jina_client.codec import decode_message_content, encode_message_content
from jina_client.inputs import ContentPart
from jina_client.models.common import JinaRequest, Usage

VLM_MODEL_DEFAULT = "jina-vlm"
DEEPSEARCH_MODEL_DEFAULT = "jina-deepsearch-v1"


class ChatMessage(BaseModel):
    """A chat message whose content is plain text or a list of text/image parts."""

    role: str
    content: str | list[ContentPart] = ""

    @field_validator("content", mode="before")
    @classmethod
    def _decode_content(cls, value: Any) -> str | list[ContentPart]:
        return decode_message_content(value)

    @field_serializer("content")
    def _encode_content(self, value: str | list[ContentPart]) -> str | list[dict[str, Any]]:
        return encode_message_content(value)

    @classmethod
    def from_text(cls, role: str, text: str) -> ChatMessage:
        return cls(role=role, content=text)

    @classmethod
    def from_parts(cls, role: str, parts: list[ContentPart]) -> ChatMessage:
        return cls(role=role, content=parts)


class VLMRequest(JinaRequest):
    model: str = VLM_MODEL_DEFAULT
    messages: list[ChatMessage]
    # set by the client: false for vlm(), true for the streaming calls
    stream: bool | None = None


class ResponseFormat(BaseModel):
    type: str = "json_schema"
    json_schema: dict[str, Any]


class DeepSearchRequest(JinaRequest):
    model: str = DEEPSEARCH_MODEL_DEFAULT
    messages: list[ChatMessage]
    stream: bool | None = None
    reasoning_effort: Literal["low", "medium", "high"] | None = None
    # upper bound on tokens spent by the whole search process
    budget_tokens: int | None = None
    max_attempts: int | None = None
    # keep searching even for trivial questions
    no_direct_answer: bool | None = None
    max_returned_urls: int | None = None
    response_format: ResponseFormat | None = None
    boost_hostnames: list[str] | None = None


class ChatDelta(BaseModel):
    role: str | None = None
    content: str | None = None
    # DeepSearch marks deltas as "think" or "text"
    type: str | None = None


class ChatChoice(BaseModel):
    index: int = 0
    message: ChatMessage | None = None
    delta: ChatDelta | None = None
    logprobs: Any = None
    finish_reason: str | None = None


class ChatCompletion(BaseModel):
    """A full chat response, or one streamed chunk carrying ``delta`` increments."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[ChatChoice] = Field(default_factory=list)
    usage: Usage | None = None


class VLMResponse(ChatCompletion):
    pass


class DeepSearchResponse(ChatCompletion):
    visited_urls: list[str] = Field(default_factory=list, alias="visitedURLs")
    read_urls: list[str] = Field(default_factory=list, alias="readURLs")
    num_urls: int | None = Field(None, alias="numURLs")
