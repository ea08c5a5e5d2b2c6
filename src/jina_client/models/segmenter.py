"""Segmenter endpoint models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from jina_client.codec import decode_token
from jina_client.inputs import Token
from jina_client.models.common import JinaRequest, Usage

WireToken = Annotated[Token, BeforeValidator(decode_token)]


class SegmenterRequest(JinaRequest):
    content: str
    # cl100k_base (default), o200k_base, p50k_base, r50k_base, p50k_edit, gpt2
    tokenizer: str | None = None
    return_tokens: bool | None = None
    return_chunks: bool | None = None
    # only effective with return_chunks; server default 1000
    max_chunk_length: int | None = None
    # head and tail are mutually exclusive
    head: int | None = None
    tail: int | None = None


class SegmenterResponse(BaseModel):
    num_tokens: int = 0
    tokenizer: str = ""
    usage: Usage = Field(default_factory=Usage)
    num_chunks: int | None = None
    chunk_positions: list[list[int]] | None = None
    # one token list per chunk
    tokens: list[list[WireToken]] | None = None
    chunks: list[str] | None = None
