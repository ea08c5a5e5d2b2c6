"""Shared request base and usage records."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from jina_client.headers import HeaderField, fields_to_headers


class JinaRequest(BaseModel):
    """Base for endpoint requests.

    Fields declared with ``exclude=True`` never reach the JSON body; the ones
    listed in ``header_fields`` are sent as headers instead.
    """

    model_config = ConfigDict(populate_by_name=True)

    header_fields: ClassVar[tuple[HeaderField, ...]] = ()

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_headers(self) -> list[tuple[str, str]]:
        return fields_to_headers(self, self.header_fields)

    def check_required(self) -> None:
        """Raise RequestValidationError if a field the endpoint needs is missing."""


class Usage(BaseModel):
    total_tokens: int = 0
    prompt_tokens: int = 0
    completion_tokens: int = 0


class TokenUsage(BaseModel):
    """Usage record of the reader and search endpoints."""

    tokens: int = 0
