"""Search endpoint models."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field, model_validator

from jina_client.errors import RequestValidationError
from jina_client.headers import SEARCH_HEADERS, HeaderField
from jina_client.models.common import JinaRequest, TokenUsage


class SearchRequest(JinaRequest):
    header_fields: ClassVar[tuple[HeaderField, ...]] = SEARCH_HEADERS

    query: str = Field("", alias="q")
    # two-letter country code, e.g. "us"
    country_code: str | None = Field(None, alias="gl")
    # city-level origin of the query
    location: str | None = None
    # two-letter language code, e.g. "de"
    language_code: str | None = Field(None, alias="hl")
    max_results: int | None = Field(None, alias="num")
    page_offset: int | None = Field(None, alias="page")

    # Sent as headers
    json_response: bool = Field(False, exclude=True)
    site: str = Field("", exclude=True)
    with_links_summary: bool = Field(False, exclude=True)
    with_images_summary: bool = Field(False, exclude=True)
    retain_images: str = Field("", exclude=True)
    no_cache: bool = Field(False, exclude=True)
    with_generated_alt: bool = Field(False, exclude=True)
    respond_with: str = Field("", exclude=True)
    with_favicon: bool = Field(False, exclude=True)
    return_format: str = Field("", exclude=True)
    engine: str = Field("", exclude=True)
    with_favicons: bool = Field(False, exclude=True)
    timeout: int = Field(0, exclude=True)
    set_cookie: str = Field("", exclude=True)
    proxy_url: str = Field("", exclude=True)
    locale: str = Field("", exclude=True)

    # Selects the endpoint host
    eu_compliance: bool = Field(False, exclude=True)

    def check_required(self) -> None:
        if not self.query:
            raise RequestValidationError("query is required")


class SearchResultData(BaseModel):
    title: str = ""
    description: str = ""
    url: str = ""
    content: str = ""
    favicon: str | None = None
    links: dict[str, str] | None = None
    images: dict[str, str] | None = None
    usage: TokenUsage = Field(default_factory=TokenUsage)


class StructuredSearchResponse(BaseModel):
    code: int = 0
    status: int = 0
    data: list[SearchResultData] = Field(default_factory=list)
    usage: TokenUsage = Field(default_factory=TokenUsage)


class SearchResponse(BaseModel):
    """Either the raw text body or the decoded JSON body, never both."""

    text: str | None = None
    structured: StructuredSearchResponse | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> SearchResponse:
        if (self.text is None) == (self.structured is None):
            raise ValueError("exactly one of text or structured must be set")
        return self
