"""Reader endpoint models."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field, model_validator

from jina_client.errors import RequestValidationError
from jina_client.headers import READER_HEADERS, HeaderField
from jina_client.models.common import JinaRequest, TokenUsage


class BrowserEngine(str, Enum):
    DEFAULT = ""
    # fast, for JavaScript-heavy sites; behaviour may change
    EXPERIMENTAL = "cf-browser-rendering"
    # fastest, no JavaScript-generated content
    SPEED = "direct"
    # best output quality
    QUALITY = "browser"


class ContentFormat(str, Enum):
    DEFAULT = ""
    MARKDOWN = "markdown"
    HTML = "html"
    TEXT = "text"
    SCREENSHOT = "screenshot"
    PAGESHOT = "pageshot"


class Viewport(BaseModel):
    width: int
    height: int


class ReaderRequest(JinaRequest):
    """Reader request.

    Only ``url``, ``viewport`` and ``inject_page_script`` are sent in the body.
    Everything else is an option sent as a header when set, see
    ``jina_client.headers.READER_HEADERS``.
    """

    header_fields: ClassVar[tuple[HeaderField, ...]] = READER_HEADERS

    url: str = ""
    viewport: Viewport | None = None
    # inline JS or a script URL, run before extraction
    inject_page_script: str | None = Field(None, alias="injectPageScript")

    json_response: bool = Field(False, exclude=True)
    browser_engine: BrowserEngine | str = Field(BrowserEngine.DEFAULT, exclude=True)
    content_format: ContentFormat | str = Field(ContentFormat.DEFAULT, exclude=True)
    # seconds to wait for the page to load
    timeout: int = Field(0, exclude=True)
    target_selector: str = Field("", exclude=True)
    wait_for_selector: str = Field("", exclude=True)
    remove_selector: str = Field("", exclude=True)
    # "all" or "true"
    gather_links: str = Field("", exclude=True)
    gather_images: str = Field("", exclude=True)
    image_caption: bool = Field(False, exclude=True)
    bypass_cached_content: bool = Field(False, exclude=True)
    with_iframe: bool = Field(False, exclude=True)
    token_budget: int = Field(0, exclude=True)
    remove_all_images: bool = Field(False, exclude=True)
    # e.g. "readerlm-v2"
    respond_with: str = Field("", exclude=True)
    set_cookie: str = Field("", exclude=True)
    proxy_url: str = Field("", exclude=True)
    # country code, "auto" or "none"
    proxy_country: str = Field("", exclude=True)
    dnt: int = Field(0, exclude=True)
    # "true" or "table"
    no_gfm: str = Field("", exclude=True)
    browser_locale: str = Field("", exclude=True)
    robots_txt: str = Field("", exclude=True)
    with_shadow_dom: bool = Field(False, exclude=True)
    # "final" follows the full redirect chain
    base: str = Field("", exclude=True)
    md_heading_style: str = Field("", exclude=True)
    md_hr: str = Field("", exclude=True)
    md_bullet_list_marker: str = Field("", exclude=True)
    md_em_delimiter: str = Field("", exclude=True)
    md_strong_delimiter: str = Field("", exclude=True)
    md_link_style: str = Field("", exclude=True)
    md_link_reference_style: str = Field("", exclude=True)

    eu_compliance: bool = Field(False, exclude=True)

    def check_required(self) -> None:
        if not self.url:
            raise RequestValidationError("URL is required")


class ReaderData(BaseModel):
    title: str = ""
    description: str = ""
    url: str = ""
    content: str = ""
    links: dict[str, str] | None = None
    images: dict[str, str] | None = None
    usage: TokenUsage = Field(default_factory=TokenUsage)


class StructuredReaderResponse(BaseModel):
    code: int = 0
    status: int = 0
    data: ReaderData = Field(default_factory=ReaderData)


class ReaderResponse(BaseModel):
    """Either the raw text body or the decoded JSON body, never both."""

    text: str | None = None
    structured: StructuredReaderResponse | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> ReaderResponse:
        if (self.text is None) == (self.structured is None):
            raise ValueError("exactly one of text or structured must be set")
        return self
