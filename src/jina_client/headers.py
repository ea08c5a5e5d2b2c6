"""Request options that travel as HTTP headers instead of JSON body fields."""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple


class HeaderField(NamedTuple):
    """Maps a request attribute to a header.

    ``value`` fixes the header value sent when the attribute is set;
    otherwise the attribute's own value is rendered.
    """

    attr: str
    header: str
    value: str | None = None


READER_HEADERS: tuple[HeaderField, ...] = (
    HeaderField("token_budget", "X-Token-Budget"),
    HeaderField("content_format", "X-Return-Format"),
    HeaderField("browser_engine", "X-Engine"),
    HeaderField("timeout", "X-Timeout"),
    HeaderField("gather_links", "X-With-Links-Summary"),
    HeaderField("remove_all_images", "X-Retain-Images", "none"),
    HeaderField("gather_images", "X-With-Images-Summary"),
    HeaderField("image_caption", "X-With-Generated-Alt"),
    HeaderField("proxy_country", "X-Proxy"),
    HeaderField("proxy_url", "X-Proxy-Url"),
    HeaderField("browser_locale", "X-Locale"),
    HeaderField("bypass_cached_content", "X-No-Cache"),
    HeaderField("target_selector", "X-Target-Selector"),
    HeaderField("wait_for_selector", "X-Wait-For-Selector"),
    HeaderField("remove_selector", "X-Remove-Selector"),
    HeaderField("with_iframe", "X-With-Iframe"),
    HeaderField("with_shadow_dom", "X-With-Shadow-Dom"),
    HeaderField("respond_with", "X-Respond-With"),
    HeaderField("set_cookie", "X-Set-Cookie"),
    HeaderField("dnt", "DNT"),
    HeaderField("no_gfm", "X-No-Gfm"),
    HeaderField("robots_txt", "X-Robots-Txt"),
    HeaderField("base", "X-Base"),
    HeaderField("md_heading_style", "X-Md-Heading-Style"),
    HeaderField("md_hr", "X-Md-Hr"),
    HeaderField("md_bullet_list_marker", "X-Md-Bullet-List-Marker"),
    HeaderField("md_em_delimiter", "X-Md-Em-Delimiter"),
    HeaderField("md_strong_delimiter", "X-Md-Strong-Delimiter"),
    HeaderField("md_link_style", "X-Md-Link-Style"),
    HeaderField("md_link_reference_style", "X-Md-Link-Reference-Style"),
)

SEARCH_HEADERS: tuple[HeaderField, ...] = (
    HeaderField("site", "X-Site"),
    HeaderField("with_links_summary", "X-With-Links-Summary"),
    HeaderField("with_images_summary", "X-With-Images-Summary"),
    HeaderField("retain_images", "X-Retain-Images"),
    HeaderField("no_cache", "X-No-Cache"),
    HeaderField("with_generated_alt", "X-With-Generated-Alt"),
    HeaderField("respond_with", "X-Respond-With"),
    HeaderField("with_favicon", "X-With-Favicon"),
    HeaderField("return_format", "X-Return-Format"),
    HeaderField("engine", "X-Engine"),
    HeaderField("with_favicons", "X-With-Favicons"),
    HeaderField("timeout", "X-Timeout"),
    HeaderField("set_cookie", "X-Set-Cookie"),
    HeaderField("proxy_url", "X-Proxy-Url"),
    HeaderField("locale", "X-Locale"),
)


def render_header_value(value: Any) -> str | None:
    """Render an option value as a header value, or None when the option is unset.

    None, False, zero, negative numbers and empty strings all count as unset.
    """
    if value is None or value is False:
        return None
    if value is True:
        return "true"
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (int, float)) and value <= 0:
        return None
    rendered = str(value)
    return rendered or None


def fields_to_headers(source: Any, table: tuple[HeaderField, ...]) -> list[tuple[str, str]]:
    """Build the ordered (name, value) header list for ``source``, skipping unset options."""
    headers: list[tuple[str, str]] = []
    for field in table:
        rendered = render_header_value(getattr(source, field.attr, None))
        if rendered is None:
            continue
        headers.append((field.header, field.value if field.value is not None else rendered))
    return headers
