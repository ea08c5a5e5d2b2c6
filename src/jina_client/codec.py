"""Encoding and decoding of fields that accept more than one JSON shape.

The API takes a bare string for plain text inputs and a single-key object
for images and PDFs. Responses return rerank documents as a string or an
object, chat content as a string or a list of parts, and tokens as
``[text, [ids...]]`` pairs.
"""

from __future__ import annotations

from typing import Any

from jina_client.errors import DecodingError
from jina_client.inputs import (
    ClassificationInput,
    ContentPart,
    EmbeddingInput,
    RerankInput,
    Token,
)

# Checked in order; text is the fallback.
INPUT_PRECEDENCE = ("image", "pdf")


def encode_input(value: str | EmbeddingInput | ClassificationInput) -> str | dict[str, str]:
    """Encode an embeddings or classification input.

    Returns ``{"image": ...}`` or ``{"pdf": ...}`` for the first non-empty
    variant in ``INPUT_PRECEDENCE``, otherwise the bare text. Empty text is
    encoded as ``""``, not omitted.
    """
    if isinstance(value, str):
        return value
    for variant in INPUT_PRECEDENCE:
        reference = getattr(value, variant, "")
        if reference:
            return {variant: reference}
    return value.text


def encode_structured(value: RerankInput) -> dict[str, str]:
    """Encode a structured rerank input as an object of its non-empty fields."""
    return {name: field for name, field in (("text", value.text), ("image", value.image)) if field}


def decode_token(raw: Any) -> Token:
    if isinstance(raw, Token):
        return raw
    if not isinstance(raw, (list, tuple)):
        raise DecodingError(f"invalid token format: expected a [text, ids] pair, got {type(raw).__name__}")
    if len(raw) != 2:
        raise DecodingError(f"invalid token format: expected 2 elements, got {len(raw)}")

    text, ids = raw
    if not isinstance(text, str):
        raise DecodingError("invalid token format: first element is not a string")
    if not isinstance(ids, list):
        raise DecodingError("invalid token format: second element is not an array")
    for token_id in ids:
        # bool is an int subclass; JSON true/false are not token IDs
        if isinstance(token_id, bool) or not isinstance(token_id, int):
            raise DecodingError(f"invalid token ID: {token_id!r} is not an integer")
    return Token(text=text, ids=list(ids))


def decode_document(raw: Any) -> str | RerankInput | None:
    """Decode a rerank result document, returned as a string or an object."""
    if raw is None or isinstance(raw, (str, RerankInput)):
        return raw
    if isinstance(raw, dict):
        return RerankInput.model_validate(raw)
    raise DecodingError(f"invalid document: expected a string or an object, got {type(raw).__name__}")


def encode_message_content(content: str | list[ContentPart]) -> str | list[dict[str, Any]]:
    if isinstance(content, str):
        return content
    if content:
        return [part.model_dump(exclude_none=True) for part in content]
    return ""


def decode_message_content(raw: Any) -> str | list[ContentPart]:
    """Decode chat content: a string or a list of content parts. ``null`` reads as ``""``."""
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list):
        parts = []
        for item in raw:
            if isinstance(item, ContentPart):
                parts.append(item)
            elif isinstance(item, dict):
                parts.append(ContentPart.model_validate(item))
            else:
                raise DecodingError("invalid message content: not a string or array of parts")
        return parts
    raise DecodingError("invalid message content: not a string or array of parts")
