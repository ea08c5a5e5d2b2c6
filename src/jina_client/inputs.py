"""Value types for fields that carry text or a multimodal reference.

Wire encoding and decoding of these types lives in :mod:`jina_client.codec`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EmbeddingInput(BaseModel):
    """One embeddings input: text, an image (URL or base64) or a PDF URL.

    Build with ``from_text``, ``from_image`` or ``from_pdf`` so that exactly
    one variant is populated.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    image: str = ""
    pdf: str = ""

    @classmethod
    def from_text(cls, text: str) -> EmbeddingInput:
        return cls(text=text)

    @classmethod
    def from_image(cls, image_url_or_base64: str) -> EmbeddingInput:
        return cls(image=image_url_or_base64)

    @classmethod
    def from_pdf(cls, pdf_url: str) -> EmbeddingInput:
        """PDF input, supported by jina-embeddings-v4 only."""
        return cls(pdf=pdf_url)


class ClassificationInput(BaseModel):
    """One classification input: text or an image (URL or base64)."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    image: str = ""

    @classmethod
    def from_text(cls, text: str) -> ClassificationInput:
        return cls(text=text)

    @classmethod
    def from_image(cls, image_url_or_base64: str) -> ClassificationInput:
        return cls(image=image_url_or_base64)


class RerankInput(BaseModel):
    """Structured rerank query or document, sent as an object (used by jina-reranker-m0)."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    image: str = ""

    def is_empty(self) -> bool:
        return not (self.text or self.image)


class ImageURL(BaseModel):
    url: str


class ContentPart(BaseModel):
    """A part of a chat message: ``type="text"`` or ``type="image_url"``."""

    type: str
    text: str | None = None
    image_url: ImageURL | None = None

    @classmethod
    def from_text(cls, text: str) -> ContentPart:
        return cls(type="text", text=text)

    @classmethod
    def from_image_url(cls, url: str) -> ContentPart:
        return cls(type="image_url", image_url=ImageURL(url=url))


class Token(BaseModel):
    """A token text with its sub-token IDs, sent on the wire as ``[text, [ids...]]``."""

    model_config = ConfigDict(frozen=True)

    text: str
    ids: list[int]
