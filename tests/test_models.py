"""Tests for request payload building and response models."""

import pytest
from pydantic import ValidationError

from jina_client.inputs import ContentPart, EmbeddingInput, RerankInput, Token
from jina_client.models import (
    ChatMessage,
    ClassificationRequest,
    DeepSearchRequest,
    DeepSearchResponse,
    EmbeddingModel,
    EmbeddingsRequest,
    EmbeddingsResponse,
    EmbeddingTask,
    ReaderRequest,
    ReaderResponse,
    RerankerModel,
    RerankRequest,
    RerankResponse,
    ResponseFormat,
    SearchRequest,
    SearchResponse,
    SegmenterRequest,
    SegmenterResponse,
    StructuredSearchResponse,
    VLMRequest,
    Viewport,
)


class TestEmbeddingsRequest:
    def test_payload_mixes_strings_and_objects(self):
        request = EmbeddingsRequest(
            model=EmbeddingModel.V4,
            input=[
                EmbeddingInput.from_text("A cat"),
                "plain string",
                EmbeddingInput.from_image("https://example.com/cat.png"),
                EmbeddingInput.from_pdf("https://example.com/paper.pdf"),
            ],
            task=EmbeddingTask.RETRIEVAL_PASSAGE,
            dimensions=512,
        )
        assert request.to_payload() == {
            "model": "jina-embeddings-v4",
            "input": [
                "A cat",
                "plain string",
                {"image": "https://example.com/cat.png"},
                {"pdf": "https://example.com/paper.pdf"},
            ],
            "task": "retrieval.passage",
            "dimensions": 512,
        }

    def test_unset_options_are_omitted(self):
        payload = EmbeddingsRequest(model="jina-embeddings-v3", input=["x"]).to_payload()
        assert set(payload) == {"model", "input"}

    def test_explicit_false_flag_is_sent(self):
        payload = EmbeddingsRequest(model="jina-clip-v2", input=["x"], normalized=False).to_payload()
        assert payload["normalized"] is False

    def test_unknown_model_passes_through(self):
        payload = EmbeddingsRequest(model="jina-embeddings-v5-preview", input=["x"]).to_payload()
        assert payload["model"] == "jina-embeddings-v5-preview"


class TestRerankRequest:
    def test_flat_fields(self):
        request = RerankRequest(
            model=RerankerModel.V3,
            query="programming languages",
            documents=["Python", "Go"],
            top_n=1,
        )
        assert request.to_payload() == {
            "model": "jina-reranker-v3",
            "query": "programming languages",
            "documents": ["Python", "Go"],
            "top_n": 1,
        }

    def test_structured_documents_take_precedence(self):
        request = RerankRequest(
            model=RerankerModel.M0,
            query="diagram",
            documents=["flat one", "flat two"],
            documents_input=[RerankInput(text="structured"), RerankInput(image="img.png")],
        )
        payload = request.to_payload()
        assert payload["documents"] == [{"text": "structured"}, {"image": "img.png"}]

    def test_empty_structured_documents_fall_back_to_flat(self):
        request = RerankRequest(model="jina-reranker-v3", query="q", documents=["a"], documents_input=[])
        assert request.to_payload()["documents"] == ["a"]

    def test_structured_query_takes_precedence(self):
        request = RerankRequest(
            model=RerankerModel.M0,
            query="flat",
            query_input=RerankInput(image="https://example.com/q.png"),
            documents=["a"],
        )
        assert request.to_payload()["query"] == {"image": "https://example.com/q.png"}

    def test_empty_structured_query_falls_back_to_flat(self):
        request = RerankRequest(model="jina-reranker-v3", query="flat", query_input=RerankInput(), documents=["a"])
        assert request.to_payload()["query"] == "flat"

    def test_return_documents_false_is_sent(self):
        request = RerankRequest(model="jina-reranker-v3", query="q", documents=["a"], return_documents=False)
        assert request.to_payload()["return_documents"] is False

    def test_top_n_must_be_positive(self):
        with pytest.raises(ValidationError):
            RerankRequest(model="jina-reranker-v3", query="q", documents=["a"], top_n=0)

    def test_response_documents_decode(self):
        response = RerankResponse.model_validate(
            {
                "model": "jina-reranker-m0",
                "usage": {"total_tokens": 10},
                "results": [
                    {"index": 1, "relevance_score": 0.9, "document": {"image": "img.png"}},
                    {"index": 0, "relevance_score": 0.1, "document": "plain"},
                    {"index": 2, "relevance_score": 0.05},
                ],
            }
        )
        assert response.results[0].document == RerankInput(image="img.png")
        assert response.results[1].document == "plain"
        assert response.results[2].document is None


def test_classification_payload():
    request = ClassificationRequest(
        model="jina-clip-v2",
        input=["a photo of a dog", {"image": "https://example.com/dog.jpg"}],
        labels=["dog", "cat"],
    )
    assert request.to_payload() == {
        "model": "jina-clip-v2",
        "input": ["a photo of a dog", {"image": "https://example.com/dog.jpg"}],
        "labels": ["dog", "cat"],
    }


def test_segmenter_payload_and_tokens():
    request = SegmenterRequest(content="Hello world", return_tokens=True)
    assert request.to_payload() == {"content": "Hello world", "return_tokens": True}

    response = SegmenterResponse.model_validate(
        {
            "num_tokens": 2,
            "tokenizer": "cl100k_base",
            "usage": {"tokens": 0},
            "tokens": [[["Hello", [9906]], [" world", [1917]]]],
        }
    )
    assert response.tokens == [[Token(text="Hello", ids=[9906]), Token(text=" world", ids=[1917])]]


def test_segmenter_bad_token_fails_validation():
    with pytest.raises(ValidationError):
        SegmenterResponse.model_validate({"tokens": [[["Hello", 9906]]]})


class TestSearchRequest:
    def test_body_uses_wire_names_and_skips_header_fields(self):
        request = SearchRequest(
            query="Jina AI",
            country_code="DE",
            language_code="de",
            max_results=10,
            page_offset=2,
            location="Berlin",
            site="https://jina.ai",
            json_response=True,
            eu_compliance=True,
        )
        assert request.to_payload() == {
            "q": "Jina AI",
            "gl": "DE",
            "location": "Berlin",
            "hl": "de",
            "num": 10,
            "page": 2,
        }

    def test_accepts_wire_alias(self):
        assert SearchRequest(q="by alias").query == "by alias"


def test_reader_body_contains_only_body_fields():
    request = ReaderRequest(
        url="https://example.com",
        viewport=Viewport(width=1280, height=720),
        inject_page_script="document.querySelector('nav').remove()",
        token_budget=100,
        json_response=True,
    )
    assert request.to_payload() == {
        "url": "https://example.com",
        "viewport": {"width": 1280, "height": 720},
        "injectPageScript": "document.querySelector('nav').remove()",
    }


class TestResponseDuality:
    def test_text_only(self):
        assert SearchResponse(text="").text == ""

    def test_structured_only(self):
        response = SearchResponse(structured=StructuredSearchResponse())
        assert response.text is None

    def test_both_rejected(self):
        with pytest.raises(ValidationError):
            SearchResponse(text="x", structured=StructuredSearchResponse())

    def test_neither_rejected(self):
        with pytest.raises(ValidationError):
            ReaderResponse()


class TestChatModels:
    def test_message_with_parts(self):
        request = VLMRequest(
            messages=[
                ChatMessage.from_parts(
                    "user",
                    [ContentPart.from_text("Describe"), ContentPart.from_image_url("https://x/y.png")],
                )
            ]
        )
        assert request.to_payload() == {
            "model": "jina-vlm",
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": "Describe"},
                        {"type": "image_url", "image_url": {"url": "https://x/y.png"}},
                    ],
                }
            ],
        }

    def test_deepsearch_payload(self):
        request = DeepSearchRequest(
            messages=[ChatMessage.from_text("user", "latest jina blog post?")],
            reasoning_effort="low",
            budget_tokens=5000,
            no_direct_answer=True,
            boost_hostnames=["jina.ai"],
            response_format=ResponseFormat(json_schema={"name": "answer", "schema": {"type": "object"}}),
        )
        assert request.to_payload() == {
            "model": "jina-deepsearch-v1",
            "messages": [{"role": "user", "content": "latest jina blog post?"}],
            "reasoning_effort": "low",
            "budget_tokens": 5000,
            "no_direct_answer": True,
            "response_format": {
                "type": "json_schema",
                "json_schema": {"name": "answer", "schema": {"type": "object"}},
            },
            "boost_hostnames": ["jina.ai"],
        }

    def test_deepsearch_response_url_fields(self):
        response = DeepSearchResponse.model_validate(
            {
                "id": "1",
                "choices": [{"index": 0, "message": {"role": "assistant", "content": "answer"}}],
                "visitedURLs": ["https://a"],
                "readURLs": ["https://a"],
                "numURLs": 1,
            }
        )
        assert response.choices[0].message.content == "answer"
        assert response.visited_urls == ["https://a"]
        assert response.num_urls == 1


def test_embeddings_response_vector_shapes():
    response = EmbeddingsResponse.model_validate(
        {
            "model": "jina-embeddings-v4",
            "data": [
                {"object": "embedding", "index": 0, "embedding": [0.1, 0.2]},
                {"object": "embedding", "index": 1, "embedding": [[0.1], [0.2]]},
                {"object": "embedding", "index": 2, "embedding": "AAAA"},
            ],
            "usage": {"total_tokens": 7, "prompt_tokens": 7},
        }
    )
    assert response.data[0].embedding == [0.1, 0.2]
    assert response.data[1].embedding == [[0.1], [0.2]]
    assert response.data[2].embedding == "AAAA"
    assert response.usage.total_tokens == 7
