"""Command-line entrypoint: one subcommand per Jina API endpoint."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from logging.handlers import RotatingFileHandler
from pathlib import Path

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from jina_client.client import JinaClient
from jina_client.config import ClientConfig, Settings, get_settings, with_eu_compliance
from jina_client.errors import JinaError
from jina_client.inputs import ContentPart, EmbeddingInput
from jina_client.models import (
    ChatMessage,
    ClassificationRequest,
    DeepSearchRequest,
    EmbeddingsRequest,
    ReaderRequest,
    RerankRequest,
    SearchRequest,
    SegmenterRequest,
    VLMRequest,
)


# Processors run for structlog events and for plain stdlib records alike.
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _formatter(renderer) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: str = "",
    log_file_max_bytes: int = 10_485_760,
    log_file_backup_count: int = 5,
) -> None:
    """Configure structlog and standard library logging for the CLI.

    The console always gets human-readable lines on stderr, so stdout carries
    only command output. With ``log_file`` set, the same events are also
    written to a rotating file as JSON lines.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file. Empty string = console only.
        log_file_max_bytes: Max size per log file before rotation (default: 10 MB)
        log_file_backup_count: Number of rotated backup files to keep (default: 5)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.root
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(_formatter(structlog.dev.ConsoleRenderer(colors=False)))
    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=log_file,
            maxBytes=log_file_max_bytes,
            backupCount=log_file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        root_logger.addHandler(file_handler)

    # httpx logs every request at INFO; jina_request_* events already cover it
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jina-client", description="Call the Jina AI API")
    parser.add_argument("--eu", action="store_true", help="Route reader and search calls through EU infrastructure")
    sub = parser.add_subparsers(dest="command", required=True)

    embed = sub.add_parser("embed", help="Create embeddings")
    embed.add_argument("texts", nargs="*")
    embed.add_argument("--image", action="append", default=[], help="Image URL or base64 (repeatable)")
    embed.add_argument("--pdf", action="append", default=[], help="PDF URL (repeatable, v4 only)")
    embed.add_argument("--model", default="jina-embeddings-v4")
    embed.add_argument("--task")
    embed.add_argument("--dimensions", type=int)

    rerank = sub.add_parser("rerank", help="Rerank documents against a query")
    rerank.add_argument("query")
    rerank.add_argument("documents", nargs="+")
    rerank.add_argument("--model", default="jina-reranker-v3")
    rerank.add_argument("--top-n", type=int)

    classify = sub.add_parser("classify", help="Zero-shot classification")
    classify.add_argument("inputs", nargs="+")
    classify.add_argument("--labels", required=True, help="Comma-separated labels")
    classify.add_argument("--model", default="jina-embeddings-v3")

    segment = sub.add_parser("segment", help="Tokenize or chunk text")
    segment.add_argument("content")
    segment.add_argument("--tokenizer")
    segment.add_argument("--return-tokens", action="store_true")
    segment.add_argument("--return-chunks", action="store_true")
    segment.add_argument("--max-chunk-length", type=int)

    search = sub.add_parser("search", help="Search the web")
    search.add_argument("query")
    search.add_argument("--json", action="store_true", help="Request and print the structured JSON response")
    search.add_argument("--num", type=int)
    search.add_argument("--site", default="")

    read = sub.add_parser("read", help="Read a URL")
    read.add_argument("url")
    read.add_argument("--json", action="store_true", help="Request and print the structured JSON response")
    read.add_argument("--format", default="", help="markdown, html, text, screenshot or pageshot")
    read.add_argument("--engine", default="", help="browser, direct or cf-browser-rendering")

    vlm = sub.add_parser("vlm", help="Ask a question about an image")
    vlm.add_argument("prompt")
    vlm.add_argument("--image", action="append", default=[], help="Image URL (repeatable)")
    vlm.add_argument("--stream", action="store_true")

    deepsearch = sub.add_parser("deepsearch", help="Run a DeepSearch investigation")
    deepsearch.add_argument("prompt")
    deepsearch.add_argument("--reasoning-effort", choices=["low", "medium", "high"])
    deepsearch.add_argument("--stream", action="store_true")

    return parser


def _print_model(model: BaseModel) -> None:
    print(model.model_dump_json(indent=2, by_alias=True, exclude_none=True))


def _print_delta(chunk) -> None:
    for choice in chunk.choices:
        if choice.delta and choice.delta.content:
            sys.stdout.write(choice.delta.content)
            sys.stdout.flush()


async def run(args: argparse.Namespace, client: JinaClient) -> None:
    """Execute one parsed subcommand against ``client`` and print the result."""
    if args.command == "embed":
        inputs: list[EmbeddingInput | str] = list(args.texts)
        inputs += [EmbeddingInput.from_image(image) for image in args.image]
        inputs += [EmbeddingInput.from_pdf(pdf) for pdf in args.pdf]
        request = EmbeddingsRequest(
            model=args.model, input=inputs, task=args.task, dimensions=args.dimensions
        )
        _print_model(await client.embeddings(request))

    elif args.command == "rerank":
        request = RerankRequest(
            model=args.model, query=args.query, documents=args.documents, top_n=args.top_n
        )
        _print_model(await client.rerank(request))

    elif args.command == "classify":
        labels = [label.strip() for label in args.labels.split(",") if label.strip()]
        request = ClassificationRequest(model=args.model, input=args.inputs, labels=labels)
        _print_model(await client.classify(request))

    elif args.command == "segment":
        request = SegmenterRequest(
            content=args.content,
            tokenizer=args.tokenizer,
            return_tokens=args.return_tokens or None,
            return_chunks=args.return_chunks or None,
            max_chunk_length=args.max_chunk_length,
        )
        _print_model(await client.segment(request))

    elif args.command == "search":
        request = SearchRequest(
            query=args.query, max_results=args.num, site=args.site, json_response=args.json
        )
        response = await client.search(request)
        if response.structured is not None:
            _print_model(response.structured)
        else:
            print(response.text)

    elif args.command == "read":
        request = ReaderRequest(
            url=args.url,
            json_response=args.json,
            content_format=args.format,
            browser_engine=args.engine,
        )
        response = await client.read(request)
        if response.structured is not None:
            _print_model(response.structured)
        else:
            print(response.text)

    elif args.command == "vlm":
        if args.image:
            parts = [ContentPart.from_text(args.prompt)]
            parts += [ContentPart.from_image_url(image) for image in args.image]
            message = ChatMessage.from_parts("user", parts)
        else:
            message = ChatMessage.from_text("user", args.prompt)
        request = VLMRequest(messages=[message])
        if args.stream:
            await client.vlm_stream(request, _print_delta)
            print()
        else:
            _print_model(await client.vlm(request))

    elif args.command == "deepsearch":
        request = DeepSearchRequest(
            messages=[ChatMessage.from_text("user", args.prompt)],
            reasoning_effort=args.reasoning_effort,
        )
        if args.stream:
            await client.deepsearch_stream(request, _print_delta)
            print()
        else:
            _print_model(await client.deepsearch(request))


async def _main(args: argparse.Namespace, settings: Settings) -> None:
    options = [with_eu_compliance()] if args.eu else []
    async with JinaClient(*options, config=ClientConfig.from_settings(settings)) as client:
        await run(args, client)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        log_file_max_bytes=settings.log_file_max_bytes,
        log_file_backup_count=settings.log_file_backup_count,
    )

    if not settings.jina_api_key:
        logger.warning("jina_api_key_missing", hint="set JINA_API_KEY")

    try:
        asyncio.run(_main(args, settings))
    except (JinaError, ValidationError, httpx.HTTPError) as exc:
        logger.error("jina_command_failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
