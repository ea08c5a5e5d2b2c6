"""Tests for logging configuration."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler

import httpx
import pytest
import structlog

from jina_client.main import configure_logging
from jina_client.models import EmbeddingsRequest


def _flush():
    for handler in logging.root.handlers:
        handler.flush()


def test_console_only_by_default():
    logging.root.handlers.clear()

    configure_logging(log_level="DEBUG")

    assert len(logging.root.handlers) == 1
    handler = logging.root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert not isinstance(handler, RotatingFileHandler)
    assert logging.root.level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    logging.root.handlers.clear()

    configure_logging(log_level="chatty")

    assert logging.root.level == logging.INFO


def test_file_handler_rotation_settings(tmp_path):
    logging.root.handlers.clear()
    log_file = tmp_path / "logs" / "jina" / "client.log"

    configure_logging(
        log_level="warning",
        log_file=str(log_file),
        log_file_max_bytes=1_000_000,
        log_file_backup_count=2,
    )

    assert log_file.parent.is_dir()
    assert len(logging.root.handlers) == 2
    file_handler = logging.root.handlers[1]
    assert isinstance(file_handler, RotatingFileHandler)
    assert file_handler.maxBytes == 1_000_000
    assert file_handler.backupCount == 2
    assert logging.root.level == logging.WARNING


def test_file_receives_json_events(tmp_path):
    logging.root.handlers.clear()
    log_file = tmp_path / "client.log"
    configure_logging(log_level="INFO", log_file=str(log_file))

    structlog.get_logger("jina_client.test").info("jina_request_complete", call="embeddings", status_code=200)
    _flush()

    record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert record["event"] == "jina_request_complete"
    assert record["call"] == "embeddings"
    assert record["status_code"] == 200
    assert record["level"] == "info"


def test_events_below_level_are_dropped(tmp_path):
    logging.root.handlers.clear()
    log_file = tmp_path / "client.log"
    configure_logging(log_level="WARNING", log_file=str(log_file))

    structlog.get_logger("jina_client.test").debug("jina_request_start", call="read")
    _flush()

    assert "jina_request_start" not in log_file.read_text(encoding="utf-8")


def test_console_writes_to_stderr():
    logging.root.handlers.clear()

    configure_logging(log_level="INFO")

    assert logging.root.handlers[0].stream is sys.stderr


@pytest.fixture
def default_structlog():
    """Run with structlog's unconfigured defaults and no stdlib handlers, as a host application would."""
    structlog.reset_defaults()
    logging.root.handlers.clear()
    logging.root.setLevel(logging.WARNING)
    yield
    configure_logging(log_level="WARNING")


@pytest.mark.asyncio
async def test_library_events_stay_off_stdout(default_structlog, make_client, capsys):
    body = {"model": "jina-embeddings-v3", "data": [], "usage": {"total_tokens": 1}}
    client = make_client(lambda request: httpx.Response(200, json=body))

    await client.embeddings(EmbeddingsRequest(model="jina-embeddings-v3", input=["hello"]))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "jina_request_start" not in captured.err
    assert "jina_request_complete" not in captured.err
