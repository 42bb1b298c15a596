"""Tests for the command-line entry point."""

import json
import tempfile
from pathlib import Path

import pytest

from cheathub.main import ApplicationContext, parse_arguments
from cheathub.models.config import DEFAULT_API_BASE_URL


def test_default_arguments() -> None:
    args = parse_arguments([])

    assert args.config is None
    assert args.log_level is None
    assert args.log_dir == Path("logs")


def test_explicit_arguments() -> None:
    args = parse_arguments(["--config", "/tmp/cheathub.json", "--log-level", "DEBUG", "--log-dir", "/tmp/logs"])

    assert args.config == Path("/tmp/cheathub.json")
    assert args.log_level == "DEBUG"
    assert args.log_dir == Path("/tmp/logs")


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(SystemExit):
        parse_arguments(["--log-level", "VERBOSE"])


def test_context_builds_client_from_config_file() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        config_path = Path(temp_dir) / "config.json"
        config_path.write_text(
            json.dumps({"api_base_url": "http://localhost:8080/api/v1", "request_timeout": 12}),
            encoding="utf-8",
        )
        context = ApplicationContext(config_path=config_path)

        assert context.config.api_base_url == "http://localhost:8080/api/v1"
        assert context.http_client.base_url == "http://localhost:8080/api/v1"
        assert context.http_client.timeout == 12.0
        assert context.http_client is context.http_client


def test_context_without_config_file_uses_default_api() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        context = ApplicationContext(config_path=Path(temp_dir) / "missing.json")

        assert context.config.api_base_url == DEFAULT_API_BASE_URL


def test_request_shutdown_without_app_only_sets_flag() -> None:
    context = ApplicationContext(config_path=Path("/nonexistent/config.json"))

    context.request_shutdown()

    assert context.shutdown_requested


@pytest.mark.asyncio
async def test_cleanup_closes_http_client() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        context = ApplicationContext(config_path=Path(temp_dir) / "missing.json")
        client = context.http_client

        await context.cleanup()

        assert client._client.is_closed
