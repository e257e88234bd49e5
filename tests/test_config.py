"""Tests for configuration loading and client factories."""

import json

import httpx
import pydantic
import pytest
import structlog

from marzban_api_client import (
    ApiResponseError,
    ClientConfig,
    connect,
    create_client,
    load_config,
)
from marzban_api_client.config import (
    CONFIG_ENV_VAR,
    build_client,
    configure_logging,
)


@pytest.fixture
def config_file(tmp_path):
    """Write a config file and return its path."""
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "base_url": "https://panel.example.com/",
                "username": "admin",
                "password": "secret",
                "timeout": 5,
                "log_level": "DEBUG",
            },
        ),
    )
    return path


def token_panel(requests: list[httpx.Request], status_code: int = 200):
    """Transport answering every request like the token endpoint."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if status_code != 200:
            return httpx.Response(
                status_code,
                json={"detail": [{"loc": ["body"], "msg": "bad", "type": "t"}]},
            )
        return httpx.Response(200, json={"access_token": "issued"})

    return httpx.MockTransport(handler)


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test configures logging."""
    yield
    structlog.reset_defaults()


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def test_load_config(config_file):
    config = load_config(str(config_file))

    assert config.base_url == "https://panel.example.com/"
    assert config.timeout == 5
    assert config.verify_ssl is True
    assert config.token is None


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Marzban client config not found"):
        load_config(str(tmp_path / "absent.json"))


def test_load_config_accepts_path(config_file):
    assert load_config(config_file).username == "admin"


def test_load_config_rejects_malformed_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(pydantic.ValidationError):
        load_config(path)


def test_config_requires_base_url():
    with pytest.raises(pydantic.ValidationError):
        ClientConfig(base_url="")


def test_config_rejects_non_positive_timeout():
    with pytest.raises(pydantic.ValidationError):
        ClientConfig(base_url="http://x", timeout=0)


def test_credentials_need_username_and_password():
    assert ClientConfig(base_url="http://x", username="admin").credentials is None

    credentials = ClientConfig(
        base_url="http://x",
        username="admin",
        password="secret",
    ).credentials
    assert credentials.username == "admin"
    assert credentials.password == "secret"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_client_reads_env_path(
    config_file,
    monkeypatch,
    reset_structlog,
):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

    async with create_client() as client:
        assert client.base_url == "https://panel.example.com"
        assert await client.current_token() is None


@pytest.mark.asyncio
async def test_build_client_seeds_token():
    config = ClientConfig(base_url="http://localhost:8000", token="preissued")

    async with build_client(config) as client:
        assert await client.current_token() == "preissued"


@pytest.mark.asyncio
async def test_connect_authenticates_with_configured_credentials():
    requests: list[httpx.Request] = []
    http_client = httpx.AsyncClient(transport=token_panel(requests))
    config = ClientConfig(
        base_url="http://localhost:8000",
        username="admin",
        password="secret",
    )

    client = await connect(config, http_client=http_client)

    assert await client.current_token() == "issued"
    assert len(requests) == 1
    assert requests[0].url.path == "/api/admin/token"


@pytest.mark.asyncio
async def test_connect_without_credentials_sends_nothing():
    requests: list[httpx.Request] = []
    http_client = httpx.AsyncClient(transport=token_panel(requests))

    client = await connect(
        ClientConfig(base_url="http://localhost:8000"),
        http_client=http_client,
    )

    assert requests == []
    assert await client.current_token() is None


@pytest.mark.asyncio
async def test_connect_propagates_authentication_failure():
    requests: list[httpx.Request] = []
    http_client = httpx.AsyncClient(transport=token_panel(requests, status_code=422))
    config = ClientConfig(
        base_url="http://localhost:8000",
        username="admin",
        password="wrong",
    )

    with pytest.raises(ApiResponseError):
        await connect(config, http_client=http_client)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def test_configure_logging_writes_logfmt_to_stderr(capsys, reset_structlog):
    configure_logging("warning")
    logger = structlog.get_logger("marzban_api_client.test")

    logger.info("hidden")
    logger.warning("Authentication failed", status_code=422)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "hidden" not in captured.err
    assert "level=warning" in captured.err
    assert 'msg="Authentication failed"' in captured.err
    assert "status_code=422" in captured.err
