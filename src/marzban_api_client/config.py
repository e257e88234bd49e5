"""Configuration, logging setup and client factories."""

import logging
import os
import pathlib
import sys

import httpx
import pydantic
import structlog

from .api import MarzbanAPIClient
from .client import DEFAULT_TIMEOUT
from .models.auth import AdminCredentials

CONFIG_ENV_VAR = "MARZBAN_CLIENT_CONFIG_PATH"
logger = structlog.get_logger(__name__)


class ClientConfig(pydantic.BaseModel):
    """Configuration for a Marzban API client."""

    base_url: str = pydantic.Field(
        description="Panel URL, e.g. http://localhost:8000",
        min_length=1,
    )
    username: str | None = pydantic.Field(None, description="Admin username")
    password: str | None = pydantic.Field(None, description="Admin password")
    token: str | None = pydantic.Field(
        None,
        description="Pre-issued bearer token to start with",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    verify_ssl: bool = pydantic.Field(True, description="Verify TLS certificates")
    log_level: str = pydantic.Field("INFO", description="Logging level")

    @property
    def credentials(self) -> AdminCredentials | None:
        """Admin credentials, when both username and password are set."""
        if self.username is None or self.password is None:
            return None
        return AdminCredentials(username=self.username, password=self.password)


def configure_logging(level: str) -> None:
    """Send client logs to stderr as logfmt lines at ``level`` and above.

    Unknown level names fall back to INFO.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str | os.PathLike[str]) -> ClientConfig:
    """Read and validate a client config from a JSON file.

    Raises:
        FileNotFoundError: If no file exists at ``config_path``.
        pydantic.ValidationError: If the file is not valid JSON or does not
            describe a valid config.
    """
    path = pathlib.Path(config_path)
    if not path.is_file():
        msg = f"Marzban client config not found: {path}"
        raise FileNotFoundError(msg)
    return ClientConfig.model_validate_json(path.read_text())


def build_client(
    config: ClientConfig,
    http_client: httpx.AsyncClient | None = None,
) -> MarzbanAPIClient:
    """Construct a client from validated config without contacting the panel."""
    client = MarzbanAPIClient(
        base_url=config.base_url,
        token=config.token,
        timeout=config.timeout,
        verify_ssl=config.verify_ssl,
        http_client=http_client,
    )
    logger.info(
        "Created Marzban API client",
        base_url=client.base_url,
        has_token=config.token is not None,
    )
    return client


def create_client(config_path: str | None = None) -> MarzbanAPIClient:
    """Create a client using a config path or the environment default."""
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR, "config.json")
    config = load_config(resolved_path)
    configure_logging(config.log_level)
    return build_client(config)


async def connect(
    config: ClientConfig,
    http_client: httpx.AsyncClient | None = None,
) -> MarzbanAPIClient:
    """Construct a client and authenticate it when credentials are configured.

    The client's transport is closed again if authentication fails.
    """
    client = build_client(config, http_client)
    credentials = config.credentials
    if credentials is None:
        return client
    try:
        await client.authenticate(credentials)
    except BaseException:
        await client.aclose()
        raise
    return client
