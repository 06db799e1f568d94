"""Fixtures for unit tests."""

from typing import Callable, Generator

import httpx
import pytest
import structlog

from forge_ops_mcp.config import Settings
from forge_ops_mcp.configuration.models import ProviderConfig, ProviderType
from forge_ops_mcp.providers.client import get_gitea_client
from forge_ops_mcp.providers.gitea import GiteaProvider

SETTINGS_ENVIRONMENT_VARIABLES = (
    "DEBUG",
    "DEMO_MODE",
    "TIMEOUT",
    "GITEA_URL",
    "GITEA_TOKEN",
    "GITEA_USERNAME",
    "GITHUB_URL",
    "GITHUB_TOKEN",
    "GITHUB_USERNAME",
    "PROVIDER",
    "API_URL",
    "API_TOKEN",
    "USERNAME",
    "DEFAULT_PROVIDER",
    "PROVIDERS_JSON",
)


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every settings variable from the environment."""
    for variable in SETTINGS_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def make_settings(clean_environment: None) -> Callable[..., Settings]:
    """Build settings from keyword arguments only, ignoring any .env file."""

    def _make_settings(**values: object) -> Settings:
        return Settings(_env_file=None, **values)  # type: ignore[call-arg]

    return _make_settings


@pytest.fixture
def gitea_config() -> ProviderConfig:
    """Configuration of a Gitea provider named gitea."""
    return ProviderConfig(name="gitea", type=ProviderType.GITEA, api_url="https://gitea.example.com", token="secret-token")


@pytest.fixture
def make_gitea_provider(gitea_config: ProviderConfig) -> Callable[[Callable[[httpx.Request], httpx.Response]], GiteaProvider]:
    """Build a Gitea provider whose requests are answered by a handler."""

    def _make_gitea_provider(handler: Callable[[httpx.Request], httpx.Response]) -> GiteaProvider:
        client = get_gitea_client(gitea_config, transport=httpx.MockTransport(handler))
        return GiteaProvider(gitea_config, client)

    return _make_gitea_provider
