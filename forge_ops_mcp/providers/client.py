"""Sets up the authenticated HTTP clients used by the providers."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generator, TypeAlias

import httpx
from githubkit import GitHub
from githubkit.auth import BaseAuthStrategy, UnauthAuthStrategy

from forge_ops_mcp.configuration.models import ProviderConfig

if TYPE_CHECKING:
    from githubkit import GitHubCore


@dataclass
class BearerTokenAuth(httpx.Auth):
    """Sends the token with the ``Bearer`` scheme."""

    token: str

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


@dataclass
class BearerTokenAuthStrategy(BaseAuthStrategy):
    """Token authentication using ``Authorization: Bearer <token>``.

    githubkit's ``TokenAuthStrategy`` sends the legacy ``token`` scheme.
    """

    token: str

    def get_auth_flow(self, github: "GitHubCore") -> httpx.Auth:
        return BearerTokenAuth(self.token)


GitHubClient: TypeAlias = GitHub[BearerTokenAuthStrategy] | GitHub[UnauthAuthStrategy]

USER_AGENT = "forge-ops-mcp"


def normalize_gitea_base_url(api_url: str) -> str:
    """Returns the Gitea API v1 base URL for an instance or API URL.

    ``https://gitea.example.com``, ``https://gitea.example.com/api`` and
    ``https://gitea.example.com/api/v1`` all resolve to the last form.
    """
    base_url = api_url.rstrip("/")
    if base_url.endswith("/api/v1"):
        return base_url
    if base_url.endswith("/api"):
        return f"{base_url}/v1"
    return f"{base_url}/api/v1"


def get_gitea_headers(token: str | None) -> dict[str, str]:
    """Returns the headers sent with every Gitea request."""
    headers = {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def get_gitea_client(config: ProviderConfig, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Returns an HTTP client bound to the Gitea API v1 of the configured instance."""
    return httpx.AsyncClient(
        base_url=normalize_gitea_base_url(config.api_url),
        headers=get_gitea_headers(config.token),
        timeout=config.timeout,
        transport=transport,
    )


def get_github_client(config: ProviderConfig) -> GitHubClient:
    """Returns a githubkit client using a token, or anonymous access if none is configured.

    Supports custom base URL for GitHub Enterprise Server (GHES). Automatic
    retries are disabled; rate limits surface as errors flagged retryable.
    """
    auth: BearerTokenAuthStrategy | UnauthAuthStrategy
    if config.token:
        auth = BearerTokenAuthStrategy(config.token)
    else:
        auth = UnauthAuthStrategy()
    # Disable HTTP caching to always get fresh data
    return GitHub(
        auth=auth,
        base_url=config.api_url,
        user_agent=USER_AGENT,
        timeout=config.timeout,
        http_cache=False,
        auto_retry=False,
    )
