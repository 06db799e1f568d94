"""Unit tests for the ProviderFactory class."""

import pytest

from forge_ops_mcp.configuration.exceptions import ProviderNotFoundError
from forge_ops_mcp.configuration.models import ProviderConfig, ProvidersConfig, ProviderType
from forge_ops_mcp.providers.factory import ProviderFactory, build_factory
from forge_ops_mcp.providers.gitea import GiteaProvider
from forge_ops_mcp.providers.github import GitHubProvider


def gitea_provider_config(name: str = "gitea") -> ProviderConfig:
    """Configuration of a Gitea provider."""
    return ProviderConfig(name=name, type=ProviderType.GITEA, api_url="https://gitea.example.com", token="t")


def github_provider_config(name: str = "github", token: str | None = "t") -> ProviderConfig:
    """Configuration of a GitHub provider."""
    return ProviderConfig(name=name, type=ProviderType.GITHUB, api_url="https://api.github.com", token=token)


def test_create_provider_by_type() -> None:
    """Test that the provider class follows the configured type."""
    assert isinstance(ProviderFactory.create_provider(gitea_provider_config()), GiteaProvider)
    assert isinstance(ProviderFactory.create_provider(github_provider_config()), GitHubProvider)


def test_gitea_client_targets_api_v1() -> None:
    """Test that the Gitea client base URL points at the API v1."""
    provider = ProviderFactory.create_provider(gitea_provider_config())
    assert isinstance(provider, GiteaProvider)
    assert str(provider.client.base_url).rstrip("/") == "https://gitea.example.com/api/v1"


def test_first_registered_provider_is_default() -> None:
    """Test that the first registered provider becomes the default."""
    factory = ProviderFactory()
    gitea = ProviderFactory.create_provider(gitea_provider_config())
    github = ProviderFactory.create_provider(github_provider_config())
    factory.register("gitea", gitea)
    factory.register("github", github)

    assert factory.get_default_provider() is gitea
    assert factory.list_providers() == ["gitea", "github"]

    factory.set_default_provider("github")
    assert factory.get_default_provider() is github


def test_get_unknown_provider() -> None:
    """Test that an unknown provider name raises ProviderNotFoundError."""
    factory = ProviderFactory()
    with pytest.raises(ProviderNotFoundError, match="Provider 'gitlab' not found"):
        factory.get_provider("gitlab")
    with pytest.raises(ProviderNotFoundError):
        factory.get_default_provider()
    with pytest.raises(ProviderNotFoundError):
        factory.set_default_provider("gitlab")


def test_remove_default_provider_promotes_next() -> None:
    """Test that removing the default provider promotes the first remaining one."""
    factory = ProviderFactory()
    factory.register("gitea", ProviderFactory.create_provider(gitea_provider_config()))
    factory.register("github", ProviderFactory.create_provider(github_provider_config()))

    assert factory.remove_provider("gitea") is True
    assert factory.remove_provider("gitea") is False
    assert factory.has_provider("gitea") is False
    assert factory.default_provider_name == "github"


def test_providers_info_hides_tokens() -> None:
    """Test that provider descriptions expose no credentials."""
    factory = build_factory(
        ProvidersConfig(
            default_provider="public",
            providers=[gitea_provider_config(), github_provider_config("public", token=None)],
        )
    )

    info = factory.get_providers_info()

    assert info == [
        {"name": "gitea", "type": "gitea", "api_url": "https://gitea.example.com", "authenticated": True, "is_default": False},
        {"name": "public", "type": "github", "api_url": "https://api.github.com", "authenticated": False, "is_default": True},
    ]


@pytest.mark.asyncio
async def test_aclose_empties_registry() -> None:
    """Test that closing the factory closes providers and clears the registry."""
    factory = build_factory(ProvidersConfig(default_provider="gitea", providers=[gitea_provider_config()]))
    provider = factory.get_provider("gitea")
    assert isinstance(provider, GiteaProvider)

    await factory.aclose()

    assert provider.client.is_closed is True
    assert factory.list_providers() == []
    assert factory.default_provider_name is None
