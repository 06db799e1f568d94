"""Registry of the configured VCS providers."""

from typing import Any

import structlog

from forge_ops_mcp.configuration.exceptions import ProviderNotFoundError, UnsupportedProviderTypeError
from forge_ops_mcp.configuration.models import ProviderConfig, ProvidersConfig, ProviderType

from .abc import VcsProviderBase
from .gitea import GiteaProvider
from .github import GitHubProvider

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class ProviderFactory:
    """Creates providers and keeps them by name.

    The first registered provider becomes the default until another default
    is chosen explicitly.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._providers: dict[str, VcsProviderBase] = {}
        self._default_provider: str | None = None

    @staticmethod
    def create_provider(config: ProviderConfig) -> VcsProviderBase:
        """Create a provider of the configured type.

        Raises:
            UnsupportedProviderTypeError: If the provider type is unknown.
        """
        if config.type == ProviderType.GITEA:
            return GiteaProvider.create(config)
        if config.type == ProviderType.GITHUB:
            return GitHubProvider.create(config)
        raise UnsupportedProviderTypeError(str(config.type))

    def register(self, name: str, provider: VcsProviderBase) -> None:
        """Register a provider under a name, replacing any previous one."""
        self._providers[name] = provider
        if self._default_provider is None:
            self._default_provider = name
        logger.info("Registered provider", provider=name, provider_type=provider.provider_type.value)

    def get_provider(self, name: str) -> VcsProviderBase:
        """Return a registered provider.

        Raises:
            ProviderNotFoundError: If no provider is registered under the name.
        """
        provider = self._providers.get(name)
        if provider is None:
            raise ProviderNotFoundError(name)
        return provider

    def get_default_provider(self) -> VcsProviderBase:
        """Return the default provider.

        Raises:
            ProviderNotFoundError: If no provider is registered.
        """
        if self._default_provider is None:
            raise ProviderNotFoundError("default")
        return self.get_provider(self._default_provider)

    @property
    def default_provider_name(self) -> str | None:
        """Name of the default provider, if any provider is registered."""
        return self._default_provider

    def set_default_provider(self, name: str) -> None:
        """Make a registered provider the default.

        Raises:
            ProviderNotFoundError: If no provider is registered under the name.
        """
        if name not in self._providers:
            raise ProviderNotFoundError(name)
        self._default_provider = name

    def remove_provider(self, name: str) -> bool:
        """Unregister a provider. The first remaining provider becomes default if needed."""
        if name not in self._providers:
            return False
        del self._providers[name]
        if self._default_provider == name:
            self._default_provider = next(iter(self._providers), None)
        return True

    def has_provider(self, name: str) -> bool:
        """Return True if a provider is registered under the name."""
        return name in self._providers

    def list_providers(self) -> list[str]:
        """Return the registered provider names in registration order."""
        return list(self._providers)

    def get_providers_info(self) -> list[dict[str, Any]]:
        """Describe the registered providers without exposing credentials."""
        return [
            {
                "name": name,
                "type": provider.provider_type.value,
                "api_url": provider.config.api_url,
                "authenticated": not provider.config.anonymous,
                "is_default": name == self._default_provider,
            }
            for name, provider in self._providers.items()
        ]

    def clear(self) -> None:
        """Unregister every provider without closing them."""
        self._providers.clear()
        self._default_provider = None

    async def aclose(self) -> None:
        """Close every provider and empty the registry."""
        for provider in self._providers.values():
            await provider.aclose()
        self.clear()


def build_factory(providers_config: ProvidersConfig) -> ProviderFactory:
    """Create and register every configured provider."""
    factory = ProviderFactory()
    for config in providers_config.providers:
        factory.register(config.name, factory.create_provider(config))
    if factory.has_provider(providers_config.default_provider):
        factory.set_default_provider(providers_config.default_provider)
    return factory
