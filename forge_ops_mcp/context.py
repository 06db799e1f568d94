"""Application context shared by the tools."""

from dataclasses import dataclass
from typing import Self

from forge_ops_mcp.config import Settings
from forge_ops_mcp.configuration.reconcile import reconcile_providers_configuration
from forge_ops_mcp.providers.factory import ProviderFactory, build_factory


@dataclass
class AppContext:
    """Settings and the provider registry, passed explicitly to every tool call."""

    settings: Settings
    factory: ProviderFactory

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Build the context, registering every configured provider.

        Raises:
            ProviderConfigurationError: If the provider configuration is invalid or empty.
        """
        return cls(settings=settings, factory=build_factory(reconcile_providers_configuration(settings)))

    async def aclose(self) -> None:
        """Close the HTTP clients of every provider."""
        await self.factory.aclose()
