"""Contains exceptions raised when reconciling application configuration."""


class ProviderConfigurationError(Exception):
    """Raised when the provider configuration is malformed."""

    pass


class NoProvidersConfiguredError(ProviderConfigurationError):
    """Raised when no provider could be configured from the environment."""

    pass


class UnsupportedProviderTypeError(ProviderConfigurationError):
    """Raised when a provider type is not supported."""

    def __init__(self, provider_type: str) -> None:
        """Initializes the exception with the unsupported provider type."""
        super().__init__(f"Provider type '{provider_type}' not supported. Supported types: gitea, github")
        self.provider_type = provider_type


class ProviderNotFoundError(Exception):
    """Raised when a provider is not registered."""

    def __init__(self, name: str) -> None:
        """Initializes the exception with the name of the missing provider."""
        super().__init__(f"Provider '{name}' not found")
        self.name = name
