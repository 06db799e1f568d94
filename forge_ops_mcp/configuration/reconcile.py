"""Reconciles provider configuration from application settings."""

import json

import structlog
from pydantic import ValidationError

from forge_ops_mcp.config import Settings
from forge_ops_mcp.configuration.exceptions import (
    NoProvidersConfiguredError,
    ProviderConfigurationError,
    UnsupportedProviderTypeError,
)
from forge_ops_mcp.configuration.models import ProviderConfig, ProvidersConfig, ProviderType

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

REQUIRED_PROVIDERS_JSON_KEYS = ("name", "type", "apiUrl", "token")


def parse_provider_type(value: str | None) -> ProviderType:
    """Parses a provider type, defaulting to Gitea when unset."""
    if not value:
        return ProviderType.GITEA
    try:
        return ProviderType(value.lower())
    except ValueError as exc:
        raise UnsupportedProviderTypeError(value) from exc


def load_providers_json(providers_json: str, timeout: float) -> ProvidersConfig | None:
    """Parses the PROVIDERS_JSON setting.

    Entries lacking any of name, type, apiUrl or token are skipped.

    Raises:
        ProviderConfigurationError: If the JSON is malformed or an entry is invalid.

    Returns:
        ProvidersConfig | None: The providers, or None if no usable entry exists.
    """
    try:
        document = json.loads(providers_json)
    except json.JSONDecodeError as exc:
        raise ProviderConfigurationError(f"Error parsing PROVIDERS_JSON: {exc}") from exc

    entries = document.get("providers") if isinstance(document, dict) else None
    if not isinstance(entries, list):
        raise ProviderConfigurationError("PROVIDERS_JSON must contain a 'providers' list")

    providers: list[ProviderConfig] = []
    for entry in entries:
        if not isinstance(entry, dict) or not all(entry.get(key) for key in REQUIRED_PROVIDERS_JSON_KEYS):
            logger.warning("Skipping incomplete provider entry in PROVIDERS_JSON", entry_name=entry.get("name") if isinstance(entry, dict) else None)
            continue
        try:
            providers.append(ProviderConfig.model_validate({"timeout": timeout, **entry}))
        except ValidationError as exc:
            raise ProviderConfigurationError(f"Invalid provider entry '{entry.get('name')}' in PROVIDERS_JSON: {exc}") from exc

    if not providers:
        return None

    default_provider = document.get("defaultProvider") or providers[0].name
    return ProvidersConfig(default_provider=default_provider, providers=providers)


def _providers_from_individual_settings(settings: Settings) -> ProvidersConfig | None:
    """Builds providers from the GITEA_*, GITHUB_* and generic API_* settings."""
    providers: list[ProviderConfig] = []
    default_provider = ""

    if settings.GITEA_URL and settings.GITEA_TOKEN:
        providers.append(
            ProviderConfig(
                name="gitea",
                type=ProviderType.GITEA,
                api_url=settings.GITEA_URL,
                token=settings.GITEA_TOKEN,
                username=settings.GITEA_USERNAME,
                timeout=settings.TIMEOUT,
            )
        )
        default_provider = "gitea"

    if settings.GITHUB_TOKEN:
        providers.append(
            ProviderConfig(
                name="github",
                type=ProviderType.GITHUB,
                api_url=settings.GITHUB_URL,
                token=settings.GITHUB_TOKEN,
                username=settings.GITHUB_USERNAME,
                timeout=settings.TIMEOUT,
            )
        )
        default_provider = default_provider or "github"

    if not providers and settings.API_URL and settings.API_TOKEN:
        provider_type = parse_provider_type(settings.PROVIDER)
        providers.append(
            ProviderConfig(
                name=provider_type.value,
                type=provider_type,
                api_url=settings.API_URL,
                token=settings.API_TOKEN,
                username=settings.USERNAME,
                timeout=settings.TIMEOUT,
            )
        )
        default_provider = provider_type.value

    if not providers:
        return None
    return ProvidersConfig(default_provider=default_provider, providers=providers)


def _demo_providers(settings: Settings) -> ProvidersConfig:
    """Builds anonymous providers that can only read public data."""
    providers = [
        ProviderConfig(
            name="github",
            type=ProviderType.GITHUB,
            api_url=settings.GITHUB_URL,
            username=settings.GITHUB_USERNAME,
            timeout=settings.TIMEOUT,
        )
    ]
    if settings.GITEA_URL:
        providers.append(
            ProviderConfig(
                name="gitea",
                type=ProviderType.GITEA,
                api_url=settings.GITEA_URL,
                username=settings.GITEA_USERNAME,
                timeout=settings.TIMEOUT,
            )
        )
    return ProvidersConfig(default_provider="github", providers=providers)


def reconcile_providers_configuration(settings: Settings) -> ProvidersConfig:
    """Determines which providers to register from the application settings.

    Args:
        settings (Settings): The application settings.

    Raises:
        ProviderConfigurationError: If PROVIDERS_JSON is malformed.
        NoProvidersConfiguredError: If no provider is configured and demo mode is off.

    Returns:
        ProvidersConfig: The providers to register and the default provider name.
    """
    providers_config: ProvidersConfig | None = None
    if settings.PROVIDERS_JSON:
        providers_config = load_providers_json(settings.PROVIDERS_JSON, settings.TIMEOUT)

    if providers_config is None:
        providers_config = _providers_from_individual_settings(settings)

    if providers_config is None:
        if not settings.DEMO_MODE:
            raise NoProvidersConfiguredError(
                "No providers configured. Set GITEA_URL and GITEA_TOKEN, GITHUB_TOKEN, API_URL and API_TOKEN, "
                "PROVIDERS_JSON, or enable DEMO_MODE."
            )
        logger.warning("No credentials configured, registering anonymous demo providers")
        providers_config = _demo_providers(settings)

    configured_names = [provider.name for provider in providers_config.providers]
    if settings.DEFAULT_PROVIDER:
        if settings.DEFAULT_PROVIDER in configured_names:
            providers_config.default_provider = settings.DEFAULT_PROVIDER
        else:
            logger.warning("DEFAULT_PROVIDER is not a configured provider", default_provider=settings.DEFAULT_PROVIDER, providers=configured_names)

    logger.info("Reconciled provider configuration", providers=configured_names, default_provider=providers_config.default_provider)
    return providers_config
