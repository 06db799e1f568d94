"""Models for provider configuration."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProviderType(str, Enum):
    """Enum for supported VCS provider types."""

    GITEA = "gitea"
    GITHUB = "github"


class ProviderConfig(BaseModel):
    """Connection settings for a single provider.

    Field aliases match the camelCase keys used in ``PROVIDERS_JSON``.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: ProviderType
    api_url: str = Field(alias="apiUrl")
    token: str | None = None
    username: str | None = None
    timeout: float = 30.0

    @property
    def anonymous(self) -> bool:
        """Whether requests are sent without credentials."""
        return not self.token


class ProvidersConfig(BaseModel):
    """The full set of configured providers and the default one."""

    default_provider: str
    providers: list[ProviderConfig]
