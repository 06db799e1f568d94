"""VCS providers for Gitea and GitHub."""

from .abc import VcsProviderBase
from .errors import ErrorCode, ProviderError
from .factory import ProviderFactory, build_factory
from .gitea import GiteaProvider
from .github import GitHubProvider

__all__ = [
    "ErrorCode",
    "GiteaProvider",
    "GitHubProvider",
    "ProviderError",
    "ProviderFactory",
    "VcsProviderBase",
    "build_factory",
]
