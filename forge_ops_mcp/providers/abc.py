"""Base ABC for VCS providers."""

from abc import ABC, abstractmethod
from typing import Any, Literal

from forge_ops_mcp.configuration.models import ProviderConfig, ProviderType

from .errors import ProviderError
from .models import (
    Branch,
    Comment,
    Commit,
    FileContent,
    Issue,
    Organization,
    PullRequest,
    Release,
    Repository,
    Tag,
    User,
    Webhook,
)

IssueState = Literal["open", "closed", "all"]
PullRequestState = Literal["open", "closed", "all"]
MergeMethod = Literal["merge", "rebase", "squash"]


class VcsProviderBase(ABC):
    """Base ABC for VCS providers.

    A provider binds one Git hosting REST API. Every public operation returns
    normalized models and raises ``ProviderError`` on failure.
    """

    def __init__(self, config: ProviderConfig) -> None:
        """Initialize the provider with its configuration."""
        self.config = config

    @property
    def name(self) -> str:
        """Name under which the provider is registered."""
        return self.config.name

    @property
    def provider_type(self) -> ProviderType:
        """Type of the provider."""
        return self.config.type

    @staticmethod
    def _omit_null_parameters(**kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @abstractmethod
    def normalize_error(self, exc: BaseException) -> ProviderError:
        """Translate an exception raised by the underlying client into a ProviderError."""
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Release the underlying HTTP client."""
        pass

    # Normalization
    @abstractmethod
    def normalize_repository(self, data: dict[str, Any]) -> Repository:
        """Normalize a repository payload."""
        pass

    @abstractmethod
    def normalize_branch(self, data: dict[str, Any]) -> Branch:
        """Normalize a branch payload."""
        pass

    @abstractmethod
    def normalize_file(self, data: dict[str, Any]) -> FileContent:
        """Normalize a file content payload."""
        pass

    @abstractmethod
    def normalize_commit(self, data: dict[str, Any]) -> Commit:
        """Normalize a commit payload."""
        pass

    @abstractmethod
    def normalize_issue(self, data: dict[str, Any]) -> Issue:
        """Normalize an issue payload."""
        pass

    @abstractmethod
    def normalize_comment(self, data: dict[str, Any]) -> Comment:
        """Normalize a comment payload."""
        pass

    @abstractmethod
    def normalize_pull_request(self, data: dict[str, Any]) -> PullRequest:
        """Normalize a pull request payload."""
        pass

    @abstractmethod
    def normalize_release(self, data: dict[str, Any]) -> Release:
        """Normalize a release payload."""
        pass

    @abstractmethod
    def normalize_tag(self, data: dict[str, Any]) -> Tag:
        """Normalize a tag payload."""
        pass

    @abstractmethod
    def normalize_user(self, data: dict[str, Any]) -> User:
        """Normalize a user payload."""
        pass

    @abstractmethod
    def normalize_organization(self, data: dict[str, Any]) -> Organization:
        """Normalize an organization payload."""
        pass

    @abstractmethod
    def normalize_webhook(self, data: dict[str, Any]) -> Webhook:
        """Normalize a webhook payload."""
        pass

    # Repository CRUD
    @abstractmethod
    async def list_repositories(self, username: str | None = None, page: int = 1, limit: int = 30) -> list[Repository]:
        """List repositories of a user, or of the authenticated user if no username is given."""
        pass

    @abstractmethod
    async def get_repository(self, owner: str, repo: str) -> Repository:
        """Get a repository."""
        pass

    @abstractmethod
    async def create_repository(
        self,
        name: str,
        description: str | None = None,
        private: bool = False,
        auto_init: bool = True,
    ) -> Repository:
        """Create a repository for the authenticated user."""
        pass

    @abstractmethod
    async def update_repository(self, owner: str, repo: str, updates: dict[str, Any]) -> Repository:
        """Update a repository."""
        pass

    @abstractmethod
    async def delete_repository(self, owner: str, repo: str) -> bool:
        """Delete a repository."""
        pass

    @abstractmethod
    async def fork_repository(self, owner: str, repo: str, organization: str | None = None) -> Repository:
        """Fork a repository, optionally into an organization."""
        pass

    @abstractmethod
    async def search_repositories(self, query: str, page: int = 1, limit: int = 30) -> list[Repository]:
        """Search repositories."""
        pass

    # Branch CRUD
    @abstractmethod
    async def list_branches(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Branch]:
        """List branches of a repository."""
        pass

    @abstractmethod
    async def get_branch(self, owner: str, repo: str, branch: str) -> Branch:
        """Get a branch."""
        pass

    @abstractmethod
    async def create_branch(self, owner: str, repo: str, branch_name: str, from_branch: str) -> Branch:
        """Create a branch from an existing branch."""
        pass

    @abstractmethod
    async def delete_branch(self, owner: str, repo: str, branch: str) -> bool:
        """Delete a branch."""
        pass

    # File CRUD
    @abstractmethod
    async def get_file(self, owner: str, repo: str, path: str, ref: str | None = None) -> FileContent:
        """Get a file, with its base64 encoded content."""
        pass

    @abstractmethod
    async def list_files(self, owner: str, repo: str, path: str = "", ref: str | None = None) -> list[FileContent]:
        """List the entries of a directory."""
        pass

    @abstractmethod
    async def create_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        branch: str | None = None,
    ) -> FileContent:
        """Create a file with the given plain text content."""
        pass

    @abstractmethod
    async def update_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        sha: str,
        branch: str | None = None,
    ) -> FileContent:
        """Replace the content of an existing file."""
        pass

    @abstractmethod
    async def delete_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        sha: str,
        branch: str | None = None,
    ) -> bool:
        """Delete a file."""
        pass

    # Commit Operations
    @abstractmethod
    async def list_commits(
        self,
        owner: str,
        repo: str,
        branch: str | None = None,
        page: int = 1,
        limit: int = 30,
    ) -> list[Commit]:
        """List commits, optionally starting from a branch."""
        pass

    @abstractmethod
    async def get_commit(self, owner: str, repo: str, sha: str) -> Commit:
        """Get a commit."""
        pass

    # Issue CRUD
    @abstractmethod
    async def list_issues(
        self,
        owner: str,
        repo: str,
        state: IssueState = "open",
        page: int = 1,
        limit: int = 30,
    ) -> list[Issue]:
        """List issues of a repository."""
        pass

    @abstractmethod
    async def get_issue(self, owner: str, repo: str, issue_number: int) -> Issue:
        """Get an issue."""
        pass

    @abstractmethod
    async def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        body: str | None = None,
        assignees: list[str] | None = None,
        labels: list[str] | None = None,
    ) -> Issue:
        """Create an issue."""
        pass

    @abstractmethod
    async def update_issue(self, owner: str, repo: str, issue_number: int, updates: dict[str, Any]) -> Issue:
        """Update an issue."""
        pass

    async def close_issue(self, owner: str, repo: str, issue_number: int) -> Issue:
        """Close an issue."""
        return await self.update_issue(owner, repo, issue_number, {"state": "closed"})

    @abstractmethod
    async def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Comment:
        """Comment on an issue or pull request."""
        pass

    # Pull Request CRUD
    @abstractmethod
    async def list_pull_requests(
        self,
        owner: str,
        repo: str,
        state: PullRequestState = "open",
        page: int = 1,
        limit: int = 30,
    ) -> list[PullRequest]:
        """List pull requests of a repository."""
        pass

    @abstractmethod
    async def get_pull_request(self, owner: str, repo: str, pull_number: int) -> PullRequest:
        """Get a pull request."""
        pass

    @abstractmethod
    async def create_pull_request(
        self,
        owner: str,
        repo: str,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
    ) -> PullRequest:
        """Create a pull request."""
        pass

    @abstractmethod
    async def update_pull_request(self, owner: str, repo: str, pull_number: int, updates: dict[str, Any]) -> PullRequest:
        """Update a pull request."""
        pass

    @abstractmethod
    async def merge_pull_request(self, owner: str, repo: str, pull_number: int, merge_method: MergeMethod = "merge") -> bool:
        """Merge a pull request."""
        pass

    async def close_pull_request(self, owner: str, repo: str, pull_number: int) -> PullRequest:
        """Close a pull request without merging it."""
        return await self.update_pull_request(owner, repo, pull_number, {"state": "closed"})

    # Release CRUD
    @abstractmethod
    async def list_releases(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Release]:
        """List releases of a repository."""
        pass

    @abstractmethod
    async def get_release(self, owner: str, repo: str, release_id: int) -> Release:
        """Get a release by ID."""
        pass

    @abstractmethod
    async def create_release(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        name: str | None = None,
        body: str | None = None,
        draft: bool = False,
        prerelease: bool = False,
        target_commitish: str | None = None,
    ) -> Release:
        """Create a release."""
        pass

    @abstractmethod
    async def update_release(self, owner: str, repo: str, release_id: int, updates: dict[str, Any]) -> Release:
        """Update a release."""
        pass

    @abstractmethod
    async def delete_release(self, owner: str, repo: str, release_id: int) -> bool:
        """Delete a release."""
        pass

    # Tag Operations
    @abstractmethod
    async def list_tags(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Tag]:
        """List tags of a repository."""
        pass

    @abstractmethod
    async def get_tag(self, owner: str, repo: str, tag: str) -> Tag:
        """Get a tag by name."""
        pass

    @abstractmethod
    async def create_tag(self, owner: str, repo: str, tag_name: str, target: str, message: str | None = None) -> Tag:
        """Create a tag pointing at a branch or commit."""
        pass

    @abstractmethod
    async def delete_tag(self, owner: str, repo: str, tag: str) -> bool:
        """Delete a tag."""
        pass

    # User Operations
    @abstractmethod
    async def get_current_user(self) -> User:
        """Get the authenticated user."""
        pass

    @abstractmethod
    async def get_user(self, username: str) -> User:
        """Get a user by username."""
        pass

    @abstractmethod
    async def search_users(self, query: str, page: int = 1, limit: int = 30) -> list[User]:
        """Search users."""
        pass

    @abstractmethod
    async def list_user_organizations(self, username: str, page: int = 1, limit: int = 30) -> list[Organization]:
        """List the organizations a user belongs to."""
        pass

    # Webhook CRUD
    @abstractmethod
    async def list_webhooks(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Webhook]:
        """List webhooks of a repository."""
        pass

    @abstractmethod
    async def get_webhook(self, owner: str, repo: str, webhook_id: int) -> Webhook:
        """Get a webhook."""
        pass

    @abstractmethod
    async def create_webhook(
        self,
        owner: str,
        repo: str,
        url: str,
        events: list[str],
        secret: str | None = None,
        content_type: str = "json",
        active: bool = True,
    ) -> Webhook:
        """Create a webhook delivering the given events to a URL."""
        pass

    @abstractmethod
    async def update_webhook(self, owner: str, repo: str, webhook_id: int, updates: dict[str, Any]) -> Webhook:
        """Update a webhook."""
        pass

    @abstractmethod
    async def delete_webhook(self, owner: str, repo: str, webhook_id: int) -> bool:
        """Delete a webhook."""
        pass
