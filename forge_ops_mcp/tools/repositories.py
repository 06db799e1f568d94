"""Repository management tool."""

from typing import ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import PaginatedToolInput, ToolResult, VcsTool


class RepositoriesInput(PaginatedToolInput):
    """Arguments of the repositories tool."""

    action: Literal["create", "list", "get", "update", "delete", "fork", "search"]
    name: str | None = Field(default=None, description="Repository name, for create.")
    description: str | None = Field(default=None, description="Repository description, for create.")
    private: bool = Field(default=False, description="Create a private repository.")
    auto_init: bool = Field(default=True, description="Initialize the repository with a README.")
    username: str | None = Field(default=None, description="List the repositories of this user instead of the authenticated one.")
    new_name: str | None = Field(default=None, description="New repository name, for update.")
    new_description: str | None = Field(default=None, description="New description, for update.")
    new_private: bool | None = Field(default=None, description="New visibility, for update.")
    archived: bool | None = Field(default=None, description="Archive or unarchive, for update.")
    default_branch: str | None = Field(default=None, description="New default branch, for update.")
    organization: str | None = Field(default=None, description="Organization to fork into.")
    query: str | None = Field(default=None, description="Search query.")


class RepositoriesTool(VcsTool):
    """Create, list, get, update, delete, fork and search repositories."""

    name = "repositories"
    description = "Manage repositories: create, list, get, update, delete, fork and search."
    input_model = RepositoriesInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "create": ("name",),
        "get": ("owner", "repo"),
        "update": ("owner", "repo"),
        "delete": ("owner", "repo"),
        "fork": ("owner", "repo"),
        "search": ("query",),
    }

    async def handle_create(self, provider: VcsProviderBase, params: RepositoriesInput) -> ToolResult:
        repository = await provider.create_repository(params.name, params.description, params.private, params.auto_init)  # type: ignore[arg-type]
        return self.ok(params.action, f"Repository '{params.name}' created successfully", repository.model_dump())

    async def handle_list(self, provider: VcsProviderBase, params: RepositoriesInput) -> ToolResult:
        repositories = await provider.list_repositories(params.username, params.page, params.limit)
        return self.listed(params.action, "repositories", repositories, params.page, params.limit, f"{len(repositories)} repositories found")

    async def handle_get(self, provider: VcsProviderBase, params: RepositoriesInput) -> ToolResult:
        repository = await provider.get_repository(params.owner, params.repo)  # type: ignore[arg-type]
        return self.ok(params.action, f"Repository '{params.owner}/{params.repo}' retrieved successfully", repository.model_dump())

    async def handle_update(self, provider: VcsProviderBase, params: RepositoriesInput) -> ToolResult:
        provided = self.updates_from(params, ("new_name", "new_description", "new_private", "archived", "default_branch"))
        renames = {"new_name": "name", "new_description": "description", "new_private": "private"}
        updates = {renames.get(field, field): value for field, value in provided.items()}
        repository = await provider.update_repository(params.owner, params.repo, updates)  # type: ignore[arg-type]
        return self.ok(params.action, f"Repository '{params.owner}/{params.repo}' updated successfully", repository.model_dump())

    async def handle_delete(self, provider: VcsProviderBase, params: RepositoriesInput) -> ToolResult:
        deleted = await provider.delete_repository(params.owner, params.repo)  # type: ignore[arg-type]
        return self.ok(params.action, f"Repository '{params.owner}/{params.repo}' deleted successfully", {"deleted": deleted})

    async def handle_fork(self, provider: VcsProviderBase, params: RepositoriesInput) -> ToolResult:
        repository = await provider.fork_repository(params.owner, params.repo, params.organization)  # type: ignore[arg-type]
        return self.ok(params.action, f"Fork of repository '{params.owner}/{params.repo}' created successfully", repository.model_dump())

    async def handle_search(self, provider: VcsProviderBase, params: RepositoriesInput) -> ToolResult:
        repositories = await provider.search_repositories(params.query, params.page, params.limit)  # type: ignore[arg-type]
        message = f"{len(repositories)} repositories found for '{params.query}'"
        return self.listed(params.action, "repositories", repositories, params.page, params.limit, message)
