"""User lookup tool."""

from typing import ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import ToolArgumentsError, ToolInput, ToolResult, VcsTool

MIN_SEARCH_QUERY_LENGTH = 3


class UsersInput(ToolInput):
    """Arguments of the users tool."""

    action: Literal["current", "get", "search", "orgs", "repos"]
    username: str | None = Field(default=None, description="Username.")
    query: str | None = Field(default=None, description="Search query, at least three characters.")
    page: int = Field(default=1, ge=1, description="Page number, starting at 1.")
    limit: int = Field(default=30, ge=1, le=100, description="Number of items per page.")


class UsersTool(VcsTool):
    """Look up users, their organizations and their repositories."""

    name = "users"
    description = "Look up users: current, get, search, orgs and repos."
    input_model = UsersInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "get": ("username",),
        "search": ("query",),
        "orgs": ("username",),
        "repos": ("username",),
    }

    async def handle_current(self, provider: VcsProviderBase, params: UsersInput) -> ToolResult:
        user = await provider.get_current_user()
        return self.ok(params.action, f"Authenticated user '{user.login}' retrieved successfully", user.model_dump())

    async def handle_get(self, provider: VcsProviderBase, params: UsersInput) -> ToolResult:
        user = await provider.get_user(params.username)  # type: ignore[arg-type]
        return self.ok(params.action, f"User '{params.username}' retrieved successfully", user.model_dump())

    async def handle_search(self, provider: VcsProviderBase, params: UsersInput) -> ToolResult:
        query = (params.query or "").strip()
        if len(query) < MIN_SEARCH_QUERY_LENGTH:
            raise ToolArgumentsError(f"Search query must have at least {MIN_SEARCH_QUERY_LENGTH} characters")
        users = await provider.search_users(query, params.page, params.limit)
        return self.listed(params.action, "users", users, params.page, params.limit, f"{len(users)} users found for '{query}'")

    async def handle_orgs(self, provider: VcsProviderBase, params: UsersInput) -> ToolResult:
        organizations = await provider.list_user_organizations(params.username, params.page, params.limit)  # type: ignore[arg-type]
        message = f"{len(organizations)} organizations found for '{params.username}'"
        return self.listed(params.action, "organizations", organizations, params.page, params.limit, message)

    async def handle_repos(self, provider: VcsProviderBase, params: UsersInput) -> ToolResult:
        repositories = await provider.list_repositories(params.username, params.page, params.limit)
        message = f"{len(repositories)} repositories found for '{params.username}'"
        return self.listed(params.action, "repositories", repositories, params.page, params.limit, message)
