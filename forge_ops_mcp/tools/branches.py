"""Branch management tool."""

from typing import ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import PaginatedToolInput, ToolResult, VcsTool


class BranchesInput(PaginatedToolInput):
    """Arguments of the branches tool."""

    action: Literal["create", "list", "get", "delete"]
    branch_name: str | None = Field(default=None, description="Name of the branch to create.")
    from_branch: str | None = Field(default=None, description="Existing branch the new branch starts from.")
    branch: str | None = Field(default=None, description="Branch to get or delete.")


class BranchesTool(VcsTool):
    """Create, list, get and delete branches."""

    name = "branches"
    description = "Manage branches of a repository: create, list, get and delete."
    input_model = BranchesInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "create": ("owner", "repo", "branch_name", "from_branch"),
        "list": ("owner", "repo"),
        "get": ("owner", "repo", "branch"),
        "delete": ("owner", "repo", "branch"),
    }

    async def handle_create(self, provider: VcsProviderBase, params: BranchesInput) -> ToolResult:
        branch = await provider.create_branch(params.owner, params.repo, params.branch_name, params.from_branch)  # type: ignore[arg-type]
        return self.ok(params.action, f"Branch '{params.branch_name}' created from '{params.from_branch}'", branch.model_dump())

    async def handle_list(self, provider: VcsProviderBase, params: BranchesInput) -> ToolResult:
        branches = await provider.list_branches(params.owner, params.repo, params.page, params.limit)  # type: ignore[arg-type]
        return self.listed(params.action, "branches", branches, params.page, params.limit, f"{len(branches)} branches found")

    async def handle_get(self, provider: VcsProviderBase, params: BranchesInput) -> ToolResult:
        branch = await provider.get_branch(params.owner, params.repo, params.branch)  # type: ignore[arg-type]
        return self.ok(params.action, f"Branch '{params.branch}' retrieved successfully", branch.model_dump())

    async def handle_delete(self, provider: VcsProviderBase, params: BranchesInput) -> ToolResult:
        deleted = await provider.delete_branch(params.owner, params.repo, params.branch)  # type: ignore[arg-type]
        return self.ok(params.action, f"Branch '{params.branch}' deleted successfully", {"deleted": deleted})
