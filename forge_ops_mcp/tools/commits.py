"""Commit history tool."""

from typing import ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import PaginatedToolInput, ToolResult, VcsTool


class CommitsInput(PaginatedToolInput):
    """Arguments of the commits tool."""

    action: Literal["list", "get"]
    branch: str | None = Field(default=None, description="Branch to list commits from. Defaults to the default branch.")
    sha: str | None = Field(default=None, description="Commit SHA, for get.")


class CommitsTool(VcsTool):
    """List and get commits."""

    name = "commits"
    description = "Read commit history: list and get."
    input_model = CommitsInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "list": ("owner", "repo"),
        "get": ("owner", "repo", "sha"),
    }

    async def handle_list(self, provider: VcsProviderBase, params: CommitsInput) -> ToolResult:
        commits = await provider.list_commits(params.owner, params.repo, params.branch, params.page, params.limit)  # type: ignore[arg-type]
        return self.listed(params.action, "commits", commits, params.page, params.limit, f"{len(commits)} commits found")

    async def handle_get(self, provider: VcsProviderBase, params: CommitsInput) -> ToolResult:
        commit = await provider.get_commit(params.owner, params.repo, params.sha)  # type: ignore[arg-type]
        return self.ok(params.action, f"Commit '{params.sha}' retrieved successfully", commit.model_dump())
