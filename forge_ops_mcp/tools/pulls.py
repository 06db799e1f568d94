"""Pull request management tool."""

from typing import ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import PaginatedToolInput, ToolResult, VcsTool


class PullsInput(PaginatedToolInput):
    """Arguments of the pulls tool."""

    action: Literal["create", "list", "get", "update", "merge", "close"]
    pull_number: int | None = Field(default=None, ge=1, description="Pull request number.")
    title: str | None = Field(default=None, description="Pull request title.")
    body: str | None = Field(default=None, description="Pull request description.")
    head: str | None = Field(default=None, description="Branch containing the changes.")
    base: str | None = Field(default=None, description="Branch the changes are merged into.")
    state: Literal["open", "closed", "all"] = Field(default="open", description="State filter, for list.")
    new_state: Literal["open", "closed"] | None = Field(default=None, description="New state, for update.")
    merge_method: Literal["merge", "rebase", "squash"] = Field(default="merge", description="Merge method, for merge.")


class PullsTool(VcsTool):
    """Create, list, get, update, merge and close pull requests."""

    name = "pulls"
    description = "Manage pull requests: create, list, get, update, merge and close."
    input_model = PullsInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "create": ("owner", "repo", "title", "head", "base"),
        "list": ("owner", "repo"),
        "get": ("owner", "repo", "pull_number"),
        "update": ("owner", "repo", "pull_number"),
        "merge": ("owner", "repo", "pull_number"),
        "close": ("owner", "repo", "pull_number"),
    }

    async def handle_create(self, provider: VcsProviderBase, params: PullsInput) -> ToolResult:
        pull_request = await provider.create_pull_request(params.owner, params.repo, params.title, params.head, params.base, params.body)  # type: ignore[arg-type]
        return self.ok(params.action, f"Pull request #{pull_request.number} created successfully", pull_request.model_dump())

    async def handle_list(self, provider: VcsProviderBase, params: PullsInput) -> ToolResult:
        pull_requests = await provider.list_pull_requests(params.owner, params.repo, params.state, params.page, params.limit)  # type: ignore[arg-type]
        message = f"{len(pull_requests)} pull requests found"
        return self.listed(params.action, "pull_requests", pull_requests, params.page, params.limit, message)

    async def handle_get(self, provider: VcsProviderBase, params: PullsInput) -> ToolResult:
        pull_request = await provider.get_pull_request(params.owner, params.repo, params.pull_number)  # type: ignore[arg-type]
        return self.ok(params.action, f"Pull request #{params.pull_number} retrieved successfully", pull_request.model_dump())

    async def handle_update(self, provider: VcsProviderBase, params: PullsInput) -> ToolResult:
        updates = self.updates_from(params, ("title", "body", "base", "new_state"))
        if "new_state" in updates:
            updates["state"] = updates.pop("new_state")
        pull_request = await provider.update_pull_request(params.owner, params.repo, params.pull_number, updates)  # type: ignore[arg-type]
        return self.ok(params.action, f"Pull request #{params.pull_number} updated successfully", pull_request.model_dump())

    async def handle_merge(self, provider: VcsProviderBase, params: PullsInput) -> ToolResult:
        merged = await provider.merge_pull_request(params.owner, params.repo, params.pull_number, params.merge_method)  # type: ignore[arg-type]
        data = {"merged": merged, "merge_method": params.merge_method}
        return self.ok(params.action, f"Pull request #{params.pull_number} merged using '{params.merge_method}'", data)

    async def handle_close(self, provider: VcsProviderBase, params: PullsInput) -> ToolResult:
        pull_request = await provider.close_pull_request(params.owner, params.repo, params.pull_number)  # type: ignore[arg-type]
        return self.ok(params.action, f"Pull request #{params.pull_number} closed successfully", pull_request.model_dump())
