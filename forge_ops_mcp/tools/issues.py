"""Issue management tool."""

from typing import ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import PaginatedToolInput, ToolResult, VcsTool


class IssuesInput(PaginatedToolInput):
    """Arguments of the issues tool."""

    action: Literal["create", "list", "get", "update", "close", "comment"]
    issue_number: int | None = Field(default=None, ge=1, description="Issue number.")
    title: str | None = Field(default=None, description="Issue title.")
    body: str | None = Field(default=None, description="Issue body, or comment body for comment.")
    state: Literal["open", "closed", "all"] = Field(default="open", description="State filter, for list.")
    new_state: Literal["open", "closed"] | None = Field(default=None, description="New state, for update.")
    assignees: list[str] | None = Field(default=None, description="Usernames to assign.")
    labels: list[str] | None = Field(default=None, description="Label names.")


class IssuesTool(VcsTool):
    """Create, list, get, update, close and comment on issues."""

    name = "issues"
    description = "Manage issues: create, list, get, update, close and comment."
    input_model = IssuesInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "create": ("owner", "repo", "title"),
        "list": ("owner", "repo"),
        "get": ("owner", "repo", "issue_number"),
        "update": ("owner", "repo", "issue_number"),
        "close": ("owner", "repo", "issue_number"),
        "comment": ("owner", "repo", "issue_number", "body"),
    }

    async def handle_create(self, provider: VcsProviderBase, params: IssuesInput) -> ToolResult:
        issue = await provider.create_issue(params.owner, params.repo, params.title, params.body, params.assignees, params.labels)  # type: ignore[arg-type]
        return self.ok(params.action, f"Issue #{issue.number} created successfully", issue.model_dump())

    async def handle_list(self, provider: VcsProviderBase, params: IssuesInput) -> ToolResult:
        issues = await provider.list_issues(params.owner, params.repo, params.state, params.page, params.limit)  # type: ignore[arg-type]
        return self.listed(params.action, "issues", issues, params.page, params.limit, f"{len(issues)} issues found")

    async def handle_get(self, provider: VcsProviderBase, params: IssuesInput) -> ToolResult:
        issue = await provider.get_issue(params.owner, params.repo, params.issue_number)  # type: ignore[arg-type]
        return self.ok(params.action, f"Issue #{params.issue_number} retrieved successfully", issue.model_dump())

    async def handle_update(self, provider: VcsProviderBase, params: IssuesInput) -> ToolResult:
        updates = self.updates_from(params, ("title", "body", "new_state", "assignees", "labels"))
        if "new_state" in updates:
            updates["state"] = updates.pop("new_state")
        issue = await provider.update_issue(params.owner, params.repo, params.issue_number, updates)  # type: ignore[arg-type]
        return self.ok(params.action, f"Issue #{params.issue_number} updated successfully", issue.model_dump())

    async def handle_close(self, provider: VcsProviderBase, params: IssuesInput) -> ToolResult:
        issue = await provider.close_issue(params.owner, params.repo, params.issue_number)  # type: ignore[arg-type]
        return self.ok(params.action, f"Issue #{params.issue_number} closed successfully", issue.model_dump())

    async def handle_comment(self, provider: VcsProviderBase, params: IssuesInput) -> ToolResult:
        comment = await provider.create_issue_comment(params.owner, params.repo, params.issue_number, params.body)  # type: ignore[arg-type]
        return self.ok(params.action, f"Comment added to issue #{params.issue_number}", comment.model_dump())
