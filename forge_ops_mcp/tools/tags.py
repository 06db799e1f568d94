"""Tag management tool."""

from typing import ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import PaginatedToolInput, ToolResult, VcsTool


class TagsInput(PaginatedToolInput):
    """Arguments of the tags tool."""

    action: Literal["create", "list", "get", "delete"]
    tag_name: str | None = Field(default=None, description="Tag name.")
    target: str | None = Field(default=None, description="Branch name or commit SHA the tag points at.")
    message: str | None = Field(default=None, description="Tag message. Creates an annotated tag.")


class TagsTool(VcsTool):
    """Create, list, get and delete tags."""

    name = "tags"
    description = "Manage tags: create, list, get and delete."
    input_model = TagsInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "create": ("owner", "repo", "tag_name", "target"),
        "list": ("owner", "repo"),
        "get": ("owner", "repo", "tag_name"),
        "delete": ("owner", "repo", "tag_name"),
    }

    async def handle_create(self, provider: VcsProviderBase, params: TagsInput) -> ToolResult:
        tag = await provider.create_tag(params.owner, params.repo, params.tag_name, params.target, params.message)  # type: ignore[arg-type]
        return self.ok(params.action, f"Tag '{params.tag_name}' created successfully", tag.model_dump())

    async def handle_list(self, provider: VcsProviderBase, params: TagsInput) -> ToolResult:
        tags = await provider.list_tags(params.owner, params.repo, params.page, params.limit)  # type: ignore[arg-type]
        return self.listed(params.action, "tags", tags, params.page, params.limit, f"{len(tags)} tags found")

    async def handle_get(self, provider: VcsProviderBase, params: TagsInput) -> ToolResult:
        tag = await provider.get_tag(params.owner, params.repo, params.tag_name)  # type: ignore[arg-type]
        return self.ok(params.action, f"Tag '{params.tag_name}' retrieved successfully", tag.model_dump())

    async def handle_delete(self, provider: VcsProviderBase, params: TagsInput) -> ToolResult:
        deleted = await provider.delete_tag(params.owner, params.repo, params.tag_name)  # type: ignore[arg-type]
        return self.ok(params.action, f"Tag '{params.tag_name}' deleted successfully", {"deleted": deleted})
