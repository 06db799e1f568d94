"""Release management tool."""

from typing import ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import PaginatedToolInput, ToolResult, VcsTool


class ReleasesInput(PaginatedToolInput):
    """Arguments of the releases tool."""

    action: Literal["create", "list", "get", "update", "delete"]
    release_id: int | None = Field(default=None, ge=1, description="Release ID.")
    tag_name: str | None = Field(default=None, description="Tag the release is attached to.")
    name: str | None = Field(default=None, description="Release title. Defaults to the tag name.")
    body: str | None = Field(default=None, description="Release notes.")
    draft: bool | None = Field(default=None, description="Whether the release is a draft.")
    prerelease: bool | None = Field(default=None, description="Whether the release is a prerelease.")
    target_commitish: str | None = Field(default=None, description="Branch or commit the tag is created from.")


class ReleasesTool(VcsTool):
    """Create, list, get, update and delete releases."""

    name = "releases"
    description = "Manage releases: create, list, get, update and delete."
    input_model = ReleasesInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "create": ("owner", "repo", "tag_name"),
        "list": ("owner", "repo"),
        "get": ("owner", "repo", "release_id"),
        "update": ("owner", "repo", "release_id"),
        "delete": ("owner", "repo", "release_id"),
    }

    async def handle_create(self, provider: VcsProviderBase, params: ReleasesInput) -> ToolResult:
        release = await provider.create_release(
            params.owner,  # type: ignore[arg-type]
            params.repo,  # type: ignore[arg-type]
            params.tag_name,  # type: ignore[arg-type]
            name=params.name,
            body=params.body,
            draft=bool(params.draft),
            prerelease=bool(params.prerelease),
            target_commitish=params.target_commitish,
        )
        return self.ok(params.action, f"Release '{params.tag_name}' created successfully", release.model_dump())

    async def handle_list(self, provider: VcsProviderBase, params: ReleasesInput) -> ToolResult:
        releases = await provider.list_releases(params.owner, params.repo, params.page, params.limit)  # type: ignore[arg-type]
        return self.listed(params.action, "releases", releases, params.page, params.limit, f"{len(releases)} releases found")

    async def handle_get(self, provider: VcsProviderBase, params: ReleasesInput) -> ToolResult:
        release = await provider.get_release(params.owner, params.repo, params.release_id)  # type: ignore[arg-type]
        return self.ok(params.action, f"Release {params.release_id} retrieved successfully", release.model_dump())

    async def handle_update(self, provider: VcsProviderBase, params: ReleasesInput) -> ToolResult:
        updates = self.updates_from(params, ("tag_name", "name", "body", "draft", "prerelease", "target_commitish"))
        release = await provider.update_release(params.owner, params.repo, params.release_id, updates)  # type: ignore[arg-type]
        return self.ok(params.action, f"Release {params.release_id} updated successfully", release.model_dump())

    async def handle_delete(self, provider: VcsProviderBase, params: ReleasesInput) -> ToolResult:
        deleted = await provider.delete_release(params.owner, params.repo, params.release_id)  # type: ignore[arg-type]
        return self.ok(params.action, f"Release {params.release_id} deleted successfully", {"deleted": deleted})
