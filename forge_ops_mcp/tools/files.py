"""File management tool."""

from typing import ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import RepositoryToolInput, ToolResult, VcsTool


class FilesInput(RepositoryToolInput):
    """Arguments of the files tool."""

    action: Literal["get", "list", "create", "update", "delete"]
    path: str | None = Field(default=None, description="File or directory path inside the repository.")
    ref: str | None = Field(default=None, description="Branch, tag or commit to read from.")
    content: str | None = Field(default=None, description="Plain text file content, for create and update.")
    message: str | None = Field(default=None, description="Commit message.")
    sha: str | None = Field(default=None, description="Blob SHA of the file being updated or deleted.")
    branch: str | None = Field(default=None, description="Branch to commit to.")


class FilesTool(VcsTool):
    """Read, list, create, update and delete repository files."""

    name = "files"
    description = "Manage repository files: get, list, create, update and delete."
    input_model = FilesInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "get": ("owner", "repo", "path"),
        "list": ("owner", "repo"),
        "create": ("owner", "repo", "path", "content", "message"),
        "update": ("owner", "repo", "path", "content", "message", "sha"),
        "delete": ("owner", "repo", "path", "message", "sha"),
    }

    async def handle_get(self, provider: VcsProviderBase, params: FilesInput) -> ToolResult:
        file = await provider.get_file(params.owner, params.repo, params.path, params.ref)  # type: ignore[arg-type]
        return self.ok(params.action, f"File '{params.path}' retrieved successfully", file.model_dump())

    async def handle_list(self, provider: VcsProviderBase, params: FilesInput) -> ToolResult:
        path = params.path or ""
        files = await provider.list_files(params.owner, params.repo, path, params.ref)  # type: ignore[arg-type]
        data = {"files": [file.model_dump() for file in files], "path": path, "total": len(files)}
        return self.ok(params.action, f"{len(files)} entries found in '{path or '/'}'", data)

    async def handle_create(self, provider: VcsProviderBase, params: FilesInput) -> ToolResult:
        file = await provider.create_file(params.owner, params.repo, params.path, params.content, params.message, params.branch)  # type: ignore[arg-type]
        return self.ok(params.action, f"File '{params.path}' created successfully", file.model_dump())

    async def handle_update(self, provider: VcsProviderBase, params: FilesInput) -> ToolResult:
        file = await provider.update_file(
            params.owner,  # type: ignore[arg-type]
            params.repo,  # type: ignore[arg-type]
            params.path,  # type: ignore[arg-type]
            params.content,  # type: ignore[arg-type]
            params.message,  # type: ignore[arg-type]
            params.sha,  # type: ignore[arg-type]
            params.branch,
        )
        return self.ok(params.action, f"File '{params.path}' updated successfully", file.model_dump())

    async def handle_delete(self, provider: VcsProviderBase, params: FilesInput) -> ToolResult:
        deleted = await provider.delete_file(params.owner, params.repo, params.path, params.message, params.sha, params.branch)  # type: ignore[arg-type]
        return self.ok(params.action, f"File '{params.path}' deleted successfully", {"deleted": deleted})
