"""Shared plumbing for the MCP tools.

A tool validates its arguments against a pydantic input model, checks the
parameters each action requires, resolves the provider and dispatches to a
``handle_<action>`` coroutine. Whatever happens, the caller receives a
``ToolResult`` envelope; no exception crosses the protocol boundary.
"""

from abc import ABC
from typing import Any, Awaitable, Callable, ClassVar

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from forge_ops_mcp.configuration.exceptions import ProviderNotFoundError
from forge_ops_mcp.context import AppContext
from forge_ops_mcp.providers.abc import VcsProviderBase
from forge_ops_mcp.providers.errors import ProviderError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class ToolResult(BaseModel):
    """Result envelope returned by every tool call."""

    success: bool
    action: str
    message: str
    data: Any = None
    error: str | None = None
    code: str | None = None
    retryable: bool | None = None

    def to_json(self) -> str:
        """Serialize the envelope, leaving out unset optional fields."""
        return self.model_dump_json(indent=2, exclude_none=True)


class ToolInput(BaseModel):
    """Arguments shared by every tool."""

    model_config = ConfigDict(extra="ignore")

    provider: str | None = Field(default=None, description="Provider name to use. Defaults to the configured default provider.")


class RepositoryToolInput(ToolInput):
    """Arguments shared by tools operating on a single repository."""

    owner: str | None = Field(default=None, description="Repository owner (user or organization).")
    repo: str | None = Field(default=None, description="Repository name.")


class PaginatedToolInput(RepositoryToolInput):
    """Repository arguments with pagination."""

    page: int = Field(default=1, ge=1, description="Page number, starting at 1.")
    limit: int = Field(default=30, ge=1, le=100, description="Number of items per page.")


class ToolArgumentsError(Exception):
    """Raised by a handler when its arguments are unusable, before any provider call."""

    pass


class VcsTool(ABC):
    """Base class for the MCP tools.

    Subclasses declare ``name``, ``description``, ``input_model`` (whose
    ``action`` field lists the supported actions) and ``required``, the
    parameters each action needs.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    input_model: ClassVar[type[ToolInput]]
    required: ClassVar[dict[str, tuple[str, ...]]] = {}

    def __init__(self, context: AppContext) -> None:
        """Initialize the tool with the application context."""
        self.context = context

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        """JSON schema of the tool arguments."""
        return cls.input_model.model_json_schema()

    @staticmethod
    def ok(action: str, message: str, data: Any = None) -> ToolResult:
        """Build a successful envelope."""
        return ToolResult(success=True, action=action, message=message, data=data)

    @staticmethod
    def listed(action: str, key: str, items: list[BaseModel], page: int, limit: int, message: str) -> ToolResult:
        """Build a successful envelope for a page of items."""
        data = {key: [item.model_dump() for item in items], "page": page, "limit": limit, "total": len(items)}
        return ToolResult(success=True, action=action, message=message, data=data)

    @staticmethod
    def failure(action: str, message: str, error: str) -> ToolResult:
        """Build a failed envelope."""
        return ToolResult(success=False, action=action, message=message, error=error)

    @staticmethod
    def updates_from(params: BaseModel, fields: tuple[str, ...]) -> dict[str, Any]:
        """Collect the update fields that were provided.

        Raises:
            ToolArgumentsError: If none of the fields was provided.
        """
        updates = {field: getattr(params, field) for field in fields if getattr(params, field) is not None}
        if not updates:
            raise ToolArgumentsError(f"No fields to update. Provide at least one of: {', '.join(fields)}")
        return updates

    def missing_parameters(self, params: ToolInput, action: str) -> list[str]:
        """Return the required parameters of an action that were not provided."""
        missing = []
        for field in self.required.get(action, ()):
            value = getattr(params, field, None)
            if value is None or value == "" or value == []:
                missing.append(field)
        return missing

    def resolve_provider(self, name: str | None) -> VcsProviderBase:
        """Return the named provider, or the default one."""
        if name:
            return self.context.factory.get_provider(name)
        return self.context.factory.get_default_provider()

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Validate the arguments and execute the requested action."""
        action = str(arguments.get("action") or "")
        try:
            params = self.input_model.model_validate(arguments)
        except ValidationError as exc:
            return self.failure(action, f"Invalid arguments for {self.name}", str(exc))
        action = params.action  # type: ignore[attr-defined]

        missing = self.missing_parameters(params, action)
        if missing:
            error = f"Missing required parameters for action '{action}': {', '.join(missing)}"
            return self.failure(action, f"Invalid arguments for {self.name}", error)

        handler: Callable[[VcsProviderBase, Any], Awaitable[ToolResult]] = getattr(self, f"handle_{action}")
        try:
            provider = self.resolve_provider(params.provider)
            logger.debug("Running tool action", tool=self.name, action=action, provider=provider.name)
            return await handler(provider, params)
        except ProviderError as exc:
            return ToolResult(
                success=False,
                action=action,
                message=f"Failed to {action} via {self.name}",
                error=exc.message,
                code=exc.code,
                retryable=exc.retryable,
            )
        except ProviderNotFoundError as exc:
            return self.failure(action, f"Failed to {action} via {self.name}", str(exc))
        except ToolArgumentsError as exc:
            return self.failure(action, f"Invalid arguments for {self.name}", str(exc))
        except Exception as exc:
            logger.exception("Tool action failed", tool=self.name, action=action)
            return self.failure(action, f"Failed to {action} via {self.name}", str(exc) or type(exc).__name__)
