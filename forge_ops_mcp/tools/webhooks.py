"""Webhook management tool."""

from typing import Any, ClassVar, Literal

from pydantic import Field

from forge_ops_mcp.providers.abc import VcsProviderBase

from .base import PaginatedToolInput, ToolResult, VcsTool

DEFAULT_WEBHOOK_EVENTS = ["push"]


class WebhooksInput(PaginatedToolInput):
    """Arguments of the webhooks tool."""

    action: Literal["create", "list", "get", "update", "delete"]
    webhook_id: int | None = Field(default=None, ge=1, description="Webhook ID.")
    url: str | None = Field(default=None, description="URL receiving the deliveries.")
    events: list[str] | None = Field(default=None, description="Events triggering a delivery. Defaults to push.")
    secret: str | None = Field(default=None, description="Secret used to sign deliveries.")
    content_type: Literal["json", "form"] = Field(default="json", description="Payload content type.")
    active: bool | None = Field(default=None, description="Whether deliveries are sent.")


class WebhooksTool(VcsTool):
    """Create, list, get, update and delete repository webhooks."""

    name = "webhooks"
    description = "Manage repository webhooks: create, list, get, update and delete."
    input_model = WebhooksInput
    required: ClassVar[dict[str, tuple[str, ...]]] = {
        "create": ("owner", "repo", "url"),
        "list": ("owner", "repo"),
        "get": ("owner", "repo", "webhook_id"),
        "update": ("owner", "repo", "webhook_id"),
        "delete": ("owner", "repo", "webhook_id"),
    }

    async def handle_create(self, provider: VcsProviderBase, params: WebhooksInput) -> ToolResult:
        webhook = await provider.create_webhook(
            params.owner,  # type: ignore[arg-type]
            params.repo,  # type: ignore[arg-type]
            params.url,  # type: ignore[arg-type]
            params.events or DEFAULT_WEBHOOK_EVENTS,
            secret=params.secret,
            content_type=params.content_type,
            active=True if params.active is None else params.active,
        )
        return self.ok(params.action, f"Webhook for '{params.url}' created successfully", webhook.model_dump())

    async def handle_list(self, provider: VcsProviderBase, params: WebhooksInput) -> ToolResult:
        webhooks = await provider.list_webhooks(params.owner, params.repo, params.page, params.limit)  # type: ignore[arg-type]
        return self.listed(params.action, "webhooks", webhooks, params.page, params.limit, f"{len(webhooks)} webhooks found")

    async def handle_get(self, provider: VcsProviderBase, params: WebhooksInput) -> ToolResult:
        webhook = await provider.get_webhook(params.owner, params.repo, params.webhook_id)  # type: ignore[arg-type]
        return self.ok(params.action, f"Webhook {params.webhook_id} retrieved successfully", webhook.model_dump())

    async def handle_update(self, provider: VcsProviderBase, params: WebhooksInput) -> ToolResult:
        provided = self.updates_from(params, ("url", "secret", "events", "active"))
        updates: dict[str, Any] = {key: provided[key] for key in ("events", "active") if key in provided}
        config = {key: provided[key] for key in ("url", "secret") if key in provided}
        if config:
            config["content_type"] = params.content_type
            updates["config"] = config
        webhook = await provider.update_webhook(params.owner, params.repo, params.webhook_id, updates)  # type: ignore[arg-type]
        return self.ok(params.action, f"Webhook {params.webhook_id} updated successfully", webhook.model_dump())

    async def handle_delete(self, provider: VcsProviderBase, params: WebhooksInput) -> ToolResult:
        deleted = await provider.delete_webhook(params.owner, params.repo, params.webhook_id)  # type: ignore[arg-type]
        return self.ok(params.action, f"Webhook {params.webhook_id} deleted successfully", {"deleted": deleted})
