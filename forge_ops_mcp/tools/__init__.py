"""MCP tools exposing the provider operations."""

from .base import ToolResult, VcsTool
from .branches import BranchesTool
from .commits import CommitsTool
from .files import FilesTool
from .issues import IssuesTool
from .pulls import PullsTool
from .releases import ReleasesTool
from .repositories import RepositoriesTool
from .tags import TagsTool
from .users import UsersTool
from .webhooks import WebhooksTool

TOOL_CLASSES: list[type[VcsTool]] = [
    RepositoriesTool,
    BranchesTool,
    FilesTool,
    CommitsTool,
    IssuesTool,
    PullsTool,
    ReleasesTool,
    TagsTool,
    UsersTool,
    WebhooksTool,
]

__all__ = [
    "TOOL_CLASSES",
    "BranchesTool",
    "CommitsTool",
    "FilesTool",
    "IssuesTool",
    "PullsTool",
    "ReleasesTool",
    "RepositoriesTool",
    "TagsTool",
    "ToolResult",
    "UsersTool",
    "VcsTool",
    "WebhooksTool",
]
