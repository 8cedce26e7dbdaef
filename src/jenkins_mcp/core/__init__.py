"""Core domain surface for jenkins-mcp (transport-agnostic)."""

from .apis import BuildsApi, ItemsApi, NodesApi, QueueApi, ResourceApi, parse_queue_id
from .client import JenkinsHTTPClient
from .config import JenkinsConfig, load_env_config, sanitize_url
from .crumb import CrumbIssuer, CrumbState
from .errors import (
    InvalidArgumentsError,
    JenkinsClientError,
    JenkinsConfigurationError,
    JenkinsHTTPError,
    JenkinsNetworkError,
    JenkinsProtocolError,
    JenkinsValidationError,
    ToolError,
    ToolExecutionError,
    ToolNotFoundError,
)
from .jenkins import JenkinsClient
from .models import Build, Crumb, Item, Node, QueueItem, QueueTask
from .query import ItemFilter, ItemQuery, filter_items
from .registry import (
    execute_tool,
    get_tool_registry,
    list_tool_definitions,
    render_result,
    serve_tools,
)

__all__ = [
    # Client
    "JenkinsClient",
    "JenkinsHTTPClient",
    "CrumbIssuer",
    "CrumbState",
    "ResourceApi",
    "ItemsApi",
    "BuildsApi",
    "NodesApi",
    "QueueApi",
    "parse_queue_id",
    # Config
    "JenkinsConfig",
    "load_env_config",
    "sanitize_url",
    # Models
    "Item",
    "Build",
    "Node",
    "QueueItem",
    "QueueTask",
    "Crumb",
    # Query
    "ItemQuery",
    "ItemFilter",
    "filter_items",
    # Exceptions
    "JenkinsClientError",
    "JenkinsConfigurationError",
    "JenkinsNetworkError",
    "JenkinsHTTPError",
    "JenkinsProtocolError",
    "JenkinsValidationError",
    "ToolError",
    "ToolNotFoundError",
    "InvalidArgumentsError",
    "ToolExecutionError",
    # Dispatch
    "execute_tool",
    "get_tool_registry",
    "list_tool_definitions",
    "serve_tools",
    "render_result",
]
