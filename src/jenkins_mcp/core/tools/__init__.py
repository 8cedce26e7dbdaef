"""
Tool handlers, one module per Jenkins resource.

Each module exposes a TOOLS list of ToolSpec entries; the registry builds the
dispatch table from them.
"""

from . import builds, items, nodes, queue
from ._spec import Handler, ToolSpec

ALL_TOOLS = [*items.TOOLS, *nodes.TOOLS, *queue.TOOLS, *builds.TOOLS]

__all__ = ["ALL_TOOLS", "Handler", "ToolSpec"]
