from __future__ import annotations

from typing import Any, List, Mapping

from ..jenkins import JenkinsClient
from ..models import Node
from ..validation import require_non_empty_string
from ._spec import ToolSpec, string_prop


async def get_all_nodes(client: JenkinsClient, args: Mapping[str, Any]) -> List[Node]:
    return await client.nodes.get_all_nodes()


async def get_node(client: JenkinsClient, args: Mapping[str, Any]) -> Node:
    node_name = require_non_empty_string(args, "nodeName")
    return await client.nodes.get_node(node_name)


async def get_node_config(client: JenkinsClient, args: Mapping[str, Any]) -> str:
    node_name = require_non_empty_string(args, "nodeName")
    return await client.nodes.get_node_config(node_name)


TOOLS = [
    ToolSpec(
        name="get_all_nodes",
        description="Get all Jenkins nodes (agents)",
        handler=get_all_nodes,
    ),
    ToolSpec(
        name="get_node",
        description="Get details of a specific Jenkins node",
        handler=get_node,
        properties={"nodeName": string_prop("Name of the node")},
        required=["nodeName"],
    ),
    ToolSpec(
        name="get_node_config",
        description="Get the XML configuration of a specific Jenkins node",
        handler=get_node_config,
        properties={"nodeName": string_prop("Name of the node")},
        required=["nodeName"],
    ),
]
