from __future__ import annotations

from typing import List

from ..models import Node, NodeList
from ..paths import COMPUTER_API_PATH, node_api_path, node_config_path
from ._base import XML, ResourceApi, tree

NODE_LIST_TREE = tree(
    "computer[displayName,description,numExecutors,offline,temporarilyOffline]"
)


class NodesApi(ResourceApi):
    """Read-only view of build agents."""

    async def get_all_nodes(self) -> List[Node]:
        payload = await self._get(NodeList, COMPUTER_API_PATH, params=NODE_LIST_TREE)
        return payload.computer or []

    async def get_node(self, node_name: str) -> Node:
        return await self._get(Node, node_api_path(node_name))

    async def get_node_config(self, node_name: str) -> str:
        return await self._get_text(node_config_path(node_name), accept=XML)


__all__ = ["NodesApi"]
