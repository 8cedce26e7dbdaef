from ._base import AddHeaders, ResourceApi
from .builds import BuildsApi
from .items import ItemsApi, parse_queue_id
from .nodes import NodesApi
from .queue import QueueApi

__all__ = [
    "AddHeaders",
    "ResourceApi",
    "ItemsApi",
    "BuildsApi",
    "NodesApi",
    "QueueApi",
    "parse_queue_id",
]
