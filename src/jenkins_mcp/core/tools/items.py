from __future__ import annotations

from typing import Any, List, Mapping

from ..jenkins import JenkinsClient
from ..models import Item
from ..query import ItemQuery
from ..validation import optional_string, optional_string_map, require_non_empty_string
from ._spec import ToolSpec, string_map_prop, string_prop


async def get_all_items(client: JenkinsClient, args: Mapping[str, Any]) -> List[Item]:
    return await client.items.get_all_items()


async def get_item(client: JenkinsClient, args: Mapping[str, Any]) -> Item:
    full_name = require_non_empty_string(args, "fullName")
    return await client.items.get_item(full_name)


async def get_item_config(client: JenkinsClient, args: Mapping[str, Any]) -> str:
    full_name = require_non_empty_string(args, "fullName")
    return await client.items.get_item_config(full_name)


async def query_items(client: JenkinsClient, args: Mapping[str, Any]) -> List[Item]:
    query = ItemQuery(
        class_pattern=optional_string(args, "classPattern"),
        full_name_pattern=optional_string(args, "fullNamePattern"),
        color_pattern=optional_string(args, "colorPattern"),
    )
    return await client.items.query_items(query)


async def build_item(client: JenkinsClient, args: Mapping[str, Any]) -> int:
    """Returns the id of the queue item Jenkins created."""
    full_name = require_non_empty_string(args, "fullName")
    parameters = optional_string_map(args, "parameters")
    return await client.items.build_item(full_name, parameters)


TOOLS = [
    ToolSpec(
        name="get_all_items",
        description="Get all items (jobs and folders) from Jenkins server",
        handler=get_all_items,
    ),
    ToolSpec(
        name="get_item",
        description="Get details of a specific Jenkins item by its full name",
        handler=get_item,
        properties={
            "fullName": string_prop('Full name of the item (e.g., "folder/job-name")')
        },
        required=["fullName"],
    ),
    ToolSpec(
        name="get_item_config",
        description="Get the XML configuration of a specific Jenkins item",
        handler=get_item_config,
        properties={"fullName": string_prop("Full name of the item")},
        required=["fullName"],
    ),
    ToolSpec(
        name="query_items",
        description="Query Jenkins items with regex filters (all given filters must match)",
        handler=query_items,
        properties={
            "classPattern": string_prop("Regex pattern to filter by item class"),
            "fullNamePattern": string_prop("Regex pattern to filter by full name"),
            "colorPattern": string_prop(
                "Regex pattern to filter by build status color"
            ),
        },
    ),
    ToolSpec(
        name="build_item",
        description="Trigger a build for a Jenkins item; returns the queue item id",
        handler=build_item,
        properties={
            "fullName": string_prop("Full name of the item to build"),
            "parameters": string_map_prop("Build parameters (optional)"),
        },
        required=["fullName"],
    ),
]
