from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..jenkins import JenkinsClient
from ..models import QueueItem
from ..validation import require_non_negative_int
from ._spec import ToolSpec, integer_prop


async def get_all_queue_items(
    client: JenkinsClient, args: Mapping[str, Any]
) -> List[QueueItem]:
    return await client.queue.get_all_queue_items()


async def get_queue_item(client: JenkinsClient, args: Mapping[str, Any]) -> QueueItem:
    queue_id = require_non_negative_int(args, "queueId")
    return await client.queue.get_queue_item(queue_id)


async def cancel_queue_item(
    client: JenkinsClient, args: Mapping[str, Any]
) -> Dict[str, bool]:
    queue_id = require_non_negative_int(args, "queueId")
    await client.queue.cancel_queue_item(queue_id)
    return {"success": True}


TOOLS = [
    ToolSpec(
        name="get_all_queue_items",
        description="Get all items in the Jenkins build queue",
        handler=get_all_queue_items,
    ),
    ToolSpec(
        name="get_queue_item",
        description="Get details of a specific queue item",
        handler=get_queue_item,
        properties={"queueId": integer_prop("ID of the queue item", minimum=0)},
        required=["queueId"],
    ),
    ToolSpec(
        name="cancel_queue_item",
        description="Cancel a specific item in the build queue",
        handler=cancel_queue_item,
        properties={
            "queueId": integer_prop("ID of the queue item to cancel", minimum=0)
        },
        required=["queueId"],
    ),
]
