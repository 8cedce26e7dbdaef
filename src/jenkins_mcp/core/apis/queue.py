from __future__ import annotations

from typing import List

from ..models import QueueItem, QueueItemList
from ..paths import QUEUE_API_PATH, queue_cancel_path, queue_item_path
from ._base import ResourceApi, tree

QUEUE_LIST_TREE = tree("items[id,task[name,url],why,blocked,buildable,stuck]")


class QueueApi(ResourceApi):
    async def get_all_queue_items(self) -> List[QueueItem]:
        payload = await self._get(QueueItemList, QUEUE_API_PATH, params=QUEUE_LIST_TREE)
        return payload.items or []

    async def get_queue_item(self, queue_id: int) -> QueueItem:
        return await self._get(QueueItem, queue_item_path(queue_id))

    async def cancel_queue_item(self, queue_id: int) -> None:
        await self._post(queue_cancel_path(queue_id))


__all__ = ["QueueApi"]
