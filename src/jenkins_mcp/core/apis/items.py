from __future__ import annotations

import re
from typing import List, Mapping, Optional

from ..errors import JenkinsProtocolError
from ..models import Item, ItemList
from ..paths import (
    ROOT_API_PATH,
    build_trigger_path,
    job_api_path,
    job_config_path,
)
from ..query import ItemQuery
from ._base import XML, ResourceApi, tree

ITEM_FIELDS = ("name", "url", "color", "_class", "fullName", "buildable")
ITEM_LIST_TREE = tree(f"jobs[{','.join(ITEM_FIELDS)}]")
ITEM_DETAIL_TREE = tree(
    *ITEM_FIELDS,
    "builds[number,url,result,building,timestamp,duration]",
    "lastBuild[number,url,result]",
    "lastSuccessfulBuild[number,url,result]",
    "lastFailedBuild[number,url,result]",
)

_QUEUE_ID_RE = re.compile(r"[0-9]+")


def parse_queue_id(location: Optional[str]) -> int:
    """
    Extract the queue id from a build trigger's Location header.
    Example: 'https://ci/queue/item/42/' -> 42
    """
    if not location:
        raise JenkinsProtocolError(
            "Jenkins did not return a queue location (Location header missing) "
            "for build request."
        )
    segments = location.split("/")
    segment = segments[-2] if len(segments) >= 2 else ""
    if not _QUEUE_ID_RE.fullmatch(segment):
        raise JenkinsProtocolError(
            f"Jenkins returned an invalid queue id in Location header: {location!r}."
        )
    return int(segment)


class ItemsApi(ResourceApi):
    """Jobs and folders."""

    async def get_all_items(self) -> List[Item]:
        payload = await self._get(ItemList, ROOT_API_PATH, params=ITEM_LIST_TREE)
        return payload.jobs or []

    async def get_item(self, full_name: str) -> Item:
        return await self._get(Item, job_api_path(full_name), params=ITEM_DETAIL_TREE)

    async def get_item_config(self, full_name: str) -> str:
        return await self._get_text(job_config_path(full_name), accept=XML)

    async def query_items(self, query: ItemQuery) -> List[Item]:
        # compile before fetching so a bad pattern never costs a request
        item_filter = query.compile()
        items = await self.get_all_items()
        return [item for item in items if item_filter.matches(item)]

    async def build_item(
        self, full_name: str, parameters: Optional[Mapping[str, str]] = None
    ) -> int:
        """Trigger a build and return the id of the queue item Jenkins created."""
        with_parameters = bool(parameters)
        resp = await self._post(
            build_trigger_path(full_name, with_parameters),
            params=dict(parameters) if with_parameters else None,
        )
        return parse_queue_id(resp.headers.get("location"))


__all__ = ["ItemsApi", "parse_queue_id"]
