from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from ..client import JenkinsHTTPClient

T = TypeVar("T", bound=BaseModel)

AddHeaders = Callable[[Optional[Mapping[str, str]]], Awaitable[Dict[str, str]]]

XML = "application/xml"
PLAIN_TEXT = "text/plain"


class ResourceApi:
    """
    Shared shape of the resource facades: reads go straight to the transport,
    writes pass through the injected crumb helper first (when one is given).
    """

    def __init__(
        self, http: JenkinsHTTPClient, *, add_crumb_headers: Optional[AddHeaders] = None
    ):
        self._http = http
        self._add_crumb_headers = add_crumb_headers

    async def _get(
        self, model: Type[T], path: str, *, params: Optional[Mapping[str, Any]] = None
    ) -> T:
        return await self._http.get_model(model, path, params=params)

    async def _get_text(self, path: str, *, accept: str) -> str:
        return await self._http.get_text(path, accept=accept)

    async def _post(
        self, path: str, *, params: Optional[Mapping[str, Any]] = None
    ) -> httpx.Response:
        headers: Dict[str, str] = {}
        if self._add_crumb_headers is not None:
            headers = await self._add_crumb_headers(headers)
        return await self._http.post(path, params=params, headers=headers)


def tree(*fields: str) -> Dict[str, str]:
    """Build the `tree` query parameter that limits Jenkins' JSON output."""
    return {"tree": ",".join(fields)}
