from __future__ import annotations

import logging
from typing import Optional

import httpx

from .apis import BuildsApi, ItemsApi, NodesApi, QueueApi
from .client import JenkinsHTTPClient
from .config import JenkinsConfig, load_env_config
from .crumb import CrumbIssuer


class JenkinsClient:
    """
    One object per Jenkins server: owns the pooled transport and the crumb
    cache, and hands both to the four resource facades.
    """

    def __init__(
        self,
        config: JenkinsConfig,
        *,
        http: Optional[httpx.AsyncClient] = None,
        crumb_ttl_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.transport = JenkinsHTTPClient(config, http=http, logger=logger)
        self.crumb = CrumbIssuer(self.transport, cache_ttl_seconds=crumb_ttl_seconds)

        add_headers = self.crumb.add_headers
        self.items = ItemsApi(self.transport, add_crumb_headers=add_headers)
        self.builds = BuildsApi(self.transport, add_crumb_headers=add_headers)
        self.nodes = NodesApi(self.transport)
        self.queue = QueueApi(self.transport, add_crumb_headers=add_headers)

    @classmethod
    def from_env(cls, **kwargs) -> "JenkinsClient":
        return cls(load_env_config(), **kwargs)

    @property
    def base_url(self) -> str:
        return self.transport.base_url

    def reset_crumb(self) -> None:
        self.crumb.reset()

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "JenkinsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["JenkinsClient"]
