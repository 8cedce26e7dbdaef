"""
CSRF crumb issuer.

Jenkins requires a crumb header on state-changing requests when CSRF
protection is enabled. The crumb is fetched once and cached; a failed fetch
(404 when protection is off, or any other error) is cached as UNAVAILABLE so
mutating requests go out without the header and the issuer is not asked again.

Concurrent first calls may each fetch; the last write wins. No lock.
"""

from __future__ import annotations

import enum
import logging
import time
from typing import Callable, Dict, Mapping, Optional

from .client import JenkinsHTTPClient, parse_model
from .errors import JenkinsClientError
from .models import Crumb
from .paths import CRUMB_ISSUER_PATH


class CrumbState(enum.Enum):
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    UNAVAILABLE = "unavailable"


class CrumbIssuer:
    def __init__(
        self,
        http: JenkinsHTTPClient,
        *,
        cache_ttl_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._http = http
        self._ttl = cache_ttl_seconds
        self._clock = clock
        self.log = logger or logging.getLogger("jenkins_mcp.crumb")

        self._state = CrumbState.UNRESOLVED
        self._crumb: Optional[Crumb] = None
        self._cached_at = 0.0

    @property
    def state(self) -> CrumbState:
        if self._state is not CrumbState.UNRESOLVED and self._expired():
            return CrumbState.UNRESOLVED
        return self._state

    def _expired(self) -> bool:
        if not self._ttl:
            return False
        return self._clock() - self._cached_at > self._ttl

    def _store(self, state: CrumbState, crumb: Optional[Crumb]) -> None:
        self._state = state
        self._crumb = crumb
        self._cached_at = self._clock()

    async def get_crumb(self) -> Optional[Crumb]:
        """Return the cached crumb, fetching it on first need; None if unavailable."""
        state = self.state
        if state is CrumbState.RESOLVED:
            return self._crumb
        if state is CrumbState.UNAVAILABLE:
            return None

        try:
            payload = await self._http.get_json(CRUMB_ISSUER_PATH)
            crumb = parse_model(Crumb, payload, source=CRUMB_ISSUER_PATH)
        except JenkinsClientError as exc:
            self._store(CrumbState.UNAVAILABLE, None)
            self.log.warning(
                "Failed to fetch Jenkins crumb (CSRF protection may be disabled)",
                extra={
                    "path": CRUMB_ISSUER_PATH,
                    "status": getattr(exc, "status_code", None),
                    "error_type": type(exc).__name__,
                },
            )
            return None

        self._store(CrumbState.RESOLVED, crumb)
        return crumb

    async def add_headers(
        self, headers: Optional[Mapping[str, str]] = None
    ) -> Dict[str, str]:
        """Return a copy of headers with the crumb field added when one is available."""
        merged = dict(headers or {})
        crumb = await self.get_crumb()
        if crumb is not None:
            merged[crumb.field] = crumb.value
        return merged

    def reset(self) -> None:
        self._state = CrumbState.UNRESOLVED
        self._crumb = None
        self._cached_at = 0.0


__all__ = ["CrumbIssuer", "CrumbState"]
