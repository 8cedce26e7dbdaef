import logging
import time
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import JenkinsConfig, sanitize_url
from .errors import JenkinsHTTPError, JenkinsNetworkError, JenkinsProtocolError

T = TypeVar("T", bound=BaseModel)

DEFAULT_MAX_CONNECTIONS = 10
ERROR_SNIPPET_CHARS = 500


class JenkinsHTTPClient:
    """
    Pooled HTTP transport for the Jenkins REST API.
    - Applies base URL, basic auth, TLS policy and timeout to every request
    - Raises JenkinsHTTPError on non-2xx, JenkinsNetworkError on transport failures
    - Never logs headers, bodies or credentials
    """

    def __init__(
        self,
        config: JenkinsConfig,
        *,
        max_connections: int = DEFAULT_MAX_CONNECTIONS,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = config.url.rstrip("/")
        self.timeout_seconds = config.timeout_seconds
        self.log = logger or logging.getLogger("jenkins_mcp.client")

        auth = None
        if config.has_credentials:
            auth = httpx.BasicAuth(config.username or "", config.password or "")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            auth=auth,
            # verification can only be switched off explicitly (JENKINS_VERIFY_SSL=false)
            verify=config.verify_ssl,
            timeout=float(config.timeout_seconds),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_connections,
            ),
            # Jenkins answers stop/cancel with a 302 to the resource page
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "JenkinsHTTPClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        """
        Core request method. Single attempt, no retries.
        - Raises JenkinsHTTPError on non-2xx HTTP responses
        - Raises JenkinsNetworkError on connection/timeout/TLS errors
        """
        method = method.upper()
        start = time.perf_counter()

        try:
            resp = await self.http.request(
                method, path, params=params, headers=headers
            )
        except httpx.HTTPError as exc:
            self.log.warning(
                "jenkins.request_failed",
                extra={
                    "method": method,
                    "path": path,
                    "error_type": type(exc).__name__,
                    "duration_ms": int((time.perf_counter() - start) * 1000),
                },
            )
            raise JenkinsNetworkError(
                f"Network/timeout error calling {method} {path}: "
                f"{type(exc).__name__}: {exc}"
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)

        if resp.status_code < 200 or resp.status_code >= 300:
            self.log.warning(
                "jenkins.request_failed",
                extra={
                    "method": method,
                    "path": path,
                    "status": resp.status_code,
                    "duration_ms": duration_ms,
                },
            )
            raise self._to_http_error(resp, method=method, path=path)

        self.log.debug(
            "jenkins.request",
            extra={
                "method": method,
                "path": path,
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )
        return resp

    def _to_http_error(
        self, resp: httpx.Response, *, method: str, path: str
    ) -> JenkinsHTTPError:
        snippet = (resp.text or "")[:ERROR_SNIPPET_CHARS]
        message = resp.reason_phrase or "request failed"
        if snippet.strip():
            message = f"{message}: {snippet.strip()}"
        return JenkinsHTTPError(
            status_code=resp.status_code,
            method=method,
            url=f"{sanitize_url(self.base_url)}{path}",
            message=message,
            response_text=snippet or None,
        )

    async def get_json(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        resp = await self.request("GET", path, params=params, headers=headers)
        return self._safe_json(resp)

    async def get_model(
        self,
        model: Type[T],
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> T:
        payload = await self.get_json(path, params=params)
        return parse_model(model, payload, source=path)

    async def get_text(self, path: str, *, accept: str) -> str:
        resp = await self.request("GET", path, headers={"Accept": accept})
        return resp.text

    async def post(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        return await self.request("POST", path, params=params, headers=headers)

    def _safe_json(self, resp: httpx.Response) -> Dict[str, Any]:
        if not resp.content:
            return {}

        try:
            data = resp.json()
        except ValueError as exc:
            raise JenkinsProtocolError(
                f"Expected JSON from {resp.request.method} {resp.request.url.path}, "
                f"got non-JSON body (content-type "
                f"{resp.headers.get('content-type', 'unknown')!r})"
            ) from exc

        if not isinstance(data, dict):
            raise JenkinsProtocolError(
                f"Expected top-level JSON object from "
                f"{resp.request.method} {resp.request.url.path}, "
                f"got {type(data).__name__}"
            )
        return data


def parse_model(model: Type[T], payload: Any, *, source: str) -> T:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise JenkinsProtocolError(
            f"Response from {source} did not match model {model.__name__}: {exc}"
        ) from exc


__all__ = ["JenkinsHTTPClient", "parse_model", "DEFAULT_MAX_CONNECTIONS"]
