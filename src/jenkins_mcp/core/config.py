from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

from dotenv import load_dotenv

from .errors import JenkinsConfigurationError

DEFAULT_TIMEOUT_SECONDS = 5


@dataclass(frozen=True)
class JenkinsConfig:
    url: str
    username: Optional[str] = None
    password: Optional[str] = None  # password or API token
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        if not (self.url or "").strip():
            raise JenkinsConfigurationError("Jenkins URL must be provided.")
        if (
            isinstance(self.timeout_seconds, bool)
            or not isinstance(self.timeout_seconds, int)
            or self.timeout_seconds <= 0
        ):
            raise JenkinsConfigurationError(
                "timeout_seconds must be a positive integer (seconds)."
            )

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def __repr__(self) -> str:
        # never echo the secret
        return (
            f"JenkinsConfig(url={sanitize_url(self.url)!r}, "
            f"username={self.username!r}, "
            f"password={'***' if self.password else None}, "
            f"timeout_seconds={self.timeout_seconds}, verify_ssl={self.verify_ssl})"
        )


def _parse_timeout(raw: Optional[str]) -> int:
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = int(raw.strip(), 10)
    except ValueError as exc:
        raise JenkinsConfigurationError(
            "JENKINS_TIMEOUT must be a positive integer (seconds)"
        ) from exc
    if value <= 0:
        raise JenkinsConfigurationError(
            "JENKINS_TIMEOUT must be a positive integer (seconds)"
        )
    return value


def load_env_config(
    env: Optional[Mapping[str, str]] = None, *, use_dotenv: bool = True
) -> JenkinsConfig:
    """
    Load Jenkins connection settings from the environment (optional .env).

    - JENKINS_URL (required)
    - JENKINS_USERNAME (optional)
    - JENKINS_PASSWORD or JENKINS_API_TOKEN (optional)
    - JENKINS_TIMEOUT (optional, seconds; default 5)
    - JENKINS_VERIFY_SSL (optional, default true; "false" disables)
    """
    if env is None:
        if use_dotenv:
            load_dotenv()
        env = os.environ

    url = (env.get("JENKINS_URL") or "").strip()
    if not url:
        raise JenkinsConfigurationError("JENKINS_URL environment variable is required")

    return JenkinsConfig(
        url=url,
        username=env.get("JENKINS_USERNAME") or None,
        password=env.get("JENKINS_PASSWORD") or env.get("JENKINS_API_TOKEN") or None,
        timeout_seconds=_parse_timeout(env.get("JENKINS_TIMEOUT")),
        verify_ssl=(env.get("JENKINS_VERIFY_SSL") or "").strip().lower() != "false",
    )


def sanitize_url(raw_url: str) -> str:
    """Strip user:password@ from a URL so it can be logged."""
    try:
        parts = urlsplit(raw_url)
    except ValueError:
        return raw_url
    if not (parts.username or parts.password):
        return raw_url
    host = parts.hostname or ""
    if parts.port:
        host = f"{host}:{parts.port}"
    return urlunsplit((parts.scheme, host, parts.path, parts.query, parts.fragment))


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "JenkinsConfig",
    "load_env_config",
    "sanitize_url",
]
