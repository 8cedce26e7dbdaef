from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator

# attributes every LogRecord already has; passing them as extra raises KeyError
RESERVED_LOG_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

EVENT_LOGGER = "jenkins_mcp.observability"


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit `event` with `fields` as record extras, minus reserved names."""
    extra: Dict[str, Any] = {
        k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS
    }
    (logger or logging.getLogger(EVENT_LOGGER)).log(level, event, extra=extra)


@contextmanager
def logged_tool_call(tool: str) -> Iterator[None]:
    """
    Log one `tool_call` event for the wrapped block.

    Success logs at INFO with status=ok. A failure logs at ERROR with the HTTP
    status when the error carries one (otherwise "error") and the exception
    type, then propagates. Exception messages are not logged: they may quote
    server response text.
    """
    start = time.perf_counter()
    try:
        yield
    except Exception as exc:
        log_event(
            "tool_call",
            level=logging.ERROR,
            tool=tool,
            status=getattr(exc, "status_code", None) or "error",
            error_type=type(exc).__name__,
            duration_ms=_elapsed_ms(start),
        )
        raise
    log_event("tool_call", tool=tool, status="ok", duration_ms=_elapsed_ms(start))


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


__all__ = ["log_event", "logged_tool_call", "RESERVED_LOG_KEYS"]
