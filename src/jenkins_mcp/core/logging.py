import json
import logging
import sys
from typing import IO, Any, Optional, Sequence

LOG_EXTRA_FIELDS = (
    "tool",
    "method",
    "path",
    "status",
    "duration_ms",
    "error_type",
)

_HANDLER_NAME = "jenkins_mcp.logfmt"


def _logfmt_value(value: Any) -> str:
    if isinstance(value, (bool, int, float)):
        return str(value)
    text = str(value)
    if not text or any(ch in text for ch in ' ="\n'):
        return json.dumps(text, ensure_ascii=False)
    return text


class LogfmtFormatter(logging.Formatter):
    """
    key=value lines: level, logger, event (the message), then whichever of
    `fields` the record carries as extras. Anything else on the record is
    ignored, so stray extras never reach the output.
    """

    def __init__(self, fields: Sequence[str] = LOG_EXTRA_FIELDS):
        super().__init__()
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        pairs = [("level", record.levelname.lower()), ("logger", record.name)]

        message = record.getMessage()
        if message:
            pairs.append(("event", message))

        for key in self.fields:
            value = getattr(record, key, None)
            if value is not None:
                pairs.append((key, value))

        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(f"{key}={_logfmt_value(value)}" for key, value in pairs)


def setup_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> None:
    """Route logs to stderr in logfmt; stdout belongs to the MCP stdio transport."""
    root = logging.getLogger()
    # calling twice replaces our handler, foreign handlers stay
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # httpx logs full request URLs at INFO, build parameters included
    logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
