from __future__ import annotations

import asyncio
import logging
import os
import sys

from mcp.server.fastmcp import FastMCP

from jenkins_mcp.core.config import load_env_config, sanitize_url
from jenkins_mcp.core.errors import JenkinsConfigurationError
from jenkins_mcp.core.jenkins import JenkinsClient
from jenkins_mcp.core.logging import setup_logging
from jenkins_mcp.core.registry import TOOL_REGISTRY, serve_tools

SERVER_NAME = "jenkins-mcp"

log = logging.getLogger("jenkins_mcp.server")


def create_app(client: JenkinsClient) -> FastMCP:
    app = FastMCP(SERVER_NAME)
    # FastMCP keeps the stdio plumbing; tool requests go to the dispatch layer
    serve_tools(app._mcp_server, client)
    return app


# --- Entry point ----------------------------------------------------------- #


async def main() -> int:
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    try:
        config = load_env_config(use_dotenv=True)
    except JenkinsConfigurationError as exc:
        log.critical("Invalid Jenkins configuration: %s", exc)
        return 1

    async with JenkinsClient(config) as client:
        app = create_app(client)
        log.info(
            "Jenkins MCP server starting: url=%s tools=%d verify_ssl=%s",
            sanitize_url(config.url),
            len(TOOL_REGISTRY),
            config.verify_ssl,
        )
        await app.run_stdio_async()
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
