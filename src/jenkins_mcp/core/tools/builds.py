from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..jenkins import JenkinsClient
from ..models import Build
from ..validation import require_non_empty_string, require_positive_int
from ._spec import ToolSpec, integer_prop, string_prop


async def get_build(client: JenkinsClient, args: Mapping[str, Any]) -> Build:
    full_name = require_non_empty_string(args, "fullName")
    build_number = require_positive_int(args, "buildNumber")
    return await client.builds.get_build(full_name, build_number)


async def get_build_console_output(
    client: JenkinsClient, args: Mapping[str, Any]
) -> str:
    full_name = require_non_empty_string(args, "fullName")
    build_number = require_positive_int(args, "buildNumber")
    return await client.builds.get_build_console_output(full_name, build_number)


async def get_running_builds(
    client: JenkinsClient, args: Mapping[str, Any]
) -> List[Build]:
    return await client.builds.get_running_builds()


async def stop_build(client: JenkinsClient, args: Mapping[str, Any]) -> Dict[str, bool]:
    full_name = require_non_empty_string(args, "fullName")
    build_number = require_positive_int(args, "buildNumber")
    await client.builds.stop_build(full_name, build_number)
    return {"success": True}


def _build_props(number_description: str) -> Dict[str, Dict[str, Any]]:
    return {
        "fullName": string_prop("Full name of the job"),
        "buildNumber": integer_prop(number_description, minimum=1),
    }


TOOLS = [
    ToolSpec(
        name="get_build",
        description="Get details of a specific build",
        handler=get_build,
        properties=_build_props("Build number"),
        required=["fullName", "buildNumber"],
    ),
    ToolSpec(
        name="get_build_console_output",
        description="Get the console output (logs) of a specific build",
        handler=get_build_console_output,
        properties=_build_props("Build number"),
        required=["fullName", "buildNumber"],
    ),
    ToolSpec(
        name="get_running_builds",
        description=(
            "Get all currently running builds in Jenkins "
            "(inspects the last build of each top-level job)"
        ),
        handler=get_running_builds,
    ),
    ToolSpec(
        name="stop_build",
        description="Stop a running build",
        handler=stop_build,
        properties=_build_props("Build number to stop"),
        required=["fullName", "buildNumber"],
    ),
]
