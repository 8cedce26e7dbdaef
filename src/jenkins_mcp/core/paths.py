"""
Jenkins REST path builders.

Job full names are slash-qualified ("folder/sub/job"). Jenkins nests folders
as /job/folder/job/sub/job/job, so every segment is percent-encoded on its
own and the segments are joined with "/job/".
"""

from urllib.parse import quote

# Same unreserved set as JavaScript's encodeURIComponent.
_SEGMENT_SAFE = "!~*'()"

ROOT_API_PATH = "/api/json"
COMPUTER_API_PATH = "/computer/api/json"
QUEUE_API_PATH = "/queue/api/json"
CRUMB_ISSUER_PATH = "/crumbIssuer/api/json"


def encode_segment(value: str) -> str:
    return quote(value, safe=_SEGMENT_SAFE)


def encode_job_name(full_name: str) -> str:
    """
    Example: encode_job_name("teamA/my app") -> "teamA/job/my%20app"
    """
    return "/job/".join(encode_segment(part) for part in full_name.split("/"))


def job_path(full_name: str) -> str:
    return f"/job/{encode_job_name(full_name)}"


def job_api_path(full_name: str) -> str:
    return f"{job_path(full_name)}/api/json"


def job_config_path(full_name: str) -> str:
    return f"{job_path(full_name)}/config.xml"


def build_trigger_path(full_name: str, with_parameters: bool = False) -> str:
    suffix = "buildWithParameters" if with_parameters else "build"
    return f"{job_path(full_name)}/{suffix}"


def build_path(full_name: str, build_number: int) -> str:
    return f"{job_path(full_name)}/{encode_segment(str(build_number))}"


def build_api_path(full_name: str, build_number: int) -> str:
    return f"{build_path(full_name, build_number)}/api/json"


def build_console_path(full_name: str, build_number: int) -> str:
    return f"{build_path(full_name, build_number)}/consoleText"


def stop_build_path(full_name: str, build_number: int) -> str:
    return f"{build_path(full_name, build_number)}/stop"


def node_path(node_name: str) -> str:
    return f"/computer/{encode_segment(node_name)}"


def node_api_path(node_name: str) -> str:
    return f"{node_path(node_name)}/api/json"


def node_config_path(node_name: str) -> str:
    return f"{node_path(node_name)}/config.xml"


def queue_item_path(queue_id: int) -> str:
    return f"/queue/item/{encode_segment(str(queue_id))}/api/json"


def queue_cancel_path(queue_id: int) -> str:
    return f"/queue/cancelItem?id={encode_segment(str(queue_id))}"


__all__ = [
    "ROOT_API_PATH",
    "COMPUTER_API_PATH",
    "QUEUE_API_PATH",
    "CRUMB_ISSUER_PATH",
    "encode_segment",
    "encode_job_name",
    "job_path",
    "job_api_path",
    "job_config_path",
    "build_trigger_path",
    "build_path",
    "build_api_path",
    "build_console_path",
    "stop_build_path",
    "node_path",
    "node_api_path",
    "node_config_path",
    "queue_item_path",
    "queue_cancel_path",
]
