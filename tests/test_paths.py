from urllib.parse import unquote

import pytest
from jenkins_mcp.core.paths import (
    build_api_path,
    build_console_path,
    build_trigger_path,
    encode_job_name,
    job_api_path,
    job_config_path,
    node_api_path,
    node_config_path,
    queue_cancel_path,
    queue_item_path,
    stop_build_path,
)


def test_single_job_name():
    assert job_api_path("app") == "/job/app/api/json"
    assert job_config_path("app") == "/job/app/config.xml"


def test_folder_job_name_uses_job_separator():
    assert encode_job_name("teamA/app") == "teamA/job/app"
    assert job_api_path("a/b/c") == "/job/a/job/b/job/c/api/json"


def test_segments_are_encoded_individually():
    assert encode_job_name("my team/app #1") == "my%20team/job/app%20%231"
    # a '?' in a job name must not start a query string
    assert "?" not in encode_job_name("what?/now")


@pytest.mark.parametrize(
    "full_name",
    [
        "app",
        "teamA/app",
        "folder/sub folder/job-name",
        "ünïcødé/ジョブ",
        "a%b/c&d=e/f+g",
        "x;y/(z)/it's",
    ],
)
def test_encoded_segments_round_trip(full_name):
    encoded = encode_job_name(full_name)
    segments = [unquote(s) for s in encoded.split("/job/")]
    assert segments == full_name.split("/")


def test_build_paths():
    assert build_api_path("teamA/app", 42) == "/job/teamA/job/app/42/api/json"
    assert build_console_path("app", 7) == "/job/app/7/consoleText"
    assert stop_build_path("app", 7) == "/job/app/7/stop"


def test_build_trigger_path_depends_on_parameters():
    assert build_trigger_path("app") == "/job/app/build"
    assert build_trigger_path("app", True) == "/job/app/buildWithParameters"


def test_node_paths_encode_whole_name():
    assert node_api_path("linux agent/1") == "/computer/linux%20agent%2F1/api/json"
    assert node_config_path("built-in") == "/computer/built-in/config.xml"


def test_queue_paths():
    assert queue_item_path(42) == "/queue/item/42/api/json"
    assert queue_cancel_path(7) == "/queue/cancelItem?id=7"
