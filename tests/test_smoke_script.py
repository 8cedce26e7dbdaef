import importlib.util
from pathlib import Path

import pytest
import respx
from httpx import Response

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "smoke_test.py"
BASE = "http://ci.example"


def _load_script():
    spec = importlib.util.spec_from_file_location("smoke_test", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def jenkins_env(monkeypatch):
    monkeypatch.setattr("jenkins_mcp.core.config.load_dotenv", lambda *a, **k: None)
    monkeypatch.setenv("JENKINS_URL", BASE)
    for name in ("JENKINS_USERNAME", "JENKINS_TIMEOUT", "TEST_JOB_FULL_NAME"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.asyncio
@respx.mock
async def test_smoke_run_passes_against_healthy_server(jenkins_env, capsys):
    respx.get(f"{BASE}/api/json").mock(return_value=Response(200, json={"jobs": []}))
    respx.get(f"{BASE}/computer/api/json").mock(return_value=Response(200, json={}))
    respx.get(f"{BASE}/queue/api/json").mock(return_value=Response(200, json={}))

    assert await _load_script().run_smoke_test() == 0
    assert "PASSED smoke test." in capsys.readouterr().out


@pytest.mark.asyncio
@respx.mock
async def test_smoke_run_reports_node_failure(jenkins_env, capsys):
    respx.get(f"{BASE}/api/json").mock(return_value=Response(200, json={"jobs": []}))
    respx.get(f"{BASE}/computer/api/json").mock(return_value=Response(503))

    assert await _load_script().run_smoke_test() == 1
    assert "FAILED: get_all_nodes failed" in capsys.readouterr().out


@pytest.mark.asyncio
@respx.mock
async def test_smoke_run_reports_queue_failure(jenkins_env, capsys):
    respx.get(f"{BASE}/api/json").mock(return_value=Response(200, json={"jobs": []}))
    respx.get(f"{BASE}/computer/api/json").mock(return_value=Response(200, json={}))
    respx.get(f"{BASE}/queue/api/json").mock(return_value=Response(500))

    assert await _load_script().run_smoke_test() == 1
    assert "FAILED: queue/running builds failed" in capsys.readouterr().out
