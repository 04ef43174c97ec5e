import importlib.util
import os
import sys
from pathlib import Path

import pytest
import uvicorn

SCRIPT = Path(__file__).parent.parent / "scripts" / "run_api.py"


@pytest.fixture
def run_api(monkeypatch):
    for name in ("PORT", "HOST", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    # Registered so main()'s write to the variable is undone afterwards
    monkeypatch.setenv("SERVER_CONFIG", "")

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    location = importlib.util.spec_from_file_location("run_api", SCRIPT)
    module = importlib.util.module_from_spec(location)
    location.loader.exec_module(module)
    module.calls = calls
    return module


def test_lowercase_log_level_in_config_file_starts_server(run_api, tmp_path, monkeypatch):
    path = tmp_path / "server_config.yml"
    path.write_text("server:\n  port: 8085\n  log_level: info\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["run_api.py", "--config", str(path)])

    assert run_api.main() == 0

    (args, kwargs), = run_api.calls
    assert args == ("src.api.main:app",)
    assert kwargs["port"] == 8085
    assert kwargs["log_level"] == "info"


def test_config_path_is_handed_to_served_app(run_api, tmp_path, monkeypatch):
    path = tmp_path / "server_config.yml"
    path.write_text("server:\n  cors_origins:\n    - http://app.test\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["run_api.py", "--config", str(path), "--port", "9001"])

    run_api.main()

    assert os.environ["SERVER_CONFIG"] == str(path.resolve())
    assert run_api.calls[0][1]["port"] == 9001
