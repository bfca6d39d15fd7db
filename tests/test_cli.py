"""Tests for the unifi-network command line interface."""

import json
import logging
import os

import httpx
import pytest
import structlog

from unifi_network import __main__ as cli
from unifi_network.api import UnifiClient

BASE_URL = "https://192.168.1.1/proxy/network/integration"
SITE_ID = "8f3ad2f6-7c3b-4a4e-9c61-0d6b1f3e2a10"
DEVICE_ID = "5d2c8a1e-3f4b-4c6d-8e9f-0a1b2c3d4e5f"


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the global logging setup main() performs."""
    root = logging.getLogger()
    level = root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)
    structlog.reset_defaults()


@pytest.fixture
def env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("UNIFI_"):
            monkeypatch.delenv(key)
    for key in ("CONFIG_PATH", "UNIFI_API_KEY", "UNIFI_BASE_URL"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UNIFI_BASE_URL", BASE_URL)
    monkeypatch.setenv("UNIFI_API_KEY", "test-key")
    return monkeypatch


@pytest.fixture
def controller(env):
    """Route every client the CLI creates to a mock handler."""
    requests = []
    responses = {}
    original = UnifiClient.from_settings.__func__

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return responses.get(request.url.path, httpx.Response(404, json={}))

    def from_settings(cls, settings, http_transport=None):
        return original(cls, settings, http_transport=httpx.MockTransport(handler))

    env.setattr(UnifiClient, "from_settings", classmethod(from_settings))
    return requests, responses


class TestCommands:
    def test_sites_prints_json(self, controller, capsys):
        requests, responses = controller
        responses["/proxy/network/integration/v1/sites"] = httpx.Response(
            200,
            json={
                "offset": 0,
                "limit": 25,
                "count": 1,
                "totalCount": 1,
                "data": [{"id": SITE_ID, "name": "Default", "internalReference": "default"}],
            },
        )

        exit_code = cli.main(["sites"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output == [{"id": SITE_ID, "name": "Default", "internalReference": "default"}]
        assert requests[0].headers["X-API-KEY"] == "test-key"

    def test_info(self, controller, capsys):
        _, responses = controller
        responses["/proxy/network/integration/v1/info"] = httpx.Response(
            200, json={"applicationVersion": "9.0.114"}
        )

        assert cli.main(["info"]) == 0
        assert json.loads(capsys.readouterr().out) == {"applicationVersion": "9.0.114"}

    def test_restart(self, controller, capsys):
        requests, responses = controller
        path = f"/proxy/network/integration/v1/sites/{SITE_ID}/devices/{DEVICE_ID}/actions"
        responses[path] = httpx.Response(200)

        assert cli.main(["restart", SITE_ID, DEVICE_ID]) == 0
        assert json.loads(requests[0].content) == {"action": "RESTART"}
        assert json.loads(capsys.readouterr().out)["status"] == "restart requested"

    def test_config_warning_keeps_stdout_json(self, controller, env, tmp_path, capsys, caplog):
        """Test a warning logged while loading config stays out of the JSON output."""
        _, responses = controller
        responses["/proxy/network/integration/v1/sites"] = httpx.Response(
            200, json={"offset": 0, "limit": 25, "count": 0, "totalCount": 0, "data": []}
        )
        env.setenv("UNIFI_TOKEN_FILE", str(tmp_path / "missing"))

        exit_code = cli.main(["sites"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == []
        assert "secret_file_not_found" in caplog.text


class TestFailures:
    def test_invalid_identifier_sends_nothing(self, controller, capsys):
        requests, _ = controller

        exit_code = cli.main(["restart", "not-a-uuid", DEVICE_ID])

        assert exit_code == 1
        assert requests == []
        assert "site_id is not a valid UUID" in capsys.readouterr().err

    def test_rejected_api_key(self, controller, capsys):
        _, responses = controller
        responses["/proxy/network/integration/v1/info"] = httpx.Response(
            401, json={"statusCode": 401, "statusName": "UNAUTHORIZED", "message": "Unauthorized"}
        )

        assert cli.main(["info"]) == 3
        assert "401" in capsys.readouterr().err

    def test_missing_configuration(self, env, capsys):
        env.delenv("UNIFI_API_KEY")

        exit_code = cli.main(["info"])

        assert exit_code == 1
        assert "'api_key' is required" in capsys.readouterr().err

    def test_subcommand_required(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.parse_args([])
        assert exc_info.value.code == 2
