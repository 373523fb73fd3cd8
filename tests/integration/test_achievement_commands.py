"""Integration tests for achievement commands."""

from __future__ import annotations

import httpx
import respx
from typer.testing import CliRunner

from bonusly_cli.app import app

runner = CliRunner()
API = "https://api.test/api/v1"
OPTS = ["--endpoint", API, "--token", "tok"]


class TestAchievementCommands:
    @respx.mock
    def test_list(self, achievement_payload):
        respx.get(f"{API}/achievements").mock(
            return_value=httpx.Response(
                200, json={"success": True, "result": [achievement_payload]},
            ),
        )
        result = runner.invoke(app, ["achievement", "list", *OPTS])
        assert result.exit_code == 0
        assert "Achievements" in result.output
        assert "Max" in result.output

    @respx.mock
    def test_list_csv(self, achievement_payload):
        respx.get(f"{API}/achievements").mock(
            return_value=httpx.Response(
                200, json={"success": True, "result": [achievement_payload]},
            ),
        )
        result = runner.invoke(app, ["achievement", "list", "--format", "csv", *OPTS])
        assert result.exit_code == 0
        assert "5b16f45e9fb5ba8225bc55ef," in result.output
        assert ",Max,engineering,0.7" in result.output

    @respx.mock
    def test_list_empty_result(self):
        respx.get(f"{API}/achievements").mock(
            return_value=httpx.Response(200, json={"success": True, "result": None}),
        )
        result = runner.invoke(app, ["achievement", "list", "--format", "json", *OPTS])
        assert result.exit_code == 0
        assert result.output.strip() == "[]"
