"""Integration tests for reward commands."""

from __future__ import annotations

import httpx
import respx
from typer.testing import CliRunner

from bonusly_cli.app import app

runner = CliRunner()
API = "https://api.test/api/v1"
OPTS = ["--endpoint", API, "--token", "tok"]


def ok(result) -> httpx.Response:
    return httpx.Response(200, json={"success": True, "result": result})


class TestRewardCommands:
    @respx.mock
    def test_list(self, rewards_payload):
        route = respx.get(f"{API}/rewards").mock(return_value=ok(rewards_payload))
        result = runner.invoke(
            app, ["reward", "list", "--catalog-country", "NZ", *OPTS],
        )
        assert result.exit_code == 0
        assert "Amazon" in result.output
        assert "Day off" in result.output
        assert route.calls.last.request.url.params["catalog_country"] == "NZ"

    @respx.mock
    def test_list_filter_type(self, rewards_payload):
        respx.get(f"{API}/rewards").mock(return_value=ok(rewards_payload))
        result = runner.invoke(
            app, ["reward", "list", "--type", "gift_cards", "--format", "json", *OPTS],
        )
        assert result.exit_code == 0
        assert '"Amazon"' in result.output
        assert "Day off" not in result.output

    @respx.mock
    def test_show(self):
        route = respx.get(f"{API}/rewards/d-1").mock(return_value=ok({
            "id": "d-1", "name": "Amazon $5", "price": 500, "type": "gift_cards",
        }))
        result = runner.invoke(
            app, ["reward", "show", "d-1", "--request-country", "NZ", *OPTS],
        )
        assert result.exit_code == 0
        assert "Amazon $5" in result.output
        assert route.calls.last.request.url.params["request_country"] == "NZ"
