"""E2E test configuration — custom CLI options for the live API."""

from __future__ import annotations

import pytest


def pytest_addoption(parser):
    parser.addoption("--api-token", action="store", default=None)
    parser.addoption("--api-endpoint", action="store", default=None)


@pytest.fixture
def api_opts(request):
    token = request.config.getoption("--api-token")
    if not token:
        pytest.skip("Live API token not provided")
    opts = ["--token", token]
    endpoint = request.config.getoption("--api-endpoint")
    if endpoint:
        opts += ["--endpoint", endpoint]
    return opts
