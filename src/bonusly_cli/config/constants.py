"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "bonusly-cli"
APP_AUTHOR = "bonusly-cli"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_ENDPOINT = "BONUSLY_ENDPOINT"
ENV_API_TOKEN = "BONUSLY_API_TOKEN"
ENV_PROFILE = "BONUSLY_PROFILE"

# API defaults
DEFAULT_ENDPOINT = "https://bonus.ly/api/v1"
DEFAULT_APPLICATION_NAME = "Bonus.ly Python CLI"
DEFAULT_TIMEOUT = 30.0

# Page sizes used when a paginator is built without parameters
DEFAULT_USERS_PAGE_SIZE = 20
DEFAULT_REDEMPTIONS_PAGE_SIZE = 100
