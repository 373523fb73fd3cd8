"""Profile storage in a TOML file and client configuration resolution."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from bonusly_cli.client.errors import ConfigurationError
from bonusly_cli.config.constants import (
    CONFIG_FILE,
    ENV_API_TOKEN,
    ENV_ENDPOINT,
    ENV_PROFILE,
)
from bonusly_cli.config.models import CLIConfig, ClientConfig

logger = logging.getLogger(__name__)


def _write_private(path: Path, text: str) -> None:
    """Replace *path* with *text*, readable by the owner only."""
    path.parent.mkdir(parents=True, exist_ok=True)
    os.chmod(path.parent, 0o700)
    staging = path.with_name(path.name + ".tmp")
    fd = os.open(staging, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as fh:
        fh.write(text)
    staging.replace(path)


class ConfigManager:
    """Named client profiles persisted in ``config.toml``.

    The file looks like::

        default_profile = "acme"

        [profiles.acme]
        token = "..."
        endpoint = "https://bonus.ly/api/v1"

    Settings equal to their defaults are left out when saving.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._read()
        return self._config

    def _read(self) -> CLIConfig:
        try:
            text = self.config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return CLIConfig()
        logger.debug("Reading profiles from %s", self.config_path)
        try:
            document = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(
                f"Cannot parse config file {self.config_path}: {exc}"
            ) from exc
        profiles = {
            name: ClientConfig(name=name, **settings)
            for name, settings in document.pop("profiles", {}).items()
        }
        return CLIConfig(**document, profiles=profiles)

    def save(self) -> None:
        cfg = self.config
        document: dict[str, Any] = cfg.model_dump(
            exclude={"profiles"}, exclude_defaults=True,
        )
        if cfg.profiles:
            document["profiles"] = {
                name: profile.model_dump(exclude={"name"}, exclude_defaults=True)
                for name, profile in cfg.profiles.items()
            }
        _write_private(self.config_path, tomli_w.dumps(document))
        logger.debug("Saved %d profile(s) to %s", len(cfg.profiles), self.config_path)

    def add_profile(self, profile: ClientConfig) -> None:
        """Store *profile*, replacing one of the same name.

        The first profile ever added becomes the default.
        """
        self.config.profiles[profile.name] = profile
        self.config.default_profile = self.config.default_profile or profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if self.config.profiles.pop(name, None) is None:
            return False
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ClientConfig | None:
        """Return the named profile, or the default one when *name* is empty."""
        key = name or self.config.default_profile
        return self.config.profiles.get(key) if key else None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        endpoint: str | None = None,
        token: str | None = None,
    ) -> ClientConfig:
        """Build the client configuration for one CLI invocation.

        Each setting comes from the first source that has it: explicit
        arguments, then ``BONUSLY_*`` environment variables, then the
        selected profile (``profile_name``, ``BONUSLY_PROFILE`` or the
        default profile), then built-in defaults.
        """
        base = self.get_profile(profile_name or os.environ.get(ENV_PROFILE))
        if base is None:
            base = ClientConfig(name="cli")
        overrides = {
            "endpoint": endpoint or os.environ.get(ENV_ENDPOINT),
            "token": token or os.environ.get(ENV_API_TOKEN),
        }
        settings = base.model_dump()
        settings.update({k: v for k, v in overrides.items() if v})
        resolved = ClientConfig(**settings)
        if not resolved.auth_configured:
            raise ConfigurationError(
                "No API token configured. Use 'bonusly config add' or set "
                f"{ENV_API_TOKEN} or pass --token."
            )
        return resolved
