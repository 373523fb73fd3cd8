"""Tests for config manager."""

import stat

import pytest

from bonusly_cli.client.errors import ConfigurationError
from bonusly_cli.config.manager import ConfigManager
from bonusly_cli.config.models import ClientConfig


class TestConfigManager:
    def test_load_empty(self, config_manager: ConfigManager):
        assert config_manager.config.profiles == {}
        assert config_manager.config.default_profile is None

    def test_add_profile(self, config_manager: ConfigManager, sample_profile: ClientConfig):
        config_manager.add_profile(sample_profile)
        assert "test" in config_manager.config.profiles
        assert config_manager.config.default_profile == "test"

    def test_add_sets_first_as_default(self, config_manager: ConfigManager):
        config_manager.add_profile(ClientConfig(name="first", token="a"))
        config_manager.add_profile(ClientConfig(name="second", token="b"))
        assert config_manager.config.default_profile == "first"

    def test_remove_profile(self, config_manager: ConfigManager, sample_profile: ClientConfig):
        config_manager.add_profile(sample_profile)
        assert config_manager.remove_profile("test") is True
        assert "test" not in config_manager.config.profiles
        assert config_manager.config.default_profile is None

    def test_remove_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.remove_profile("nope") is False

    def test_remove_default_reassigns(self, config_manager: ConfigManager):
        config_manager.add_profile(ClientConfig(name="a", token="a"))
        config_manager.add_profile(ClientConfig(name="b", token="b"))
        config_manager.remove_profile("a")
        assert config_manager.config.default_profile == "b"

    def test_set_default(self, config_manager: ConfigManager):
        config_manager.add_profile(ClientConfig(name="a", token="a"))
        config_manager.add_profile(ClientConfig(name="b", token="b"))
        assert config_manager.set_default("b") is True
        assert config_manager.config.default_profile == "b"

    def test_set_default_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.set_default("nope") is False

    def test_get_default_profile(self, config_manager: ConfigManager, sample_profile: ClientConfig):
        config_manager.add_profile(sample_profile)
        p = config_manager.get_profile()
        assert p is not None
        assert p.name == "test"

    def test_save_and_reload(self, config_manager: ConfigManager, sample_profile: ClientConfig):
        config_manager.add_profile(sample_profile)
        mgr2 = ConfigManager(config_path=config_manager.config_path)
        p = mgr2.get_profile("test")
        assert p is not None
        assert p.endpoint == "https://api.test/api/v1"
        assert p.token == "testtoken:secret"
        assert p.timeout == 30.0

    def test_save_omits_defaults(self, config_manager: ConfigManager):
        config_manager.add_profile(ClientConfig(name="prod", token="tok"))
        text = config_manager.config_path.read_text()
        assert 'token = "tok"' in text
        assert "endpoint" not in text
        assert "timeout" not in text
        assert "verify_ssl" not in text

    def test_save_is_owner_only(self, config_manager: ConfigManager, sample_profile: ClientConfig):
        config_manager.add_profile(sample_profile)
        mode = stat.S_IMODE(config_manager.config_path.stat().st_mode)
        assert mode == 0o600

    def test_unparseable_file(self, config_manager: ConfigManager):
        config_manager.config_path.write_text("profiles = [not toml")
        with pytest.raises(ConfigurationError, match="Cannot parse config file"):
            _ = config_manager.config


class TestResolveProfile:
    def test_from_profile(self, config_manager: ConfigManager, sample_profile: ClientConfig):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_profile()
        assert resolved.name == "test"
        assert resolved.endpoint == "https://api.test/api/v1"
        assert resolved.token == "testtoken:secret"

    def test_cli_overrides(self, config_manager: ConfigManager, sample_profile: ClientConfig):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_profile(
            endpoint="https://other.test/api/v1", token="new",
        )
        assert resolved.endpoint == "https://other.test/api/v1"
        assert resolved.token == "new"

    def test_env_vars(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BONUSLY_ENDPOINT", "https://env.test/api/v1")
        monkeypatch.setenv("BONUSLY_API_TOKEN", "env-token")
        resolved = config_manager.resolve_profile()
        assert resolved.name == "cli"
        assert resolved.endpoint == "https://env.test/api/v1"
        assert resolved.token == "env-token"

    def test_flags_beat_env(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BONUSLY_API_TOKEN", "env-token")
        assert config_manager.resolve_profile(token="flag-token").token == "flag-token"

    def test_env_beats_profile(
        self, config_manager: ConfigManager, sample_profile: ClientConfig,
        monkeypatch: pytest.MonkeyPatch,
    ):
        config_manager.add_profile(sample_profile)
        monkeypatch.setenv("BONUSLY_API_TOKEN", "env-token")
        resolved = config_manager.resolve_profile()
        assert resolved.token == "env-token"
        assert resolved.endpoint == "https://api.test/api/v1"

    def test_env_profile(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        config_manager.add_profile(ClientConfig(name="a", token="a"))
        config_manager.add_profile(ClientConfig(name="b", token="b", timeout=5))
        monkeypatch.setenv("BONUSLY_PROFILE", "b")
        resolved = config_manager.resolve_profile()
        assert resolved.name == "b"
        assert resolved.timeout == 5

    def test_default_endpoint(self, config_manager: ConfigManager):
        resolved = config_manager.resolve_profile(token="tok")
        assert resolved.endpoint == "https://bonus.ly/api/v1"

    def test_no_token_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="No API token configured"):
            config_manager.resolve_profile()
