"""Tests for CLI configuration loading and precedence."""

import math

import pytest
import yaml
from pydantic import ValidationError

from circle_w3s.config import (
    CONFIG_ENV_VAR,
    ENV_OVERRIDES,
    ClientConfig,
    CliConfig,
    get_config_path,
    load_config,
    resolve_config,
    save_config,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's own Circle settings out of these tests."""
    for env_var in ENV_OVERRIDES.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def _write(path, data):
    path.write_text(yaml.dump(data), encoding="utf-8")
    return path


class TestConfigPath:
    """Tests for config file discovery."""

    def test_default_under_home(self, monkeypatch, tmp_path):
        """Test the default path lives in ~/.circle-w3s."""
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_path() == tmp_path / ".circle-w3s" / "config.yaml"

    def test_env_override(self, monkeypatch, tmp_path):
        """Test $CIRCLE_W3S_CONFIG replaces the default location."""
        target = tmp_path / "elsewhere.yaml"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
        assert get_config_path() == target


class TestLoadSave:
    """Tests for reading and writing the YAML file."""

    def test_load(self, tmp_path):
        """Test a full file loads into the models."""
        path = _write(
            tmp_path / "config.yaml",
            {
                "client": {"api_key": "k", "base_url": "https://api-sandbox.example/", "timeout": 12},
                "output": "TEXT",
            },
        )
        cfg = load_config(path)
        assert cfg.client.api_key == "k"
        assert cfg.client.base_url == "https://api-sandbox.example"
        assert cfg.client.timeout == 12.0
        assert cfg.output == "text"

    def test_env_placeholders(self, monkeypatch, tmp_path):
        """Test ${VAR} placeholders expand and unknown ones stay literal."""
        monkeypatch.setenv("MY_CIRCLE_KEY", "from-env")
        monkeypatch.delenv("NOT_SET_ANYWHERE", raising=False)
        path = _write(
            tmp_path / "config.yaml",
            {"client": {"api_key": "${MY_CIRCLE_KEY}"}, "user_token": "${NOT_SET_ANYWHERE}"},
        )
        cfg = load_config(path)
        assert cfg.client.api_key == "from-env"
        assert cfg.user_token == "${NOT_SET_ANYWHERE}"

    def test_empty_file(self, tmp_path):
        """Test an empty file yields defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        cfg = load_config(path)
        assert cfg == CliConfig()

    def test_save_round_trip(self, tmp_path):
        """Test a saved config loads back unchanged."""
        cfg = CliConfig(client=ClientConfig(api_key="k", timeout=5), output="text")
        path = tmp_path / "nested" / "config.yaml"
        save_config(cfg, path)
        assert path.exists()
        assert load_config(path) == cfg
        assert "user_token" not in path.read_text(encoding="utf-8")


class TestValidation:
    """Tests for setting validators."""

    @pytest.mark.parametrize("timeout", [0, -1, math.inf, math.nan])
    def test_bad_timeout(self, timeout):
        """Test non-positive and non-finite timeouts are rejected."""
        with pytest.raises(ValidationError):
            ClientConfig(timeout=timeout)

    def test_bad_base_url(self):
        """Test a non-HTTP base URL is rejected."""
        with pytest.raises(ValidationError):
            ClientConfig(base_url="ftp://api.circle.com")

    def test_bad_output(self):
        """Test an unknown output format is rejected."""
        with pytest.raises(ValidationError):
            CliConfig(output="yaml")

    def test_redacted(self):
        """Test secrets are masked and other settings kept."""
        cfg = CliConfig(client=ClientConfig(api_key="secret"), user_token="tok")
        shown = cfg.redacted()
        assert shown["client"]["api_key"] == "<redacted>"
        assert shown["user_token"] == "<redacted>"
        assert shown["client"]["base_url"] == "https://api.circle.com"

    def test_redacted_leaves_unset(self):
        """Test empty secrets are not shown as redacted."""
        shown = CliConfig().redacted()
        assert shown["client"]["api_key"] == ""
        assert shown["user_token"] is None


class TestResolve:
    """Tests for file < environment < flag precedence."""

    def test_missing_file_defaults(self, tmp_path):
        """Test a missing file resolves to defaults."""
        cfg = resolve_config(tmp_path / "absent.yaml")
        assert cfg.client.api_key == ""
        assert cfg.client.timeout == 30.0
        assert cfg.output == "json"

    def test_env_over_file(self, monkeypatch, tmp_path):
        """Test CIRCLE_* variables override the file."""
        path = _write(tmp_path / "config.yaml", {"client": {"api_key": "file-key", "timeout": 9}})
        monkeypatch.setenv("CIRCLE_API_KEY", "env-key")
        monkeypatch.setenv("CIRCLE_TIMEOUT", "4.5")
        monkeypatch.setenv("CIRCLE_USER_TOKEN", "env-token")
        cfg = resolve_config(path)
        assert cfg.client.api_key == "env-key"
        assert cfg.client.timeout == 4.5
        assert cfg.user_token == "env-token"

    def test_flags_over_env(self, monkeypatch, tmp_path):
        """Test explicit values win over the environment."""
        monkeypatch.setenv("CIRCLE_API_KEY", "env-key")
        monkeypatch.setenv("CIRCLE_BASE_URL", "https://env.example")
        cfg = resolve_config(
            tmp_path / "absent.yaml",
            api_key="flag-key",
            user_token="flag-token",
            output="text",
        )
        assert cfg.client.api_key == "flag-key"
        assert cfg.client.base_url == "https://env.example"
        assert cfg.user_token == "flag-token"
        assert cfg.output == "text"

    def test_empty_env_ignored(self, monkeypatch, tmp_path):
        """Test an empty variable does not clear a file setting."""
        path = _write(tmp_path / "config.yaml", {"client": {"api_key": "file-key"}})
        monkeypatch.setenv("CIRCLE_API_KEY", "")
        assert resolve_config(path).client.api_key == "file-key"

    def test_invalid_merged_value(self, tmp_path):
        """Test an invalid flag value fails validation."""
        with pytest.raises(ValidationError):
            resolve_config(tmp_path / "absent.yaml", timeout=0)

    def test_default_path_from_env(self, monkeypatch, tmp_path):
        """Test the file named by $CIRCLE_W3S_CONFIG is read."""
        path = _write(tmp_path / "custom.yaml", {"client": {"api_key": "custom"}})
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert resolve_config().client.api_key == "custom"
