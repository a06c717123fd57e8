"""Configuration for the circle-w3s command line.

Settings come from ``~/.circle-w3s/config.yaml`` (or ``$CIRCLE_W3S_CONFIG``),
with ``${VAR}`` placeholders expanded from the environment.  The CLI layers
environment variables and command-line flags on top of the file:

    flag  >  CIRCLE_* environment variable  >  config file  >  default
"""

from __future__ import annotations

import math
import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from circle_w3s.client import DEFAULT_TIMEOUT
from circle_w3s.request import DEFAULT_BASE_URL

CONFIG_ENV_VAR = "CIRCLE_W3S_CONFIG"

# Environment variables overriding the file, keyed by setting name.
ENV_OVERRIDES = {
    "api_key": "CIRCLE_API_KEY",
    "base_url": "CIRCLE_BASE_URL",
    "timeout": "CIRCLE_TIMEOUT",
    "user_token": "CIRCLE_USER_TOKEN",
}

OUTPUT_FORMATS = ("json", "text")


# ---------------------------------------------------------------------------
# Environment-variable expansion helper
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def _expand_env_vars(value: str) -> str:
    """Replace ``${VAR_NAME}`` placeholders with their environment values.

    Unset variables are left as-is.
    """

    def _replace(match: re.Match) -> str:
        return os.environ.get(match.group(1), match.group(0))

    return _ENV_VAR_RE.sub(_replace, value)


def _expand_env_recursive(obj: object) -> object:
    if isinstance(obj, str):
        return _expand_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _expand_env_recursive(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_recursive(item) for item in obj]
    return obj


# ---------------------------------------------------------------------------
# Pydantic v2 models
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """Connection settings shared by every API surface client."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT  # seconds

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise ValueError("timeout must be a finite, positive number of seconds")
        return value

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value.rstrip("/")


class CliConfig(BaseModel):
    """Root configuration object of the command line."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    user_token: Optional[str] = None
    output: str = "json"

    @field_validator("output")
    @classmethod
    def _check_output(cls, value: str) -> str:
        value = value.lower()
        if value not in OUTPUT_FORMATS:
            raise ValueError(f"output must be one of {', '.join(OUTPUT_FORMATS)}")
        return value

    def redacted(self) -> dict[str, Any]:
        """Return the settings as a dict with secrets masked."""
        data = self.model_dump(mode="json")
        if data["client"]["api_key"]:
            data["client"]["api_key"] = "<redacted>"
        if data["user_token"]:
            data["user_token"] = "<redacted>"
        return data


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def get_config_path() -> Path:
    """Return the config file location, honouring ``$CIRCLE_W3S_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".circle-w3s" / "config.yaml"


def load_config(path: Path) -> CliConfig:
    """Load and validate a configuration from a YAML file.

    Environment variable placeholders (``${VAR}``) are expanded before
    validation.
    """
    raw_text = path.read_text(encoding="utf-8")
    raw_data = yaml.safe_load(raw_text) or {}
    expanded = _expand_env_recursive(raw_data)
    return CliConfig.model_validate(expanded)


def save_config(config: CliConfig, path: Path) -> None:
    """Serialize a :class:`CliConfig` to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="python", exclude_none=True)
    with open(path, "w", encoding="utf-8") as fh:
        yaml.dump(data, fh, default_flow_style=False, sort_keys=False)


def resolve_config(
    path: Optional[Path] = None,
    *,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    user_token: Optional[str] = None,
    output: Optional[str] = None,
) -> CliConfig:
    """Merge the config file, ``CIRCLE_*`` variables and explicit values.

    Parameters
    ----------
    path:
        Config file to read.  Defaults to :func:`get_config_path`; a missing
        file is treated as empty.
    api_key, base_url, timeout, user_token, output:
        Values given on the command line.  ``None`` means "not given".

    Raises
    ------
    pydantic.ValidationError
        If the merged settings are invalid (e.g. a non-positive timeout).
    """
    path = path or get_config_path()
    data: dict[str, Any] = {}
    if path.exists():
        data = load_config(path).model_dump(mode="python", exclude_none=True)
    client = data.setdefault("client", {})

    for name, env_var in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if not value:
            continue
        if name == "user_token":
            data["user_token"] = value
        else:
            client[name] = value

    flags = {"api_key": api_key, "base_url": base_url, "timeout": timeout}
    client.update({k: v for k, v in flags.items() if v is not None})
    if user_token is not None:
        data["user_token"] = user_token
    if output is not None:
        data["output"] = output

    return CliConfig.model_validate(data)
