"""Typed configuration schema and loader for the clientaddress package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import IO, Any, Literal
from urllib.parse import quote

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, confloat, conint

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ApiSettings(BaseModel):
    """Where and how the address endpoint is reached."""

    base_url: str
    address_path: str
    timeout_seconds: confloat(gt=0.0) = 30.0
    user_agent: str

    model_config = ConfigDict(extra="forbid")

    def address_url(self, client_id: object) -> str:
        """Return the absolute URL of the address list for ``client_id``."""

        path = self.address_path.format(client_id=quote(str(client_id), safe="")).lstrip("/")
        return f"{self.base_url.rstrip('/')}/{path}"


class CredentialSettings(BaseModel):
    """Environment variable names used to supply API credentials."""

    user_env: str
    password_env: str
    user: str | None = None
    password: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Logging level applied by the command line interface."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    api: ApiSettings
    credentials: CredentialSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Overlay ``overrides`` on ``base`` section by section.

    Nested sections are merged key by key; any other value in ``overrides``
    (lists included) replaces the one in ``base``.  Neither input is modified.
    """

    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = merge_settings(current, value)
        merged[key] = value
    return merged


def _read_yaml(handle: IO[str]) -> dict[str, Any]:
    return yaml.safe_load(handle) or {}


def _apply_env_credentials(cfg: ConfigModel, environ: Mapping[str, str]) -> None:
    creds = cfg.credentials
    if environ.get(creds.user_env):
        creds.user = environ[creds.user_env]
    if environ.get(creds.password_env):
        creds.password = SecretStr(environ[creds.password_env])


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Build the configuration for one lookup.

    The shipped ``defaults.yml`` is read first, then the optional YAML file at
    ``path`` is merged over it with :func:`merge_settings`.  After validation
    the API user and password are taken from the environment variables named
    in ``credentials`` when those are set and non-empty.  ``env`` replaces
    ``os.environ`` for that last step.
    """

    defaults_file = importlib_resources.files(__package__).joinpath("defaults.yml")
    with defaults_file.open("r", encoding="utf-8") as handle:
        settings = _read_yaml(handle)

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as handle:
            settings = merge_settings(settings, _read_yaml(handle))

    cfg = ConfigModel.model_validate(settings)
    _apply_env_credentials(cfg, os.environ if env is None else env)
    return cfg


__all__ = [
    "ConfigModel",
    "ApiSettings",
    "CredentialSettings",
    "LoggingSettings",
    "merge_settings",
    "load_config",
]
