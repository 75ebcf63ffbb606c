"""Typed configuration schema and loader for the surrogate package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, conint

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Settings for deriving per-record seeds from a secret."""

    secret_env: str
    secret: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class GenerationSettings(BaseModel):
    """Defaults applied to generation requests issued by the CLI."""

    allow_fallback: bool = True
    count_limit: conint(ge=1) = 10000

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level for the package logger."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    seed: SeedSettings
    generation: GenerationSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable for the seed secret.
    """

    with (
        importlib_resources.files("surrogate.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    secret_env = cfg.seed.secret_env
    if secret_env in environ:
        cfg.seed.secret = SecretStr(environ[secret_env])

    return cfg


def get_secret_bytes(cfg: ConfigModel, *, require: bool = False) -> bytes:
    """Return the seed secret as bytes.

    Parameters
    ----------
    cfg:
        Configuration model holding the seed secret.
    require:
        If ``True`` and the secret is missing, ``ValueError`` is raised.

    Notes
    -----
    This function never logs or prints the secret.
    """

    secret = cfg.seed.secret
    if secret is None:
        if require:
            raise ValueError(f"Missing seed secret (set {cfg.seed.secret_env})")
        return b""
    return secret.get_secret_value().encode("utf-8")


__all__ = [
    "ConfigModel",
    "SeedSettings",
    "GenerationSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "get_secret_bytes",
    "load_config",
]
