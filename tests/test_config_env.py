from pathlib import Path
from typing import Any

import pytest

from surrogate.config import load_config
from surrogate.config.schema import get_secret_bytes


def test_env_secret(monkeypatch: Any) -> None:
    monkeypatch.setenv("SURROGATE_SEED_SECRET", "test-secret")
    cfg = load_config()
    assert cfg.seed.secret is not None
    assert cfg.seed.secret.get_secret_value() == "test-secret"


def test_custom_env_override(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('seed:\n  secret_env: "CUSTOM_ENV"\n')
    monkeypatch.setenv("CUSTOM_ENV", "custom")
    cfg = load_config(cfg_file)
    assert cfg.seed.secret_env == "CUSTOM_ENV"
    assert cfg.seed.secret is not None
    assert cfg.seed.secret.get_secret_value() == "custom"


def test_secret_bytes() -> None:
    cfg = load_config(env={})
    assert get_secret_bytes(cfg) == b""
    with pytest.raises(ValueError):
        get_secret_bytes(cfg, require=True)
    cfg = load_config(env={"SURROGATE_SEED_SECRET": "abc"})
    assert get_secret_bytes(cfg, require=True) == b"abc"


def test_secret_not_in_repr() -> None:
    cfg = load_config(env={"SURROGATE_SEED_SECRET": "hunter2"})
    assert "hunter2" not in repr(cfg)
