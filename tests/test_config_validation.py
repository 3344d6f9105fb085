from pathlib import Path

import pytest
from pydantic import ValidationError

from clientaddress.config import load_config


def test_invalid_timeout(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("api:\n  timeout_seconds: 0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_invalid_log_level(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("logging:\n  level: LOUD\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_base_url_override(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('api:\n  base_url: "https://crm.test/api"\n')
    cfg = load_config(cfg_file, env={})
    assert cfg.api.base_url == "https://crm.test/api"
    assert cfg.api.user_agent == "clientaddress/0.1.0"
