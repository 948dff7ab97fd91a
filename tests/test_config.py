from __future__ import annotations

from pathlib import Path

import pytest

from local_inference_client.common.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_ENDPOINT,
    ENV_MODEL,
    ENV_TIMEOUT,
    load_settings,
)

REPO_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "client.yaml"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (ENV_ENDPOINT, ENV_MODEL, ENV_TIMEOUT):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_file() -> None:
    settings = load_settings()
    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.model == DEFAULT_MODEL
    assert settings.timeout_seconds == DEFAULT_TIMEOUT_SECONDS


def test_repo_config_loads() -> None:
    settings = load_settings(str(REPO_CONFIG))
    assert settings.endpoint.startswith("http")
    assert settings.model
    assert 120 <= settings.timeout_seconds <= 300


def test_yaml_values_and_unknown_keys(tmp_path: Path) -> None:
    cfg = tmp_path / "client.yaml"
    cfg.write_text("endpoint: http://gpu:11434\nmodel: mistral\ntimeout_seconds: 240\nstream: true\n", encoding="utf-8")
    settings = load_settings(str(cfg))
    assert settings.endpoint == "http://gpu:11434"
    assert settings.model == "mistral"
    assert settings.timeout_seconds == 240


def test_empty_yaml_keeps_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("", encoding="utf-8")
    assert load_settings(str(cfg)).model == DEFAULT_MODEL


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "client.yaml"
    cfg.write_text("model: mistral\ntimeout_seconds: 240\n", encoding="utf-8")
    monkeypatch.setenv(ENV_MODEL, "phi3:mini")
    monkeypatch.setenv(ENV_TIMEOUT, "150")
    settings = load_settings(str(cfg))
    assert settings.model == "phi3:mini"
    assert settings.timeout_seconds == 150.0
    assert settings.endpoint == DEFAULT_ENDPOINT


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "nope.yaml"))
