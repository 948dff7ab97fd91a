"""Client configuration: YAML file defaults with environment overrides."""
from __future__ import annotations
import os
from dataclasses import dataclass, fields, replace
from typing import Any

import yaml

DEFAULT_ENDPOINT = "http://localhost:11434"
DEFAULT_MODEL = "llama3"
DEFAULT_TIMEOUT_SECONDS = 180.0

ENV_ENDPOINT = "INFERENCE_ENDPOINT"
ENV_MODEL = "INFERENCE_MODEL"
ENV_TIMEOUT = "INFERENCE_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class ClientSettings:
    """Settings needed to build a GenerationClient."""
    endpoint: str = DEFAULT_ENDPOINT
    model: str = DEFAULT_MODEL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: str | None = None) -> ClientSettings:
    """
    Build settings from an optional YAML file, then the environment.

    Args:
        path: YAML config path. Keys other than the ClientSettings fields
            are ignored.

    Returns:
        Resolved settings.
    """
    settings = ClientSettings()
    if path is not None:
        cfg = load_cfg(path)
        known = {f.name for f in fields(ClientSettings)}
        settings = replace(settings, **{k: v for k, v in cfg.items() if k in known})

    settings = replace(
        settings,
        endpoint=os.getenv(ENV_ENDPOINT, settings.endpoint),
        model=os.getenv(ENV_MODEL, settings.model),
        timeout_seconds=float(os.getenv(ENV_TIMEOUT, settings.timeout_seconds)),
    )
    return settings
