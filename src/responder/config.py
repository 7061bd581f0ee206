"""Configuration loader for the keyword responder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_FALLBACK_RESPONSE = "Could you elaborate on that?"


@dataclass(frozen=True)
class ResponderConfig:
    keyword_responses_path: Path = Path("systemresponses.txt")
    default_responses_path: Path = Path("default.txt")
    encoding: str = "utf-8"
    fallback_response: str = DEFAULT_FALLBACK_RESPONSE
    exit_word: str = "bye"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponderConfig":
        return cls(
            keyword_responses_path=Path(data.get("keyword_responses_path", "systemresponses.txt")),
            default_responses_path=Path(data.get("default_responses_path", "default.txt")),
            encoding=str(data.get("encoding") or "utf-8"),
            fallback_response=str(data.get("fallback_response") or DEFAULT_FALLBACK_RESPONSE),
            exit_word=str(data.get("exit_word", "bye")).strip().lower(),
        )


ENV_MAP = {
    "keyword_responses_path": "RESPONDER_KEYWORD_RESPONSES_PATH",
    "default_responses_path": "RESPONDER_DEFAULT_RESPONSES_PATH",
    "encoding": "RESPONDER_ENCODING",
    "fallback_response": "RESPONDER_FALLBACK_RESPONSE",
    "exit_word": "RESPONDER_EXIT_WORD",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(config_data)
    for key, env_name in ENV_MAP.items():
        if env_name in os.environ:
            merged[key] = os.environ[env_name]
    return merged


def load_config(config_path: Optional[str | Path] = None) -> ResponderConfig:
    data: Dict[str, Any] = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        data = load_yaml(path)

    data = merge_env_overrides(data)
    return ResponderConfig.from_dict(data)
