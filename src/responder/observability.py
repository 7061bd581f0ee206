"""Selection log schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

SOURCES = ("keyword", "default")

SELECTION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "source",
        "keyword_hit",
        "response",
        "word_count",
        "default_pool_size",
        "selected_at",
    ],
    "properties": {
        "source": {"type": "string", "enum": list(SOURCES)},
        "keyword_hit": {"type": ["string", "null"]},
        "response": {"type": "string", "minLength": 1},
        "word_count": {"type": "integer", "minimum": 0},
        "default_pool_size": {"type": "integer", "minimum": 1},
        "selected_at": {"type": "string", "format": "date-time"},
    },
    "if": {"properties": {"source": {"const": "keyword"}}},
    "then": {"properties": {"keyword_hit": {"type": "string"}}},
    "else": {"properties": {"keyword_hit": {"type": "null"}}},
}

_validator = Draft7Validator(SELECTION_SCHEMA)


def validate_selection(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"selection log validation failed: {messages}")


@dataclass(frozen=True)
class SelectionRecord:
    source: str
    keyword_hit: Optional[str]
    response: str
    word_count: int
    default_pool_size: int
    selected_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "source": self.source,
            "keyword_hit": self.keyword_hit,
            "response": self.response,
            "word_count": self.word_count,
            "default_pool_size": self.default_pool_size,
            "selected_at": self.selected_at,
        }
        validate_selection(payload)
        return payload
