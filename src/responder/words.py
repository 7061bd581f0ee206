"""Turn a line of user text into the word set the responder consumes."""

from __future__ import annotations

from typing import Set


def split_words(text: str) -> Set[str]:
    return set(text.strip().lower().split())
