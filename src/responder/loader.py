"""Parsers for the keyword-response and default-response text files.

Both formats group lines into blocks separated by one or more blank lines.
In the keyword-response file the first line of a block is a comma separated
list of keywords and the remaining lines are the response. In the
default-response file every block is one response.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class LoadErrorKind(Enum):
    NOT_FOUND = "not_found"
    READ_ERROR = "read_error"


@dataclass(frozen=True)
class LoadError:
    kind: LoadErrorKind
    path: Path
    detail: str

    def describe(self) -> str:
        if self.kind is LoadErrorKind.NOT_FOUND:
            return f"Unable to open {self.path}"
        return f"A problem was encountered reading {self.path}: {self.detail}"


def _is_blank(line: str) -> bool:
    return not line.strip()


def _commit(table: Dict[str, str], keys_line: Optional[str], body: List[str]) -> None:
    if keys_line is None or not body:
        return
    response = " ".join(body).strip()
    keys = keys_line.split(",")
    # Trailing empty fields are not keywords; leading and inner ones are.
    while keys and keys[-1] == "":
        keys.pop()
    for key in keys:
        table[key.strip()] = response


def parse_keyword_responses(
    lines: Iterable[str], table: Optional[Dict[str, str]] = None
) -> Dict[str, str]:
    """Fill ``table`` with ``keyword -> response`` pairs read from ``lines``.

    Entries are committed into ``table`` as soon as they end, so a caller
    holding the table keeps every complete entry if iteration fails midway.
    """
    if table is None:
        table = {}
    keys_line: Optional[str] = None
    body: List[str] = []

    for raw in lines:
        line = raw.rstrip("\n")
        if _is_blank(line):
            _commit(table, keys_line, body)
            keys_line = None
            body = []
        elif keys_line is None:
            keys_line = line
        else:
            body.append(line.strip())

    _commit(table, keys_line, body)
    return table


def parse_default_responses(
    lines: Iterable[str], responses: Optional[List[str]] = None
) -> List[str]:
    """Append one response per blank-line separated paragraph to ``responses``."""
    if responses is None:
        responses = []
    paragraph: List[str] = []

    for raw in lines:
        line = raw.rstrip("\n")
        if _is_blank(line):
            if paragraph:
                responses.append(" ".join(paragraph).strip())
                paragraph = []
        else:
            paragraph.append(line)

    if paragraph:
        responses.append(" ".join(paragraph).strip())
    return responses


def _read_lines(path: Path, encoding: str, consume: Callable[[Iterable[str]], object]) -> Optional[LoadError]:
    try:
        with path.open("r", encoding=encoding) as handle:
            consume(handle)
    except FileNotFoundError as exc:
        return LoadError(LoadErrorKind.NOT_FOUND, path, str(exc))
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        return LoadError(LoadErrorKind.READ_ERROR, path, str(exc))
    logger.debug("Loaded %s", path)
    return None


def load_keyword_responses(
    path: Path, encoding: str = "utf-8"
) -> Tuple[Dict[str, str], Optional[LoadError]]:
    table: Dict[str, str] = {}
    error = _read_lines(path, encoding, lambda lines: parse_keyword_responses(lines, table))
    return table, error


def load_default_responses(
    path: Path, encoding: str = "utf-8"
) -> Tuple[List[str], Optional[LoadError]]:
    responses: List[str] = []
    error = _read_lines(path, encoding, lambda lines: parse_default_responses(lines, responses))
    return responses, error
