"""Keyword-triggered response generator."""

from __future__ import annotations

import json
import logging
import random
from types import MappingProxyType
from typing import AbstractSet, List, Mapping, Optional, Tuple

from .config import ResponderConfig
from .loader import LoadError, load_default_responses, load_keyword_responses
from .observability import SelectionRecord

logger = logging.getLogger(__name__)


class Responder:
    """
    Generates a response for a set of input words.

    Keywords and their responses are read from the keyword-response file
    once, at construction. If any input word is a known keyword its response
    is returned; otherwise one of the default responses is picked at random.
    File problems are logged and leave the affected table empty or partial.
    """

    def __init__(
        self,
        config: Optional[ResponderConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._config = config or ResponderConfig()
        self._rng = rng or random.Random()
        self._load_errors: List[LoadError] = []

        table, error = load_keyword_responses(
            self._config.keyword_responses_path, self._config.encoding
        )
        self._record_error(error)
        self._response_map: Mapping[str, str] = MappingProxyType(table)

        defaults, error = load_default_responses(
            self._config.default_responses_path, self._config.encoding
        )
        self._record_error(error)
        # At least one default response, whatever happened above.
        if not defaults:
            defaults.append(self._config.fallback_response)
        self._default_responses: Tuple[str, ...] = tuple(defaults)

        logger.info(
            "Responder ready: %s keywords, %s default responses",
            len(self._response_map),
            len(self._default_responses),
        )

    def _record_error(self, error: Optional[LoadError]) -> None:
        if error is None:
            return
        logger.error("%s", error.describe())
        self._load_errors.append(error)

    @property
    def response_map(self) -> Mapping[str, str]:
        return self._response_map

    @property
    def default_responses(self) -> Tuple[str, ...]:
        return self._default_responses

    @property
    def load_errors(self) -> Tuple[LoadError, ...]:
        return tuple(self._load_errors)

    def select(self, words: AbstractSet[str]) -> SelectionRecord:
        # The set's own iteration order decides which keyword wins when
        # several match.
        for word in words:
            response = self._response_map.get(word)
            if response is not None:
                record = SelectionRecord(
                    source="keyword",
                    keyword_hit=word,
                    response=response,
                    word_count=len(words),
                    default_pool_size=len(self._default_responses),
                )
                break
        else:
            record = SelectionRecord(
                source="default",
                keyword_hit=None,
                response=self.pick_default_response(),
                word_count=len(words),
                default_pool_size=len(self._default_responses),
            )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("selection %s", json.dumps(record.to_dict()))
        return record

    def generate_response(self, words: AbstractSet[str]) -> str:
        """Return the response for ``words``, falling back to a default one."""
        return self.select(words).response

    def pick_default_response(self) -> str:
        index = self._rng.randrange(len(self._default_responses))
        return self._default_responses[index]
