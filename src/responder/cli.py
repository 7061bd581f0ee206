#!/usr/bin/env python3
"""
Keyword Responder console session

Reads lines from standard input and answers each one:
  Known keyword  → the canned response for that keyword
  Anything else  → a random default response
  Exit word      → goodbye message, session ends

Usage:
  RESPONDER_CONFIG=config/responder.defaults.yml keyword-responder
"""

import logging
import os
import sys
from typing import Callable, Iterable

from .config import load_config
from .responder import Responder
from .words import split_words

logger = logging.getLogger(__name__)

WELCOME = (
    "Welcome to the keyword responder.\n"
    "Tell me what is on your mind. Type '{exit_word}' to leave."
)
GOODBYE = "Nice talking to you. Bye..."


def run_session(
    responder: Responder,
    lines: Iterable[str],
    emit: Callable[[str], None],
    exit_word: str = "bye",
) -> int:
    """Answer every line until the exit word or end of input; return the number answered."""
    emit(WELCOME.format(exit_word=exit_word))
    answered = 0

    for line in lines:
        words = split_words(line)
        if exit_word in words:
            break
        emit(responder.generate_response(words))
        answered += 1

    emit(GOODBYE)
    return answered


def _prompted_lines(prompt: str = "> ") -> Iterable[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main() -> int:
    """Start a console session."""
    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        level=os.environ.get("RESPONDER_LOG_LEVEL", "WARNING").upper(),
    )

    try:
        config = load_config(os.environ.get("RESPONDER_CONFIG"))
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    responder = Responder(config)
    answered = run_session(responder, _prompted_lines(), print, exit_word=config.exit_word)
    logger.info("Session ended after %s responses", answered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
