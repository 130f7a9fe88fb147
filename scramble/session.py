"""Session state for a Word Scramble game.

A session is an immutable value. Starting a game and recording a word
both return a new SessionState rather than changing the old one, so the
front end can keep or discard states freely.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class EmptyWordListError(ValueError):
    """Raised when a game is started from a word list with no entries."""


@dataclass(frozen=True)
class SessionState:
    """One game: the root word and the words accepted so far."""
    root_word: str
    used_words: Tuple[str, ...] = ()  # Most recent first

    @property
    def word_count(self) -> int:
        """Number of accepted words."""
        return len(self.used_words)

    @property
    def letter_total(self) -> int:
        """Total letters across all accepted words."""
        return sum(len(word) for word in self.used_words)


def start_game(word_list: Sequence[str], rng: Optional[random.Random] = None) -> SessionState:
    """Start a new game with a root word drawn uniformly from word_list.

    Args:
        word_list: Candidate root words
        rng: Optional random source (for reproducible games)

    Returns:
        A fresh SessionState with no used words
    """
    if not word_list:
        raise EmptyWordListError("Cannot start a game: the root word list is empty")

    chooser = rng if rng is not None else random
    root_word = chooser.choice(list(word_list))
    logger.debug(f"Selected root word '{root_word}' from {len(word_list)} candidates")
    return SessionState(root_word=root_word)


def record_word(state: SessionState, word: str) -> SessionState:
    """Return a new state with word added at the front of used_words.

    No validation happens here; callers validate first.
    """
    return replace(state, used_words=(word,) + state.used_words)
