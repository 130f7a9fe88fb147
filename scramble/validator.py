"""Validation pipeline for Word Scramble submissions.

This module is the single source of truth for the word rules. Both the
interactive game and the `check` command call validate(), which applies
the rules in a fixed order and stops at the first failure:

1. Longer than 3 letters
2. Not the root word itself
3. Spellable from the root word's letters
4. Not already played this session
5. Recognized by the dictionary

validate() has no side effects. Recording an accepted word is the
caller's job (see scramble.session.record_word).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from scramble.recognizer import DEFAULT_LOCALE, WordRecognizer
from scramble.session import SessionState

# Words of this length or shorter are rejected
SHORT_WORD_LENGTH = 3


class ErrorKind(Enum):
    """Why a submission was rejected."""
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"
    NOT_DERIVABLE = "not_derivable"
    ALREADY_USED = "already_used"
    NOT_A_WORD = "not_a_word"


# (title, message) shown to the player for each rejection
ERROR_TEXT = {
    ErrorKind.TOO_SHORT: (
        "Word too short",
        f"Answer must be greater than {SHORT_WORD_LENGTH} characters",
    ),
    ErrorKind.SAME_AS_ROOT: ("Answer is lame", "Be unique, you can't type the same exact word"),
    ErrorKind.NOT_DERIVABLE: ("Word not possible", "You can't spell that word from {root}"),
    ErrorKind.ALREADY_USED: ("Word used already", "Be more original!"),
    ErrorKind.NOT_A_WORD: ("Word is not recognized", "You can't just make them up!"),
}


@dataclass(frozen=True)
class Accepted:
    """The submission passed every rule."""
    word: str  # Normalized form

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """The submission failed a rule."""
    reason: ErrorKind
    title: str
    message: str

    @property
    def accepted(self) -> bool:
        return False

    @classmethod
    def for_kind(cls, reason: ErrorKind, root_word: str = "") -> "Rejected":
        """Build a rejection with the standard title and message."""
        title, message = ERROR_TEXT[reason]
        return cls(reason=reason, title=title, message=message.format(root=root_word))


ValidationResult = Union[Accepted, Rejected]


def normalize(candidate: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return candidate.lower().strip()


def meets_min_length(word: str) -> bool:
    return len(word) > SHORT_WORD_LENGTH


def is_not_root(word: str, root_word: str) -> bool:
    return word != root_word


def is_possible(word: str, root_word: str) -> bool:
    """True if word can be spelled using each letter of root_word at most once.

    Letters are compared exactly; root_word is not case-folded.
    """
    remaining = list(root_word)

    for letter in word:
        if letter in remaining:
            remaining.remove(letter)
        else:
            return False

    return True


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_real(word: str, recognizer: WordRecognizer, locale: str = DEFAULT_LOCALE) -> bool:
    return recognizer.is_recognized(word, locale)


def validate(
    candidate: str,
    state: SessionState,
    recognizer: WordRecognizer,
    locale: str = DEFAULT_LOCALE,
) -> ValidationResult:
    """Check a raw submission against the current session.

    Args:
        candidate: Raw text entered by the player
        state: Current session (root word and used words)
        recognizer: Dictionary backend for the final check
        locale: Dictionary locale

    Returns:
        Accepted(normalized word) or Rejected(reason, title, message)
    """
    word = normalize(candidate)

    if not meets_min_length(word):
        return Rejected.for_kind(ErrorKind.TOO_SHORT)

    if not is_not_root(word, state.root_word):
        return Rejected.for_kind(ErrorKind.SAME_AS_ROOT)

    if not is_possible(word, state.root_word):
        return Rejected.for_kind(ErrorKind.NOT_DERIVABLE, state.root_word)

    if not is_original(word, state.used_words):
        return Rejected.for_kind(ErrorKind.ALREADY_USED)

    # Dictionary lookup runs last; it is the slowest check
    if not is_real(word, recognizer, locale):
        return Rejected.for_kind(ErrorKind.NOT_A_WORD)

    return Accepted(word)
