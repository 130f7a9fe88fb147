"""Dictionary lookups for deciding whether a word is real.

The validator only needs a yes/no answer for (word, locale). Backends:
- WordfreqRecognizer: the wordfreq corpus (default)
- WordListRecognizer: a local newline-delimited word list
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Union

from wordfreq import zipf_frequency

from scramble.word_list import read_word_file

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

# Minimum Zipf frequency for the wordfreq backend
DEFAULT_MIN_ZIPF = 3.0


class WordRecognizer(ABC):
    """Abstract base class for dictionary backends."""

    @abstractmethod
    def is_recognized(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        """Return True if word is a recognized word in locale."""
        pass


class WordfreqRecognizer(WordRecognizer):
    """Recognize words that are common enough in the wordfreq frequency lists.

    The web corpus behind wordfreq contains typos and fragments ("wilk",
    "slik") at low frequencies, so a word must reach min_zipf to count.
    Zipf 3.0 is a frequency of one per million words.
    """

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.min_zipf = min_zipf

    def is_recognized(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        if not word:
            return False
        frequency = zipf_frequency(word, locale)
        logger.debug(f"zipf_frequency({word!r}, {locale!r}) = {frequency}")
        return frequency >= self.min_zipf


class WordListRecognizer(WordRecognizer):
    """Hashed-set lookup over a fixed list of words for a single locale."""

    def __init__(self, words: Iterable[str], locale: str = DEFAULT_LOCALE):
        self.locale = locale
        self._words = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Union[str, Path], locale: str = DEFAULT_LOCALE) -> "WordListRecognizer":
        """Build a recognizer from a newline-delimited word file."""
        words = read_word_file(path)
        logger.info(f"Loaded {len(words)} dictionary words from {path}")
        return cls(words, locale=locale)

    def __len__(self) -> int:
        return len(self._words)

    def is_recognized(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        if locale != self.locale:
            return False
        return word.lower() in self._words


def build_recognizer(settings) -> WordRecognizer:
    """Create the recognizer named by settings.dictionary_backend."""
    backend = settings.dictionary_backend
    if backend == "wordfreq":
        return WordfreqRecognizer(min_zipf=settings.min_zipf)
    if backend == "word_list":
        if not settings.dictionary_file:
            raise ValueError("dictionary_backend 'word_list' requires dictionary_file")
        return WordListRecognizer.from_file(settings.dictionary_file, locale=settings.locale)
    raise ValueError(f"Unknown dictionary backend: '{backend}' (expected 'wordfreq' or 'word_list')")
