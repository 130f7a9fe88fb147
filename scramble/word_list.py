"""Loading newline-delimited word files.

Used for the bundled root word list (inputs/start.txt) and for local
dictionary files. Failure to read a word file is fatal for the caller.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_WORDS_FILE = Path(__file__).parent / "inputs" / "start.txt"

# Cache for loaded word files (keyed by resolved path)
_WORDS_CACHE: Dict[str, List[str]] = {}


class WordListError(RuntimeError):
    """Raised when a word file cannot be loaded."""


def read_word_file(path: Union[str, Path]) -> List[str]:
    """Read one word per line, skipping blank lines (cached for performance).

    Each call returns a fresh list, so callers may modify it freely.
    """
    key = str(Path(path).resolve())

    if key in _WORDS_CACHE:
        return list(_WORDS_CACHE[key])

    try:
        with open(path, "r", encoding="utf-8") as f:
            words = [line.strip() for line in f if line.strip()]
    except FileNotFoundError as e:
        logger.error(f"Word file not found: {path}")
        raise WordListError(f"Could not load word list: {path} does not exist") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading word file {path}: {e}")
        raise WordListError(f"Could not load word list from {path}: {e}") from e

    _WORDS_CACHE[key] = words
    logger.debug(f"Loaded and cached {len(words)} words from {path}")
    return list(words)


def load_root_words(path: Optional[Union[str, Path]] = None) -> List[str]:
    """Load candidate root words, defaulting to the bundled start.txt."""
    return read_word_file(path or DEFAULT_WORDS_FILE)


def clear_cache() -> None:
    """Forget all cached word files."""
    _WORDS_CACHE.clear()
