"""Word Scramble: build words from the letters of a root word.

A player is given a random root word and submits shorter words spelled
from its letters. A submission is accepted only if it:
- Is longer than 3 letters
- Is not the root word itself
- Uses each root letter at most once
- Has not been played already this session
- Is a recognized English word
"""

__version__ = "0.1.0"

from scramble.session import SessionState, EmptyWordListError, start_game, record_word
from scramble.validator import Accepted, ErrorKind, Rejected, ValidationResult, validate

__all__ = [
    "SessionState",
    "EmptyWordListError",
    "start_game",
    "record_word",
    "Accepted",
    "ErrorKind",
    "Rejected",
    "ValidationResult",
    "validate",
]
