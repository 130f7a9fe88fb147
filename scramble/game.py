"""Interactive console game for Word Scramble."""

import logging
import random
import time
import uuid
from typing import Any, Callable, Dict, Optional

from rich.console import Console
from rich.table import Table

from scramble.recognizer import DEFAULT_LOCALE, WordRecognizer
from scramble.session import SessionState, record_word, start_game
from scramble.validator import Accepted, ValidationResult, validate
from scramble.word_list import load_root_words

console = Console()
logger = logging.getLogger(__name__)


class ScrambleGame:
    """Console front end for a Word Scramble session.

    The game owns the current SessionState and swaps it for a new one on
    each accepted word or reset. All rule checking is delegated to
    scramble.validator.validate.

    Commands typed at the prompt:
    - /reset: start over with a new root word
    - /words: list accepted words
    - /quit: end the game
    """

    RESET_COMMAND = "/reset"
    WORDS_COMMAND = "/words"
    QUIT_COMMAND = "/quit"

    # Accepted words at least this long are highlighted
    HIGHLIGHT_LENGTH = 5

    def __init__(
        self,
        recognizer: WordRecognizer,
        words_file: Optional[str] = None,
        locale: str = DEFAULT_LOCALE,
        quiet: bool = False,
        seed: Optional[int] = None,
    ):
        self.recognizer = recognizer
        self.words_file = words_file
        self.locale = locale
        self.quiet = quiet
        self.seed = seed
        self.rng = random.Random(seed)

        self.state: Optional[SessionState] = None
        self.rejections = 0
        self.resets = 0

        self.start_time: Optional[float] = None
        self.game_id = str(uuid.uuid4())[:8]

    def _print(self, *args, **kwargs):
        """Print to console unless in quiet mode."""
        if not self.quiet:
            console.print(*args, **kwargs)

    def start(self) -> SessionState:
        """Draw a root word and begin a fresh session."""
        words = load_root_words(self.words_file)
        self.state = start_game(words, rng=self.rng)
        self.rejections = 0
        logger.info(f"Game {self.game_id}: new root word '{self.state.root_word}'")
        return self.state

    def reset(self) -> SessionState:
        """Throw away the current session and start another."""
        previous = self.state
        self.resets += 1
        state = self.start()
        if previous is not None:
            logger.info(
                f"Game {self.game_id}: reset after {previous.word_count} words "
                f"({previous.letter_total} letters) on '{previous.root_word}'"
            )
        return state

    def submit(self, raw: str) -> ValidationResult:
        """Validate a submission and record it if accepted."""
        if self.state is None:
            self.start()

        result = validate(raw, self.state, self.recognizer, self.locale)

        if isinstance(result, Accepted):
            self.state = record_word(self.state, result.word)
            logger.info(f"Accepted '{result.word}' (total words: {self.state.word_count})")
            self._print(f"[green]✓ {result.word}[/green] (+{len(result.word)} letters)")
        else:
            self.rejections += 1
            logger.debug(f"Rejected {raw!r}: {result.reason.value}")
            self._print(f"[red]{result.title}[/red]: {result.message}")

        return result

    def display_status(self):
        """Show the root word and running totals."""
        if self.state is None:
            return
        self._print(f"\n[bold]{self.state.root_word}[/bold]")
        self._print(
            f"[blue]Words: {self.state.word_count} / Letters: {self.state.letter_total}[/blue]"
        )

    def display_words(self):
        """Show accepted words, newest first, with their lengths."""
        if self.state is None or not self.state.used_words:
            self._print("[dim]No words yet[/dim]")
            return

        table = Table(show_header=True, title=f"Words from {self.state.root_word}")
        table.add_column("Letters", justify="right")
        table.add_column("Word")

        for word in self.state.used_words:
            color = "blue" if len(word) >= self.HIGHLIGHT_LENGTH else "white"
            table.add_row(str(len(word)), f"[{color}]{word}[/{color}]")

        self._print(table)

    def summary(self) -> Dict[str, Any]:
        """Results for the current session."""
        duration = time.time() - self.start_time if self.start_time is not None else 0.0
        state = self.state
        return {
            "game_id": self.game_id,
            "root_word": state.root_word if state else None,
            "words": list(state.used_words) if state else [],
            "word_count": state.word_count if state else 0,
            "letter_total": state.letter_total if state else 0,
            "rejections": self.rejections,
            "resets": self.resets,
            "duration": duration,
        }

    def play(self, input_fn: Optional[Callable[[str], str]] = None) -> Dict[str, Any]:
        """Run the interactive loop until /quit or end of input.

        Args:
            input_fn: Reads one line given a prompt (defaults to console.input)

        Returns:
            Summary dict for the final session
        """
        read = input_fn or console.input
        self.start_time = time.time()

        self.start()
        self._print("[bold]🔤 Word Scramble[/bold]")
        self._print(
            f"[dim]Make words from the letters of the root word. "
            f"Commands: {self.RESET_COMMAND}, {self.WORDS_COMMAND}, {self.QUIT_COMMAND}[/dim]"
        )
        self.display_status()

        while True:
            try:
                raw = read("Enter your word: ")
            except (EOFError, KeyboardInterrupt):
                self._print()
                break

            command = raw.strip().lower()
            if command == self.QUIT_COMMAND:
                break
            if command == self.RESET_COMMAND:
                self.reset()
                self.display_status()
                continue
            if command == self.WORDS_COMMAND:
                self.display_words()
                continue

            result = self.submit(raw)
            if result.accepted:
                self.display_status()

        result = self.summary()
        self._print(f"\n[bold]Final: {result['word_count']} words, {result['letter_total']} letters[/bold]")
        self.display_words()
        logger.info(
            f"Game {self.game_id} finished: {result['word_count']} words, "
            f"{result['letter_total']} letters, {result['rejections']} rejections"
        )
        return result
