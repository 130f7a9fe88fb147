"""CLI subcommand for the Word Scramble game."""

import logging
import random
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from scramble.config import ConfigError, Settings, load_settings
from scramble.game import ScrambleGame
from scramble.recognizer import WordRecognizer, build_recognizer
from scramble.session import EmptyWordListError, SessionState, start_game
from scramble.validator import Accepted, validate
from scramble.word_list import WordListError, load_root_words
from shared.utils.logging import setup_logging

app = typer.Typer(help="Play Word Scramble: make words from a root word's letters")
console = Console()
logger = logging.getLogger(__name__)


def _resolve_settings(config: Optional[str], **overrides) -> Settings:
    """Load settings from the config file and apply CLI overrides."""
    try:
        settings = load_settings(config)
    except ConfigError as e:
        console.print(f"[red]Error loading settings: {e}[/red]")
        raise typer.Exit(1)
    return settings.with_overrides(**overrides)


def _create_recognizer(settings: Settings) -> WordRecognizer:
    """Build the dictionary backend, exiting on bad configuration."""
    try:
        return build_recognizer(settings)
    except (ValueError, WordListError) as e:
        logger.error(f"Could not create dictionary: {e}")
        console.print(f"[red]Error creating dictionary: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def play(
    words_file: Optional[str] = typer.Option(None, help="Root word list (one word per line)"),
    dictionary: Optional[str] = typer.Option(
        None, "--dictionary", "-d", help="Dictionary backend: 'wordfreq' or 'word_list'"
    ),
    dictionary_file: Optional[str] = typer.Option(None, help="Word file for the 'word_list' dictionary"),
    locale: Optional[str] = typer.Option(None, help="Dictionary locale"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible root words"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Settings YAML file"),
    log_path: Optional[str] = typer.Option(None, help="Directory for log files"),
    verbose: bool = typer.Option(False, help="Enable verbose logging"),
):
    """Play an interactive game of Word Scramble.

    Type words made from the root word's letters. Words must be longer than
    3 letters, real, and not repeated. Type /reset for a new root word,
    /words to list your words, or /quit to finish.
    """
    settings = _resolve_settings(
        config,
        words_file=words_file,
        dictionary_backend=dictionary,
        dictionary_file=dictionary_file,
        locale=locale,
        log_path=log_path,
    )

    setup_logging(Path(settings.log_path), verbose)

    if seed is not None:
        logger.info(f"Random seed set to: {seed}")

    recognizer = _create_recognizer(settings)

    game = ScrambleGame(
        recognizer=recognizer,
        words_file=settings.words_file,
        locale=settings.locale,
        seed=seed,
    )

    try:
        game.play()
    except (WordListError, EmptyWordListError) as e:
        logger.error(f"Cannot start game: {e}")
        console.print(f"[red]Cannot start game: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def check(
    word: str = typer.Argument(..., help="Word to check"),
    root: str = typer.Option(..., "--root", "-r", help="Root word to spell from"),
    used: Optional[List[str]] = typer.Option(
        None, "--used", "-u", help="Word already played (repeatable, newest first)"
    ),
    dictionary: Optional[str] = typer.Option(
        None, "--dictionary", "-d", help="Dictionary backend: 'wordfreq' or 'word_list'"
    ),
    dictionary_file: Optional[str] = typer.Option(None, help="Word file for the 'word_list' dictionary"),
    locale: Optional[str] = typer.Option(None, help="Dictionary locale"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Settings YAML file"),
    log_path: Optional[str] = typer.Option(None, help="Directory for log files"),
    verbose: bool = typer.Option(False, help="Enable verbose logging"),
):
    """Check a single word against a root word without starting a game.

    Exits with status 0 if the word would be accepted and 1 if not.
    """
    settings = _resolve_settings(
        config,
        dictionary_backend=dictionary,
        dictionary_file=dictionary_file,
        locale=locale,
        log_path=log_path,
    )
    setup_logging(Path(settings.log_path), verbose)

    recognizer = _create_recognizer(settings)

    state = SessionState(root_word=root, used_words=tuple(used or ()))
    result = validate(word, state, recognizer, settings.locale)

    if isinstance(result, Accepted):
        console.print(f"[green]✓ Accepted:[/green] {result.word}")
        return

    console.print(f"[red]✗ {result.title}[/red] ({result.reason.value})")
    console.print(f"  {result.message}")
    raise typer.Exit(1)


@app.command()
def pick(
    words_file: Optional[str] = typer.Option(None, help="Root word list (one word per line)"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Settings YAML file"),
):
    """Print a random root word from the word list."""
    settings = _resolve_settings(config, words_file=words_file)

    try:
        words = load_root_words(settings.words_file)
        state = start_game(words, rng=random.Random(seed))
    except (WordListError, EmptyWordListError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(state.root_word)
