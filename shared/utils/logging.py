"""Logging setup shared by the Word Scramble CLI commands."""

import json
import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

FILE_HANDLER_NAME = "scramble.file"
CONSOLE_HANDLER_NAME = "scramble.console"


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(log_dir: Path, verbose: bool = False, name: str = "scramble") -> Path:
    """Configure root logging: JSON lines to a file, rich output to the console.

    Args:
        log_dir: Directory for the log file (created if missing)
        verbose: Show DEBUG messages on the console instead of WARNING+
        name: Prefix for the log file name

    Returns:
        Path of the log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.jsonl"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Replace handlers from any earlier call so repeated runs don't duplicate output
    remove_handlers()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(JSONFormatter())
    file_handler.set_name(FILE_HANDLER_NAME)

    console_handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.set_name(CONSOLE_HANDLER_NAME)

    root.addHandler(file_handler)
    root.addHandler(console_handler)

    logging.getLogger(__name__).debug(f"Logging to {log_file}")
    return log_file


def remove_handlers() -> None:
    """Detach and close the handlers installed by setup_logging."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
            root.removeHandler(handler)
            handler.close()
