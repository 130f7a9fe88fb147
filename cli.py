"""Command-line interface for Word Scramble.

This is the unified CLI entry point:
- `wordscramble scramble play` - Play an interactive game
- `wordscramble scramble check` - Check one word against a root word
- `wordscramble scramble pick` - Print a random root word
"""

import typer
from rich.console import Console

from scramble.cli_scramble import app as scramble_app

# Main application
app = typer.Typer(
    help="Word Scramble - make words from the letters of a root word",
    no_args_is_help=True,
)
console = Console()

# Register subcommands
app.add_typer(scramble_app, name="scramble", help="Play or check Word Scramble words")


@app.callback()
def main():
    """Word Scramble - a word game validator.

    Examples:

        # Play a game
        uv run wordscramble scramble play

        # Play with a reproducible root word and a local dictionary
        uv run wordscramble scramble play --seed 7 -d word_list --dictionary-file words.txt

        # Check a single word
        uv run wordscramble scramble check silk --root silkworm
    """
    pass


@app.command()
def version():
    """Show version information."""
    from scramble import __version__ as scramble_version
    from shared import __version__ as shared_version

    console.print("[bold]Word Scramble[/bold]")
    console.print(f"  scramble: {scramble_version}")
    console.print(f"  shared: {shared_version}")


if __name__ == "__main__":
    app()
