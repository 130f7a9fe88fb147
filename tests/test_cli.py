"""Tests for the Word Scramble command-line interface."""

import json
import logging

from typer.testing import CliRunner

from cli import app
from scramble.word_list import clear_cache
from shared.utils.logging import remove_handlers

runner = CliRunner()


class TestCheckCommand:
    """Test cases for `scramble check`."""

    def setup_method(self):
        """Setup for each test."""
        clear_cache()

    def teardown_method(self):
        """Detach logging handlers added by the command."""
        remove_handlers()

    def _invoke(self, tmp_path, *args):
        dictionary = tmp_path / "dictionary.txt"
        dictionary.write_text("silk\nworm\nmilk\n")
        return runner.invoke(
            app,
            [
                "scramble", "check", *args,
                "-d", "word_list",
                "--dictionary-file", str(dictionary),
                "--log-path", str(tmp_path / "logs"),
            ],
        )

    def test_accepted(self, tmp_path):
        """Test an accepted word exits 0."""
        result = self._invoke(tmp_path, "Silk", "--root", "silkworm")
        assert result.exit_code == 0
        assert "Accepted" in result.output
        assert "silk" in result.output

    def test_rejected(self, tmp_path):
        """Test a rejected word exits 1 and explains why."""
        result = self._invoke(tmp_path, "silks", "--root", "silkworm")
        assert result.exit_code == 1
        assert "Word not possible" in result.output
        assert "not_derivable" in result.output

    def test_used_words(self, tmp_path):
        """Test --used marks words as already played."""
        result = self._invoke(tmp_path, "silk", "--root", "silkworm", "--used", "worm", "--used", "silk")
        assert result.exit_code == 1
        assert "Word used already" in result.output

    def test_bad_backend(self, tmp_path):
        """Test an unknown dictionary backend is reported and logged to file."""
        log_dir = tmp_path / "logs"
        result = runner.invoke(
            app,
            ["scramble", "check", "silk", "--root", "silkworm", "-d", "aspell", "--log-path", str(log_dir)],
        )
        assert result.exit_code == 1
        assert "Unknown dictionary backend" in result.output

        for handler in logging.getLogger().handlers:
            handler.flush()
        log_files = list(log_dir.glob("scramble_*.jsonl"))
        assert len(log_files) == 1
        entries = [json.loads(line) for line in log_files[0].read_text().splitlines()]
        assert any(
            e["level"] == "ERROR" and "Unknown dictionary backend" in e["message"] for e in entries
        )

    def test_default_dictionary_rejects_made_up_word(self, tmp_path):
        """Test the default wordfreq settings reject a spellable non-word."""
        result = runner.invoke(
            app, ["scramble", "check", "slik", "--root", "silkworm", "--log-path", str(tmp_path)]
        )
        assert result.exit_code == 1
        assert "not_a_word" in result.output


class TestPickCommand:
    """Test cases for `scramble pick`."""

    def setup_method(self):
        """Setup for each test."""
        clear_cache()

    def test_pick_from_file(self, tmp_path):
        """Test pick prints a word from the given list."""
        words_file = tmp_path / "start.txt"
        words_file.write_text("silkworm\n")
        result = runner.invoke(app, ["scramble", "pick", "--words-file", str(words_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "silkworm"

    def test_pick_seeded(self):
        """Test the bundled list with a seed gives a stable answer."""
        first = runner.invoke(app, ["scramble", "pick", "--seed", "3"])
        second = runner.invoke(app, ["scramble", "pick", "--seed", "3"])
        assert first.exit_code == 0
        assert first.output == second.output

    def test_pick_missing_file(self, tmp_path):
        """Test a missing word list exits with an error."""
        result = runner.invoke(app, ["scramble", "pick", "--words-file", str(tmp_path / "none.txt")])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestPlayCommand:
    """Test cases for `scramble play`."""

    def setup_method(self):
        """Setup for each test."""
        clear_cache()

    def teardown_method(self):
        """Detach logging handlers added by the command."""
        remove_handlers()

    def _args(self, tmp_path, words="silkworm\n"):
        words_file = tmp_path / "start.txt"
        words_file.write_text(words)
        dictionary = tmp_path / "dictionary.txt"
        dictionary.write_text("silk\nworm\n")
        return [
            "scramble", "play",
            "--words-file", str(words_file),
            "-d", "word_list",
            "--dictionary-file", str(dictionary),
            "--log-path", str(tmp_path / "logs"),
        ]

    def test_play_session(self, tmp_path):
        """Test a short game driven through stdin."""
        result = runner.invoke(app, self._args(tmp_path), input="silk\nsilks\nworm\n/quit\n")
        assert result.exit_code == 0
        assert "silkworm" in result.output
        assert "Word not possible" in result.output
        assert "Final: 2 words, 8 letters" in result.output
        assert list((tmp_path / "logs").glob("scramble_*.jsonl"))

    def test_play_empty_word_list(self, tmp_path):
        """Test an empty root word list aborts startup."""
        result = runner.invoke(app, self._args(tmp_path, words=""), input="/quit\n")
        assert result.exit_code == 1
        assert "Cannot start game" in result.output

    def test_play_missing_config(self, tmp_path):
        """Test a missing --config file aborts startup."""
        result = runner.invoke(
            app, self._args(tmp_path) + ["--config", str(tmp_path / "missing.yaml")]
        )
        assert result.exit_code == 1
        assert "Error loading settings" in result.output


class TestVersionCommand:
    """Test cases for `version`."""

    def test_version(self):
        """Test version lists package versions."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "scramble: 0.1.0" in result.output
