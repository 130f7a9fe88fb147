"""Settings for Word Scramble, loaded from YAML.

The bundled inputs/settings.yaml holds the defaults. A user config file
overrides individual keys, and CLI options override both.
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = Path(__file__).parent / "inputs" / "settings.yaml"


class ConfigError(RuntimeError):
    """Raised when a settings file is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """Resolved game settings."""
    words_file: Optional[str] = None  # None means the bundled start.txt
    locale: str = "en"
    dictionary_backend: str = "wordfreq"  # "wordfreq" or "word_list"
    dictionary_file: Optional[str] = None
    min_zipf: float = 3.0  # Zipf 3.0 = one occurrence per million words
    log_path: str = "logs/scramble"

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Settings file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _apply(settings: Settings, data: Dict[str, Any], source: Path) -> Settings:
    known = {f.name for f in fields(Settings)}
    values = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown setting '{key}' in {source}")
            continue
        values[key] = value

    if "min_zipf" in values:
        try:
            values["min_zipf"] = float(values["min_zipf"])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"min_zipf must be a number in {source}: {values['min_zipf']!r}") from e

    return replace(settings, **values)


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Load the bundled defaults, then apply the user file at path if given."""
    settings = _apply(Settings(), _read_yaml(DEFAULT_SETTINGS_FILE), DEFAULT_SETTINGS_FILE)

    if path is not None:
        user_path = Path(path)
        settings = _apply(settings, _read_yaml(user_path), user_path)
        logger.info(f"Loaded settings from {user_path}")

    return settings
