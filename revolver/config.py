"""Configuration management for revolver."""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "revolver"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_PROMPT = "+>> "
DEFAULT_ERROR_PROMPT = "!>> "


@dataclass
class Config:
    """Loop configuration."""

    prompt: str = DEFAULT_PROMPT
    error_prompt: str = DEFAULT_ERROR_PROMPT  # shown after an iteration that reported an error
    log_level: str = "WARNING"
    suggest: bool = True  # offer close matches for unknown commands

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load config from file, or return defaults."""
        path = path or CONFIG_FILE
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
                return cls(
                    prompt=data.get("prompt", DEFAULT_PROMPT),
                    error_prompt=data.get("error_prompt", DEFAULT_ERROR_PROMPT),
                    log_level=data.get("log_level", "WARNING"),
                    suggest=bool(data.get("suggest", True)),
                )
        except (json.JSONDecodeError, UnicodeDecodeError, OSError, AttributeError) as err:
            logger.warning("Ignoring unreadable config %s: %s", path, err)
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
