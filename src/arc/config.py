"""Configuration management for arc."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

ARC_HOME = Path(os.environ.get("ARC_HOME", Path.home() / ".arc"))
CONFIG_FILE = ARC_HOME / "config" / "arc.conf"
DATA_DIR = ARC_HOME / "data"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """arc configuration."""

    data_dir: Path = field(default_factory=lambda: DATA_DIR)
    prompt: str = ">"
    log_level: str = ""


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from arc.conf (KEY=value lines)."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                if value:
                    config.data_dir = Path(value).expanduser()
            case "prompt":
                config.prompt = value
            case "log_level":
                level = value.upper()
                if level in LOG_LEVELS:
                    config.log_level = level
                else:
                    logger.warning(f"Unknown LOG_LEVEL {value!r}, ignoring")

    return config
