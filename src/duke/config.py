"""Configuration management for Duke."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DUKE_HOME = Path(os.environ.get("DUKE_HOME", Path.home() / "duke"))
CONFIG_FILE = DUKE_HOME / "config" / "duke.conf"
DATA_DIR = DUKE_HOME / "data"


@dataclass
class Config:
    """Duke configuration."""

    data_file: Path = field(default_factory=lambda: DATA_DIR / "duke.txt")
    indent: int = 5
    show_logo: bool = True


def _parse_bool(value: str) -> bool | None:
    lowered = value.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from duke.conf file."""
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
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "data_file":
                config.data_file = Path(value).expanduser()
            case "indent":
                try:
                    config.indent = max(0, int(value))
                except ValueError:
                    logger.warning(f"Ignoring invalid INDENT value: {value!r}")
            case "show_logo":
                flag = _parse_bool(value)
                if flag is None:
                    logger.warning(f"Ignoring invalid SHOW_LOGO value: {value!r}")
                else:
                    config.show_logo = flag
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
