"""Configuration loading for Oops."""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from oops.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "lang": {
        "oops": "&cDid you mean &6{0}{1}&c? Use &6/oops&c to run it.",
    },
    "aliases": ["oops", "fix"],
    "instantly-correct": False,
}


def default_config_path() -> Path:
    """Config location, honouring OOPS_CONFIG."""
    env_path = os.getenv("OOPS_CONFIG")
    if env_path:
        return Path(env_path)
    return Path.home() / ".oops" / "config.json"


@dataclass
class OopsConfig:
    """Settings for the correction engine."""

    oops_message: str = DEFAULT_CONFIG["lang"]["oops"]
    aliases: list[str] = field(default_factory=lambda: list(DEFAULT_CONFIG["aliases"]))
    instantly_correct: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.oops_message, str):
            raise ConfigError("lang.oops must be a string")
        if not isinstance(self.aliases, list) or not all(isinstance(a, str) for a in self.aliases):
            raise ConfigError("aliases must be a list of strings")
        if not isinstance(self.instantly_correct, bool):
            raise ConfigError("instantly-correct must be true or false")

        # Lower-case and de-duplicate, keeping order
        seen = set()
        aliases = []
        for alias in self.aliases:
            alias = alias.strip().lower()
            if alias and alias not in seen:
                seen.add(alias)
                aliases.append(alias)
        self.aliases = aliases

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OopsConfig:
        """Build settings from parsed config data, filling in defaults."""
        lang = data.get("lang") or {}
        if not isinstance(lang, dict):
            raise ConfigError("lang must be a mapping")
        return cls(
            oops_message=lang.get("oops", DEFAULT_CONFIG["lang"]["oops"]),
            aliases=data.get("aliases", list(DEFAULT_CONFIG["aliases"])),
            instantly_correct=data.get("instantly-correct", DEFAULT_CONFIG["instantly-correct"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "lang": {"oops": self.oops_message},
            "aliases": list(self.aliases),
            "instantly-correct": self.instantly_correct,
        }

    def format_message(self, prefix: str, command: str) -> str:
        """Fill the suggestion template."""
        return self.oops_message.replace("{0}", prefix).replace("{1}", command)


def save_default_config(path: str | Path) -> bool:
    """Write the default configuration unless a file already exists.

    Returns:
        True if a file was written
    """
    path = Path(path)
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(DEFAULT_CONFIG, f, indent=2)
        f.write("\n")
    logger.info(f"Wrote default configuration to {path}")
    return True


def load_config(path: str | Path | None = None) -> OopsConfig:
    """Load configuration, creating the default file first if needed.

    Unreadable files are reported and replaced by the defaults.
    """
    path = Path(path) if path else default_config_path()

    try:
        save_default_config(path)
    except OSError as e:
        logger.warning(f"Could not write default configuration to {path}: {e}")

    data: dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(path) as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError("top level must be an object")
        data.update(loaded)
    except FileNotFoundError:
        pass
    except (OSError, json.JSONDecodeError, ValueError) as e:
        logger.warning(f"Failed to load configuration {path}, using defaults: {e}")

    try:
        return OopsConfig.from_dict(data)
    except ConfigError as e:
        logger.warning(f"Invalid configuration in {path}, using defaults: {e}")
        return OopsConfig()
