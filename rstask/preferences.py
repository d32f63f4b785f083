"""
RSTASK - Preferences
====================
Optional user settings read from <config dir>/rstask/config.styx:

    sync_frequency: after_every_modification
    bulk_commit_strategy: single

The file is a convenience, never a requirement. Preferences.load() always
returns a value; a missing, unreadable or malformed file gives the
defaults.

Only the `key: value` form is understood. A line written as
`sync_frequency after_every_modification` (no colon) does not decode,
so the whole file falls back to the defaults.
"""

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import yaml
from pydantic import BaseModel

logger = logging.getLogger("rstask")

APP_NAME = "rstask"
CONFIG_FILE = "config.styx"


class SyncFrequency(str, Enum):
    """When to sync the task repository"""
    NEVER = "never"
    AFTER_EVERY_MODIFICATION = "after_every_modification"


class BulkCommitStrategy(str, Enum):
    """How to commit when one command modifies many tasks"""
    SINGLE = "single"       # One commit for the whole batch
    PER_TASK = "per_task"   # One commit per modified task


# ========================================
# LOCATION
# ========================================

def config_dir() -> Optional[Path]:
    """Platform user config directory, or None if it cannot be determined"""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else None

    try:
        home = Path.home()
    except RuntimeError:
        return None

    if sys.platform == "darwin":
        return home / "Library" / "Application Support"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return home / ".config"


def config_path() -> Optional[Path]:
    """Path of the preferences file, or None if there is no config dir"""
    base = config_dir()
    if base is None:
        return None
    return base / APP_NAME / CONFIG_FILE


def read_config(path: Path) -> str:
    """Read the preferences file (raises OSError / UnicodeDecodeError)"""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


# ========================================
# PREFERENCES
# ========================================

class Preferences(BaseModel):
    """User preferences; field defaults apply to absent keys and to fallbacks"""
    sync_frequency: SyncFrequency = SyncFrequency.NEVER
    bulk_commit_strategy: BulkCommitStrategy = BulkCommitStrategy.PER_TASK

    @classmethod
    def from_str(cls, text: str) -> "Preferences":
        """Decode config text. Raises on malformed content."""
        data = yaml.safe_load(text)
        if data is None:
            return cls()
        return cls.model_validate(data)

    @classmethod
    def load(
        cls,
        path: Optional[Path] = None,
        reader: Callable[[Path], str] = read_config,
    ) -> "Preferences":
        """Load preferences from the config file, or return defaults"""
        if path is None:
            path = config_path()
        if path is None:
            logger.debug("No config directory, using default preferences")
            return cls()

        try:
            text = reader(path)
        except Exception as e:
            logger.debug(f"Cannot read {path} ({e}), using default preferences")
            return cls()

        try:
            return cls.from_str(text)
        except Exception as e:
            logger.warning(f"Ignoring malformed preferences in {path}: {e}")
            return cls()
