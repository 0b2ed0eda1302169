"""Configuration for goproj.

Settings come from an optional JSON file (``~/.config/goproj/config.json``
or ``$GOPROJ_CONFIG``) with ``GOPROJ_PROJECTS_DIR`` overriding the projects
directory. Configuration is loaded once at startup.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from goproj.core.paths import normalize_base

logger = logging.getLogger(__name__)

CONFIG_ENV = "GOPROJ_CONFIG"
PROJECTS_DIR_ENV = "GOPROJ_PROJECTS_DIR"
DEFAULT_CONFIG_PATH = Path("~/.config/goproj/config.json")


@dataclass(frozen=True)
class GoprojConfig:
    """Configuration for goproj (stored in config.json)."""
    # Where new projects are created; env vars and ~ are expanded
    projects_dir: str = "$HOME/projects"

    # Starter file written at the project root
    entry_point: str = "main.go"

    # External tools
    go_command: str = "go"
    git_command: str = "git"
    command_timeout: Optional[int] = None  # seconds, None = no limit

    # CLI defaults
    default_kind: str = "cli"
    default_framework: str = "flag"

    @property
    def base_dir(self) -> Path:
        """Projects directory with environment variables expanded."""
        return normalize_base(os.path.expandvars(self.projects_dir))

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "GoprojConfig":
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })


def load_config(path: Optional[Path] = None) -> GoprojConfig:
    """Load configuration from disk and the environment.

    Args:
        path: Explicit config file (defaults to $GOPROJ_CONFIG, then
            ~/.config/goproj/config.json)

    Returns:
        GoprojConfig; defaults are used when no file exists or it is corrupt
    """
    if path is None:
        path = Path(os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_PATH))
    path = path.expanduser()

    data = {}
    if path.exists():
        try:
            loaded = json.loads(path.read_text())
            if isinstance(loaded, dict):
                data = loaded
            else:
                logger.warning("Config file %s is not a JSON object, ignoring", path)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not read config file %s: %s. Using defaults.", path, e)

    projects_dir = os.environ.get(PROJECTS_DIR_ENV)
    if projects_dir:
        data["projects_dir"] = projects_dir

    return GoprojConfig.from_dict(data)
