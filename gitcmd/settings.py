import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from . import config
from .utils import load_yaml

logger = logging.getLogger(__name__)

KNOWN_KEYS = ("git_binary", "cwd", "env", "history_file")


@dataclass
class Settings:
    git_binary: str = config.GIT_BINARY
    cwd: Optional[Path] = None
    env: Dict[str, str] = field(default_factory=dict)
    history_file: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        unknown = sorted(set(data) - set(KNOWN_KEYS))
        if unknown:
            raise ValueError(f"Unknown settings keys: {', '.join(unknown)}")
        env = data.get("env") or {}
        if not isinstance(env, dict):
            raise ValueError("Setting 'env' must be a mapping")
        empty = sorted(str(k) for k, v in env.items() if v is None)
        if empty:
            raise ValueError(f"Setting 'env' has no value for: {', '.join(empty)}")
        cwd = data.get("cwd")
        history_file = data.get("history_file")
        return cls(
            git_binary=str(data.get("git_binary") or config.GIT_BINARY),
            cwd=Path(cwd).expanduser() if cwd else None,
            env={str(k): str(v) for k, v in env.items()},
            history_file=Path(history_file).expanduser() if history_file else None,
        )


def config_path(path: Optional[Path] = None) -> Path:
    if path:
        return Path(path)
    env_path = os.environ.get(config.CONFIG_FILE_ENV)
    if env_path:
        return Path(env_path)
    return config.DEFAULT_CONFIG_FILE


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a YAML file, then apply environment overrides.

    A missing or empty file yields the defaults.
    """
    source = config_path(path)
    data = load_yaml(source)
    if data:
        logger.debug("Loaded gitcmd settings from %s", source)
    settings = Settings.from_dict(data)

    binary = os.environ.get(config.GIT_BINARY_ENV)
    if binary:
        settings.git_binary = binary
    history_file = os.environ.get(config.HISTORY_FILE_ENV)
    if history_file:
        settings.history_file = Path(history_file).expanduser()
    return settings
