"""Config loading and normalization."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from linkskills.config.model import LinkerConfig
from linkskills.constants.agents import AGENT_IDS
from linkskills.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_KEY_COLOR, CONFIG_KEY_SKILLS_DIRS
from linkskills.exceptions import ConfigError
from linkskills.utils import suggest_name

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None = None) -> LinkerConfig:
    """Load and validate config from an explicit YAML file.

    Without a path the defaults apply; nothing is discovered implicitly.
    """
    if config_path is None:
        return LinkerConfig()

    path = config_path.expanduser().resolve()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in raw:
        if key not in CONFIG_ALLOWED_KEYS:
            hint = suggest_name(str(key), CONFIG_ALLOWED_KEYS)
            raise ConfigError(f"Unknown config key `{key}`" + (f" ({hint})" if hint else ""))

    skills_dirs = _parse_skills_dirs(raw.get(CONFIG_KEY_SKILLS_DIRS), base=path.parent)

    color = raw.get(CONFIG_KEY_COLOR)
    if color is not None and not isinstance(color, bool):
        raise ConfigError(f"{CONFIG_KEY_COLOR} must be a boolean")

    logger.debug("Loaded config from %s (%d skills dir override(s))", path, len(skills_dirs))
    return LinkerConfig(skills_dirs=skills_dirs, color=color)


def _parse_skills_dirs(raw: Any, *, base: Path) -> dict[str, Path]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{CONFIG_KEY_SKILLS_DIRS} must be a mapping of agent to directory")

    resolved: dict[str, Path] = {}
    for agent_id, value in raw.items():
        if agent_id not in AGENT_IDS:
            hint = suggest_name(str(agent_id), AGENT_IDS)
            raise ConfigError(
                f"{CONFIG_KEY_SKILLS_DIRS}: unknown agent `{agent_id}`" + (f" ({hint})" if hint else "")
            )
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"{CONFIG_KEY_SKILLS_DIRS}.{agent_id} must be a non-empty string")
        directory = Path(value.strip()).expanduser()
        if not directory.is_absolute():
            directory = base / directory
        resolved[agent_id] = directory
    return resolved
