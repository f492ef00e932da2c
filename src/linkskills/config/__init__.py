"""Optional YAML configuration for linkskills runs."""

from __future__ import annotations

from linkskills.config.loader import load_config
from linkskills.config.model import LinkerConfig

__all__ = ["LinkerConfig", "load_config"]
