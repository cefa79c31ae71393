"""Application-boundary state: persisted settings and the config store."""

from __future__ import annotations

from .config import ConfigStore, load_config, save_config

__all__ = ["ConfigStore", "load_config", "save_config"]
