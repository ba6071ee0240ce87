# env_detector/config/__init__.py
from __future__ import annotations

from .config import EnvDetectorConfig, Options, default_root, parse_environments

__all__ = [
    "EnvDetectorConfig",
    "Options",
    "default_root",
    "parse_environments",
]
