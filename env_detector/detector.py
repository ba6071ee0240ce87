# env_detector/detector.py
# Runtime side: pick the .env.<key> file for this process and load it.

from __future__ import annotations

import logging
import os
import socket
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from env_detector.config import EnvDetectorConfig, default_root

log = logging.getLogger(__name__)


def resolve_environment(
    environments: Mapping[str, str],
    *,
    hostname: Optional[str] = None,
    explicit: Optional[str] = None,
) -> Optional[str]:
    """
    Choose an environment key.
    Priority:
      1) explicit key (APP_ENV), if it is configured
      2) key whose configured name matches the host name (case-insensitive)
      3) None
    """
    if not environments:
        return None

    if explicit:
        key = explicit.strip()
        if key in environments:
            return key
        log.warning("APP_ENV=%s is not a configured environment; falling back to host name", key)

    host = (hostname if hostname is not None else socket.gethostname()).strip().lower()
    for key, name in environments.items():
        if host and str(name).strip().lower() == host:
            return key
    return None


def detect_environment(
    app=None,
    *,
    environments: Optional[Mapping[str, str]] = None,
    hostname: Optional[str] = None,
    root: Optional[Path] = None,
) -> Optional[str]:
    """
    Load `.env.<key>` for the detected environment with override=False so
    variables already set in the process environment win.

    Returns the key that was detected, or None.
    """
    if environments is None:
        if app is not None:
            environments = app.config.get("ENV_DETECTOR_ENVIRONMENTS")
        if environments is None:
            environments = EnvDetectorConfig.ENV_DETECTOR_ENVIRONMENTS

    if root is None:
        if app is not None and app.config.get("ENV_DETECTOR_ROOT"):
            root = Path(app.config["ENV_DETECTOR_ROOT"])
        elif app is not None:
            root = default_root(app, app.config.get("ENV_DETECTOR_TEMPLATE"))
        else:
            root = Path.cwd()

    key = resolve_environment(environments or {}, hostname=hostname, explicit=os.getenv("APP_ENV"))
    if key is None:
        log.info("env detector: no environment matched; nothing loaded")
    else:
        env_file = Path(root) / f".env.{key}"
        if env_file.is_file():
            load_dotenv(env_file, override=False)
            log.info("env detector: loaded %s", env_file.name)
        else:
            log.warning("env detector: %s not found", env_file)

    if app is not None:
        app.config["ENV_DETECTOR_ACTIVE"] = key
    return key
