# env_detector/config/config.py
# Env Detector configuration (env-first, overridable from app.config)

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from env_detector.splice import DEFAULT_WINDOW


# ----------------------------
# Env helpers
# ----------------------------
def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    if v is None:
        return default
    s = str(v).strip()
    return s if s else default


def _int(name: str, default: int) -> int:
    v = _env(name)
    if v is None:
        return default
    try:
        return int(str(v).strip())
    except Exception:
        return default


def parse_environments(raw: Optional[str]) -> Dict[str, str]:
    """
    "prod=Production,stage=Staging" -> {"prod": "Production", "stage": "Staging"}
    A bare key maps to itself.
    """
    out: Dict[str, str] = {}
    for part in (raw or "").split(","):
        part = part.strip()
        if not part:
            continue
        key, _, name = part.partition("=")
        key = key.strip()
        if key:
            out[key] = name.strip() or key
    return out


def default_root(app, template: Optional[str] = None) -> Path:
    """
    Project root when ENV_DETECTOR_ROOT is not set.
    Priority:
      1) app.root_path, if it holds the template (flat layout: ./app.py)
      2) its parent, if that holds the template (package layout: ./app/__init__.py)
      3) current working directory
    """
    name = template or ".env.example"
    here = Path(app.root_path)
    for candidate in (here, here.parent):
        if (candidate / name).exists():
            return candidate
    return Path.cwd()


# ----------------------------
# Defaults applied to app.config
# ----------------------------
class EnvDetectorConfig:
    """
    Defaults for every ENV_DETECTOR_* key.
    EnvDetector.init_app() copies these with app.config.setdefault(), so values
    already present in the host config always win.
    """

    ENV_DETECTOR_ENVIRONMENTS = parse_environments(_env("ENV_DETECTOR_ENVIRONMENTS"))
    ENV_DETECTOR_ROOT = _env("ENV_DETECTOR_ROOT")
    ENV_DETECTOR_BOOTSTRAP_DIR = _env("ENV_DETECTOR_BOOTSTRAP_DIR", "bootstrap")
    ENV_DETECTOR_ENTRY_FILE = _env("ENV_DETECTOR_ENTRY_FILE", "app.py")
    ENV_DETECTOR_FILE = _env("ENV_DETECTOR_FILE", "environment_detector.py")
    ENV_DETECTOR_TEMPLATE = _env("ENV_DETECTOR_TEMPLATE", ".env.example")
    ENV_DETECTOR_CIPHER = _env("ENV_DETECTOR_CIPHER", "AES-256-CBC")
    ENV_DETECTOR_SEARCH_WINDOW = _int("ENV_DETECTOR_SEARCH_WINDOW", DEFAULT_WINDOW)

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        return {k: getattr(cls, k) for k in dir(cls) if k.startswith("ENV_DETECTOR_")}

    @classmethod
    def init_app(cls, app) -> None:
        for key, value in cls.defaults().items():
            if isinstance(value, dict):
                value = dict(value)
            app.config.setdefault(key, value)


# ----------------------------
# Resolved options
# ----------------------------
@dataclass(frozen=True)
class Options:
    """Everything one publish/unpublish pass needs, resolved up front."""

    root: Path
    environments: Mapping[str, str] = field(default_factory=dict)
    bootstrap_dir: str = "bootstrap"
    entry_file: str = "app.py"
    detector_file: str = "environment_detector.py"
    template: str = ".env.example"
    cipher: str = "AES-256-CBC"
    search_window: int = DEFAULT_WINDOW
    snippet: Optional[str] = None

    @property
    def entry_path(self) -> Path:
        return self.root / self.bootstrap_dir / self.entry_file

    @property
    def detector_path(self) -> Path:
        return self.root / self.bootstrap_dir / self.detector_file

    @property
    def detector_name(self) -> str:
        """Detector file name without its suffix, used to spot the snippet."""
        return Path(self.detector_file).stem

    @property
    def template_path(self) -> Path:
        return self.root / self.template

    def env_file(self, key: str) -> Path:
        return self.root / f".env.{key}"

    def snippet_text(self) -> str:
        if self.snippet is not None:
            return self.snippet
        from env_detector.stubs import load_stub

        # Same rendered text is used for insertion and for removal.
        return load_stub("require.stub").replace("{detector_file}", self.detector_file)

    @classmethod
    def from_app(cls, app) -> "Options":
        cfg = app.config
        root = cfg.get("ENV_DETECTOR_ROOT") or default_root(app, cfg.get("ENV_DETECTOR_TEMPLATE"))
        return cls(
            root=Path(root),
            environments=dict(cfg.get("ENV_DETECTOR_ENVIRONMENTS") or {}),
            bootstrap_dir=cfg.get("ENV_DETECTOR_BOOTSTRAP_DIR") or "bootstrap",
            entry_file=cfg.get("ENV_DETECTOR_ENTRY_FILE") or "app.py",
            detector_file=cfg.get("ENV_DETECTOR_FILE") or "environment_detector.py",
            template=cfg.get("ENV_DETECTOR_TEMPLATE") or ".env.example",
            cipher=cfg.get("ENV_DETECTOR_CIPHER") or "AES-256-CBC",
            search_window=int(cfg.get("ENV_DETECTOR_SEARCH_WINDOW") or DEFAULT_WINDOW),
        )
