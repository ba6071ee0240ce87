# env_detector/__init__.py
# Flask extension: per-environment .env scaffolding + bootstrap detector hook.
#
#   from env_detector import EnvDetector
#   env_detector = EnvDetector(app)        # or env_detector.init_app(app)
#
#   flask envdetector install
#   flask envdetector publish [--all | --bootstrap | --configs]
#   flask envdetector unpublish

from __future__ import annotations

from typing import Optional

from env_detector.config import EnvDetectorConfig, Options
from env_detector.detector import detect_environment
from env_detector.report import EnvDetectorError, Outcome, Report, UnsupportedCipherError

__version__ = "1.0.0"


class EnvDetector:
    def __init__(self, app=None) -> None:
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> None:
        from env_detector.cli import envdetector

        EnvDetectorConfig.init_app(app)
        app.cli.add_command(envdetector)
        app.extensions["env_detector"] = self
        app.logger.debug("env_detector: registered `flask envdetector` commands")

    def options(self, app=None) -> Options:
        from flask import current_app

        return Options.from_app(app or self.app or current_app)

    def detect(self, app=None) -> Optional[str]:
        from flask import current_app

        return detect_environment(app or self.app or current_app._get_current_object())


__all__ = [
    "EnvDetector",
    "EnvDetectorError",
    "Options",
    "Outcome",
    "Report",
    "UnsupportedCipherError",
    "detect_environment",
]
