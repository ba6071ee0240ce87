# env_detector/stubs/__init__.py
from __future__ import annotations

from importlib import resources


def load_stub(name: str) -> str:
    """Packaged stub text, read verbatim (newlines untouched)."""
    with resources.files(__name__).joinpath(name).open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


__all__ = ["load_stub"]
