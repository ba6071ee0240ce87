# env_detector/files.py
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Sequence


def check_access(path: Path) -> Optional[str]:
    """Return the first failing condition as a message, or None when usable."""
    if not path.exists():
        return f"{path} does not exist"
    if not os.access(path, os.R_OK):
        return f"{path} cannot be read"
    if not os.access(path, os.W_OK):
        return f"{path} is not writable"
    return None


# newline="" keeps CRLF/LF exactly as found on disk; surrogateescape lets
# non-UTF-8 bytes (latin-1 sources, etc.) pass through unchanged.
def read_text(path: Path) -> str:
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        return fh.read()


def split_lines(text: str) -> List[str]:
    """Split on "\\n" only, keeping it on each line."""
    parts = text.split("\n")
    lines = [p + "\n" for p in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def read_lines(path: Path) -> List[str]:
    return split_lines(read_text(path))


def write_text(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        fh.write(text)


def write_lines(path: Path, lines: Sequence[str]) -> None:
    write_text(path, "".join(lines))
