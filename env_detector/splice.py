# env_detector/splice.py
# Line-level splicing of the bootstrap snippet around the entry file's last return.

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

DEFAULT_TOKEN = "return"
DEFAULT_WINDOW = 6


def find_marker_index(
    lines: Sequence[str],
    token: str = DEFAULT_TOKEN,
    window: int = DEFAULT_WINDOW,
) -> Optional[int]:
    """
    Index of the last line within the final `window` lines that contains
    `token` (case-insensitive), or None.
    """
    if window <= 0 or not lines:
        return None

    needle = token.lower()
    stop = max(len(lines) - window, 0)
    for i in range(len(lines) - 1, stop - 1, -1):
        if needle in lines[i].lower():
            return i
    return None


def insert_before_marker(
    lines: Sequence[str],
    snippet_lines: Sequence[str],
    token: str = DEFAULT_TOKEN,
    window: int = DEFAULT_WINDOW,
) -> Tuple[List[str], Optional[int]]:
    """
    Return (new_lines, index). When no marker is found the lines come back
    unchanged with index None.
    """
    idx = find_marker_index(lines, token, window)
    if idx is None:
        return list(lines), None
    return list(lines[:idx]) + list(snippet_lines) + list(lines[idx:]), idx


def mentions(text: str, needle: str) -> bool:
    return needle.lower() in text.lower()


def remove_snippet(text: str, snippet: str) -> Tuple[str, int]:
    """Drop every literal occurrence of `snippet`; returns (text, count)."""
    if not snippet:
        return text, 0
    count = text.count(snippet)
    return text.replace(snippet, ""), count
