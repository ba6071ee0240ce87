# env_detector/backups.py
# Timestamped backups of the entry file and lookup of the most recent one.

from __future__ import annotations

import glob
import shutil
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

BACKUP_INFIX = "._bu_"
BACKUP_DATE_FORMAT = "%Y%m%d"

PathLike = Union[str, Path]


def backup_candidates(target: PathLike) -> List[Path]:
    """Every filesystem entry named `<target>.*`."""
    pattern = glob.escape(str(target)) + ".*"
    return [Path(p) for p in glob.glob(pattern)]


def has_backup(target: PathLike) -> bool:
    return bool(backup_candidates(target))


def locate_backup(target: PathLike) -> Optional[Path]:
    """
    Return the most recently modified backup of `target`, or None.

    Equal mtimes are ranked by path string, greatest first, so that
    `._bu_YYYYMMDD` names resolve to the newest date.
    """
    candidates = backup_candidates(target)
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    ranked = sorted(
        candidates,
        key=lambda p: (p.stat().st_mtime, str(p)),
        reverse=True,
    )
    return ranked[0]


def backup_path(target: PathLike, today: Optional[date] = None) -> Path:
    stamp = (today or date.today()).strftime(BACKUP_DATE_FORMAT)
    return Path(f"{target}{BACKUP_INFIX}{stamp}")


def create_backup(target: PathLike, today: Optional[date] = None) -> Path:
    bak = backup_path(target, today)
    shutil.copy2(target, bak)
    return bak
