# env_detector/unpublisher.py
# Unpublish: drop the detector file and put the entry file back the way it was.

from __future__ import annotations

import logging
import shutil
from typing import Callable, Optional

from env_detector.backups import backup_candidates, locate_backup
from env_detector.config import Options
from env_detector.files import check_access, read_text, write_text
from env_detector.report import Outcome, Report, merge
from env_detector.splice import mentions, remove_snippet

log = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


def _never(_question: str) -> bool:
    return False


def remove_detector_file(opts: Options) -> Report:
    report = Report()
    path = opts.detector_path
    name = path.name

    if not path.exists():
        report.warn(f"Could not locate `{name}` for removal")
        return report.finish(Outcome.SKIPPED)

    try:
        path.unlink()
    except OSError as exc:
        log.error("removing %s failed: %s", path, exc)
        report.warn(f"Could not remove: `{name}`")
        return report.finish(Outcome.ERROR)

    report.comment(f"Removed: `{name}`")
    return report.finish(Outcome.OK)


def restore(opts: Options, *, confirm: Optional[Confirm] = None) -> Report:
    """
    Move the newest backup over the entry file. Without a backup, and only
    after confirmation, strip the snippet out of the live file instead.

    Filesystem errors are logged and reported as one generic message.
    """
    confirm = confirm or _never
    report = Report()
    entry = opts.entry_path
    label = entry.name

    try:
        backup = locate_backup(entry)
        if backup is None:
            report.warn(f"No backups of {label} found")
            return _strip_snippet(opts, report, confirm)

        leftovers = sorted(p.name for p in backup_candidates(entry) if p != backup)

        try:
            shutil.move(str(backup), str(entry))
        except OSError as exc:
            log.error("moving %s -> %s failed: %s", backup, entry, exc)
            report.comment("Could not restore latest backup")
            return report.finish(Outcome.WRITE_FAILED)

        report.comment(f"Latest backup restored: {backup.name}")
        if leftovers:
            report.info(f"Older backups left in place: {', '.join(leftovers)}")
        return report.finish(Outcome.OK)
    except OSError as exc:
        report.alert(str(exc))
        log.critical("restoring %s failed", entry, exc_info=True)
        report.error(
            f"An exception has occurred restoring {label}. Please check logs for more information"
        )
        return report.finish(Outcome.ERROR)


def _strip_snippet(opts: Options, report: Report, confirm: Confirm) -> Report:
    entry = opts.entry_path
    label = entry.name
    detect = opts.detector_name

    if not confirm(f"No backup detected, would you like to attempt to modify current {label}"):
        report.comment("Exiting backup restore")
        return report.finish(Outcome.SKIPPED)

    problem = check_access(entry)
    if problem:
        report.warn(problem)
        return report.finish(Outcome.INVALID)

    text = read_text(entry)
    if not mentions(text, detect):
        report.info(f"No mention of environment detector in {label}")
        return report.finish(Outcome.SKIPPED)

    stripped, _count = remove_snippet(text, opts.snippet_text())
    write_text(entry, stripped)

    if mentions(read_text(entry), detect):
        report.info(f"Unable to confirm {detect} require was removed from {label}")
        return report.finish(Outcome.WRITE_FAILED)

    report.info(f"Environment detector require removed from {label}")
    return report.finish(Outcome.OK)


def unpublish(opts: Options, *, confirm: Optional[Confirm] = None) -> Report:
    label = opts.entry_file
    return merge(
        [
            Report().info("Started removing environment detector setup"),
            Report().comment(f"Removing {opts.detector_file}"),
            remove_detector_file(opts),
            Report().comment(f"Finished removing {opts.detector_file}"),
            Report().comment(f"Restoring {label}"),
            restore(opts, confirm=confirm),
            Report().comment(f"Finished restoring {label}"),
            Report().info("Finished removing environment detector setup"),
        ]
    )
