# env_detector/publisher.py
# Publish: per-environment .env files from the template + bootstrap snippet injection.

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional, Tuple

from env_detector.backups import create_backup, has_backup
from env_detector.config import Options
from env_detector.files import check_access, read_lines, read_text, split_lines, write_lines, write_text
from env_detector.keys import extract_key, generate_random_key, key_length, replace_key
from env_detector.report import Outcome, Report, UnsupportedCipherError, merge
from env_detector.splice import DEFAULT_TOKEN, insert_before_marker

log = logging.getLogger(__name__)

Confirm = Callable[[str], bool]

INSTALL_HINT = "!!Must have run `flask envdetector install`!!"
CONFIG_HINT = "!!Set ENV_DETECTOR_ENVIRONMENTS (e.g. prod=Production,stage=Staging)!!"


def _always(_question: str) -> bool:
    return True


def resolve_steps(all_: bool = False, bootstrap: bool = False, configs: bool = False) -> Tuple[bool, bool]:
    """
    (run_configs, run_bootstrap). No flag at all means everything.
    """
    everything = all_ or not (bootstrap or configs)
    return (everything or configs, everything or bootstrap)


# ----------------------------
# Detector file
# ----------------------------
def install_detector(opts: Options, *, force: bool = False) -> Report:
    """Write the detector file from the packaged stub."""
    from env_detector.stubs import load_stub

    report = Report()
    path = opts.detector_path

    if path.exists() and not force:
        report.warn(f"`{path.name}` already exists (use --force to overwrite)")
        return report.finish(Outcome.SKIPPED)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        write_text(path, load_stub("environment_detector.stub"))
    except OSError as exc:
        return _failed(report, exc, f"writing {path.name}")

    report.comment(f"Installed: {path}")
    return report.finish(Outcome.OK)


# ----------------------------
# Bootstrap injection
# ----------------------------
def inject_bootstrap(opts: Options, *, today: Optional[date] = None) -> Report:
    """
    Back up the entry file and splice the snippet in before its last `return`.

    Nothing is written unless the detector file exists, no backup exists yet,
    the entry file is usable and a return line sits inside the search window.
    """
    report = Report()
    entry = opts.entry_path
    label = entry.name

    if not opts.detector_path.exists():
        report.warn(f"cannot perform bootstrap of {label}")
        report.warn(INSTALL_HINT)
        return report.finish(Outcome.SKIPPED)

    if has_backup(entry):
        report.warn(f"{label} is already backed up.")
        report.comment(f"{label} unchanged")
        return report.finish(Outcome.SKIPPED)

    problem = check_access(entry)
    if problem:
        report.warn(problem)
        return report.finish(Outcome.INVALID)

    try:
        lines = read_lines(entry)
        snippet = opts.snippet_text()
    except OSError as exc:
        return _failed(report, exc, f"reading {label}")

    patched, idx = insert_before_marker(lines, split_lines(snippet), DEFAULT_TOKEN, opts.search_window)
    if idx is None:
        report.warn(f"Could not find return statement in {label}")
        return report.finish(Outcome.NO_MARKER)

    try:
        bak = create_backup(entry, today)
    except OSError as exc:
        log.critical("backup of %s failed", entry, exc_info=True)
        report.alert(str(exc))
        report.error(f"Could not backup {label}")
        return report.finish(Outcome.BACKUP_FAILED)
    report.comment(f"{label} Backed up: {bak.name}")

    try:
        write_lines(entry, patched)
    except OSError as exc:
        log.critical("writing %s failed", entry, exc_info=True)
        report.alert(str(exc))
        report.error(f"Could not bootstrap {label}")
        return report.finish(Outcome.WRITE_FAILED)

    report.comment(f"{label} bootstrapped")
    return report.finish(Outcome.OK)


# ----------------------------
# Config generation
# ----------------------------
def generate_configs(opts: Options, *, confirm: Optional[Confirm] = None) -> Report:
    """
    Write `.env.<key>` for every configured environment.

    New files get a fresh APP_KEY. Existing files are only rewritten after
    confirmation, and keep the APP_KEY they already had.
    """
    confirm = confirm or _always
    report = Report()

    if not opts.environments:
        report.warn("Cannot create configs for environment")
        report.warn(CONFIG_HINT)
        return report.finish(Outcome.SKIPPED)

    if not opts.template_path.exists():
        report.warn(f"Cannot continue without {opts.template} present")
        return report.finish(Outcome.SKIPPED)

    try:
        key_length(opts.cipher)
    except UnsupportedCipherError as exc:
        report.error(str(exc))
        return report.finish(Outcome.ERROR)

    try:
        template = read_text(opts.template_path)
    except OSError as exc:
        return _failed(report, exc, f"reading {opts.template}")

    failures = 0
    for key in opts.environments:
        dest = opts.env_file(key)
        file_name = dest.name

        if not dest.exists():
            secret = generate_random_key(opts.cipher)
        else:
            report.info(f"`{file_name}` detected")
            if not confirm(f"Would you like to overwrite `{file_name}`"):
                report.comment(f"Kept: {file_name}")
                continue
            try:
                secret = extract_key(read_text(dest))
            except OSError as exc:
                log.error("reading %s failed: %s", dest, exc)
                report.warn(f"Could not read: {file_name}")
                failures += 1
                continue
            if secret is None:
                report.comment(f"No APP_KEY in {file_name}; generating a new one")
                secret = generate_random_key(opts.cipher)

        if _write_config(secret, dest, template):
            report.comment(f"Created: {file_name}")
        else:
            report.warn(f"Could not create: {file_name}")
            failures += 1

    return report.finish(Outcome.WRITE_FAILED if failures else Outcome.OK)


def _write_config(secret: str, dest: Path, template: str) -> bool:
    try:
        write_text(dest, replace_key(secret, template))
    except OSError as exc:
        log.error("writing %s failed: %s", dest, exc)
        return False
    return True


def _failed(report: Report, exc: Exception, doing: str) -> Report:
    report.alert(str(exc))
    log.critical("env detector: error while %s", doing, exc_info=True)
    report.error(
        f"An exception has occurred while {doing}. Please check logs for more information"
    )
    return report.finish(Outcome.ERROR)


# ----------------------------
# Whole command
# ----------------------------
def publish(
    opts: Options,
    *,
    configs: bool = True,
    bootstrap: bool = True,
    confirm: Optional[Confirm] = None,
    today: Optional[date] = None,
) -> Report:
    head = Report().info("Started environment detector setup")
    steps = [head]

    if configs:
        steps.append(Report().comment("Publishing configs"))
        steps.append(generate_configs(opts, confirm=confirm))
        steps.append(Report().comment("Finished publishing configs"))

    if bootstrap:
        label = opts.entry_file
        steps.append(Report().comment(f"Bootstrapping {label}"))
        steps.append(inject_bootstrap(opts, today=today))
        steps.append(Report().comment(f"Finished bootstrapping {label}"))

    steps.append(Report().info("Finished environment detector setup"))
    return merge(steps)
