# env_detector/cli/publish.py
from __future__ import annotations

import click
from flask import current_app

from env_detector.cli import echo_report, envdetector, make_confirm
from env_detector.config import Options
from env_detector.publisher import install_detector, publish, resolve_steps


@envdetector.command("install")
@click.option("--force", is_flag=True, help="Overwrite an existing detector file.")
def install_cmd(force: bool) -> None:
    """Write bootstrap/environment_detector.py (required before `publish --bootstrap`)."""
    opts = Options.from_app(current_app)
    echo_report(install_detector(opts, force=force))


@envdetector.command("publish")
@click.option("-a", "--all", "all_", is_flag=True, help="Writes all [Default].")
@click.option("-b", "--bootstrap", is_flag=True, help="Inject the detector into the entry file.")
@click.option("-c", "--configs", is_flag=True, help="(Over)Writes the .env.<key> config files.")
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="Overwrite existing .env files without asking.")
def publish_cmd(all_: bool, bootstrap: bool, configs: bool, assume_yes: bool) -> None:
    """Generates the environment detector bootstrap and config files."""
    run_configs, run_bootstrap = resolve_steps(all_, bootstrap, configs)
    opts = Options.from_app(current_app)
    report = publish(
        opts,
        configs=run_configs,
        bootstrap=run_bootstrap,
        confirm=make_confirm(assume_yes),
    )
    echo_report(report)
