# env_detector/cli/unpublish.py
from __future__ import annotations

import click
from flask import current_app

from env_detector.cli import echo_report, envdetector, make_confirm
from env_detector.config import Options
from env_detector.unpublisher import unpublish


@envdetector.command("unpublish")
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="Strip the snippet without asking when no backup exists.")
def unpublish_cmd(assume_yes: bool) -> None:
    """
    Removes the environment detector file and restores the entry file from its
    latest backup. Leaves previously created .env files in place.
    """
    opts = Options.from_app(current_app)
    echo_report(unpublish(opts, confirm=make_confirm(assume_yes)))
