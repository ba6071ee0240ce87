# env_detector/cli/__init__.py
# `flask envdetector ...` command group.

from __future__ import annotations

from typing import Optional

import click
from flask.cli import AppGroup

from env_detector.log import setup_logging
from env_detector.report import Level, Report

STYLES = {
    Level.INFO: {"fg": "green"},
    Level.COMMENT: {"fg": "yellow"},
    Level.WARN: {"fg": "yellow", "bold": True},
    Level.ERROR: {"fg": "red"},
    Level.ALERT: {"fg": "red", "bold": True},
}

PREFIX = {
    Level.WARN: "⚠️  ",
    Level.ERROR: "❌ ",
    Level.ALERT: "🚨 ",
}


@click.group("envdetector", cls=AppGroup)
@click.option(
    "--log-style",
    type=click.Choice(["color", "json", "plain"]),
    default=None,
    help="Configure env_detector logging output (default: leave host logging as is).",
)
@click.option("--debug", is_flag=True, help="Debug-level logging.")
def envdetector(log_style: Optional[str], debug: bool) -> None:
    """Environment detector setup: publish/unpublish .env files and bootstrap hook."""
    if log_style or debug:
        setup_logging(debug, log_style or "color")


def echo_report(report: Report) -> None:
    for msg in report.messages:
        err = msg.level in (Level.ERROR, Level.ALERT)
        click.secho(PREFIX.get(msg.level, "") + msg.text, err=err, **STYLES[msg.level])


def make_confirm(assume_yes: bool):
    if assume_yes:
        return lambda _question: True
    return lambda question: click.confirm(question, default=False)


# Registers the commands on the group.
from env_detector.cli import publish, unpublish  # noqa: E402,F401

__all__ = ["envdetector", "echo_report", "make_confirm"]
