# env_detector/report.py
# Step results as plain values: an outcome plus the operator-facing messages.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List


class Level(str, Enum):
    INFO = "info"
    COMMENT = "comment"
    WARN = "warn"
    ERROR = "error"
    ALERT = "alert"


class Outcome(str, Enum):
    OK = "ok"
    SKIPPED = "skipped"
    INVALID = "invalid"
    NO_MARKER = "no_marker"
    BACKUP_FAILED = "backup_failed"
    WRITE_FAILED = "write_failed"
    ERROR = "error"


class EnvDetectorError(Exception):
    """Base error for the env detector package."""


class UnsupportedCipherError(EnvDetectorError):
    pass


@dataclass(frozen=True)
class Message:
    level: Level
    text: str


@dataclass
class Report:
    """
    Ordered messages for one step and the step's outcome.

    Steps never raise for expected filesystem conditions; they record a
    message and set the outcome instead.
    """

    outcome: Outcome = Outcome.OK
    messages: List[Message] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    def add(self, level: Level, text: str) -> "Report":
        self.messages.append(Message(level, text))
        return self

    def info(self, text: str) -> "Report":
        return self.add(Level.INFO, text)

    def comment(self, text: str) -> "Report":
        return self.add(Level.COMMENT, text)

    def warn(self, text: str) -> "Report":
        return self.add(Level.WARN, text)

    def error(self, text: str) -> "Report":
        return self.add(Level.ERROR, text)

    def alert(self, text: str) -> "Report":
        return self.add(Level.ALERT, text)

    def finish(self, outcome: Outcome) -> "Report":
        self.outcome = outcome
        return self

    def extend(self, other: "Report") -> "Report":
        self.messages.extend(other.messages)
        return self

    def texts(self, *levels: Level) -> List[str]:
        wanted = set(levels)
        return [m.text for m in self.messages if not wanted or m.level in wanted]


def merge(reports: Iterable[Report]) -> Report:
    """Concatenate messages; the first non-OK outcome wins."""
    out = Report()
    for r in reports:
        out.extend(r)
        if out.outcome is Outcome.OK and r.outcome is not Outcome.OK:
            out.outcome = r.outcome
    return out
