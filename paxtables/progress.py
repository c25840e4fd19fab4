"""Progress counting with throttled, pluggable reporting."""

from __future__ import annotations

import math
import sys
import time
from typing import TextIO

__all__ = ["Reporter", "Progress", "Textual", "textual_progress"]

_FIRST_REPORT_AFTER = 10.0
_EARLY_REPORT_AFTER = 5.0
_REPORT_INTERVAL = 1.0


def _format_seconds(seconds: float) -> str:
    """A short human readable duration."""
    if not math.isfinite(seconds):
        return "inf"
    if seconds < 60:
        return f"{seconds:.1f}s"
    total = int(round(seconds))
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)
    clock = f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{days}d {clock}" if days else clock


class Reporter:
    """Receives progress reports; the base class ignores them."""

    def report(self, progress: Progress) -> None:
        """Show the state of progress."""

    def clear(self) -> None:
        """Remove whatever report is shown."""


class Progress:
    """Counts processed items and reports speed and estimated time left.

    Without a reporter the progress is inactive and never reports.
    A target of zero keeps reporting active but gives no estimate of time left.
    """

    def __init__(self, reporter: Reporter | None = None, target: int = 0) -> None:
        self._reporter = reporter
        self._target = target
        self._count = 0
        self._start = time.monotonic()
        self._next_time = _FIRST_REPORT_AFTER
        self._next_update: float = 0 if reporter is not None else math.inf

    def _wall(self) -> float:
        return time.monotonic() - self._start

    def increment(self, n: int = 1) -> None:
        """Add n to the count and report if it is time to."""
        self._count += n
        if self._count >= self._next_update:
            self.update()

    def count(self) -> int:
        return self._count

    def target(self) -> int:
        return self._target

    def speed(self) -> float:
        """Items per second of wall time."""
        wall = self._wall()
        return self._count / wall if wall > 0 else 0.0

    def etl(self) -> float:
        """Estimated time left, in seconds."""
        if self._count <= 0 or self._target <= self._count:
            return 0.0
        speed = self.speed()
        if speed <= 0:
            return math.inf
        return (self._target - self._count) / speed

    def update(self) -> None:
        """Report, unless it is too early or the work is nearly done."""
        wall = self._wall()
        if wall < self._next_time and (
            wall < _EARLY_REPORT_AFTER or self._count > 0.75 * self._target
        ):
            return
        self._next_time = wall + _REPORT_INTERVAL

        if self._reporter is not None:
            self._reporter.report(self)

        next_update = int(self._count + 0.01 * self._target)
        if wall > 0:
            by_speed = int(self._count + self._count / wall)
            next_update = min(next_update, by_speed)
        if next_update <= self._count:
            next_update = self._count + 1
        self._next_update = next_update

    def report(self) -> str:
        """The status message."""
        speed = self.speed()
        if speed > 2:
            message = f"{speed:.1f}/s"
        elif speed > 0.001:
            message = f"{speed * 3600:.1f}/h"
        elif speed > 5.5e-6:
            message = f"{speed * 3600 * 24:.1f}/24h"
        else:
            message = "<0.5/24h"

        if self._count < self._target:
            percent = (1000 * self._count // self._target) / 10.0
            return (
                f"{self._count} of {self._target} ({percent:.1f}%) processed doing "
                f"{message}, ETL: {_format_seconds(self.etl())}"
            )
        return f"{self._count} processed doing {message}"

    def clear(self) -> None:
        """Remove the shown report."""
        if self._reporter is not None:
            self._reporter.clear()


class Textual(Reporter):
    """Writes progress on one line of a text stream, standard error by default."""

    def __init__(self, text: str = "", stream: TextIO | None = None) -> None:
        self._text = " " + text + (": " if text else "")
        self._stream = stream
        self._last_length = 0

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def report(self, progress: Progress) -> None:
        message = self._text + progress.report()
        padding = max(0, self._last_length - len(message))
        self._last_length = len(message)
        out = self._out()
        out.write(message + " " * padding + "\r")
        out.flush()

    def clear(self) -> None:
        out = self._out()
        out.write(" " * self._last_length + "\r")
        out.flush()
        self._last_length = 0


def textual_progress(text: str = "", end: int = 0) -> Progress:
    """A Progress reporting to standard error, prefixed by text."""
    return Progress(Textual(text), end)