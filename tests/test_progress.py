import io
from unittest import mock

import pytest

from paxtables.progress import Progress, Reporter, Textual, textual_progress


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class Recorder(Reporter):
    def __init__(self):
        self.counts = []
        self.cleared = 0

    def report(self, progress):
        self.counts.append(progress.count())

    def clear(self):
        self.cleared += 1


@pytest.fixture
def clock():
    fake = FakeClock()
    with mock.patch("time.monotonic", new=fake):
        yield fake


def test_inactive_progress_counts(clock):
    progress = Progress()
    for _ in range(7):
        progress.increment()
    progress.increment(3)
    assert progress.count() == 10
    assert progress.target() == 0


def test_speed_and_finished_report(clock):
    progress = Progress()
    progress.increment(100)
    clock.now += 10
    assert progress.speed() == pytest.approx(10.0)
    assert progress.report() == "100 processed doing 10.0/s"


def test_speed_zero_without_elapsed_time(clock):
    progress = Progress()
    progress.increment(5)
    assert progress.speed() == 0.0


def test_etl(clock):
    progress = Progress(Recorder(), 300)
    clock.now += 1
    progress.increment(100)
    clock.now += 9
    assert progress.etl() == pytest.approx(20.0)


def test_etl_zero_when_done_or_not_started(clock):
    progress = Progress(None, 10)
    assert progress.etl() == 0.0
    progress.increment(10)
    clock.now += 5
    assert progress.etl() == 0.0


def test_report_in_progress(clock):
    progress = Progress(None, 200)
    progress.increment(50)
    clock.now += 10
    assert progress.report().startswith("50 of 200 (25.0%) processed doing 5.0/s, ETL: ")


def test_no_early_report_then_report(clock):
    recorder = Recorder()
    progress = Progress(recorder, 100)
    clock.now += 1
    progress.increment()
    assert recorder.counts == []
    clock.now += 10
    progress.increment()
    assert recorder.counts == [2]


def test_clear_forwards_to_reporter(clock):
    recorder = Recorder()
    progress = Progress(recorder, 10)
    progress.clear()
    assert recorder.cleared == 1


def test_textual_report_and_clear(clock):
    stream = io.StringIO()
    reporter = Textual("Working", stream)
    progress = Progress(reporter)
    progress.increment(4)
    clock.now += 2
    reporter.report(progress)
    written = stream.getvalue()
    assert written == " Working: " + progress.report() + "\r"
    length = len(written) - 1
    reporter.clear()
    assert stream.getvalue() == written + " " * length + "\r"


def test_textual_pads_shorter_message(clock):
    stream = io.StringIO()
    reporter = Textual("", stream)
    long_progress = Progress(None, 1000)
    long_progress.increment(10)
    short_progress = Progress()
    clock.now += 4
    reporter.report(long_progress)
    first = stream.getvalue()
    reporter.report(short_progress)
    second = stream.getvalue()[len(first):]
    assert len(second) == len(first)
    assert second.startswith(" " + short_progress.report())


def test_textual_progress_factory(clock):
    progress = textual_progress("Files", 42)
    assert progress.target() == 42
    assert progress.count() == 0