"""Basic usage examples for Progress Reporter."""

import time

from progress_reporter import ProgressCallback, ProgressReporter, ReporterCallback, track


def example_report():
    """Example: Report every 50 iterations."""
    items = range(1, 1001)

    reporter = ProgressReporter(len(items), "Doing something")
    reporter.set_interval(50)

    for _ in items:
        time.sleep(0.001)
        reporter.report()

    reporter.finish()


def example_timeout():
    """Example: Redraw at most four times per second, updating the label."""
    files = [f"file_{n}.dat" for n in range(200)]

    with ProgressReporter(len(files), "Copying") as reporter:
        reporter.set_timeout(250)
        for name in files:
            time.sleep(0.005)
            reporter.report(f"Copying {name}")


def example_track():
    """Example: Wrap an iterable."""
    for _ in track(range(500), description="Crunching numbers"):
        time.sleep(0.002)


def example_with_callback():
    """Example: Drive the reporter from a (current, total) progress callback."""
    total = 300
    reporter = ProgressReporter(total, "Downloading")
    callback: ProgressCallback = ReporterCallback(reporter)

    for done in range(0, total + 1, 30):
        time.sleep(0.05)
        callback(done, total)

    reporter.finish()


if __name__ == '__main__':
    print("Progress Reporter Examples")
    print("=" * 50)
    example_report()
    example_timeout()
    example_track()
    example_with_callback()
