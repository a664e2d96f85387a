"""Command line interface for Progress Reporter."""

import random
import time

import click
from rich.console import Console

from progress_reporter import __version__
from progress_reporter.config import ReporterConfig
from progress_reporter.core.bar import format_progress
from progress_reporter.reporter import ProgressReporter
from progress_reporter.utils.log import configure_logging

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug messages to stderr")
def cli(verbose: bool) -> None:
    """Progress Reporter - Self-overwriting terminal progress bar."""
    configure_logging(verbose)


@cli.command()
@click.option("--tasks", type=click.IntRange(min=1), default=10, help="Number of simulated tasks")
@click.option("--min-items", type=click.IntRange(min=0), default=1000, help="Minimum units per task")
@click.option("--max-items", type=click.IntRange(min=0), default=3000, help="Maximum units per task")
@click.option(
    "--interval",
    type=click.IntRange(min=1),
    default=50,
    envvar="PROGRESS_REPORTER_INTERVAL",
    show_default=True,
    help="Redraw every N units",
)
@click.option(
    "--timeout-ms",
    type=click.FloatRange(min=0),
    default=0,
    envvar="PROGRESS_REPORTER_TIMEOUT_MS",
    help="Redraw at most once per N milliseconds (overrides --interval)",
)
@click.option("--delay", type=click.FloatRange(min=0), default=0.001, help="Seconds of simulated work per unit")
@click.option("--seed", type=int, default=None, help="Random seed for task sizes")
@click.option("--cli-only/--always", default=True, help="Only draw when stdout is a terminal")
def demo(
    tasks: int,
    min_items: int,
    max_items: int,
    interval: int,
    timeout_ms: float,
    delay: float,
    seed: int | None,
    cli_only: bool,
) -> None:
    """Run simulated tasks and report their progress.

    Each task processes a random number of units between --min-items and
    --max-items, sleeping --delay seconds per unit.

    Examples:
      # Redraw every 50 units (default)
      progress-reporter demo

      # Redraw at most four times per second
      progress-reporter demo --timeout-ms 250
    """
    if min_items > max_items:
        raise click.BadParameter("--min-items must not exceed --max-items", param_hint="--min-items")

    config = ReporterConfig(interval=interval, timeout_ms=timeout_ms, cli_only=cli_only)
    rng = random.Random(seed)

    console.print("Starting tasks...")

    try:
        for task_num in range(1, tasks + 1):
            total = rng.randint(min_items, max_items)
            reporter = ProgressReporter.from_config(total, f"Doing task {task_num}", config)

            for _ in range(total):
                if delay:
                    time.sleep(delay)
                reporter.report()

            reporter.finish()

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise click.Abort()

    console.print("[green]✓[/green] Process finished")


@cli.command()
@click.argument("current", type=int)
@click.argument("total", type=int)
@click.option("--rate", type=click.FloatRange(min=0), default=0.0, help="Units per second")
@click.option("--description", "-d", type=str, default="", help="Label shown after the bar")
def bar(current: int, total: int, rate: float, description: str) -> None:
    """Print one progress line for CURRENT of TOTAL units."""
    line = format_progress(current, total, round(rate, 3))
    if description:
        line += f" - {description}"
    click.echo(line)


if __name__ == "__main__":
    cli()
