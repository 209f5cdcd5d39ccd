# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""Command-line interface for ttyreporter."""

import logging
import time
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console

from ttyreporter.config import ReporterConfig
from ttyreporter.errors import ReporterError
from ttyreporter.events import read_events
from ttyreporter.reporter import TTYReporter

logger = logging.getLogger(__name__)

console = Console()


def _configure_debug_logging() -> Path:
    # Write debug logs to file (the terminal belongs to the reporter)
    log_file = Path('.ttyreporter/debug.log')
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, mode='w')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    logging.getLogger('ttyreporter').addHandler(file_handler)
    logging.getLogger('ttyreporter').setLevel(logging.DEBUG)
    return log_file


@click.group()
@click.version_option(version="0.1.0", prog_name="ttyreporter")
def cli():
    """ttyreporter - live terminal view of test execution events.

    \b
    Quick start:
        ttyreporter replay events.jsonl
        my-test-engine --json | ttyreporter replay -
    """
    pass


@cli.command()
@click.argument("events", type=click.File("r"))
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML reporter config file.",
)
@click.option(
    "--failure-only/--no-failure-only",
    default=None,
    help="Show only failing tests and assertions.",
)
@click.option(
    "--renumber/--no-renumber",
    default=None,
    help="Number assertions sequentially instead of using their ids.",
)
@click.option(
    "--banner/--no-banner",
    default=None,
    help="Finish with the summary panel (default) or a one-line banner.",
)
@click.option(
    "--time/--no-time",
    "show_time",
    default=None,
    help="Show elapsed time for tests and assertions.",
)
@click.option(
    "--show-data/--hide-data",
    default=None,
    help="Show operator, expected/actual values and stack for failures.",
)
@click.option(
    "--delay",
    type=float,
    default=0.0,
    show_default=True,
    help="Seconds to wait between events.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging to .ttyreporter/debug.log.",
)
def replay(
    events,
    config: Optional[str],
    failure_only: Optional[bool],
    renumber: Optional[bool],
    banner: Optional[bool],
    show_time: Optional[bool],
    show_data: Optional[bool],
    delay: float,
    debug: bool,
):
    """Replay a recorded JSON Lines event stream on the terminal.

    EVENTS is a file with one event object per line, or - for stdin.

    \b
    Examples:
        ttyreporter replay run.jsonl
        ttyreporter replay run.jsonl --failure-only --show-data
        ttyreporter replay run.jsonl -c reporter.yaml --delay 0.05
    """
    if debug:
        log_file = _configure_debug_logging()
        console.print(f"[dim]Debug logs: {log_file}[/dim]")

    try:
        reporter_config = ReporterConfig.from_yaml(config) if config else ReporterConfig()
    except (ValueError, yaml.YAMLError) as e:
        raise click.ClickException(str(e))

    overrides = {
        "failure_only": failure_only,
        "renumber_asserts": renumber,
        "show_banner": banner,
        "show_time": show_time,
        "show_data": show_data,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}

    try:
        reporter = TTYReporter(console, reporter_config, **overrides)
        count = 0
        for event in read_events(events):
            if reporter.closed:
                logger.warning("Reporter closed; ignoring remaining events")
                break
            reporter.process(event)
            count += 1
            if delay:
                time.sleep(delay)
    except ReporterError as e:
        raise click.ClickException(str(e))

    logger.debug(f"[REPLAY] processed {count} events")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
