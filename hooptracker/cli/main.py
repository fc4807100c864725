"""
HoopTracker CLI

Replays recorded game events and prints box scores and reports.

Usage:
    hooptracker [OPTIONS] COMMAND [ARGS]...

Commands:
    replay    Replay an event script and print box scores
    report    Player, team and leaderboard reports
"""

import logging
import sys

import click
from dotenv import load_dotenv

from .. import __version__
from ..config import Config

# Load .env file
load_dotenv()


def setup_logging(verbose: bool, quiet: bool = False, level_name: str = 'INFO'):
    """Send log records to stdout, message only."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.group()
@click.version_option(__version__, prog_name='hooptracker')
@click.option('--min-participation', type=float, default=None,
              help='Share of games a player needs to appear in team leaders')
@click.option('--leaders', 'leaders_count', type=int, default=None, help='Players listed per team leaderboard')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, min_participation, leaders_count, verbose, quiet):
    """HoopTracker - Basketball shot and box-score tracking."""
    config = Config.from_env()
    if min_participation is not None:
        config.report.min_participation = min_participation
    if leaders_count is not None:
        config.report.leaders_count = leaders_count

    setup_logging(verbose, quiet, config.log_level)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config


from .replay import replay  # noqa: E402
from .report import report  # noqa: E402

cli.add_command(replay)
cli.add_command(report)


if __name__ == '__main__':
    cli()
