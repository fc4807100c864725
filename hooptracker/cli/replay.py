"""Replay command."""

import click

from ..models.zones import ZoneMap
from ..services.base import ResultStatus, summarize
from ..services.reports import box_score_frame
from .events import build_service


def load_or_fail(ctx, script):
    """Replay a script, turning unreadable input into a CLI error."""
    try:
        return build_service(script, ctx.obj['config'])
    except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
        raise click.ClickException(f"Could not load {script}: {e}")


@click.command()
@click.argument('script', type=click.Path(exists=True, dir_okay=False))
@click.option('--zones/--no-zones', default=True, help='Print the zone efficiency map')
@click.option('--defense/--no-defense', default=True, help='Print team defensive impact')
@click.pass_context
def replay(ctx, script, zones, defense):
    """Replay an event script and print each game's box score."""
    service, results = load_or_fail(ctx, script)

    for game in service.get_games():
        click.echo("=" * 60)
        click.echo(str(game))
        click.echo(f"Q{game.quarter} {game.time_remaining} | {game.status.value} | {game.score.differential:+d}")
        on_court = game.active_players()
        if on_court:
            click.echo(f"On court: {', '.join(p.name for p in on_court)}")
        click.echo("=" * 60)

        frame = box_score_frame(game)
        click.echo(frame.to_string(index=False) if not frame.empty else "No players")

        shots = service.get_shots_by_game(game.id)
        if zones:
            zone_map = ZoneMap(service.zone_efficiency_map(shots))
            click.echo("\nZones:")
            for zone, stats in zone_map.zones.items():
                click.echo(f"  {zone.value:<16} {stats.made}/{stats.total} ({stats.efficiency:.1f}%)")
            hot, cold = zone_map.hottest_zone(), zone_map.coldest_zone()
            if hot is not None:
                click.echo(f"  Hot: {hot.value} | Cold: {cold.value}")

        if defense:
            impact = service.team_defensive_impact(game.id)
            click.echo(
                f"\nDefense: {impact.successful_contests}/{impact.total_contests} contests forced misses "
                f"({impact.contest_efficiency:.1f}%)"
            )
            for level, count in impact.contests_by_level.items():
                if count:
                    click.echo(f"  {level.label:<16} {count} ({impact.level_share(level):.0f}%)")
        click.echo("")

    counts = summarize(results)
    click.echo(
        f"Events: {counts[ResultStatus.SUCCESS]} applied, "
        f"{counts[ResultStatus.SKIPPED]} skipped, {counts[ResultStatus.ERROR]} errors"
    )
    for result in results:
        if result.is_error:
            click.echo(click.style(f"  {result}", fg='red'))
