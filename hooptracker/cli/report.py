"""Report commands - player, team and leaderboard views of a replayed script."""

import click

from ..models.reports import LeaderboardCategory, ReportWindow
from ..services.reports import leaderboard_frame
from .replay import load_or_fail

WINDOW_CHOICES = [w.value for w in ReportWindow]
CATEGORY_CHOICES = [c.value for c in LeaderboardCategory]


@click.group()
def report():
    """Aggregate reports over the games in an event script."""
    pass


@report.command()
@click.argument('script', type=click.Path(exists=True, dir_okay=False))
@click.argument('player_id')
@click.option('--window', type=click.Choice(WINDOW_CHOICES), default='all', help='Most recent games to include')
@click.option('--game', 'game_id', default=None, help='Restrict to a single game id')
@click.pass_context
def player(ctx, script, player_id, window, game_id):
    """Per-game averages and game log for one player."""
    service, _ = load_or_fail(ctx, script)
    result = service.player_report(player_id, window=window, game_id=game_id)
    if result is None:
        raise click.ClickException(f"Player {player_id} not found")

    agg = result.aggregate
    click.echo(f"{result.player.name} (#{result.player.number}) - {result.games_played} games")
    click.echo(
        f"  {agg.pts:.1f} PTS  {agg.reb:.1f} REB  {agg.ast:.1f} AST  "
        f"{agg.stl:.1f} STL  {agg.blk:.1f} BLK  {agg.to:.1f} TO  {agg.eff:.1f} EFF"
    )
    click.echo(f"  FG {agg.fg_pct:.1f}%  3P {agg.fg3_pct:.1f}%  FT {agg.ft_pct:.1f}%")

    if result.game_lines:
        click.echo("\nGame log:")
        for line in result.game_lines:
            click.echo(
                f"  {line.game_date:%Y-%m-%d} {line.game_name:<20} "
                f"{line.pts} PTS {line.reb} REB {line.ast} AST {line.eff} EFF"
            )
    if result.flags:
        click.echo(f"\nFlags: {', '.join(result.flags)}")


@report.command()
@click.argument('script', type=click.Path(exists=True, dir_okay=False))
@click.option('--window', type=click.Choice(WINDOW_CHOICES), default='all', help='Most recent games to include')
@click.pass_context
def team(ctx, script, window):
    """Team record, averages and leaders."""
    service, _ = load_or_fail(ctx, script)
    result = service.team_report(window=window)

    click.echo(f"{result.team or 'Team'}: {result.record} ({result.win_pct:.1f}%) over {result.games_played} games")
    click.echo(f"  {result.pts:.1f} PTS  {result.opp_pts:.1f} OPP  {result.point_differential:+.1f} DIFF")
    click.echo(
        f"  {result.reb:.1f} REB  {result.ast:.1f} AST  {result.stl:.1f} STL  "
        f"{result.blk:.1f} BLK  {result.to:.1f} TO"
    )
    click.echo(f"  FG {result.fg_pct:.1f}%  3P {result.fg3_pct:.1f}%  FT {result.ft_pct:.1f}%")

    for title, leaders in (
        ('Scoring', result.top_scorers),
        ('Rebounding', result.top_rebounders),
        ('Playmaking', result.top_playmakers),
    ):
        if not leaders:
            continue
        click.echo(f"\n{title}:")
        for rank, leader in enumerate(leaders, 1):
            click.echo(f"  {rank}. {leader.player.name:<20} {leader.value:.1f} ({leader.games_played} GP)")


@report.command()
@click.argument('script', type=click.Path(exists=True, dir_okay=False))
@click.option('--category', type=click.Choice(CATEGORY_CHOICES), default='offense', help='Ranking category')
@click.option('--game', 'game_id', default=None, help='Restrict to a single game id')
@click.pass_context
def leaders(ctx, script, category, game_id):
    """Rank every player by a leaderboard category."""
    service, _ = load_or_fail(ctx, script)
    rows = service.leaderboard(category=category, game_id=game_id)
    if not rows:
        click.echo("No players")
        return
    frame = leaderboard_frame(rows).round(1)
    click.echo(frame.to_string(index=False))
