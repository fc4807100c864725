"""Tests for the CLI commands."""

import pytest
from click.testing import CliRunner

from hooptracker.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestReplayCommand:
    """Tests for `hooptracker replay`."""

    def test_replay(self, runner, script_path):
        result = runner.invoke(cli, ['replay', script_path])

        assert result.exit_code == 0, result.output
        assert 'Opener: Hawks 3-2 Owls' in result.output
        assert 'Ann Avery' in result.output
        assert 'Hot: Paint | Cold: Left Corner 3' in result.output
        assert 'Q1 12:00 | completed | +1' in result.output
        assert 'On court: Ann Avery' in result.output
        assert 'heavy contest    1 (100%)' in result.output
        assert 'Defense: 1/1 contests forced misses (100.0%)' in result.output
        assert 'Events: 9 applied, 1 skipped, 2 errors' in result.output

    def test_replay_without_sections(self, runner, script_path):
        result = runner.invoke(cli, ['replay', script_path, '--no-zones', '--no-defense'])

        assert result.exit_code == 0
        assert 'Zones:' not in result.output
        assert 'Defense:' not in result.output

    def test_bad_script(self, runner, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{not json', encoding='utf-8')

        result = runner.invoke(cli, ['replay', str(path)])
        assert result.exit_code == 1
        assert 'Could not load' in result.output


class TestReportCommands:
    """Tests for `hooptracker report`."""

    def test_player(self, runner, script_path):
        result = runner.invoke(cli, ['report', 'player', script_path, 'p1'])

        assert result.exit_code == 0, result.output
        assert 'Ann Avery (#23) - 2 games' in result.output
        assert '2.5 PTS' in result.output
        assert 'Game log:' in result.output

    def test_player_window_and_game(self, runner, script_path):
        result = runner.invoke(cli, ['report', 'player', script_path, 'p1', '--window', 'last5', '--game', 'g1'])

        assert result.exit_code == 0
        assert '1 games' in result.output

    def test_unknown_player(self, runner, script_path):
        result = runner.invoke(cli, ['report', 'player', script_path, 'ghost'])
        assert result.exit_code == 1
        assert 'Player ghost not found' in result.output

    def test_team(self, runner, script_path):
        result = runner.invoke(cli, ['report', 'team', script_path])

        assert result.exit_code == 0, result.output
        assert 'Hawks: 1-1 (50.0%) over 2 games' in result.output
        assert 'Scoring:' in result.output

    def test_leaders(self, runner, script_path):
        result = runner.invoke(cli, ['report', 'leaders', script_path, '--category', 'defense'])

        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert 'player_id' in lines[0]
        assert lines[1].split()[0] == 'p2'

    def test_invalid_window(self, runner, script_path):
        result = runner.invoke(cli, ['report', 'team', script_path, '--window', 'last3'])
        assert result.exit_code == 2


class TestGroupOptions:

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '1.0.0' in result.output

    def test_leaders_override(self, runner, script_path):
        """Test --leaders caps each team leaderboard."""
        result = runner.invoke(cli, ['--leaders', '1', 'report', 'team', script_path])

        assert result.exit_code == 0, result.output
        scoring = result.output.split('Scoring:')[1].split('\n\n')[0]
        assert scoring.strip().startswith('1. Ann Avery')
        assert 'Bea Brooks' not in scoring


class TestMalformedScripts:

    def test_game_entry_not_an_object(self, runner, tmp_path):
        path = tmp_path / 'odd.json'
        path.write_text('{"games": [5]}', encoding='utf-8')

        result = runner.invoke(cli, ['replay', str(path)])
        assert result.exit_code == 1
        assert 'Could not load' in result.output

    def test_bad_event_reported_not_raised(self, runner, tmp_path):
        path = tmp_path / 'bad_event.json'
        path.write_text(
            '{"games": [{"id": "g1", "players": [{"id": "p1"}], "events": ['
            '{"type": "shot", "player": "p1", "x": null, "y": 1, "made": true}]}]}',
            encoding='utf-8',
        )

        result = runner.invoke(cli, ['replay', str(path)])
        assert result.exit_code == 0, result.output
        assert 'Events: 0 applied, 0 skipped, 1 errors' in result.output
