"""Tests for data models."""

from datetime import datetime

import pytest

from hooptracker.models.defense import DefenderImpact, TeamDefensiveImpact
from hooptracker.models.game import Game, Score
from hooptracker.models.player import PlayerStats, StatKey
from hooptracker.models.reports import ReportWindow
from hooptracker.models.shot import (
    ContestLevel, DefendedShot, DefenderInput, Shot, ShotInput, ShotType,
)
from hooptracker.models.zones import CourtPosition, ShotEfficiency, Zone, ZoneDefense, ZoneMap


class TestPlayerStats:
    """Tests for PlayerStats derived values."""

    def test_points_derived_from_counters(self):
        stats = PlayerStats(two_made=3, three_made=2, ft_made=4, ft_miss=2)
        assert stats.points == 16
        assert stats.get('PTS') == 16
        assert stats.to_dict()['PTS'] == 16

    def test_shooting_splits(self):
        stats = PlayerStats(two_made=3, two_miss=1, three_made=1, three_miss=3, ft_made=3, ft_miss=1)
        assert stats.fgm == 4
        assert stats.fga == 8
        assert stats.fg_pct == pytest.approx(50.0)
        assert stats.fg3_pct == pytest.approx(25.0)
        assert stats.ft_pct == pytest.approx(75.0)

    def test_percentages_zero_without_attempts(self):
        stats = PlayerStats()
        assert stats.fg_pct == 0.0
        assert stats.fg3_pct == 0.0
        assert stats.ft_pct == 0.0

    def test_efficiency(self):
        """Test EFF subtracts turnovers and missed shots."""
        stats = PlayerStats(
            two_made=2, two_miss=2, three_made=1, three_miss=1, ft_made=1, ft_miss=1,
            reb_off=1, reb_def=3, assists=5, steals=1, blocks=1, turnovers=2,
        )
        # 8 pts + 4 reb + 5 ast + 1 stl + 1 blk - 2 to - 3 fg misses - 1 ft miss
        assert stats.efficiency == 13

    def test_increment_and_get(self):
        stats = PlayerStats()
        stats.increment(StatKey.REB_OFF)
        stats.increment(StatKey.REB_OFF)
        assert stats.get(StatKey.REB_OFF) == 2
        assert stats.get('REB_OFF') == 2
        assert stats.rebounds == 2

    def test_to_dict_keys(self):
        data = PlayerStats().to_dict()
        assert set(data) == {key.value for key in StatKey} | {'PTS'}


class TestGame:
    """Tests for Game."""

    def test_tie_is_not_a_win(self):
        game = Game(id='g', name='n', team='A', opponent='B', date=datetime(2025, 1, 1), score=Score(9, 9))
        assert not game.is_win
        game.score = Score(10, 9)
        assert game.is_win

    def test_str(self):
        game = Game(id='g', name='Opener', team='A', opponent='B', date=datetime(2025, 1, 1), score=Score(3, 2))
        assert str(game) == '2025-01-01 Opener: A 3-2 B'


class TestShots:
    """Tests for the shot variants."""

    def _fields(self):
        return dict(
            id='s1', game_id='g1', player_id='p1', x=250, y=100, made=True,
            shot_type=ShotType.TWO, quarter=1, timestamp=datetime(2025, 1, 1),
            position=CourtPosition(Zone.PAINT, 75.0),
        )

    def test_plain_shot_has_no_defender(self):
        shot = Shot(**self._fields())
        assert not shot.has_defender
        assert shot.defender_id is None
        assert shot.contest_level is None
        assert shot.points == 2
        assert shot.zone == Zone.PAINT

    def test_defended_shot_requires_defender(self):
        with pytest.raises(ValueError):
            DefendedShot(**self._fields())

    def test_shot_input_coerces_strings(self):
        shot = ShotInput(player_id='p1', x=1, y=2, made=False, shot_type='3PT', quarter=2,
                         defender_id='d1', contest_level='blocked')
        assert shot.shot_type == ShotType.THREE
        assert shot.contest_level == ContestLevel.BLOCKED
        assert shot.defender == DefenderInput(id='d1')
        assert shot.defender.position is None


class TestAggregateModels:

    def test_shot_efficiency_no_data(self):
        empty = ShotEfficiency()
        assert empty.total == 0
        assert empty.efficiency == 0.0
        assert not empty.has_data

    def test_zone_map_hot_and_cold(self):
        zone_map = ZoneMap({
            Zone.PAINT: ShotEfficiency(made=3, missed=1),
            Zone.ABOVE_BREAK_3: ShotEfficiency(made=1, missed=3),
            Zone.LEFT_CORNER_3: ShotEfficiency(),
        })
        assert zone_map.hottest_zone() == Zone.PAINT
        assert zone_map.coldest_zone() == Zone.ABOVE_BREAK_3
        assert ZoneMap().hottest_zone() is None

    def test_team_impact_zero_safe(self):
        impact = TeamDefensiveImpact()
        assert impact.contest_efficiency == 0.0
        assert impact.level_share(ContestLevel.BLOCKED) == 0.0
        assert set(impact.contests_by_level) == set(ContestLevel)

    def test_perimeter_defense(self):
        impact = DefenderImpact(zone_defense={
            Zone.PAINT: ZoneDefense(4, 1),
            Zone.LEFT_CORNER_3: ZoneDefense(2, 2),
            Zone.ABOVE_BREAK_3: ZoneDefense(2, 0),
        })
        combined = impact.perimeter_defense()
        assert combined.contests == 4
        assert combined.efficiency == pytest.approx(50.0)
        assert impact.defender_name == 'Unknown'

    def test_report_window_limits(self):
        assert ReportWindow('all').limit is None
        assert ReportWindow('last5').limit == 5
        assert ReportWindow.LAST_10.limit == 10
