"""Tests for defensive aggregation."""

import pytest

from hooptracker.models.shot import ContestLevel, DefenderInput, ShotInput, ShotType
from hooptracker.models.zones import Zone


@pytest.fixture
def contested_game(service, game_id):
    """p1 shoots three times against d1 (make, miss, miss) and once open."""
    def shot(made, **kwargs):
        service.record_shot(game_id, ShotInput(
            player_id='p1', x=250, y=100, made=made, shot_type=ShotType.TWO, quarter=1, **kwargs,
        ))

    shot(True, defender=DefenderInput(id='d1', name='Opp Guard', x=250, y=110))
    shot(False, defender=DefenderInput(id='d1', x=250, y=130))
    shot(False, defender_id='d1')
    shot(True)
    return game_id


class TestDefenderImpact:
    """Tests for defender_impact."""

    def test_successful_contest_is_a_miss(self, service, contested_game):
        impact = service.defender_impact(contested_game, 'd1')

        assert impact.total_contests == 3
        assert impact.successful_contests == 2
        assert impact.contest_efficiency == pytest.approx(66.67, abs=0.01)

    def test_name_from_recorded_shot(self, service, contested_game):
        assert service.defender_impact(contested_game, 'd1').defender_name == 'Opp Guard'

    def test_level_histogram_skips_missing_levels(self, service, contested_game):
        """Test a defended shot with no level is a contest in no bucket."""
        impact = service.defender_impact(contested_game, 'd1')

        assert impact.contests_by_level[ContestLevel.HEAVY_CONTEST] == 1
        assert impact.contests_by_level[ContestLevel.MEDIUM_CONTEST] == 1
        assert sum(impact.contests_by_level.values()) == 2
        assert impact.level_share(ContestLevel.HEAVY_CONTEST) == pytest.approx(33.33, abs=0.01)

    def test_average_distance_counts_unmeasured_as_zero(self, service, contested_game):
        """Test distances 10 and 30 plus one unmeasured contest average over all three."""
        assert service.defender_impact(contested_game, 'd1').avg_contest_distance == pytest.approx(40 / 3)

    def test_zone_breakdown(self, service, contested_game):
        impact = service.defender_impact(contested_game, 'd1')

        assert list(impact.impact_by_zone) == [Zone.PAINT]
        assert impact.impact_by_zone[Zone.PAINT].contests == 3
        assert impact.impact_by_zone[Zone.PAINT].successful_contests == 2

    def test_rostered_defender_name(self, service, game_id):
        service.record_shot(game_id, ShotInput(
            player_id='p1', x=250, y=100, made=False, shot_type='2PT', quarter=1,
            defender=DefenderInput(id='p3', name='Typed Name'),
        ))
        assert service.defender_impact(game_id, 'p3').defender_name == 'Cat Cole'

    def test_no_contests(self, service, contested_game):
        impact = service.defender_impact(contested_game, 'nobody')
        assert impact.total_contests == 0
        assert impact.contest_efficiency == 0.0
        assert impact.avg_contest_distance == 0.0
        assert impact.defender_name == 'Unknown'

    def test_unknown_game(self, service):
        impact = service.defender_impact('missing', 'd1')
        assert impact.defender_id == 'd1'
        assert impact.total_contests == 0


class TestTeamDefensiveImpact:
    """Tests for team_defensive_impact."""

    def test_counts_every_defended_shot(self, service, contested_game):
        service.record_shot(contested_game, ShotInput(
            player_id='p2', x=10, y=440, made=False, shot_type=ShotType.THREE, quarter=2,
            defender_id='d2', contest_level=ContestLevel.BLOCKED,
        ))

        impact = service.team_defensive_impact(contested_game)
        assert impact.total_contests == 4
        assert impact.successful_contests == 3
        assert impact.contest_efficiency == pytest.approx(75.0)
        assert impact.contests_by_level[ContestLevel.BLOCKED] == 1
        assert impact.zone_defense[Zone.LEFT_CORNER_3].contests == 1
        assert impact.perimeter_defense().efficiency == pytest.approx(100.0)

    def test_unknown_game(self, service):
        impact = service.team_defensive_impact('missing')
        assert impact.total_contests == 0
        assert impact.zone_defense == {}


class TestPlayerMatchupStats:
    """Tests for player_matchup_stats."""

    def test_matchup(self, service, contested_game):
        stats = service.player_matchup_stats(contested_game, 'p1', 'd1')

        assert stats.total_shots == 3
        assert stats.made_shots == 1
        assert stats.efficiency == pytest.approx(33.33, abs=0.01)
        # heavy (3) + medium (2) + unknown (0) over three shots
        assert stats.avg_contest_level == ContestLevel.MEDIUM_CONTEST

    def test_no_matchup(self, service, contested_game):
        stats = service.player_matchup_stats(contested_game, 'p2', 'd1')
        assert stats.total_shots == 0
        assert stats.efficiency == 0.0
        assert stats.avg_contest_level == ContestLevel.UNCONTESTED
