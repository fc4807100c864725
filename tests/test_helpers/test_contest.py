"""Tests for contest grading."""

import pytest

from hooptracker.config import ContestConfig
from hooptracker.helpers.contest import (
    average_contest_level,
    classify_contest,
    contest_level_for_distance,
)
from hooptracker.models.shot import ContestLevel, Point


class TestContestLevelForDistance:
    """Tests for the distance bands."""

    @pytest.mark.parametrize('distance, expected', [
        (0, ContestLevel.HEAVY_CONTEST),
        (19.9, ContestLevel.HEAVY_CONTEST),
        (20, ContestLevel.MEDIUM_CONTEST),
        (39.9, ContestLevel.MEDIUM_CONTEST),
        (40, ContestLevel.LIGHT_CONTEST),
        (59.9, ContestLevel.LIGHT_CONTEST),
        (60, ContestLevel.UNCONTESTED),
        (100, ContestLevel.UNCONTESTED),
    ])
    def test_bands(self, distance, expected):
        """Test each band's upper bound is exclusive."""
        assert contest_level_for_distance(distance) == expected

    def test_never_blocked(self):
        """Test distance alone never yields a block."""
        levels = {contest_level_for_distance(d / 2) for d in range(0, 300)}
        assert ContestLevel.BLOCKED not in levels

    def test_custom_bands(self):
        config = ContestConfig(heavy=5, medium=10, light=15)
        assert contest_level_for_distance(12, config) == ContestLevel.LIGHT_CONTEST


class TestClassifyContest:

    def test_separation_and_level(self):
        """Test a 3-4-5 separation."""
        result = classify_contest(Point(100, 100), Point(130, 140))
        assert result.distance == pytest.approx(50.0)
        assert result.level == ContestLevel.LIGHT_CONTEST

    def test_same_spot(self):
        result = classify_contest(Point(250, 100), Point(250, 100))
        assert result.distance == 0
        assert result.level == ContestLevel.HEAVY_CONTEST


class TestAverageContestLevel:
    """Tests for average_contest_level."""

    def test_empty(self):
        assert average_contest_level([]) == ContestLevel.UNCONTESTED

    def test_rebuckets_mean(self):
        """Test the mean ordinal is rounded back into a level."""
        levels = [ContestLevel.HEAVY_CONTEST, ContestLevel.LIGHT_CONTEST]
        assert average_contest_level(levels) == ContestLevel.MEDIUM_CONTEST

        levels = [ContestLevel.HEAVY_CONTEST, ContestLevel.HEAVY_CONTEST, ContestLevel.BLOCKED]
        assert average_contest_level(levels) == ContestLevel.HEAVY_CONTEST

    def test_missing_level_counts_as_zero(self):
        """Test a shot without a level pulls the average down."""
        assert average_contest_level([ContestLevel.BLOCKED, None]) == ContestLevel.MEDIUM_CONTEST
        assert average_contest_level([None, None]) == ContestLevel.UNCONTESTED

    @pytest.mark.parametrize('value, expected', [
        (3.5, ContestLevel.BLOCKED),
        (3.49, ContestLevel.HEAVY_CONTEST),
        (2.5, ContestLevel.HEAVY_CONTEST),
        (1.5, ContestLevel.MEDIUM_CONTEST),
        (0.5, ContestLevel.LIGHT_CONTEST),
        (0.49, ContestLevel.UNCONTESTED),
    ])
    def test_bucket_edges(self, value, expected):
        assert ContestLevel.from_ordinal_average(value) == expected
