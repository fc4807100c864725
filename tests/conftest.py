"""Shared pytest fixtures for HoopTracker tests."""

import json
from datetime import datetime

import pytest

from hooptracker.models.player import Player
from hooptracker.stats_service import StatsService


def make_roster():
    """Fresh roster objects; players are mutable so games must not share them."""
    return [
        Player(id='p1', name='Ann Avery', number='23', position='G'),
        Player(id='p2', name='Bea Brooks', number='5', position='F'),
        Player(id='p3', name='Cat Cole', number='11', position='C'),
    ]


@pytest.fixture
def roster():
    """Factory for fresh rosters."""
    return make_roster


@pytest.fixture
def service():
    """Create a service backed by a fresh in-memory repository."""
    return StatsService()


@pytest.fixture
def game_id(service):
    """Create a single game with the default roster."""
    return service.create_game(
        name='Opener',
        team='Hawks',
        opponent='Owls',
        players=make_roster(),
        date=datetime(2025, 1, 10),
        game_id='g1',
    )


@pytest.fixture
def game(service, game_id):
    return service.get_game(game_id)


@pytest.fixture
def sample_script():
    """Event script with two games and a few bad events."""
    return {
        'games': [
            {
                'id': 'g1', 'name': 'Opener', 'team': 'Hawks', 'opponent': 'Owls',
                'date': '2025-01-10',
                'players': [
                    {'id': 'p1', 'name': 'Ann Avery', 'number': '23', 'position': 'G', 'active': True},
                    {'id': 'p2', 'name': 'Bea Brooks', 'number': '5', 'position': 'F'},
                ],
                'events': [
                    {'type': 'shot', 'player': 'p1', 'x': 250, 'y': 100, 'made': True},
                    {'type': 'shot', 'player': 'p1', 'x': 10, 'y': 440, 'made': False,
                     'defender': {'id': 'd1', 'name': 'Opp Guard', 'x': 20, 'y': 440}},
                    {'type': 'free_throw', 'player': 'p2', 'made': True},
                    {'type': 'stat', 'player': 'p2', 'stat': 'REB_DEF'},
                    {'type': 'stat', 'player': 'p1', 'stat': 'PTS'},
                    {'type': 'stat', 'player': 'ghost', 'stat': 'AST'},
                    {'type': 'dunk', 'player': 'p1'},
                    {'type': 'score', 'team': 3, 'opponent': 2},
                    {'type': 'status', 'status': 'completed'},
                ],
            },
            {
                'id': 'g2', 'name': 'Rematch', 'team': 'Hawks', 'opponent': 'Owls',
                'date': '2025-01-17',
                'players': [{'id': 'p1', 'name': 'Ann Avery', 'number': '23'}],
                'events': [
                    {'type': 'shot', 'player': 'p1', 'x': 250, 'y': 400, 'made': True, 'shot_type': '3PT'},
                    {'type': 'stat', 'player': 'p1', 'stat': 'AST'},
                    {'type': 'score', 'team': 3, 'opponent': 3},
                ],
            },
        ]
    }


@pytest.fixture
def script_path(tmp_path, sample_script):
    """Write the sample script to disk."""
    path = tmp_path / 'games.json'
    path.write_text(json.dumps(sample_script), encoding='utf-8')
    return str(path)
