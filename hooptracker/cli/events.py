"""Event script loading and replay.

An event script is a JSON document describing games and the events recorded
during them:

    {
      "games": [
        {
          "id": "g1", "name": "Opener", "team": "Hawks", "opponent": "Owls",
          "date": "2025-01-10",
          "players": [{"id": "p1", "name": "Ann", "number": "23", "position": "G"}],
          "events": [
            {"type": "shot", "player": "p1", "x": 250, "y": 100, "made": true},
            {"type": "free_throw", "player": "p1", "made": false},
            {"type": "stat", "player": "p1", "stat": "AST"},
            {"type": "score", "team": 2, "opponent": 0},
            {"type": "status", "status": "completed"}
          ]
        }
      ]
    }
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from ..config import Config
from ..exceptions import HoopTrackerError
from ..helpers.zone_mapper import auto_shot_type
from ..models.player import Player
from ..models.shot import DefenderInput, ShotInput, ShotType
from ..services.base import Result
from ..stats_service import StatsService

logger = logging.getLogger(__name__)


def load_script(path: str) -> Dict[str, Any]:
    """Read an event script from disk."""
    with open(path, 'r', encoding='utf-8') as f:
        script = json.load(f)
    if not isinstance(script, dict) or not isinstance(script.get('games'), list):
        raise ValueError(f"{path}: expected an object with a 'games' list")
    return script


def _parse_player(raw: Dict[str, Any]) -> Player:
    return Player(
        id=str(raw['id']),
        name=raw.get('name', str(raw['id'])),
        number=str(raw.get('number', '')),
        position=raw.get('position', ''),
        is_active=bool(raw.get('active', False)),
    )


def _require_bool(event: Dict[str, Any], field: str) -> bool:
    value = event[field]
    if not isinstance(value, bool):
        raise ValueError(f"{field!r} must be true or false, got {value!r}")
    return value


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _parse_shot(service: StatsService, game_id: str, event: Dict[str, Any]) -> ShotInput:
    x = float(event['x'])
    y = float(event['y'])
    raw_type = event.get('shot_type')
    shot_type = ShotType(raw_type) if raw_type else auto_shot_type(x, y, service.config.court)

    defender = None
    raw_defender = event.get('defender')
    if isinstance(raw_defender, dict):
        defender = DefenderInput(
            id=str(raw_defender['id']),
            name=raw_defender.get('name'),
            x=_optional_float(raw_defender.get('x')),
            y=_optional_float(raw_defender.get('y')),
        )
    elif raw_defender is not None:
        defender = DefenderInput(id=str(raw_defender))

    quarter = event.get('quarter')
    if quarter is None:
        quarter = service.get_game(game_id).quarter

    return ShotInput(
        player_id=str(event['player']),
        x=x,
        y=y,
        made=_require_bool(event, 'made'),
        shot_type=shot_type,
        quarter=int(quarter),
        defender=defender,
        contest_level=event.get('contest_level'),
    )


def apply_event(service: StatsService, game_id: str, event: Dict[str, Any]) -> Result:
    """
    Apply one event to a game.

    Returns:
        Result.success when applied, Result.skipped for unknown event
        types, Result.error when the event is malformed or rejected
    """
    if not isinstance(event, dict):
        return Result.error(f"expected an object, got {type(event).__name__}", game_id)

    kind = event.get('type')
    try:
        if kind == 'shot':
            service.record_shot(game_id, _parse_shot(service, game_id, event))
        elif kind == 'free_throw':
            service.record_free_throw(
                game_id, str(event['player']), _require_bool(event, 'made'), _optional_int(event.get('quarter')),
            )
        elif kind == 'stat':
            service.record_stat(game_id, str(event['player']), event['stat'])
        elif kind == 'toggle':
            service.toggle_active(game_id, str(event['player']))
        elif kind == 'score':
            service.update_score(game_id, int(event['team']), int(event['opponent']))
        elif kind == 'quarter':
            service.update_quarter(game_id, int(event['quarter']))
        elif kind == 'time':
            service.update_time(game_id, str(event['time']))
        elif kind == 'status':
            service.update_status(game_id, event['status'])
        else:
            return Result.skipped(f"Unknown event type: {kind!r}", game_id, kind)
    except KeyError as e:
        return Result.error(f"missing field {e}", game_id, kind)
    except (HoopTrackerError, ValueError, TypeError) as e:
        return Result.error(f"rejected: {e}", game_id, kind)
    return Result.success(game_id, kind)


def replay_script(service: StatsService, script: Dict[str, Any]) -> List[Result]:
    """Create every game in the script and apply its events in order."""
    results = []
    for raw_game in script['games']:
        raw_id = str(raw_game['id']) if raw_game.get('id') is not None else None
        if raw_id is not None and service.get_game(raw_id) is not None:
            result = Result.error("duplicate game id; its events were not applied", raw_id)
            logger.warning(str(result))
            results.append(result)
            continue

        date = raw_game.get('date')
        game_id = service.create_game(
            name=raw_game.get('name', ''),
            team=raw_game.get('team', ''),
            opponent=raw_game.get('opponent', ''),
            players=[_parse_player(p) for p in raw_game.get('players', [])],
            date=datetime.fromisoformat(date) if date else None,
            game_id=raw_id,
        )
        for event in raw_game.get('events', []):
            result = apply_event(service, game_id, event)
            if result.is_error:
                logger.warning(str(result))
            results.append(result)
    return results


def build_service(path: str, config: Config = None) -> Tuple[StatsService, List[Result]]:
    """Load a script and replay it into a fresh in-memory service."""
    service = StatsService(config=config)
    results = replay_script(service, load_script(path))
    return service, results
