"""Per-event outcomes reported by the replay layer."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional


class ResultStatus(Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass
class Result:
    """
    Outcome of applying one scripted event to a game.

    event is the event's type tag; message explains a skip or an error.
    """
    status: ResultStatus
    game_id: Optional[str] = None
    event: Optional[str] = None
    message: str = ""

    @staticmethod
    def success(game_id: str = None, event: str = None) -> 'Result':
        return Result(ResultStatus.SUCCESS, game_id, event)

    @staticmethod
    def skipped(message: str, game_id: str = None, event: str = None) -> 'Result':
        return Result(ResultStatus.SKIPPED, game_id, event, message)

    @staticmethod
    def error(message: str, game_id: str = None, event: str = None) -> 'Result':
        return Result(ResultStatus.ERROR, game_id, event, message)

    @property
    def is_success(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    @property
    def is_skipped(self) -> bool:
        return self.status == ResultStatus.SKIPPED

    @property
    def is_error(self) -> bool:
        return self.status == ResultStatus.ERROR

    def __str__(self) -> str:
        where = f"[{self.game_id}] " if self.game_id else ""
        return f"{where}{self.event or 'event'}: {self.status.value}" + (f" ({self.message})" if self.message else "")


def summarize(results: Iterable[Result]) -> Dict[ResultStatus, int]:
    """Count results by status; every status is present."""
    counts = Counter(r.status for r in results)
    return {status: counts.get(status, 0) for status in ResultStatus}
