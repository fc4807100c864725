from dataclasses import dataclass
import os

# Default log level constant
DEFAULT_LOG_LEVEL = 'INFO'


def get_log_level() -> str:
    """
    Get the log level from environment variable or default.

    Uses HOOPTRACKER_LOG_LEVEL if set, otherwise returns the default level.

    Returns:
        Log level name (e.g. 'INFO', 'DEBUG')
    """
    return os.getenv('HOOPTRACKER_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()


@dataclass(frozen=True)
class CourtConfig:
    """Half-court geometry in court units (500 x 470, basket near the top)."""
    width: float = 500.0
    height: float = 470.0
    basket_y: float = 25.0
    three_point_radius: float = 237.5
    paint_half_width: float = 80.0
    paint_depth: float = 190.0
    corner_three_margin: float = 50.0
    free_throw_y: float = 190.0

    @property
    def basket_x(self) -> float:
        return self.width / 2

    @property
    def corner_three_y(self) -> float:
        return self.height - self.corner_three_margin

    @property
    def free_throw_position(self) -> tuple:
        return (self.basket_x, self.free_throw_y)


@dataclass(frozen=True)
class ContestConfig:
    """Exclusive upper bounds of the shooter-defender distance bands."""
    heavy: float = 20.0
    medium: float = 40.0
    light: float = 60.0


@dataclass
class ReportConfig:
    min_participation: float = 0.5
    leaders_count: int = 3


@dataclass
class Config:
    log_level: str = DEFAULT_LOG_LEVEL
    court: CourtConfig = None
    contest: ContestConfig = None
    report: ReportConfig = None

    def __post_init__(self):
        if self.court is None:
            self.court = CourtConfig()
        if self.contest is None:
            self.contest = ContestConfig()
        if self.report is None:
            self.report = ReportConfig()

    @classmethod
    def from_env(cls) -> 'Config':
        return cls(
            log_level = get_log_level(),
            report = ReportConfig(
                min_participation = float(os.getenv('HOOPTRACKER_MIN_PARTICIPATION', 0.5)),
                leaders_count = int(os.getenv('HOOPTRACKER_LEADERS_COUNT', 3)),
            )
        )


DEFAULT_COURT = CourtConfig()
DEFAULT_CONTEST = ContestConfig()
