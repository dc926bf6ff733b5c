from .accuracy import Accuracy
from .beatmap import Beatmap, Circle, Slider, Spinner, TimingPoint, HitObject
from .difficulty import DifficultyResult, calculate_difficulty
from .game_mode import GameMode
from .mod import MapStats, Mod, Stat, mods_apply
from .performance import PerformanceResult, performance_points
from .position import Position

__version__ = "0.1.0"


__all__ = [
    "Accuracy",
    "Beatmap",
    "DifficultyResult",
    "GameMode",
    "MapStats",
    "Mod",
    "PerformanceResult",
    "Position",
    "Stat",
    "Circle",
    "Slider",
    "Spinner",
    "TimingPoint",
    "HitObject",
    "calculate_difficulty",
    "mods_apply",
    "performance_points",
]
