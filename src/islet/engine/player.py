"""The player: where they are and how they are doing."""

from dataclasses import dataclass, field
from enum import Enum, StrEnum

from ..logging import get_logger
from .constants import (
    START_ROOM,
    STARTING_STRENGTH,
    STARTING_TIME,
    STARTING_WISDOM,
    TIME_BONUS_THRESHOLD,
)

logger = get_logger(__name__)


class Stat(StrEnum):
    TIME_REMAINING = "time_remaining"
    STRENGTH = "strength"
    WISDOM = "wisdom"
    WEIGHT = "weight"


class PlayerMode(Enum):
    NORMAL = "normal"


def _starting_stats() -> dict[str, float]:
    return {
        Stat.TIME_REMAINING: STARTING_TIME,
        Stat.STRENGTH: STARTING_STRENGTH,
        Stat.WISDOM: STARTING_WISDOM,
        Stat.WEIGHT: 0,
    }


@dataclass
class Player:
    """Current room, the room being shown, and an open-ended stat table."""

    room: int = START_ROOM
    display_room: int = START_ROOM
    stats: dict[str, float] = field(default_factory=_starting_stats)
    mode: PlayerMode = PlayerMode.NORMAL

    def set_room(self, room: int) -> None:
        logger.debug("player_moved", room=room)
        self.room = room
        self.display_room = room

    def get_stat(self, name: str) -> float:
        return self.stats[name]

    def set_stat(self, name: str, value: float) -> None:
        logger.debug("stat_set", stat=str(name), value=value)
        self.stats[name] = value

    def adjust_stat(self, name: str, amount: float) -> None:
        self.set_stat(name, self.stats[name] + amount)

    def reduce_stat(self, name: str) -> None:
        """Take one off a stat without letting it drop below zero."""
        value = self.stats[name]
        if value > 0:
            self.stats[name] = max(value - 1, 0)

    def turn_update_stats(self) -> None:
        """Spend one unit of time. Not clamped; time can run negative."""
        self.stats[Stat.TIME_REMAINING] -= 1

    @property
    def is_normal(self) -> bool:
        return self.mode is PlayerMode.NORMAL

    def status_text(self) -> str:
        return (
            f"Strength: {self.stats[Stat.STRENGTH]:.2f}"
            f"         Wisdom: {int(self.stats[Stat.WISDOM])}"
        )

    def time_text(self) -> str:
        return f"Time Remaining: {int(self.stats[Stat.TIME_REMAINING])}"


def final_score(player: Player) -> int:
    """Strength plus wisdom, less a seventh of any time left under 640."""
    time_remaining = player.get_stat(Stat.TIME_REMAINING)
    penalty = time_remaining / 7.0 if time_remaining < TIME_BONUS_THRESHOLD else 0
    return int(
        int(player.get_stat(Stat.STRENGTH)) + player.get_stat(Stat.WISDOM) - penalty
    )
