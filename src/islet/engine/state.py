"""Mutable per-game world state.

A Game holds its own copies of every room and item, so it can be pickled
into a save slot without dragging the shared World along.
"""

import textwrap
from dataclasses import dataclass, field
from enum import Enum

from ..logging import get_logger
from .constants import (
    CARRIED,
    FLAG_VISIBLE,
    HISTORY_SIZE,
    INITIAL_START_TICKS,
    LINE_LENGTH,
    OPENING_MESSAGE,
    SAVES_PER_PAGE,
    START_ROOM,
)
from .special import SpecialExitHandler, SpecialItemHandler
from .world import COMPASS, Direction, World

logger = get_logger(__name__)


@dataclass
class Room:
    """A location in a running game.

    Exit flags are fixed at construction. ``visited`` and ``viewed`` only
    ever go from False to True.
    """

    number: int
    name: str
    exits: tuple[bool, bool, bool, bool]
    room_type: str
    visited: bool = False
    viewed: bool = False

    def set_visited(self) -> None:
        self.visited = True

    def set_viewed(self) -> None:
        self.viewed = True

    def has_exit(self, direction: Direction) -> bool:
        return direction.is_compass and self.exits[direction - 1]


@dataclass
class Item:
    """An item in a running game. Location 0 means carried."""

    number: int
    name: str
    flag: int = FLAG_VISIBLE
    location: int = 0

    def is_at_location(self, room_number: int) -> bool:
        return self.location == room_number

    @property
    def is_carried(self) -> bool:
        return self.location == CARRIED

    @property
    def is_visible(self) -> bool:
        return self.flag < 1


@dataclass
class MessageBuffer:
    """An ordered stream of lines for the presentation layer."""

    messages: list[str] = field(default_factory=list)

    def add(self, message: str, clear: bool = False, long: bool = False) -> None:
        if clear:
            self.messages.clear()
        if long:
            self.messages.extend(textwrap.wrap(message, LINE_LENGTH) or [""])
        else:
            self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


class Lifecycle(Enum):
    STARTED = "started"
    RUNNING = "running"
    SAVED_GAMES = "saved_games"
    ENDED = "ended"
    RESTART = "restart"


_TRANSITIONS: dict[Lifecycle, set[Lifecycle]] = {
    Lifecycle.STARTED: {
        Lifecycle.RUNNING,
        Lifecycle.SAVED_GAMES,
        Lifecycle.ENDED,
        Lifecycle.RESTART,
    },
    Lifecycle.RUNNING: {Lifecycle.SAVED_GAMES, Lifecycle.ENDED, Lifecycle.RESTART},
    Lifecycle.SAVED_GAMES: {Lifecycle.RUNNING, Lifecycle.ENDED, Lifecycle.RESTART},
    Lifecycle.ENDED: set(),
    Lifecycle.RESTART: set(),
}


def _empty_history() -> list[str]:
    return [""] * HISTORY_SIZE


def _empty_saves() -> list[str]:
    return [""] * SAVES_PER_PAGE


@dataclass
class Game:
    """Rooms, items, message streams and the game's lifecycle.

    Rooms and items are 1-indexed; slot 0 of each list is an unused None.
    """

    rooms: list[Room | None]
    items: list[Item | None]
    special_exits: SpecialExitHandler = field(default_factory=SpecialExitHandler)
    special_items: SpecialItemHandler = field(default_factory=SpecialItemHandler)

    messages: MessageBuffer = field(
        default_factory=lambda: MessageBuffer([OPENING_MESSAGE])
    )
    panel_messages: MessageBuffer = field(default_factory=MessageBuffer)
    commands: list[str] = field(default_factory=_empty_history)

    lifecycle: Lifecycle = Lifecycle.STARTED
    start_countdown: int = INITIAL_START_TICKS

    # Saved game browsing
    save_count: int = 0
    upper_limit: bool = False
    lower_limit: bool = False
    displayed_saves: list[str] = field(default_factory=_empty_saves)

    # --- Rooms and items ---

    def room(self, room_number: int) -> Room:
        if not 0 < room_number < len(self.rooms):
            raise IndexError(f"Invalid room number: {room_number}")
        return self.rooms[room_number]

    def item(self, item_number: int) -> Item:
        if not 0 < item_number < len(self.items):
            raise IndexError(f"Invalid item number: {item_number}")
        return self.items[item_number]

    def room_name(self, room_number: int) -> str:
        return self.room(room_number).name

    def item_flag_sum(self, item_number: int) -> int:
        item = self.item(item_number)
        return item.flag + item.location

    def items_here(self, room_number: int) -> str:
        """Describe the visible items at a room, special scenery first."""
        self.room(room_number)
        found = []
        special = self.special_items.get_special_items(room_number)
        if special:
            found.append(special)
        for item in self.items[1:]:
            if item.is_at_location(room_number) and item.is_visible:
                found.append(item.name)
        return "You see: " + ", ".join(found) if found else ""

    def check_exit(self, room_number: int, direction: Direction) -> bool:
        """True when the player can leave the room in this direction."""
        room = self.room(room_number)
        return room.has_exit(direction) and self.special_exits.display_exit(
            room_number, direction
        )

    def exits_here(self, room_number: int) -> str:
        labels = [
            direction.label
            for direction in COMPASS
            if self.check_exit(room_number, direction)
        ]
        return "You can go: " + ", ".join(labels) if labels else ""

    def special_exit_text(self, room_number: int) -> str:
        return self.special_exits.get_special_exit(room_number)

    # --- Messages and history ---

    def add_message(self, message: str, clear: bool = True, long: bool = True) -> None:
        logger.debug("message_added", message=message)
        self.messages.add(message, clear=clear, long=long)

    def add_panel_message(self, message: str, clear: bool = False) -> None:
        logger.debug("panel_message_added", message=message)
        self.panel_messages.add(message, clear=clear)

    def command(self, number: int) -> str:
        if not 0 <= number < len(self.commands):
            raise IndexError(f"Invalid command number: {number}")
        return self.commands[number]

    def record_command(self, raw_input: str) -> None:
        """Fill the history slots in order, then shift the oldest out."""
        if "" in self.commands:
            self.commands[self.commands.index("")] = raw_input
        else:
            self.commands = self.commands[1:] + [raw_input]

    # --- Lifecycle ---

    def _transition(self, target: Lifecycle) -> None:
        if target is self.lifecycle:
            return
        if target not in _TRANSITIONS[self.lifecycle]:
            raise ValueError(
                f"Cannot move from {self.lifecycle.value} to {target.value}"
            )
        logger.info("lifecycle_changed", source=self.lifecycle.value, target=target.value)
        self.lifecycle = target

    def set_running(self) -> None:
        self._transition(Lifecycle.RUNNING)

    def set_saved_games(self) -> None:
        self._transition(Lifecycle.SAVED_GAMES)

    def set_ended(self) -> None:
        self._transition(Lifecycle.ENDED)

    def set_restart(self) -> None:
        self._transition(Lifecycle.RESTART)

    def tick_start(self) -> bool:
        """Count down the intro; True only on the check that starts play."""
        if self.start_countdown > 0:
            self.start_countdown -= 1
            return False
        if self.lifecycle is Lifecycle.STARTED:
            self._transition(Lifecycle.RUNNING)
            return True
        return False

    @property
    def is_started(self) -> bool:
        return self.lifecycle is Lifecycle.STARTED

    @property
    def is_running(self) -> bool:
        return self.lifecycle is Lifecycle.RUNNING

    @property
    def is_saved_games(self) -> bool:
        return self.lifecycle is Lifecycle.SAVED_GAMES

    @property
    def is_ended(self) -> bool:
        return self.lifecycle is Lifecycle.ENDED

    @property
    def is_restart(self) -> bool:
        return self.lifecycle is Lifecycle.RESTART


def new_game(world: World) -> Game:
    """Create a fresh game with every item in its starting position."""
    rooms: list[Room | None] = [None]
    for number in sorted(world.rooms):
        record = world.rooms[number]
        rooms.append(
            Room(
                number=record.number,
                name=world.room_name(number),
                exits=record.exits,
                room_type=record.room_type,
            )
        )

    items: list[Item | None] = [None]
    for number in sorted(world.items):
        record = world.items[number]
        items.append(
            Item(
                number=record.number,
                name=world.item_name(number),
                flag=record.flag,
                location=record.location,
            )
        )

    game = Game(
        rooms=rooms,
        items=items,
        special_exits=SpecialExitHandler(world.special_exits),
        special_items=SpecialItemHandler(world.special_items),
    )
    game.room(START_ROOM).set_visited()
    return game
