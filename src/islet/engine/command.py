"""Structured commands and the result record passed between pipeline stages."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple

from .constants import (
    CMD_DROP,
    CMD_GIVE,
    CMD_LOAD,
    CMD_QUIT,
    CMD_RESTART,
    CMD_SAVE,
    CMD_TAKE,
    MOVE_BOTTOM,
    MOVE_TOP,
    NUMBER_OF_VERBS,
)
from .player import Player
from .state import Game
from .world import NounRef


class CommandState(Enum):
    NONE = "none"
    MOVE = "move"
    SINGLE_COMMAND = "single"
    MULTIPLE_COMMAND = "multiple"


class CommandType(Enum):
    NONE = "none"
    TAKE = "take"
    GIVE = "give"
    DROP = "drop"
    LOAD = "load"
    SAVE = "save"
    QUIT = "quit"
    RESTART = "restart"


_SINGLE_COMMANDS = {
    CMD_LOAD: CommandType.LOAD,
    CMD_SAVE: CommandType.SAVE,
    CMD_QUIT: CommandType.QUIT,
    CMD_RESTART: CommandType.RESTART,
}

_MULTIPLE_COMMANDS = {
    CMD_TAKE: CommandType.TAKE,
    CMD_GIVE: CommandType.GIVE,
    CMD_DROP: CommandType.DROP,
}


def classify(verb_number: int) -> tuple[CommandState, CommandType]:
    """Derive the command's shape and type from its verb number alone."""
    if MOVE_BOTTOM < verb_number < MOVE_TOP:
        return CommandState.MOVE, CommandType.NONE
    if verb_number in _SINGLE_COMMANDS:
        return CommandState.SINGLE_COMMAND, _SINGLE_COMMANDS[verb_number]
    if 0 < verb_number <= NUMBER_OF_VERBS:
        return CommandState.MULTIPLE_COMMAND, _MULTIPLE_COMMANDS.get(
            verb_number, CommandType.NONE
        )
    return CommandState.NONE, CommandType.NONE


@dataclass(frozen=True)
class ParsedCommand:
    """One line of input after parsing.

    ``state`` and ``command_type`` are filled in from the verb number when
    the command is built; passing them in has no effect.
    """

    verb_number: int
    noun: NounRef
    command: str
    split_two: tuple[str, str]
    room: int = 0
    state: CommandState = field(default=CommandState.NONE, compare=False)
    command_type: CommandType = field(default=CommandType.NONE, compare=False)

    def __post_init__(self):
        state, command_type = classify(self.verb_number)
        object.__setattr__(self, "state", state)
        object.__setattr__(self, "command_type", command_type)

    def with_noun(self, noun: NounRef, room: int | None = None) -> "ParsedCommand":
        """Return a copy with a new noun, re-deriving the classification."""
        return replace(self, noun=noun, room=self.room if room is None else room)

    @property
    def noun_number(self) -> int:
        return self.noun.number

    @property
    def split_full(self) -> tuple[str, ...]:
        return tuple(self.command.split())

    @property
    def coded_command(self) -> tuple[int, int, int]:
        return (self.verb_number, self.noun_number, self.room)

    @property
    def has_noun(self) -> bool:
        return bool(self.split_two[1])

    @property
    def is_move(self) -> bool:
        return self.state is CommandState.MOVE

    @property
    def is_single(self) -> bool:
        return self.state is CommandState.SINGLE_COMMAND

    @property
    def is_multiple(self) -> bool:
        return self.state is CommandState.MULTIPLE_COMMAND

    @property
    def is_none(self) -> bool:
        return self.state is CommandState.NONE


class ActionResult(NamedTuple):
    """The (game, player, valid) triple every pipeline stage returns."""

    game: Game
    player: Player
    valid: bool

    @classmethod
    def success(cls, game: Game, player: Player) -> "ActionResult":
        return cls(game, player, True)

    @classmethod
    def failure(cls, game: Game, player: Player) -> "ActionResult":
        return cls(game, player, False)
