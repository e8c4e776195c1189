"""Carry out a validated command.

Moves go to the move handler (or down the storeroom chute), item verbs to
the item handlers, and save/load/quit/restart to the persistence layer,
whose result is returned as is.
"""

import random
from collections.abc import Callable
from typing import Protocol

from ..logging import get_logger
from . import items
from .command import ActionResult, CommandType, ParsedCommand
from .constants import (
    CMD_EXAMINE,
    CMD_GO,
    CMD_OPEN,
    ITEM_TRAPDOOR,
    ROOM_STOREROOM,
    TRAPDOOR_DESTINATIONS,
)
from .move import execute_move
from .player import Player
from .state import Game
from .world import Direction

logger = get_logger(__name__)

CODE_DOWN_STOREROOM = (CMD_GO, int(Direction.DOWN), ROOM_STOREROOM)


class PersistenceHandler(Protocol):
    def save(self, game: Game, player: Player) -> ActionResult: ...

    def load(self, game: Game, player: Player) -> ActionResult: ...

    def quit(self, game: Game, player: Player) -> ActionResult: ...

    def restart(self, game: Game, player: Player) -> ActionResult: ...


Handler = Callable[[Game, Player, ParsedCommand], ActionResult]

_TYPE_DISPATCH: dict[CommandType, Handler] = {
    CommandType.TAKE: items.take,
    CommandType.DROP: items.drop,
    CommandType.GIVE: items.give,
}

_VERB_DISPATCH: dict[int, Handler] = {
    CMD_OPEN: items.open_item,
    CMD_EXAMINE: items.examine,
}

_PERSISTENCE_COMMANDS = {
    CommandType.SAVE: "save",
    CommandType.LOAD: "load",
    CommandType.QUIT: "quit",
    CommandType.RESTART: "restart",
}


def _trapdoor_open(game: Game) -> bool:
    """Open (flag 0) and still set into the storeroom floor."""
    return game.item_flag_sum(ITEM_TRAPDOOR) == ROOM_STOREROOM


def _drop_through_trapdoor(game: Game, player: Player) -> ActionResult:
    """The chute lands the player in one of a few rooms at random."""
    destination = random.choice(TRAPDOOR_DESTINATIONS)
    player.set_room(destination)
    game.room(destination).set_visited()
    game.add_message("You drop through the trapdoor and slide down a long chute")
    return ActionResult.success(game, player)


def _execute_move_command(game: Game, player: Player, command: ParsedCommand) -> ActionResult:
    if command.coded_command == CODE_DOWN_STOREROOM and _trapdoor_open(game):
        logger.info("trapdoor_used", room=player.room)
        return _drop_through_trapdoor(game, player)
    return execute_move(game, player, command)


def _execute_persistence_command(
    game: Game,
    player: Player,
    command: ParsedCommand,
    persistence: PersistenceHandler | None,
) -> ActionResult:
    if persistence is None:
        game.add_message("Saved games are not available")
        return ActionResult.failure(game, player)
    operation = _PERSISTENCE_COMMANDS[command.command_type]
    return getattr(persistence, operation)(game, player)


def execute_command(
    game: Game,
    player: Player,
    command: ParsedCommand,
    persistence: PersistenceHandler | None = None,
) -> ActionResult:
    """Apply a validated command to the game and player."""
    if command.is_move:
        logger.debug("executing_move", noun=command.noun_number)
        return _execute_move_command(game, player, command)

    if command.command_type in _PERSISTENCE_COMMANDS:
        logger.debug("executing_persistence", command=command.command_type.value)
        return _execute_persistence_command(game, player, command, persistence)

    handler = _TYPE_DISPATCH.get(command.command_type) or _VERB_DISPATCH.get(
        command.verb_number
    )
    if handler is not None:
        return handler(game, player, command)

    game.add_message("Nothing happens")
    return ActionResult.success(game, player)
