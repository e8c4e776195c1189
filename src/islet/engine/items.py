"""Item handlers: take, drop, give, open and examine.

Each handler mutates the game in place, leaves a message, and returns an
ActionResult whose validity says whether anything actually happened.
"""

from .command import ActionResult, ParsedCommand
from .constants import (
    CARRIED,
    FLAG_VISIBLE,
    ITEM_TRAPDOOR,
    MAX_CARRIABLE_ITEMS,
    ROOM_STOREROOM,
)
from .player import Player, Stat
from .state import Game, Item
from .world import NounKind


def _noun_item(game: Game, command: ParsedCommand) -> Item | None:
    if command.noun.kind is not NounKind.ITEM:
        return None
    return game.item(command.noun_number)


def _is_here(item: Item, player: Player) -> bool:
    return item.is_at_location(player.room) and item.is_visible


def _fail(game: Game, player: Player, message: str) -> ActionResult:
    game.add_message(message)
    return ActionResult.failure(game, player)


def _done(game: Game, player: Player, message: str) -> ActionResult:
    game.add_message(message)
    return ActionResult.success(game, player)


def take(game: Game, player: Player, command: ParsedCommand) -> ActionResult:
    item = _noun_item(game, command)
    if item is None:
        return _fail(game, player, "You can't take that")
    if item.is_carried:
        return _fail(game, player, "You already have it")
    if not _is_here(item, player):
        return _fail(game, player, "I don't see that here")
    if item.number > MAX_CARRIABLE_ITEMS:
        return _fail(game, player, "It won't budge")

    item.location = CARRIED
    player.adjust_stat(Stat.WEIGHT, 1)
    return _done(game, player, "Taken")


def drop(game: Game, player: Player, command: ParsedCommand) -> ActionResult:
    item = _noun_item(game, command)
    if item is None or not item.is_carried:
        return _fail(game, player, "You aren't carrying that")

    item.location = player.room
    player.reduce_stat(Stat.WEIGHT)
    return _done(game, player, "Dropped")


def give(game: Game, player: Player, command: ParsedCommand) -> ActionResult:
    item = _noun_item(game, command)
    if item is None or not item.is_carried:
        return _fail(game, player, "You aren't carrying that")
    return _fail(game, player, "There is nobody here to take it")


def open_item(game: Game, player: Player, command: ParsedCommand) -> ActionResult:
    """Only the storeroom trapdoor opens; a closed trapdoor has flag 1."""
    item = _noun_item(game, command)
    if (
        item is not None
        and item.number == ITEM_TRAPDOOR
        and player.room == ROOM_STOREROOM
        and item.is_at_location(player.room)
        and item.flag > FLAG_VISIBLE
    ):
        item.flag = FLAG_VISIBLE
        return _done(game, player, "The trapdoor creaks open")
    return _fail(game, player, "It won't open")


def examine(game: Game, player: Player, command: ParsedCommand) -> ActionResult:
    item = _noun_item(game, command)
    if item is None or not (item.is_carried or _is_here(item, player)):
        return _fail(game, player, "I don't see that here")
    return _done(game, player, f"You see nothing special about the {item.name}")
