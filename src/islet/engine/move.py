"""Movement: settling direction nouns and walking the room grid.

Rooms are numbered on a grid ten wide, so a compass step is a fixed
offset from the current room number.
"""

from .command import ActionResult, ParsedCommand
from .constants import CMD_NORTH, CMD_WEST, ROW_WIDTH
from .player import Player
from .state import Game
from .world import Direction, NounKind, NounRef

DIRECTION_MODIFIERS = {
    Direction.NORTH: -ROW_WIDTH,
    Direction.SOUTH: +ROW_WIDTH,
    Direction.EAST: +1,
    Direction.WEST: -1,
}


def parse_single_direction(noun: NounRef, verb_number: int) -> NounRef:
    """A bare n/s/e/w carries its direction in the verb itself."""
    if noun.kind is NounKind.NONE and CMD_NORTH <= verb_number <= CMD_WEST:
        return NounRef.direction(Direction(verb_number))
    return noun


def normalise_move_command(command: ParsedCommand, room: int) -> ParsedCommand:
    """Settle a move command's noun into direction space for this room."""
    noun = parse_single_direction(command.noun, command.verb_number)
    return command.with_noun(noun, room=room)


def calculate_new_room(current_room: int, direction: Direction) -> int:
    return current_room + DIRECTION_MODIFIERS[direction]


def _movement_direction(command: ParsedCommand) -> Direction | None:
    direction = command.noun.as_direction
    if direction is None or not direction.is_compass:
        return None
    return direction


def validate_move(game: Game, player: Player, command: ParsedCommand) -> ActionResult:
    """Reject moves that are not a compass direction or have no exit."""
    direction = _movement_direction(command)
    if direction is None:
        game.add_message("I don't understand")
        return ActionResult.failure(game, player)
    if not game.check_exit(player.room, direction):
        game.add_message("You can't go that way")
        return ActionResult.failure(game, player)
    return ActionResult.success(game, player)


def _movement_restriction(game: Game, player: Player, command: ParsedCommand) -> str | None:
    """Return a message when something stops the player leaving, else None.

    No room in the current content blocks an open exit.
    """
    return None


def _handle_room_entry_effects(
    game: Game, player: Player, command: ParsedCommand,
) -> ActionResult:
    """Apply anything that happens on arriving in a room (nothing yet)."""
    return ActionResult.success(game, player)


def execute_move(game: Game, player: Player, command: ParsedCommand) -> ActionResult:
    """Walk one step on the grid and mark the new room visited."""
    result = validate_move(game, player, command)
    if not result.valid:
        return result

    blocked = _movement_restriction(game, player, command)
    if blocked:
        game.add_message(blocked)
        return ActionResult.failure(game, player)

    new_room = calculate_new_room(player.room, _movement_direction(command))
    destination = game.room(new_room)
    player.set_room(new_room)
    game.add_message("Ok")
    destination.set_visited()
    return _handle_room_entry_effects(game, player, command)
