"""Run one line of input through parse, validate, execute and post-update."""

from ..logging import get_logger
from .command import ActionResult
from .executor import PersistenceHandler, execute_command
from .parser import parse
from .player import Player
from .post_command import post_updates
from .state import Game
from .validator import validate_command
from .world import World

logger = get_logger(__name__)


def process_command(
    raw_input: str,
    world: World,
    game: Game,
    player: Player,
    persistence: PersistenceHandler | None = None,
) -> ActionResult:
    """Process one command and return exactly one result.

    Content or programming errors (bad room or item numbers, illegal
    lifecycle moves) are logged and reported as a failed result; the game
    carries on.
    """
    try:
        command = parse(raw_input, world, player.room)
        logger.info(
            "command_parsed",
            raw=raw_input,
            command=command.command,
            verb=command.verb_number,
            noun=command.noun_number,
            state=command.state.value,
        )
        result = validate_command(command, game, player)
        if not result.valid:
            return result

        result = execute_command(game, player, command, persistence)
        if not result.valid:
            return result
        return post_updates(result)
    except (LookupError, ValueError):
        logger.exception("command_fault", raw=raw_input)
        return ActionResult.failure(game, player)
