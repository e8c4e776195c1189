"""Updates that happen automatically after a command has been carried out."""

from .command import ActionResult
from .player import Player
from .state import Game


def _is_win_game(game: Game, player: Player) -> bool:
    """No win condition is defined for the current content."""
    return False


def _is_lose_game(game: Game, player: Player) -> bool:
    """No lose condition is defined for the current content."""
    return False


def _win_game(game: Game, player: Player) -> None:
    game.add_message("You have won!")
    game.set_ended()


def _lose_game(game: Game, player: Player) -> None:
    game.add_message("Your adventure is over")
    game.set_ended()


def post_updates(result: ActionResult) -> ActionResult:
    """Check the win and lose conditions. Always returns a valid result."""
    game, player, _ = result
    if _is_win_game(game, player):
        _win_game(game, player)
    if _is_lose_game(game, player):
        _lose_game(game, player)
    return ActionResult.success(game, player)
