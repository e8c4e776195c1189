"""Reject commands that are malformed or use unknown words.

The checks run in order and the first failure wins: its message is the only
one the player sees, and the command never reaches the executor.
"""

from collections.abc import Callable

from ..logging import get_logger
from .command import ActionResult, ParsedCommand
from .constants import NUMBER_OF_VERBS
from .player import Player
from .state import Game
from .world import NounKind

logger = get_logger(__name__)

TWO_WORDS = "Most commands need two words"


def _verb_invalid(command: ParsedCommand) -> bool:
    return command.verb_number > NUMBER_OF_VERBS


def _noun_invalid(command: ParsedCommand) -> bool:
    return command.noun.kind is NounKind.UNKNOWN


def _verb_and_noun_invalid(command: ParsedCommand) -> bool:
    return _verb_invalid(command) and _noun_invalid(command)


def _verb_or_noun_invalid(command: ParsedCommand) -> bool:
    return _verb_invalid(command) or _noun_invalid(command)


def _missing_noun(command: ParsedCommand) -> bool:
    return command.is_multiple and not command.has_noun


def _one_word_only(command: ParsedCommand) -> bool:
    needs_noun = command.is_multiple or (
        command.is_move and command.split_two[0] == "go"
    )
    return needs_noun and len(command.split_full) == 1


_CHECKS: list[tuple[str, Callable[[ParsedCommand], bool], Callable[[ParsedCommand], str]]] = [
    ("verb_and_noun_invalid", _verb_and_noun_invalid, lambda c: "What!!"),
    ("verb_or_noun_invalid", _verb_or_noun_invalid, lambda c: f"You can't {c.command}"),
    ("missing_noun", _missing_noun, lambda c: TWO_WORDS),
    ("not_understood", lambda c: c.is_none, lambda c: "I don't understand"),
    ("one_word_only", _one_word_only, lambda c: TWO_WORDS),
]


def validate_command(command: ParsedCommand, game: Game, player: Player) -> ActionResult:
    """Pass a well-formed command through, or explain why it was rejected."""
    for name, check, message in _CHECKS:
        if check(command):
            logger.info("validation_failed", check=name, command=command.command)
            game.add_message(message(command))
            return ActionResult.failure(game, player)

    logger.debug("command_valid", code=command.coded_command)
    return ActionResult.success(game, player)
