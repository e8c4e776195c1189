"""End-to-end tests for the command pipeline."""

import pytest

from islet.engine import post_command
from islet.engine.constants import TRAPDOOR_DESTINATIONS
from islet.engine.player import Player, Stat
from islet.engine.processor import process_command
from islet.engine.state import Game
from islet.engine.world import World
from islet.persistence import Persistence


def _run(text: str, world: World, game: Game, player: Player, persistence=None):
    result = process_command(text, world, game, player, persistence)
    return result.game, result.player, result.valid


def test_move_south(world: World, game: Game, player: Player):
    """A good move succeeds and reports Ok."""
    game, player, valid = _run("s", world, game, player)
    assert valid
    assert player.room == 11
    assert game.messages.messages == ["Ok"]


def test_walk_to_the_village(world: World, game: Game, player: Player):
    """A sequence of moves crosses the island."""
    for text in ["e", "e", "e", "s", "e"]:
        game, player, valid = _run(text, world, game, player)
        assert valid, text
    assert player.room == 15
    assert [room.number for room in game.rooms[1:] if room.visited] == [1, 2, 3, 4, 14, 15]


def test_blocked_move_is_invalid(world: World, game: Game, player: Player):
    """Blocked moves fail and leave the player where they were."""
    game, player, valid = _run("north", world, game, player)
    assert not valid
    assert player.room == 1
    assert game.messages.messages == ["You can't go that way"]


def test_unknown_input(world: World, game: Game, player: Player):
    """Nonsense is rejected before execution."""
    game, player, valid = _run("xyzzy", world, game, player)
    assert not valid
    assert game.messages.messages == ["What!!"]


def test_empty_input(world: World, game: Game, player: Player):
    """Blank input is rejected."""
    game, player, valid = _run("   ", world, game, player)
    assert not valid
    assert game.messages.messages == ["What!!"]


def test_take_and_drop(world: World, game: Game, player: Player):
    """Pick up the rope in the cove and leave it on the cliff path."""
    game, player, _ = _run("e", world, game, player)
    game, player, valid = _run("take rope", world, game, player)
    assert valid
    assert player.get_stat(Stat.WEIGHT) == 1
    game, player, _ = _run("e", world, game, player)
    game, player, valid = _run("drop rope", world, game, player)
    assert valid
    assert game.item(2).location == 3


def test_exactly_one_message_per_command(world: World, game: Game, player: Player):
    """Each command leaves a single line of feedback."""
    for text in ["s", "n", "take", "xyzzy", "go n", "examine lamp"]:
        game, player, _ = _run(text, world, game, player)
        assert len(game.messages.messages) == 1, text


def test_trapdoor_closed(world: World, game: Game, player: Player):
    """Going down in the storeroom does nothing while the trapdoor is shut."""
    player.set_room(17)
    game, player, valid = _run("d", world, game, player)
    assert not valid
    assert player.room == 17
    assert game.messages.messages == ["I don't understand"]


def test_trapdoor_chute(world: World, game: Game, player: Player):
    """An open trapdoor drops the player somewhere near the start."""
    player.set_room(17)
    game, player, valid = _run("open trapdoor", world, game, player)
    assert valid
    game, player, valid = _run("go down", world, game, player)
    assert valid
    assert player.room in TRAPDOOR_DESTINATIONS
    assert game.room(player.room).visited
    assert "chute" in game.messages.messages[0]


def test_trapdoor_chute_destination(
    world: World, game: Game, player: Player, monkeypatch: pytest.MonkeyPatch,
):
    """The chute destination is picked at random."""
    monkeypatch.setattr("islet.engine.executor.random.choice", lambda rooms: rooms[-1])
    player.set_room(17)
    game.item(8).flag = 0
    game, player, _ = _run("down", world, game, player)
    assert player.room == 5


def test_down_elsewhere_not_understood(world: World, game: Game, player: Player):
    """Down is only meaningful above the open trapdoor."""
    game.item(8).flag = 0
    game, player, valid = _run("d", world, game, player)
    assert not valid
    assert game.messages.messages == ["I don't understand"]


def test_persistence_commands_unavailable(world: World, game: Game, player: Player):
    """Without a save store, save reports that it isn't available."""
    game, player, valid = _run("save", world, game, player)
    assert not valid
    assert game.messages.messages == ["Saved games are not available"]


def test_quit_ends_game(
    world: World, game: Game, player: Player, persistence: Persistence,
):
    """Quitting ends the game and reports the score."""
    game, player, valid = _run("quit", world, game, player, persistence)
    assert valid
    assert game.is_ended
    assert game.messages.messages == ["Your adventure ends here. Final score: 135"]


def test_restart_requested(
    world: World, game: Game, player: Player, persistence: Persistence,
):
    """restart flags the game for a fresh start."""
    game, player, valid = _run("restart", world, game, player, persistence)
    assert valid
    assert game.is_restart


def test_win_condition_ends_game(
    world: World, game: Game, player: Player, monkeypatch: pytest.MonkeyPatch,
):
    """When the win condition holds after a command, the game ends."""
    monkeypatch.setattr(post_command, "_is_win_game", lambda game, player: True)
    game, player, valid = _run("s", world, game, player)
    assert valid
    assert game.is_ended
    assert game.messages.messages == ["You have won!"]


def test_post_updates_skipped_for_failed_commands(
    world: World, game: Game, player: Player, monkeypatch: pytest.MonkeyPatch,
):
    """A command that fails never reaches the win check."""
    monkeypatch.setattr(post_command, "_is_win_game", lambda game, player: True)
    game, player, valid = _run("n", world, game, player)
    assert not valid
    assert not game.is_ended


def test_bad_room_is_a_fault(world: World, game: Game, player: Player):
    """A player in a non-existent room gets a failed result, not a crash."""
    player.set_room(99)
    result = process_command("s", world, game, player)
    assert not result.valid
    assert result.game is game
    assert result.player is player


def test_illegal_lifecycle_change_is_a_fault(
    world: World, game: Game, player: Player, persistence: Persistence,
):
    """Restarting a game that has already ended is reported as a failure."""
    game, player, _ = _run("quit", world, game, player, persistence)
    game, player, valid = _run("restart", world, game, player, persistence)
    assert not valid
    assert game.is_ended


def test_go_north_without_exit(world: World, game: Game, player: Player):
    """"go north" from the hut, which only opens south, is refused."""
    player.set_room(5)
    game, player, valid = _run("go north", world, game, player)
    assert not valid
    assert player.room == 5
    assert game.messages.messages == ["You can't go that way"]


def test_revisiting_keeps_room_visited(world: World, game: Game, player: Player):
    """Walking back into a room leaves it marked visited."""
    for text in ["s", "n", "s"]:
        game, player, valid = _run(text, world, game, player)
        assert valid, text
    assert player.room == 11
    assert game.room(11).visited
    assert game.room(1).visited
