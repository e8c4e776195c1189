"""Tests for game state."""

import pickle
import zlib

import pytest

from islet.engine.constants import CARRIED, SAVES_PER_PAGE
from islet.engine.player import Player
from islet.engine.state import Game, Lifecycle, MessageBuffer, new_game
from islet.engine.world import Direction, World


def test_new_game(world: World):
    """A fresh game copies the rooms and items from the world."""
    game = new_game(world)
    assert len(game.rooms) == 21
    assert len(game.items) == 9
    assert game.rooms[0] is None
    assert game.room(1).visited
    assert not game.room(2).visited
    assert game.item(1).location == 5
    assert game.item(1).name == "lamp"
    assert game.room(17).name == "in a musty storeroom"
    assert game.lifecycle is Lifecycle.STARTED
    assert game.messages.messages == ["Let your quest begin!"]
    assert game.commands == ["", "", ""]
    assert game.displayed_saves == [""] * SAVES_PER_PAGE


def test_games_do_not_share_state(world: World):
    """Changing one game leaves another untouched."""
    first = new_game(world)
    second = new_game(world)
    first.item(1).location = CARRIED
    first.room(5).set_visited()
    assert second.item(1).location == 5
    assert not second.room(5).visited


def test_invalid_numbers_raise(game: Game):
    """Rooms and items are numbered from 1."""
    with pytest.raises(IndexError):
        game.room(0)
    with pytest.raises(IndexError):
        game.room(21)
    with pytest.raises(IndexError):
        game.item(9)
    with pytest.raises(IndexError):
        game.command(3)


def test_items_here(game: Game):
    """Visible items are listed after any special scenery."""
    assert game.items_here(5) == "You see: lamp"
    assert game.items_here(7) == "You see: A tree bristling with apples, apple"
    assert game.items_here(6) == ""


def test_hidden_items_not_listed(game: Game):
    """The closed trapdoor is not listed."""
    assert game.items_here(17) == ""
    game.item(8).flag = 0
    assert game.items_here(17) == "You see: trapdoor"


def test_item_flag_sum(game: Game):
    """Flag and location add up."""
    assert game.item_flag_sum(8) == 18
    assert game.item_flag_sum(1) == 5


def test_exits_here(game: Game):
    """Exits are listed in compass order."""
    assert game.exits_here(1) == "You can go: South, East"
    assert game.exits_here(15) == "You can go: North, East, West"


def test_special_exit_hides_exit(game: Game):
    """The thicket hides its east exit and explains why."""
    assert not game.check_exit(9, Direction.EAST)
    assert game.check_exit(9, Direction.WEST)
    assert game.exits_here(9) == "You can go: West"
    assert game.special_exit_text(9) == "Brambles choke the path to the east."
    assert game.special_exit_text(1) == ""


def test_non_compass_exit_never_open(game: Game):
    """Rooms only have compass exits."""
    assert not game.check_exit(17, Direction.DOWN)


def test_add_message_replaces(game: Game):
    """A new message replaces the old ones."""
    game.add_message("Ok")
    game.add_message("Taken")
    assert game.messages.messages == ["Taken"]


def test_long_message_wraps():
    """Long messages are wrapped to the line length."""
    buffer = MessageBuffer()
    buffer.add("word " * 40, long=True)
    assert len(buffer.messages) > 1
    assert all(len(line) <= 90 for line in buffer.messages)


def test_panel_messages_accumulate(game: Game):
    """Panel messages append until cleared."""
    game.add_panel_message("one")
    game.add_panel_message("two")
    assert game.panel_messages.messages == ["one", "two"]
    game.add_panel_message("three", clear=True)
    assert game.panel_messages.messages == ["three"]


def test_command_history_rolls(game: Game):
    """History keeps the three most recent commands, oldest first."""
    for text in ["n", "s", "e"]:
        game.record_command(text)
    assert game.commands == ["n", "s", "e"]
    game.record_command("w")
    assert game.commands == ["s", "e", "w"]
    assert game.command(2) == "w"


def test_start_countdown(game: Game):
    """Play starts on the third poll, and only once."""
    assert not game.tick_start()
    assert not game.tick_start()
    assert game.is_started
    assert game.tick_start()
    assert game.is_running
    assert not game.tick_start()


def test_lifecycle_transitions(game: Game):
    """Saved game browsing returns to running; ending is final."""
    game.set_running()
    game.set_saved_games()
    assert game.is_saved_games
    game.set_running()
    game.set_ended()
    assert game.is_ended
    with pytest.raises(ValueError):
        game.set_running()


def test_restart_is_terminal(game: Game):
    """A restarting game can't carry on."""
    game.set_restart()
    assert game.is_restart
    with pytest.raises(ValueError):
        game.set_saved_games()


def test_same_state_transition_is_allowed(game: Game):
    """Re-entering the current state is a no-op."""
    game.set_running()
    game.set_running()
    assert game.is_running


def test_pickle_roundtrip(game: Game, player: Player):
    """Game and Player survive a pickle/unpickle cycle."""
    game.room(15).set_visited()
    game.item(1).location = CARRIED
    player.set_room(15)

    blob = zlib.compress(pickle.dumps((game, player)))
    restored_game, restored_player = pickle.loads(zlib.decompress(blob))

    assert restored_player.room == 15
    assert restored_game.room(15).visited
    assert restored_game.item(1).is_carried
    assert restored_game.special_exit_text(9) == game.special_exit_text(9)
