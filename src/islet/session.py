"""Session layer: owns the running game and feeds it one command at a time."""

from dataclasses import dataclass

from .engine.command import ActionResult
from .engine.player import Player, final_score
from .engine.processor import process_command
from .engine.state import Game, Room, new_game
from .engine.world import World
from .logging import get_logger
from .persistence import Persistence

logger = get_logger(__name__)

GAME_OVER = "The game is over."


@dataclass(frozen=True)
class GameView:
    """Everything the presentation layer shows, captured after a command."""

    room: str
    items: str
    exits: str
    special_exits: str
    time: str
    status: str
    current_room: int
    final_score: int
    messages: tuple[str, ...]
    panel_messages: tuple[str, ...]
    commands: tuple[str, ...]
    displayed_saves: tuple[str, ...]
    lower_limit: bool
    upper_limit: bool
    is_started: bool
    is_running: bool
    is_saved_games: bool
    is_ended: bool
    is_restart: bool
    is_normal: bool


class GameSession:
    """Wraps the World, the current Game and Player, and the save slots.

    Game and Player are handed through the pipeline for each command and
    the ones it returns replace the session's own.
    """

    def __init__(
        self,
        world: World,
        game: Game,
        player: Player,
        persistence: Persistence | None = None,
    ):
        self.world = world
        self.game = game
        self.player = player
        self.persistence = persistence
        self._processing = False

    @classmethod
    def new(cls, world: World, persistence: Persistence | None = None) -> "GameSession":
        """Start a fresh game."""
        logger.info("new_game_started")
        return cls(world, new_game(world), Player(), persistence)

    # --- Commands ---

    def process_command(self, raw_input: str) -> ActionResult:
        """Run one command; a second one arriving mid-command is refused."""
        if self._processing:
            logger.warning("command_rejected_busy", raw=raw_input)
            return ActionResult.failure(self.game, self.player)
        if self.game.is_ended:
            logger.info("command_rejected_ended", raw=raw_input)
            self.game.add_message(GAME_OVER)
            return ActionResult.failure(self.game, self.player)

        self._processing = True
        try:
            result = process_command(
                raw_input, self.world, self.game, self.player, self.persistence,
            )
            self.game = result.game
            self.player = result.player
            self.player.turn_update_stats()
            self.game.record_command(raw_input)
        finally:
            self._processing = False
        return result

    @property
    def is_processing(self) -> bool:
        return self._processing

    def tick(self) -> bool:
        """Poll the intro countdown; True when play has just started."""
        return self.game.tick_start()

    def reset(self) -> None:
        """Throw the current game away and start again."""
        self.game = new_game(self.world)
        self.player = Player()
        logger.info("game_reset")

    # --- Saved games ---

    def increase_load_position(self) -> ActionResult:
        self.game.save_count += 1
        return self.process_command("load")

    def decrease_load_position(self) -> ActionResult:
        self.game.save_count -= 1
        return self.process_command("load")

    def select_saved_game(self, slot: int) -> ActionResult:
        if self.persistence is None:
            self.game.add_message("Saved games are not available")
            return ActionResult.failure(self.game, self.player)
        result = self.persistence.load_slot(self.game, self.player, slot)
        self.game = result.game
        self.player = result.player
        return result

    def resume(self) -> None:
        """Leave the saved game list without loading anything."""
        if self.game.is_saved_games:
            self.game.set_running()
            self.game.panel_messages.clear()

    # --- Read-only views ---

    def room_description(self) -> str:
        return f"You are {self.game.room_name(self.player.display_room)}"

    def items(self) -> str:
        if not self.player.is_normal:
            return ""
        return self.game.items_here(self.player.display_room)

    def exits(self) -> str:
        if not self.player.is_normal:
            return ""
        return self.game.exits_here(self.player.room)

    def special_exits(self) -> str:
        if not self.player.is_normal:
            return ""
        return self.game.special_exit_text(self.player.room)

    def visited_rooms(self) -> list[Room]:
        return [room for room in self.game.rooms[1:] if room.visited]

    def room_exits(self, room_number: int) -> tuple[bool, bool, bool, bool]:
        return self.game.room(room_number).exits

    def room_image_type(self, room_number: int) -> str:
        return self.game.room(room_number).room_type

    def view(self) -> GameView:
        """Snapshot the game for display; the shown room counts as viewed."""
        game, player = self.game, self.player
        game.room(player.display_room).set_viewed()
        return GameView(
            room=self.room_description(),
            items=self.items(),
            exits=self.exits(),
            special_exits=self.special_exits(),
            time=player.time_text(),
            status=player.status_text(),
            current_room=player.room,
            final_score=final_score(player),
            messages=tuple(game.messages.messages),
            panel_messages=tuple(game.panel_messages.messages),
            commands=tuple(game.commands),
            displayed_saves=tuple(game.displayed_saves),
            lower_limit=game.lower_limit,
            upper_limit=game.upper_limit,
            is_started=game.is_started,
            is_running=game.is_running,
            is_saved_games=game.is_saved_games,
            is_ended=game.is_ended,
            is_restart=game.is_restart,
            is_normal=player.is_normal,
        )
