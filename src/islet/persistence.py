"""Save slots, quitting and restarting.

Saved games are whole (Game, Player) pairs pickled into the database. The
load command does not restore anything by itself: it switches the game into
saved-game browsing and fills in a page of slot labels, and the player then
picks one with load_slot().
"""

import datetime as dt
import pickle
import zlib

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from .engine.command import ActionResult
from .engine.constants import SAVES_PER_PAGE
from .engine.player import Player, Stat, final_score
from .engine.state import Game, Lifecycle
from .logging import get_logger
from .models import SavedGame

logger = get_logger(__name__)


def _newest_first():
    return select(SavedGame).order_by(col(SavedGame.saved_at).desc(), col(SavedGame.id).desc())


class Persistence:
    """Handles the save, load, quit and restart commands."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def save(self, game: Game, player: Player) -> ActionResult:
        now = dt.datetime.now(dt.UTC)
        label = f"{now:%Y-%m-%d %H:%M:%S} {game.room_name(player.room)}"
        saved_game = SavedGame(
            label=label,
            state_blob=zlib.compress(pickle.dumps((game, player))),
            room=player.room,
            time_remaining=int(player.get_stat(Stat.TIME_REMAINING)),
            saved_at=now,
        )
        try:
            with Session(self.engine) as session:
                session.add(saved_game)
                session.commit()
        except SQLAlchemyError:
            logger.exception("game_save_failed", room=player.room)
            game.add_message("The game could not be saved")
            return ActionResult.failure(game, player)

        logger.info("game_saved", label=label)
        game.add_message("Game saved")
        return ActionResult.success(game, player)

    def load(self, game: Game, player: Player) -> ActionResult:
        """Show the current page of saved games."""
        try:
            with Session(self.engine) as session:
                total = len(session.exec(select(SavedGame.id)).all())
                pages = max((total + SAVES_PER_PAGE - 1) // SAVES_PER_PAGE, 1)
                game.save_count = min(max(game.save_count, 0), pages - 1)
                offset = game.save_count * SAVES_PER_PAGE
                rows = session.exec(
                    _newest_first().offset(offset).limit(SAVES_PER_PAGE)
                ).all()
                labels = [row.label for row in rows]
        except SQLAlchemyError:
            logger.exception("saved_games_unavailable")
            game.add_message("Saved games are not available")
            return ActionResult.failure(game, player)

        game.displayed_saves = labels + [""] * (SAVES_PER_PAGE - len(labels))
        game.lower_limit = game.save_count > 0
        game.upper_limit = offset + SAVES_PER_PAGE < total

        if not labels:
            game.add_message("There are no saved games")
            return ActionResult.failure(game, player)

        game.set_saved_games()
        game.add_message("Select a saved game to load")
        game.add_panel_message("Saved games:", clear=True)
        for number, label in enumerate(labels, start=1):
            game.add_panel_message(f"{number}. {label}")
        logger.debug("saved_games_listed", page=game.save_count, shown=len(labels))
        return ActionResult.success(game, player)

    def load_slot(self, game: Game, player: Player, slot: int) -> ActionResult:
        """Restore the saved game shown in a slot of the current page."""
        if not 0 <= slot < SAVES_PER_PAGE or not game.displayed_saves[slot]:
            game.add_message("There is no saved game in that slot")
            return ActionResult.failure(game, player)

        offset = game.save_count * SAVES_PER_PAGE + slot
        try:
            with Session(self.engine) as session:
                row = session.exec(_newest_first().offset(offset).limit(1)).first()
            if row is None:
                game.add_message("There is no saved game in that slot")
                return ActionResult.failure(game, player)
            restored_game, restored_player = pickle.loads(zlib.decompress(row.state_blob))
        except (SQLAlchemyError, pickle.UnpicklingError, zlib.error):
            logger.exception("game_load_failed", slot=slot)
            game.add_message("The saved game could not be loaded")
            return ActionResult.failure(game, player)

        restored_game.save_count = 0
        # Saves may hold any lifecycle; a restored game always resumes play
        restored_game.lifecycle = Lifecycle.RUNNING
        restored_game.panel_messages.clear()
        restored_game.add_message("Game loaded")
        logger.info("game_loaded", label=row.label)
        return ActionResult.success(restored_game, restored_player)

    def quit(self, game: Game, player: Player) -> ActionResult:
        game.set_ended()
        game.add_message(f"Your adventure ends here. Final score: {final_score(player)}")
        logger.info("game_quit", score=final_score(player))
        return ActionResult.success(game, player)

    def restart(self, game: Game, player: Player) -> ActionResult:
        game.set_restart()
        game.add_message("Starting a new adventure")
        logger.info("game_restart_requested")
        return ActionResult.success(game, player)
