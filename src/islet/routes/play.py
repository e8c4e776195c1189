"""Gameplay routes."""

from xitzin import Redirect, Request, Xitzin

from ..engine.constants import NUMBER_OF_ROOMS, ROW_WIDTH
from ..engine.world import COMPASS
from ..session import GameSession

def _session(request: Request) -> GameSession:
    return request.app.state.session


def _render_play(app: Xitzin, session: GameSession, message: str = ""):
    """Render the main play view."""
    session.tick()
    return app.template("play.gmi", view=session.view(), message=message)


def _run_command(app: Xitzin, session: GameSession, raw_input: str):
    """Feed one command to the game and show the outcome."""
    session.process_command(raw_input)
    if session.game.is_restart:
        session.reset()
        return _render_play(app, session, message="A new adventure begins!")
    if session.game.is_saved_games:
        return app.template("saves.gmi", view=session.view())
    return _render_play(app, session)


def _map_rows(session: GameSession) -> list[str]:
    """Draw visited rooms as a grid; the player's room is marked with @."""
    visited = {room.number for room in session.visited_rooms()}
    rows = []
    for start in range(1, NUMBER_OF_ROOMS + 1, ROW_WIDTH):
        cells = []
        for number in range(start, start + ROW_WIDTH):
            if number == session.player.room:
                cells.append("[@]")
            elif number in visited:
                cells.append("[ ]")
            else:
                cells.append(" . ")
        rows.append("".join(cells))
    return rows


def _exit_labels(session: GameSession, room_number: int) -> str:
    exits = session.room_exits(room_number)
    return "".join(
        direction.name[0] for direction, open_ in zip(COMPASS, exits) if open_
    )


def _register_action_routes(app: Xitzin) -> None:
    """Register command and movement routes."""

    @app.gemini("/play", name="play")
    def play(request: Request):
        """Main game view."""
        return _render_play(app, _session(request))

    @app.gemini("/go/{direction}", name="go")
    def go(request: Request, direction: str):
        """Movement via clickable link."""
        return _run_command(app, _session(request), direction)

    @app.input("/cmd", prompt="What do you want to do?", name="cmd")
    def cmd(request: Request, query: str):
        """Freeform command entry."""
        return _run_command(app, _session(request), query)

    @app.gemini("/map", name="map")
    def show_map(request: Request):
        """Show the rooms visited so far."""
        session = _session(request)
        visited = session.visited_rooms()
        return app.template(
            "map.gmi",
            rows=_map_rows(session),
            rooms=visited,
            current_room=session.player.room,
            labels={room.number: _exit_labels(session, room.number) for room in visited},
        )


def _register_save_routes(app: Xitzin) -> None:
    """Register saved game browsing and game management routes."""

    @app.gemini("/saves", name="saves")
    def saves(request: Request):
        """List a page of saved games."""
        session = _session(request)
        if not session.game.is_saved_games:
            return _run_command(app, session, "load")
        return app.template("saves.gmi", view=session.view())

    @app.gemini("/saves/next", name="saves_next")
    def saves_next(request: Request):
        session = _session(request)
        if not session.game.is_saved_games:
            return Redirect("/saves")
        session.increase_load_position()
        return app.template("saves.gmi", view=session.view())

    @app.gemini("/saves/prev", name="saves_prev")
    def saves_prev(request: Request):
        session = _session(request)
        if not session.game.is_saved_games:
            return Redirect("/saves")
        session.decrease_load_position()
        return app.template("saves.gmi", view=session.view())

    @app.gemini("/saves/load/{slot}", name="saves_load")
    def saves_load(request: Request, slot: str):
        """Restore the saved game in a slot of the page (1-based)."""
        session = _session(request)
        if not session.game.is_saved_games:
            return Redirect("/saves")
        if not slot.isdigit():
            return app.template("saves.gmi", view=session.view())
        result = session.select_saved_game(int(slot) - 1)
        if not result.valid:
            return app.template("saves.gmi", view=session.view())
        return _render_play(app, session)

    @app.gemini("/saves/cancel", name="saves_cancel")
    def saves_cancel(request: Request):
        """Go back to the game without loading."""
        _session(request).resume()
        return Redirect("/play")

    @app.input(
        "/new",
        prompt="Are you sure you want to start over? Type YES to confirm:",
        name="new_game",
    )
    def new_game(request: Request, query: str):
        """Reset game with confirmation."""
        session = _session(request)
        if query.strip().upper() == "YES":
            session.reset()
            return _render_play(app, session, message="A new adventure begins!")
        return Redirect("/play")


def register_routes(app: Xitzin) -> None:
    """Register gameplay routes."""
    _register_action_routes(app)
    _register_save_routes(app)
