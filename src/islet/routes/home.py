"""Home, help, and about routes."""

from xitzin import Request, Xitzin


def register_routes(app: Xitzin) -> None:
    """Register home routes."""

    @app.gemini("/", name="home")
    def home(request: Request):
        session = request.app.state.session
        return app.template(
            "home.gmi",
            in_progress=session.game.is_running or session.game.is_saved_games,
            room=session.room_description(),
        )

    @app.gemini("/help", name="help")
    def help_page(request: Request):
        return app.template("help.gmi", verbs=request.app.state.world.verbs)

    @app.gemini("/about", name="about")
    def about(request: Request):
        return app.template("about.gmi")
