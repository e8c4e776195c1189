"""Xitzin application factory for Islet."""

from importlib import resources
from pathlib import Path

from sqlmodel import SQLModel, create_engine
from xitzin import Xitzin

from .config import Config
from .engine.loader import load_world
from .logging import get_logger
from .persistence import Persistence
from .session import GameSession

logger = get_logger(__name__)


def _get_data_path() -> Path:
    """Locate world.dat via importlib.resources (works when installed in a venv)."""
    return resources.files("islet").joinpath("data", "world.dat")


def create_app(config: Config | None = None) -> Xitzin:
    """Create and configure the Xitzin application."""
    config = config or Config.from_env()

    templates_dir = Path(__file__).parent / "templates"

    app = Xitzin(
        title="Islet",
        version="0.1.0",
        templates_dir=templates_dir,
    )

    engine = create_engine(config.database_url)
    app.state.engine = engine
    app.state.config = config

    @app.on_startup
    async def startup():
        """Initialize database, load the world and start the game."""
        SQLModel.metadata.create_all(engine)
        logger.debug("database_setup_complete")

        world = load_world(config.data_path or _get_data_path())
        app.state.world = world
        app.state.session = GameSession.new(world, Persistence(engine))
        logger.info(
            "world_loaded",
            rooms=len(world.rooms),
            items=len(world.items),
            verbs=len(world.verbs),
            nouns=len(world.nouns),
        )
        logger.info("startup_complete")

    from .routes import home, play

    home.register_routes(app)
    play.register_routes(app)

    return app
