"""Shared test fixtures for Islet."""

from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from islet.app import _get_data_path, create_app
from islet.config import Config
from islet.engine.loader import load_world
from islet.engine.player import Player
from islet.engine.state import Game, new_game
from islet.engine.world import World
from islet.persistence import Persistence
from islet.session import GameSession


@pytest.fixture
def world() -> World:
    return load_world(_get_data_path())


@pytest.fixture
def game(world: World) -> Game:
    return new_game(world)


@pytest.fixture
def player() -> Player:
    return Player()


@pytest.fixture
def db_engine(tmp_path: Path):
    db_url = f"sqlite:///{tmp_path}/test.db"
    engine = create_engine(db_url)
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def persistence(db_engine) -> Persistence:
    return Persistence(db_engine)


@pytest.fixture
def session(world: World, persistence: Persistence) -> GameSession:
    return GameSession.new(world, persistence)


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    return Config(database_url=f"sqlite:///{tmp_path}/test.db")


@pytest.fixture
def app(test_config: Config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    from xitzin.testing import test_app

    with test_app(app) as client:
        yield client
