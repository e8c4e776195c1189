"""Database models for Islet."""

import datetime as dt

from sqlmodel import Field, SQLModel


class SavedGame(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    label: str
    state_blob: bytes  # zlib-compressed pickle of (Game, Player)
    room: int = 0
    time_remaining: int = 0
    saved_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.UTC), index=True
    )
