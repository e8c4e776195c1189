"""Immutable content for the island: rooms, items and the word tables.

These are loaded once from world.dat at startup and shared by every game.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .constants import AMBIGUOUS_DIRECTION, NUMBER_OF_NOUNS, NUMBER_OF_VERBS


class Direction(IntEnum):
    """A direction noun. Only the compass four have a grid offset."""

    NORTH = 1
    SOUTH = 2
    EAST = 3
    WEST = 4
    UP = 5
    DOWN = 6
    IN = 7
    OUT = 8

    @property
    def is_compass(self) -> bool:
        return self <= Direction.WEST

    @property
    def label(self) -> str:
        return self.name.capitalize()


COMPASS = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)

EXIT_LETTERS = {"N": Direction.NORTH, "S": Direction.SOUTH, "E": Direction.EAST, "W": Direction.WEST}


class NounKind(Enum):
    NONE = "none"
    DIRECTION = "direction"
    ITEM = "item"
    WORD = "word"
    AMBIGUOUS = "ambiguous"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class NounRef:
    """What the noun of a command refers to.

    The kind says how to read ``number``: a Direction value, an item id, a
    noun table index, or one of the sentinels (-1 for no noun,
    NUMBER_OF_NOUNS for an unknown word, 8 for an ambiguous direction).
    """

    kind: NounKind
    number: int

    @classmethod
    def none(cls) -> "NounRef":
        return cls(NounKind.NONE, -1)

    @classmethod
    def unknown(cls) -> "NounRef":
        return cls(NounKind.UNKNOWN, NUMBER_OF_NOUNS)

    @classmethod
    def ambiguous(cls) -> "NounRef":
        return cls(NounKind.AMBIGUOUS, AMBIGUOUS_DIRECTION)

    @classmethod
    def direction(cls, direction: Direction) -> "NounRef":
        return cls(NounKind.DIRECTION, int(direction))

    @classmethod
    def item(cls, item_number: int) -> "NounRef":
        return cls(NounKind.ITEM, item_number)

    @property
    def as_direction(self) -> Direction | None:
        if self.kind is NounKind.DIRECTION:
            return Direction(self.number)
        return None


@dataclass(frozen=True)
class Word:
    """A noun table entry."""

    text: str
    kind: str  # "item", "direction", "word"
    number: int


@dataclass(frozen=True)
class RoomRecord:
    """A location as described by the content file."""

    number: int
    name: str
    exits: tuple[bool, bool, bool, bool]
    room_type: str


@dataclass(frozen=True)
class ItemRecord:
    """An item and where it starts."""

    number: int
    name: str
    location: int
    flag: int


@dataclass(frozen=True)
class SpecialExit:
    """Room-specific exit override: an exit to hide and a line to show."""

    hidden: Direction | None
    description: str


@dataclass
class World:
    """The complete immutable content, loaded from world.dat."""

    rooms: dict[int, RoomRecord] = field(default_factory=dict)
    items: dict[int, ItemRecord] = field(default_factory=dict)
    verbs: list[str] = field(default_factory=list)
    nouns: list[Word] = field(default_factory=list)
    special_exits: dict[int, SpecialExit] = field(default_factory=dict)
    special_items: dict[int, str] = field(default_factory=dict)

    def verb_at(self, word: str) -> int:
        """Return the 1-based verb number, or NUMBER_OF_VERBS + 1 if unknown."""
        verb_number = NUMBER_OF_VERBS + 1
        for number, verb in enumerate(self.verbs, start=1):
            if word == verb:
                verb_number = number
        return verb_number

    def noun_at(self, word: str) -> NounRef:
        """Resolve a noun word to what it refers to."""
        for entry in self.nouns:
            if entry.text != word:
                continue
            match entry.kind:
                case "item":
                    return NounRef.item(entry.number)
                case "direction":
                    return NounRef.direction(Direction[word.upper()])
                case _:
                    return NounRef(NounKind.WORD, entry.number)
        return NounRef.unknown()

    def room_name(self, room_number: int) -> str:
        if room_number not in self.rooms:
            raise IndexError(f"Invalid room number: {room_number}")
        return self.rooms[room_number].name

    def item_name(self, item_number: int) -> str:
        if item_number not in self.items:
            raise IndexError(f"Invalid item number: {item_number}")
        return self.items[item_number].name
