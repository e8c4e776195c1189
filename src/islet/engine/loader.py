"""Parse the world.dat content file into a World object.

The file has numbered sections, each terminated by a -1 line. A final 0
ends the file. Fields within a line are tab separated.

    1  rooms:          number, name, exits ("NSEW" subset or "-"), room type
    2  items:          number, name, starting location, flag
    3  verbs:          number, word
    4  nouns:          number, word, kind (item | direction | word)
    5  special exits:  room, hidden exit letter or "-", description
    6  special items:  room, description
"""

from pathlib import Path

from .constants import NUMBER_OF_ITEMS, NUMBER_OF_NOUNS, NUMBER_OF_ROOMS, NUMBER_OF_VERBS
from .world import EXIT_LETTERS, Direction, ItemRecord, RoomRecord, SpecialExit, Word, World

NOUN_KINDS = ("item", "direction", "word")

# A room name carries its preposition, e.g. "on a sandy beach"
MIN_ROOM_NAME_LENGTH = 5


def _parse_exits(text: str) -> tuple[bool, bool, bool, bool]:
    letters = "" if text == "-" else text.upper()
    unknown = set(letters) - set(EXIT_LETTERS)
    if unknown:
        raise ValueError(f"Invalid exit letters: {''.join(sorted(unknown))}")
    return tuple(letter in letters for letter in "NSEW")


def _parse_section1(world: World, fields: list) -> None:
    """Rooms."""
    n, name, exits, room_type = fields[:4]
    if not isinstance(name, str) or len(name) < MIN_ROOM_NAME_LENGTH:
        raise ValueError(f"Invalid name format for room {n}")
    if not room_type:
        raise ValueError(f"Room type cannot be empty for room {n}")
    world.rooms[n] = RoomRecord(
        number=n,
        name=name,
        exits=_parse_exits(str(exits)),
        room_type=room_type,
    )


def _parse_section2(world: World, fields: list) -> None:
    """Items and their starting positions."""
    n, name, location, flag = fields[:4]
    world.items[n] = ItemRecord(number=n, name=name, location=location, flag=flag)


def _parse_section3(world: World, fields: list) -> None:
    """Verbs, in id order."""
    n, text = fields[:2]
    if n != len(world.verbs) + 1:
        raise ValueError(f"Verb {text!r} is out of sequence (id {n})")
    world.verbs.append(str(text).lower())


def _parse_section4(world: World, fields: list) -> None:
    """Nouns, in id order."""
    n, text, kind = fields[:3]
    text = str(text).lower()
    if n != len(world.nouns) + 1:
        raise ValueError(f"Noun {text!r} is out of sequence (id {n})")
    if kind not in NOUN_KINDS:
        raise ValueError(f"Unknown noun kind {kind!r} for {text!r}")
    if kind == "direction" and text.upper() not in Direction.__members__:
        raise ValueError(f"{text!r} is not a direction")
    world.nouns.append(Word(text=text, kind=kind, number=n))


def _parse_section5(world: World, fields: list) -> None:
    """Special exits."""
    room_n, hidden, description = fields[:3]
    direction = None if hidden == "-" else EXIT_LETTERS[str(hidden).upper()]
    world.special_exits[room_n] = SpecialExit(hidden=direction, description=description)


def _parse_section6(world: World, fields: list) -> None:
    """Special item descriptions."""
    room_n, description = fields[:2]
    world.special_items[room_n] = description


def _parse_fields(line: str) -> list:
    """Parse a tab-delimited line into typed fields (int or str)."""
    fields = []
    for field in line.split("\t"):
        stripped = field.strip()
        if stripped.lstrip("-").isdigit():
            fields.append(int(stripped))
        else:
            fields.append(stripped)
    return fields


def _read_section(f, parser) -> None:
    """Read lines until sentinel (-1) and dispatch each to parser."""
    while True:
        line = f.readline()
        if not line:
            raise ValueError("Unexpected end of file inside a section")
        fields = _parse_fields(line.rstrip("\n"))
        if fields[0] == -1:
            break
        parser(fields)


def _check_counts(world: World) -> None:
    """Make sure the content matches the fixed numbering."""
    expected = {
        "rooms": (sorted(world.rooms), NUMBER_OF_ROOMS),
        "items": (sorted(world.items), NUMBER_OF_ITEMS),
    }
    for label, (numbers, count) in expected.items():
        if numbers != list(range(1, count + 1)):
            raise ValueError(f"Expected {count} {label} numbered from 1")
    if len(world.verbs) != NUMBER_OF_VERBS:
        raise ValueError(f"Expected {NUMBER_OF_VERBS} verbs, found {len(world.verbs)}")
    if len(world.nouns) != NUMBER_OF_NOUNS:
        raise ValueError(f"Expected {NUMBER_OF_NOUNS} nouns, found {len(world.nouns)}")
    for item in world.items.values():
        if not 0 <= item.location <= NUMBER_OF_ROOMS:
            raise ValueError(f"Item {item.name!r} starts in unknown room {item.location}")


def load_world(data_path: Path) -> World:
    """Parse world.dat and return a populated World."""
    world = World()

    section_parsers = {
        1: lambda f: _parse_section1(world, f),
        2: lambda f: _parse_section2(world, f),
        3: lambda f: _parse_section3(world, f),
        4: lambda f: _parse_section4(world, f),
        5: lambda f: _parse_section5(world, f),
        6: lambda f: _parse_section6(world, f),
    }

    with open(data_path) as fh:
        while True:
            line = fh.readline()
            if not line:
                break
            if not line.strip():
                continue
            section_number = int(line.strip())
            if section_number == 0:
                break

            parser = section_parsers.get(section_number)
            if parser is None:
                raise ValueError(f"Unknown section {section_number}")

            _read_section(fh, parser)

    _check_counts(world)
    return world
