"""Turn a line of player input into a ParsedCommand.

parse(raw_input, world, room) is the entry point. Input is lower-cased and
passed through a flat synonym table, split into a verb and a noun phrase,
and both words are looked up in the world's word tables. Only the first
word of the noun phrase is used.
"""

from .command import ParsedCommand
from .constants import CMD_GO, NUMBER_OF_VERBS
from .move import normalise_move_command, parse_single_direction
from .world import NounRef, World

# Whole-input replacements, matched exactly after lower-casing
SYNONYMS = {
    "u": "go up",
    "up": "go up",
    "d": "go down",
    "down": "go down",
    "i": "go in",
    "enter": "go in",
    "inside": "go in",
    "go inside": "go in",
    "o": "go out",
    "exit": "go out",
    "outside": "go out",
    "go outside": "go out",
    "north": "n",
    "south": "s",
    "east": "e",
    "west": "w",
}

MOVEMENT_SHORTHAND = {"in", "out", "up", "down"}


def normalise(raw_input: str) -> str:
    """Lower-case the input and apply the synonym table."""
    text = raw_input.strip().lower()
    return SYNONYMS.get(text, text)


def parse_movement(text: str) -> str:
    """Expand a bare in/out/up/down into a "go" command."""
    if text in MOVEMENT_SHORTHAND:
        return f"go {text}"
    return text


def split_command(text: str) -> tuple[str, str]:
    """Split into the first word and the (trimmed) rest."""
    verb, _, rest = text.partition(" ")
    return verb, rest.strip()


def _resolve_noun(world: World, noun: str, verb_number: int) -> NounRef:
    """Look up the noun phrase, or work out what an elided noun means."""
    if len(noun) > 1:
        return world.noun_at(noun.split()[0])
    if verb_number > NUMBER_OF_VERBS:
        return NounRef.unknown()
    if verb_number == CMD_GO:
        return NounRef.ambiguous() if noun else NounRef.none()
    return parse_single_direction(NounRef.none(), verb_number)


def parse(raw_input: str, world: World, room: int) -> ParsedCommand:
    """Parse raw player input into a command, relative to the player's room."""
    text = parse_movement(normalise(raw_input))
    verb, noun = split_command(text)

    verb_number = world.verb_at(verb)
    command = ParsedCommand(
        verb_number=verb_number,
        noun=_resolve_noun(world, noun, verb_number),
        command=text,
        split_two=(verb, noun),
        room=room,
    )

    if command.is_move:
        command = normalise_move_command(command, room)
    return command
