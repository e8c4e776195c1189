"""Room-specific overrides for exits and item listings.

Both tables come from the content file. A room with no entry behaves
exactly as its exit flags and item locations say.
"""

from .world import Direction, SpecialExit


class SpecialExitHandler:
    """Hides geometrically present exits and adds descriptive exit lines."""

    def __init__(self, special_exits: dict[int, SpecialExit] | None = None):
        self.special_exits = dict(special_exits or {})

    def display_exit(self, room_number: int, direction: Direction) -> bool:
        """False when the room hides its exit in this direction."""
        special = self.special_exits.get(room_number)
        return special is None or special.hidden != direction

    def get_special_exit(self, room_number: int) -> str:
        special = self.special_exits.get(room_number)
        return special.description if special else ""


class SpecialItemHandler:
    """Extra item-like scenery shown ahead of the room's real items."""

    def __init__(self, descriptions: dict[int, str] | None = None):
        self.descriptions = dict(descriptions or {})

    def get_special_items(self, room_number: int) -> str:
        return self.descriptions.get(room_number, "")
