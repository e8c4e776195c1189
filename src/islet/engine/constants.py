"""Fixed numbering shared by the content file and the command pipeline.

The world.dat sections are checked against these counts at load time, so a
content edit that shifts a verb or item id fails loudly instead of silently
re-wiring commands.
"""

NUMBER_OF_ROOMS = 20
NUMBER_OF_ITEMS = 8
NUMBER_OF_VERBS = 14
NUMBER_OF_NOUNS = 17

# Items with ids above this are fixtures
MAX_CARRIABLE_ITEMS = 7

# Item flag value for a visible item
FLAG_VISIBLE = 0

# Special location values for items
CARRIED = 0

# Verb numbers
CMD_NORTH = 1
CMD_SOUTH = 2
CMD_EAST = 3
CMD_WEST = 4
CMD_GO = 5
CMD_TAKE = 6
CMD_GIVE = 7
CMD_DROP = 8
CMD_OPEN = 9
CMD_EXAMINE = 10
CMD_LOAD = 11
CMD_SAVE = 12
CMD_QUIT = 13
CMD_RESTART = 14

# Verbs strictly between these bounds are movement verbs
MOVE_BOTTOM = 0
MOVE_TOP = CMD_GO + 1

# Key room and item numbers
START_ROOM = 1
ROOM_STOREROOM = 17
ITEM_TRAPDOOR = 8

# Rooms the storeroom chute can drop the player into
TRAPDOOR_DESTINATIONS = (1, 2, 3, 4, 5)

# Noun number reported for "go" followed by a single letter
AMBIGUOUS_DIRECTION = 8

# Rooms sit on a grid ten rooms wide
ROW_WIDTH = 10

# Player starting values
STARTING_TIME = 1000
STARTING_STRENGTH = 100.0
STARTING_WISDOM = 35

# Time below which the final score is penalised
TIME_BONUS_THRESHOLD = 640

# Number of status polls the intro banner stays up for
INITIAL_START_TICKS = 2

# Presentation limits
LINE_LENGTH = 90
HISTORY_SIZE = 3
SAVES_PER_PAGE = 5

OPENING_MESSAGE = "Let your quest begin!"
