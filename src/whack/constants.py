"""Tunable constants for the whack-a-mole game."""

# ============================================================================
# BOARD
# ============================================================================
DEFAULT_BOARD_SIZE = 2
SUPPORTED_BOARD_SIZES = (2, 3)


# ============================================================================
# RULES
# ============================================================================
WIN_THRESHOLD = 10   # hits needed to win
LOSE_THRESHOLD = 3   # misses that end the round


# ============================================================================
# LOOP
# ============================================================================
POLL_INTERVAL = 0.25  # seconds to wait for a key each tick
MAX_EVENT_CHAIN = 16  # follow-up events applied per input before bailing out


# ============================================================================
# KEYS
# ============================================================================
KEY_ESCAPE = "escape"
KEY_ENTER = "enter"

MENU_KEY_PLAY = "p"
MENU_KEY_QUIT = "q"
END_KEY_MENU = "m"

# Row-major: the first key hits cell 0.
CELL_KEYS: dict[int, tuple[str, ...]] = {
    2: ("q", "w",
        "a", "s"),
    3: ("q", "w", "e",
        "a", "s", "d",
        "z", "x", "c"),
}


# ============================================================================
# COLOURS
# ============================================================================
COLOR_BACKGROUND = "grey11"
COLOR_CELL_IDLE = "grey23"
COLOR_CELL_ACTIVE = "dark_orange3"
COLOR_BORDER = "bright_white"
COLOR_WON = "green4"
COLOR_LOST = "red3"
COLOR_MENU = "dark_slate_gray2"
