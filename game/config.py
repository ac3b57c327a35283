"""
Game constants. No logic, no imports from internal modules.

Level wall coordinates in game/levels.py are absolute: changing the board
size means re-authoring the catalog.
"""

# ---- Board geometry ----
BOARD_WIDTH = 15
BOARD_HEIGHT = 15
TILE_SIZE = 50  # pixels per cell on screen

# ---- Timing ----
TICK_INTERVAL = 0.15  # seconds per simulation step at the start of a game
SPEED_UP = 0.002      # tick interval shrinks by this much per food eaten

# ---- Input ----
INPUT_QUEUE_LIMIT = 4  # buffered turns per snake; extra presses are dropped

# ---- Food ----
# kind -> (score, life time in ticks, spawn probability in percent per tick)
APPLE_SPEC = (10, 45, 100.0)
CANDY_SPEC = (50, 15, 1.0)
BLINK_TICKS = 6  # food blinks during its last few ticks

# ---- Palette ----
BACKGROUND_COLOR = '#001122'
GAME_OVER_COLOR = '#000000'
WALL_COLOR = '#002951'
APPLE_COLOR = '#b83e3e'
CANDY_COLOR = '#b19d46'
SNAKE_COLORS = ('#8ba673', '#73a6a0')
