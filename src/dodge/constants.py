"""
Arena dimensions, colors, font sizes, tuning knobs for the avatar, abilities,
hazards and spawner difficulty curves, and file paths for the log and the
persisted high score.
"""

import os

WIDTH, HEIGHT = 1280, 720          # 16:9 arena
FPS = 60
MAX_FRAME_TIME = 0.25              # seconds; longer frames are clamped
BG_COLOR = (17, 17, 17)
TEXT_COLOR = (255, 255, 255)
MUTED_TEXT_COLOR = (170, 170, 170)
GAME_OVER_COLOR = (255, 65, 54)
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 20
FONT_SIZE_MEDIUM = 30
FONT_SIZE_LARGE = 60
FONT_SIZE_TITLE = 80

# Avatar
AVATAR_WIDTH = 30
AVATAR_HEIGHT = 30
AVATAR_SPEED = 350                 # px/s
AVATAR_COLOR = (74, 144, 226)
DEFAULT_DIRECTION = (1.0, 0.0)     # used when a direction vector has no length
ARRIVAL_EPSILON = 1e-6            # px of float drift accepted as arrival

# Dash ability
DASH_COOLDOWN = 3.0
DASH_DISTANCE = 200
DASH_SPEED = 1500

# Flash ability
FLASH_COOLDOWN = 15.0
FLASH_RANGE = 450

# Key bindings
KEYS_UP = "w"
KEYS_DOWN = "s"
KEYS_LEFT = "a"
KEYS_RIGHT = "d"
CLASSIC_DASH_KEY = "e"
CLASSIC_FLASH_KEY = "f"
THEMED_DASH_KEY = "q"
THEMED_FLASH_KEY = "f"

# Linear hazards
LINEAR_RADIUS = 8
LINEAR_BASE_SPEED = 200            # px/s at score 0
LINEAR_SPEED_PER_SCORE = 4         # extra px/s per second survived
LINEAR_COLOR = (255, 65, 54)
BOLT_RADIUS = 10
BOLT_LENGTH = 40
BOLT_BASE_SPEED = 260
BOLT_SPEED_PER_SCORE = 5
BOLT_COLOR = (255, 200, 60)
EDGE_MARGIN = 20                   # spawn distance outside the arena

# Area effect hazards
AREA_RADIUS = 60
AREA_WARNING_DURATION = 1.0
AREA_ACTIVE_DURATION = 0.3
AREA_WARNING_ALPHA_FLOOR = 0.2
AREA_ACTIVE_ALPHA = 0.8
AREA_CHANCE_PER_FRAME = 0.002
AREA_MIN_SCORE = 10

# Spawner difficulty curves: interval = max(floor, base - score / divisor)
CLASSIC_SPAWN_BASE = 2.0
CLASSIC_SPAWN_DIVISOR = 30
CLASSIC_SPAWN_FLOOR = 0.1
THEMED_SPAWN_BASE = 1.5
THEMED_SPAWN_DIVISOR = 40
THEMED_SPAWN_FLOOR = 0.08
DOUBLE_SPAWN_SCORE = 20
DOUBLE_SPAWN_CHANCE = 0.3

# Ability icons
ABILITY_ICON_SIZE = 60
ABILITY_ICON_SPACING = 120

# File settings
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
LOG_FILE = os.path.join(BASE_DIR, "log.md")
HIGHSCORE_FILE = os.path.join(BASE_DIR, "highscore.json")
HIGHSCORE_KEY = "dodgeGameHighScore"
