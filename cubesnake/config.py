from dataclasses import dataclass
from typing import Optional

import pygame

# Board configuration
GRID_WIDTH = 30
GRID_HEIGHT = 20
CELL_SIZE = 20
FPS = 60
TICK_MS = 100
MUSIC_STEP_MS = 150
FOOD_SCORE = 10
INPUT_CAPACITY = 2

# Starting body, head first, and its heading
START_SNAKE = ((10, 10), (10, 11), (10, 12))
START_VELOCITY = (0, -1)

# Colors (R, G, B)
BG_COLOR = (17, 17, 17)
GRID_LINE = (26, 26, 26)
SNAKE_TOP = (40, 224, 40)
SNAKE_SIDE = (26, 92, 26)
APPLE_TOP = (255, 51, 51)
APPLE_SIDE = (153, 0, 0)
WHITE = (240, 240, 240)
MENU_DIM = (150, 150, 150)
MENU_ACTIVE = (40, 224, 40)
HUD_BASE_SIZE = 22
MENU_TITLE_SIZE = 44
MENU_ITEM_SIZE = 26

# Audio
SAMPLE_RATE = 44100

# Timer events posted by pygame.time.set_timer
TICK_EVENT = pygame.USEREVENT + 1
MUSIC_EVENT = pygame.USEREVENT + 2


@dataclass(frozen=True)
class GameConfig:
    """Runtime settings; the defaults match the module constants."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    cell_size: int = CELL_SIZE
    tick_ms: int = TICK_MS
    music_step_ms: int = MUSIC_STEP_MS
    muted: bool = False
    seed: Optional[int] = None

    def __post_init__(self):
        max_x = max(x for x, _ in START_SNAKE)
        max_y = max(y for _, y in START_SNAKE)
        if self.width <= max_x or self.height <= max_y:
            raise ValueError(
                f"grid {self.width}x{self.height} does not fit the starting snake "
                f"(needs at least {max_x + 1}x{max_y + 1})"
            )
        if self.cell_size <= 2:
            raise ValueError("cell_size must be larger than the 2 px cube offset")
        if self.tick_ms <= 0 or self.music_step_ms <= 0:
            raise ValueError("timer periods must be positive")

    @property
    def window_size(self):
        """Pixel size of the play surface."""
        return self.width * self.cell_size, self.height * self.cell_size
