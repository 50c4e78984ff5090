"""Game states and the menus shown outside of play."""

from dataclasses import dataclass
from enum import Enum


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    PAUSED = "paused"
    GAMEOVER = "gameover"


class MenuAction(Enum):
    START = "start"
    RESUME = "resume"
    QUIT = "quit"
    RETRY = "retry"
    EXIT = "exit"


@dataclass(frozen=True)
class MenuItem:
    label: str
    action: MenuAction


MENUS = {
    GameState.START: (
        MenuItem("Start Game", MenuAction.START),
        MenuItem("Exit", MenuAction.EXIT),
    ),
    GameState.PAUSED: (
        MenuItem("Resume", MenuAction.RESUME),
        MenuItem("Quit to Menu", MenuAction.QUIT),
        MenuItem("Exit", MenuAction.EXIT),
    ),
    GameState.GAMEOVER: (
        MenuItem("Retry", MenuAction.RETRY),
        MenuItem("Exit", MenuAction.EXIT),
    ),
    GameState.PLAYING: (),
}

MENU_TITLES = {
    GameState.START: "CUBE SNAKE",
    GameState.PAUSED: "PAUSED",
    GameState.GAMEOVER: "GAME OVER",
}


class MenuMachine:
    """Current game state plus the cursor into that state's menu."""

    def __init__(self, state=GameState.START):
        self.state = state
        self.index = 0

    @property
    def items(self):
        """Menu items of the current state."""
        return MENUS[self.state]

    @property
    def title(self):
        """Heading shown above the current menu."""
        return MENU_TITLES.get(self.state, "")

    def enter(self, state):
        """Switch state and put the cursor back on the first item."""
        self.state = state
        self.index = 0

    def move(self, delta):
        """Move the cursor by delta, wrapping at both ends."""
        items = self.items
        if not items:
            return
        self.index = (self.index + delta) % len(items)

    def selected(self):
        """Item under the cursor, or None while playing."""
        items = self.items
        if not items:
            return None
        return items[self.index]
