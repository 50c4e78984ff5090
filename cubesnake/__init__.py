"""Cube Snake: a grid snake game with menus and synthesized sound."""

from .config import GameConfig
from .game import Game
from .grid import Grid
from .input_buffer import InputBuffer
from .menu import GameState, MenuAction, MenuMachine
from .simulation import Outcome, Session, StepResult, new_session, step

__version__ = "0.1.0"

__all__ = [
    "Game",
    "GameConfig",
    "GameState",
    "Grid",
    "InputBuffer",
    "MenuAction",
    "MenuMachine",
    "Outcome",
    "Session",
    "StepResult",
    "new_session",
    "step",
]
