"""One tick of snake movement, collision and growth."""

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from .config import FOOD_SCORE, START_SNAKE, START_VELOCITY
from .grid import place_food
from .input_buffer import InputBuffer

Cell = Tuple[int, int]


class Outcome(Enum):
    CONTINUE = "continue"
    GAME_OVER = "game_over"


@dataclass
class Session:
    """Everything that belongs to one game, from start to game over."""

    snake: Tuple[Cell, ...]
    velocity: Cell
    food: Cell
    score: int = 0
    inputs: InputBuffer = field(default_factory=InputBuffer)

    @property
    def head(self):
        """Front cell of the snake."""
        return self.snake[0]


@dataclass(frozen=True)
class StepResult:
    session: Session
    score_delta: int
    outcome: Outcome
    game_over_reason: Optional[str] = None

    @property
    def ate_food(self):
        """True if this step landed on the food."""
        return self.score_delta > 0


def new_session(grid, rng=random):
    """Create a fresh session with the starting snake and a placed food."""
    snake = tuple(START_SNAKE)
    for cell in snake:
        if not grid.contains(cell):
            raise ValueError(f"starting snake cell {cell} is outside the grid")
    return Session(
        snake=snake,
        velocity=START_VELOCITY,
        food=place_food(grid, snake, rng),
    )


def is_valid_turn(current, requested):
    """Return True if requested may replace current without reversing."""
    cx, cy = current
    rx, ry = requested
    if cx == 0 and ry != -cy:
        return True
    if cy == 0 and rx != -cx:
        return True
    return False


def step(session, grid, rng=random):
    """Advance session by one tick and return the resulting StepResult.

    At most one queued direction is consumed. A reversal is dropped outright;
    the next queued entry waits for the following tick. On GAME_OVER the
    returned session keeps the snake and food from before the fatal move.
    """
    velocity = session.velocity
    requested = session.inputs.consume()
    if requested is not None and is_valid_turn(velocity, requested):
        velocity = requested

    head_x, head_y = session.head
    dx, dy = velocity
    new_head = (head_x + dx, head_y + dy)

    if not grid.contains(new_head):
        return StepResult(replace(session, velocity=velocity), 0, Outcome.GAME_OVER, "wall")

    # The tail has not moved yet, so stepping onto it is fatal too.
    if new_head in session.snake:
        return StepResult(replace(session, velocity=velocity), 0, Outcome.GAME_OVER, "self")

    snake = (new_head,) + session.snake

    if new_head == session.food:
        food = place_food(grid, snake, rng)
        moved = replace(
            session,
            snake=snake,
            velocity=velocity,
            food=food,
            score=session.score + FOOD_SCORE,
        )
        return StepResult(moved, FOOD_SCORE, Outcome.CONTINUE)

    moved = replace(session, snake=snake[:-1], velocity=velocity)
    return StepResult(moved, 0, Outcome.CONTINUE)
