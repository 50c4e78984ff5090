import pygame
import pytest

from cubesnake.config import BG_COLOR, SNAKE_SIDE, SNAKE_TOP, GameConfig
from cubesnake.menu import GameState, MenuMachine
from cubesnake.render import Renderer, cube_rects, draw_background, draw_cube, get_ui_font
from cubesnake.simulation import Session


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_cube_rects_offset_shadow():
    top, side = cube_rects((2, 1), 20)
    assert top == pygame.Rect(40, 20, 18, 18)
    assert side == pygame.Rect(42, 22, 18, 18)


def test_cube_draws_top_over_shadow():
    surface = pygame.Surface((40, 40))
    draw_background(surface, 2, 2, 20)
    draw_cube(surface, (0, 0), SNAKE_TOP, SNAKE_SIDE, 20)
    assert rgb(surface, (1, 1)) == SNAKE_TOP
    assert rgb(surface, (19, 19)) == SNAKE_SIDE
    assert rgb(surface, (18, 1)) == BG_COLOR


@pytest.fixture
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.mark.parametrize("state", [GameState.START, GameState.PAUSED, GameState.GAMEOVER, GameState.PLAYING])
def test_renderer_draws_every_state(fonts, state):
    config = GameConfig()
    surface = pygame.Surface(config.window_size)
    renderer = Renderer(surface, config)
    menu = MenuMachine()
    menu.enter(state)
    session = Session(snake=((10, 10), (10, 11), (10, 12)), velocity=(0, -1), food=(5, 5))
    renderer.draw(menu, session, final_score=40)
    assert rgb(surface, (5 * 20 + 1, 5 * 20 + 1)) != BG_COLOR


def test_missing_fonts_fall_back_to_bundled_font(fonts):
    font = get_ui_font(20, candidates=("No Such Font Family",))
    assert font.size("SCORE")[0] > 0
