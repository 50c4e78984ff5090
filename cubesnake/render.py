"""Drawing of the board, the snake, the HUD and the menus."""

import pygame

from .config import (
    APPLE_SIDE,
    APPLE_TOP,
    BG_COLOR,
    GRID_LINE,
    HUD_BASE_SIZE,
    MENU_ACTIVE,
    MENU_DIM,
    MENU_ITEM_SIZE,
    MENU_TITLE_SIZE,
    SNAKE_SIDE,
    SNAKE_TOP,
    WHITE,
)
from .menu import GameState

# Depth offset of the cube shadow, in pixels.
CUBE_DEPTH = 2


ARCADE_FONTS = ("Press Start 2P", "VT323", "Consolas", "DejaVu Sans Mono", "Courier New")


def get_ui_font(size, candidates=ARCADE_FONTS):
    """Return the first installed blocky monospace font, or pygame's bundled one."""
    path = pygame.font.match_font(",".join(candidates), bold=True)
    return pygame.font.Font(path, size)


def draw_background(surface, width, height, cell_size):
    """Clear the surface and draw the subtle grid lines."""
    surface.fill(BG_COLOR)
    pixel_w = width * cell_size
    pixel_h = height * cell_size
    for i in range(width):
        x = i * cell_size
        pygame.draw.line(surface, GRID_LINE, (x, 0), (x, pixel_h), 1)
    for i in range(height):
        y = i * cell_size
        pygame.draw.line(surface, GRID_LINE, (0, y), (pixel_w, y), 1)


def cube_rects(cell, cell_size):
    """Return (top, side) pixel rectangles for a grid cell."""
    x, y = cell
    px = x * cell_size
    py = y * cell_size
    size = cell_size - CUBE_DEPTH
    side = pygame.Rect(px + CUBE_DEPTH, py + CUBE_DEPTH, size, size)
    top = pygame.Rect(px, py, size, size)
    return top, side


def draw_cube(surface, cell, top_color, side_color, cell_size):
    """Draw a cell as a flat square sitting on an offset shadow."""
    top, side = cube_rects(cell, cell_size)
    pygame.draw.rect(surface, side_color, side)
    pygame.draw.rect(surface, top_color, top)


def draw_panel(surface, rect, alpha=170):
    """Blit a translucent black box behind overlay text."""
    panel = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
    panel.fill((0, 0, 0, alpha))
    surface.blit(panel, rect.topleft)


class Renderer:
    """Draws one frame from the game state; fonts are loaded on first use."""

    def __init__(self, surface, config):
        self.surface = surface
        self.config = config
        self._fonts = {}

    def font(self, size):
        """Return the UI font at size, loading it once."""
        if size not in self._fonts:
            self._fonts[size] = get_ui_font(size)
        return self._fonts[size]

    def draw(self, menu, session, final_score=None, muted=False):
        """Draw the board, the snake and food, and any overlay for the state."""
        cfg = self.config
        draw_background(self.surface, cfg.width, cfg.height, cfg.cell_size)

        if session is not None:
            draw_cube(self.surface, session.food, APPLE_TOP, APPLE_SIDE, cfg.cell_size)
            for segment in session.snake:
                draw_cube(self.surface, segment, SNAKE_TOP, SNAKE_SIDE, cfg.cell_size)
            if menu.state in (GameState.PLAYING, GameState.PAUSED):
                self.draw_hud(session.score, muted)

        if menu.state != GameState.PLAYING:
            self.draw_menu(menu, final_score)

    def draw_hud(self, score, muted):
        """Draw the score box in the top left corner."""
        font = self.font(HUD_BASE_SIZE)
        label = f"Score: {score}"
        if muted:
            label += "  (muted)"
        text = font.render(label, True, WHITE)
        box = text.get_rect(topleft=(10, 8))
        box.inflate_ip(12, 6)
        draw_panel(self.surface, box, alpha=120)
        self.surface.blit(text, (10, 8))

    def draw_menu(self, menu, final_score=None):
        """Draw the centered menu panel for the current non-playing state."""
        title_font = self.font(MENU_TITLE_SIZE)
        item_font = self.font(MENU_ITEM_SIZE)

        lines = [title_font.render(menu.title, True, WHITE)]
        if menu.state == GameState.GAMEOVER and final_score is not None:
            lines.append(item_font.render(f"Score: {final_score}", True, WHITE))
        for i, item in enumerate(menu.items):
            color = MENU_ACTIVE if i == menu.index else MENU_DIM
            label = f"> {item.label} <" if i == menu.index else item.label
            lines.append(item_font.render(label, True, color))

        gap = 10
        content_w = max(line.get_width() for line in lines)
        content_h = sum(line.get_height() for line in lines) + gap * (len(lines) - 1)
        win_w, win_h = self.surface.get_size()
        panel_rect = pygame.Rect(0, 0, content_w + 60, content_h + 40)
        panel_rect.center = (win_w // 2, win_h // 2)
        draw_panel(self.surface, panel_rect)

        y = panel_rect.top + 20
        for line in lines:
            self.surface.blit(line, line.get_rect(centerx=panel_rect.centerx, y=y))
            y += line.get_height() + gap
