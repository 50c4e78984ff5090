"""Game driver: key dispatch, menu transitions and the tick loop."""

import logging
import random

import pygame

from .audio import MusicSequencer
from .config import FPS, MUSIC_EVENT, TICK_EVENT
from .grid import DOWN, LEFT, RIGHT, UP, Grid
from .menu import GameState, MenuAction, MenuMachine
from .scheduler import TickScheduler
from .simulation import Outcome, new_session, step

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}
MENU_UP_KEYS = (pygame.K_UP, pygame.K_w)
MENU_DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
MUTE_KEY = pygame.K_m


class Game:
    """Owns the menu state, the current session and both timers.

    The renderer and audio objects are collaborators: the game tells them
    what happened and never reads anything back.
    """

    def __init__(self, config, renderer, audio, rng=None, tick_timer=None, music_timer=None):
        self.config = config
        self.renderer = renderer
        self.audio = audio
        self.grid = Grid(config.width, config.height)
        # A seeded rng built here is rebuilt on reset; an injected one is kept.
        self._seeded_rng = rng is None
        self.rng = rng or random.Random(config.seed)
        self.tick_timer = tick_timer or TickScheduler(TICK_EVENT, config.tick_ms)
        self.music_timer = music_timer or TickScheduler(MUSIC_EVENT, config.music_step_ms)
        self.music = MusicSequencer()
        self.menu = MenuMachine()
        self.session = None
        self.final_score = None
        self.running = True
        self.show_main_menu()

    @property
    def state(self):
        """Current game state, owned by the menu machine."""
        return self.menu.state

    # Event dispatch

    def handle_event(self, event):
        """Route one pygame event to the matching handler."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self.handle_key(event.key)
        elif event.type == TICK_EVENT:
            if self.tick_timer.accepts(event):
                self.on_tick()
        elif event.type == MUSIC_EVENT:
            if self.music_timer.accepts(event):
                self.on_music_step()

    def handle_key(self, key):
        """Handle a key press in the current state, then redraw."""
        if not self.audio.active:
            self.audio.activate()

        if key == MUTE_KEY:
            self.audio.toggle_mute()
        elif self.state == GameState.PLAYING:
            direction = DIRECTION_KEYS.get(key)
            if direction is not None:
                self.session.inputs.enqueue(direction)
            elif key == pygame.K_ESCAPE:
                self.pause_game()
        else:
            self.handle_menu_key(key)
        self.render()

    def handle_menu_key(self, key):
        """Move the menu cursor or activate the selected item."""
        if key in MENU_UP_KEYS:
            self.menu.move(-1)
            self.audio.play("menu_move")
        elif key in MENU_DOWN_KEYS:
            self.menu.move(1)
            self.audio.play("menu_move")
        elif key in CONFIRM_KEYS:
            item = self.menu.selected()
            if item is None:
                return
            self.audio.play("menu_select")
            self.execute(item.action)

    def execute(self, action):
        """Run the transition bound to a menu action."""
        if action == MenuAction.START:
            self.audio.activate()
            self.start_game()
        elif action == MenuAction.RESUME:
            self.resume_game()
        elif action == MenuAction.QUIT:
            self.show_main_menu()
        elif action == MenuAction.RETRY:
            self.start_game()
        elif action == MenuAction.EXIT:
            self.reset()

    # Transitions

    def start_game(self):
        """Begin a fresh session and arm the tick and music timers."""
        self.session = new_session(self.grid, self.rng)
        self.final_score = None
        self.menu.enter(GameState.PLAYING)
        self.start_music()
        self.tick_timer.start()
        logger.debug("New session, food at %s", self.session.food)

    def pause_game(self):
        """Stop ticking and show the pause menu; the session is kept."""
        self.tick_timer.cancel()
        self.menu.enter(GameState.PAUSED)
        logger.debug("Paused at score %d", self.session.score)

    def resume_game(self):
        """Return to play with the paused session."""
        self.menu.enter(GameState.PLAYING)
        self.tick_timer.start()
        logger.debug("Resumed")

    def show_main_menu(self):
        """Cancel both timers, discard the session and show the start menu."""
        self.tick_timer.cancel()
        self.stop_music()
        self.session = None
        self.menu.enter(GameState.START)

    def game_over(self, reason=None):
        """End the session, record its score and show the game-over menu."""
        self.tick_timer.cancel()
        self.stop_music()
        self.audio.play("game_over")
        self.final_score = self.session.score
        self.menu.enter(GameState.GAMEOVER)
        logger.info(
            "Game over (%s) heading %s, score %d",
            reason or "unknown",
            self.session.velocity,
            self.final_score,
        )

    def reset(self):
        """Drop everything back to a just-launched game."""
        self.show_main_menu()
        self.final_score = None
        self.music.reset()
        self.audio.deactivate()
        self.audio.muted = self.config.muted
        if self._seeded_rng:
            self.rng = random.Random(self.config.seed)
        logger.debug("Full reset")

    def start_music(self):
        """Restart the arpeggio from its first step."""
        self.music.reset()
        self.music_timer.start()

    def stop_music(self):
        """Cancel the music timer."""
        self.music_timer.cancel()

    # Timer callbacks

    def on_tick(self):
        """Advance the simulation one step, then draw the frame."""
        if self.state != GameState.PLAYING or self.session is None:
            return
        result = step(self.session, self.grid, self.rng)
        self.session = result.session
        if result.outcome == Outcome.GAME_OVER:
            self.game_over(result.game_over_reason)
        elif result.ate_food:
            self.audio.play("eat")
        self.render()

    def on_music_step(self):
        """Play the next arpeggio step while a game is running."""
        if self.state != GameState.PLAYING:
            return
        self.audio.play_note(self.music.advance())

    # Output

    def render(self):
        """Hand the current state to the renderer."""
        self.renderer.draw(self.menu, self.session, self.final_score, self.audio.muted)

    def run(self, max_frames=None):
        """Pump pygame events until the window closes or max_frames frames pass."""
        clock = pygame.time.Clock()
        frames = 0
        self.render()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            pygame.display.flip()
            clock.tick(FPS)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                break
        self.tick_timer.cancel()
        self.music_timer.cancel()
