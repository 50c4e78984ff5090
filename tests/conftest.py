import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from cubesnake.config import MUSIC_EVENT, TICK_EVENT, GameConfig
from cubesnake.game import Game
from cubesnake.scheduler import TickScheduler


class FakeTimer:
    """Records pygame.time.set_timer calls instead of arming real timers."""

    def __init__(self):
        self.calls = []

    def __call__(self, event, millis):
        self.calls.append((event, millis))


class FakeAudio:
    def __init__(self, muted=False):
        self.muted = muted
        self.active = False
        self.played = []
        self.notes = []
        self.activations = 0

    def activate(self):
        self.activations += 1
        self.active = True
        return True

    def deactivate(self):
        self.active = False

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def play(self, name):
        self.played.append(name)

    def play_note(self, frequency_hz):
        self.notes.append(frequency_hz)


class FakeRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, menu, session, final_score=None, muted=False):
        self.frames.append((menu.state, session, final_score, muted))


@pytest.fixture
def fake_timer():
    return FakeTimer()


@pytest.fixture
def make_game(fake_timer):
    def build(config=None, rng=None):
        config = config or GameConfig(seed=7)
        return Game(
            config,
            FakeRenderer(),
            FakeAudio(muted=config.muted),
            rng=rng,
            tick_timer=TickScheduler(TICK_EVENT, config.tick_ms, set_timer=fake_timer),
            music_timer=TickScheduler(MUSIC_EVENT, config.music_step_ms, set_timer=fake_timer),
        )

    return build


@pytest.fixture
def game(make_game):
    return make_game(rng=random.Random(7))
