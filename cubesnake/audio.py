"""Synthesized sound cues and the background arpeggio."""

import logging
import math
from array import array
from typing import NamedTuple

import pygame

from .config import SAMPLE_RATE

logger = logging.getLogger(__name__)

# Level the exponential decay ends on, as a fraction of full scale.
DECAY_FLOOR = 0.01


class ToneSpec(NamedTuple):
    frequency_hz: float
    waveform: str
    duration_ms: int
    volume: float = 0.1
    offset_ms: int = 0


CUES = {
    # Two-step rising chime.
    "eat": (
        ToneSpec(600, "sine", 100, 0.1),
        ToneSpec(800, "sine", 100, 0.1, 50),
    ),
    # Low falling buzz.
    "game_over": (
        ToneSpec(150, "sawtooth", 500, 0.2),
        ToneSpec(100, "sawtooth", 500, 0.2, 200),
    ),
    "menu_move": (ToneSpec(200, "square", 50, 0.05),),
    "menu_select": (
        ToneSpec(440, "square", 100, 0.1),
        ToneSpec(660, "square", 200, 0.1, 50),
    ),
}

# 0 is a rest.
MUSIC_NOTES = (
    220, 0, 261, 0, 329, 0, 261, 0,
    196, 0, 246, 0, 293, 0, 246, 0,
)
MUSIC_NOTE_MS = 100
MUSIC_VOLUME = 0.05


def _sine(cycle):
    return math.sin(2.0 * math.pi * cycle)


def _square(cycle):
    return 1.0 if cycle % 1.0 < 0.5 else -1.0


def _sawtooth(cycle):
    return 2.0 * (cycle % 1.0) - 1.0


def _triangle(cycle):
    return 4.0 * abs(cycle % 1.0 - 0.5) - 1.0


WAVEFORMS = {
    "sine": _sine,
    "square": _square,
    "sawtooth": _sawtooth,
    "triangle": _triangle,
}


def synthesize_tone(frequency_hz, waveform, duration_ms, volume=0.1, sample_rate=SAMPLE_RATE):
    """Generate a mono 16-bit PCM tone that decays exponentially to DECAY_FLOOR."""
    try:
        wave = WAVEFORMS[waveform]
    except KeyError:
        raise ValueError(f"unknown waveform {waveform!r}") from None

    sample_count = int(sample_rate * (duration_ms / 1000.0))
    if sample_count <= 0:
        sample_count = 1

    volume = max(0.0, min(volume, 1.0))
    decay = DECAY_FLOOR / volume if volume > DECAY_FLOOR else 1.0

    pcm = array("h")
    for i in range(sample_count):
        progress = i / max(1, sample_count - 1)
        gain = volume * decay ** progress
        cycle = frequency_hz * i / sample_rate
        pcm.append(int(32767 * gain * wave(cycle)))
    return pcm


def mix_tones(parts, sample_rate=SAMPLE_RATE):
    """Overlay several ToneSpecs, each starting at its own offset, into one buffer."""
    rendered = []
    total = 0
    for part in parts:
        start = int(sample_rate * (part.offset_ms / 1000.0))
        pcm = synthesize_tone(
            part.frequency_hz, part.waveform, part.duration_ms, part.volume, sample_rate
        )
        rendered.append((start, pcm))
        total = max(total, start + len(pcm))

    mixed = [0] * total
    for start, pcm in rendered:
        for i, sample in enumerate(pcm):
            mixed[start + i] += sample
    return array("h", (max(-32768, min(32767, s)) for s in mixed))


class MusicSequencer:
    """Cycles through the arpeggio one step at a time."""

    def __init__(self, notes=MUSIC_NOTES):
        self.notes = tuple(notes)
        self.index = 0

    def reset(self):
        """Go back to the first step."""
        self.index = 0

    def advance(self):
        """Return the current step's frequency and move to the next step."""
        frequency = self.notes[self.index]
        self.index = (self.index + 1) % len(self.notes)
        return frequency


class AudioCues:
    """Fire-and-forget sound playback.

    Nothing plays until activate() has succeeded, which the game calls on the
    first key press. Every request is a no-op while muted.
    """

    def __init__(self, muted=False):
        self.muted = muted
        self.active = False
        self.unavailable = False
        self.sounds = {}
        self.notes = {}

    def activate(self):
        """Initialize the mixer and build the cue sounds; return whether audio is live."""
        if self.active:
            return True
        if self.unavailable:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
            self.sounds = {
                name: pygame.mixer.Sound(buffer=mix_tones(parts).tobytes())
                for name, parts in CUES.items()
            }
            self.notes = {
                freq: pygame.mixer.Sound(
                    buffer=synthesize_tone(freq, "square", MUSIC_NOTE_MS, MUSIC_VOLUME).tobytes()
                )
                for freq in set(MUSIC_NOTES)
                if freq > 0
            }
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)
            self.unavailable = True
            self.sounds = {}
            self.notes = {}
            return False
        self.active = True
        logger.debug("Audio activated with %d cues", len(self.sounds))
        return True

    def deactivate(self):
        """Forget the built sounds; the next activate() rebuilds them."""
        self.active = False
        self.sounds = {}
        self.notes = {}

    def toggle_mute(self):
        """Flip the mute flag and return the new value."""
        self.muted = not self.muted
        return self.muted

    def play(self, name):
        """Play a named cue if audio is live and not muted."""
        if not self.active or self.muted:
            return
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()

    def play_note(self, frequency_hz):
        """Play one arpeggio step; rests and unknown notes are skipped."""
        if not self.active or self.muted or frequency_hz <= 0:
            return
        sound = self.notes.get(frequency_hz)
        if sound is not None:
            sound.play()
