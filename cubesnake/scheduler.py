import pygame


class TickScheduler:
    """A single cancellable periodic pygame timer.

    Each start() arms a fresh timer whose events carry a new generation
    number. Events left in the queue by an earlier generation are rejected by
    accepts(), so a tick posted just before cancel() never reaches the game.
    """

    def __init__(self, event_type, interval_ms, set_timer=None):
        self.event_type = event_type
        self.interval_ms = interval_ms
        self._set_timer = set_timer or pygame.time.set_timer
        self.generation = 0
        self.active = False

    def start(self):
        """Cancel any running timer and arm a new generation."""
        self.cancel()
        self.generation += 1
        event = pygame.event.Event(self.event_type, generation=self.generation)
        self._set_timer(event, self.interval_ms)
        self.active = True

    def cancel(self):
        """Disarm the timer if one is running."""
        if not self.active:
            return
        self._set_timer(self.event_type, 0)
        self.active = False

    def accepts(self, event):
        """Return True if event is a tick from the live timer."""
        if not self.active or event.type != self.event_type:
            return False
        return getattr(event, "generation", None) == self.generation
