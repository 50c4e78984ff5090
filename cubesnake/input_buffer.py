from collections import deque

from .config import INPUT_CAPACITY


class InputBuffer:
    """Pending direction presses, consumed one per tick.

    Presses beyond the capacity are dropped rather than queued, so fast
    typing can never build up lag behind the snake.
    """

    def __init__(self, capacity=INPUT_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._pending = deque()

    def enqueue(self, direction):
        """Queue a direction; return False if the buffer was full."""
        if len(self._pending) >= self.capacity:
            return False
        self._pending.append(direction)
        return True

    def consume(self):
        """Pop the oldest direction, or None when nothing is pending."""
        if not self._pending:
            return None
        return self._pending.popleft()

    def pending(self):
        """Queued directions, oldest first."""
        return tuple(self._pending)

    def __len__(self):
        return len(self._pending)
