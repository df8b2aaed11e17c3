"""
Playback Sequencer
==================
Walks an index over a finished Step Sequence, either on demand
(step_forward / step_backward / go_to_step) or on a timer (play / pause).

States:

    idle ──play──▶ playing ──pause / last step──▶ paused
      ▲                                              │
      └─────────────────────reset────────────────────┘

The timer is a pluggable scheduler: `scheduler(interval, callback)` returns
a handle with `cancel()`. The default starts a daemon `threading.Timer`.
Each tick advances by exactly one step and re-arms the timer; pause and
reset cancel the pending tick. Steps are immutable and computed before
playback starts, so stopping between ticks never leaves partial state.
"""

import logging
import threading
from typing import Callable, Optional, Sequence

from .steps import PLACEHOLDER, CipherRun, Step

logger = logging.getLogger(__name__)

IDLE    = "idle"
PLAYING = "playing"
PAUSED  = "paused"


def thread_scheduler(interval: float, callback: Callable[[], None]):
    timer = threading.Timer(interval, callback)
    timer.daemon = True
    timer.start()
    return timer


class PlaybackSequencer:
    """Play / pause / step / reset over a Step Sequence."""

    DEFAULT_INTERVAL = 1.0   # seconds between ticks

    def __init__(self, steps=(), interval: float = DEFAULT_INTERVAL,
                 scheduler: Optional[Callable] = None):
        if interval <= 0:
            raise ValueError("Playback interval must be positive.")
        self.interval   = interval
        self._scheduler = scheduler or thread_scheduler
        self._lock      = threading.RLock()
        self._pending   = None
        self._generation = 0
        self._steps: Sequence[Step] = (PLACEHOLDER,)
        self._index = 0
        self._state = IDLE
        self.load(steps)

    # ── sequence ─────────────────────────────────────────────────────────────

    def load(self, steps) -> None:
        """Replace the sequence (a CipherRun or any iterable of Steps) and reset."""
        if isinstance(steps, CipherRun):
            steps = steps.steps
        with self._lock:
            self._steps = tuple(steps) or (PLACEHOLDER,)
            self.reset()
        logger.debug(f"Playback loaded {len(self._steps)} steps")

    @property
    def steps(self) -> Sequence[Step]:
        return self._steps

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_step(self) -> Step:
        return self._steps[self._index]

    @property
    def state(self) -> str:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == PLAYING

    @property
    def at_end(self) -> bool:
        return self._index >= len(self._steps) - 1

    # ── transitions ──────────────────────────────────────────────────────────

    def play(self) -> None:
        with self._lock:
            if self._state == PLAYING:
                return
            if self.at_end:
                self._index = 0
            self._state = PLAYING
            self._arm()

    def pause(self) -> None:
        with self._lock:
            self._cancel()
            if self._state == PLAYING:
                self._state = PAUSED

    def reset(self) -> None:
        with self._lock:
            self._cancel()
            self._index = 0
            self._state = IDLE

    def step_forward(self) -> None:
        with self._lock:
            self._index = min(self._index + 1, len(self._steps) - 1)

    def step_backward(self) -> None:
        with self._lock:
            self._index = max(self._index - 1, 0)

    def go_to_step(self, index: int) -> None:
        with self._lock:
            self._index = max(0, min(index, len(self._steps) - 1))

    def tick(self) -> bool:
        """
        Advance one step if playing. Returns True while playback continues.
        Reaching the last step stops the sequencer in the paused state.
        """
        with self._lock:
            if self._state != PLAYING:
                return False
            if self.at_end:
                self._state = PAUSED
                return False
            self._index += 1
            if self.at_end:
                self._state = PAUSED
                return False
            return True

    # ── timer ────────────────────────────────────────────────────────────────

    def _arm(self) -> None:
        self._generation += 1
        generation = self._generation
        self._pending = self._scheduler(self.interval, lambda: self._on_timer(generation))

    def _cancel(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            # a timer that fired while being cancelled is stale
            if generation != self._generation:
                return
            self._pending = None
            if self.tick():
                self._arm()

    def __repr__(self):
        return (f"PlaybackSequencer({self._state}, "
                f"step {self._index + 1}/{len(self._steps)})")
