"""
classical_steps — Playback Sequencer + Documentation Tests
==========================================================
Run with:  python -m pytest tests/ -v

The timer is replaced by a fake scheduler so ticks fire on demand.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from classical_steps           import CIPHERS, PLACEHOLDER, generate_steps
from classical_steps.docs      import DOCUMENTATION, get_documentation
from classical_steps.playback  import IDLE, PAUSED, PLAYING, PlaybackSequencer, thread_scheduler


class FakeTimer:
    def __init__(self, interval, callback):
        self.interval  = interval
        self.callback  = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.callback()


class FakeScheduler:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, callback):
        timer = FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer

    @property
    def last(self):
        return self.timers[-1]


RUN = generate_steps("scytale", "HELLOSPARTANS", "4", "encrypt")   # 10 steps


@pytest.fixture
def clock():
    return FakeScheduler()


@pytest.fixture
def player(clock):
    return PlaybackSequencer(RUN, interval=0.5, scheduler=clock)


# ── Playback ─────────────────────────────────────────────────────────────────
def test_starts_idle_at_first_step(player):
    assert player.state == IDLE
    assert player.current_index == 0
    assert player.total_steps == 10
    assert player.current_step == RUN.steps[0]

def test_empty_sequence_shows_placeholder(clock):
    p = PlaybackSequencer(generate_steps("route", "HELLO", "1"), scheduler=clock)
    assert p.total_steps == 1
    assert p.current_step == PLACEHOLDER
    assert p.current_step.visual_data.type == "empty"

def test_play_runs_to_the_end(player, clock):
    player.play()
    assert player.is_playing
    assert clock.last.interval == 0.5
    while player.is_playing:
        clock.last.fire()
    assert player.current_index == 9
    assert player.state == PAUSED
    # one timer per advance, none re-armed after the last step
    assert len(clock.timers) == 9

def test_pause_cancels_pending_tick(player, clock):
    player.play()
    clock.last.fire()
    pending = clock.last
    player.pause()
    assert pending.cancelled
    assert player.state == PAUSED
    assert player.current_index == 1

def test_stale_timer_is_ignored(player, clock):
    player.play()
    stale = clock.last
    player.pause()
    stale.callback()   # fired while being cancelled
    assert player.current_index == 0

def test_play_at_end_rewinds(player, clock):
    player.go_to_step(99)
    assert player.current_index == 9
    player.play()
    assert player.current_index == 0
    assert player.is_playing

def test_play_twice_arms_one_timer(player, clock):
    player.play()
    player.play()
    assert len(clock.timers) == 1

def test_reset_returns_to_idle(player, clock):
    player.play()
    clock.last.fire()
    clock.last.fire()
    player.reset()
    assert player.state == IDLE
    assert player.current_index == 0
    assert clock.last.cancelled

def test_manual_stepping_clamps(player):
    player.step_backward()
    assert player.current_index == 0
    for _ in range(20):
        player.step_forward()
    assert player.current_index == 9
    player.go_to_step(-3)
    assert player.current_index == 0

def test_tick_does_nothing_when_not_playing(player):
    assert player.tick() is False
    assert player.current_index == 0

def test_load_replaces_sequence(player, clock):
    player.play()
    player.load(generate_steps("bacon", "HI"))
    assert player.state == IDLE
    assert player.total_steps == 5
    assert clock.timers[0].cancelled

def test_rejects_non_positive_interval(clock):
    with pytest.raises(ValueError):
        PlaybackSequencer(RUN, interval=0, scheduler=clock)

def test_thread_scheduler_is_cancellable():
    fired = []
    timer = thread_scheduler(60, lambda: fired.append(True))
    assert timer.daemon
    timer.cancel()
    assert fired == []

# ── Documentation ────────────────────────────────────────────────────────────
def test_documentation_for_every_cipher():
    assert set(DOCUMENTATION) == set(CIPHERS)
    for cipher_id, doc in DOCUMENTATION.items():
        assert doc.id == cipher_id
        assert doc.encryption_steps

def test_documentation_serializes_camel_case():
    data = get_documentation("feistel").model_dump(by_alias=True)
    assert data["name"] == "Feistel Network"
    assert "historicalBackground" in data

def test_documentation_unknown_id():
    with pytest.raises(ValueError):
        get_documentation("enigma")
