import pygame

from cubesnake.config import TICK_EVENT
from cubesnake.scheduler import TickScheduler


def test_start_arms_timer_with_generation(fake_timer):
    timer = TickScheduler(TICK_EVENT, 100, set_timer=fake_timer)
    timer.start()
    event, millis = fake_timer.calls[-1]
    assert millis == 100
    assert event.type == TICK_EVENT
    assert event.generation == 1
    assert timer.active
    assert timer.accepts(event)


def test_restart_cancels_previous_timer(fake_timer):
    timer = TickScheduler(TICK_EVENT, 100, set_timer=fake_timer)
    timer.start()
    first, _ = fake_timer.calls[-1]
    timer.start()
    assert fake_timer.calls[1] == (TICK_EVENT, 0)
    second, _ = fake_timer.calls[-1]
    assert not timer.accepts(first)
    assert timer.accepts(second)


def test_cancel_rejects_queued_ticks(fake_timer):
    timer = TickScheduler(TICK_EVENT, 100, set_timer=fake_timer)
    timer.start()
    queued, _ = fake_timer.calls[-1]
    timer.cancel()
    assert fake_timer.calls[-1] == (TICK_EVENT, 0)
    assert not timer.active
    assert not timer.accepts(queued)


def test_cancel_when_idle_does_nothing(fake_timer):
    timer = TickScheduler(TICK_EVENT, 100, set_timer=fake_timer)
    timer.cancel()
    assert fake_timer.calls == []


def test_other_event_types_are_rejected(fake_timer):
    timer = TickScheduler(TICK_EVENT, 100, set_timer=fake_timer)
    timer.start()
    assert not timer.accepts(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
