import pytest

from minex3.core import PhysicsClock, Timer, TimerMode


def test_once_timer_finishes_after_duration():
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    timer.tick(0.5)
    assert not timer.finished()
    assert not timer.just_finished()
    timer.tick(0.5)
    assert timer.finished()
    assert timer.just_finished()


def test_once_timer_just_finished_lasts_one_tick():
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    timer.tick(1.0)
    timer.tick(0.1)
    assert timer.finished()
    assert not timer.just_finished()
    assert timer.elapsed == timer.duration


def test_once_timer_clamps_elapsed_to_duration():
    timer = Timer.from_seconds(0.16, TimerMode.ONCE)
    timer.tick(5.0)
    assert timer.elapsed == timer.duration
    assert timer.times_finished_this_tick == 1


def test_repeating_timer_wraps_and_counts():
    timer = Timer.from_seconds(1.0, TimerMode.REPEATING)
    timer.tick(2.5)
    assert timer.times_finished_this_tick == 2
    assert timer.elapsed == pytest.approx(0.5)
    assert timer.just_finished()


def test_repeating_timer_finished_only_on_completing_tick():
    timer = Timer.from_seconds(1.0, TimerMode.REPEATING)
    timer.tick(1.0)
    assert timer.finished()
    timer.tick(0.1)
    assert not timer.finished()
    assert not timer.just_finished()


def test_reset_clears_progress():
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    timer.tick(1.0)
    timer.reset()
    assert timer.elapsed == 0.0
    assert not timer.finished()
    assert not timer.just_finished()


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        Timer.from_seconds(-1.0, TimerMode.ONCE)


def test_negative_delta_rejected():
    timer = Timer.from_seconds(1.0, TimerMode.REPEATING)
    with pytest.raises(ValueError):
        timer.tick(-0.1)


def test_physics_clock_stops_while_paused():
    clock = PhysicsClock()
    assert clock.advance(0.5) == 0.5
    clock.pause()
    assert clock.advance(0.5) == 0.0
    assert clock.elapsed == 0.5
    clock.unpause()
    assert clock.advance(0.25) == 0.25
    assert clock.elapsed == pytest.approx(0.75)