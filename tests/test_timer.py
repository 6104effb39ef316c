from datetime import timedelta

import pytest

from cozy2d.timer import Stopwatch, Timer


def test_non_repeating_timer():
    t = Timer.from_seconds(10.0, False)
    t.tick(0.25)
    assert t.elapsed == 0.25
    assert t.duration == 10.0
    assert not t.finished
    assert not t.just_finished
    assert t.times_finished == 0
    assert not t.repeating
    assert t.percent == pytest.approx(0.025)
    assert t.percent_left == pytest.approx(0.975)

    t.pause()
    t.tick(500.0)
    assert t.elapsed == 0.25
    assert t.duration == 10.0
    assert not t.finished
    assert not t.just_finished
    assert t.times_finished == 0
    assert not t.repeating
    assert t.percent == pytest.approx(0.025)
    assert t.percent_left == pytest.approx(0.975)

    t.unpause()
    t.tick(500.0)
    assert t.elapsed == 10.0
    assert t.finished
    assert t.just_finished
    assert t.times_finished == 1
    assert t.percent == 1.0
    assert t.percent_left == 0.0

    t.tick(1.0)
    assert t.elapsed == 10.0
    assert t.finished
    assert not t.just_finished
    assert t.times_finished == 0
    assert t.percent == 1.0
    assert t.percent_left == 0.0


def test_repeating_timer():
    t = Timer.from_seconds(2.0, True)
    t.tick(0.75)
    assert t.elapsed == 0.75
    assert t.duration == 2.0
    assert not t.finished
    assert not t.just_finished
    assert t.times_finished == 0
    assert t.repeating
    assert t.percent == pytest.approx(0.375)
    assert t.percent_left == pytest.approx(0.625)

    t.tick(1.5)
    assert t.elapsed == pytest.approx(0.25)
    assert t.finished
    assert t.just_finished
    assert t.times_finished == 1
    assert t.percent == pytest.approx(0.125)
    assert t.percent_left == pytest.approx(0.875)

    t.tick(1.0)
    assert t.elapsed == pytest.approx(1.25)
    assert not t.finished
    assert not t.just_finished
    assert t.times_finished == 0
    assert t.percent == pytest.approx(0.625)
    assert t.percent_left == pytest.approx(0.375)


def test_times_finished_repeating():
    t = Timer.from_seconds(1.0, True)
    assert t.times_finished == 0
    t.tick(3.5)
    assert t.times_finished == 3
    assert t.elapsed == pytest.approx(0.5)
    assert t.finished
    assert t.just_finished
    t.tick(0.2)
    assert t.times_finished == 0


def test_times_finished():
    t = Timer.from_seconds(1.0, False)
    assert t.times_finished == 0
    t.tick(1.5)
    assert t.times_finished == 1
    t.tick(0.5)
    assert t.times_finished == 0


def test_times_finished_precise():
    t = Timer.from_seconds(0.01, True)
    step = 0.333
    t.tick(step)
    assert t.times_finished == 33
    t.tick(step)
    assert t.times_finished == 33
    t.tick(step)
    assert t.times_finished == 33
    t.tick(step)
    assert t.times_finished == 34


def test_timer_doc_examples():
    t = Timer.from_seconds(1.0, False)
    t.tick(1.5)
    assert t.finished
    assert t.just_finished
    t.tick(0.5)
    assert t.finished
    assert not t.just_finished

    repeating = Timer.from_seconds(1.0, True)
    once = Timer.from_seconds(1.0, False)
    once.tick(1.5)
    repeating.tick(1.5)
    assert once.elapsed == 1.0
    assert repeating.elapsed == 0.5


def test_set_elapsed_does_not_finish():
    t = Timer.from_seconds(1.0, False)
    t.elapsed = 2.0
    assert t.elapsed == 2.0
    assert not t.finished


def test_duration_and_repeating_setters():
    t = Timer.from_seconds(1.5, False)
    t.duration = timedelta(seconds=1)
    assert t.duration == 1.0

    r = Timer.from_seconds(1.0, True)
    r.repeating = False
    assert not r.repeating


def test_switching_finished_timer_to_repeating_resets_it():
    t = Timer.from_seconds(1.0, False)
    t.tick(2.0)
    assert t.elapsed == 1.0
    t.tick(0.1)
    t.repeating = True
    assert t.elapsed == 0.0
    assert not t.finished


def test_timer_pause_and_reset():
    t = Timer.from_seconds(1.0, False)
    t.pause()
    assert t.paused
    t.tick(0.5)
    assert t.elapsed == 0.0
    t.unpause()
    t.tick(0.5)
    assert t.elapsed == 0.5

    t.tick(1.5)
    t.reset()
    assert not t.finished
    assert not t.just_finished
    assert t.elapsed == 0.0


def test_tick_secs_and_percent():
    t = Timer.from_seconds(2.0, False)
    returned = t.tick_secs(0.5)
    assert returned is t
    assert t.percent == 0.25
    assert t.percent_left == 0.75


def test_repeating_timer_with_zero_duration_raises():
    t = Timer.from_seconds(0.0, True)
    with pytest.raises(ValueError):
        t.tick(0.1)


def test_negative_delta_raises():
    t = Timer.from_seconds(1.0, False)
    with pytest.raises(ValueError):
        t.tick(-1.0)


def test_stopwatch_basics():
    sw = Stopwatch()
    assert sw.elapsed == 0.0
    assert sw.paused is False

    sw.tick(1.0)
    assert sw.elapsed == 1.0

    sw.pause()
    sw.tick(1.0)
    assert sw.elapsed == 1.0
    assert sw.paused

    sw.reset()
    assert sw.paused
    assert sw.elapsed == 0.0


def test_stopwatch_set_and_unpause():
    sw = Stopwatch()
    sw.elapsed = 1.0
    assert sw.elapsed == 1.0

    other = Stopwatch()
    other.pause()
    other.tick(1.0)
    other.unpause()
    other.tick(timedelta(seconds=1))
    assert not other.paused
    assert other.elapsed == 1.0


def test_stopwatch_tick_fraction():
    sw = Stopwatch()
    sw.tick(1.5)
    assert sw.elapsed == 1.5
    sw.reset()
    assert sw.elapsed == 0.0