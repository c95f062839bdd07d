from conftest import FakeClock, ManualTimer
from notes_app.autosave import AutosaveScheduler, AutosaveState


def _scheduler(delay_ms=350):
    clock = FakeClock(0)
    timer = ManualTimer(clock)
    saves = []
    sched = AutosaveScheduler(timer, lambda: saves.append(clock.now), clock=clock, delay_ms=delay_ms)
    return sched, timer, saves


def test_starts_idle():
    sched, timer, saves = _scheduler()
    assert sched.state is AutosaveState.IDLE
    assert sched.deadline is None
    assert not timer.active


def test_notify_edit_arms_timer():
    sched, timer, saves = _scheduler()
    sched.notify_edit()
    assert sched.state is AutosaveState.PENDING
    assert sched.deadline == 350
    timer.advance(349)
    assert saves == []
    timer.advance(1)
    assert saves == [350]
    assert sched.state is AutosaveState.IDLE


def test_burst_collapses_into_one_save():
    sched, timer, saves = _scheduler()
    for _ in range(10):
        sched.notify_edit()
        timer.advance(100)
    assert saves == []
    assert sched.deadline == 900 + 350
    timer.advance(350)
    assert saves == [1350]
    assert timer.armed_count == 10


def test_flush_now_saves_immediately_and_cancels():
    sched, timer, saves = _scheduler()
    sched.notify_edit()
    sched.flush_now()
    assert saves == [0]
    assert sched.state is AutosaveState.IDLE
    assert not timer.active
    timer.advance(1000)
    assert saves == [0]


def test_flush_now_when_idle_still_saves():
    sched, timer, saves = _scheduler()
    sched.flush_now()
    assert saves == [0]


def test_stale_timeout_is_ignored():
    sched, timer, saves = _scheduler()
    sched.notify_edit()
    callback = timer.callback
    sched.flush_now()
    callback()
    assert saves == [0]
