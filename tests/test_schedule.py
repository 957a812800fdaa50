import pytest

from archecs.schedule import Schedule, ScheduleLabel, ScheduleRunner


def test_labels_compare_by_text():
    assert ScheduleLabel("Startup") == Schedule.STARTUP
    assert Schedule.STARTUP < Schedule.UPDATE
    assert str(Schedule.UPDATE) == "Update"


def test_runner_runs_startup_then_frames():
    calls = []
    ScheduleRunner().run(calls.append, frames=2)
    assert calls == [Schedule.STARTUP, Schedule.UPDATE, Schedule.UPDATE]


def test_zero_frames_runs_only_startup():
    calls = []
    ScheduleRunner().run(calls.append, frames=0)
    assert calls == [Schedule.STARTUP]


def test_custom_labels_in_order():
    pre = ScheduleLabel("Pre")
    post = ScheduleLabel("Post")
    calls = []
    ScheduleRunner(startup_labels=[], labels=[pre, post]).run(calls.append, frames=1)
    assert calls == [pre, post]


def test_negative_frames_rejected():
    with pytest.raises(ValueError):
        ScheduleRunner().run(lambda label: None, frames=-1)


def test_runs_forever_without_limit():
    calls = []

    class Stop(Exception):
        pass

    def callback(label):
        calls.append(label)
        if len(calls) == 50:
            raise Stop

    with pytest.raises(Stop):
        ScheduleRunner().run(callback)
    assert calls.count(Schedule.STARTUP) == 1