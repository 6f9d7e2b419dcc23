import queue

import pytest

from livesplit_term.run import Run, Segment, default_run
from livesplit_term.timer import SharedTimer, Timer


class FakeClock:
    def __init__(self, t=100.0):
        self.t = t

    def __call__(self):
        return self.t

    def advance(self, dt):
        self.t += dt


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def timer(clock):
    return Timer(default_run(), clock=clock)


@pytest.fixture()
def shared(timer):
    return SharedTimer(timer)


@pytest.fixture()
def quit_queue():
    return queue.Queue()


@pytest.fixture()
def pb_run():
    # PB: 10, 25, 45 ; best segments: 9, 14, 19
    return Run("Game", "Any%", 7, [
        Segment("A", 10.0, 9.0),
        Segment("B", 25.0, 14.0),
        Segment("C", 45.0, 19.0),
    ])


@pytest.fixture()
def pb_timer(pb_run, clock):
    return Timer(pb_run, clock=clock)
