import dataclasses

import pytest

from livesplit_term.colors import SemanticColor, VisualizationSettings
from livesplit_term.components import (
    Components, FrameState, SplitRow, TitleComponent, TimerComponent, delta_color,
)

SETTINGS = VisualizationSettings()


def frame_of(timer, components=None) -> FrameState:
    return (components or Components()).states(timer.snapshot(), SETTINGS)


@pytest.mark.parametrize("delta, previous, color", [
    (None, None, SemanticColor.DEFAULT),
    (-1.0, None, SemanticColor.AHEAD_GAINING_TIME),
    (-3.0, -2.0, SemanticColor.AHEAD_GAINING_TIME),
    (-1.0, -2.0, SemanticColor.AHEAD_LOSING_TIME),
    (1.0, 2.0, SemanticColor.BEHIND_GAINING_TIME),
    (1.0, None, SemanticColor.BEHIND_LOSING_TIME),
])
def test_delta_color(delta, previous, color):
    assert delta_color(delta, previous) is color


def test_not_running_frame(timer):
    frame = frame_of(timer)
    assert frame.title.line1 == "Livesplit Terminal"
    assert frame.title.line2 == "Any%"
    assert frame.title.attempts == 0
    assert len(frame.splits.rows) == 5
    assert frame.splits.rows[0] == SplitRow("Split 1", "", "-", SemanticColor.DEFAULT)
    assert (frame.timer.time, frame.timer.fraction) == ("0", ".00")
    assert frame.timer.semantic_color is SemanticColor.NOT_RUNNING
    assert frame.previous_segment.value == "-"
    assert frame.sum_of_best.value == "-"
    assert frame.possible_time_save.value == "-"


def test_title_can_hide_attempts(timer):
    frame = frame_of(timer, Components(TitleComponent(show_attempt_count=False)))
    assert frame.title.attempts is None


def test_mid_run_frame(pb_timer, clock):
    pb_timer.start_or_split()
    clock.advance(8)
    pb_timer.start_or_split()
    clock.advance(20)
    frame = frame_of(pb_timer)

    done, live, future = frame.splits.rows
    assert done == SplitRow("A", "-2.0", "8.00", SemanticColor.BEST_SEGMENT)
    assert live == SplitRow("B", "+3.0", "25.00", SemanticColor.BEHIND_LOSING_TIME)
    assert future == SplitRow("C", "", "45.00", SemanticColor.DEFAULT)

    assert (frame.timer.time, frame.timer.fraction) == ("28", ".00")
    assert frame.timer.semantic_color is SemanticColor.BEHIND_LOSING_TIME

    assert frame.previous_segment.text == "Previous Segment"
    assert frame.previous_segment.value == "-2.0"
    assert frame.previous_segment.semantic_color is SemanticColor.BEST_SEGMENT
    assert frame.sum_of_best.value == "42.00"
    assert frame.possible_time_save.value == "1.00"


def test_active_split_hides_delta_while_ahead(pb_timer, clock):
    pb_timer.start_or_split()
    clock.advance(5)
    row = frame_of(pb_timer).splits.rows[0]
    assert row.delta == ""
    assert row.time == "10.00"


def test_timer_colors(pb_timer, clock):
    pb_timer.start_or_split()
    pb_timer.toggle_pause_or_resume()
    assert TimerComponent.color(pb_timer.snapshot()) is SemanticColor.PAUSED
    pb_timer.toggle_pause_or_resume()
    for _ in range(3):
        clock.advance(10)
        pb_timer.start_or_split()
    assert TimerComponent.color(pb_timer.snapshot()) is SemanticColor.PERSONAL_BEST


def test_states_are_frozen(timer):
    frame = frame_of(timer)
    with pytest.raises(dataclasses.FrozenInstanceError):
        frame.timer.time = "1"


def test_row_count_follows_segment_count(pb_timer):
    assert len(frame_of(pb_timer).splits.rows) == 3
