"""
Widget components. Each turns a TimerSnapshot into a frozen, display-ready
state; `Components.states` runs all six in their fixed on-screen order.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .colors import SemanticColor, VisualizationSettings
from .timer import TimerPhase, TimerSnapshot
from .timing import format_delta, format_time, split_timer


@dataclass(frozen=True)
class TitleState:
    line1: str
    line2: Optional[str]
    attempts: Optional[int]


@dataclass(frozen=True)
class SplitRow:
    name: str
    delta: str
    time: str
    semantic_color: SemanticColor


@dataclass(frozen=True)
class SplitsState:
    rows: Tuple[SplitRow, ...]


@dataclass(frozen=True)
class TimerState:
    time: str
    fraction: str
    semantic_color: SemanticColor


@dataclass(frozen=True)
class InfoState:
    text: str
    value: str
    semantic_color: SemanticColor


@dataclass(frozen=True)
class FrameState:
    title: TitleState
    splits: SplitsState
    timer: TimerState
    previous_segment: InfoState
    sum_of_best: InfoState
    possible_time_save: InfoState


def delta_color(delta: Optional[float], previous: Optional[float]) -> SemanticColor:
    '''Ahead/behind from the sign of `delta`; gaining/losing from how it moved since `previous`.'''
    if delta is None:
        return SemanticColor.DEFAULT
    gaining = previous is not None and delta < previous
    if delta < 0:
        if previous is None or gaining:
            return SemanticColor.AHEAD_GAINING_TIME
        return SemanticColor.AHEAD_LOSING_TIME
    if gaining:
        return SemanticColor.BEHIND_GAINING_TIME
    return SemanticColor.BEHIND_LOSING_TIME


def split_color(snap: TimerSnapshot, i: int) -> SemanticColor:
    seg_time = snap.segment_time(i)
    best = snap.segments[i].best_segment_time
    if seg_time is not None and (best is None or seg_time < best):
        return SemanticColor.BEST_SEGMENT
    return delta_color(snap.delta(i), snap.last_delta(i))


class TitleComponent:
    def __init__(self, show_attempt_count: bool = True):
        self.show_attempt_count = show_attempt_count

    def state(self, snap: TimerSnapshot, settings: VisualizationSettings) -> TitleState:
        return TitleState(
            line1=snap.game_name,
            line2=snap.category_name or None,
            attempts=snap.attempt_count if self.show_attempt_count else None,
        )


class SplitsComponent:
    def state(self, snap: TimerSnapshot, settings: VisualizationSettings) -> SplitsState:
        current = snap.current_split_index
        rows = []
        for i, seg in enumerate(snap.segments):
            if current is not None and i < current:
                delta = snap.delta(i)
                rows.append(SplitRow(
                    seg.name,
                    format_delta(delta) if delta is not None else "",
                    format_time(seg.split_time),
                    split_color(snap, i),
                ))
            elif i == current and seg.comparison_time is not None \
                    and snap.current_time > seg.comparison_time:
                # live delta, only once we're already behind
                live = snap.current_time - seg.comparison_time
                rows.append(SplitRow(
                    seg.name,
                    format_delta(live),
                    format_time(seg.comparison_time),
                    delta_color(live, snap.last_delta(i)),
                ))
            else:
                rows.append(SplitRow(seg.name, "", format_time(seg.comparison_time), SemanticColor.DEFAULT))
        return SplitsState(tuple(rows))


class TimerComponent:
    def state(self, snap: TimerSnapshot, settings: VisualizationSettings) -> TimerState:
        time, fraction = split_timer(snap.current_time)
        return TimerState(time, fraction, self.color(snap))

    @staticmethod
    def color(snap: TimerSnapshot) -> SemanticColor:
        if snap.phase is TimerPhase.NOT_RUNNING:
            return SemanticColor.NOT_RUNNING
        if snap.phase is TimerPhase.PAUSED:
            return SemanticColor.PAUSED
        last = snap.segments[-1]
        if snap.phase is TimerPhase.ENDED:
            if last.comparison_time is None or snap.current_time < last.comparison_time:
                return SemanticColor.PERSONAL_BEST
            return SemanticColor.BEHIND_LOSING_TIME
        i = snap.current_split_index
        comp = snap.segments[i].comparison_time
        if comp is None:
            return SemanticColor.AHEAD_GAINING_TIME
        return delta_color(snap.current_time - comp, snap.last_delta(i))


class PreviousSegmentComponent:
    TEXT = "Previous Segment"

    def state(self, snap: TimerSnapshot, settings: VisualizationSettings) -> InfoState:
        current = snap.current_split_index
        if not current:
            return InfoState(self.TEXT, "-", SemanticColor.DEFAULT)
        i = current - 1
        seg_time, comp = snap.segment_time(i), snap.comparison_segment_time(i)
        if seg_time is None or comp is None:
            return InfoState(self.TEXT, "-", SemanticColor.DEFAULT)
        diff = seg_time - comp
        best = snap.segments[i].best_segment_time
        if best is None or seg_time < best:
            color = SemanticColor.BEST_SEGMENT
        elif diff < 0:
            color = SemanticColor.AHEAD_GAINING_TIME
        else:
            color = SemanticColor.BEHIND_LOSING_TIME
        return InfoState(self.TEXT, format_delta(diff), color)


class SumOfBestComponent:
    TEXT = "Sum of Best Segments"

    def state(self, snap: TimerSnapshot, settings: VisualizationSettings) -> InfoState:
        bests = [seg.best_segment_time for seg in snap.segments]
        total = None if None in bests else sum(bests)
        return InfoState(self.TEXT, format_time(total), SemanticColor.DEFAULT)


class PossibleTimeSaveComponent:
    TEXT = "Possible Time Save"

    def state(self, snap: TimerSnapshot, settings: VisualizationSettings) -> InfoState:
        i = snap.current_split_index
        if snap.phase is TimerPhase.NOT_RUNNING:
            i = 0
        if i is None or i >= len(snap.segments):
            return InfoState(self.TEXT, "-", SemanticColor.DEFAULT)
        comp, best = snap.comparison_segment_time(i), snap.segments[i].best_segment_time
        if comp is None or best is None:
            return InfoState(self.TEXT, "-", SemanticColor.DEFAULT)
        return InfoState(self.TEXT, format_time(max(0.0, comp - best)), SemanticColor.DEFAULT)


class Components:
    def __init__(self, title: Optional[TitleComponent] = None):
        self.title = title or TitleComponent()
        self.splits = SplitsComponent()
        self.timer = TimerComponent()
        self.previous_segment = PreviousSegmentComponent()
        self.sum_of_best = SumOfBestComponent()
        self.possible_time_save = PossibleTimeSaveComponent()

    ORDER = ("title", "splits", "timer", "previous_segment", "sum_of_best", "possible_time_save")

    def states(self, snap: TimerSnapshot, settings: VisualizationSettings) -> FrameState:
        return FrameState(**{name: getattr(self, name).state(snap, settings) for name in self.ORDER})
