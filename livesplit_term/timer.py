import enum
import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from .run import Run

logger = logging.getLogger(__name__)

COMPARISONS = ("Personal Best", "Best Segments")


class TimerPhase(enum.Enum):
    NOT_RUNNING = "not_running"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


@dataclass(frozen=True)
class SegmentSnapshot:
    name: str
    split_time: Optional[float]
    comparison_time: Optional[float]
    best_segment_time: Optional[float]


@dataclass(frozen=True)
class TimerSnapshot:
    '''Timer state at one instant. Built under the read lock, then independent of the timer.'''
    game_name: str
    category_name: str
    attempt_count: int
    phase: TimerPhase
    current_split_index: Optional[int]
    current_time: float
    comparison: str
    segments: Tuple[SegmentSnapshot, ...]

    def segment_time(self, i: int) -> Optional[float]:
        """Time spent in segment i alone, if it and the split before it were recorded."""
        prev = 0.0 if i == 0 else self.segments[i - 1].split_time
        split = self.segments[i].split_time
        if prev is None or split is None:
            return None
        return split - prev

    def comparison_segment_time(self, i: int) -> Optional[float]:
        prev = 0.0 if i == 0 else self.segments[i - 1].comparison_time
        comp = self.segments[i].comparison_time
        if prev is None or comp is None:
            return None
        return comp - prev

    def delta(self, i: int) -> Optional[float]:
        seg = self.segments[i]
        if seg.split_time is None or seg.comparison_time is None:
            return None
        return seg.split_time - seg.comparison_time

    def last_delta(self, before: int) -> Optional[float]:
        """Most recent recorded delta among segments [0, before)."""
        for i in range(min(before, len(self.segments)) - 1, -1, -1):
            d = self.delta(i)
            if d is not None:
                return d
        return None


class RWLock:
    '''
    Many readers or one writer. Waiting writers block new readers,
    so a steady stream of frames can't starve a key press.
    '''
    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read_locked(self):
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self):
        with self._cond:
            self._waiting_writers += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class Timer:
    def __init__(self, run: Run, clock: Callable[[], float] = time.monotonic):
        if not run.segments:
            raise ValueError("a run needs at least one segment")
        self.run = run
        self.clock = clock
        self.phase = TimerPhase.NOT_RUNNING
        self.current_split_index: Optional[int] = None
        self.split_times: List[Optional[float]] = [None] * len(run.segments)
        self.comparison_index = 0
        self._start_time = 0.0  # shifted forward by time spent paused
        self._pause_time = 0.0

    @property
    def comparison(self) -> str:
        return COMPARISONS[self.comparison_index]

    def current_time(self) -> float:
        if self.phase is TimerPhase.NOT_RUNNING:
            return 0.0
        if self.phase is TimerPhase.PAUSED:
            return self._pause_time - self._start_time
        if self.phase is TimerPhase.ENDED:
            return self.split_times[-1] or 0.0
        return self.clock() - self._start_time

    def comparison_times(self) -> List[Optional[float]]:
        if self.comparison == "Best Segments":
            times, total = [], 0.0
            for seg in self.run.segments:
                if total is not None and seg.best_segment_time is not None:
                    total += seg.best_segment_time
                else:
                    total = None
                times.append(total)
            return times
        return [seg.pb_split_time for seg in self.run.segments]

    def snapshot(self) -> TimerSnapshot:
        comps = self.comparison_times()
        return TimerSnapshot(
            game_name=self.run.game_name,
            category_name=self.run.category_name,
            attempt_count=self.run.attempt_count,
            phase=self.phase,
            current_split_index=self.current_split_index,
            current_time=self.current_time(),
            comparison=self.comparison,
            segments=tuple(
                SegmentSnapshot(seg.name, split, comp, seg.best_segment_time)
                for seg, split, comp in zip(self.run.segments, self.split_times, comps)
            ),
        )

    # --- commands ---

    def _start(self):
        self.phase = TimerPhase.RUNNING
        self.current_split_index = 0
        self.split_times = [None] * len(self.run.segments)
        self._start_time = self.clock()
        logger.info("Timer started")

    def start_or_split(self):
        if self.phase is TimerPhase.NOT_RUNNING:
            self._start()
        elif self.phase is TimerPhase.RUNNING:
            i = self.current_split_index
            self.split_times[i] = self.current_time()
            self.current_split_index = i + 1
            logger.info("Split %d (%s) at %.3f", i, self.run.segments[i].name, self.split_times[i])
            if self.current_split_index == len(self.run.segments):
                self.phase = TimerPhase.ENDED
                logger.info("Run ended")
        else:
            logger.debug("split ignored while %s", self.phase.value)

    def skip_split(self):
        i = self.current_split_index
        if self.phase in (TimerPhase.RUNNING, TimerPhase.PAUSED) and i < len(self.run.segments) - 1:
            self.split_times[i] = None
            self.current_split_index = i + 1
            logger.info("Skipped split %d", i)
        else:
            logger.debug("skip ignored while %s", self.phase.value)

    def undo_split(self):
        if self.phase is not TimerPhase.NOT_RUNNING and self.current_split_index > 0:
            if self.phase is TimerPhase.ENDED:
                self.phase = TimerPhase.RUNNING
            self.current_split_index -= 1
            self.split_times[self.current_split_index] = None
            logger.info("Undid split %d", self.current_split_index)
        else:
            logger.debug("undo ignored while %s", self.phase.value)

    def toggle_pause_or_resume(self):
        if self.phase is TimerPhase.NOT_RUNNING:
            self._start()
        elif self.phase is TimerPhase.RUNNING:
            self._pause_time = self.clock()
            self.phase = TimerPhase.PAUSED
            logger.info("Paused at %.3f", self.current_time())
        elif self.phase is TimerPhase.PAUSED:
            self._start_time += self.clock() - self._pause_time
            self.phase = TimerPhase.RUNNING
            logger.info("Resumed")

    def reset(self, update_history: bool):
        if self.phase is TimerPhase.NOT_RUNNING:
            return
        if update_history:
            self._update_history()
        self.phase = TimerPhase.NOT_RUNNING
        self.current_split_index = None
        self.split_times = [None] * len(self.run.segments)
        logger.info("Reset (update_history=%s)", update_history)

    def _update_history(self):
        run = self.run
        run.attempt_count += 1
        for i, seg in enumerate(run.segments):
            prev = 0.0 if i == 0 else self.split_times[i - 1]
            split = self.split_times[i]
            if prev is None or split is None:
                continue
            if seg.best_segment_time is None or split - prev < seg.best_segment_time:
                seg.best_segment_time = split - prev
        final, pb_final = self.split_times[-1], run.segments[-1].pb_split_time
        if self.phase is TimerPhase.ENDED and final is not None and (pb_final is None or final < pb_final):
            for seg, split in zip(run.segments, self.split_times):
                seg.pb_split_time = split
            logger.info("New personal best: %.3f", final)

    def switch_to_next_comparison(self):
        self.comparison_index = (self.comparison_index + 1) % len(COMPARISONS)
        logger.info("Comparison: %s", self.comparison)

    def switch_to_previous_comparison(self):
        self.comparison_index = (self.comparison_index - 1) % len(COMPARISONS)
        logger.info("Comparison: %s", self.comparison)


class SharedTimer:
    '''
    The one handle both threads hold. `read()` for frames, `write()` for commands.
    '''
    def __init__(self, timer: Timer):
        self._timer = timer
        self._lock = RWLock()

    @contextmanager
    def read(self) -> Iterator[TimerSnapshot]:
        with self._lock.read_locked():
            yield self._timer.snapshot()

    @contextmanager
    def write(self) -> Iterator[Timer]:
        with self._lock.write_locked():
            yield self._timer
