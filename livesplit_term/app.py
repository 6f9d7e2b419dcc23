import enum
import logging
import queue
import sys
import threading
import time
from operator import methodcaller
from typing import Callable, Iterator, List, Optional

import readchar
from blessed import Terminal

from .colors import VisualizationSettings, to_rgb
from .components import Components, FrameState, InfoState, SplitsState, TimerState, TitleState
from .errors import TerminalError
from .layout import compute_layout
from .overlay import WIDTH, format_info_text, format_title_line2
from .region import Region
from .screen import ScreenBuffer
from .timer import SharedTimer

logger = logging.getLogger(__name__)

FRAME_INTERVAL = 0.033  # seconds

QUIT_KEY = 'q'

KEYMAP = {
    '1': methodcaller('start_or_split'),
    '2': methodcaller('skip_split'),
    '3': methodcaller('reset', True),
    '4': methodcaller('switch_to_previous_comparison'),
    '5': methodcaller('toggle_pause_or_resume'),
    '6': methodcaller('switch_to_next_comparison'),
    '8': methodcaller('undo_split'),
}

NAME_W, DELTA_W, TIME_W = 15, 9, 9
TIMER_W = 32
NEUTRAL = 'white'


#====================================
# drawing
#====================================


def split_line(name: str, delta: str, split_time: str) -> str:
    return f"{name[:NAME_W]:<{NAME_W}} {delta:>{DELTA_W}} {split_time:>{TIME_W}}"


def draw_title(buf: ScreenBuffer, r: Region, state: TitleState):
    lines = [f"{state.line1:^{WIDTH}}"]
    if state.attempts is not None:
        lines.append(format_title_line2(state.line2, state.attempts))
    buf.text_in(r, lines, txt_color=NEUTRAL)


def draw_splits(buf: ScreenBuffer, r: Region, state: SplitsState, settings: VisualizationSettings):
    x, y, w, h = r
    if not h:
        return
    header = split_line("Split", "Delta", "Time")
    buf.puts(x, y, header[:w], txt_color=NEUTRAL)
    if h > 1:
        buf.hline(Region(x, y + 1, min(w, len(header)), 1), txt_color='bright_black')
    for i, row in enumerate(state.rows):
        row_y = y + 2 + i
        if row_y >= y + h - 1:
            break
        line = split_line(row.name, row.delta, row.time)
        buf.puts(x, row_y, line[:w], txt_color=to_rgb(row.semantic_color, settings))


def draw_timer(buf: ScreenBuffer, r: Region, state: TimerState, settings: VisualizationSettings):
    buf.text_in(r, [f"{state.time:>{TIMER_W}}{state.fraction}"],
                style='bold', txt_color=to_rgb(state.semantic_color, settings))


def draw_info(buf: ScreenBuffer, r: Region, state: InfoState, txt_color):
    buf.text_in(r, [format_info_text(state.text, state.value)], txt_color=txt_color)


def draw_frame(buf: ScreenBuffer, frame: FrameState, regions: List[Region], settings: VisualizationSettings):
    title_r, splits_r, timer_r, prev_r, sob_r, pts_r = regions
    draw_title(buf, title_r, frame.title)
    draw_splits(buf, splits_r, frame.splits, settings)
    draw_timer(buf, timer_r, frame.timer, settings)
    draw_info(buf, prev_r, frame.previous_segment, to_rgb(frame.previous_segment.semantic_color, settings))
    draw_info(buf, sob_r, frame.sum_of_best, NEUTRAL)
    draw_info(buf, pts_r, frame.possible_time_save, NEUTRAL)


#====================================
# render loop (main thread)
#====================================


class RenderState(enum.Enum):
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


def open_terminal() -> Terminal:
    term = Terminal()
    if not term.is_a_tty:
        raise TerminalError("livesplit-term must be run in an interactive terminal")
    if not term.width or not term.height:
        raise TerminalError("Unable to query terminal size")
    return term


class RenderLoop:
    def __init__(self, term, timer: SharedTimer, quit_queue: queue.Queue,
                 components: Optional[Components] = None,
                 settings: Optional[VisualizationSettings] = None,
                 frame_interval: float = FRAME_INTERVAL):
        self.term = term
        self.timer = timer
        self.quit_queue = quit_queue
        self.components = components or Components()
        self.settings = settings or VisualizationSettings()
        self.frame_interval = frame_interval
        self.state = RenderState.STOPPED

    def frame(self) -> FrameState:
        # lock held only while the snapshot is turned into widget states
        with self.timer.read() as snap:
            return self.components.states(snap, self.settings)

    def render(self, buf: ScreenBuffer) -> ScreenBuffer:
        frame = self.frame()
        buf.clear()
        regions = compute_layout(Region(0, 0, buf.w, buf.h), len(frame.splits.rows))
        draw_frame(buf, frame, regions, self.settings)
        return buf

    def quit_requested(self) -> bool:
        try:
            self.quit_queue.get_nowait()
        except queue.Empty:
            return False
        return True

    def run(self):
        term = self.term
        buf = ScreenBuffer(term.width, term.height)
        with term.cbreak(), term.hidden_cursor():
            print(term.clear, end='', flush=True)
            self.state = RenderState.RUNNING
            logger.info("Render loop running")
            try:
                while self.state is RenderState.RUNNING:
                    if self.quit_requested():
                        self.state = RenderState.STOPPING
                        break
                    if buf.w != term.width or buf.h != term.height:
                        buf = ScreenBuffer(term.width, term.height)
                    self.render(buf).flush(term)
                    time.sleep(self.frame_interval)
            finally:
                print(term.clear + term.normal, end='', flush=True)
        self.state = RenderState.STOPPED
        logger.info("Render loop stopped")


#====================================
# input listener (daemon thread)
#====================================


def read_key_from_stdin() -> str:
    '''
    One key from stdin. readchar needs a tty; a pipe or file is read a
    character at a time and yields '' at end of input.
    '''
    if not sys.stdin.isatty():
        return sys.stdin.read(1)
    return readchar.readkey()


class ListenerState(enum.Enum):
    AWAITING_KEY = "awaiting_key"
    DISPATCHING = "dispatching"
    EXHAUSTED = "exhausted"


class InputListener:
    '''
    Blocks on key reads and applies commands under the timer's write lock.
    Never joined: at quit the thread is left blocked and dies with the process.
    '''
    def __init__(self, timer: SharedTimer, quit_queue: queue.Queue,
                 read_key: Optional[Callable[[], str]] = None):
        self.timer = timer
        self.quit_queue = quit_queue
        self.read_key = read_key or read_key_from_stdin
        self.state = ListenerState.AWAITING_KEY

    def keys(self) -> Iterator[str]:
        while True:
            self.state = ListenerState.AWAITING_KEY
            try:
                key = self.read_key()
            except KeyboardInterrupt:  # readchar raises this on ctrl-c
                return
            except (OSError, ValueError, EOFError):  # stdin closed or unreadable
                logger.info("Input stream unreadable, treating as end of input")
                return
            if not key:  # end of input
                return
            yield key

    def dispatch(self, key: str) -> bool:
        command = KEYMAP.get(key)
        if command is None:
            return False
        self.state = ListenerState.DISPATCHING
        with self.timer.write() as timer:
            command(timer)
        logger.debug("key %r -> %r", key, command)
        return True

    def run_once(self):
        for key in self.keys():
            if key == QUIT_KEY:
                break
            self.dispatch(key)
        self.state = ListenerState.EXHAUSTED
        self.quit_queue.put(None)
        logger.info("Quit requested")

    def run(self):
        while True:
            self.run_once()

    def start(self) -> threading.Thread:
        t = threading.Thread(target=self.run, name="input", daemon=True)
        t.start()
        return t
