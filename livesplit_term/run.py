import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import RunOpenError, RunParseError
from .timing import parse_time

logger = logging.getLogger(__name__)

PERSONAL_BEST = "Personal Best"


@dataclass
class Segment:
    name: str
    pb_split_time: Optional[float] = None  # seconds since start
    best_segment_time: Optional[float] = None  # seconds for this segment alone


@dataclass
class Run:
    game_name: str = ""
    category_name: str = ""
    attempt_count: int = 0
    segments: List[Segment] = field(default_factory=list)

    def push_segment(self, segment: Segment):
        self.segments.append(segment)


def default_run() -> Run:
    run = Run("Livesplit Terminal", "Any%")
    for name in ("Split 1", "Split 2", "Split 3", "Split 4", "Complete!"):
        run.push_segment(Segment(name))
    return run


def _text(el: Optional[ET.Element]) -> str:
    return (el.text or "").strip() if el is not None else ""


def _real_time(el: Optional[ET.Element]) -> Optional[float]:
    txt = _text(el.find("RealTime")) if el is not None else ""
    return parse_time(txt) if txt else None


def parse_run(source, path="<string>") -> Run:
    '''
    Parse LiveSplit .lss XML (real-time only).
    `source` is a file object or XML text.
    '''
    try:
        root = ET.fromstring(source) if isinstance(source, str) else ET.parse(source).getroot()
    except ET.ParseError as e:
        raise RunParseError(path, str(e)) from e
    if root.tag != "Run":
        raise RunParseError(path, f"root element is <{root.tag}>, expected <Run>")

    try:
        attempts = int(_text(root.find("AttemptCount")) or 0)
        run = Run(_text(root.find("GameName")), _text(root.find("CategoryName")), attempts)
        for seg in root.iterfind("Segments/Segment"):
            pb = None
            for st in seg.iterfind("SplitTimes/SplitTime"):
                if st.get("name") == PERSONAL_BEST:
                    pb = _real_time(st)
            run.push_segment(Segment(_text(seg.find("Name")), pb, _real_time(seg.find("BestSegmentTime"))))
    except ValueError as e:
        raise RunParseError(path, str(e)) from e

    if not run.segments:
        raise RunParseError(path, "run has no segments")
    return run


def load_run(path) -> Run:
    try:
        f = open(path, "rb")
    except OSError as e:
        raise RunOpenError(path) from e
    with f:
        run = parse_run(f, path)
    logger.info("Loaded run %r / %r (%d segments) from %s",
                run.game_name, run.category_name, len(run.segments), path)
    return run
