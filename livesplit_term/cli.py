import argparse
import logging
import queue
from typing import List, Optional

from .app import InputListener, RenderLoop, open_terminal
from .errors import LivesplitTermError, RunParseError
from .logging_setup import configure_logging
from .run import default_run, load_run
from .timer import SharedTimer, Timer

logger = logging.getLogger(__name__)

KEYS_HELP = """keys:
  1  start / split        5  pause / resume
  2  skip split           6  next comparison
  3  reset                8  undo split
  4  previous comparison  q  quit"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="livesplit-term",
        description="Terminal speedrun timer.",
        epilog=KEYS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", metavar="FILE", help="LiveSplit splits file (.lss) to load")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        run = load_run(args.file) if args.file else default_run()
        term = open_terminal()
    except LivesplitTermError as e:
        if isinstance(e, RunParseError):
            logger.error("%s: %s", e, e.reason)
        print(e)
        return 1

    timer = SharedTimer(Timer(run))
    quit_queue = queue.Queue()

    InputListener(timer, quit_queue).start()
    RenderLoop(term, timer, quit_queue).run()
    return 0
