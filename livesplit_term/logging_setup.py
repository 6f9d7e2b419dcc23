import logging
import os

LOG_ENV = "LIVESPLIT_TERM_LOG"
LOG_LEVEL_ENV = "LIVESPLIT_TERM_LOG_LEVEL"

FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


def configure_logging() -> logging.Logger:
    '''
    The dashboard owns the terminal, so logs only go to a file,
    and only when LIVESPLIT_TERM_LOG names one.
    '''
    root = logging.getLogger("livesplit_term")
    path = os.environ.get(LOG_ENV)
    if not path:
        root.addHandler(logging.NullHandler())
        return root
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FORMAT))
    root.addHandler(handler)
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    root.setLevel(getattr(logging, level, logging.INFO))
    return root
