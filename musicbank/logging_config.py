"""
MusicBank - Logging Setup

Two log files live under ``~/.musicbank/logs/``:

``musicbank.log``
    Everything under the ``musicbank`` logger namespace.  Lyrics are
    generated on a ``GenerateWorker`` thread, so each line records the
    thread that wrote it.

``requests.log``
    One line per Gemini round trip from ``musicbank.api``: the model and
    topic size going out, then the HTTP status and response size (or the
    failure type) coming back.  API keys and lyrics text are never logged.

Call ``setup_logging()`` from main.py before the window is built.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_DIR = os.path.expanduser("~/.musicbank/logs/")
APP_LOG = "musicbank.log"
REQUEST_LOG = "requests.log"
REQUEST_LOGGER = "musicbank.api"

_MAX_BYTES = 2 * 1024 * 1024


def _rotating(path: str, level: int, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path, maxBytes=_MAX_BYTES, backupCount=3, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(log_dir: str = LOG_DIR, console_level: int = logging.WARNING) -> None:
    """Attach the app log, the request log and a console handler.

    Safe to call more than once; later calls are no-ops.
    """
    root = logging.getLogger("musicbank")
    if root.handlers:
        return

    os.makedirs(log_dir, exist_ok=True)
    root.setLevel(logging.DEBUG)

    root.addHandler(_rotating(
        os.path.join(log_dir, APP_LOG),
        logging.DEBUG,
        "%(asctime)s %(levelname)-7s %(name)s [%(threadName)s] %(message)s",
    ))

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("musicbank: %(levelname)s: %(message)s"))
    root.addHandler(console)

    # Request lifecycle only; the app log above still receives these lines
    logging.getLogger(REQUEST_LOGGER).addHandler(_rotating(
        os.path.join(log_dir, REQUEST_LOG),
        logging.INFO,
        "%(asctime)s %(levelname)s %(message)s",
    ))
