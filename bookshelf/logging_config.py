# bookshelf/logging_config.py
import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Send bookshelf log records to stderr, and to ``logfile`` if given.

    ``level`` is a level name such as ``"debug"`` or ``"INFO"``; an
    unrecognised name means INFO.  Returns ``False`` without touching
    anything when the root logger already has handlers, which is the
    case under uvicorn's own logging setup and under pytest.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    level_no = logging.getLevelName(level.upper())
    root.setLevel(level_no if isinstance(level_no, int) else logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
