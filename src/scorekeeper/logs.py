# logs.py - one log file per launch, plus stdout
import logging
import os
import sys
from datetime import datetime
from typing import Optional

# Log files are named by launch time, like default player names: 20240501-201503UTC.log
LOG_FILE_NAME_FORMAT = "%Y%m%d-%H%M%S%Z"
LOG_TIME_FORMAT = "%Y/%m/%d %H:%M:%S %z"
LOG_FORMAT = "%(asctime)s %(levelname)-5s <%(module)s:%(lineno)d> %(message)s"


def log_file_name(now: Optional[datetime] = None) -> str:
    launched = now if now is not None else datetime.now().astimezone()
    return launched.strftime(LOG_FILE_NAME_FORMAT) + ".log"


def _drop_handlers(root: logging.Logger):
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()


def setup_logging(log_dir: Optional[str] = None, level="INFO", now: Optional[datetime] = None) -> Optional[str]:
    """Route the scorekeeper's loggers to stdout and, given a directory, to a launch log.

    Calling it again replaces the handlers of the previous call.
    Returns the log file path, or None when only stdout is used.
    """
    root = logging.getLogger()
    root.setLevel(level)
    _drop_handlers(root)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_TIME_FORMAT)
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir is None:
        return None
    os.makedirs(log_dir, exist_ok=True)
    path = os.path.join(log_dir, log_file_name(now))
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    return path
