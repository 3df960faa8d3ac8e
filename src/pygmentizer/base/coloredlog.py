import logging
import os
import sys
from typing import Optional, TextIO

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

# The background is set with 40 plus the number of the color, and the
# foreground with 30.
RESET_SEQ = "\033[0m"
COLOR_SEQ = "\033[1;%dm"

FOREGROUND = {
    "WARNING": BLACK,
    "INFO": WHITE,
    "DEBUG": BLUE,
    "CRITICAL": YELLOW,
    "ERROR": WHITE,
}
BACKGROUND = {
    "ERROR": RED,
    "WARNING": YELLOW,
}


class Formatter(logging.Formatter):
    def __init__(self, msg: str):
        super().__init__(f"%(color)s{msg}%(reset)s")

    def format(self, record: logging.LogRecord) -> str:
        color = ""
        if record.levelname in FOREGROUND:
            color += COLOR_SEQ % (30 + FOREGROUND[record.levelname])
        if record.levelname in BACKGROUND:
            color += COLOR_SEQ % (40 + BACKGROUND[record.levelname])
        record.color = color
        record.reset = RESET_SEQ if color else ""
        return super().format(record)

    @staticmethod
    def is_supported(stream: Optional[TextIO] = None) -> bool:
        if stream is None:
            stream = sys.stderr
        if "NO_COLOR" in os.environ:
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())


__all__ = ["Formatter"]
