import logging
import sys
import textwrap
from typing import Callable, NoReturn

logger = logging.getLogger(__name__)


def fail(message: str, *additional: str) -> NoReturn:
    def for_each_line(fn: Callable[[str], None], string: str) -> None:
        for line in textwrap.fill(string, width=70).splitlines():
            fn(line)

    for_each_line(logger.error, f"{message}")

    if additional:
        for string in additional:
            logger.info("")
            for_each_line(logger.info, string)
        logger.info("")

    sys.exit(1)
