# -*- mode: python; encoding: utf-8 -*-
#
# Copyright 2021 the Pygmentizer contributors
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License.  You may obtain a copy of
# the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.  See the
# License for the specific language governing permissions and limitations under
# the License.

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

from pygmentizer import base
from pygmentizer.highlighter import Highlighter


class LevelFilter(logging.Filter):
    def __init__(self, predicate):
        super().__init__()
        self.predicate = predicate

    def filter(self, record):
        return self.predicate(record.levelno)


def setup_logging(arguments: argparse.Namespace) -> List[logging.Handler]:
    from pygmentizer.base import coloredlog

    root_logger = logging.getLogger()
    root_logger.setLevel(arguments.loglevel)

    log_format = "%(levelname)7s  %(message)s"
    formatter: Optional[logging.Formatter] = None

    if arguments.color is not False:
        colored_formatter = coloredlog.Formatter(log_format)
        if arguments.color is True or colored_formatter.is_supported():
            formatter = colored_formatter

    if formatter is None:
        formatter = logging.Formatter(log_format)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(LevelFilter(lambda level: level <= logging.INFO))
    stdout_handler.setFormatter(formatter)
    root_logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.addFilter(LevelFilter(lambda level: level > logging.INFO))
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    return [stdout_handler, stderr_handler]


def create_parser() -> argparse.ArgumentParser:
    class CustomFormatter(argparse.ArgumentDefaultsHelpFormatter):
        def add_text(self, text: Optional[str]) -> None:
            if text is not None:
                for paragraph in text.split("\n\n"):
                    super().add_text(paragraph)

    title = "Pygments command-line interface"

    parser = argparse.ArgumentParser(
        prog="pygmentizectl", description=title, formatter_class=CustomFormatter
    )

    output = parser.add_argument_group("Output options")
    output.add_argument(
        "--verbose",
        action="store_const",
        dest="loglevel",
        const=logging.DEBUG,
        help="Enable debug output.",
    )
    output.add_argument(
        "--quiet",
        action="store_const",
        dest="loglevel",
        const=logging.WARNING,
        help="Disable purely informative output.",
    )
    output.add_argument("--color", action="store_const", const=True, dest="color")
    output.add_argument("--no-color", action="store_const", const=False, dest="color")

    execution = parser.add_argument_group("Execution options")
    execution.add_argument(
        "--executable",
        metavar="PATH",
        help=(
            "The pygmentize executable to run. Defaults to the configured "
            f"executable, or {base.DEFAULT_EXECUTABLE!r}."
        ),
    )
    execution.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=float,
        help=(
            "Seconds to wait for pygmentize to finish. Zero means no timeout. "
            f"Defaults to the configured timeout, or {base.DEFAULT_TIMEOUT:g}."
        ),
    )

    parser.set_defaults(loglevel=logging.INFO, color=None)

    subparsers = parser.add_subparsers(metavar="COMMAND", help="Command to perform.")

    from . import commands

    for module in commands.modules:
        name = getattr(module, "name")
        title = getattr(module, "title")
        setup = getattr(module, "setup")
        main = getattr(module, "main")

        long_description = f"Pygments command-line interface: {title}"

        if hasattr(module, "long_description"):
            long_description += "\n\n" + getattr(module, "long_description").strip()

        subparser = subparsers.add_parser(
            name,
            description=long_description,
            help=title,
            formatter_class=CustomFormatter,
        )
        subparser.set_defaults(command_main=main)
        setup(subparser)

    return parser


def create_highlighter(arguments: argparse.Namespace) -> Highlighter:
    overrides: Dict[str, Any] = {}
    if arguments.executable is not None:
        overrides["pygmentize"] = arguments.executable
    if arguments.timeout is not None:
        overrides["timeout"] = arguments.timeout or None
    return Highlighter.from_configuration(**overrides)


def run(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    arguments = parser.parse_args(argv)

    handlers = setup_logging(arguments)

    try:
        if not hasattr(arguments, "command_main"):
            parser.print_help()
            return 0

        try:
            highlighter = create_highlighter(arguments)
        except base.InvalidConfiguration as error:
            logger.error("Invalid configuration file: %s", error)
            return 1

        logger.debug("using %r", highlighter)

        try:
            returncode = arguments.command_main(highlighter, arguments)
        except base.Error as error:
            logger.error("%s", error)
            stderr = getattr(error, "stderr", None)
            if stderr:
                for line in stderr.splitlines():
                    logger.debug("pygmentize: %s", line)
            return 1

        if returncode is None:
            returncode = 0

        return returncode
    finally:
        root_logger = logging.getLogger()
        for handler in handlers:
            root_logger.removeHandler(handler)


def main() -> None:
    sys.exit(run())
