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

import argparse
import logging
import sys
from typing import Tuple

logger = logging.getLogger(__name__)

from pygmentizer.highlighter import Highlighter
from ..utils import fail

name = "highlight"
title = "Highlight source code"
long_description = """
Read source code from FILE, or from standard input if no file is given, and
write it highlighted to standard output.

If no lexer is given, pygmentize guesses one from the code.
"""


def option(value: str) -> Tuple[str, str]:
    key, separator, option_value = value.partition("=")
    if not key or not separator:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, option_value


def setup(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", nargs="?", help="File to highlight.")
    parser.add_argument("--lexer", "-l", help="Lexer name, e.g. 'python'.")
    parser.add_argument("--formatter", "-f", help="Formatter name, e.g. 'html'.")
    parser.add_argument(
        "--option",
        "-P",
        metavar="KEY=VALUE",
        action="append",
        type=option,
        default=[],
        dest="options",
        help="Lexer or formatter option. Can be used multiple times.",
    )
    parser.add_argument("--output", "-o", help="File to write the result to.")


def main(highlighter: Highlighter, arguments: argparse.Namespace) -> int:
    if arguments.file:
        try:
            with open(arguments.file, encoding=highlighter.encoding) as file:
                code = file.read()
        except OSError as error:
            fail(f"{arguments.file}: failed to read file: {error.strerror}")
        except UnicodeDecodeError as error:
            fail(
                f"{arguments.file}: not valid {highlighter.encoding}: {error.reason}",
                "Use a configuration file to set pygmentize.encoding to the "
                "encoding of the input.",
            )
    else:
        try:
            code = sys.stdin.read()
        except UnicodeDecodeError as error:
            fail(f"standard input: not valid {error.encoding}: {error.reason}")

    result = highlighter.highlight(
        code, arguments.lexer, arguments.formatter, dict(arguments.options)
    )

    if arguments.output:
        try:
            with open(arguments.output, "w", encoding=highlighter.encoding) as file:
                file.write(result)
        except OSError as error:
            fail(f"{arguments.output}: failed to write file: {error.strerror}")
        logger.info("Wrote %s", arguments.output)
    else:
        sys.stdout.write(result)

    return 0
