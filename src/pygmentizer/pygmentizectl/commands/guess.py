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

logger = logging.getLogger(__name__)

from pygmentizer.highlighter import Highlighter

name = "guess"
title = "Guess a lexer from a filename"
long_description = """
The file does not need to exist; only its name is used.
"""


def setup(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("filename", help="File name to guess a lexer for.")


def main(highlighter: Highlighter, arguments: argparse.Namespace) -> int:
    print(highlighter.guess_lexer(arguments.filename))
    return 0
