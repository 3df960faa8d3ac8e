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
import json
import logging
import sys
from typing import Dict

logger = logging.getLogger(__name__)

from pygmentizer.highlighter import Highlighter

name = "list"
title = "List lexers, formatters or styles"

KINDS = {
    "lexers": "lexer",
    "formatters": "formatter",
    "styles": "style",
}

FORMATS = ("table", "json")


def setup(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("kind", choices=sorted(KINDS), help="What to list.")
    parser.add_argument(
        "--format", choices=FORMATS, default="table", help="Output format."
    )


def main(highlighter: Highlighter, arguments: argparse.Namespace) -> int:
    items: Dict[str, str] = highlighter.get_list(KINDS[arguments.kind])

    if arguments.format == "json":
        json.dump(items, sys.stdout, indent=2, sort_keys=True)
        print()
        return 0

    if not items:
        logger.warning("No %s found.", arguments.kind)
        return 0

    width = max(len(item_name) for item_name in items)
    for item_name in sorted(items):
        print(f"{item_name:<{width}}  {items[item_name]}")

    return 0
