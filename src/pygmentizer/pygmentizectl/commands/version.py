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

name = "version"
title = "Print the Pygments version"


def setup(parser: argparse.ArgumentParser) -> None:
    pass


def main(highlighter: Highlighter, arguments: argparse.Namespace) -> int:
    version = highlighter.version()
    if version is None:
        return 1
    print(version)
    return 0
