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

from . import base
from .base import Error
from .execerror import (
    PygmentizeError,
    LaunchError,
    ProcessFailed,
    ProcessTimedOut,
    ProcessSignaled,
)
from .execute import ExecuteResult, Outcome
from .highlighter import AsyncHighlighter, Highlighter
from .listing import parse_list

__all__ = [
    "base",
    "Error",
    "PygmentizeError",
    "LaunchError",
    "ProcessFailed",
    "ProcessTimedOut",
    "ProcessSignaled",
    "ExecuteResult",
    "Outcome",
    "AsyncHighlighter",
    "Highlighter",
    "parse_list",
]
