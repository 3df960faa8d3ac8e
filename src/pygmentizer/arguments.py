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

"""Command lines understood by `pygmentize`

Each function here returns a fresh tuple of arguments for one operation. The
executable itself is not included; Invocation prepends it."""

from __future__ import annotations

import dataclasses
from typing import Literal, Mapping, Optional, Tuple

Arguments = Tuple[str, ...]
OptionValue = object
ListKind = Literal["lexer", "formatter", "style"]

LIST_KINDS: Tuple[ListKind, ...] = ("lexer", "formatter", "style")


@dataclasses.dataclass(frozen=True)
class Invocation:
    executable: str
    arguments: Arguments
    stdin: Optional[str] = None

    @property
    def argv(self) -> Arguments:
        return (self.executable, *self.arguments)


def format_option(key: str, value: OptionValue) -> str:
    return f"{key}={value}"


def highlight(
    lexer: Optional[str] = None,
    formatter: Optional[str] = None,
    options: Optional[Mapping[str, OptionValue]] = None,
) -> Arguments:
    arguments = ["-l", lexer] if lexer else ["-g"]
    if formatter:
        arguments.extend(["-f", formatter])
    if options:
        for key, value in options.items():
            arguments.extend(["-P", format_option(key, value)])
    return tuple(arguments)


def css(style: str = "default", prepended_selector: Optional[str] = None) -> Arguments:
    arguments = ["-f", "html", "-S", style]
    if prepended_selector:
        arguments.extend(["-a", prepended_selector])
    return tuple(arguments)


def guess_lexer(filename: str) -> Arguments:
    return ("-N", filename)


def list_(kind: ListKind) -> Arguments:
    if kind not in LIST_KINDS:
        raise ValueError(f"invalid list kind: {kind!r}")
    return ("-L", kind)


def version() -> Arguments:
    return ("-V",)


__all__ = [
    "Arguments",
    "Invocation",
    "ListKind",
    "LIST_KINDS",
    "css",
    "guess_lexer",
    "highlight",
    "list_",
    "version",
]
