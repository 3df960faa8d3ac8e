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

import codecs
import logging
import re
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

from pygmentizer import base
from . import arguments
from .arguments import Arguments, Invocation, ListKind, OptionValue
from .execute import execute, execute_async
from .listing import parse_list

RE_VERSION = re.compile(r"^Pygments version ([^\s,]+)")

HighlighterType = TypeVar("HighlighterType", bound="HighlighterBase")


def settings_from_configuration() -> Dict[str, Any]:
    """Return constructor arguments read from the configuration file

       Keys that are not configured are left out, as is everything if there
       is no configuration file at all. A configured timeout of zero means no
       timeout. Values of the wrong type raise InvalidConfiguration."""

    try:
        configuration = base.configuration()
    except base.MissingConfiguration as error:
        logger.debug("no configuration file: %s", error)
        return {}

    def invalid(key: str, expected: str) -> base.InvalidConfiguration:
        return base.InvalidConfiguration(
            f"{base.configuration_path()}: {key}: expected {expected}, "
            f"got {configuration[key]!r}"  # type: ignore
        )

    settings: Dict[str, Any] = {}
    if "pygmentize.executable" in configuration:
        executable = configuration["pygmentize.executable"]
        if not isinstance(executable, str) or not executable:
            raise invalid("pygmentize.executable", "a non-empty string")
        settings["pygmentize"] = executable
    if "pygmentize.timeout" in configuration:
        timeout = configuration["pygmentize.timeout"]
        if timeout is not None:
            if (
                isinstance(timeout, bool)
                or not isinstance(timeout, (int, float))
                or timeout < 0
            ):
                raise invalid("pygmentize.timeout", "a non-negative number or null")
        settings["timeout"] = timeout or None
    if "pygmentize.encoding" in configuration:
        encoding = configuration["pygmentize.encoding"]
        try:
            codecs.lookup(encoding)
        except (LookupError, TypeError):
            raise invalid("pygmentize.encoding", "a known text encoding")
        settings["encoding"] = encoding
    return settings


def parse_version(output: str) -> Optional[str]:
    match = RE_VERSION.match(output.strip())
    if match:
        return match.group(1)
    logger.warning("Unrecognized output from `pygmentize -V`: %r", output)
    return None


class HighlighterBase:
    pygmentize: str
    timeout: Optional[float]
    encoding: str

    def __init__(
        self,
        pygmentize: str = base.DEFAULT_EXECUTABLE,
        *,
        timeout: Optional[float] = base.DEFAULT_TIMEOUT,
        encoding: str = base.DEFAULT_ENCODING,
    ) -> None:
        self.pygmentize = pygmentize
        self.timeout = timeout
        self.encoding = encoding

    @classmethod
    def from_configuration(
        cls: Type[HighlighterType], **overrides: Any
    ) -> HighlighterType:
        settings = settings_from_configuration()
        settings.update(overrides)
        return cls(**settings)

    def invocation(self, args: Arguments, stdin: Optional[str] = None) -> Invocation:
        return Invocation(self.pygmentize, args, stdin)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.pygmentize!r}, timeout={self.timeout!r}, "
            f"encoding={self.encoding!r})"
        )


class Highlighter(HighlighterBase):
    """Runs `pygmentize` to highlight code and to query its registries

       Every call builds its own argument list and spawns one process, which
       has finished by the time the call returns. Errors from the process are
       raised as the exceptions in pygmentizer.execerror."""

    def run(self, args: Arguments, stdin: Optional[str] = None) -> str:
        result = execute(
            self.invocation(args, stdin),
            timeout=self.timeout,
            encoding=self.encoding,
        )
        return result.raise_for_status().stdout

    def highlight(
        self,
        code: str,
        lexer: Optional[str] = None,
        formatter: Optional[str] = None,
        options: Optional[Mapping[str, OptionValue]] = None,
    ) -> str:
        """Highlight |code|

           If |lexer| is not given, pygmentize guesses it from the code. If
           |formatter| is not given, pygmentize's default (terminal output) is
           used. Each item in |options| is passed as a `-P key=value` option."""
        return self.run(arguments.highlight(lexer, formatter, options), stdin=code)

    def get_css(
        self, style: str = "default", prepended_selector: Optional[str] = None
    ) -> str:
        return self.run(arguments.css(style, prepended_selector))

    def guess_lexer(self, filename: str) -> str:
        """Guess a lexer name from |filename| alone

           The file does not need to exist."""
        return self.run(arguments.guess_lexer(filename)).strip()

    def get_list(self, kind: ListKind) -> Dict[str, str]:
        return parse_list(self.run(arguments.list_(kind)))

    def get_lexers(self) -> Dict[str, str]:
        return self.get_list("lexer")

    def get_formatters(self) -> Dict[str, str]:
        return self.get_list("formatter")

    def get_styles(self) -> Dict[str, str]:
        return self.get_list("style")

    def version(self) -> Optional[str]:
        return parse_version(self.run(arguments.version()))


class AsyncHighlighter(HighlighterBase):
    async def run(self, args: Arguments, stdin: Optional[str] = None) -> str:
        result = await execute_async(
            self.invocation(args, stdin),
            timeout=self.timeout,
            encoding=self.encoding,
        )
        return result.raise_for_status().stdout

    async def highlight(
        self,
        code: str,
        lexer: Optional[str] = None,
        formatter: Optional[str] = None,
        options: Optional[Mapping[str, OptionValue]] = None,
    ) -> str:
        return await self.run(
            arguments.highlight(lexer, formatter, options), stdin=code
        )

    async def get_css(
        self, style: str = "default", prepended_selector: Optional[str] = None
    ) -> str:
        return await self.run(arguments.css(style, prepended_selector))

    async def guess_lexer(self, filename: str) -> str:
        return (await self.run(arguments.guess_lexer(filename))).strip()

    async def get_list(self, kind: ListKind) -> Dict[str, str]:
        return parse_list(await self.run(arguments.list_(kind)))

    async def get_lexers(self) -> Dict[str, str]:
        return await self.get_list("lexer")

    async def get_formatters(self) -> Dict[str, str]:
        return await self.get_list("formatter")

    async def get_styles(self) -> Dict[str, str]:
        return await self.get_list("style")

    async def version(self) -> Optional[str]:
        return parse_version(await self.run(arguments.version()))


__all__ = [
    "AsyncHighlighter",
    "Highlighter",
    "HighlighterBase",
    "parse_version",
    "settings_from_configuration",
]
