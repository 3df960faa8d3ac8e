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

from .listing import parse_list

LEXERS_OUTPUT = """\
Pygments version 2.17.2, (c) 2006-2023 by Georg Brandl, Matthäus Chajdas and contributors.

Lexers:
~~~~~~~
* abap:
    ABAP (filenames *.abap, *.ABAP)
* go, golang:
    Go (filenames *.go)
* python, py, sage, python3, py3, bazel, starlark:
    Python (filenames *.py, *.pyw, *.pyi, *.jy, *.sage, *.sc, SConstruct, SConscript, *.bzl, BUCK, BUILD, BUILD.bazel, WORKSPACE, *.tac)
"""

STYLES_OUTPUT = """\
Styles:
~~~~~~~
* default:
    The default style (inspired by Emacs 22).
* monokai:
    This style mimics the Monokai color scheme.
"""


class TestParseList:
    def test_lexers(self) -> None:
        result = parse_list(LEXERS_OUTPUT)
        assert result["abap"] == "ABAP (filenames *.abap, *.ABAP)"
        assert result["go"] == "Go (filenames *.go)"
        assert result["golang"] == "Go (filenames *.go)"
        assert result["python"].startswith("Python (filenames *.py,")
        assert result["py3"] == result["python"]
        assert len(result) == 10

    def test_styles(self) -> None:
        assert parse_list(STYLES_OUTPUT) == {
            "default": "The default style (inspired by Emacs 22).",
            "monokai": "This style mimics the Monokai color scheme.",
        }

    def test_crlf(self) -> None:
        output = STYLES_OUTPUT.replace("\n", "\r\n")
        assert parse_list(output)["monokai"] == (
            "This style mimics the Monokai color scheme."
        )

    def test_last_entry_wins(self) -> None:
        output = "* foo, bar:\n    First\n* bar:\n    Second\n"
        assert parse_list(output) == {"foo": "First", "bar": "Second"}

    def test_empty_names_skipped(self) -> None:
        output = "* foo, :\n    Description\n"
        assert parse_list(output) == {"foo": "Description"}

    def test_no_entries(self) -> None:
        assert parse_list("") == {}
        assert parse_list("Lexers:\n~~~~~~~\nnothing to see here\n") == {}

    def test_entry_without_description(self) -> None:
        assert parse_list("* foo:\n") == {}
