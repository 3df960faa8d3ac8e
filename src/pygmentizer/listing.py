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

import logging
import re
from typing import Dict, Iterator, Sequence, Tuple

logger = logging.getLogger(__name__)

# Matches one entry of `pygmentize -L ...` output:
#
#   * python, py, sage, python3, py3:
#       Python (filenames *.py, *.pyw, ...)
RE_LIST_ENTRY = re.compile(r"^\*\s*([^:]+):\s*\r?\n\s*([^\r\n]+)", re.MULTILINE)


def iter_entries(output: str) -> Iterator[Tuple[Sequence[str], str]]:
    for match in RE_LIST_ENTRY.finditer(output):
        names, description = match.groups()
        yield [name.strip() for name in names.split(",")], description.strip()


def parse_list(output: str) -> Dict[str, str]:
    """Map every name in a bulleted list to its description

       If a name occurs in more than one entry, the last entry wins. Output
       with no entries in it produces an empty dictionary."""

    result: Dict[str, str] = {}
    for names, description in iter_entries(output):
        for name in names:
            if name:
                result[name] = description
    if not result and output.strip():
        logger.debug("no list entries found in %d characters of output", len(output))
    return result


__all__ = ["parse_list", "iter_entries"]
